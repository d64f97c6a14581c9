from collections import deque, namedtuple
from enum import Enum
from functools import partial
import operator
import sys

from .bigint import BigInt
from .lexer import Lexer
from .log import LogLevel, emit
from .util import RPNError, ErrorKind, wrap_user_errors


class Kind(Enum):
    '''
    Every sort of command there is. Each is run by its own handler.
    '''
    NUMBER = 'number'
    NULLARY = 'nullary'
    UNARY = 'unary'
    BINARY = 'binary'
    VARIADIC = 'variadic'


# token is None for number literals, which are claimed by lexeme group.
Command = namedtuple('Command', 'kind token operation')

# Exactly one of value and error is None.
Outcome = namedtuple('Outcome', 'value error')


def factorial(n):
    result = BigInt(1)
    i = BigInt(n)
    while i > 1:
        result *= i
        i.decrement()
    return result


def gcf(lhs, rhs):
    '''
    Greatest common factor, by Euclid. gcf(0, 0) is 0.
    '''
    while rhs != 0:
        lhs, rhs = rhs, lhs % rhs
    return BigInt(lhs)


def lcm(lhs, rhs):
    '''
    Least common multiple. Zero if either side is.
    '''
    if lhs == 0 or rhs == 0:
        return BigInt(0)
    return lhs // gcf(lhs, rhs) * rhs


class Machine:
    '''
    Postfix stack machine over BigInts.

    Takes whitespace-delimited lines and evaluates them to a single value.
    Commands are tried in order, and the first to claim a lexeme runs it.
    '''

    UNARY = {
        '!': factorial,
    }

    BINARY = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '*': operator.__mul__,
        '/': operator.__floordiv__,
        '%': operator.__mod__,
        '^': operator.__pow__,
        'min': min,
        'max': max,
        'lcm': lcm,
        'gcf': gcf,
    }

    # Fold the whole stack, top down.
    VARIADIC = {token + '.': f for token, f in BINARY.items()}

    def loadresult(self):
        '''
        Push the result of the last successful evaluation.
        '''
        return self.result.copy()

    NULLARY = {
        'ans': loadresult,
    }

    def __init__(self, sinks=None):
        '''
        Create empty stack machine.

        :param sinks: Callables taking (level, message), for diagnostics.
        '''
        self.stack = deque()
        self.result = BigInt()
        self.sinks = list(sinks or [])
        self.lexer = Lexer()
        cls = type(self)
        self.commands = (
            (Command(Kind.NUMBER, None, BigInt),) +
            tuple(Command(Kind.NULLARY, token, partial(f, self))
                  for token, f in cls.NULLARY.items()) +
            tuple(Command(Kind.BINARY, token, f)
                  for token, f in cls.BINARY.items()) +
            tuple(Command(Kind.UNARY, token, f)
                  for token, f in cls.UNARY.items()) +
            tuple(Command(Kind.VARIADIC, token, f)
                  for token, f in cls.VARIADIC.items())
        )

    def log(self, level, message):
        emit(self.sinks, level, message)

    def evaluate(self, line):
        '''
        Evaluate a line as a postfix expression, and return its value.

        :raises RPNError: on any failure; its kind says which. Arithmetic
            failures are chained as the cause. The message ends with a dump
            of the stack as it was.
        '''
        self.log(LogLevel.INFO, "Evaluating '{}'".format(line.strip()))
        self.stack.clear()
        try:
            for match in self.lexer.lex(line):
                if self.lexer.isfeedable(match):
                    self.feed(self.lexer.matchedgroups(match))
            if not self.stack:
                raise RPNError('No operands remaining on stack after '
                               'evaluation, expected one',
                               kind=ErrorKind.IMBALANCED_STACK)
            if len(self.stack) > 1:
                raise RPNError('More than one operand remaining on stack, '
                               'expected one',
                               kind=ErrorKind.IMBALANCED_STACK)
        except RPNError as e:
            e.stack = self.dump()
            e.args = ('{}\nStack dump: {}'.format(e.args[0], e.stack),)
            raise
        self.result = self.stack.pop()
        return self.result

    def attempt(self, line):
        '''
        Evaluate like evaluate(), but return an Outcome instead of raising.
        '''
        try:
            return Outcome(self.evaluate(line), None)
        except RPNError as e:
            return Outcome(None, e)

    def feed(self, groups):
        '''
        Run a lexeme on the machine.

        :param groups: Matched groups of the lexeme.
        '''
        command = self.claimant(groups)
        if command is None:
            raise RPNError("Token '{}' went unhandled"
                           .format(self._token(groups)),
                           kind=ErrorKind.UNHANDLED_TOKEN)
        self.log(LogLevel.DEBUG,
                 "[{}] token:'{}' stack:{}".format(command.kind.value,
                                                   self._token(groups),
                                                   self.dump()))
        type(self)._HANDLERS[command.kind](self, command, self._token(groups))

    def claimant(self, groups):
        '''
        Return the first command that claims the lexeme, or None.
        '''
        for command in self.commands:
            if command.kind is Kind.NUMBER:
                if 'number' in groups:
                    return command
            elif groups.get('word') == command.token:
                return command
        return None

    @staticmethod
    def _token(groups):
        return groups.get('number') or groups.get('word')

    def dump(self):
        '''
        Return the stack as text, top first.
        '''
        return '{ ' + ', '.join(map(str, reversed(self.stack))) + ' }'

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.
        '''
        if len(self.stack) < n:
            raise RPNError('Less than {} element(s) on stack'.format(n),
                           kind=ErrorKind.STACK_UNDERFLOW)
        return [self.stack.pop() for _ in range(n)]

    @wrap_user_errors("Cannot apply '{1.token}'")
    def _apply(self, command, *args):
        result = command.operation(*args)
        self.log(LogLevel.DEBUG, ' -> {}'.format(result))
        return result

    def _run_number(self, command, token):
        self._pshstack(self._apply(command, token))

    def _run_nullary(self, command, token):
        self._pshstack(self._apply(command))

    def _run_operation(self, command, arity, topmost_first=False):
        args = self._popstack(arity)
        # If you don't reverse, you'll do 2 - 9 when you say 9 2 -.
        ordered = args if topmost_first else list(reversed(args))
        try:
            self._pshstack(self._apply(command, *ordered))
        except RPNError:
            self._pshstack(*reversed(args))
            raise

    def _run_unary(self, command, token):
        self._run_operation(command, 1)

    def _run_binary(self, command, token):
        self._run_operation(command, 2)

    def _run_variadic(self, command, token):
        if len(self.stack) < 2:
            raise RPNError('Less than 2 element(s) on stack',
                           kind=ErrorKind.STACK_UNDERFLOW)
        while len(self.stack) > 1:
            # Topmost on the left: 1 2 10 -. is 10 - 2 - 1.
            self._run_operation(command, 2, topmost_first=True)

    _HANDLERS = {
        Kind.NUMBER: _run_number,
        Kind.NULLARY: _run_nullary,
        Kind.UNARY: _run_unary,
        Kind.BINARY: _run_binary,
        Kind.VARIADIC: _run_variadic,
    }

    def printhelp(self):
        '''
        Print all possible commands.
        '''
        print('numbers: decimal digits, of any length', file=sys.stderr)
        print('operators:', *type(self).BINARY, file=sys.stderr)
        print('unary:', *type(self).UNARY, file=sys.stderr)
        print('variadic:', *type(self).VARIADIC, file=sys.stderr)
        print('commands:', *type(self).NULLARY, file=sys.stderr)
