from os import path
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .log import LogLevel, StreamSink
from .machine import Machine
from .util import ErrorKind


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Persistent
                                    history=(FileHistory(self.history_file)
                                             if self.history_file else None),
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the postfix BigInt machine.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.bigrpn_history'

    HELP = '''\
Postfix calculator over arbitrarily large non-negative integers.

Enter an expression with operands before their operator, separated by
whitespace, e.g. "3 2 * 4 ^" for (3 * 2) ^ 4. Each line must leave exactly one
value.

Meta-commands, alone on a line:
  help     Show this message
  quit     Stop
  verbose  Toggle verbose messages (each line evaluated)
  debug    Toggle debug messages (every command run)
'''

    META = {
        'help': 'printhelp',
        'h': 'printhelp',
        '?': 'printhelp',
        'verbose': 'toggleverbose',
        'debug': 'toggledebug',
    }
    QUIT = {'quit', 'exit', 'q'}

    def dumper(self):
        '''
        Dump all lexemes, their group, and the kind of command claiming them.
        '''
        machine = Machine()
        lexer = machine.lexer
        print('<group>\t<repr(lexeme)>\t<kind>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                if not lexer.isfeedable(match):
                    continue
                groups = lexer.matchedgroups(match)
                command = machine.claimant(groups)
                print(*groups.keys(),
                      repr(match.group(0)),
                      command.kind.value if command else None,
                      sep='\t')

    def executor(self):
        '''
        Run machine (postfix calculator).
        '''
        for line in self.args.expressions:
            word = line.strip()
            if not word:
                continue
            if word in self.QUIT:
                return
            if word in self.META:
                getattr(self, self.META[word])()
                continue
            outcome = self.machine.attempt(line)
            if outcome.error is None:
                print(outcome.value)
            else:
                print(outcome.error.args[0], file=sys.stderr)
                if outcome.error.kind is ErrorKind.UNHANDLED_TOKEN:
                    print("Try 'help'", file=sys.stderr)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(self.machine.lexer.LEXEME)

    def printhelp(self):
        print(self.HELP, file=sys.stderr)
        self.machine.printhelp()

    def toggleverbose(self):
        on = self.sink.toggle(LogLevel.INFO)
        print('verbose', 'on' if on else 'off', file=sys.stderr)

    def toggledebug(self):
        on = self.sink.toggle(LogLevel.DEBUG)
        print('debug', 'on' if on else 'off', file=sys.stderr)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=path.expanduser(
                                        self.HISTORY_FILE))
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Postfix calculator over arbitrarily large '
                        'non-negative integers')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-d', '--debug',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        levels = LogLevel.NONE
        if self.args.verbose:
            levels |= LogLevel.INFO
        if self.args.debug:
            levels |= LogLevel.DEBUG
        self.sink = StreamSink(levels=levels)
        self.machine = Machine(sinks=[self.sink])
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
