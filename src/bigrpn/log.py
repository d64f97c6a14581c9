'''
Message sinks for the machine's diagnostics.

A sink is any callable taking (level, message). Sinks are kept in a plain list
by whoever owns them, and all of them see every message; each decides for
itself whether the level is one it shows.
'''

from enum import IntFlag
import sys


class LogLevel(IntFlag):
    NONE = 1 << 0
    INFO = 1 << 1
    DEBUG = 1 << 2
    WARNING = 1 << 3
    ERROR = 1 << 4
    ALL = NONE | INFO | DEBUG | WARNING | ERROR


class StreamSink:
    '''
    Print messages of the enabled levels to a text stream, stderr by default.
    '''

    def __init__(self, stream=None, levels=LogLevel.NONE):
        self.stream = stream
        self.levels = levels

    def __call__(self, level, message):
        if self.levels & level == level:
            # Looked up late, so redirections of sys.stderr are honoured.
            print(message, file=self.stream or sys.stderr, flush=True)

    def toggle(self, level):
        '''
        Flip level on or off, and return whether it is now on.
        '''
        self.levels ^= level
        return bool(self.levels & level)


def emit(sinks, level, message):
    '''
    Send message to every sink, in order.
    '''
    for sink in sinks:
        sink(level, message)
