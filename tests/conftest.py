import os

from hypothesis import settings
from pytest import Item, fixture

from bigrpn import Machine


settings.register_profile('ci', max_examples=200, deadline=None)
settings.register_profile('dev', max_examples=50, deadline=None)
settings.load_profile(os.environ.get('HYPOTHESIS_PROFILE', 'dev'))


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!)
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


class Recorder:
    '''
    Sink keeping every message it is sent.
    '''
    def __init__(self):
        self.messages = []

    def __call__(self, level, message):
        self.messages.append((level, message))

    def at(self, level):
        return [message
                for message_level, message
                in self.messages
                if message_level == level]


@fixture
def recorder():
    return Recorder()


@fixture
def machine(recorder):
    return Machine(sinks=[recorder])
