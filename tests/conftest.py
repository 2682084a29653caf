from collections import deque

from pytest import Item, fixture

from stackcalc.machine import Machine
from stackcalc.parser import Parser


@fixture
def machine() -> Machine:
    return Machine()


@fixture
def parser() -> Parser:
    return Parser()


@fixture
def run(machine: Machine, parser: Parser):
    '''
    Feed lines to a fresh machine, as the CLI would, and return its stack.
    '''
    def run(*lines: str) -> deque:
        for line in lines:
            machine.evaluate(parser.parse(line))
        return machine.stack
    return run


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Only called with enable_assertion_pass_hook set. Use with pytest -rP.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
