import logging
import sys

from .util import ParseError
from .lexer import Lexer
from .vocabulary import ALIASES, HELP, NOOP, QUIT_HINT, number


logger = logging.getLogger(__name__)


class Parser:
    '''
    Turns input lines into Operations for a Machine.

    Never raises on bad input: anything it can't make sense of is reported
    and becomes the NOOP operation.
    '''

    def __init__(self, lexer=None):
        self.lexer = lexer or Lexer()

    def parse(self, line):
        '''
        Parse a line into exactly one Operation.

        help and quit are handled here, by printing, and are NOOPs to the
        machine.
        '''
        try:
            groups = self.lexer.matchedgroups(self.lexer.lex(line))
        except ParseError as e:
            print('Error!', e.args[0], file=sys.stderr)
            logger.debug('Unparseable %r', line)
            return NOOP
        if 'alias' in groups:
            parsed = ALIASES[groups['alias']]
        elif 'number' in groups:
            parsed = number(groups['number'])
        elif 'help' in groups:
            self.printhelp()
            parsed = NOOP
        elif 'quit' in groups:
            print(QUIT_HINT)
            parsed = NOOP
        logger.debug('Parsed %r as %s', line, parsed)
        return parsed

    def printhelp(self):
        '''
        Print all possible commands.
        '''
        print(HELP)


def parse(line):
    '''
    Parse line with a default Parser.
    '''
    return Parser().parse(line)
