from functools import reduce
import operator

import regex

from .util import ParseError
from .vocabulary import ALIASES, HELP_WORDS, QUIT_WORDS


def _alternation(words):
    # Longest first: 'log10' before 'log'.
    return r'(?:' + r'|'.join(map(regex.escape,
                                  sorted(words, key=len, reverse=True))) + r')'


class Lexer:
    '''
    Lexer for a single calculator input line.

    A line is exactly one word: an alias, a number, or a command. For
    consistency with Parser, needs to be instantiated, despite holding no
    internal state.
    '''
    # Mantissa of a number
    MANTISSA = r'''
                # DO NOT REPEAT ME! I REPEAT MYSELF INTERNALLY!
                (?:
                    # 1, 12, 1. (notice trailing dot), 1.3
                    [0-9]+
                    (?:
                        \.
                        [0-9]*
                    )?
                    |
                    # .2, but not a lone .
                    \.
                    [0-9]+
                )
                '''
    # Number, of any kind float() and the usual literal grammar agree on.
    # String formatting and regex is a tricky business, because of the braces.
    # It works here. Be careful in general!
    NUMBER = r'''
              [+\-]?
              (?:
                  {MANTISSA}
                  # 1e5, 1.5e-3, 2e+10
                  (?:
                      e
                      [+\-]?
                      [0-9]+
                  )?
              )|(?:
                  [+\-]?
                  inf(?:inity)?
              )|(?:
                  [+\-]?
                  nan
              )
              '''.format(MANTISSA=MANTISSA)

    ALIAS = _alternation(ALIASES)
    HELP = _alternation(HELP_WORDS)
    QUIT = _alternation(QUIT_WORDS)

    # All possible words.
    WORD = r'(?<alias>' + ALIAS + r')|' \
           r'(?<help>' + HELP + r')|' \
           r'(?<quit>' + QUIT + r')|' \
           r'(?<number>' + NUMBER + r')'
    # Default regex flags for matching words
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def normalize(self, line):
        '''
        Lowercase and strip line down to the word it holds.
        '''
        return line.lower().strip()

    def lex(self, line):
        '''
        Take a line and return the match on its word.

        Raises ParseError if the line isn't exactly one known word.
        '''
        word = self.normalize(line)
        match = regex.fullmatch(type(self).WORD, word,
                                flags=type(self).FLAGS)
        if match is None:
            raise ParseError("Couldn't parse {0}".format(word))
        return match

    def isnumber(self, word):
        '''
        Return True if word is a floating point literal.
        '''
        return regex.fullmatch(type(self).NUMBER, self.normalize(word),
                               flags=type(self).FLAGS) is not None

    def matchedgroups(self, match):
        '''
        Return the groups that matched, and what they matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
