'''
RPN stack calculator.

Type numbers and operations one per line; the stack is printed after each.
Plain old arithmetic, logarithms, trigonometry, and your usual stack
operators. Not intended to be Turing-complete!

Double precision floats throughout, with IEEE 754 semantics: dividing by
zero or taking the log of a negative gives inf or NaN rather than an error.
Operations without enough operands on the stack do nothing.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine, evaluate
from .parser import Parser, parse
from .vocabulary import Op, Operation


__all__ = ('Machine', 'Lexer', 'Parser', 'CLI', 'Op', 'Operation',
           'evaluate', 'parse')
