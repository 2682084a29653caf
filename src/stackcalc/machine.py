import logging
import math
import operator
from collections import deque
from functools import reduce

from .util import (StackUnderflow, divide, fmt_stack, ieee754, logarithm,
                   power)
from .vocabulary import Op


logger = logging.getLogger(__name__)


class Machine:
    '''
    Arithmetic stack machine (RPN calculator).

    Takes Operations and runs them. Never fails: operations without enough
    operands leave the stack as it was.
    '''

    DEFAULT_PRECISION = 2

    # Called as f(left, right), right being the top of the stack, so that
    # 2 1 - is 2 - 1, not 1 - 2.
    BINARY = {
        Op.ADD: operator.__add__,
        Op.SUB: operator.__sub__,
        Op.MUL: operator.__mul__,
        Op.DIV: divide,
        Op.POW: power,
    }

    UNARY = {
        Op.SQRT: ieee754(math.sqrt),
        Op.NEG: operator.__neg__,
        Op.ABS: math.fabs,
        Op.LN: logarithm(math.log),
        Op.LOG: logarithm(math.log10),
        Op.LG: logarithm(math.log2),
        Op.SIN: ieee754(math.sin),
        Op.ASIN: ieee754(math.asin),
        Op.COS: ieee754(math.cos),
        Op.ACOS: ieee754(math.acos),
        Op.TAN: ieee754(math.tan),
        Op.ATAN: math.atan,
        Op.TO_DEG: math.degrees,
        Op.TO_RAD: math.radians,
    }

    # Fold over the whole stack, bottom first, from the identity.
    REDUCTIONS = {
        Op.SUM: (operator.__add__, 0.0),
        Op.PROD: (operator.__mul__, 1.0),
    }

    def __init__(self, stack=None, precision=None):
        '''
        Create stack machine, empty unless given a stack to work on.

        :param stack: deque to mutate in place.
        :param precision: Decimals shown when printing the stack.
        '''
        self.stack = deque() if stack is None else stack
        self.precision = (type(self).DEFAULT_PRECISION
                          if precision is None
                          else precision)

    def evaluate(self, parsed):
        '''
        Apply an Operation to the stack.

        Not having enough operands is not an error: the stack is left alone.
        '''
        try:
            self._apply(parsed)
        except StackUnderflow as e:
            logger.debug('Ignoring %s: %s', parsed.op.name, e.args[0])

    def _apply(self, parsed):
        '''
        Dispatch on the kind of operation. Does the real work.
        '''
        op = parsed.op
        if op in type(self).BINARY:
            right, left = self._popstack(2)
            self._pshstack(type(self).BINARY[op](left, right))
        elif op in type(self).UNARY:
            only, = self._popstack()
            self._pshstack(type(self).UNARY[op](only))
        elif op in type(self).REDUCTIONS:
            f, identity = type(self).REDUCTIONS[op]
            result = reduce(f, self.stack, identity)
            self.stack.clear()
            self._pshstack(result)
        elif op in type(self).FUNCTIONS:
            type(self).FUNCTIONS[op](self)
        elif op is Op.NUMBER:
            self._pshstack(parsed.value)
        # Op.NOOP: nothing to do

    def _pshstack(self, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        self.stack.extend(new)

    def _popstack(self, n=1):
        '''
        Pop specified number of args from stack, topmost first.

        Takes nothing if there aren't enough.
        '''
        if len(self.stack) < n:
            raise StackUnderflow('Less than {} element(s) on stack'.format(n))
        return [self.stack.pop() for _ in range(n)]

    def popstack(self):
        '''
        Drop element at top of stack.
        '''
        self._popstack()

    def clrstack(self):
        '''
        Clear everything from the stack.
        '''
        self.stack.clear()

    def revstack(self):
        '''
        Swap two elements at top of stack.
        '''
        self._pshstack(*self._popstack(n=2))

    def rotstack(self):
        '''
        Move the element at top of stack to the bottom.
        '''
        if not self.stack:
            raise StackUnderflow('Empty stack')
        self.stack.rotate(1)

    def dupstack(self):
        '''
        Duplicate element at top of stack.
        '''
        if not self.stack:
            raise StackUnderflow('Empty stack')
        self._pshstack(self.stack[-1])

    def printstack(self, file=None):
        '''
        Print all elements on the stack, bottom of the stack first.

        Prints nothing for an empty stack.
        '''
        if self.stack:
            print('Stack:', fmt_stack(self.stack, self.precision), file=file)

    # Stack manipulation operations, as unbound methods.
    FUNCTIONS = {
        Op.POP: popstack,
        Op.CLEAR: clrstack,
        Op.SWAP: revstack,
        Op.ROTATE: rotstack,
        Op.DUPLICATE: dupstack,
    }


def evaluate(stack, parsed):
    '''
    Apply an Operation to a caller owned stack, in place.
    '''
    Machine(stack).evaluate(parsed)
