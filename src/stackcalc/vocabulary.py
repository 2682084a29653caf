'''
Operations understood by the calculator, and the words that spell them.
'''

from collections import namedtuple
from enum import Enum
import math


# Fixed literal, not (1 + sqrt(5)) / 2. They agree to this precision anyway.
PHI = 1.61803398875


class Op(Enum):
    # Binary
    ADD = 'add'
    SUB = 'sub'
    MUL = 'mul'
    DIV = 'div'
    POW = 'pow'
    # Unary
    SQRT = 'sqrt'
    NEG = 'neg'
    ABS = 'abs'
    LN = 'ln'
    LOG = 'log'
    LG = 'lg'
    SIN = 'sin'
    ASIN = 'asin'
    COS = 'cos'
    ACOS = 'acos'
    TAN = 'tan'
    ATAN = 'atan'
    TO_DEG = 'to deg'
    TO_RAD = 'to rad'
    # Whole stack
    SUM = 'sum'
    PROD = 'prod'
    POP = 'pop'
    CLEAR = 'clear'
    SWAP = 'swap'
    ROTATE = 'rotate'
    DUPLICATE = 'duplicate'
    # Other
    NUMBER = 'number'
    NOOP = 'noop'


class Operation(namedtuple('Operation', 'op value', defaults=(None,))):
    '''
    A single parsed input line: an Op, and the number it carries if NUMBER.
    '''
    __slots__ = ()

    def __str__(self):
        if self.op is Op.NUMBER:
            return '{}\t{!r}'.format(self.op.name, self.value)
        return self.op.name


NOOP = Operation(Op.NOOP)


def number(value):
    '''
    Operation pushing value.
    '''
    return Operation(Op.NUMBER, float(value))


# Words that are commands to the CLI rather than operations on the stack.
HELP_WORDS = frozenset({'help', '?'})
QUIT_WORDS = frozenset({'quit', 'q', 'end'})

# Lowercase word -> Operation. Many to one.
ALIASES = {
    # Binary
    '+': Op.ADD, 'add': Op.ADD,
    '-': Op.SUB, 'sub': Op.SUB, 'subtract': Op.SUB,
    '*': Op.MUL, 'mul': Op.MUL, 'multiply': Op.MUL,
    '/': Op.DIV, 'div': Op.DIV, 'divide': Op.DIV,
    '^': Op.POW, 'pow': Op.POW, 'power': Op.POW,
    # Unary
    'abs': Op.ABS, 'absolute': Op.ABS,
    'sqrt': Op.SQRT, 'root': Op.SQRT,
    'neg': Op.NEG, 'negate': Op.NEG, '~': Op.NEG,
    'ln': Op.LN, 'loge': Op.LN,
    'log': Op.LOG, 'log10': Op.LOG,
    'lg': Op.LG, 'log2': Op.LG,
    'sin': Op.SIN,
    'asin': Op.ASIN, 'sin^-1': Op.ASIN,
    'cos': Op.COS,
    'acos': Op.ACOS, 'cos^-1': Op.ACOS,
    'tan': Op.TAN,
    'atan': Op.ATAN, 'tan^-1': Op.ATAN,
    'deg': Op.TO_DEG, 'to deg': Op.TO_DEG,
    'rad': Op.TO_RAD, 'to rad': Op.TO_RAD,
    # Whole stack
    'sum': Op.SUM,
    'prod': Op.PROD,
    'pop': Op.POP,
    'clear': Op.CLEAR, 'cls': Op.CLEAR,
    'swap': Op.SWAP,
    'rotate': Op.ROTATE, 'rot': Op.ROTATE,
    'copy': Op.DUPLICATE, 'clone': Op.DUPLICATE, 'duplicate': Op.DUPLICATE,
}
ALIASES = {word: Operation(op) for word, op in ALIASES.items()}
ALIASES.update({
    'pi': number(math.pi), 'π': number(math.pi),
    'e': number(math.e),
    'phi': number(PHI), 'φ': number(PHI), 'ϕ': number(PHI),
})

assert not ALIASES.keys() & (HELP_WORDS | QUIT_WORDS)
assert all(word == word.lower().strip() for word in ALIASES)

HELP = '''\
List of available commands:
help, ? -- Print this help
quit, q, end -- Explain how to quit
<number> -- Push a number onto the stack (1, -2.5, .5, 6.02e23, inf, nan)
pi, π -- Push π onto the stack
e -- Push e onto the stack
phi, φ, ϕ -- Push the golden ratio onto the stack
+, add -- Add the two topmost numbers
-, sub, subtract -- Subtract the topmost number from the one below it
*, mul, multiply -- Multiply the two topmost numbers
/, div, divide -- Divide the number below the topmost by the topmost
^, pow, power -- Raise the number below the topmost to the topmost
sqrt, root -- Take the square root of the topmost number
neg, negate, ~ -- Negate the topmost number
abs, absolute -- Make the topmost number positive
ln, loge -- Apply the natural log to the topmost number
log, log10 -- Apply the base-10 log to the topmost number
lg, log2 -- Apply the base-2 log to the topmost number
sin -- Take the sine of the topmost number (in radians)
asin, sin^-1 -- Take the inverse sine of the topmost number
cos -- Take the cosine of the topmost number (in radians)
acos, cos^-1 -- Take the inverse cosine of the topmost number
tan -- Take the tangent of the topmost number (in radians)
atan, tan^-1 -- Take the inverse tangent of the topmost number
deg, to deg -- Convert the topmost number from radians to degrees
rad, to rad -- Convert the topmost number from degrees to radians
sum -- Add the entire stack together
prod -- Multiply the entire stack together
pop -- Remove the topmost number
clear, cls -- Clear the stack
swap -- Swap the two topmost numbers
rotate, rot -- Move the topmost number to the bottom of the stack
copy, clone, duplicate -- Duplicate the topmost number'''

QUIT_HINT = 'To quit, press ctrl+c (or ctrl+d)'
