from functools import wraps
import math


class StackCalcError(Exception):
    pass


class ParseError(StackCalcError):
    pass


class StackUnderflow(StackCalcError):
    pass


def ieee754(f):
    '''
    Decorator that converts math domain errors to NaN.

    The math module raises where IEEE 754 would quietly yield NaN (sqrt of a
    negative, asin outside [-1, 1], sin of infinity, ...).
    '''
    @wraps(f)
    def wrapper(x):
        try:
            return f(x)
        except ValueError:
            return math.nan
    return wrapper


def logarithm(f):
    '''
    Decorator giving logarithms their IEEE 754 poles: -inf at zero, NaN below.
    '''
    @wraps(f)
    def wrapper(x):
        if x == 0:
            return -math.inf
        elif x < 0:
            return math.nan
        return f(x)
    return wrapper


def divide(left, right):
    '''
    True division, with IEEE 754 results for a zero divisor.
    '''
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _isodd(n):
    return n.is_integer() and n % 2 == 1


def power(left, right):
    '''
    Real-exponent power, with IEEE 754 results instead of math exceptions.
    '''
    try:
        return math.pow(left, right)
    except OverflowError:
        if left < 0 and _isodd(right):
            return -math.inf
        return math.inf
    except ValueError:
        # Zero to a negative power, or a negative base to a fractional one.
        if left == 0:
            if _isodd(right):
                return math.copysign(math.inf, left)
            return math.inf
        return math.nan


def fmt_number(n, precision=2):
    '''
    Format a stack element for display, rounded to precision.
    '''
    if math.isnan(n):
        return 'NaN'
    elif math.isinf(n):
        return 'inf' if n > 0 else '-inf'
    return '{:.{}f}'.format(n, precision)


def fmt_stack(stack, precision=2):
    '''
    Format the whole stack, bottom first.
    '''
    return '[' + ', '.join(fmt_number(n, precision) for n in stack) + ']'
