"""Integer arithmetic for fcalc.

Integers are signed 32-bit two's complement: every literal and every arithmetic result wraps around instead of
growing without bound. Division truncates toward zero and the remainder takes the sign of the dividend.
"""

INT_BITS = 32


def wrap(value):
    """Wraps value to a signed INT_BITS-bit integer."""
    modulus = 1 << INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def divide(a, b):
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def modulo(a, b):
    if b == 0:
        raise ZeroDivisionError("modulo by zero")
    return a - b * divide(a, b)


OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": divide,
    "%": modulo,
    ">": lambda a, b: int(a > b),
    "<": lambda a, b: int(a < b),
    "==": lambda a, b: int(a == b),
}


def apply(operator, a, b):
    """Applies the operator spelled operator to a and b, wrapping the result."""
    return wrap(OPERATORS[operator](a, b))
