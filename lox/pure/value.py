"""Runtime values of the lox language. Values are plain Python objects drawn from a closed set:

```
<value> ::= float   ; number, always 64-bit float (never int or bool)
          | str     ; string
          | None    ; nil
          | True
          | False
```
"""

import math
from decimal import Decimal


def is_number(value):
    """Whether or not value is a lox number. bools are ints in Python, so they are excluded explicitly."""
    return isinstance(value, float)


def is_boolean(value):
    return value is True or value is False


def divide(left, right):
    """IEEE-754 division: x / 0 is a signed infinity and 0 / 0 is NaN, instead of Python's ZeroDivisionError."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def stringify(value):
    """Display-formatted rendering of value, as written by print."""
    if value is None:
        return "nil"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if is_number(value):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"

        # shortest round-trip digits, written out without an exponent
        text = format(Decimal(repr(value)), "f")
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return value
