import math


class Value:
    kind = "Value"


class EmptyValue(Value):
    """Absence of a value: what declarations, assignments and loops produce."""

    kind = "Empty"

    def __eq__(self, other):
        return isinstance(other, EmptyValue)

    def __hash__(self):
        return hash(EmptyValue)

    def __str__(self):
        return "<empty>"

    def __repr__(self):
        return "Empty"


EMPTY = EmptyValue()


class OptionalValue(Value):
    """Explicitly nullable wrapper around a LiteralValue (or nothing)."""

    kind = "Optional"

    def __init__(self, literal=None):
        self.literal = literal

    def __eq__(self, other):
        return isinstance(other, OptionalValue) and self.literal == other.literal

    def __hash__(self):
        return hash((OptionalValue, self.literal))

    def __str__(self):
        if self.literal is None:
            return "nil"
        return str(self.literal)

    def __repr__(self):
        return f"Optional({self.literal!r})"


class LiteralValue(Value):
    def __init__(self, value):
        if not isinstance(value, (bool, int, float, str)):
            raise TypeError(f"unsupported literal payload: {type(value).__name__}")
        self.value = value

    @property
    def kind(self):
        v = self.value
        if isinstance(v, bool):
            return "Boolean"
        if isinstance(v, int):
            return "Integer"
        if isinstance(v, float):
            return "Float"
        return "String"

    @property
    def is_number(self):
        return isinstance(self.value, (int, float)) and not isinstance(self.value, bool)

    @property
    def is_integer(self):
        return isinstance(self.value, int) and not isinstance(self.value, bool)

    @property
    def is_boolean(self):
        return isinstance(self.value, bool)

    @property
    def category(self):
        # what equality cares about: Integer and Float are both numbers
        return "Number" if self.is_number else self.kind

    def __eq__(self, other):
        if not isinstance(other, LiteralValue):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self):
        return hash((type(self.value), self.value))

    def __str__(self):
        v = self.value
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, float):
            if math.isnan(v):
                return "NaN"
            return repr(v)
        return str(v)

    def __repr__(self):
        return f"{self.kind}({self.value!r})"


TRUE = LiteralValue(True)
FALSE = LiteralValue(False)


# ---------- numeric tower ----------
# Integer op Integer stays Integer; a Float on either side promotes to Float.

def add(left, right):
    return left + right


def subtract(left, right):
    return left - right


def multiply(left, right):
    return left * right


def divide(left, right):
    """Integer division truncates toward zero; float division follows IEEE 754.

    Raises ZeroDivisionError only for an integer divided by integer zero.
    """
    if isinstance(left, int) and isinstance(right, int):
        if right == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(left) // abs(right)
        return -quotient if (left < 0) != (right < 0) else quotient

    left, right = float(left), float(right)
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right
