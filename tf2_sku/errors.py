from typing import Optional

from tf2_sku.types.enums import IntErrorKind


class SkuError(Exception):
    """Base class for all SKU errors."""


class ParseError(SkuError, ValueError):
    """A SKU string could not be parsed."""


class ParseIntError(ParseError):
    """An integer value of an attribute failed to parse."""

    _MESSAGES = {
        IntErrorKind.EMPTY: "Value for {field} in SKU is empty.",
        IntErrorKind.INVALID_DIGIT: "Value for {field} in SKU contains invalid digit.",
        IntErrorKind.POS_OVERFLOW: "Value for {field} in SKU overflows integer bounds.",
        IntErrorKind.NEG_OVERFLOW: "Value for {field} in SKU underflows integer bounds.",
    }

    def __init__(self, field: str, kind: IntErrorKind, value: Optional[str] = None):
        self.field = field
        self.kind = kind
        self.value = value
        super().__init__(self._MESSAGES[kind].format(field=field))


class InvalidFormatError(ParseError):
    """The SKU does not begin with a defindex followed by a quality."""

    def __init__(self):
        super().__init__('Invalid SKU format. Must begin with a defindex followed by a quality e.g. "5021;6"')


class InvalidValueError(ParseError):
    """A number parsed but is not a member of the attribute's enumeration."""

    def __init__(self, field: str, number: int):
        self.field = field
        self.number = number
        super().__init__(f"Unknown {field}: {number}")


class InsertError(SkuError):
    """A value could not be inserted into a bounded set."""


class SetFullError(InsertError):
    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Set is full ({capacity} values)")


class DuplicateError(InsertError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Set already holds a value equivalent to {value!r}")


class DeserializationError(SkuError, ValueError):
    """A serialized value could not be turned back into a SKU."""
