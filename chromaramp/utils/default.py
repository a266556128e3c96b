from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default.

    Falsy values such as ``0`` or ``""`` are kept: a hue start of 0 is a
    real anchor, not an omission.
    """
    return value if value is not None else default
