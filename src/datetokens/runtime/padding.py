"""Zero padding for numeric tokens.

Python 3.13+. Zero external dependencies.
"""

from datetokens.constants import DEFAULT_PAD_WIDTH
from datetokens.diagnostics import DateArgumentTypeError, ErrorTemplate

__all__ = ["pad"]


def pad(value: int, width: int = DEFAULT_PAD_WIDTH) -> str:
    """Render an integer in base 10, left-padded with zeros to ``width``.

    Never truncates: values already at least ``width`` characters long are
    returned unchanged. A minus sign counts toward the width and stays in
    front of the zeros.

    Args:
        value: Integer to render
        width: Minimum length of the result (default: 2)

    Returns:
        Padded decimal string

    Raises:
        DateArgumentTypeError: If value or width is not an int (bool rejected)

    Examples:
        >>> pad(5, 3)
        '005'
        >>> pad(123, 5)
        '00123'
        >>> pad(123, 2)
        '123'
        >>> pad(7)
        '07'
    """
    for arg in (value, width):
        if isinstance(arg, bool) or not isinstance(arg, int):
            raise DateArgumentTypeError(ErrorTemplate.pad_value_not_integer(arg))
    # str.zfill keeps a leading sign in front of the padding
    return str(value).zfill(width)
