"""Named formatter registry.

Maps a caller-chosen name to a custom formatting function. The dispatcher
checks this registry before tokenizing: a format argument that exactly
matches a registered name is never read as a template, even if it looks
like one.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from datetokens.diagnostics import DateArgumentTypeError, ErrorTemplate, FormatterNameError
from datetokens.runtime.value_types import NamedFormatter

__all__ = ["FormatterRegistry"]

logger = logging.getLogger(__name__)


class FormatterRegistry:
    """Insertion-ordered mapping of formatter name to formatting function.

    Supports dict-like introspection:
        - list_names(): Registered names in registration order
        - get(name): Registered function or None
        - __iter__ / __len__ / __contains__

    Re-registering an existing name replaces its function but keeps its
    original position in list_names().

    Memory Optimization:
        Uses __slots__ for memory efficiency (avoids per-instance __dict__).

    Example:
        >>> registry = FormatterRegistry()
        >>> registry.register("year", lambda instant: str(instant.year))
        >>> "year" in registry
        True
        >>> registry.list_names()
        ['year']
    """

    __slots__ = ("_formatters",)

    def __init__(self) -> None:
        """Initialize empty formatter registry."""
        self._formatters: dict[str, NamedFormatter] = {}

    def register(self, name: str, formatter: NamedFormatter) -> None:
        """Register a formatting function under ``name``.

        Args:
            name: Exact string the dispatcher will match
            formatter: Called with the normalized Instant; its return value
                becomes the dispatcher's result unchanged

        Raises:
            DateArgumentTypeError: If name is not a string or formatter is
                not callable
            FormatterNameError: If name is empty
        """
        if not isinstance(name, str):
            raise DateArgumentTypeError(ErrorTemplate.formatter_name_not_string(name))
        if not name:
            raise FormatterNameError(ErrorTemplate.formatter_name_empty())
        if not callable(formatter):
            raise DateArgumentTypeError(ErrorTemplate.formatter_not_callable(name, formatter))

        if name in self._formatters:
            logger.debug("Replacing named formatter '%s'", name)
        self._formatters[name] = formatter

    def unregister(self, name: str) -> bool:
        """Remove a formatter.

        Returns:
            True if the name was registered
        """
        return self._formatters.pop(name, None) is not None

    def get(self, name: str) -> NamedFormatter | None:
        """Return the formatter registered under name, or None."""
        return self._formatters.get(name)

    def list_names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._formatters)

    def clear(self) -> None:
        """Remove every formatter, built-ins included."""
        self._formatters.clear()

    def copy(self) -> FormatterRegistry:
        """Create a shallow copy of this registry.

        The functions are shared; adding or removing names on the copy does
        not affect the original.
        """
        new_registry = FormatterRegistry()
        new_registry._formatters = self._formatters.copy()
        return new_registry

    def __iter__(self) -> Iterator[str]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)

    def __contains__(self, name: object) -> bool:
        return name in self._formatters

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"FormatterRegistry(formatters={len(self._formatters)})"
