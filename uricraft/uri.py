"""
Uri - Chainable URI/path value.

Wraps a string and provides methods to check and compose it:
- Emptiness and prefix checks
- Prepend/append with a single slash between fragments
- Basename removal (e.g. dropping a trailing "index.html")
- Canonical rendering without trailing slashes

Mutating methods change the instance in place and return it, so calls
can be chained:

    Uri("about").prepend(Uri("http://dbwebb.se/")).uri()
    # -> "http://dbwebb.se/about"
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Union

from .faults import UriOperandFault

logger = logging.getLogger("uricraft.uri")

SEPARATOR = "/"


def _as_text(value: Any) -> str:
    """
    Coerce a stored value to the string it stands for.

    None, False and empty collections give "". Everything else goes
    through str(), so True gives "True" and 0.0 gives "0.0".
    """
    if isinstance(value, str):
        return value
    if value is None or value is False:
        return ""
    if isinstance(value, (list, tuple, dict, set, frozenset)) and not value:
        return ""
    return str(value)


class Uri:
    """
    Mutable URI/path value with composition helpers.

    Any initial value is accepted and stored as-is; no validation is
    performed. Rendering through ``uri()`` always strips the trailing run
    of slashes.

    Args:
        uri: Initial uri-string

    Example:
        base = Uri("http://dbwebb.se")
        base.append(Uri("/about/")).uri()  # "http://dbwebb.se/about"
    """

    __slots__ = ("_raw",)

    def __init__(self, uri: Any = ""):
        self._raw = uri

    @property
    def raw(self) -> Any:
        """The stored value, untouched by rendering."""
        return self._raw

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        """
        Check if the stored value is empty.

        Empty means falsy (``""``, ``0``, ``0.0``, ``None``, ``False``,
        empty collections) or the literal string ``"0"``.
        """
        return not self._raw or self._raw == "0"

    def starts_with(self, *prefixes: str) -> bool:
        """
        Check if the stored value starts with any of ``prefixes``.

        Comparison is exact and case-sensitive. With no prefixes the
        result is False.
        """
        text = _as_text(self._raw)
        return any(text.startswith(prefix) for prefix in prefixes)

    def starts_with_any(self, prefixes: Union[str, Iterable[str]]) -> bool:
        """
        Check if the stored value starts with any string in ``prefixes``.

        A plain string counts as a single prefix.
        """
        if isinstance(prefixes, str):
            prefixes = (prefixes,)
        return self.starts_with(*prefixes)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def prepend(self, uri: Uri) -> Uri:
        """
        Prepend ``uri`` to this uri with a slash in between.

        Args:
            uri: Uri to put in front of this one (not modified)

        Returns:
            self, for chaining

        Raises:
            UriOperandFault: If ``uri`` is not a Uri
        """
        self._check_operand("prepend", uri)
        self._raw = uri.uri() + SEPARATOR + self.uri().lstrip(SEPARATOR)
        return self

    def append(self, uri: Uri) -> Uri:
        """
        Append ``uri`` to this uri with a slash in between.

        Args:
            uri: Uri to put after this one (not modified)

        Returns:
            self, for chaining

        Raises:
            UriOperandFault: If ``uri`` is not a Uri
        """
        self._check_operand("append", uri)
        self._raw = self.uri() + SEPARATOR + uri.uri().lstrip(SEPARATOR)
        return self

    def remove_basename(self, basename: str) -> Uri:
        """
        Remove the last segment if it equals ``basename``.

        With no slash in the value the parent is the empty string.

        Example:
            Uri("http://dbwebb.se/about/this.html").remove_basename("this.html")
            # -> "http://dbwebb.se/about"
        """
        head, sep, tail = self.uri().rpartition(SEPARATOR)
        if tail != basename:
            return self

        if not sep:
            parent = ""
        else:
            parent = head.rstrip(SEPARATOR) or SEPARATOR
        logger.debug("Removed basename %r, parent is %r", basename, parent)
        self._raw = parent
        return self

    def copy(self) -> Uri:
        """Return an independent Uri holding the same value."""
        return Uri(self._raw)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def uri(self) -> str:
        """Get the uri as a string without any trailing slash."""
        return _as_text(self._raw).rstrip(SEPARATOR)

    def __str__(self) -> str:
        return self.uri()

    def __repr__(self) -> str:
        return f"Uri({self._raw!r})"

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Uri):
            return self.uri() == other.uri()
        if isinstance(other, str):
            return self.uri() == other.rstrip(SEPARATOR)
        return NotImplemented

    __hash__ = None

    @staticmethod
    def _check_operand(operation: str, operand: Any) -> None:
        if not isinstance(operand, Uri):
            logger.debug("Rejected %s operand of type %s", operation, type(operand).__name__)
            raise UriOperandFault(operation, operand)


def join_uri(*parts: Union[str, Uri]) -> str:
    """
    Join URI fragments with single slashes.

    Fragments after the first that render to nothing but slashes are
    skipped. Uri arguments are read, never modified.

    Example:
        join_uri("http://dbwebb.se/", "/docs/", "about")
        # -> "http://dbwebb.se/docs/about"
    """
    if not parts:
        return ""

    first, *rest = parts
    result = Uri(first.uri()) if isinstance(first, Uri) else Uri(first)
    for part in rest:
        fragment = part if isinstance(part, Uri) else Uri(part)
        if not fragment.uri().strip(SEPARATOR):
            continue
        result.append(fragment)
    return result.uri()
