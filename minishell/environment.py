"""The shell's own table of environment variables."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional, Tuple


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def has_value(value: str) -> bool:
    """Tell whether ``value`` holds an ``=`` followed by at least one character."""
    return any(ch == "=" and value[i + 1 : i + 2] for i, ch in enumerate(value))


def is_valid_assignment(value: Optional[str]) -> bool:
    """Tell whether ``value`` is ``NAME=...`` with a valid variable name."""
    if not value or not (_is_alpha(value[0]) or value[0] == "_"):
        return False
    for ch in value:
        if ch == "=":
            return True
        if not (_is_alnum(ch) or ch == "_"):
            return False
    return False


def parse_entry(entry: str) -> Tuple[str, str]:
    """Split an environment entry into its key and value.

    An entry with a value is split at its first ``=``. Otherwise its last
    character (normally a trailing ``=``) is dropped and the value is empty.
    """
    if has_value(entry):
        key, _, value = entry.partition("=")
        return key, value
    return entry[:-1], ""


class Environment:
    """Ordered variables; iterating yields ``(key, value)`` pairs."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._vars: dict[str, str] = {}
        for entry in entries:
            key, value = parse_entry(entry)
            self._vars.setdefault(key, value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        """Build an environment from a mapping such as ``os.environ``."""
        return cls(f"{key}={value}" for key, value in mapping.items())

    def get(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or None when it is not set."""
        return self._vars.get(key)

    def export(self, entry: str) -> None:
        """Set a variable from a ``NAME=value`` assignment.

        An existing variable keeps its place; a new one is added at the end.
        Raises ValueError when ``entry`` is not a valid assignment.
        """
        if not is_valid_assignment(entry):
            raise ValueError(f"not a valid identifier: {entry!r}")
        key, _, value = entry.partition("=")
        self._vars[key] = value

    def unset(self, key: str) -> bool:
        """Remove ``key``; return whether it was set."""
        return self._vars.pop(key, None) is not None

    def lines(self) -> list[str]:
        """Return the variables as ``key=value`` lines, in order."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._vars.items()))

    def __len__(self) -> int:
        return len(self._vars)

    def __contains__(self, key: object) -> bool:
        return key in self._vars