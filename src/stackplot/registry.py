"""Named registries for pluggable behaviour (scale functions, data-layer kinds).

Registries are plain instances owned by a ``ChartContext``; nothing here is
module-level mutable state.
"""

from __future__ import annotations

__all__ = ["Registry"]

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from stackplot.errors import DuplicateNameError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """An ordered name -> entry catalog.

    ``list()`` reports names in registration order. ``set(name, None)``
    deletes an entry, mirroring ``remove``.
    """

    kind: str = "entry"
    not_found_error: type[NotFoundError] = NotFoundError

    def __init__(self) -> None:
        self._entries: dict[str, T] = {}

    def _validate(self, name: str, entry: T) -> None:
        """Hook for subclasses to reject unsuitable entries."""

    def add(self, name: str, entry: T) -> Registry[T]:
        """Register ``entry`` under a new ``name``."""
        if name in self._entries:
            raise DuplicateNameError(f"{self.kind} '{name}' is already registered")
        self._validate(name, entry)
        self._entries[name] = entry
        logger.debug("Registered %s '%s'", self.kind, name)
        return self

    def get(self, name: str) -> T:
        """Return the entry registered under ``name``."""
        try:
            return self._entries[name]
        except (KeyError, TypeError):
            raise self.not_found_error(f"{self.kind} '{name}' is not registered") from None

    def set(self, name: str, entry: T | None = None) -> Registry[T]:
        """Replace (or with ``None``, delete) the entry under ``name``."""
        if entry is None:
            return self.remove(name)
        self._validate(name, entry)
        self._entries[name] = entry
        logger.debug("Set %s '%s'", self.kind, name)
        return self

    def remove(self, name: str) -> Registry[T]:
        if name not in self._entries:
            raise self.not_found_error(f"{self.kind} '{name}' is not registered")
        del self._entries[name]
        logger.debug("Removed %s '%s'", self.kind, name)
        return self

    def list(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
