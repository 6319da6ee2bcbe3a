"""Exception types raised by stackplot."""

from __future__ import annotations


class StackplotError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationTypeError(StackplotError, TypeError):
    """A layout (or part of one) has the wrong type, e.g. merging a non-mapping."""


class ConfigurationValueError(StackplotError, ValueError):
    """A layout value has the right type but an unusable value."""


class InvalidAxisError(ConfigurationValueError):
    """An axis identifier is unknown or has no configured field."""


class DuplicateIdError(ConfigurationValueError):
    """A panel or data layer id is already in use by a sibling."""


class ElementIdError(ConfigurationValueError):
    """A data record lacks the field used to identify it."""


class NotFoundError(StackplotError, KeyError):
    """A named entry (registry item, panel, data layer) does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep messages readable.
        return str(self.args[0]) if self.args else ""


class DuplicateNameError(StackplotError, KeyError):
    """A registry name is already taken."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class UnknownScaleFunctionError(NotFoundError):
    """A scalable parameter references a scale function that is not registered."""


class LayoutInvariantError(StackplotError, RuntimeError):
    """Panel proportions no longer sum to one after a geometry update."""
