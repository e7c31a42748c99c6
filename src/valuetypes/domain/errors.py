"""Exceptions raised by the value type registry.

Bad *data* never raises: it comes back as a ``ValueResult`` with ``ok=False``.
Only programming errors, such as asking for a type name that was never
registered, escape as exceptions.
"""

from __future__ import annotations


class ValueTypeError(Exception):
    """Base class for all valuetypes exceptions."""


class ValueTypeNotFoundError(ValueTypeError, LookupError):
    """Raised when a type name is looked up that has not been registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'value type "{name}" does not exist')
