"""Custom exceptions for the persistence context."""

from typing import Optional


class InvalidStoreKeyError(ValueError):
    """
    Raised when a storage key is not a flat identifier.

    Keys must match [A-Za-z0-9_.-]+ so they map directly onto file names.

    Attributes:
        key: The rejected key
    """

    def __init__(self, key):
        self.key = key
        super().__init__(f"Invalid store key: {key!r} (expected a flat identifier)")


class UnknownTemplateError(ValueError):
    """
    Raised when saving a template identifier that is not one of the known templates.

    Attributes:
        template: The rejected identifier
        available: Known template identifiers
    """

    def __init__(self, template: str, available: Optional[tuple] = None):
        self.template = template
        self.available = available or ()

        message = f"Unknown resume template: {template!r}"
        if self.available:
            message += f". Available templates: {list(self.available)}"
        super().__init__(message)
