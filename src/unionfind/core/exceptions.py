# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

"""
Exception hierarchy for the unionfind library.

Every failure the library can report is a subclass of UnionFindError so
callers can catch the whole family at once. Errors that wrap a lower level
failure (a mapping refusing a key, a strategy refusing a merge) chain the
original exception as ``__cause__`` and record which backing store failed
through a MappingSide value.
"""

from enum import Enum


class MappingSide(Enum):
    """Which of the two backing stores of a UnionFind an error came from."""

    PARENT = "parent"
    EXTRA = "extra"


class UnionFindError(Exception):
    """
    Base exception for all unionfind errors.

    All library specific exceptions inherit from this class
    to enable consistent error handling by callers.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a UnionFindError.

        Args:
            message: Main error message
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class MappingError(UnionFindError):
    """
    Errors raised by a key mapping backend.

    Raised when a key is inserted twice, updated while absent,
    or is not representable by the backend.
    """

    def __init__(self, message: str, key=None, details: str | None = None):
        self.key = key
        super().__init__(message, details)


class DuplicateKeyError(MappingError):
    """Raised when inserting a key that is already present."""

    pass


class MissingKeyError(MappingError):
    """Raised when updating a key that is not present."""

    pass


class InvalidKeyError(MappingError):
    """Raised when a key cannot be stored by a backend (None, negative index, ...)."""

    pass


class NewUnionFindError(UnionFindError):
    """
    Construction errors.

    Raised when the parent mapping or the extra info mapping
    cannot be built from the initial element set.
    """

    def __init__(self, message: str, side: MappingSide, details: str | None = None):
        self.side = side
        super().__init__(message, details)


class AddError(UnionFindError):
    """
    Growth errors.

    Raised when a key cannot be added to the parent mapping or the extra
    info mapping. The structure is left exactly as it was before the call.
    """

    def __init__(
        self, message: str, side: MappingSide, key=None, details: str | None = None
    ):
        self.side = side
        self.key = key
        super().__init__(message, details)


class UnionError(UnionFindError):
    """Errors raised while merging two equivalence classes."""

    pass


class ElementNotFoundError(UnionError):
    """
    Raised when a union target is not part of the structure.

    Always raised before any mutation takes place.
    """

    position: int = 0

    def __init__(self, message: str, key=None, details: str | None = None):
        self.key = key
        super().__init__(message, details)


class Elem1NotFoundError(ElementNotFoundError):
    """The first element given to a union was not found."""

    position = 1


class Elem2NotFoundError(ElementNotFoundError):
    """The second element given to a union was not found."""

    position = 2


class NotUnionableError(UnionError):
    """
    Raised by a union strategy that refuses to merge two representatives.

    The structure remains unchanged.
    """

    def __init__(
        self, message: str, first=None, second=None, details: str | None = None
    ):
        self.first = first
        self.second = second
        super().__init__(message, details)


class UnionOrAddError(UnionFindError):
    """Raised when a union-or-add call could not add one of its elements."""

    def __init__(
        self, message: str, side: MappingSide, key=None, details: str | None = None
    ):
        self.side = side
        self.key = key
        super().__init__(message, details)


class ExtraMismatchError(UnionFindError):
    """Raised when an operation needs extra info the structure does not carry."""

    pass


class SnapshotError(UnionFindError):
    """
    Serialization errors.

    Raised when a snapshot cannot be parsed or describes
    a structure that violates the forest invariants.
    """

    pass


class ConfigurationError(UnionFindError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid
    or contain incompatible settings.
    """

    pass


# Convenience functions for creating common errors
def duplicate_key(key) -> DuplicateKeyError:
    """Create a DuplicateKeyError for a key that already exists."""
    return DuplicateKeyError(
        f"Key already exists: {key!r}",
        key=key,
        details="Keys can only be inserted once; use set() to update a value",
    )


def missing_key(key) -> MissingKeyError:
    """Create a MissingKeyError for an update of an absent key."""
    return MissingKeyError(
        f"Key not present: {key!r}",
        key=key,
        details="set() only updates existing keys; use add() to insert",
    )


def element_not_found(key, position: int) -> ElementNotFoundError:
    """Create the not-found error matching the argument position of a union."""
    error_cls = Elem1NotFoundError if position == 1 else Elem2NotFoundError
    ordinal = "first" if position == 1 else "second"
    return error_cls(
        f"The {ordinal} element given to union was not found: {key!r}",
        key=key,
    )


def not_unionable(first, second, reason: str | None = None) -> NotUnionableError:
    """Create a NotUnionableError for two representatives that must stay apart."""
    return NotUnionableError(
        f"Could not union {first!r} and {second!r}",
        first=first,
        second=second,
        details=reason,
    )
