"""Layout-specific error classes.

These classes provide package-specific error handling for layout
construction and address book ingestion.
"""

from __future__ import annotations

from pydantic_core import PydanticCustomError

# Package identifier for error context
PACKAGE_NAME = "atena_layout"


class AtenaLayoutError(PydanticCustomError):
    """Layout and ingestion error for atena_layout.

    Inherits from PydanticCustomError so it can be raised inside model
    validators (surfacing as a ValidationError of type "layout_validation")
    and still be raised directly by the ingestion helpers.
    """

    @classmethod
    def address_book_read(cls, path: object, error: Exception) -> AtenaLayoutError:
        """Build the error raised when an address book cannot be read."""
        return cls(
            "address_book_read",
            "Could not read address book {path}: {reason}",
            {"package": PACKAGE_NAME, "path": str(path), "reason": str(error)},
        )
