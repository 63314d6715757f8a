"""Atena Layout Core - address layout primitives.

This module contains the domain-agnostic building blocks of the layout
engine: postal code splitting, address composition, line folding, error
types and transformation tracking.

Usage:
    from atena_layout.core import (
        # Process logging (from abstract_validation_base)
        ProcessEntry,
        ProcessLog,
        # Layout primitives
        compose_address,
        fold_address,
        PostalCodeNormalizer,
        # Errors
        AtenaValidationError,
    )
"""

from __future__ import annotations

from abstract_validation_base import ProcessEntry, ProcessLog

from atena_layout.core.address_formatter import (
    AddressFormatter,
    compose_address,
    get_formatter,
)
from atena_layout.core.errors import AtenaValidationError
from atena_layout.core.folding import (
    DEFAULT_MAX_LINE_LENGTH,
    fold_address,
    grapheme_length,
    iter_graphemes,
)
from atena_layout.core.postal_code import (
    PostalCodeNormalizer,
    PostalCodeResult,
    get_postal_normalizer,
)
from atena_layout.core.tracking import OperationType, TransformationTracker, record_cleaning

__all__ = [
    # Errors
    "AtenaValidationError",
    # Process logging (from abstract_validation_base)
    "ProcessEntry",
    "ProcessLog",
    # Transformation tracking
    "OperationType",
    "TransformationTracker",
    "record_cleaning",
    # Postal codes
    "PostalCodeNormalizer",
    "PostalCodeResult",
    "get_postal_normalizer",
    # Address formatting
    "AddressFormatter",
    "compose_address",
    "get_formatter",
    # Folding
    "DEFAULT_MAX_LINE_LENGTH",
    "fold_address",
    "grapheme_length",
    "iter_graphemes",
]
