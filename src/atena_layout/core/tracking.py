"""Transformation tracking for record normalization.

Tracks the silent cleaning and defaulting that happens while a raw address
book row is normalized, so callers can audit what changed between the
export and the printed postcard.
"""

from __future__ import annotations

from typing import Any

from abstract_validation_base import ProcessEntry, ProcessLog

from atena_layout.core.postal_code import PostalCodeResult


class OperationType:
    """Standard operation type constants for consistent categorization."""

    NORMALIZATION = "normalization"
    """Format standardization (postal code digits)"""

    FORMATTING = "formatting"
    """Whitespace changes"""

    CLEANING = "cleaning"
    """Removal of invalid data"""

    DEFAULTING = "defaulting"
    """A blank value replaced by a configured default"""

    SUPPRESSION = "suppression"
    """A value intentionally blanked for printing (shared surnames)"""


def record_cleaning(
    log: ProcessLog,
    field: str,
    original_value: Any,
    new_value: Any,
    reason: str,
    operation_type: str = OperationType.CLEANING,
) -> None:
    """Append a cleaning entry to ``log``.

    Args:
        log: ProcessLog to append to.
        field: Name of the field that was cleaned.
        original_value: The original value before transformation.
        new_value: The value after transformation.
        reason: Explanation of why the cleaning was performed.
        operation_type: Category of operation.
    """
    entry = ProcessEntry(
        entry_type="cleaning",
        field=field,
        message=reason,
        original_value=str(original_value) if original_value is not None else None,
        new_value=str(new_value) if new_value is not None else None,
        context={"operation_type": operation_type},
    )
    log.cleaning.append(entry)


class TransformationTracker:
    """Records normalization operations into a ProcessLog.

    The tracker records:
    - Postal code cleanup (separators stripped, extra digits truncated)
    - Whitespace trimming of text fields
    - Honorific defaulting
    - Joint recipient surname suppression
    """

    def __init__(self, log: ProcessLog) -> None:
        self.log = log

    def track_postal_code(self, raw_value: str, result: PostalCodeResult) -> None:
        """Track postal code stripping and truncation."""
        if result.was_truncated:
            record_cleaning(
                self.log,
                field="postal_code",
                original_value=raw_value,
                new_value=result.digits,
                reason="Postal code truncated to 7 digits",
                operation_type=OperationType.CLEANING,
            )
        elif raw_value.strip() != result.digits:
            record_cleaning(
                self.log,
                field="postal_code",
                original_value=raw_value,
                new_value=result.digits,
                reason="Non-digit characters removed from postal code",
                operation_type=OperationType.NORMALIZATION,
            )

    def track_trim(self, field: str, raw_value: str, cleaned: str) -> None:
        """Track whitespace removed from a text field."""
        if raw_value != cleaned:
            record_cleaning(
                self.log,
                field=field,
                original_value=raw_value,
                new_value=cleaned,
                reason="Surrounding whitespace trimmed",
                operation_type=OperationType.FORMATTING,
            )

    def track_honorific_default(self, field: str, default: str) -> None:
        """Track a blank honorific replaced by the default."""
        record_cleaning(
            self.log,
            field=field,
            original_value="",
            new_value=default,
            reason=f"Blank honorific defaulted to {default}",
            operation_type=OperationType.DEFAULTING,
        )

    def track_surname_suppression(self, index: int, surname: str) -> None:
        """Track a joint recipient surname omitted because it matches the primary."""
        record_cleaning(
            self.log,
            field=f"joint{index}_last_name",
            original_value=surname,
            new_value="",
            reason="Joint surname matches primary surname and is printed once",
            operation_type=OperationType.SUPPRESSION,
        )
