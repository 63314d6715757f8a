"""Result classes for layout operations.

This module contains the dataclass pairing a built postcard layout with
the intermediate values and the cleaning log that produced it.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from abstract_validation_base import ProcessEntry, ProcessLog

if TYPE_CHECKING:
    from atena_layout.models.addressee import JointRecipient, NormalizedAddressee, PostcardLayout


@dataclass
class LayoutResult:
    """Result of laying out one address book row.

    ``index`` is the row's position in its source, which is also its print
    order.
    """

    index: int
    raw_record: Mapping[str, Any]
    addressee: NormalizedAddressee
    joints: list[JointRecipient]
    layout: PostcardLayout
    process_log: ProcessLog = field(default_factory=ProcessLog)

    @property
    def has_complete_postal_code(self) -> bool:
        return len(self.addressee.postal_digits) == 7

    def to_dict(self) -> dict[str, Any]:
        """Flat dict of the layout columns, tagged with the source index."""
        return {"index": self.index, **self.layout.to_dict()}

    def add_process_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Track a problem noticed while laying out the row.

        Args:
            field: Name of the field with the problem.
            message: Message describing the issue.
            value: The problematic value (optional).
            context: Additional context dict (optional).
        """
        entry = ProcessEntry(
            entry_type="error",
            field=field,
            message=message,
            original_value=str(value) if value is not None else None,
            context=context or {},
        )
        self.process_log.errors.append(entry)

    def aggregate_logs(self) -> list[dict[str, Any]]:
        """Combine cleaning and error entries.

        Returns:
            List of dicts suitable for pd.DataFrame(), sorted by timestamp,
            each tagged with the source row index.
        """
        all_entries: list[dict[str, Any]] = []
        for entry in self.process_log.cleaning:
            all_entries.append({**entry.model_dump(), "row": self.index})
        for entry in self.process_log.errors:
            all_entries.append({**entry.model_dump(), "row": self.index})
        return sorted(all_entries, key=lambda x: str(x.get("timestamp", "")))

    def get_cleaning_summary_by_type(self) -> dict[str, int]:
        """Count cleaning operations by operation type."""
        return dict(
            Counter(
                op.context.get("operation_type", "cleaning") for op in self.process_log.cleaning
            )
        )
