from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from abstract_validation_base import ProcessLog

from atena_layout.config import LayoutSettings
from atena_layout.joints import extract_joints
from atena_layout.layout import build_layout
from atena_layout.models import (
    LAYOUT_FIELDS,
    ContactRecord,
    JointRecipient,
    LayoutResult,
    NormalizedAddressee,
    PostcardLayout,
)
from atena_layout.models.record import as_contact_record
from atena_layout.normalizer import normalize_record

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any] | ContactRecord


class LayoutService:
    """High-level facade for postcard layout operations.

    Runs the normalizer, the joint recipient resolver and the layout
    builder with one set of settings.

    Example:
        >>> service = LayoutService()
        >>> result = service.build({"氏名(姓)": "佐藤", "氏名(名)": "太郎"})
        >>> result.layout.all_honorifics
        ('様',)

        # Narrower address columns
        >>> service = LayoutService(LayoutSettings(max_line_length=16))
    """

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        """Initialize the layout service.

        Args:
            settings: Layout tunables. Defaults to LayoutSettings().
        """
        self._settings = settings or LayoutSettings()
        self._build_count = 0

    @property
    def settings(self) -> LayoutSettings:
        """Get the layout settings."""
        return self._settings

    @property
    def stats(self) -> dict[str, int]:
        """Number of layouts built by this service."""
        return {"build_count": self._build_count}

    def normalize(self, raw: RawRecord, log: ProcessLog | None = None) -> NormalizedAddressee:
        """Normalize one row with the configured default honorific."""
        return normalize_record(
            raw,
            default_honorific=self._settings.default_honorific,
            log=log,
        )

    def extract_joints(
        self,
        raw: RawRecord,
        primary_last_name: str,
        log: ProcessLog | None = None,
    ) -> list[JointRecipient]:
        """Extract joint recipients with the configured default honorific."""
        return extract_joints(
            raw,
            primary_last_name,
            default_honorific=self._settings.default_honorific,
            log=log,
        )

    def build(self, raw: RawRecord, *, index: int = 0) -> LayoutResult:
        """Lay out one row.

        Args:
            raw: Field-keyed row or ContactRecord.
            index: Position of the row in its source.

        Returns:
            LayoutResult with the layout, intermediate values and cleaning log.
        """
        record = as_contact_record(raw)
        log = ProcessLog()

        addressee = self.normalize(record, log)
        joints = self.extract_joints(record, addressee.last_name, log)
        layout = build_layout(
            addressee,
            joints,
            max_line_length=self._settings.max_line_length,
        )
        self._build_count += 1

        result = LayoutResult(
            index=index,
            raw_record=raw if isinstance(raw, Mapping) else record.model_dump(),
            addressee=addressee,
            joints=joints,
            layout=layout,
            process_log=log,
        )
        if addressee.postal_digits and not result.has_complete_postal_code:
            result.add_process_error(
                "postal_code",
                "Postal code has fewer than 7 digits",
                addressee.postal_digits,
            )
            logger.warning(
                "Row %d: postal code %r has fewer than 7 digits",
                index,
                addressee.postal_digits,
            )
        logger.debug(
            "Row %d: laid out %s %s with %d joint recipients",
            index,
            addressee.last_name,
            addressee.first_name,
            len(joints),
        )
        return result

    def build_layout(self, raw: RawRecord) -> PostcardLayout:
        """Lay out one row and return only the PostcardLayout."""
        return self.build(raw).layout

    def build_batch(self, records: Iterable[RawRecord]) -> list[LayoutResult]:
        """Lay out many rows, preserving their order.

        Args:
            records: Rows in print order.

        Returns:
            One LayoutResult per row, in input order.
        """
        results = [self.build(raw, index=i) for i, raw in enumerate(records)]
        logger.info("Built %d postcard layouts", len(results))
        return results

    def to_dict(self, raw: RawRecord) -> dict[str, str]:
        """Lay out one row and flatten it to layout columns."""
        return self.build_layout(raw).to_dict()

    def to_series(self, raw: RawRecord) -> pd.Series:
        """Lay out one row as a pandas Series of layout columns."""
        import pandas as pd

        return pd.Series(self.to_dict(raw))

    def build_dataframe(
        self,
        df: pd.DataFrame,
        *,
        prefix: str = "",
        inplace: bool = False,
    ) -> pd.DataFrame:
        """Add layout columns to a DataFrame of address book rows.

        Args:
            df: One address book row per DataFrame row.
            prefix: Prefix to add to new column names.
            inplace: If True, modify ``df`` in place.

        Returns:
            DataFrame with a column per entry of LAYOUT_FIELDS.
        """
        import pandas as pd

        from atena_layout.data import iter_records

        if not inplace:
            df = df.copy()

        rows = [self.to_dict(raw) for raw in iter_records(df)]
        laid_out = pd.DataFrame(rows, columns=LAYOUT_FIELDS, index=df.index)

        if prefix:
            laid_out.columns = [f"{prefix}{col}" for col in laid_out.columns]

        for col in laid_out.columns:
            df[col] = laid_out[col]

        return df


# Module-level convenience function
_default_service: LayoutService | None = None


def get_default_service() -> LayoutService:
    """Get the default LayoutService singleton.

    Returns:
        Shared LayoutService instance with default settings.
    """
    global _default_service
    if _default_service is None:
        _default_service = LayoutService()
    return _default_service


def build_layout_for(raw: RawRecord) -> PostcardLayout:
    """Lay out one row using the default service."""
    return get_default_service().build_layout(raw)


def build_layouts(records: Iterable[RawRecord]) -> list[PostcardLayout]:
    """Lay out many rows using the default service, preserving order."""
    return [result.layout for result in get_default_service().build_batch(records)]
