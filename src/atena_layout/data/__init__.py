"""Address book ingestion.

Reads はがきデザインキット exports into DataFrames of raw rows for the
layout engine.
"""

from __future__ import annotations

from atena_layout.data.address_book import drop_blank_rows, iter_records, read_address_book
from atena_layout.models.enums import PREVIEW_COLUMNS

__all__ = [
    "PREVIEW_COLUMNS",
    "drop_blank_rows",
    "iter_records",
    "read_address_book",
]
