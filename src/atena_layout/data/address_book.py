from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Union

from atena_layout.config import DEFAULT_ENCODING
from atena_layout.models.errors import AtenaLayoutError

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def read_address_book(
    path: Union[str, Path],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> pd.DataFrame:
    """Read an address book export into a DataFrame of strings.

    Decoding and CSV tokenization are left to pandas. Every cell is read as
    text (so postal codes keep their leading zeros) and rows whose values
    are all blank are dropped.

    Args:
        path: Path to the exported CSV file.
        encoding: File encoding; exports are Shift_JIS (cp932) by default.

    Returns:
        DataFrame with one row per addressee, in file order.

    Raises:
        AtenaLayoutError: If the file is missing, undecodable or not CSV.
    """
    import pandas as pd

    try:
        df = pd.read_csv(path, encoding=encoding, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        # pandas.errors.ParserError and EmptyDataError are ValueErrors
        raise AtenaLayoutError.address_book_read(path, e) from e

    df = drop_blank_rows(df)
    logger.info("Read %d addressees from %s", len(df), path)
    return df


def drop_blank_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Drop rows in which every value is blank after trimming."""
    if df.empty:
        return df
    text = df.fillna("").astype(str)
    has_content = text.apply(lambda col: col.str.strip() != "").any(axis=1)
    dropped = int((~has_content).sum())
    if dropped:
        logger.warning("Dropped %d blank rows", dropped)
    return df.loc[has_content].reset_index(drop=True)


def iter_records(df: pd.DataFrame) -> Iterator[dict[str, str]]:
    """Yield each row as a column-keyed dict, in order."""
    for row in df.to_dict(orient="records"):
        yield {str(k): v for k, v in row.items()}
