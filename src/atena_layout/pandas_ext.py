from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from atena_layout.models import LAYOUT_FIELDS, PostcardLayout

if TYPE_CHECKING:
    import pandas as pd

    from atena_layout.service import LayoutService


class AtenaLayoutAccessor:
    """Pandas accessor for postcard layouts.

    Provides layout methods directly on DataFrames of address book rows.

    Usage:
        >>> from atena_layout.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = read_address_book("address_book.csv")
        >>> df.atena.layouts()
    """

    def __init__(self, pandas_obj: pd.DataFrame) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas DataFrame this accessor is attached to.
        """
        self._obj = pandas_obj
        self._service: LayoutService | None = None

    def _get_service(self) -> LayoutService:
        """Get or create the LayoutService instance."""
        if self._service is None:
            from atena_layout.service import get_default_service

            self._service = get_default_service()
        return self._service

    def layouts(self, *, service: LayoutService | None = None) -> list[PostcardLayout]:
        """Lay out every row, in DataFrame order.

        Args:
            service: Optional LayoutService to use.

        Returns:
            One PostcardLayout per row.
        """
        from atena_layout.data import iter_records

        svc = service or self._get_service()
        return [result.layout for result in svc.build_batch(iter_records(self._obj))]

    def to_frame(self, *, service: LayoutService | None = None) -> pd.DataFrame:
        """Lay out every row and return only the flattened layout columns."""
        frame = layouts_to_frame(self.layouts(service=service))
        frame.index = self._obj.index
        return frame


def register_accessor(name: str = "atena") -> None:
    """Register the layout accessor on pandas DataFrames.

    After calling this, you can use:
        >>> df.atena.layouts()

    Args:
        name: Name for the accessor (default: "atena").
    """
    import pandas as pd

    if not hasattr(pd.DataFrame, name):
        pd.api.extensions.register_dataframe_accessor(name)(AtenaLayoutAccessor)


def layouts_to_frame(layouts: Iterable[PostcardLayout]) -> pd.DataFrame:
    """Flatten layouts into a DataFrame with one column per LAYOUT_FIELDS entry."""
    import pandas as pd

    return pd.DataFrame([layout.to_dict() for layout in layouts], columns=LAYOUT_FIELDS)
