"""atena-layout: postcard address layouts from はがきデザインキット address books.

This package turns address book rows into print-ready address sides for
vertically written Japanese postcards:
- Postal code cleanup and zone3/zone4 split
- Address composition with a building-line break and fixed-width folding
- Joint recipients (連名) with the shared surname printed once
- Pandas integration and a command line interface

Quick Start:
    >>> from atena_layout import LayoutService
    >>> service = LayoutService()
    >>> layout = service.build_layout({
    ...     "氏名(姓)": "佐藤",
    ...     "氏名(名)": "太郎",
    ...     "郵便番号(自宅欄)": "100-0001",
    ...     "自宅住所(都道府県)": "東京都",
    ...     "自宅住所(市区町村)": "千代田区",
    ...     "自宅住所(番地等)": "1-1",
    ...     "連名1(姓:自宅欄)": "佐藤",
    ...     "連名1(名:自宅欄)": "花子",
    ... })
    >>> layout.address_lines
    ('東京都 千代田区 1-1',)
    >>> layout.all_given_names
    ('太郎', '花子')

    # Read an export and lay out every row
    >>> from atena_layout import read_address_book, iter_records
    >>> df = read_address_book("address_book.csv")
    >>> results = service.build_batch(iter_records(df))
"""

from __future__ import annotations  # noqa: I001

# Import order is intentional to avoid circular imports - do not auto-fix
from atena_layout.core import (
    AtenaValidationError,
    OperationType,
    PostalCodeNormalizer,
    PostalCodeResult,
    ProcessEntry,
    ProcessLog,
    compose_address,
    fold_address,
    iter_graphemes,
)
from atena_layout.models import (
    DEFAULT_HONORIFIC,
    JOINT_INDICES,
    LAYOUT_FIELDS,
    PREVIEW_COLUMNS,
    AtenaLayoutError,
    ContactRecord,
    JointField,
    JointRecipient,
    LayoutResult,
    NormalizedAddressee,
    PostalCode,
    PostcardLayout,
    Recipient,
    RecordField,
)
from atena_layout.config import LayoutSettings
from atena_layout.normalizer import normalize_record
from atena_layout.joints import extract_joints
from atena_layout.layout import build_layout
from atena_layout.data import iter_records, read_address_book
from atena_layout.pandas_ext import layouts_to_frame, register_accessor
from atena_layout.service import (
    LayoutService,
    build_layout_for,
    build_layouts,
    get_default_service,
)

__version__ = "0.1.0"
__package_name__ = "atena-layout"

__all__ = [
    # Version
    "__version__",
    # Primary interface
    "LayoutService",
    "LayoutSettings",
    "get_default_service",
    "build_layout_for",
    "build_layouts",
    # Layout engine
    "normalize_record",
    "extract_joints",
    "build_layout",
    "compose_address",
    "fold_address",
    "iter_graphemes",
    "PostalCodeNormalizer",
    "PostalCodeResult",
    # Models
    "ContactRecord",
    "NormalizedAddressee",
    "JointRecipient",
    "Recipient",
    "PostalCode",
    "PostcardLayout",
    "LayoutResult",
    "RecordField",
    "JointField",
    "JOINT_INDICES",
    "DEFAULT_HONORIFIC",
    "PREVIEW_COLUMNS",
    "LAYOUT_FIELDS",
    # Process logging
    "ProcessEntry",
    "ProcessLog",
    "OperationType",
    # Errors
    "AtenaValidationError",
    "AtenaLayoutError",
    # Ingestion
    "read_address_book",
    "iter_records",
    # Pandas integration
    "layouts_to_frame",
    "register_accessor",
]
