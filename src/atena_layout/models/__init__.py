"""Layout models package.

This package contains the record, addressee and layout models and the
result dataclass.
"""

from __future__ import annotations

from atena_layout.models.addressee import (
    LAYOUT_FIELDS,
    JointRecipient,
    NormalizedAddressee,
    PostalCode,
    PostcardLayout,
    Recipient,
)
from atena_layout.models.enums import (
    DEFAULT_HONORIFIC,
    JOINT_INDICES,
    PREVIEW_COLUMNS,
    JointField,
    RecordField,
)
from atena_layout.models.errors import PACKAGE_NAME, AtenaLayoutError
from atena_layout.models.record import ContactRecord, JointFields
from atena_layout.models.results import LayoutResult

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "AtenaLayoutError",
    # Enums and constants
    "RecordField",
    "JointField",
    "JOINT_INDICES",
    "DEFAULT_HONORIFIC",
    "PREVIEW_COLUMNS",
    "LAYOUT_FIELDS",
    # Records
    "ContactRecord",
    "JointFields",
    # Layout models
    "NormalizedAddressee",
    "JointRecipient",
    "Recipient",
    "PostalCode",
    "PostcardLayout",
    # Results
    "LayoutResult",
]
