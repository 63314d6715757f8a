"""Record normalization.

Turns a loosely keyed address book row into a `NormalizedAddressee`: every
text field trimmed, the postal code reduced to at most 7 digits, and a blank
honorific replaced by the default. Normalization never fails.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from abstract_validation_base import ProcessLog

from atena_layout.core.postal_code import get_postal_normalizer
from atena_layout.core.tracking import TransformationTracker
from atena_layout.models.addressee import NormalizedAddressee
from atena_layout.models.enums import DEFAULT_HONORIFIC
from atena_layout.models.record import ContactRecord, as_contact_record

_TEXT_FIELDS = (
    "prefecture",
    "city",
    "street",
    "building",
    "last_name",
    "first_name",
)


def resolve_honorific(value: str, default_honorific: str = DEFAULT_HONORIFIC) -> str:
    """Trim an honorific, defaulting only when nothing is left."""
    return value.strip() or default_honorific


def normalize_record(
    raw: Mapping[str, Any] | ContactRecord,
    *,
    default_honorific: str = DEFAULT_HONORIFIC,
    log: ProcessLog | None = None,
) -> NormalizedAddressee:
    """Normalize one address book row.

    Args:
        raw: Field-keyed row or an already built ContactRecord.
        default_honorific: Honorific used when the row leaves it blank.
        log: Optional ProcessLog that receives an entry per transformation.

    Returns:
        NormalizedAddressee with no missing fields.
    """
    record = as_contact_record(raw)
    tracker = TransformationTracker(log) if log is not None else None

    postal = get_postal_normalizer().parse(record.postal_code)
    values: dict[str, str] = {"postal_digits": postal.digits}
    if tracker:
        tracker.track_postal_code(record.postal_code, postal)

    for name in _TEXT_FIELDS:
        raw_value: str = getattr(record, name)
        values[name] = raw_value.strip()
        if tracker:
            tracker.track_trim(name, raw_value, values[name])

    honorific = record.honorific.strip()
    values["honorific"] = honorific or default_honorific
    if tracker:
        if honorific:
            tracker.track_trim("honorific", record.honorific, honorific)
        else:
            tracker.track_honorific_default("honorific", default_honorific)

    return NormalizedAddressee(**values)
