"""Joint recipient (連名) extraction.

Up to three secondary recipients are read from the numbered joint columns.
Slots with neither surname nor given name are skipped without renumbering,
and a surname identical to the primary surname is blanked so that the
shared family name is printed once.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from abstract_validation_base import ProcessLog

from atena_layout.core.tracking import TransformationTracker
from atena_layout.models.addressee import JointRecipient
from atena_layout.models.enums import DEFAULT_HONORIFIC, JOINT_INDICES
from atena_layout.models.record import ContactRecord, as_contact_record
from atena_layout.normalizer import resolve_honorific


def extract_joints(
    raw: Mapping[str, Any] | ContactRecord,
    primary_last_name: str,
    *,
    default_honorific: str = DEFAULT_HONORIFIC,
    log: ProcessLog | None = None,
) -> list[JointRecipient]:
    """Extract the joint recipients of a row, in slot order.

    Args:
        raw: Field-keyed row or an already built ContactRecord.
        primary_last_name: Trimmed surname of the primary recipient.
        default_honorific: Honorific used when a slot leaves it blank.
        log: Optional ProcessLog that receives suppression/defaulting entries.

    Returns:
        0-3 JointRecipient objects.
    """
    record = as_contact_record(raw)
    tracker = TransformationTracker(log) if log is not None else None
    joints: list[JointRecipient] = []

    for index in JOINT_INDICES:
        slot = record.joint(index)
        last_name = slot.last_name.strip()
        first_name = slot.first_name.strip()
        if not last_name and not first_name:
            continue

        honorific = resolve_honorific(slot.honorific, default_honorific)
        if tracker and not slot.honorific.strip():
            tracker.track_honorific_default(f"joint{index}_honorific", default_honorific)

        # Exact comparison; no case or width folding
        if last_name == primary_last_name:
            if tracker:
                tracker.track_surname_suppression(index, last_name)
            last_name = ""

        joints.append(
            JointRecipient(last_name=last_name, first_name=first_name, honorific=honorific)
        )

    return joints
