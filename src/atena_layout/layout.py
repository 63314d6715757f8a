"""Postcard layout assembly."""

from __future__ import annotations

from collections.abc import Sequence

from atena_layout.core.address_formatter import get_formatter
from atena_layout.core.folding import DEFAULT_MAX_LINE_LENGTH, fold_address
from atena_layout.core.postal_code import get_postal_normalizer
from atena_layout.models.addressee import (
    JointRecipient,
    NormalizedAddressee,
    PostalCode,
    PostcardLayout,
    Recipient,
)


def build_layout(
    normalized: NormalizedAddressee,
    joints: Sequence[JointRecipient],
    *,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
) -> PostcardLayout:
    """Compose a normalized addressee and its joint recipients into a layout.

    Args:
        normalized: Output of `normalize_record`.
        joints: Output of `extract_joints`, in slot order.
        max_line_length: Fold width of the address column.

    Returns:
        Immutable PostcardLayout.

    Raises:
        ValueError: If ``max_line_length`` is not positive.
    """
    zone3, zone4 = get_postal_normalizer().split(normalized.postal_digits)
    address = get_formatter().compose_addressee(normalized)

    return PostcardLayout(
        postal_code=PostalCode(zone3=zone3, zone4=zone4),
        address_lines=tuple(fold_address(address, max_line_length)),
        primary=Recipient(
            last_name=normalized.last_name,
            first_name=normalized.first_name,
            honorific=normalized.honorific,
        ),
        all_given_names=(normalized.first_name, *(j.first_name for j in joints)),
        all_honorifics=(normalized.honorific, *(j.honorific for j in joints)),
        joint_last_names=tuple(j.last_name for j in joints),
    )
