"""Addressee and postcard layout models.

This module contains the immutable Pydantic models that flow through the
layout engine: the normalized addressee, its joint recipients, and the
render-ready postcard layout.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from atena_layout.models.errors import PACKAGE_NAME, AtenaLayoutError

_FROZEN = ConfigDict(frozen=True)


class NormalizedAddressee(BaseModel):
    """Trimmed, defaulted fields of one address book row.

    No field is ever None; blank strings stand in for missing data.
    """

    model_config = _FROZEN

    postal_digits: str = Field(
        default="",
        max_length=7,
        pattern=r"^[0-9]*$",
        description="0-7 ASCII digits, in source order",
    )
    prefecture: str = ""
    city: str = ""
    street: str = ""
    building: str = ""
    last_name: str = ""
    first_name: str = ""
    honorific: str = ""


class JointRecipient(BaseModel):
    """A secondary recipient printed alongside the primary one.

    An empty ``last_name`` means the surname matched the primary surname
    and is printed only once.
    """

    model_config = _FROZEN

    last_name: str = ""
    first_name: str = ""
    honorific: str = ""


class Recipient(BaseModel):
    """The primary recipient."""

    model_config = _FROZEN

    last_name: str = ""
    first_name: str = ""
    honorific: str = ""


class PostalCode(BaseModel):
    """Postal code split into its two printed groups."""

    model_config = _FROZEN

    zone3: str = ""
    zone4: str = ""

    @property
    def digits(self) -> str:
        return self.zone3 + self.zone4

    @property
    def formatted(self) -> str:
        """Format as "123-4567" when all 7 digits are present, otherwise the bare digits."""
        if len(self.zone3) == 3 and len(self.zone4) == 4:
            return f"{self.zone3}-{self.zone4}"
        return self.digits


# Flat column names produced by PostcardLayout.to_dict()
LAYOUT_FIELDS: list[str] = [
    "postal_zone3",
    "postal_zone4",
    "postal_code",
    "address",
    "last_name",
    "first_name",
    "honorific",
    "all_given_names",
    "all_honorifics",
    "joint_last_names",
]


class PostcardLayout(BaseModel):
    """Render-ready address side of one postcard.

    ``all_given_names`` and ``all_honorifics`` are consumed in lockstep by
    renderers: index 0 is the primary recipient, index i (i >= 1) is the
    i-th included joint recipient, whose surname is ``joint_last_names[i - 1]``.
    """

    model_config = _FROZEN

    postal_code: PostalCode = Field(default_factory=PostalCode)
    address_lines: tuple[str, ...] = ("",)
    primary: Recipient = Field(default_factory=Recipient)
    all_given_names: tuple[str, ...] = ("",)
    all_honorifics: tuple[str, ...] = ("",)
    joint_last_names: tuple[str, ...] = ()

    @model_validator(mode="after")
    def check_recipient_alignment(self) -> Self:
        """Given names, honorifics and joint surnames must line up by index."""
        expected = 1 + len(self.joint_last_names)
        if len(self.all_given_names) != expected or len(self.all_honorifics) != expected:
            raise AtenaLayoutError(
                "layout_validation",
                "Recipient sequences are misaligned: {given} given names, "
                "{honorifics} honorifics, {expected} recipients",
                {
                    "package": PACKAGE_NAME,
                    "given": len(self.all_given_names),
                    "honorifics": len(self.all_honorifics),
                    "expected": expected,
                },
            )
        if not self.address_lines:
            raise AtenaLayoutError(
                "layout_validation",
                "A layout needs at least one address line",
                {"package": PACKAGE_NAME},
            )
        return self

    @property
    def recipient_count(self) -> int:
        return len(self.all_given_names)

    def recipients(self) -> list[tuple[str, str, str]]:
        """(last_name, given name, honorific) per printed recipient, in order."""
        last_names = (self.primary.last_name, *self.joint_last_names)
        return list(zip(last_names, self.all_given_names, self.all_honorifics, strict=True))

    def to_dict(self) -> dict[str, str]:
        """Flatten to one string per column; sequences are joined with newlines."""
        return {
            "postal_zone3": self.postal_code.zone3,
            "postal_zone4": self.postal_code.zone4,
            "postal_code": self.postal_code.formatted,
            "address": "\n".join(self.address_lines),
            "last_name": self.primary.last_name,
            "first_name": self.primary.first_name,
            "honorific": self.primary.honorific,
            "all_given_names": "\n".join(self.all_given_names),
            "all_honorifics": "\n".join(self.all_honorifics),
            "joint_last_names": "\n".join(self.joint_last_names),
        }
