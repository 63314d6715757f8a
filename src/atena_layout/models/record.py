"""Structured address book record.

`ContactRecord` is built once at the ingestion boundary from a loosely keyed
row. It accepts either the export's Japanese column labels or snake_case
names, and treats missing keys, None and NaN as blank strings. Values are
kept as read; trimming and defaulting belong to the normalizer.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from atena_layout.models.enums import JOINT_INDICES, JointField, RecordField


def _blank_if_missing(value: Any) -> str:
    """Coerce None/NaN to "" and any other scalar to str."""
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    if isinstance(value, str):
        return value
    return str(value)


class JointFields(BaseModel):
    """Raw values of one joint recipient slot."""

    model_config = ConfigDict(frozen=True)

    last_name: str = ""
    first_name: str = ""
    honorific: str = ""

    @field_validator("last_name", "first_name", "honorific", mode="before")
    @classmethod
    def _coerce_blank(cls, value: Any) -> str:
        return _blank_if_missing(value)

    @property
    def is_blank(self) -> bool:
        """True if neither surname nor given name has content."""
        return not self.last_name.strip() and not self.first_name.strip()


def _alias(field: RecordField, name: str) -> AliasChoices:
    return AliasChoices(field.value, name)


class ContactRecord(BaseModel):
    """One addressee row of the address book export.

    Example:
        >>> record = ContactRecord.from_mapping({"氏名(姓)": "佐藤", "連名1(名:自宅欄)": "花子"})
        >>> record.last_name
        '佐藤'
        >>> record.joints[0].first_name
        '花子'
    """

    model_config = ConfigDict(
        extra="ignore",  # Ignore columns the layout does not use
        frozen=True,
        populate_by_name=True,
    )

    last_name: str = Field(
        default="",
        description="Primary recipient surname",
        validation_alias=_alias(RecordField.LAST_NAME, "last_name"),
    )
    first_name: str = Field(
        default="",
        description="Primary recipient given name",
        validation_alias=_alias(RecordField.FIRST_NAME, "first_name"),
    )
    postal_code: str = Field(
        default="",
        description="Postal code as exported, separators included",
        validation_alias=_alias(RecordField.POSTAL_CODE, "postal_code"),
    )
    prefecture: str = Field(
        default="",
        validation_alias=_alias(RecordField.PREFECTURE, "prefecture"),
    )
    city: str = Field(
        default="",
        validation_alias=_alias(RecordField.CITY, "city"),
    )
    street: str = Field(
        default="",
        description="Block and lot number",
        validation_alias=_alias(RecordField.STREET, "street"),
    )
    building: str = Field(
        default="",
        description="Building name and room number",
        validation_alias=_alias(RecordField.BUILDING, "building"),
    )
    honorific: str = Field(
        default="",
        validation_alias=_alias(RecordField.HONORIFIC, "honorific"),
    )
    joints: tuple[JointFields, ...] = Field(
        default_factory=lambda: tuple(JointFields() for _ in JOINT_INDICES),
        description="Joint recipient slots 1-3, in index order",
    )

    @field_validator(
        "last_name",
        "first_name",
        "postal_code",
        "prefecture",
        "city",
        "street",
        "building",
        "honorific",
        mode="before",
    )
    @classmethod
    def _coerce_blank(cls, value: Any) -> str:
        return _blank_if_missing(value)

    @model_validator(mode="before")
    @classmethod
    def _collect_joint_columns(cls, data: Any) -> Any:
        """Gather the flat per-index joint columns into ``joints``."""
        if not isinstance(data, Mapping) or "joints" in data:
            return data

        collected = dict(data)
        collected["joints"] = tuple(
            {
                "last_name": _lookup(data, JointField.LAST_NAME.key(i), f"joint{i}_last_name"),
                "first_name": _lookup(data, JointField.FIRST_NAME.key(i), f"joint{i}_first_name"),
                "honorific": _lookup(data, JointField.HONORIFIC.key(i), f"joint{i}_honorific"),
            }
            for i in JOINT_INDICES
        )
        return collected

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> ContactRecord:
        """Build a record from a field-keyed row."""
        return cls.model_validate(dict(raw))

    def joint(self, index: int) -> JointFields:
        """Joint slot by its 1-based source index."""
        return self.joints[JOINT_INDICES.index(index)]


def _lookup(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def as_contact_record(raw: Mapping[str, Any] | ContactRecord) -> ContactRecord:
    """Return ``raw`` as a ContactRecord, building one if needed."""
    if isinstance(raw, ContactRecord):
        return raw
    return ContactRecord.from_mapping(raw)
