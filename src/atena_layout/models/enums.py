"""Address book field enumerations and constants."""

from __future__ import annotations

from enum import Enum


class RecordField(str, Enum):
    """Column labels of the はがきデザインキット address book export."""

    LAST_NAME = "氏名(姓)"
    FIRST_NAME = "氏名(名)"
    POSTAL_CODE = "郵便番号(自宅欄)"
    PREFECTURE = "自宅住所(都道府県)"
    CITY = "自宅住所(市区町村)"
    STREET = "自宅住所(番地等)"
    BUILDING = "自宅住所(建物名)"
    HONORIFIC = "敬称"
    CATEGORY = "カテゴリ"
    HISTORY = "送受履歴"
    ADDRESS_ID = "デザインキット住所ID"


class JointField(str, Enum):
    """Per-index joint recipient column templates."""

    LAST_NAME = "連名{index}(姓:自宅欄)"
    FIRST_NAME = "連名{index}(名:自宅欄)"
    FULL_NAME = "連名{index}(姓名:自宅欄)"
    HONORIFIC = "連名{index}(敬称:自宅欄)"

    def key(self, index: int) -> str:
        """Column label for joint recipient ``index``."""
        return self.value.format(index=index)


# Joint recipient slots, in display order
JOINT_INDICES: tuple[int, ...] = (1, 2, 3)

DEFAULT_HONORIFIC = "様"

_TRAILING_FIELDS = (RecordField.CATEGORY, RecordField.HISTORY, RecordField.ADDRESS_ID)


def _preview_columns() -> list[str]:
    columns = [f.value for f in RecordField if f not in _TRAILING_FIELDS]
    for index in JOINT_INDICES:
        columns.extend(
            field.key(index)
            for field in (
                JointField.LAST_NAME,
                JointField.FIRST_NAME,
                JointField.FULL_NAME,
                JointField.HONORIFIC,
            )
        )
    columns.extend(f.value for f in _TRAILING_FIELDS)
    return columns


# Columns shown when previewing an address book, in export order
PREVIEW_COLUMNS: list[str] = _preview_columns()
