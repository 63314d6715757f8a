import pytest

from atena_layout import (
    JointRecipient,
    NormalizedAddressee,
    build_layout,
    extract_joints,
    normalize_record,
)


def _lay_out(raw: dict[str, str], **kwargs: int):
    addressee = normalize_record(raw)
    return build_layout(addressee, extract_joints(raw, addressee.last_name), **kwargs)


class TestBuildLayout:
    """End-to-end layout of single rows."""

    def test_sato(self, sato_record: dict[str, str]) -> None:
        layout = _lay_out(sato_record)
        assert layout.postal_code.zone3 == "100"
        assert layout.postal_code.zone4 == "0001"
        assert layout.address_lines == ("東京都 千代田区 1-1",)
        assert layout.primary.last_name == "佐藤"
        assert layout.all_given_names == ("太郎", "花子")
        assert layout.all_honorifics == ("様", "様")
        assert layout.joint_last_names == ("",)

    def test_yamada(self, yamada_record: dict[str, str]) -> None:
        layout = _lay_out(yamada_record)
        assert layout.postal_code.formatted == "530-0001"
        assert layout.address_lines == ("大阪府 大阪市北区 梅田1-2-3", "〇〇ビル101")
        assert layout.primary.honorific == "先生"
        assert layout.all_given_names == ("一郎", "次郎", "さくら")
        assert layout.all_honorifics == ("先生", "殿", "様")
        assert layout.joint_last_names == ("鈴木", "")

    def test_narrow_width(self, sato_record: dict[str, str]) -> None:
        layout = _lay_out(sato_record, max_line_length=5)
        assert layout.address_lines == ("東京都 千", "代田区 1", "-1")

    def test_empty_row(self) -> None:
        """A row with nothing in it still yields a printable layout."""
        layout = _lay_out({})
        assert layout.postal_code.zone3 == ""
        assert layout.postal_code.zone4 == ""
        assert layout.address_lines == ("  ",)
        assert layout.all_given_names == ("",)
        assert layout.all_honorifics == ("様",)
        assert layout.joint_last_names == ()

    def test_partial_postal_code(self) -> None:
        layout = _lay_out({"郵便番号(自宅欄)": "12-34"})
        assert layout.postal_code.zone3 == "123"
        assert layout.postal_code.zone4 == "4"

    def test_explicit_joints(self) -> None:
        addressee = NormalizedAddressee(last_name="山田", first_name="一郎", honorific="様")
        joints = [
            JointRecipient(last_name="", first_name="花子", honorific="様"),
            JointRecipient(last_name="鈴木", first_name="次郎", honorific="殿"),
        ]
        layout = build_layout(addressee, joints)
        assert layout.recipients() == [
            ("山田", "一郎", "様"),
            ("", "花子", "様"),
            ("鈴木", "次郎", "殿"),
        ]

    def test_invalid_width(self, sato_record: dict[str, str]) -> None:
        with pytest.raises(ValueError):
            _lay_out(sato_record, max_line_length=0)
