from pathlib import Path

import pytest

pytest.importorskip("pandas")

import pandas as pd  # noqa: E402

from atena_layout import AtenaLayoutError, read_address_book  # noqa: E402
from atena_layout.data import drop_blank_rows, iter_records  # noqa: E402

HEADER = "氏名(姓),氏名(名),郵便番号(自宅欄),自宅住所(都道府県),自宅住所(市区町村),敬称"


def write_book(path: Path, *rows: str, encoding: str = "cp932") -> Path:
    path.write_bytes("\r\n".join([HEADER, *rows, ""]).encode(encoding))
    return path


class TestReadAddressBook:
    """Test reading address book exports."""

    def test_reads_cp932(self, tmp_path: Path) -> None:
        book = write_book(
            tmp_path / "book.csv",
            "佐藤,太郎,100-0001,東京都,千代田区,",
            "山田,一郎,〒530-0001,大阪府,大阪市北区,先生",
        )
        df = read_address_book(book)

        assert len(df) == 2
        assert list(df["氏名(姓)"]) == ["佐藤", "山田"]
        assert df.loc[1, "郵便番号(自宅欄)"] == "〒530-0001"

    def test_empty_cells_are_blank_strings(self, tmp_path: Path) -> None:
        book = write_book(tmp_path / "book.csv", "佐藤,,,,,")
        (record,) = iter_records(read_address_book(book))
        assert record["氏名(名)"] == ""
        assert record["敬称"] == ""

    def test_leading_zeros_kept(self, tmp_path: Path) -> None:
        book = write_book(tmp_path / "book.csv", "田中,健太,0600001,北海道,札幌市中央区,")
        df = read_address_book(book)
        assert df.loc[0, "郵便番号(自宅欄)"] == "0600001"

    def test_blank_rows_dropped(self, tmp_path: Path) -> None:
        book = write_book(
            tmp_path / "book.csv",
            "佐藤,太郎,1000001,東京都,千代田区,",
            ",,,,,",
            " ,　,,,,",
            "山田,一郎,5300001,大阪府,大阪市北区,",
        )
        df = read_address_book(book)
        assert list(df["氏名(姓)"]) == ["佐藤", "山田"]
        assert list(df.index) == [0, 1]

    def test_utf8(self, tmp_path: Path) -> None:
        book = write_book(tmp_path / "book.csv", "佐藤,太郎,,,,", encoding="utf-8")
        df = read_address_book(book, encoding="utf-8")
        assert df.loc[0, "氏名(姓)"] == "佐藤"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(AtenaLayoutError) as exc_info:
            read_address_book(tmp_path / "missing.csv")
        assert exc_info.value.type == "address_book_read"
        assert "missing.csv" in exc_info.value.context["path"]

    def test_wrong_encoding(self, tmp_path: Path) -> None:
        book = write_book(tmp_path / "book.csv", "佐藤,太郎,,,,")
        with pytest.raises(AtenaLayoutError):
            read_address_book(book, encoding="ascii")

    def test_empty_file(self, tmp_path: Path) -> None:
        book = tmp_path / "empty.csv"
        book.write_bytes(b"")
        with pytest.raises(AtenaLayoutError):
            read_address_book(book)


class TestHelpers:
    def test_drop_blank_rows_empty_frame(self) -> None:
        df = pd.DataFrame(columns=["氏名(姓)"])
        assert drop_blank_rows(df).empty

    def test_drop_blank_rows_logs(self, caplog) -> None:
        df = pd.DataFrame({"氏名(姓)": ["佐藤", "", "  "]})
        result = drop_blank_rows(df)
        assert list(result["氏名(姓)"]) == ["佐藤"]
        assert "Dropped 2 blank rows" in caplog.text

    def test_iter_records_in_order(self) -> None:
        df = pd.DataFrame({"氏名(姓)": ["佐藤", "山田"], "氏名(名)": ["太郎", "一郎"]})
        assert list(iter_records(df)) == [
            {"氏名(姓)": "佐藤", "氏名(名)": "太郎"},
            {"氏名(姓)": "山田", "氏名(名)": "一郎"},
        ]
