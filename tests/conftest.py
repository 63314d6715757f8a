"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def sato_record() -> dict[str, str]:
    """A one-family row: primary recipient plus a joint recipient sharing the surname."""
    return {
        "氏名(姓)": "佐藤",
        "氏名(名)": "太郎",
        "郵便番号(自宅欄)": "1000001",
        "自宅住所(都道府県)": "東京都",
        "自宅住所(市区町村)": "千代田区",
        "自宅住所(番地等)": "1-1",
        "自宅住所(建物名)": "",
        "敬称": "",
        "連名1(姓:自宅欄)": "佐藤",
        "連名1(名:自宅欄)": "花子",
        "連名1(敬称:自宅欄)": "",
    }


@pytest.fixture
def yamada_record() -> dict[str, str]:
    """A row with a building line, a different-surname joint and a skipped slot."""
    return {
        "氏名(姓)": " 山田 ",
        "氏名(名)": "一郎",
        "郵便番号(自宅欄)": "〒530-0001",
        "自宅住所(都道府県)": "大阪府",
        "自宅住所(市区町村)": "大阪市北区",
        "自宅住所(番地等)": "梅田1-2-3",
        "自宅住所(建物名)": "〇〇ビル101",
        "敬称": "先生",
        "連名1(姓:自宅欄)": "鈴木",
        "連名1(名:自宅欄)": "次郎",
        "連名1(敬称:自宅欄)": "殿",
        "連名2(姓:自宅欄)": " ",
        "連名2(名:自宅欄)": "",
        "連名3(姓:自宅欄)": "山田",
        "連名3(名:自宅欄)": "さくら",
    }
