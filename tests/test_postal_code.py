import pytest

from atena_layout.core.postal_code import PostalCodeNormalizer, get_postal_normalizer


class TestExtractDigits:
    """Test PostalCodeNormalizer.extract_digits."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("123-4567", "1234567"),
            ("12-34", "1234"),
            ("", ""),
            ("1000001", "1000001"),
            ("〒100-0001", "1000001"),
            (" 100 0001 ", "1000001"),
            ("12345678901", "1234567"),
            ("abc", ""),
        ],
    )
    def test_strips_and_truncates(self, raw: str, expected: str) -> None:
        """Non-digits are removed and only the first 7 digits are kept."""
        assert PostalCodeNormalizer.extract_digits(raw) == expected

    def test_none_is_blank(self) -> None:
        """Missing postal codes normalize to an empty string."""
        assert PostalCodeNormalizer.extract_digits(None) == ""

    def test_full_width_digits_are_not_digits(self) -> None:
        """Only ASCII digits survive."""
        assert PostalCodeNormalizer.extract_digits("１００-０００１") == ""


class TestParse:
    """Test PostalCodeNormalizer.parse."""

    def test_complete_code(self) -> None:
        result = get_postal_normalizer().parse("100-0001")
        assert result.digits == "1000001"
        assert result.zone3 == "100"
        assert result.zone4 == "0001"
        assert result.is_complete
        assert not result.was_truncated
        assert result.formatted == "100-0001"

    def test_short_code(self) -> None:
        """Short codes split without padding."""
        result = get_postal_normalizer().parse("12-34")
        assert result.zone3 == "123"
        assert result.zone4 == "4"
        assert not result.is_complete
        assert result.formatted == "1234"

    def test_very_short_code(self) -> None:
        result = get_postal_normalizer().parse("12")
        assert (result.zone3, result.zone4) == ("12", "")

    def test_truncated_code(self) -> None:
        result = get_postal_normalizer().parse("123-4567-89")
        assert result.digits == "1234567"
        assert result.was_truncated

    def test_singleton(self) -> None:
        assert get_postal_normalizer() is get_postal_normalizer()
