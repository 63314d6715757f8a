"""Japanese postal code normalization utilities.

Consolidates postal code cleaning and the zone3/zone4 split used by the
postcard layout into a single, reusable module. Malformed input is never
an error: stripping and truncation are the recovery policy.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Only ASCII digits survive; full-width digits are stripped like any other character.
_NON_DIGIT = re.compile(r"[^0-9]")

POSTAL_CODE_LENGTH = 7
ZONE3_LENGTH = 3


@dataclass(frozen=True)
class PostalCodeResult:
    """Result of postal code normalization.

    Attributes:
        digits: Up to 7 ASCII digits, in original order.
        zone3: The first 3 digits (shorter if the input was short).
        zone4: The remaining digits (0-4 characters).
        is_complete: True if exactly 7 digits were found.
        was_truncated: True if more than 7 digits were present in the input.
    """

    digits: str
    zone3: str
    zone4: str
    is_complete: bool
    was_truncated: bool

    @property
    def formatted(self) -> str:
        """Format as "123-4567" when complete, otherwise the bare digits."""
        if self.is_complete:
            return f"{self.zone3}-{self.zone4}"
        return self.digits


class PostalCodeNormalizer:
    """Consolidates postal code cleaning and splitting.

    Example:
        >>> normalizer = PostalCodeNormalizer()
        >>> result = normalizer.parse("〒100-0001")
        >>> print(result.zone3)  # "100"
        >>> print(result.zone4)  # "0001"
        >>> print(result.formatted)  # "100-0001"
    """

    @staticmethod
    def extract_digits(value: str | None) -> str:
        """Strip every non-digit character and keep at most the first 7 digits.

        Args:
            value: Raw postal code string (may be None or blank).

        Returns:
            String of 0-7 ASCII digits.
        """
        if not value:
            return ""
        return _NON_DIGIT.sub("", value)[:POSTAL_CODE_LENGTH]

    @staticmethod
    def split(digits: str) -> tuple[str, str]:
        """Split normalized digits into (zone3, zone4)."""
        return digits[:ZONE3_LENGTH], digits[ZONE3_LENGTH:]

    def parse(self, value: str | None) -> PostalCodeResult:
        """Normalize a raw postal code and split it into zones.

        Args:
            value: Raw postal code string.

        Returns:
            PostalCodeResult with the cleaned digits and zones.
        """
        all_digits = _NON_DIGIT.sub("", value or "")
        digits = all_digits[:POSTAL_CODE_LENGTH]
        zone3, zone4 = self.split(digits)
        return PostalCodeResult(
            digits=digits,
            zone3=zone3,
            zone4=zone4,
            is_complete=len(digits) == POSTAL_CODE_LENGTH,
            was_truncated=len(all_digits) > POSTAL_CODE_LENGTH,
        )


# Module-level singleton for convenience
_default_normalizer: PostalCodeNormalizer | None = None


def get_postal_normalizer() -> PostalCodeNormalizer:
    """Get the default PostalCodeNormalizer singleton.

    Returns:
        Shared PostalCodeNormalizer instance.
    """
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = PostalCodeNormalizer()
    return _default_normalizer
