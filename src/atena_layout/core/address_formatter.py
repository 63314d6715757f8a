"""Address formatting utilities.

This module builds the mailing address string printed on the postcard from
normalized address components. The only line break it introduces is the
semantic one before the building name; width-driven folding lives in
`atena_layout.core.folding`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from atena_layout.models.addressee import NormalizedAddressee

ADDRESS_SEPARATOR = " "
HARD_BREAK = "\n"


class AddressFormatter:
    """Utility class for composing address strings from components.

    All methods are stateless and can be used without instantiation via
    the module-level singleton.

    Example:
        >>> formatter = get_formatter()
        >>> formatter.compose("東京都", "千代田区", "1-1", "〇〇ビル101")
        '東京都 千代田区 1-1\\n〇〇ビル101'
    """

    @staticmethod
    def compose(prefecture: str, city: str, street: str, building: str) -> str:
        """Compose the address, breaking once before a non-blank building line.

        Blank prefecture/city/street still contribute their separator; the
        source data normally populates all three.

        Args:
            prefecture: Prefecture (都道府県).
            city: City/ward/town (市区町村).
            street: Block and lot number (番地等).
            building: Building name and room (建物名).

        Returns:
            Address string containing at most one explicit line break.
        """
        address = ADDRESS_SEPARATOR.join([prefecture, city, street])
        if building.strip():
            address += HARD_BREAK + building
        return address

    def compose_addressee(self, addressee: NormalizedAddressee) -> str:
        """Compose the address of a normalized addressee."""
        return self.compose(
            addressee.prefecture,
            addressee.city,
            addressee.street,
            addressee.building,
        )


def compose_address(prefecture: str, city: str, street: str, building: str) -> str:
    """Compose a mailing address string from its components.

    Standalone form of `AddressFormatter.compose` for callers holding
    individual components.
    """
    return AddressFormatter.compose(prefecture, city, street, building)


# Module-level singleton for convenience
_formatter: AddressFormatter | None = None


def get_formatter() -> AddressFormatter:
    """Get the singleton AddressFormatter instance.

    Returns:
        Shared AddressFormatter instance.
    """
    global _formatter
    if _formatter is None:
        _formatter = AddressFormatter()
    return _formatter
