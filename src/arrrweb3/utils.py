from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .client import ARRRweb3

SATOSHIS_PER_COIN = Decimal(100_000_000)
TRANSPARENT_ADDRESS_LENGTH = 34
SAPLING_ADDRESS_LENGTH = 78


def is_pirate_address(address: object) -> bool:
    """Shape check for a transparent Pirate address; the daemon does real validation."""
    if not isinstance(address, str):
        return False
    return len(address) == TRANSPARENT_ADDRESS_LENGTH and address[:1] in ("R", "5")


def is_shielded_address(address: object) -> bool:
    if not isinstance(address, str):
        return False
    return len(address) == SAPLING_ADDRESS_LENGTH and address.startswith("zs1")


def append_hex_prefix(value: str) -> str:
    return value if value.startswith("0x") else "0x" + value


def trim_hex_prefix(value: str) -> str:
    return value[2:] if value.startswith("0x") else value


def to_utf8(hex_str: str) -> str:
    return bytes.fromhex(trim_hex_prefix(hex_str)).decode("utf-8")


def from_utf8(text: str) -> str:
    return text.encode("utf-8").hex()


def to_satoshi(amount: Union[str, int, float, Decimal]) -> int:
    sats = Decimal(str(amount)) * SATOSHIS_PER_COIN
    if sats != sats.to_integral_value():
        raise ValueError(f"Amount has more than 8 decimal places: {amount}")
    return int(sats)


def from_satoshi(sats: int) -> Decimal:
    return Decimal(sats) / SATOSHIS_PER_COIN


async def is_wallet_encrypted(client: "ARRRweb3") -> bool:
    """An encrypted wallet reports ``unlocked_until`` in getwalletinfo."""
    info = await client.get_wallet_info()
    return "unlocked_until" in info
