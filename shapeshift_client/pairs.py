"""Composite coin-pair identifiers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgumentError


def build_pair_identifier(coin1: Optional[str] = None, coin2: Optional[str] = None) -> str:
    """Join two coin symbols into the service's pair identifier.

    ``("BTC", "ETH")`` becomes ``"BTC_ETH"``. Passing neither coin yields ``""``
    (no pair filter); passing only one is an error.
    """
    if (coin1 is None) != (coin2 is None):
        raise InvalidArgumentError("You must provide both or none of the coins.")
    if coin1 is None:
        return ""
    return f"{coin1}_{coin2}"


@dataclass(frozen=True)
class CoinPair:
    coin1: Optional[str] = None
    coin2: Optional[str] = None

    def __post_init__(self) -> None:
        # validates the both-or-neither rule eagerly
        build_pair_identifier(self.coin1, self.coin2)

    @property
    def identifier(self) -> str:
        return build_pair_identifier(self.coin1, self.coin2)
