"""Typed results returned by the ShapeShift client."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

TransactionStatus = Dict[str, Any]
SupportedCoinsList = Dict[str, Any]


@dataclass
class MarketInfo:
    """Market info payload, passed through as the service sends it.

    For a single pair the payload is an object; without a pair the service
    answers with a list of such objects, exposed through ``markets``.
    """

    payload: Any

    def _field(self, name: str) -> Any:
        if isinstance(self.payload, dict):
            return self.payload.get(name)
        return None

    @property
    def pair(self) -> Optional[str]:
        return self._field("pair")

    @property
    def rate(self) -> Any:
        return self._field("rate")

    @property
    def limit(self) -> Any:
        return self._field("limit")

    @property
    def minimum(self) -> Any:
        return self._field("minimum")

    @property
    def max_limit(self) -> Any:
        return self._field("maxLimit")

    @property
    def miner_fee(self) -> Any:
        return self._field("minerFee")

    @property
    def markets(self) -> List["MarketInfo"]:
        if isinstance(self.payload, list):
            return [MarketInfo(entry) for entry in self.payload]
        return [self]


@dataclass
class ValidateAddressResult:
    is_valid: bool
    error: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ValidateAddressResult":
        error = payload.get("error")
        return cls(
            is_valid=bool(payload.get("isValid", False)),
            error=None if error is None else str(error),
            payload=payload,
        )
