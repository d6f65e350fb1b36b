"""Client for the ShapeShift exchange-rate API."""
from __future__ import annotations

from .client import ShapeShiftClient
from .endpoints import ENDPOINTS, EndpointDescriptor, Operation
from .errors import (
    ApiError,
    ApiErrorKind,
    InvalidArgumentError,
    MalformedResponseError,
    NotSupportedError,
    ShapeShiftError,
    TransportError,
    UnknownPairError,
)
from .models import MarketInfo, ValidateAddressResult
from .pairs import CoinPair, build_pair_identifier

__all__ = [
    "ApiError",
    "ApiErrorKind",
    "CoinPair",
    "ENDPOINTS",
    "EndpointDescriptor",
    "InvalidArgumentError",
    "MalformedResponseError",
    "MarketInfo",
    "NotSupportedError",
    "Operation",
    "ShapeShiftClient",
    "ShapeShiftError",
    "TransportError",
    "UnknownPairError",
    "ValidateAddressResult",
    "build_pair_identifier",
]
