"""Static catalog of ShapeShift API endpoints.

Each logical operation maps to a path template and to the policy applied to
its responses: whether an embedded ``error`` field is tolerated, whether the
client implements the call at all, and an optional body normalizer.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote

from .errors import InvalidArgumentError


class Operation(str, Enum):
    GET_RATE = "getRate"
    GET_LIMIT = "getLimit"
    GET_MARKET_INFO = "getMarketInfo"
    GET_TIME_REMAINING = "getTimeRemaining"
    GET_SUPPORTED_COINS = "getSupportedCoins"
    VALIDATE_ADDRESS = "validateAddress"
    GET_RECENT_TRANSACTIONS = "getRecentTransactionList"
    GET_DEPOSIT_STATUS = "getStatusOfDepositToAddress"
    GET_TRANSACTIONS_BY_API_KEY = "getListOfTransactionsByApiKey"
    GET_TRANSACTIONS_BY_OUTPUT_ADDRESS = "getTransactionsByOutputAddress"


@dataclass(frozen=True)
class EndpointDescriptor:
    path_template: str
    error_tolerant: bool = False
    supported: bool = True
    normalizer: Optional[Callable[[Any], Any]] = None


def normalize_isvalid_casing(body: Any) -> Any:
    """Rename ``isvalid`` to ``isValid`` in a validateAddress body.

    The service has been observed to answer with either casing. Only applies
    when ``isValid`` is absent; the body is modified in place and returned.
    """
    if isinstance(body, dict) and "isValid" not in body and "isvalid" in body:
        body["isValid"] = body.pop("isvalid")
    return body


ENDPOINTS: Mapping[Operation, EndpointDescriptor] = MappingProxyType(
    {
        Operation.GET_RATE: EndpointDescriptor("rate/{pair}"),
        Operation.GET_LIMIT: EndpointDescriptor("limit/{pair}"),
        Operation.GET_MARKET_INFO: EndpointDescriptor("marketinfo/{pair}"),
        Operation.GET_TIME_REMAINING: EndpointDescriptor("timeremaining/{address}"),
        Operation.GET_SUPPORTED_COINS: EndpointDescriptor("getcoins"),
        Operation.VALIDATE_ADDRESS: EndpointDescriptor(
            "validateAddress/{address}/{coin}",
            error_tolerant=True,
            normalizer=normalize_isvalid_casing,
        ),
        # Documented remotely, not implemented here.
        Operation.GET_RECENT_TRANSACTIONS: EndpointDescriptor("recenttx/{max}", supported=False),
        Operation.GET_DEPOSIT_STATUS: EndpointDescriptor("txStat/{address}", supported=False),
        Operation.GET_TRANSACTIONS_BY_API_KEY: EndpointDescriptor("txbyapikey/{api_key}", supported=False),
        Operation.GET_TRANSACTIONS_BY_OUTPUT_ADDRESS: EndpointDescriptor(
            "txbyaddress/{address}/{api_key}", supported=False
        ),
    }
)


def resolve_path(operation: Operation, **params: Any) -> str:
    """Fill the operation's path template with ``params``.

    Each value is escaped as a single path segment, so ``/``, ``?`` or ``#``
    in an address cannot change which resource is requested.
    """
    template = ENDPOINTS[operation].path_template
    segments = {name: quote(str(value), safe="") for name, value in params.items()}
    try:
        return template.format(**segments)
    except KeyError as exc:
        raise InvalidArgumentError(f"Missing parameter {exc.args[0]!r} for {operation.value}") from exc
