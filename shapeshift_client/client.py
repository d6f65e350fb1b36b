"""ShapeShift API client using httpx."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

import httpx

from .classifier import classify
from .config import DEFAULT_CONFIG, ServerConfig
from .endpoints import ENDPOINTS, Operation, resolve_path
from .errors import InvalidArgumentError, MalformedResponseError, NotSupportedError, TransportError
from .models import MarketInfo, SupportedCoinsList, TransactionStatus, ValidateAddressResult
from .pairs import build_pair_identifier

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_int(value: Any) -> int:
    # truncates "600.0" like a plain integer cast of a decimal string
    return int(float(value))


class ShapeShiftClient:
    """Synchronous client for the ShapeShift REST API.

    Every call issues a single GET, runs the decoded body through the error
    classifier and converts the promised field. No state is kept between
    calls apart from the underlying connection pool.
    """

    def __init__(
        self,
        *,
        config: ServerConfig = DEFAULT_CONFIG,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        client_config = config.client
        self._http = httpx.Client(
            base_url=client_config.base_url,
            timeout=client_config.timeout_seconds,
            headers={"User-Agent": client_config.user_agent, "Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ShapeShiftClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @staticmethod
    def supports(operation: Operation) -> bool:
        """Whether this client implements ``operation``."""
        return ENDPOINTS[operation].supported

    def _get(self, operation: Operation, path: str) -> Any:
        endpoint = ENDPOINTS[operation]
        logger.debug("GET %s (%s)", path, operation.value)
        try:
            response = self._http.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("GET %s failed with status %s", path, exc.response.status_code)
            raise TransportError(f'Request failed due: "{exc}".', code=exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            logger.warning("GET %s failed: %s", path, exc)
            raise TransportError(f'Request failed due: "{exc}".') from exc
        except httpx.InvalidURL as exc:
            raise InvalidArgumentError(f"Cannot build a request URL from {path!r}: {exc}") from exc

        logger.debug("GET %s -> %s", path, response.status_code)
        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedResponseError(f"Response from {path} is not valid JSON") from exc

        return classify(body, endpoint)

    @staticmethod
    def _extract(body: Any, name: str, convert: Callable[[Any], T]) -> T:
        try:
            return convert(body[name])
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedResponseError(f"Response has no usable {name!r} field") from exc

    def get_rate(self, coin1: str, coin2: str) -> float:
        """Current exchange rate for the pair."""
        path = resolve_path(Operation.GET_RATE, pair=build_pair_identifier(coin1, coin2))
        return self._extract(self._get(Operation.GET_RATE, path), "rate", float)

    def get_limit(self, coin1: str, coin2: str) -> float:
        """Maximum deposit amount accepted for the pair."""
        path = resolve_path(Operation.GET_LIMIT, pair=build_pair_identifier(coin1, coin2))
        return self._extract(self._get(Operation.GET_LIMIT, path), "limit", float)

    def get_market_info(self, coin1: Optional[str] = None, coin2: Optional[str] = None) -> MarketInfo:
        """Market info for one pair, or for every market when no pair is given."""
        path = resolve_path(Operation.GET_MARKET_INFO, pair=build_pair_identifier(coin1, coin2))
        return MarketInfo(self._get(Operation.GET_MARKET_INFO, path))

    def get_time_remaining(self, address: str) -> int:
        """Seconds left before a pending fixed-amount transaction expires."""
        path = resolve_path(Operation.GET_TIME_REMAINING, address=address)
        return self._extract(self._get(Operation.GET_TIME_REMAINING, path), "seconds_remaining", _to_int)

    def get_supported_coins(self) -> SupportedCoinsList:
        path = resolve_path(Operation.GET_SUPPORTED_COINS)
        return self._get(Operation.GET_SUPPORTED_COINS, path)

    def validate_address(self, address: str, coin: str) -> ValidateAddressResult:
        """Check an address against the coin's format.

        An ``error`` in the body is reported on the result, not raised.
        """
        path = resolve_path(Operation.VALIDATE_ADDRESS, address=address, coin=coin)
        body = self._get(Operation.VALIDATE_ADDRESS, path)
        if not isinstance(body, dict):
            raise MalformedResponseError(f"Unexpected validateAddress response: {body!r}")
        return ValidateAddressResult.from_payload(body)

    def get_recent_transaction_list(self, max: int) -> List[Dict[str, Any]]:
        raise NotSupportedError(Operation.GET_RECENT_TRANSACTIONS)

    def get_status_of_deposit_to_address(self, address: str) -> TransactionStatus:
        raise NotSupportedError(Operation.GET_DEPOSIT_STATUS)

    def get_list_of_transactions_by_api_key(self, api_key: str) -> List[Dict[str, Any]]:
        raise NotSupportedError(Operation.GET_TRANSACTIONS_BY_API_KEY)

    def get_transactions_by_output_address(self, address: str) -> List[Dict[str, Any]]:
        raise NotSupportedError(Operation.GET_TRANSACTIONS_BY_OUTPUT_ADDRESS)
