"""MCP server exposing the ShapeShift client as tools."""
from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from .client import ShapeShiftClient
from .config import DEFAULT_CONFIG, ServerConfig, config_from_env
from .errors import ShapeShiftError
from .pairs import build_pair_identifier

logger = logging.getLogger(__name__)

# Global server config - can be overridden via environment or configure_server
_config = DEFAULT_CONFIG
server = FastMCP(_config.name)
_client = ShapeShiftClient(config=_config)


@server.tool()
async def get_rate(coin1: str, coin2: str) -> Dict[str, Any]:
    """Get the exchange rate for a coin pair (e.g. BTC, ETH)."""
    try:
        return {"pair": build_pair_identifier(coin1, coin2), "rate": _client.get_rate(coin1, coin2)}
    except ShapeShiftError as exc:
        return {"error": str(exc)}


@server.tool()
async def get_limit(coin1: str, coin2: str) -> Dict[str, Any]:
    """Get the maximum deposit amount for a coin pair."""
    try:
        return {"pair": build_pair_identifier(coin1, coin2), "limit": _client.get_limit(coin1, coin2)}
    except ShapeShiftError as exc:
        return {"error": str(exc)}


@server.tool()
async def get_market_info(coin1: str = "", coin2: str = "") -> Dict[str, Any]:
    """Get market info for a pair, or for all markets when both coins are empty."""
    try:
        info = _client.get_market_info(coin1 or None, coin2 or None)
        return {"markets": [market.payload for market in info.markets]}
    except ShapeShiftError as exc:
        return {"error": str(exc)}


@server.tool()
async def get_time_remaining(address: str) -> Dict[str, Any]:
    """Get the seconds remaining on a pending fixed-amount transaction."""
    try:
        return {"address": address, "seconds_remaining": _client.get_time_remaining(address)}
    except ShapeShiftError as exc:
        return {"error": str(exc)}


@server.tool()
async def get_supported_coins() -> Dict[str, Any]:
    """List the coins currently supported by ShapeShift."""
    try:
        return _client.get_supported_coins()
    except ShapeShiftError as exc:
        return {"error": str(exc)}


@server.tool()
async def validate_address(address: str, coin: str) -> Dict[str, Any]:
    """Check whether an address is valid for the given coin."""
    try:
        result = _client.validate_address(address, coin)
        return {key: value for key, value in asdict(result).items() if key != "payload"}
    except ShapeShiftError as exc:
        return {"error": str(exc)}


def configure_server(config: ServerConfig) -> None:
    """Swap in a new ShapeShift client built from ``config``, closing the old one."""
    global _config, _client
    _client.close()
    _config = config
    _client = ShapeShiftClient(config=config)


def main() -> None:
    """Entry point to run the MCP server over stdio."""
    logging.basicConfig(level=logging.INFO)
    configure_server(config_from_env())
    logger.info("Serving ShapeShift API at %s", _config.client.base_url)
    server.run()


if __name__ == "__main__":  # pragma: no cover
    main()
