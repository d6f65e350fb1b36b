"""Configuration for the ShapeShift client and its MCP server."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_BASE_URL = "https://shapeshift.io"


@dataclass
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    user_agent: str = "shapeshift-client"


@dataclass
class ServerConfig:
    client: ClientConfig = field(default_factory=ClientConfig)
    name: str = "shapeshift-mcp"


DEFAULT_CONFIG = ServerConfig()


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Build a ServerConfig from ``SHAPESHIFT_*`` environment variables.

    Unset variables keep their defaults.
    """
    env = os.environ if environ is None else environ
    defaults = ClientConfig()
    return ServerConfig(
        client=ClientConfig(
            base_url=env.get("SHAPESHIFT_BASE_URL", defaults.base_url),
            timeout_seconds=float(env.get("SHAPESHIFT_TIMEOUT", defaults.timeout_seconds)),
            user_agent=env.get("SHAPESHIFT_USER_AGENT", defaults.user_agent),
        )
    )
