"""Classification of application-level errors embedded in 200 responses.

The service never signals its own errors through HTTP status codes; instead a
JSON object comes back with an ``error`` field. Whether that field is fatal
depends on the endpoint's catalog entry.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .endpoints import EndpointDescriptor
from .errors import UNKNOWN_PAIR_MESSAGE, ApiError, UnknownPairError

logger = logging.getLogger(__name__)


def find_error(body: Any) -> Optional[Any]:
    """Return the ``error`` value of an object body, or None.

    Lists and scalars never carry an error.
    """
    if isinstance(body, dict):
        return body.get("error")
    return None


def classify(body: Any, endpoint: EndpointDescriptor) -> Any:
    """Raise for a fatal embedded error, otherwise return the (normalized) body."""
    error = find_error(body)

    if error is not None:
        if not endpoint.error_tolerant:
            message = str(error)
            logger.warning("API error from %s: %s", endpoint.path_template, message)
            if message == UNKNOWN_PAIR_MESSAGE:
                raise UnknownPairError(message)
            raise ApiError(message)
        logger.debug("Passing through error on tolerant endpoint %s: %s", endpoint.path_template, error)

    if endpoint.normalizer is not None:
        body = endpoint.normalizer(body)
    return body
