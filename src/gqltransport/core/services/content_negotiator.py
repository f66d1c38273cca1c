"""
Content negotiation for the JSON POST transport.

Only ``POST`` requests whose ``Content-Type`` media type is
``application/json`` are claimed. Parameters such as ``charset`` are ignored
and the media type comparison is case-insensitive.
"""

from __future__ import annotations

import logging
import re

from gqltransport.core.constants import APPLICATION_JSON

logger = logging.getLogger(__name__)

# RFC 7230 token characters
_TOKEN_PATTERN = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_QUOTED_STRING_PATTERN = re.compile(r'^"(?:[^"\\]|\\.)*"$')


def parse_media_type(value: str | None) -> tuple[str, dict[str, str]] | None:
    """Split a ``Content-Type`` value into its media type and parameters.

    Args:
        value: Raw header value, possibly ``None``

    Returns:
        ``(media_type, params)`` with the media type and parameter names
        lower-cased, or ``None`` when the value is empty or malformed.
    """
    if not value:
        return None

    media_type, *raw_params = value.split(";")
    media_type = media_type.strip().lower()
    main_type, sep, sub_type = media_type.partition("/")
    if not sep or not _TOKEN_PATTERN.match(main_type) or not _TOKEN_PATTERN.match(
        sub_type
    ):
        return None

    params: dict[str, str] = {}
    for index, raw in enumerate(raw_params):
        raw = raw.strip()
        if not raw:
            # Only a single trailing separator may be empty
            if index == len(raw_params) - 1:
                continue
            return None
        key, eq, param_value = raw.partition("=")
        key = key.strip().lower()
        param_value = param_value.strip()
        if not eq or not _TOKEN_PATTERN.match(key):
            return None
        if _QUOTED_STRING_PATTERN.match(param_value):
            param_value = param_value[1:-1]
        elif not _TOKEN_PATTERN.match(param_value):
            return None
        if key in params:
            return None
        params[key] = param_value

    return media_type, params


def is_json_media_type(content_type: str | None) -> bool:
    """Return True when the header names ``application/json``."""
    parsed = parse_media_type(content_type)
    return parsed is not None and parsed[0] == APPLICATION_JSON


def supports(method: str, content_type: str | None) -> bool:
    """Decide whether a request is eligible for the JSON POST transport.

    Args:
        method: HTTP request method
        content_type: Value of the ``Content-Type`` header, if any

    Returns:
        True if the request should be decoded and dispatched
    """
    accepted = method.upper() == "POST" and is_json_media_type(content_type)
    if not accepted and logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Rejecting request: method=%s content_type=%r", method, content_type
        )
    return accepted
