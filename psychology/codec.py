"""Encoding of stored test data for URLs and storage.

A stored test is ``[personal_info, matrix]`` serialised as compact JSON and
then base64. Decoding never raises: any invalid payload yields a
``DecodedResult`` whose fields are all ``None``.
"""

from __future__ import annotations

import base64
import json
import logging
import re
from typing import Any
from urllib.parse import parse_qs, quote

from pydantic import BaseModel, ConfigDict

from psychology.settings import load_settings
from psychology.types import DecodedData, ensure_matrix


logger = logging.getLogger(__name__)

_DECODED_DATA_RE = re.compile(r"\[\[([+-]?\d,?)+],\[(\[([+-]?\d,?){5}],?){5}\]\]")


class DecodedResult(BaseModel):
    """Source value, decoded JSON text and parsed data of a payload."""

    model_config = ConfigDict(frozen=True)

    encoded: str | None = None
    decoded: str | None = None
    data: DecodedData | None = None


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------
def encode_data(data: Any) -> str:
    """Serialise *data* to compact JSON and encode it as base64."""
    text = json.dumps(data, separators=(",", ":"))
    return base64.b64encode(text.encode()).decode("ascii")


def encode_data_for_url(data: Any) -> str:
    """Base64 payload, percent-encoded for use as a query value."""
    return quote(encode_data(data), safe="")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def validate_decoded_data(value: str) -> bool:
    """Whether *value* looks like ``[[info...],[[5 digits] x 5]]``."""
    return _DECODED_DATA_RE.fullmatch(value) is not None


def is_json_string(value: str) -> bool:
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------
def _to_decoded_data(raw: list[Any]) -> DecodedData:
    info, matrix = raw
    ensure_matrix(matrix)
    return tuple(info), tuple(tuple(row) for row in matrix)


def decode_data(encoded_value: str | None) -> DecodedResult:
    """Decode a base64 payload into stored test data.

    Returns:
        DecodedResult with all fields set, or all ``None`` when the value is
        empty, not base64, not ASCII, not of the expected shape, not JSON
        or its matrix is not 5×5.
    """
    value = encoded_value.strip() if encoded_value else ""
    if not value:
        return DecodedResult()

    try:
        text = base64.b64decode(value, validate=True).decode("ascii")
    except ValueError as exc:
        # binascii.Error, UnicodeDecodeError and non-ASCII input text
        logger.debug("Rejected payload %r: %s", value[:40], exc)
        return DecodedResult()

    if not validate_decoded_data(text) or not is_json_string(text):
        logger.debug("Rejected payload %r: unexpected content", value[:40])
        return DecodedResult()

    try:
        data = _to_decoded_data(json.loads(text))
    except ValueError as exc:
        logger.debug("Rejected payload %r: %s", value[:40], exc)
        return DecodedResult()

    return DecodedResult(encoded=value, decoded=text, data=data)


def decode_data_from_query(query: str, key: str | None = None) -> DecodedResult:
    """Decode the payload stored under *key* in a URL query string.

    *key* defaults to the configured ``query_key`` (``encdata``).
    """
    if key is None:
        key = load_settings().query_key
    values = parse_qs(query.lstrip("?")).get(key)
    return decode_data(values[0] if values else None)
