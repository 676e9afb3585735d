"""Best-effort decoding of compressed render result fields.

The service may send ``html`` and ``fetchResponses`` as base64 encoded gzip
data, or already as plain values. Decoding therefore never fails: when any
step does not apply, the original value is returned unchanged. Callers rely
on this so that an encoding mismatch cannot turn a successful render into
an error.
"""

import base64
import binascii
import gzip
import json
import zlib
from typing import Any

import structlog

from ..constants import CONSTANTS

logger = structlog.get_logger(__name__)

_DECODE_ERRORS = (binascii.Error, ValueError, TypeError, OSError, EOFError, zlib.error)


def _gunzip_base64(value: str) -> str:
    return gzip.decompress(base64.b64decode(value)).decode("utf-8")


def decode_compressed_text(value: Any) -> Any:
    """Return the text inside base64+gzip ``value``, or ``value`` itself."""
    if not value:
        return value
    try:
        return _gunzip_base64(value)
    except _DECODE_ERRORS as e:
        logger.debug("Field left undecoded", reason=type(e).__name__)
        return value


def decode_compressed_json(value: Any) -> Any:
    """Like ``decode_compressed_text`` but also parses the text as JSON."""
    if not value:
        return value
    try:
        return json.loads(_gunzip_base64(value))
    except _DECODE_ERRORS as e:
        logger.debug("Field left undecoded", reason=type(e).__name__)
        return value


def decode_render_fields(data: Any) -> Any:
    """Return a copy of a raw render result with compressed fields decoded."""
    if not isinstance(data, dict):
        return data
    decoded = dict(data)
    for key in CONSTANTS.COMPRESSED_TEXT_FIELDS:
        if decoded.get(key):
            decoded[key] = decode_compressed_text(decoded[key])
    for key in CONSTANTS.COMPRESSED_JSON_FIELDS:
        if decoded.get(key):
            decoded[key] = decode_compressed_json(decoded[key])
    return decoded
