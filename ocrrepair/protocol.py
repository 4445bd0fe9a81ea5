"""
JSON Lines request/response framing.

Each input line holds one request object::

    {"text": "Th1s is a smal1 tost.", "meta": {"languages": ["en"]}}

and produces exactly one response line::

    {"text": "...", "original": "...", "diagnostics": {...}, "suggestions": [...]}

A line that is not a usable request object is treated as literal text
with no language hints; it is never reported as an error.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TextIO

from ocrrepair.models import CorrectionResult, Request

if TYPE_CHECKING:
    from ocrrepair.ocr.pipeline import RepairPipeline

logger = logging.getLogger(__name__)

LINE_TERMINATORS = "\r\n"


def _extract_languages(payload: dict[str, Any]) -> list[str]:
    meta = payload.get("meta")
    if not isinstance(meta, dict):
        return []
    values = meta.get("languages")
    if not isinstance(values, list):
        return []

    languages = []
    for value in values:
        if not isinstance(value, str):
            continue
        trimmed = value.strip()
        if trimmed:
            languages.append(trimmed)
    return languages


def parse_request(line: str) -> Request:
    """
    Decode one input line into a Request.

    Args:
        line: Raw input line, with or without its line terminator.

    Returns:
        Request with the "text" field and "meta.languages" hints, or the
        whole raw line as text with no hints if the line is not a usable
        request object.

    Example:
        >>> parse_request('{"text": "he11o", "meta": {"languages": ["en"]}}')
        Request(text='he11o', languages=['en'])
        >>> parse_request("plain text")
        Request(text='plain text', languages=[])
    """
    raw = line.rstrip(LINE_TERMINATORS)
    if not raw.strip().startswith("{"):
        return Request(text=raw)

    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow
        logger.debug("Treating malformed request as text: %s", e)
        return Request(text=raw)

    if not isinstance(payload, dict):
        return Request(text=raw)

    text = payload.get("text")
    if not isinstance(text, str):
        logger.debug("Request has no usable text field; treating line as text")
        return Request(text=raw)

    return Request(text=text, languages=_extract_languages(payload))


def encode_response(result: CorrectionResult) -> str:
    """
    Encode a result as one compact JSON line (without terminator).

    Non-ASCII characters are escaped, so any text the pipeline echoes back
    survives the channel.
    """
    return json.dumps(result.to_dict(), separators=(",", ":"), allow_nan=False)


def serve(pipeline: RepairPipeline, stdin: TextIO, stdout: TextIO) -> int:
    """
    Answer every request line from ``stdin`` on ``stdout``.

    Requests are handled strictly one after another; each response is
    flushed as soon as it is written. End of input ends the loop.

    Returns:
        Number of requests served.
    """
    served = 0
    for line in stdin:
        request = parse_request(line)
        result = pipeline.process(request)
        stdout.write(encode_response(result))
        stdout.write("\n")
        stdout.flush()
        served += 1
    logger.debug("Input closed after %d requests", served)
    return served
