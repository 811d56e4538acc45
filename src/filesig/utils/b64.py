from __future__ import annotations

import base64
import binascii
from typing import Iterator


def b64e(data: bytes) -> str:
    """Standard base64 encode with padding"""
    return base64.b64encode(data).decode("ascii")


def b64d(value: str | bytes) -> bytes:
    """Strict standard base64 decode.

    Raises ``ValueError`` on any character outside the standard alphabet or on
    bad padding, instead of silently discarding it.
    """
    if isinstance(value, str):
        try:
            value = value.encode("ascii")
        except UnicodeEncodeError as exc:
            raise ValueError("base64 text must be ASCII") from exc
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64: {exc}") from exc


def wrap_lines(text: str, width: int = 64) -> Iterator[str]:
    for start in range(0, len(text), width):
        yield text[start:start + width]


__all__ = ["b64d", "b64e", "wrap_lines"]
