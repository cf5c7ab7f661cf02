"""Base64 helpers for the document and signature payload fields."""

import base64
import binascii
from typing import Optional, Union


def encode_base64(data: Optional[Union[str, bytes]]) -> str:
    """Encode *data* with the standard base64 alphabet.

    Text is encoded as UTF-8 first.  ``None`` encodes to an empty string.
    """
    if data is None:
        return ""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("ascii")


def decode_base64(data: str) -> bytes:
    """Inverse of :func:`encode_base64`.

    Raises:
        ValueError: If *data* is not valid base64.
    """
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 input: {exc}") from exc
