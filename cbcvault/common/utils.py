# cbcvault/common/utils.py

import base64
import binascii
from typing import Union

from cbcvault.common.errors import EncodingError

DEFAULT_ENCODING = "utf-8"

BytesLike = Union[bytes, bytearray, memoryview, str]


def to_bytes(data: BytesLike, encoding: str = DEFAULT_ENCODING) -> bytes:
    """Returns an immutable private copy of the input (str is encoded)."""
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes-like or str, got {type(data).__name__}")


def b64_encode(data: bytes) -> str:
    """Base64 encodes bytes for transmission (standard alphabet, '=' padded)."""
    return base64.b64encode(data).decode('ascii')


def b64_decode(data: Union[str, bytes]) -> bytes:
    """Strictly decodes standard base64; anything outside the alphabet is rejected."""
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"invalid encoding: {e}", input_length=len(data))
