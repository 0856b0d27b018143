# cbcvault/crypto/pkcs7.py

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import algorithms

from cbcvault.common.errors import LengthError, PaddingError

BLOCK_SIZE = algorithms.AES.block_size // 8  # 16 bytes


def pad(data: bytes) -> bytes:
    """
    Applies PKCS#7 padding up to the next multiple of BLOCK_SIZE.
    A block-aligned input (including b"") always gains one full block of padding.
    """
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    return padder.update(data) + padder.finalize()


def unpad(data: bytes) -> bytes:
    """
    Removes PKCS#7 padding, checking every padding byte, not just the last one.

    Raises LengthError for an empty or misaligned buffer and PaddingError for
    any inconsistent padding value.
    """
    length = len(data)
    if length == 0 or length % BLOCK_SIZE != 0:
        raise LengthError(
            f"invalid data length {length}: must be a non-zero multiple of {BLOCK_SIZE}",
            length=length, block_size=BLOCK_SIZE,
        )

    pad_len = data[-1]
    if pad_len == 0 or pad_len > BLOCK_SIZE:
        raise PaddingError(
            f"invalid padding value {pad_len}: must be in 1..{BLOCK_SIZE}",
            pad_len=pad_len, block_size=BLOCK_SIZE,
        )

    start = length - pad_len
    if start < 0:
        raise PaddingError(
            f"padding value {pad_len} exceeds data length {length}",
            pad_len=pad_len, length=length,
        )

    for offset in range(start, length):
        if data[offset] != pad_len:
            raise PaddingError(
                f"invalid padding byte 0x{data[offset]:02x} at offset {offset}, expected 0x{pad_len:02x}",
                pad_len=pad_len, offset=offset, found=data[offset],
            )

    return bytes(data[:start])
