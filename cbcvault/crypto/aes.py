# cbcvault/crypto/aes.py

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.backends import default_backend

from cbcvault.common.errors import (
    CipherInitError, EncodingError, LengthError, PaddingError, ValidationError,
)
from cbcvault.common.utils import DEFAULT_ENCODING, BytesLike, b64_decode, b64_encode, to_bytes
from cbcvault.crypto.pkcs7 import BLOCK_SIZE, pad, unpad

KEY_SIZE = 32 # AES-256 (32 bytes)
IV_SIZE = BLOCK_SIZE


def validate_key_iv(key: bytes, iv: bytes) -> None:
    """Checks key and IV lengths for AES-256-CBC."""
    if len(key) != KEY_SIZE:
        raise ValidationError(
            f"key must be {KEY_SIZE} bytes (256 bits), got {len(key)}",
            field="key", expected=KEY_SIZE, actual=len(key),
        )
    if len(iv) != IV_SIZE:
        raise ValidationError(
            f"iv must be {IV_SIZE} bytes (128 bits), got {len(iv)}",
            field="iv", expected=IV_SIZE, actual=len(iv),
        )


def _build_cipher(key: bytes, iv: bytes) -> Cipher:
    try:
        return Cipher(algorithms.AES(key), modes.CBC(iv), backend=default_backend())
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise CipherInitError(f"failed to create AES cipher: {e}", key_length=len(key))


def _encrypt_blocks(cipher: Cipher, plaintext: bytes) -> str:
    # Each call gets its own encryptor, so CBC chaining state is never shared.
    padded_data = pad(plaintext)
    encryptor = cipher.encryptor()
    ciphertext = encryptor.update(padded_data) + encryptor.finalize()
    return b64_encode(ciphertext)


def _decode_ciphertext(text) -> bytes:
    decoded = b64_decode(text)
    if len(decoded) == 0 or len(decoded) % BLOCK_SIZE != 0:
        raise LengthError(
            f"invalid ciphertext length {len(decoded)}: must be a non-zero multiple of {BLOCK_SIZE}",
            length=len(decoded), block_size=BLOCK_SIZE,
        )
    return decoded


def _decrypt_blocks(cipher: Cipher, ciphertext: bytes) -> bytes:
    decryptor = cipher.decryptor()
    padded_data = decryptor.update(ciphertext) + decryptor.finalize()
    try:
        return unpad(padded_data)
    except (LengthError, PaddingError) as e:
        raise type(e)(f"unpad failed: {e.message}", **e.context) from e


def _decode_text(plaintext: bytes, encoding: str) -> str:
    try:
        return plaintext.decode(encoding)
    except UnicodeDecodeError as e:
        raise EncodingError(f"plaintext is not valid {encoding}: {e}", encoding=encoding)


def encrypt(plaintext: BytesLike, key: bytes, iv: bytes) -> str:
    """Encrypts with AES-256-CBC and PKCS#7 padding; returns standard base64 text."""
    key, iv = to_bytes(key), to_bytes(iv)
    validate_key_iv(key, iv)
    cipher = _build_cipher(key, iv)
    return _encrypt_blocks(cipher, to_bytes(plaintext))


def decrypt(ciphertext: str, key: bytes, iv: bytes) -> bytes:
    """Decrypts base64 AES-256-CBC ciphertext and strips PKCS#7 padding."""
    key, iv = to_bytes(key), to_bytes(iv)
    validate_key_iv(key, iv)
    decoded = _decode_ciphertext(ciphertext)
    cipher = _build_cipher(key, iv)
    return _decrypt_blocks(cipher, decoded)


def decrypt_text(ciphertext: str, key: bytes, iv: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    return _decode_text(decrypt(ciphertext, key, iv), encoding)


class AESCipher:
    """
    Reusable AES-256-CBC handle bound to one key/IV pair.

    Key and IV are copied on construction and never mutated afterwards; each
    call builds its own encryptor/decryptor, so one instance can be shared by
    many threads without locking.

    NOTE: the same IV is used for every call. Identical plaintext prefixes
    produce identical leading ciphertext blocks under one handle.
    """

    def __init__(self, key: bytes, iv: bytes):
        self._key = to_bytes(key)
        self._iv = to_bytes(iv)
        validate_key_iv(self._key, self._iv)
        self.cipher = _build_cipher(self._key, self._iv)

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def iv(self) -> bytes:
        return self._iv

    def __repr__(self):
        return f"{self.__class__.__name__}(key=<{len(self._key)} bytes>, iv=<{len(self._iv)} bytes>)"

    def encrypt(self, plaintext: BytesLike) -> str:
        """Encrypts using the instance key and IV."""
        return _encrypt_blocks(self.cipher, to_bytes(plaintext))

    def decrypt(self, ciphertext: str) -> bytes:
        """Decrypts using the instance key and IV."""
        return _decrypt_blocks(self.cipher, _decode_ciphertext(ciphertext))

    def decrypt_text(self, ciphertext: str, encoding: str = DEFAULT_ENCODING) -> str:
        return _decode_text(self.decrypt(ciphertext), encoding)


def create_handle(key: bytes, iv: bytes) -> AESCipher:
    """Validates key/IV once and returns a reusable AESCipher."""
    return AESCipher(key, iv)
