from cbcvault.common.errors import (
    AESError, CipherInitError, EncodingError, LengthError, PaddingError, ValidationError,
)
from cbcvault.crypto.aes import (
    IV_SIZE, KEY_SIZE, AESCipher, create_handle, decrypt, decrypt_text, encrypt, validate_key_iv,
)
from cbcvault.crypto.pkcs7 import BLOCK_SIZE, pad, unpad

__all__ = [
    "AESError", "CipherInitError", "EncodingError", "LengthError", "PaddingError",
    "ValidationError", "AESCipher", "create_handle", "encrypt", "decrypt", "decrypt_text",
    "validate_key_iv", "pad", "unpad", "KEY_SIZE", "IV_SIZE", "BLOCK_SIZE",
]

__version__ = "0.1.0"
