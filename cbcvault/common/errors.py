# cbcvault/common/errors.py


class AESError(Exception):
    """Base class for every failure raised by the encrypt/decrypt pipeline."""

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class ValidationError(AESError):
    """Key or IV has the wrong length (BAD KEY / BAD IV)."""

    @property
    def field(self) -> str:
        return self.context.get("field", "")

    @property
    def expected(self) -> int:
        return self.context.get("expected", 0)

    @property
    def actual(self) -> int:
        return self.context.get("actual", 0)


class CipherInitError(AESError):
    """The AES primitive rejected the key."""
    pass


class EncodingError(AESError):
    """Ciphertext text is not valid standard base64, or plaintext is not valid text."""
    pass


class LengthError(AESError):
    """Buffer is empty or not a multiple of the block size."""

    @property
    def length(self) -> int:
        return self.context.get("length", 0)


class PaddingError(AESError):
    """PKCS#7 padding value or padding bytes are inconsistent."""

    @property
    def pad_len(self) -> int:
        return self.context.get("pad_len", 0)
