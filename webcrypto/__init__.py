'''
    Description:
        - A WebCrypto-shaped RSA signature provider built on `cryptography`.
        - Exposes the SubtleCrypto coroutines (import_key, verify), the hash
          support oracle, base64url helpers and the provider error types.
'''

from .base64url import base64url_encode, base64url_decode, base64url_to_int, int_to_base64url
from .errors import (
    ErrorKind, CryptoError, DataError, NotSupportedError,
    InvalidAccessError, OperationError, UsageError,
)
from .hash_util import HashAlgorithm, is_supported, get_hash
from .rsa_key_management import CryptoKey, load_public_key_jwk, public_key_to_jwk
from .subtle_crypto import SignatureScheme, SubtleCrypto, subtle

__all__ = [
    "base64url_encode", "base64url_decode", "base64url_to_int", "int_to_base64url",
    "ErrorKind", "CryptoError", "DataError", "NotSupportedError",
    "InvalidAccessError", "OperationError", "UsageError",
    "HashAlgorithm", "is_supported", "get_hash",
    "CryptoKey", "load_public_key_jwk", "public_key_to_jwk",
    "SignatureScheme", "SubtleCrypto", "subtle",
]
