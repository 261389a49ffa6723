'''
    Description:
        - RSA public key handling for the provider: building cryptography key
          objects from JWK members and the opaque CryptoKey handle returned by
          import_key.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional

from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from .base64url import base64url_to_int, int_to_base64url


@dataclass(frozen=True)
class CryptoKey:

    """Opaque key handle. Algorithm and hash are fixed at import time."""

    algorithm: str                     # "RSASSA-PKCS1-v1_5" | "RSA-PSS"
    hash: str                          # "SHA-256", ...
    usages: FrozenSet[str]
    extractable: bool
    _public_key: RSAPublicKey = field(repr=False, compare=False)
    type: str = "public"

    @property
    def modulus_length(self) -> int:
        return self._public_key.key_size

    @property
    def modulus_bytes(self) -> int:
        return (self._public_key.key_size + 7) // 8


def load_public_key_jwk(e_b64u: str, n_b64u: str) -> RSAPublicKey:
    ''' Build an RSA public key from base64url exponent and modulus.
        Raises ValueError for malformed encodings or out-of-range values. '''
    e = base64url_to_int(e_b64u)
    n = base64url_to_int(n_b64u)
    return rsa.RSAPublicNumbers(e, n).public_key()


def public_key_to_jwk(pub: RSAPublicKey, alg: Optional[str] = None) -> Dict[str, object]:
    numbers = pub.public_numbers()
    jwk: Dict[str, object] = {
        "kty": "RSA",
        "e": int_to_base64url(numbers.e),
        "n": int_to_base64url(numbers.n),
    }
    if alg:
        jwk["alg"] = alg
    return jwk
