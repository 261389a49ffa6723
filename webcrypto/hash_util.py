# webcrypto/hash_util.py
"""
Hash algorithm names understood by the provider.
"""

from __future__ import annotations

from enum import Enum

from cryptography.hazmat.primitives import hashes


class HashAlgorithm(str, Enum):
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"


_HASHES = {
    HashAlgorithm.SHA1: hashes.SHA1,
    HashAlgorithm.SHA256: hashes.SHA256,
    HashAlgorithm.SHA384: hashes.SHA384,
    HashAlgorithm.SHA512: hashes.SHA512,
}

# JWK "alg" suffixes (RS256, PS512, ...)
_JWK_SUFFIX = {
    HashAlgorithm.SHA1: "1",
    HashAlgorithm.SHA256: "256",
    HashAlgorithm.SHA384: "384",
    HashAlgorithm.SHA512: "512",
}


def is_supported(name: str) -> bool:
    try:
        HashAlgorithm(name)
    except ValueError:
        return False
    return True


def get_hash(name: str) -> hashes.HashAlgorithm:
    """Return a fresh cryptography hash instance; raises ValueError if unknown."""
    return _HASHES[HashAlgorithm(name)]()


def digest_size(name: str) -> int:
    return get_hash(name).digest_size


def jwk_suffix(name: str) -> str:
    return _JWK_SUFFIX[HashAlgorithm(name)]
