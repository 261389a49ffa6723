# webcrypto/subtle_crypto.py

"""
SubtleCrypto provider (RSA signature subset)
--------------------------------------------

A WebCrypto-shaped front for the `cryptography` library:

- import_key("jwk", {...}, {"name": ..., "hash": {"name": ...}}, extractable, usages)
- verify({"name": ..., "saltLength": ...}, key, signature, data)

Both calls are coroutines. The RSA work runs in a worker thread so the
caller suspends until it completes. Failures are raised as CryptoError
subclasses (see webcrypto.errors); a signature that simply does not verify
returns False.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from . import hash_util
from .errors import DataError, InvalidAccessError, NotSupportedError, OperationError, UsageError
from .rsa_key_management import CryptoKey, load_public_key_jwk
from .rsa_verify import rsa_verify_pkcs1v15, rsa_verify_pss

log = logging.getLogger(__name__)


class SignatureScheme(str, Enum):
    RSASSA_PKCS1_V1_5 = "RSASSA-PKCS1-v1_5"
    RSA_PSS = "RSA-PSS"


# JWK "alg" prefixes per scheme
_JWK_ALG_PREFIX = {
    SignatureScheme.RSASSA_PKCS1_V1_5: "RS",
    SignatureScheme.RSA_PSS: "PS",
}

# Usages a public RSA signature key may carry
PUBLIC_KEY_USAGES = frozenset({"verify"})


def _scheme(name: Any) -> SignatureScheme:
    try:
        return SignatureScheme(name)
    except ValueError:
        raise NotSupportedError(f"unsupported algorithm {name!r}") from None


def _algorithm_name(algorithm: Any) -> Any:
    if isinstance(algorithm, str):
        return algorithm
    if isinstance(algorithm, Mapping):
        return algorithm.get("name")
    return None


def _hash_name(algorithm: Mapping[str, Any]) -> str:
    h = algorithm.get("hash")
    if isinstance(h, Mapping):
        h = h.get("name")
    if not isinstance(h, str) or not hash_util.is_supported(h):
        raise NotSupportedError(f"unsupported hash {h!r}")
    return h


class SubtleCrypto:

    """RSA signature verification behind a WebCrypto-like interface."""

    # ---------------- import_key ----------------

    async def import_key(
        self,
        fmt: str,
        key_data: Mapping[str, Any],
        algorithm: Mapping[str, Any],
        extractable: bool,
        key_usages: Iterable[str],
    ) -> CryptoKey:
        if fmt != "jwk":
            raise NotSupportedError(f"unsupported key format {fmt!r}")
        if not isinstance(algorithm, Mapping):
            raise NotSupportedError("algorithm must be a dictionary")
        scheme = _scheme(algorithm.get("name"))
        hash_name = _hash_name(algorithm)

        usages = frozenset(key_usages)
        if not usages or not usages <= PUBLIC_KEY_USAGES:
            raise UsageError(f"invalid usages {sorted(usages)} for an RSA public key")

        self._check_jwk(key_data, scheme, hash_name, extractable, usages)

        try:
            pub = await asyncio.to_thread(load_public_key_jwk, key_data["e"], key_data["n"])
        except ValueError as e:
            raise DataError(f"bad RSA key material: {e}") from e

        log.debug("imported %d-bit %s/%s public key", pub.key_size, scheme.value, hash_name)
        return CryptoKey(
            algorithm=scheme.value,
            hash=hash_name,
            usages=usages,
            extractable=bool(extractable),
            _public_key=pub,
        )

    @staticmethod
    def _check_jwk(jwk: Mapping[str, Any], scheme: SignatureScheme, hash_name: str,
                   extractable: bool, usages: frozenset) -> None:
        if not isinstance(jwk, Mapping):
            raise DataError("JWK must be a dictionary")
        if jwk.get("kty") != "RSA":
            raise DataError(f"unexpected kty {jwk.get('kty')!r}")
        if "d" in jwk:
            raise DataError("private JWK given where a public key is expected")
        for member in ("e", "n"):
            if not isinstance(jwk.get(member), str):
                raise DataError(f"JWK member {member!r} missing")
        if jwk.get("ext") is False and extractable:
            raise DataError("JWK is not extractable")
        if "use" in jwk and jwk["use"] != "sig":
            raise DataError(f"JWK use {jwk['use']!r} does not allow signatures")
        if "key_ops" in jwk:
            ops = jwk["key_ops"]
            if not isinstance(ops, list) or not usages <= set(ops):
                raise DataError("JWK key_ops does not allow the requested usages")
        if "alg" in jwk:
            expected = _JWK_ALG_PREFIX[scheme] + hash_util.jwk_suffix(hash_name)
            if jwk["alg"] != expected:
                raise DataError(f"JWK alg {jwk['alg']!r} does not match {expected!r}")

    # ---------------- verify ----------------

    async def verify(
        self,
        algorithm: Any,
        key: CryptoKey,
        signature: bytes,
        data: bytes,
    ) -> bool:
        scheme = _scheme(_algorithm_name(algorithm))
        if not isinstance(key, CryptoKey):
            raise InvalidAccessError("not a CryptoKey")
        if scheme.value != key.algorithm:
            raise InvalidAccessError(f"key algorithm {key.algorithm} does not match {scheme.value}")
        if "verify" not in key.usages:
            raise InvalidAccessError("key does not allow verify")

        signature = bytes(signature)
        data = bytes(data)
        if len(signature) != key.modulus_bytes:
            raise InvalidAccessError(
                f"signature length {len(signature)} does not match modulus length {key.modulus_bytes}")

        if scheme is SignatureScheme.RSA_PSS:
            salt_length = self._salt_length(algorithm, key)
            return await asyncio.to_thread(
                rsa_verify_pss, key._public_key, data, signature, key.hash, salt_length)
        return await asyncio.to_thread(
            rsa_verify_pkcs1v15, key._public_key, data, signature, key.hash)

    @staticmethod
    def _salt_length(algorithm: Any, key: CryptoKey) -> int:
        salt_length: Optional[Any] = None
        if isinstance(algorithm, Mapping):
            salt_length = algorithm.get("saltLength")
        if salt_length is None:
            return hash_util.digest_size(key.hash)
        if isinstance(salt_length, bool) or not isinstance(salt_length, int) or salt_length < 0:
            raise OperationError(f"invalid saltLength {salt_length!r}")
        return salt_length


subtle = SubtleCrypto()
