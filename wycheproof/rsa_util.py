# wycheproof/rsa_util.py

"""
Utilities for testing RSA signature verification on the SubtleCrypto provider.

A RsaSignatureTestCase holds one Wycheproof vector. Running it is two
coroutines, in order:

    await tc.test_import_public_key()   # fails the case if the key is rejected
    await tc.test_verification()        # compares verify() with tc.result

Both raise AssertionError on failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from webcrypto import hash_util
from webcrypto.errors import CryptoError, InvalidAccessError
from webcrypto.rsa_key_management import CryptoKey
from webcrypto.subtle_crypto import SignatureScheme, subtle

from .asserts import assert_false, assert_not_equals, assert_true, fail

log = logging.getLogger(__name__)

RSASSA_PKCS1 = SignatureScheme.RSASSA_PKCS1_V1_5.value
RSA_PSS = SignatureScheme.RSA_PSS.value


class ExpectedResult(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    ACCEPTABLE = "acceptable"   # either outcome is tolerated


class CaseState(str, Enum):
    CREATED = "created"
    IMPORTING = "importing"
    IMPORTED = "imported"
    VERIFYING = "verifying"
    PASSED = "passed"
    FAILED = "failed"


# ========== Key import / verify ==========

async def import_public_key(e: str, n: str, scheme_name: str, hash_alg: str,
                            usages: Iterable[str]) -> CryptoKey:
    """
    Imports a RSA public key.

    e, n:        exponent and modulus in base64url format
    scheme_name: "RSASSA-PKCS1-v1_5" or "RSA-PSS"
    hash_alg:    "SHA-1", "SHA-256", "SHA-384" or "SHA-512"
    usages:      what can be done with the key

    Raises AssertionError for an unsupported hash before touching the provider,
    and a CryptoError if the provider rejects the key.
    """
    assert_true("Unsupported hash algorithm", hash_util.is_supported(hash_alg))
    return await subtle.import_key(
        "jwk",
        {
            "kty": "RSA",
            "e": e,
            "n": n,
            "ext": True,
        },
        {
            "name": scheme_name,
            "hash": {"name": hash_alg},
        },
        False,
        list(usages),
    )


async def verify(pk: CryptoKey, msg: bytes, sig: bytes, scheme_name: str,
                 salt_length: Optional[int] = None) -> bool:
    """Verifies a RSA signature; the hash was bound to pk at import time."""
    algorithm = {"name": scheme_name}
    if salt_length is not None:
        algorithm["saltLength"] = salt_length
    return await subtle.verify(algorithm, pk, sig, msg)


# ========== Test case ==========

@dataclass
class RsaSignatureTestCase:

    """One RSA signature test vector and its key handle."""

    id: int
    e: str
    n: str
    hash_alg: str
    scheme: str
    msg: bytes
    sig: bytes
    result: ExpectedResult
    comment: str = ""
    flags: List[str] = field(default_factory=list)
    salt_length: Optional[int] = None   # RSA-PSS only
    pk: Optional[CryptoKey] = field(default=None, repr=False)
    state: CaseState = CaseState.CREATED

    def __post_init__(self) -> None:
        self.result = ExpectedResult(self.result)
        self.msg = bytes(self.msg)
        self.sig = bytes(self.sig)

    async def test_import_public_key(self) -> None:
        """Tests importation of the RSA public key."""
        if self.pk is not None:
            raise RuntimeError(f"public key of test case {self.id} already imported")
        self.state = CaseState.IMPORTING
        try:
            self.pk = await import_public_key(self.e, self.n, self.scheme, self.hash_alg, ["verify"])
        except CryptoError as err:
            self.state = CaseState.FAILED
            fail(f"Failed to import public key in test case {self.id}: {err}")
        except BaseException:
            self.state = CaseState.FAILED
            raise
        self.state = CaseState.IMPORTED

    async def test_verification(self) -> None:
        """Tests RSA signature verification against the expected result."""
        if self.pk is None or self.state is not CaseState.IMPORTED:
            self.state = CaseState.FAILED
            fail(f"Public key not imported in test case {self.id}")
        self.state = CaseState.VERIFYING
        try:
            try:
                is_valid = await verify(self.pk, self.msg, self.sig, self.scheme, self.salt_length)
            except CryptoError as err:
                self._check_refusal(err)
            else:
                self._check_result(is_valid)
        except BaseException:
            self.state = CaseState.FAILED
            raise
        self.state = CaseState.PASSED

    def _check_result(self, is_valid: bool) -> None:
        if self.result is ExpectedResult.VALID:
            assert_true(f"Failed on test case {self.id}", is_valid)
        elif self.result is ExpectedResult.INVALID:
            assert_false(f"Failed on test case {self.id}", is_valid)
        elif self.result is ExpectedResult.ACCEPTABLE:
            log.debug("test case %s: acceptable, verify returned %s", self.id, is_valid)
        else:
            raise ValueError(f"unknown expected result {self.result!r}")

    def _check_refusal(self, err: CryptoError) -> None:
        # only "invalid" and "acceptable" cases may be refused outright
        assert_not_equals(f"Failed on test case {self.id}: {err}", self.result, ExpectedResult.VALID)
        assert_true(f"Expect an InvalidAccessError exception in test case {self.id}, got {err}",
                    isinstance(err, InvalidAccessError))
        log.debug("test case %s: provider refused verification: %s", self.id, err)
