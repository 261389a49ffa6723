# wycheproof/vectors.py

"""
Wycheproof test vector loading
------------------------------

Reads RSA signature vector files (rsa_signature_*_test.json,
rsa_pss_*_test.json and their webcrypto variants) into
RsaSignatureTestCase objects.

The public key is taken from the group's JWK when present, otherwise from
the hex encoded modulus / exponent (older files keep them as "n" and "e",
newer ones under "publicKey").
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from webcrypto import hash_util
from webcrypto.base64url import int_to_base64url

from .config import settings
from .rsa_util import RSA_PSS, RSASSA_PKCS1, ExpectedResult, RsaSignatureTestCase

log = logging.getLogger(__name__)

# Wycheproof "algorithm" -> SubtleCrypto scheme name
ALGORITHMS = {
    "RSASSA-PKCS1-v1_5": RSASSA_PKCS1,
    "RSASSA-PSS": RSA_PSS,
}

VECTOR_GLOBS = ("rsa_signature*_test.json", "rsa_pss*_test.json")


# ========== Models ==========

class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore")


class PublicKey(_Model):
    modulus: str
    publicExponent: str


class Vector(_Model):
    tcId: int
    comment: str = ""
    msg: str                 # hex
    sig: str                 # hex
    result: ExpectedResult
    flags: List[str] = Field(default_factory=list)


class VectorGroup(_Model):
    sha: str
    keySize: Optional[int] = None
    # key material, in order of preference
    jwk: Optional[Dict[str, Any]] = None
    publicKeyJwk: Optional[Dict[str, Any]] = None
    publicKey: Optional[PublicKey] = None
    e: Optional[str] = None
    n: Optional[str] = None
    # RSA-PSS parameters
    mgf: Optional[str] = None
    mgfSha: Optional[str] = None
    sLen: Optional[int] = None
    tests: List[Vector] = Field(default_factory=list)

    def key_b64u(self) -> tuple[str, str]:
        """Return (e, n) as base64url."""
        jwk = self.publicKeyJwk or self.jwk
        if jwk and "e" in jwk and "n" in jwk:
            return jwk["e"], jwk["n"]
        if self.publicKey is not None:
            return _hex_to_b64u(self.publicKey.publicExponent), _hex_to_b64u(self.publicKey.modulus)
        if self.e is not None and self.n is not None:
            return _hex_to_b64u(self.e), _hex_to_b64u(self.n)
        raise ValueError("test group has no public key")


class VectorFile(_Model):
    algorithm: str
    generatorVersion: Optional[str] = None
    numberOfTests: Optional[int] = None
    testGroups: List[VectorGroup] = Field(default_factory=list)


def _hex_to_b64u(value: str) -> str:
    return int_to_base64url(int(value, 16))


# ========== Conversion ==========

def _skip_reason(group: VectorGroup, scheme: str, skip_unsupported: bool) -> Optional[str]:
    if skip_unsupported and not hash_util.is_supported(group.sha):
        return f"unsupported hash {group.sha}"
    if scheme == RSA_PSS:
        if group.mgf not in (None, "MGF1"):
            return f"unsupported mask generation function {group.mgf}"
        if group.mgfSha not in (None, group.sha):
            return f"MGF1 hash {group.mgfSha} differs from {group.sha}"
    return None


def parse_vector_file(data: Dict[str, Any], skip_unsupported: Optional[bool] = None) -> List[RsaSignatureTestCase]:
    if skip_unsupported is None:
        skip_unsupported = settings.SKIP_UNSUPPORTED_HASHES
    vf = VectorFile.model_validate(data)
    scheme = ALGORITHMS.get(vf.algorithm)
    if scheme is None:
        raise ValueError(f"not an RSA signature vector file: {vf.algorithm!r}")

    cases: List[RsaSignatureTestCase] = []
    for group in vf.testGroups:
        reason = _skip_reason(group, scheme, skip_unsupported)
        if reason:
            log.info("skipping %d %s tests: %s", len(group.tests), vf.algorithm, reason)
            continue
        e, n = group.key_b64u()
        for t in group.tests:
            cases.append(RsaSignatureTestCase(
                id=t.tcId,
                e=e,
                n=n,
                hash_alg=group.sha,
                scheme=scheme,
                msg=bytes.fromhex(t.msg),
                sig=bytes.fromhex(t.sig),
                result=t.result,
                comment=t.comment,
                flags=list(t.flags),
                salt_length=group.sLen if scheme == RSA_PSS else None,
            ))
    return cases


def load_test_cases(path: Union[str, Path], skip_unsupported: Optional[bool] = None) -> List[RsaSignatureTestCase]:
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    cases = parse_vector_file(data, skip_unsupported)
    log.info("loaded %d test cases from %s", len(cases), path.name)
    return cases


def iter_vector_files(directory: Union[str, Path, None] = None) -> Iterator[Path]:
    directory = Path(directory if directory is not None else settings.vector_dir)
    seen = set()
    for pattern in VECTOR_GLOBS:
        for p in sorted(directory.glob(pattern)):
            if p not in seen:
                seen.add(p)
                yield p
