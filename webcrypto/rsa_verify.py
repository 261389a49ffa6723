# webcrypto/rsa_verify.py
from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from .hash_util import get_hash


def rsa_verify_pkcs1v15(pub: RSAPublicKey, message: bytes, signature: bytes, hash_name: str) -> bool:
    """
    Returns True if signature is valid under RSASSA-PKCS1-v1_5 with the given hash.
    """
    try:
        pub.verify(signature, message, padding.PKCS1v15(), get_hash(hash_name))
        return True
    except InvalidSignature:
        return False


def rsa_verify_pss(pub: RSAPublicKey, message: bytes, signature: bytes, hash_name: str, salt_length: int) -> bool:
    """
    Returns True if signature is valid under RSA-PSS, MGF1 with the same hash.
    """
    em_len = (pub.key_size - 1 + 7) // 8
    if salt_length > em_len - get_hash(hash_name).digest_size - 2:
        return False
    try:
        pub.verify(
            signature,
            message,
            padding.PSS(
                mgf=padding.MGF1(get_hash(hash_name)),
                salt_length=salt_length,
            ),
            get_hash(hash_name),
        )
        return True
    except InvalidSignature:
        return False
