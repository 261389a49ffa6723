import pytest

from cryptography.hazmat.primitives.asymmetric import padding, rsa

from webcrypto import get_hash, public_key_to_jwk
from wycheproof import RSA_PSS, RSASSA_PKCS1, RsaSignatureTestCase

MSG = b"hello world"


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def jwk(rsa_key):
    return public_key_to_jwk(rsa_key.public_key())


@pytest.fixture(scope="session")
def sign(rsa_key):
    def _sign(msg, scheme=RSASSA_PKCS1, hash_alg="SHA-256", salt_length=None):
        if scheme == RSA_PSS:
            if salt_length is None:
                salt_length = get_hash(hash_alg).digest_size
            pad = padding.PSS(mgf=padding.MGF1(get_hash(hash_alg)), salt_length=salt_length)
        else:
            pad = padding.PKCS1v15()
        return rsa_key.sign(msg, pad, get_hash(hash_alg))
    return _sign


@pytest.fixture
def make_case(jwk, sign):
    def _make(result="valid", sig=None, msg=MSG, scheme=RSASSA_PKCS1, hash_alg="SHA-256",
              salt_length=None, tc_id=1):
        if sig is None:
            sig = sign(msg, scheme, hash_alg, salt_length)
        return RsaSignatureTestCase(
            id=tc_id,
            e=jwk["e"],
            n=jwk["n"],
            hash_alg=hash_alg,
            scheme=scheme,
            msg=msg,
            sig=sig,
            result=result,
            salt_length=salt_length,
        )
    return _make


def flip_last_byte(sig: bytes) -> bytes:
    return sig[:-1] + bytes([sig[-1] ^ 0x01])


@pytest.fixture
def flipped():
    return flip_last_byte
