import json

import pytest

from wycheproof import ExpectedResult, RSA_PSS, RSASSA_PKCS1, iter_vector_files, load_test_cases, parse_vector_file


def _tests(sign, scheme=RSASSA_PKCS1, hash_alg="SHA-256", salt_length=None):
    sig = sign(b"abc", scheme, hash_alg, salt_length)
    return [
        {"tcId": 1, "comment": "", "msg": "616263", "sig": sig.hex(), "result": "valid", "flags": []},
        {"tcId": 2, "comment": "truncated", "msg": "616263", "sig": sig[:-1].hex(), "result": "invalid",
         "flags": ["SignatureSize"]},
    ]


@pytest.fixture
def numbers(rsa_key):
    return rsa_key.public_key().public_numbers()


def test_old_format_hex_key(sign, numbers, jwk):
    data = {
        "algorithm": "RSASSA-PKCS1-v1_5",
        "generatorVersion": "0.4.12",
        "testGroups": [{
            "e": "010001",
            "n": "00" + format(numbers.n, "x"),
            "keySize": 2048,
            "sha": "SHA-256",
            "type": "RsassaPkcs1Verify",
            "tests": _tests(sign),
        }],
    }
    cases = parse_vector_file(data)
    assert [c.id for c in cases] == [1, 2]
    tc = cases[1]
    assert (tc.e, tc.n) == (jwk["e"], jwk["n"])
    assert tc.scheme == RSASSA_PKCS1
    assert tc.hash_alg == "SHA-256"
    assert tc.msg == b"abc"
    assert tc.result is ExpectedResult.INVALID
    assert tc.comment == "truncated"
    assert tc.flags == ["SignatureSize"]
    assert tc.salt_length is None


def test_new_format_prefers_jwk(sign, numbers, jwk):
    data = {
        "algorithm": "RSASSA-PSS",
        "testGroups": [{
            "publicKey": {"modulus": "00" + format(numbers.n, "x"), "publicExponent": "010001"},
            "publicKeyJwk": {"kty": "RSA", "e": jwk["e"], "n": jwk["n"]},
            "sha": "SHA-256",
            "mgf": "MGF1",
            "mgfSha": "SHA-256",
            "sLen": 32,
            "tests": _tests(sign, RSA_PSS, "SHA-256", 32),
        }],
    }
    cases = parse_vector_file(data)
    assert len(cases) == 2
    assert cases[0].scheme == RSA_PSS
    assert cases[0].salt_length == 32
    assert (cases[0].e, cases[0].n) == (jwk["e"], jwk["n"])


def test_public_key_hex_member(sign, numbers, jwk):
    data = {
        "algorithm": "RSASSA-PKCS1-v1_5",
        "testGroups": [{
            "publicKey": {"modulus": format(numbers.n, "x"), "publicExponent": "010001"},
            "sha": "SHA-512",
            "tests": _tests(sign, hash_alg="SHA-512"),
        }],
    }
    (tc, _) = parse_vector_file(data)
    assert tc.n == jwk["n"]
    assert tc.e == "AQAB"


def test_skips_unsupported_groups(sign, jwk):
    group = {"jwk": dict(jwk), "sha": "SHA-224", "tests": _tests(sign)}
    data = {"algorithm": "RSASSA-PKCS1-v1_5", "testGroups": [group]}
    assert parse_vector_file(data, skip_unsupported=True) == []
    kept = parse_vector_file(data, skip_unsupported=False)
    assert [c.hash_alg for c in kept] == ["SHA-224", "SHA-224"]


def test_skips_pss_with_different_mgf_hash(sign, jwk):
    group = {"jwk": dict(jwk), "sha": "SHA-256", "mgf": "MGF1", "mgfSha": "SHA-1", "sLen": 20,
             "tests": _tests(sign, RSA_PSS, "SHA-256", 20)}
    assert parse_vector_file({"algorithm": "RSASSA-PSS", "testGroups": [group]}) == []


def test_rejects_other_algorithms():
    with pytest.raises(ValueError):
        parse_vector_file({"algorithm": "ECDSA", "testGroups": []})


def test_group_without_key(sign):
    data = {"algorithm": "RSASSA-PKCS1-v1_5", "testGroups": [{"sha": "SHA-256", "tests": _tests(sign)}]}
    with pytest.raises(ValueError):
        parse_vector_file(data)


def test_load_and_iterate_files(tmp_path, sign, jwk):
    data = {"algorithm": "RSASSA-PKCS1-v1_5",
            "testGroups": [{"jwk": dict(jwk), "sha": "SHA-256", "tests": _tests(sign)}]}
    for name in ("rsa_signature_2048_sha256_test.json", "rsa_pss_2048_sha256_mgf1_32_test.json",
                 "ecdsa_test.json"):
        (tmp_path / name).write_text(json.dumps(data), encoding="utf-8")

    files = [p.name for p in iter_vector_files(tmp_path)]
    assert files == ["rsa_signature_2048_sha256_test.json", "rsa_pss_2048_sha256_mgf1_32_test.json"]
    assert len(load_test_cases(tmp_path / files[0])) == 2
