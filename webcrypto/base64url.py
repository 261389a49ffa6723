'''
    BASE64URL functionality for JWK key material.

    JWK members such as "e" and "n" carry big-endian unsigned integers as
    unpadded base64url (RFC 7518 section 6.3.1).
'''

# ========== Imports ==========
import base64
import binascii
import re

_B64URL_RE = re.compile(r"^[A-Za-z0-9_-]*$")


# ========== Base64 URL Encoding ==========
def base64url_encode(raw_url: bytes) -> str:
    postp = base64.urlsafe_b64encode(raw_url).decode("ascii")
    return postp.rstrip("=")


# ========== Base64 URL Decoding ==========
def base64url_decode(postp_url: str) -> bytes:
    # urlsafe_b64decode silently drops characters outside the alphabet
    if not isinstance(postp_url, str) or not _B64URL_RE.match(postp_url):
        raise ValueError("not a base64url string")
    remainder = len(postp_url) % 4
    if remainder == 1:
        raise ValueError("invalid base64url length")
    missing = (-remainder) % 4    # how many chars needed to reach multiple of 4
    pad = "=" * missing
    try:
        return base64.urlsafe_b64decode(postp_url + pad)
    except binascii.Error as e:
        raise ValueError(f"invalid base64url: {e}") from e


# ========== Integer helpers ==========
def base64url_to_int(postp_url: str) -> int:
    raw = base64url_decode(postp_url)
    if not raw:
        raise ValueError("empty integer")
    return int.from_bytes(raw, "big")


def int_to_base64url(value: int) -> str:
    if value < 0:
        raise ValueError("negative integer")
    length = (value.bit_length() + 7) // 8 or 1
    return base64url_encode(value.to_bytes(length, "big"))
