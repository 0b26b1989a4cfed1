"""
SS58 chain account address codec.

Layout: base58(prefix || account(32) || checksum(2)), where checksum is the
first two bytes of BLAKE2b-512(b"SS58PRE" || prefix || account). Network
formats 0-63 use a one-byte prefix, 64-16383 a two-byte prefix. Formats 46 and
47 are reserved and rejected both ways.
"""
from __future__ import annotations

import hashlib

import base58

ACCOUNT_LENGTH = 32
CHECKSUM_LENGTH = 2
MAX_SS58_FORMAT = 16383
RESERVED_SS58_FORMATS = frozenset({46, 47})

_CHECKSUM_PREFIX = b"SS58PRE"


class InvalidAddressError(ValueError):
    pass


def _checksum(payload: bytes) -> bytes:
    return hashlib.blake2b(_CHECKSUM_PREFIX + payload, digest_size=64).digest()[:CHECKSUM_LENGTH]


def _encode_prefix(ss58_format: int) -> bytes:
    if ss58_format < 0 or ss58_format > MAX_SS58_FORMAT or ss58_format in RESERVED_SS58_FORMATS:
        raise InvalidAddressError(f"Unsupported SS58 format: {ss58_format}")
    if ss58_format < 64:
        return bytes([ss58_format])
    first = ((ss58_format & 0b1111_1100) >> 2) | 0b0100_0000
    second = (ss58_format >> 8) | ((ss58_format & 0b0000_0011) << 6)
    return bytes([first, second])


def _prefix_length(first_byte: int) -> int:
    if first_byte < 64:
        return 1
    if first_byte < 128:
        return 2
    raise InvalidAddressError("Invalid SS58 prefix")


def _decode_format(prefix: bytes) -> int:
    if len(prefix) == 1:
        return prefix[0]
    lower = ((prefix[0] << 2) & 0xFF) | (prefix[1] >> 6)
    upper = prefix[1] & 0b0011_1111
    return lower | (upper << 8)


def ss58_decode(address: str) -> bytes:
    """Return the raw 32-byte account id for an SS58 address of any non-reserved network format."""
    if not isinstance(address, str) or not address:
        raise InvalidAddressError("Address must be a non-empty string")
    try:
        data = base58.b58decode(address)
    except ValueError as exc:
        raise InvalidAddressError("Address is not valid base58") from exc

    if not data:
        raise InvalidAddressError("Address is empty")
    prefix_len = _prefix_length(data[0])
    if len(data) != prefix_len + ACCOUNT_LENGTH + CHECKSUM_LENGTH:
        raise InvalidAddressError("Invalid address length")

    payload, checksum = data[:-CHECKSUM_LENGTH], data[-CHECKSUM_LENGTH:]
    if _checksum(payload) != checksum:
        raise InvalidAddressError("Invalid address checksum")
    if _decode_format(payload[:prefix_len]) in RESERVED_SS58_FORMATS:
        raise InvalidAddressError("Reserved SS58 format")
    return payload[prefix_len:]


def ss58_encode(account: bytes, ss58_format: int = 42) -> str:
    account = bytes(account)
    if len(account) != ACCOUNT_LENGTH:
        raise InvalidAddressError(f"Account must be {ACCOUNT_LENGTH} bytes, got {len(account)}")
    payload = _encode_prefix(ss58_format) + account
    return base58.b58encode(payload + _checksum(payload)).decode("ascii")


def ss58_encode_default(account: bytes) -> str:
    from django.conf import settings

    return ss58_encode(account, getattr(settings, "SS58_FORMAT", 42))
