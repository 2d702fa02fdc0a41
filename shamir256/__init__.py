"""
shamir256 — Shamir's Secret Sharing over GF(256)
Split a byte string into shares where any K of them rebuild it exactly.

Fewer than K shares reveal nothing about the secret. Shares are plain
bytes: an id byte followed by one byte per secret byte.

Usage:
    from shamir256 import split, recover
    material = split(b"my secret", threshold=3)
    shares = [material.get_share(i) for i in (1, 2, 3)]
    assert recover(3, shares) == b"my secret"
"""

from shamir256.errors import (
    ShamirError,
    InvalidThreshold,
    InvalidShareId,
    InvalidShare,
    DivisionByZero,
    RecoveryError,
    InsufficientShares,
    DuplicateShareId,
    MismatchedShareLength,
)
from shamir256.share import Share
from shamir256.shamir import SecretMaterial, split, get_share, is_valid_share, split_shares
from shamir256.recovery import recover, verify_shares

__version__ = "0.1.0"
__all__ = [
    "split",
    "get_share",
    "is_valid_share",
    "recover",
    "split_shares",
    "verify_shares",
    "SecretMaterial",
    "Share",
    "ShamirError",
    "InvalidThreshold",
    "InvalidShareId",
    "InvalidShare",
    "DivisionByZero",
    "RecoveryError",
    "InsufficientShares",
    "DuplicateShareId",
    "MismatchedShareLength",
]
