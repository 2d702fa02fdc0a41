"""
Shamir's Secret Sharing over GF(256)
Split a byte string into shares where any K of them reconstruct it.

Every secret byte gets its own random polynomial of degree K-1 whose
constant term is that byte. A share is the id followed by every one of
those polynomials evaluated at the id, so a share is exactly one byte
longer than the secret.
"""

import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable

from cryptography.hazmat.primitives import constant_time

from shamir256.errors import InvalidShareId, InvalidThreshold, ShamirError
from shamir256.polynomial import evaluate
from shamir256.share import MAX_SHARE_ID, share_bytes

_logger = logging.getLogger(__name__)

MIN_THRESHOLD = 1
MAX_THRESHOLD = 255
MAX_SHARES = MAX_SHARE_ID

RandomSource = Callable[[int], bytes]


@dataclass(frozen=True)
class SecretMaterial:
    """
    Everything needed to issue shares for one secret.

    Created once by split(). The random coefficients are drawn at
    construction and never change, so the same id always yields the same
    share. Instances are read-only and safe to share between threads.
    """
    secret: bytes = field(repr=False)
    threshold: int
    polynomials: tuple[tuple[int, ...], ...] = field(repr=False)

    def get_share(self, share_id: int) -> bytes:
        """Issue the share for share_id. See get_share()."""
        return get_share(self, share_id)

    def is_valid_share(self, share) -> bool:
        """Check a share against this material. See is_valid_share()."""
        return is_valid_share(self, share)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_threshold(threshold: int) -> None:
    if not _is_int(threshold) or not MIN_THRESHOLD <= threshold <= MAX_THRESHOLD:
        raise InvalidThreshold(
            f"Threshold must be between {MIN_THRESHOLD} and {MAX_THRESHOLD}, got {threshold!r}"
        )


def split(
    secret: bytes,
    threshold: int,
    random_bytes: RandomSource = secrets.token_bytes,
) -> SecretMaterial:
    """
    Build the share polynomials for a secret.

    A threshold of 1 is accepted: every polynomial is constant and every
    share payload equals the secret.

    Args:
        secret: The secret bytes. May be empty.
        threshold: Minimum shares needed to reconstruct (K), 1..255.
        random_bytes: Callable returning n random bytes. Defaults to the
            OS CSPRNG; pass a deterministic source only in tests.

    Returns:
        SecretMaterial from which any number of shares can be issued.

    Raises:
        InvalidThreshold: If threshold is out of range.
        TypeError: If secret is not bytes-like.
    """
    _check_threshold(threshold)
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise TypeError(f"Secret must be bytes, got {type(secret).__name__}")
    secret = bytes(secret)

    # f(x) = s + r1*x + ... + r(k-1)*x^(k-1), one per secret byte
    polynomials = []
    for byte in secret:
        randomness = random_bytes(threshold - 1)
        if len(randomness) != threshold - 1:
            raise ValueError(
                f"Random source returned {len(randomness)} bytes, expected {threshold - 1}"
            )
        polynomials.append((byte, *randomness))

    _logger.debug("Split %d-byte secret with threshold %d", len(secret), threshold)
    return SecretMaterial(secret=secret, threshold=threshold, polynomials=tuple(polynomials))


def get_share(material: SecretMaterial, share_id: int) -> bytes:
    """
    Evaluate every secret polynomial at share_id.

    Returns:
        The share in wire layout: share_id followed by one byte per
        secret byte.

    Raises:
        InvalidShareId: If share_id is 0 or does not fit in a byte.
    """
    if not _is_int(share_id) or not 1 <= share_id <= MAX_SHARES:
        raise InvalidShareId(f"Share id must be between 1 and {MAX_SHARES}, got {share_id!r}")
    values = bytes(evaluate(poly, share_id) for poly in material.polynomials)
    return bytes([share_id]) + values


def is_valid_share(material: SecretMaterial, share) -> bool:
    """
    Check that a share was issued from this material.

    Recomputes the share for the same id and compares in constant time.
    This only proves consistency with this particular material; a share
    cannot be checked on its own. Malformed shares are reported as
    False rather than raised.
    """
    try:
        data = share_bytes(share)
    except ShamirError:
        return False
    if not data or data[0] == 0:
        return False
    expected = get_share(material, data[0])
    return constant_time.bytes_eq(data, expected)


def split_shares(
    secret: bytes,
    threshold: int,
    num_shares: int,
    random_bytes: RandomSource = secrets.token_bytes,
) -> list[bytes]:
    """
    Split a secret and issue shares for ids 1..num_shares.

    Raises:
        InvalidThreshold: If threshold or num_shares is out of range.
    """
    _check_threshold(threshold)
    if not _is_int(num_shares) or not threshold <= num_shares <= MAX_SHARES:
        raise InvalidThreshold(
            f"Number of shares must be between {threshold} and {MAX_SHARES}, got {num_shares!r}"
        )
    material = split(secret, threshold, random_bytes)
    return [material.get_share(i) for i in range(1, num_shares + 1)]
