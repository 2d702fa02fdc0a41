"""
Secret Recovery
Reconstruct a secret from K or more shares using Lagrange interpolation.

Each byte position is recovered independently: the shares' ids are the
x-coordinates, the bytes at that position are the y-coordinates, and the
constant term of the interpolated polynomial is the secret byte.
"""

import logging

from shamir256 import gf256
from shamir256.errors import (
    DivisionByZero,
    DuplicateShareId,
    InsufficientShares,
    InvalidShareId,
    InvalidThreshold,
    MismatchedShareLength,
    ShamirError,
)
from shamir256.polynomial import add_polynomials, multiply_polynomials
from shamir256.share import share_bytes

_logger = logging.getLogger(__name__)


def lagrange_polynomial(xs: list[int], ys: list[int]) -> list[int]:
    """
    Build the full interpolating polynomial through (xs[i], ys[i]).

    For each sample i the basis polynomial L_i is the product over j != i
    of (x - x_j) / (x_i - x_j), written in ascending form as
    [x_j / (x_i - x_j), 1 / (x_i - x_j)]. Subtraction is XOR, so -x_j is
    x_j. The result is the sum of y_i * L_i.

    Raises:
        DivisionByZero: If two samples share an x-coordinate.
    """
    result: list[int] = []
    for i, x_i in enumerate(xs):
        basis = [1]
        for j, x_j in enumerate(xs):
            if i == j:
                continue
            denominator = gf256.sub(x_i, x_j)
            if denominator == 0:
                raise DivisionByZero(f"Samples {i} and {j} share x-coordinate {x_i}")
            term = [gf256.div(x_j, denominator), gf256.div(1, denominator)]
            basis = multiply_polynomials(basis, term)
        basis = multiply_polynomials(basis, [ys[i]])
        result = add_polynomials(result, basis)
    return result


def _validate(threshold: int, shares: list[bytes]) -> None:
    if not isinstance(threshold, int) or isinstance(threshold, bool) or threshold < 1:
        raise InvalidThreshold(f"Threshold must be at least 1, got {threshold!r}")
    if len(shares) < threshold:
        raise InsufficientShares(f"Need at least {threshold} shares, got {len(shares)}")

    seen = set()
    for share in shares:
        if not share:
            raise MismatchedShareLength("Share is empty, expected at least an id byte")
        share_id = share[0]
        if share_id == 0:
            raise InvalidShareId("Share id 0 is reserved")
        if share_id in seen:
            raise DuplicateShareId(f"Multiple shares with id {share_id}")
        seen.add(share_id)

    lengths = {len(share) for share in shares}
    if len(lengths) > 1:
        raise MismatchedShareLength(f"Shares have different lengths: {sorted(lengths)}")


def recover(threshold: int, shares) -> bytes:
    """
    Reconstruct a secret from its shares.

    All supplied shares are used in the interpolation. Supplying fewer
    than the original threshold is rejected up front; the algebra would
    otherwise succeed and silently return a wrong secret.

    Args:
        threshold: Minimum shares needed (K).
        shares: Shares as bytes, bytes-like objects, int lists or Share
            objects. Ids must be distinct and lengths equal.

    Returns:
        The reconstructed secret bytes.

    Raises:
        InsufficientShares: If fewer than threshold shares are given.
        DuplicateShareId: If two shares carry the same id.
        MismatchedShareLength: If shares differ in length or one is empty.
        InvalidShareId: If a share carries id 0.
        InvalidThreshold: If threshold is below 1.
    """
    shares = [share_bytes(share) for share in shares]
    _validate(threshold, shares)

    xs = [share[0] for share in shares]
    secret = bytearray()
    for position in range(1, len(shares[0])):
        ys = [share[position] for share in shares]
        secret.append(lagrange_polynomial(xs, ys)[0])

    _logger.debug("Recovered %d-byte secret from share ids %s", len(secret), xs)
    return bytes(secret)


def verify_shares(shares, secret: bytes) -> bool:
    """Verify that a set of shares correctly reconstructs the secret."""
    shares = list(shares)
    try:
        reconstructed = recover(len(shares), shares)
    except ShamirError:
        return False
    return reconstructed == bytes(secret)
