"""
Share value object and wire format.

On the wire a share is plain bytes: the id byte followed by one
evaluated byte per secret byte.

    [id] [y_1] [y_2] ... [y_n]
"""

from dataclasses import dataclass

from shamir256.errors import InvalidShare, InvalidShareId, MismatchedShareLength

MAX_SHARE_ID = 255


@dataclass(frozen=True)
class Share:
    """A single share of a split secret."""
    id: int         # The x-coordinate (1..255, never 0)
    values: bytes   # One y-coordinate per secret byte

    def __post_init__(self):
        if not 1 <= self.id <= MAX_SHARE_ID:
            raise InvalidShareId(f"Share id must be between 1 and {MAX_SHARE_ID}, got {self.id}")

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __len__(self) -> int:
        return len(self.values) + 1

    def to_bytes(self) -> bytes:
        """Serialize to the wire layout."""
        return bytes([self.id]) + bytes(self.values)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Share":
        """Parse the wire layout."""
        data = bytes(data)
        if not data:
            raise MismatchedShareLength("Share is empty, expected at least an id byte")
        return cls(id=data[0], values=data[1:])

    def to_hex(self) -> str:
        """Serialize to a portable hex string."""
        return self.to_bytes().hex()

    @classmethod
    def from_hex(cls, hex_str: str) -> "Share":
        """Deserialize from hex string."""
        return cls.from_bytes(bytes.fromhex(hex_str))


def share_bytes(share) -> bytes:
    """
    Normalize a share to its wire bytes.

    Accepts a Share, any bytes-like object, or a sequence of ints.

    Raises:
        TypeError: If share is text or a bare int.
        InvalidShare: If a sequence holds values outside 0..255.
    """
    if isinstance(share, Share):
        return share.to_bytes()
    if isinstance(share, str):
        raise TypeError("Shares must be bytes, not str; use Share.from_hex for hex text")
    if isinstance(share, int):
        raise TypeError(f"Shares must be bytes, not {type(share).__name__}")
    try:
        return bytes(share)
    except ValueError as e:
        raise InvalidShare(f"Share bytes must be in range 0..255: {e}") from e
