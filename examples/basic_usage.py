"""
shamir256 — Basic Usage Example

Splits a short message into shares, any 3 of which rebuild it, then
recovers it from three of them. The library only deals in bytes; turning
the result back into text is the caller's job.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir256 import split, recover, Share, RecoveryError


def main():
    message = "Hello World!"

    print("=" * 50)
    print("  shamir256 — 3-of-5 secret sharing")
    print("=" * 50)

    material = split(message.encode("utf-8"), threshold=3)

    # Issue five shares; hand each one to a different holder
    shares = [material.get_share(share_id) for share_id in range(1, 6)]
    for share in shares:
        print(f"  share {share[0]}: {Share.from_bytes(share).to_hex()}")

    # Any three of them are enough
    used = [shares[0], shares[2], shares[4]]
    print(f"\nRecovering with shares {[s[0] for s in used]}")
    recovered = recover(3, used)

    try:
        print(f"Recovered: {recovered.decode('utf-8')}")
    except UnicodeDecodeError:
        print(f"Recovered bytes are not valid UTF-8: {recovered.hex()}")

    # Two shares are not enough
    print("\nAttempting recovery with only two shares...")
    try:
        recover(3, shares[:2])
        print("  ERROR: Should have failed!")
    except RecoveryError as e:
        print(f"  Correctly rejected: {e}")


if __name__ == "__main__":
    main()
