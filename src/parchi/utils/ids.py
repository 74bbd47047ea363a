"""Identifier minting."""

import time


def new_id() -> str:
    """Return a timestamp-based identifier (microseconds since the epoch)."""
    return str(time.time_ns() // 1000)


def unique_id(taken: set[str], factory=new_id) -> str:
    """Mint an identifier from factory that is not in taken.

    Timestamp ids collide when minted within the same clock tick, so the
    numeric value is bumped until it is free.
    """
    candidate = factory()
    while candidate in taken:
        candidate = str(int(candidate) + 1) if candidate.isdigit() else f"{candidate}_"
    return candidate
