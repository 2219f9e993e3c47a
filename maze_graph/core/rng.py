import os
import random
from typing import Union

SEED_BYTES = 32

Seed = Union[int, bytes]


def random_seed() -> bytes:
    return os.urandom(SEED_BYTES)


def make_rng(seed: Seed) -> random.Random:
    """
    Deterministic source for the generators. Only .choice() is relied on,
    so any object with a uniform choice(sequence) can stand in for it.
    """
    if isinstance(seed, (bytes, bytearray)) and len(seed) != SEED_BYTES:
        raise ValueError(f"Seed must be {SEED_BYTES} bytes, got {len(seed)}")
    return random.Random(bytes(seed) if isinstance(seed, bytearray) else seed)


def parse_seed(text: str) -> Seed:
    """Decimal integer or a 64 digit hex string."""
    text = text.strip()
    if text.isdigit():
        return int(text)
    seed = bytes.fromhex(text)
    if len(seed) != SEED_BYTES:
        raise ValueError(f"Hex seed must encode {SEED_BYTES} bytes, got {len(seed)}")
    return seed
