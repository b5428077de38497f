# =========================================================
# SEEDED RANDOMNESS FOR THE SYNTHETIC GENERATOR
# ---------------------------------------------------------
# Linear congruential generator + Box-Muller normal draws.
# Same seed -> same stream, every run, every machine.
# =========================================================

import math

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2 ** 32


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def city_seed(city_name: str) -> int:
    """
    Rolling hash of the city name (h = h * 31 + char code), returned as
    its absolute value. Only the shifted term wraps to signed 32-bit; the
    running sum does not, so the seed can exceed 2**32 (SeededRandom
    reduces it).
    """
    h = 0
    for ch in city_name:
        h = ord(ch) + (_to_int32(_to_int32(h) << 5) - h)
    return abs(h)


class SeededRandom:
    """
    Deterministic uniform stream in [0, 1).

    Only way to restart the stream is to build a new instance
    with the same seed.
    """

    def __init__(self, seed: int):
        if seed < 0:
            raise ValueError("seed must be non-negative")
        self.state = seed % LCG_MODULUS

    def next(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS

    def __iter__(self):
        return self

    def __next__(self) -> float:
        return self.next()


def random_normal(mean: float, std_dev: float, rng: SeededRandom) -> float:
    """Box-Muller transform. Consumes two uniform draws (more only on exact zeros)."""
    u = 0.0
    v = 0.0
    while u == 0:
        u = rng.next()
    while v == 0:
        v = rng.next()

    z = math.sqrt(-2.0 * math.log(u)) * math.cos(2.0 * math.pi * v)
    return mean + z * std_dev
