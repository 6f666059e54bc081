"""64-bit linear congruential random numbers and seed spawning.

Seeds are plain integers treated as unsigned 64-bit values. Functions that
advance a seed return the new seed alongside their result.
"""

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_LCG_MULTIPLIER = 2862933555777941757
_LCG_INCREMENT = 3037000493
_INV_2_64 = 5.4210108624275222e-20

_C1 = (0xBAA96887, 0x1E17D32C, 0x03BCDC3C, 0x0F33D1B2)
_C2 = (0x4B0F3B58, 0xE874F0C3, 0x6955C5A6, 0x55A7CA46)
_NITER = 2


def rng_sample(seed: int) -> tuple[int, float]:
    """Advance ``seed`` one step; return the new seed and a sample in [0, 1)."""
    new_seed = (_LCG_MULTIPLIER * (seed & _MASK64) + _LCG_INCREMENT) & _MASK64
    return new_seed, _INV_2_64 * new_seed


def pseudo_des(lword: int, irword: int) -> tuple[int, int]:
    """Hash a pair of 32-bit words with the psdes scheme; return the new pair."""
    lword &= _MASK32
    irword &= _MASK32
    for c1, c2 in zip(_C1[:_NITER], _C2[:_NITER]):
        iswap = irword
        ia = irword ^ c1
        low = ia & 0xFFFF
        high = ia >> 16
        ib = (low * low + (~(high * high) & _MASK32)) & _MASK32
        ia = ((ib >> 16) | ((ib & 0xFFFF) << 16)) & _MASK32
        irword = lword ^ (((ia ^ c2) + low * high) & _MASK32)
        lword = iswap
    return lword, irword


def hash_state(initial_number: int) -> int:
    """Hash a 64-bit integer into an unrelated 64-bit integer."""
    initial_number &= _MASK64
    front, back = pseudo_des(initial_number >> 32, initial_number & _MASK32)
    return (front << 32) | back


def spawn_random_number_seed(parent_seed: int) -> tuple[int, int]:
    """Derive a child seed from ``parent_seed``.

    Returns ``(child_seed, advanced_parent_seed)``; the parent is bumped by one
    generator step.
    """
    child = hash_state(parent_seed)
    advanced_parent, _ = rng_sample(parent_seed)
    return child, advanced_parent