"""Bitmask encoding of spin configurations.

Mask bits are read most-significant first: the highest of n_sites bits is
site 1, the lowest is site n_sites. A set bit is spin +1, a clear bit is -1.
"""

import jax.numpy as jnp


def configuration_from_mask(mask: int, n_sites: int) -> jnp.ndarray:
    """Decode an integer in [0, 2**n_sites) into a ±1 spin array."""
    if not 0 <= mask < (1 << n_sites):
        raise ValueError(f"mask {mask} out of range for {n_sites} sites")
    bits = [(mask >> (n_sites - 1 - i)) & 1 for i in range(n_sites)]
    return jnp.array([1 if b else -1 for b in bits], dtype=jnp.int32)


def mask_from_configuration(sigma) -> int:
    """Inverse of configuration_from_mask."""
    mask = 0
    for s in (int(v) for v in sigma):
        if s not in (-1, 1):
            raise ValueError(f"spin value {s} is not ±1")
        mask = (mask << 1) | (1 if s == 1 else 0)
    return mask


def all_configurations(n_sites: int) -> jnp.ndarray:
    """All 2**n_sites configurations in ascending mask order, shape (2**n, n)."""
    masks = jnp.arange(1 << n_sites, dtype=jnp.int32)
    shifts = jnp.arange(n_sites - 1, -1, -1, dtype=jnp.int32)
    bits = (masks[:, None] >> shifts[None, :]) & 1
    return 2 * bits - 1
