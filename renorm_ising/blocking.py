"""Majority-rule block spin reduction."""

import jax.numpy as jnp


def majority_rule(block: jnp.ndarray) -> jnp.ndarray:
    """Reduce the last axis of a ±1 block to one spin by the sign of its sum.

    Blocks of odd length never sum to zero, so the result is always ±1.

    Args:
        block: shape (..., b) with b odd

    Returns:
        ±1 spins, shape (...)
    """
    size = block.shape[-1]
    if size % 2 == 0:
        raise ValueError(f"majority rule needs an odd block length, got {size}")
    return jnp.where(jnp.sum(block, axis=-1) > 0, 1, -1).astype(jnp.int32)


def block_spins(sigma: jnp.ndarray, block_size: int) -> jnp.ndarray:
    """Coarse-grain consecutive blocks of sites, shape (..., N) -> (..., N // b).

    Blocks are reduced independently: sites [0, b) give reduced site 0,
    [b, 2b) give reduced site 1, and so on.
    """
    n_sites = sigma.shape[-1]
    if n_sites % block_size:
        raise ValueError(f"{n_sites} sites do not split into blocks of {block_size}")
    blocks = sigma.reshape(*sigma.shape[:-1], n_sites // block_size, block_size)
    return majority_rule(blocks)
