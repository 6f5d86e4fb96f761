"""Ising energy and bond utilities for a 1D periodic chain."""

import jax.numpy as jnp


def ring_pairs(n_sites: int) -> jnp.ndarray:
    """Return (n_sites, 2) index array of nearest-neighbor bonds on a ring.

    Bond i joins site i to site (i+1) % n_sites. For n_sites=2 both (0, 1)
    and (1, 0) are listed, so the single physical bond is counted twice.
    """
    pairs = [(i, (i + 1) % n_sites) for i in range(n_sites)]
    return jnp.array(pairs, dtype=jnp.int32)


def energy(sigma: jnp.ndarray, pairs: jnp.ndarray, J: int = 1) -> jnp.ndarray:
    """Compute H(σ) = J Σ_{<ij>} σ_i σ_j.

    The Boltzmann weight is Exp[k H], so there is no leading minus sign.

    Args:
        sigma: spin configurations, shape (..., N) with values in {-1, +1}
        pairs: (num_pairs, 2) bond index array
        J: coupling constant

    Returns:
        Energy per configuration, shape (...)
    """
    si = sigma[..., pairs[:, 0]]  # (..., num_pairs)
    sj = sigma[..., pairs[:, 1]]  # (..., num_pairs)
    return J * jnp.sum(si * sj, axis=-1)
