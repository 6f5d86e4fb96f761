"""Tests for ring bonds and periodic Ising energy."""

import jax.numpy as jnp
import pytest

from renorm_ising.ising import energy, ring_pairs


class TestRingPairs:
    def test_pair_count(self):
        """Periodic ring has one bond per site."""
        for n in [2, 3, 6, 10]:
            pairs = ring_pairs(n)
            assert pairs.shape == (n, 2)

    def test_wraps_around(self):
        pairs = ring_pairs(6)
        assert jnp.array_equal(pairs[-1], jnp.array([5, 0]))

    def test_two_site_ring_lists_bond_twice(self):
        pairs = ring_pairs(2)
        assert jnp.array_equal(pairs, jnp.array([[0, 1], [1, 0]]))


class TestEnergy:
    def test_all_up(self):
        sigma = jnp.ones(6, dtype=jnp.int32)
        assert int(energy(sigma, ring_pairs(6))) == 6

    def test_all_down(self):
        """All spins -1: same energy as all +1."""
        sigma = -jnp.ones(6, dtype=jnp.int32)
        assert int(energy(sigma, ring_pairs(6))) == 6

    def test_alternating(self):
        """Every bond antiparallel."""
        sigma = jnp.array([1, -1, 1, -1, 1, -1])
        assert int(energy(sigma, ring_pairs(6))) == -6

    def test_domain_wall_pair(self):
        sigma = jnp.array([1, 1, -1, -1, -1, -1])
        assert int(energy(sigma, ring_pairs(6))) == 2

    @pytest.mark.parametrize("reduced, expected", [
        ([1, 1], 2), ([-1, -1], 2), ([1, -1], -2), ([-1, 1], -2),
    ])
    def test_two_site_ring_doubles_bond(self, reduced, expected):
        """H' = s1' s2' + s2' s1' = 2 s1' s2'."""
        sigma = jnp.array(reduced)
        assert int(energy(sigma, ring_pairs(2))) == expected

    def test_batch_dimension(self):
        sigma = jnp.ones((5, 6), dtype=jnp.int32)
        E = energy(sigma, ring_pairs(6))
        assert E.shape == (5,)
        assert jnp.all(E == 6)

    def test_coupling_constant(self):
        sigma = jnp.array([1, 1, -1, -1, -1, -1])
        pairs = ring_pairs(6)
        assert int(energy(sigma, pairs, J=3)) == 3 * int(energy(sigma, pairs))
