"""Tests for majority-rule block reduction."""

from itertools import product

import jax.numpy as jnp
import pytest

from renorm_ising.blocking import block_spins, majority_rule


class TestMajorityRule:
    @pytest.mark.parametrize("block", list(product([-1, 1], repeat=3)))
    def test_sign_of_sum(self, block):
        """Every 3-spin block has a nonzero sum and maps to its sign."""
        total = sum(block)
        assert total != 0
        result = int(majority_rule(jnp.array(block)))
        assert result == (1 if total > 0 else -1)

    def test_batched(self):
        blocks = jnp.array([[1, 1, -1], [-1, -1, 1], [1, 1, 1]])
        assert jnp.array_equal(majority_rule(blocks), jnp.array([1, -1, 1]))

    def test_even_block_rejected(self):
        """Even blocks could tie."""
        with pytest.raises(ValueError):
            majority_rule(jnp.array([1, -1]))


class TestBlockSpins:
    def test_blocks_reduced_independently(self):
        sigma = jnp.array([1, 1, -1, -1, -1, -1])
        assert jnp.array_equal(block_spins(sigma, 3), jnp.array([1, -1]))

    def test_batch_shape(self):
        sigma = jnp.ones((4, 6), dtype=jnp.int32)
        assert block_spins(sigma, 3).shape == (4, 2)

    def test_indivisible_length(self):
        with pytest.raises(ValueError):
            block_spins(jnp.ones(7, dtype=jnp.int32), 3)
