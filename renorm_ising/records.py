"""Enumeration pass: every 6-spin configuration with its block-spin image.

Each Record holds a configuration of the 6-site ring, its majority-rule
reduction to the 2-site ring, and the energies H1 and H2 of both.
Records come out in ascending bitmask order (mask 0 first, mask 63 last).
"""

from dataclasses import dataclass
from typing import List, Tuple

from renorm_ising.blocking import block_spins
from renorm_ising.config import BLOCK_SIZE, N_SITES
from renorm_ising.enumeration import all_configurations
from renorm_ising.ising import energy, ring_pairs


@dataclass(frozen=True)
class Record:
    spins: Tuple[int, ...]    # (s1, ..., s6)
    reduced: Tuple[int, int]  # (s1', s2')
    H1: int
    H2: int

    @property
    def reduced_equal(self) -> bool:
        return self.reduced[0] == self.reduced[1]


def enumerate_records() -> List[Record]:
    """Evaluate all 2**N_SITES configurations in one batched pass."""
    sigma = all_configurations(N_SITES)                  # (64, 6)
    reduced = block_spins(sigma, BLOCK_SIZE)             # (64, 2)
    H1 = energy(sigma, ring_pairs(N_SITES))              # (64,)
    H2 = energy(reduced, ring_pairs(reduced.shape[-1]))  # (64,)

    return [
        Record(
            spins=tuple(int(s) for s in sigma[i]),
            reduced=tuple(int(s) for s in reduced[i]),
            H1=int(H1[i]),
            H2=int(H2[i]),
        )
        for i in range(sigma.shape[0])
    ]
