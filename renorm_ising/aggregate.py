"""Boltzmann-weight bookkeeping for the block-spin map.

Coarse-graining sends Exp[k H] on 6 spins to Exp[A(k) + k' H'] on 2 spins,
with H' = 2 s1' s2'. Summing the 6-spin weights that share a reduced state:

    Exp[A(k) + 2k'] = Σ_{s1' = s2'}  Exp[k H]
    Exp[A(k) - 2k'] = Σ_{s1' != s2'} Exp[k H]

Both sums are stored as multiplicity tables keyed by H.
"""

from collections import defaultdict
from typing import Dict, Iterable, Tuple

import numpy as np

from renorm_ising.records import Record


def count_by_energy(records: Iterable[Record]) -> Tuple[Dict[int, int], Dict[int, int]]:
    """Split records by whether s1' == s2' and count each H1 value.

    Returns:
        (equal, unequal): plain dicts sorted by ascending H1
    """
    equal = defaultdict(int)
    unequal = defaultdict(int)
    for rec in records:
        bucket = equal if rec.reduced_equal else unequal
        bucket[rec.H1] += 1
    return dict(sorted(equal.items())), dict(sorted(unequal.items()))


def log_boltzmann_sum(counts: Dict[int, int], k):
    """ln Σ_H counts[H] Exp[H k], stable for large |k|. Broadcasts over k."""
    H = np.array(list(counts.keys()), dtype=np.float64)
    c = np.array(list(counts.values()), dtype=np.float64)
    k = np.asarray(k, dtype=np.float64)
    exponents = np.log(c) + np.multiply.outer(k, H)  # (..., num_terms)
    a_max = np.max(exponents, axis=-1, keepdims=True)
    return np.squeeze(a_max, -1) + np.log(np.sum(np.exp(exponents - a_max), axis=-1))


def renormalized_coupling(k, equal: Dict[int, int], unequal: Dict[int, int]):
    """Solve the block-spin map for the 2-site coupling k' and constant A(k).

    From Exp[A + 2k'] = W+ and Exp[A - 2k'] = W-:
        k' = (ln W+ - ln W-) / 4
        A  = (ln W+ + ln W-) / 2

    Args:
        k: 6-site coupling, scalar or array
        equal: multiplicities for s1' = s2'
        unequal: multiplicities for s1' != s2'

    Returns:
        (k_prime, A), each shaped like k
    """
    log_w_plus = log_boltzmann_sum(equal, k)
    log_w_minus = log_boltzmann_sum(unequal, k)
    k_prime = (log_w_plus - log_w_minus) / 4.0
    A = (log_w_plus + log_w_minus) / 2.0
    return k_prime, A
