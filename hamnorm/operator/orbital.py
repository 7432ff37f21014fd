# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Orbital-integral Hamiltonians over real spatial orbitals.

An orbital integral is either the identity (energy offset), a one-body
integral h_pq or a two-body integral (pq|rs) in Mulliken order. Integrals are
stored once per symmetry class under their canonical (lexicographically
smallest) index tuple:

  one-body:  h_pq = h_qp
  two-body:  (pq|rs) = (qp|rs) = (pq|sr) = (qp|sr)
                     = (rs|pq) = (sr|pq) = (rs|qp) = (sr|qp)

File: hamnorm/operator/orbital.py
Date: October, 2026
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple

import numpy as np


class OrbitalTermType(str, Enum):
    """Orbital integral categories."""
    IDENTITY = "Identity"
    ONE_BODY = "OneBody"
    TWO_BODY = "TwoBody"


_TYPE_BY_LENGTH = {
    0: OrbitalTermType.IDENTITY,
    2: OrbitalTermType.ONE_BODY,
    4: OrbitalTermType.TWO_BODY,
}


# ============================================================================
# Orbital Integral
# ============================================================================

@dataclass(frozen=True)
class OrbitalIntegral:
    """
    Single orbital integral with zero-based spatial orbital indices.

    Attributes:
        indices: () for identity, (p, q) or (p, q, r, s) in Mulliken order
        coefficient: Integral value in Hartree
    """
    indices: Tuple[int, ...] = ()
    coefficient: float = 0.0

    def __post_init__(self) -> None:
        indices = tuple(int(i) for i in self.indices)
        if len(indices) not in _TYPE_BY_LENGTH:
            raise ValueError(
                f"Orbital integral must have 0, 2 or 4 indices, got {indices}"
            )
        if any(i < 0 for i in indices):
            raise ValueError(f"Negative orbital index in {indices}")
        object.__setattr__(self, "indices", indices)
        object.__setattr__(self, "coefficient", float(self.coefficient))

    @property
    def term_type(self) -> OrbitalTermType:
        return _TYPE_BY_LENGTH[len(self.indices)]

    def symmetries(self) -> Tuple[Tuple[int, ...], ...]:
        """All distinct index tuples equivalent to this integral."""
        return orbital_symmetries(self.indices)

    def canonical(self) -> OrbitalIntegral:
        """Same integral keyed by its canonical index tuple."""
        return OrbitalIntegral(min(self.symmetries()), self.coefficient)


def orbital_symmetries(indices: Tuple[int, ...]) -> Tuple[Tuple[int, ...], ...]:
    """
    Enumerate symmetry-equivalent index tuples, first occurrence order.

    Args:
        indices: (), (p, q) or Mulliken (p, q, r, s)

    Returns:
        Tuple of distinct index tuples (1, 2, 4 or 8 entries)
    """
    if len(indices) == 0:
        return ((),)
    if len(indices) == 2:
        p, q = indices
        variants = [(p, q), (q, p)]
    elif len(indices) == 4:
        p, q, r, s = indices
        variants = [
            (p, q, r, s), (q, p, r, s), (p, q, s, r), (q, p, s, r),
            (r, s, p, q), (s, r, p, q), (r, s, q, p), (s, r, q, p),
        ]
    else:
        raise ValueError(f"Unsupported orbital index tuple {indices}")
    return tuple(dict.fromkeys(variants))


# ============================================================================
# Orbital Integral Hamiltonian
# ============================================================================

class OrbitalIntegralHamiltonian:
    """
    Orbital-integral Hamiltonian grouped by term type.

    Terms are canonicalized on insertion; adding an integral whose symmetry
    class is already present accumulates its coefficient.
    """

    def __init__(self, integrals: Optional[Iterable[OrbitalIntegral]] = None):
        self.terms: Dict[OrbitalTermType, Dict[Tuple[int, ...], float]] = {}
        if integrals is not None:
            self.add_terms(integrals)

    def add(self, integral: OrbitalIntegral) -> None:
        """Accumulate one integral under its canonical key."""
        key = min(integral.symmetries())
        bucket = self.terms.setdefault(integral.term_type, {})
        bucket[key] = bucket.get(key, 0.0) + integral.coefficient

    def add_terms(self, integrals: Iterable[OrbitalIntegral]) -> None:
        for integral in integrals:
            self.add(integral)

    def __iter__(self) -> Iterator[OrbitalIntegral]:
        for term_type in OrbitalTermType:
            for key, coeff in self.terms.get(term_type, {}).items():
                yield OrbitalIntegral(key, coeff)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.terms.values())

    @property
    def system_indices(self) -> Set[int]:
        """Spatial orbital indices referenced by any term."""
        return {i for bucket in self.terms.values() for key in bucket for i in key}

    @property
    def n_orbitals(self) -> int:
        """Number of spatial orbitals: max index + 1."""
        indices = self.system_indices
        return max(indices) + 1 if indices else 0

    @property
    def energy_offset(self) -> float:
        return self.terms.get(OrbitalTermType.IDENTITY, {}).get((), 0.0)

    # ------------------------------------------------------------------------
    # Dense conversions
    # ------------------------------------------------------------------------

    def to_arrays(
        self, n_orbitals: Optional[int] = None
    ) -> Tuple[float, np.ndarray, np.ndarray]:
        """
        Expand to dense (e0, h1[p,q], eri[p,q,r,s]) with all symmetries filled.

        Args:
            n_orbitals: Array dimension (defaults to self.n_orbitals)
        """
        n = self.n_orbitals if n_orbitals is None else int(n_orbitals)
        if n < self.n_orbitals:
            raise ValueError(
                f"n_orbitals={n} smaller than highest orbital index + 1 ({self.n_orbitals})"
            )

        h1 = np.zeros((n, n), dtype=np.float64)
        eri = np.zeros((n, n, n, n), dtype=np.float64)
        for key, coeff in self.terms.get(OrbitalTermType.ONE_BODY, {}).items():
            for p, q in orbital_symmetries(key):
                h1[p, q] = coeff
        for key, coeff in self.terms.get(OrbitalTermType.TWO_BODY, {}).items():
            for p, q, r, s in orbital_symmetries(key):
                eri[p, q, r, s] = coeff
        return self.energy_offset, h1, eri

    @classmethod
    def from_arrays(
        cls,
        h1: np.ndarray,
        eri: np.ndarray,
        e0: float = 0.0,
        threshold: float = 0.0,
    ) -> OrbitalIntegralHamiltonian:
        """
        Build from dense integrals, keeping one entry per symmetry class.

        Args:
            h1: One-body integrals, shape (n, n)
            eri: Two-body integrals (Mulliken), shape (n, n, n, n)
            e0: Identity coefficient (skipped when zero)
            threshold: Drop integrals with |value| <= threshold
        """
        h1 = np.asarray(h1, dtype=np.float64)
        eri = np.asarray(eri, dtype=np.float64)

        ham = cls()
        if e0 != 0.0:
            ham.add(OrbitalIntegral((), e0))

        for p, q in np.argwhere(np.abs(h1) > threshold):
            key = (int(p), int(q))
            if key == min(orbital_symmetries(key)):
                ham.add(OrbitalIntegral(key, h1[p, q]))

        for p, q, r, s in np.argwhere(np.abs(eri) > threshold):
            key = (int(p), int(q), int(r), int(s))
            if key == min(orbital_symmetries(key)):
                ham.add(OrbitalIntegral(key, eri[p, q, r, s]))
        return ham


__all__ = [
    "OrbitalTermType",
    "OrbitalIntegral",
    "OrbitalIntegralHamiltonian",
    "orbital_symmetries",
]
