# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Second-quantized fermion Hamiltonians and their one-norms.

Conversion from orbital integrals (Mulliken order):

  H = E0 + Σ_{pq,σ} h_pq a†_{pσ} a_{qσ}
         + ½ Σ_{pqrs,στ} (pq|rs) a†_{pσ} a†_{rτ} a_{sτ} a_{qσ}

The spin-orbital expansion and normal ordering are done by OpenFermion
(creations left, each kind in descending index order). Each Hermitian pair
T, T† is stored once under the smaller index sequence; a stored coefficient
c stands for c (T + T†) unless T is self-adjoint.

File: hamnorm/operator/fermion.py
Date: October, 2026
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional, Sequence, Set, Tuple

import numpy as np
from openfermion import (
    FermionOperator,
    InteractionOperator,
    get_fermion_operator,
    normal_ordered,
)
from openfermion.chem.molecular_data import spinorb_from_spatial

from .orbital import OrbitalIntegralHamiltonian


# ============================================================================
# Enums
# ============================================================================

class IndexConvention(str, Enum):
    """Spin-orbital indexing schemes."""
    UP_DOWN = "UpDown"   # orbital + spin * n_orb
    HALF_UP = "HalfUp"   # 2 * orbital + spin


class FermionTermType(str, Enum):
    """Fermion term categories by operator count and distinct indices."""
    IDENTITY = "Identity"
    PP = "PP"
    PQ = "PQ"
    PQQP = "PQQP"
    PQQR = "PQQR"
    PQRS = "PQRS"


_TWO_OP_TYPES = {1: FermionTermType.PP, 2: FermionTermType.PQ}
_FOUR_OP_TYPES = {
    2: FermionTermType.PQQP,
    3: FermionTermType.PQQR,
    4: FermionTermType.PQRS,
}


def spin_orbital_index(
    orbital: int,
    spin: int,
    n_orbitals: int,
    convention: IndexConvention = IndexConvention.UP_DOWN,
) -> int:
    """Map (spatial orbital, spin) to a spin-orbital index."""
    convention = IndexConvention(convention)
    if convention is IndexConvention.UP_DOWN:
        return orbital + spin * n_orbitals
    return 2 * orbital + spin


# ============================================================================
# Term Canonicalization
# ============================================================================

def _hermitian_key(key: Tuple[int, ...]) -> Tuple[int, ...]:
    """Key of T† for a normal-ordered key (creations and annihilations swap)."""
    half = len(key) // 2
    return key[half:] + key[:half]


def canonical_term(
    creations: Sequence[int], annihilations: Sequence[int]
) -> Optional[Tuple[int, Tuple[int, ...]]]:
    """
    Canonical key of a product a†_{c1}..a†_{ck} a_{a1}..a_{ak}.

    The product is normal ordered by OpenFermion; the key is the smaller of
    the ordered index sequence and that of its Hermitian conjugate.

    Returns:
        (sign, key) or None if the product vanishes
    """
    if len(creations) != len(annihilations):
        raise ValueError(
            f"Unbalanced ladder sequence: {len(creations)} creation vs "
            f"{len(annihilations)} annihilation operators"
        )
    ladder = tuple((int(i), 1) for i in creations) + tuple((int(i), 0) for i in annihilations)
    ordered = {t: c for t, c in normal_ordered(FermionOperator(ladder)).terms.items() if c != 0}
    if not ordered:
        return None

    (term, sign), = ordered.items()
    key = tuple(index for index, _ in term)
    return int(round(np.real(sign))), min(key, _hermitian_key(key))


def is_self_adjoint(key: Tuple[int, ...]) -> bool:
    return key == _hermitian_key(key)


def term_type_of(key: Tuple[int, ...]) -> FermionTermType:
    """Classify a canonical key."""
    n_unique = len(set(key))
    if len(key) == 0:
        return FermionTermType.IDENTITY
    if len(key) == 2:
        return _TWO_OP_TYPES[n_unique]
    if len(key) == 4:
        return _FOUR_OP_TYPES[n_unique]
    raise ValueError(f"Unsupported fermion term with {len(key)} operators: {key}")


# ============================================================================
# Fermion Hamiltonian
# ============================================================================

class FermionHamiltonian:
    """
    Fermion Hamiltonian as {term type: {canonical key: coefficient}}.

    Attributes:
        terms: Coefficients grouped by FermionTermType
        system_indices: Spin-orbital indices the Hamiltonian acts on
    """

    def __init__(self) -> None:
        self.terms: Dict[FermionTermType, Dict[Tuple[int, ...], float]] = {}
        self.system_indices: Set[int] = set()

    def add(
        self,
        creations: Sequence[int],
        annihilations: Sequence[int],
        coefficient: float,
    ) -> None:
        """
        Accumulate coefficient onto the canonical form of a ladder product.

        Vanishing products are ignored.
        """
        canon = canonical_term(creations, annihilations)
        if canon is None:
            return
        sign, key = canon
        self.accumulate(key, sign * coefficient)

    def accumulate(self, key: Tuple[int, ...], coefficient: float) -> None:
        """Add coefficient to an already canonical key."""
        bucket = self.terms.setdefault(term_type_of(key), {})
        bucket[key] = bucket.get(key, 0.0) + float(coefficient)

    def prune(self, threshold: float = 0.0) -> None:
        """Drop terms with |c| <= threshold and any emptied categories."""
        for term_type in list(self.terms):
            bucket = {k: c for k, c in self.terms[term_type].items() if abs(c) > threshold}
            if bucket:
                self.terms[term_type] = bucket
            else:
                del self.terms[term_type]

    @property
    def term_types(self) -> Tuple[FermionTermType, ...]:
        """Present categories in declaration order."""
        return tuple(t for t in FermionTermType if t in self.terms)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.terms.values())

    def norm(
        self,
        term_types: Optional[Iterable[FermionTermType]] = None,
        power: float = 1.0,
    ) -> float:
        """
        Weighted norm (Σ |c|^power)^(1/power) over selected categories.

        Args:
            term_types: Categories to include (default: all present)
            power: Norm exponent, must be positive
        """
        if power <= 0:
            raise ValueError(f"Norm power must be positive, got {power}")
        if term_types is None:
            term_types = self.term_types

        coeffs = [
            c
            for t in term_types
            for c in self.terms.get(FermionTermType(t), {}).values()
        ]
        if not coeffs:
            return 0.0
        total = np.sum(np.abs(np.asarray(coeffs, dtype=np.float64)) ** power)
        return float(total ** (1.0 / power))




# ============================================================================
# Orbital → Fermion Conversion
# ============================================================================

def _spin_orbital_permutation(n_orbitals: int, convention: IndexConvention) -> np.ndarray:
    """Target index of each OpenFermion (interleaved, 2p + σ) spin orbital."""
    return np.array(
        [spin_orbital_index(i // 2, i % 2, n_orbitals, convention) for i in range(2 * n_orbitals)],
        dtype=np.int64,
    )


def _interaction_operator(
    hamiltonian: OrbitalIntegralHamiltonian, convention: IndexConvention
) -> InteractionOperator:
    """Spin-orbital InteractionOperator indexed in the requested convention."""
    e0, h1, eri = hamiltonian.to_arrays()
    n_orb = h1.shape[0]

    # Mulliken (pq|rs) -> OpenFermion's <ps|qr>-style ordering
    one_body, two_body = spinorb_from_spatial(h1, np.asarray(eri.transpose(0, 2, 3, 1), order="C"))

    perm = _spin_orbital_permutation(n_orb, convention)
    one_body_so = np.zeros_like(one_body)
    two_body_so = np.zeros_like(two_body)
    one_body_so[np.ix_(perm, perm)] = one_body
    two_body_so[np.ix_(perm, perm, perm, perm)] = two_body
    return InteractionOperator(e0, one_body_so, 0.5 * two_body_so)


def to_fermion_hamiltonian(
    hamiltonian: OrbitalIntegralHamiltonian,
    convention: IndexConvention = IndexConvention.UP_DOWN,
    threshold: float = 0.0,
) -> FermionHamiltonian:
    """
    Expand orbital integrals over spins into a FermionHamiltonian.

    The normal-ordered operator holds both T and T† of every non-self-adjoint
    product, so those contributions enter the folded key with weight ½.

    Args:
        hamiltonian: Orbital-integral Hamiltonian
        convention: Spin-orbital indexing scheme
        threshold: Prune terms with |c| <= threshold after accumulation
    """
    convention = IndexConvention(convention)
    n_orb = hamiltonian.n_orbitals
    out = FermionHamiltonian()

    if n_orb == 0:
        out.accumulate((), hamiltonian.energy_offset)
    else:
        operator = normal_ordered(get_fermion_operator(_interaction_operator(hamiltonian, convention)))
        for term, coeff in operator.terms.items():
            key = tuple(index for index, _ in term)
            weight = 1.0 if is_self_adjoint(key) else 0.5
            out.accumulate(min(key, _hermitian_key(key)), weight * float(np.real(coeff)))

    out.prune(threshold)
    out.system_indices = set(range(2 * n_orb))
    return out


__all__ = [
    "IndexConvention",
    "FermionTermType",
    "FermionHamiltonian",
    "spin_orbital_index",
    "canonical_term",
    "is_self_adjoint",
    "term_type_of",
    "to_fermion_hamiltonian",
]
