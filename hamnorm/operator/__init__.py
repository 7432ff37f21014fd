# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Operator layer: orbital-integral and fermion Hamiltonians.

Public surface:
  - OrbitalIntegral / OrbitalIntegralHamiltonian with 2- and 8-fold symmetries
  - FermionHamiltonian with Hermitian-pair storage and weighted norms
  - Spin-orbital index conventions and orbital → fermion conversion
"""

from .orbital import (
    OrbitalTermType,
    OrbitalIntegral,
    OrbitalIntegralHamiltonian,
    orbital_symmetries,
)

from .fermion import (
    IndexConvention,
    FermionTermType,
    FermionHamiltonian,
    canonical_term,
    spin_orbital_index,
    to_fermion_hamiltonian,
)

__all__ = [
    # orbital
    "OrbitalTermType",
    "OrbitalIntegral",
    "OrbitalIntegralHamiltonian",
    "orbital_symmetries",
    # fermion
    "IndexConvention",
    "FermionTermType",
    "FermionHamiltonian",
    "canonical_term",
    "spin_orbital_index",
    "to_fermion_hamiltonian",
]
