# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Electronic-structure problem records produced by the deserializers.

File: hamnorm/interface/problem.py
Date: October, 2026
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..operator.orbital import OrbitalIntegral, OrbitalIntegralHamiltonian


@dataclass
class InitialState:
    """
    Suggested initial state as a sparse superposition.

    Each term is (amplitude, ladder operators), e.g.
    (1.0, ("(1a)+", "(2a)+", "(1b)+")) acting on |vacuum>.
    """
    label: str
    method: str = "sparse_multi_configurational"
    energy: Optional[float] = None
    terms: List[Tuple[float, Tuple[str, ...]]] = field(default_factory=list)


@dataclass(eq=False)
class ElectronicStructureProblem:
    """
    One Hamiltonian plus its physical context.

    Attributes:
        name: Problem label (molecule name or file tag)
        hamiltonian: Orbital integrals, identity term = total energy offset
        n_orbitals: Spatial orbitals declared by the file
        n_electrons: Electron count (None if the format omits it)
        coulomb_repulsion: Nuclear repulsion energy
        energy_offset: Additional constant shift
    """
    name: str
    hamiltonian: OrbitalIntegralHamiltonian
    n_orbitals: int
    n_electrons: Optional[int] = None
    basis_set: Optional[str] = None
    coulomb_repulsion: float = 0.0
    energy_offset: float = 0.0
    scf_energy: Optional[float] = None
    fci_energy: Optional[float] = None
    initial_states: List[InitialState] = field(default_factory=list)

    @property
    def total_offset(self) -> float:
        return self.coulomb_repulsion + self.energy_offset


def attach_offset(
    hamiltonian: OrbitalIntegralHamiltonian, coulomb_repulsion: float, energy_offset: float
) -> None:
    """Add the constant energy shift as the identity term (skipped if zero)."""
    offset = coulomb_repulsion + energy_offset
    if offset != 0.0:
        hamiltonian.add(OrbitalIntegral((), offset))


__all__ = ["InitialState", "ElectronicStructureProblem", "attach_offset"]
