# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
PySCF front-end for generating Broombridge inputs.

Pipeline: RHF → MO integral transform → unique integrals → Broombridge 0.2

File: hamnorm/interface/builder.py
Date: October, 2026
"""

from __future__ import annotations

from functools import reduce
from pathlib import Path
from typing import Optional, Union

import numpy as np
from pyscf import ao2mo, gto, scf

from ..operator.orbital import OrbitalIntegralHamiltonian
from ..utils.monitor import get_logger
from . import broombridge
from .problem import ElectronicStructureProblem, InitialState


def _hf_state(mol: gto.Mole, energy: float) -> InitialState:
    """RHF determinant: lowest n_alpha / n_beta orbitals occupied (1-based)."""
    n_alpha, n_beta = mol.nelec
    ops = tuple(f"({i + 1}a)+" for i in range(n_alpha))
    ops += tuple(f"({i + 1}b)+" for i in range(n_beta))
    return InitialState(label="|G>", energy=energy, terms=[(1.0, ops)])


def problem_from_scf(
    mol: gto.Mole,
    mf: scf.hf.SCF,
    *,
    name: Optional[str] = None,
    threshold: float = 1e-12,
) -> ElectronicStructureProblem:
    """
    Build a problem from a converged RHF object.

    Args:
        mol: PySCF molecule
        mf: Converged RHF mean-field
        name: Problem label
        threshold: Drop integrals with |value| <= threshold
    """
    mo = mf.mo_coeff
    n_orb = mo.shape[1]

    h1 = reduce(np.dot, (mo.T, mf.get_hcore(), mo))
    eri = ao2mo.restore(1, ao2mo.kernel(mol, mo), n_orb)

    hamiltonian = OrbitalIntegralHamiltonian.from_arrays(
        h1, eri, e0=mol.energy_nuc(), threshold=threshold
    )
    basis = mol.basis if isinstance(mol.basis, str) else None

    return ElectronicStructureProblem(
        name=name or "system",
        hamiltonian=hamiltonian,
        n_orbitals=n_orb,
        n_electrons=mol.nelectron,
        basis_set=basis,
        coulomb_repulsion=float(mol.energy_nuc()),
        scf_energy=float(mf.e_tot),
        initial_states=[_hf_state(mol, float(mf.e_tot))],
    )


def export_molecule(
    atom: Union[str, list],
    basis: str,
    path: Union[str, Path],
    *,
    name: str = "system",
    charge: int = 0,
    spin: int = 0,
    unit: str = "Angstrom",
    threshold: float = 1e-12,
) -> ElectronicStructureProblem:
    """
    One-shot RHF + Broombridge export.

    Args:
        atom: PySCF geometry
        basis: Basis set identifier
        path: Output YAML path
        name: Problem label stored in metadata
        charge: Total charge
        spin: 2S
        unit: Coordinate unit
        threshold: Integral cutoff
    """
    log = get_logger()

    mol = gto.M(atom=atom, basis=basis, charge=charge, spin=spin, unit=unit, verbose=0)
    mf = scf.RHF(mol).run()
    if not mf.converged:
        log.warning(f"RHF did not converge for {name}")
    log.info(f"RHF energy ({name}): {mf.e_tot:.8f} Ha")

    problem = problem_from_scf(mol, mf, name=name, threshold=threshold)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        broombridge.serialize([problem], f)
    log.info(f"Exported {len(problem.hamiltonian)} integrals to {path}")
    return problem


__all__ = ["problem_from_scf", "export_molecule"]
