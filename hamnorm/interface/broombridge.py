# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Broombridge (YAML) electronic-structure problem reader and writer.

Schema versions:
  - 0.1: problems listed under 'integral_sets'
  - 0.2: problems listed under 'problem_description'

Integrals are sparse [i, j, value] / [i, j, k, l, value] rows with 1-based
orbital indices; two-electron integrals use the Mulliken convention.

File: hamnorm/interface/broombridge.py
Date: October, 2026
"""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Optional, TextIO, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..operator.orbital import OrbitalIntegral, OrbitalIntegralHamiltonian, OrbitalTermType
from .problem import ElectronicStructureProblem, InitialState, attach_offset

SCHEMA_URL = (
    "https://raw.githubusercontent.com/Microsoft/Quantum/master/"
    "Chemistry/Schema/broombridge-0.2.schema.json"
)
SUPPORTED_VERSIONS = ("0.1", "0.2")


# ============================================================================
# Document Schema
# ============================================================================

class Quantity(BaseModel):
    """Scalar with units, e.g. {value: 0.71, units: hartree}."""
    model_config = ConfigDict(extra="ignore")

    value: float
    units: str = "hartree"


class SparseArray(BaseModel):
    """Sparse integral block."""
    model_config = ConfigDict(extra="ignore")

    units: str = "hartree"
    format: str = "sparse"
    index_convention: str = "mulliken"
    values: List[List[float]] = Field(default_factory=list)


class HamiltonianBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")

    one_electron_integrals: SparseArray = Field(default_factory=SparseArray)
    two_electron_integrals: SparseArray = Field(default_factory=SparseArray)


class InitialStateBlock(BaseModel):
    model_config = ConfigDict(extra="ignore")

    label: str
    method: str = "sparse_multi_configurational"
    energy: Optional[Quantity] = None
    superposition: List[List[Union[float, str]]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _unwrap_state(cls, data: Any) -> Any:
        # Version 0.1 nests the suggestion under 'state'
        if isinstance(data, dict) and "state" in data and "label" not in data:
            return data["state"]
        return data


class ProblemBlock(BaseModel):
    """One entry of 'problem_description' (0.2) or 'integral_sets' (0.1)."""
    model_config = ConfigDict(extra="ignore")

    metadata: Dict[str, Any] = Field(default_factory=dict)
    basis_set: Optional[Dict[str, Any]] = None
    coulomb_repulsion: Quantity = Field(default_factory=lambda: Quantity(value=0.0))
    energy_offset: Quantity = Field(default_factory=lambda: Quantity(value=0.0))
    scf_energy: Optional[Quantity] = None
    fci_energy: Optional[Quantity] = None
    n_orbitals: int
    n_electrons: int
    hamiltonian: HamiltonianBlock
    initial_state_suggestions: List[InitialStateBlock] = Field(default_factory=list)


class FormatBlock(BaseModel):
    version: str

    @field_validator("version", mode="before")
    @classmethod
    def _as_str(cls, v: Any) -> str:
        return str(v)


class BroombridgeDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    format: FormatBlock
    problem_description: List[ProblemBlock] = Field(default_factory=list)
    integral_sets: List[ProblemBlock] = Field(default_factory=list)

    @property
    def problems(self) -> List[ProblemBlock]:
        if self.format.version == "0.1":
            return self.integral_sets
        return self.problem_description


# ============================================================================
# Deserialization
# ============================================================================

def _check_hartree(units: str, where: str) -> None:
    if units.lower() != "hartree":
        raise ValueError(f"Unsupported units '{units}' for {where}; expected hartree")


def _parse_integrals(
    block: SparseArray, n_indices: int, where: str
) -> List[OrbitalIntegral]:
    """Convert sparse 1-based rows into zero-based OrbitalIntegrals."""
    _check_hartree(block.units, where)
    if block.format != "sparse":
        raise ValueError(f"Unsupported {where} format '{block.format}'; expected sparse")

    integrals = []
    for row in block.values:
        if len(row) != n_indices + 1:
            raise ValueError(
                f"{where} row {row} must have {n_indices} indices and a value"
            )
        indices = []
        for idx in row[:n_indices]:
            if not math.isfinite(idx) or float(idx) != int(idx) or int(idx) < 1:
                raise ValueError(f"{where} row {row} has invalid orbital index {idx}")
            indices.append(int(idx) - 1)
        integrals.append(OrbitalIntegral(tuple(indices), row[n_indices]))
    return integrals


def _to_initial_state(block: InitialStateBlock) -> InitialState:
    terms = []
    for row in block.superposition:
        if not row:
            continue
        amplitude, *ops = row
        # Trailing '|vacuum>' marks the reference, not an operator
        ops = tuple(str(op) for op in ops if str(op) != "|vacuum>")
        terms.append((float(amplitude), ops))
    energy = None
    if block.energy is not None:
        _check_hartree(block.energy.units, f"initial state {block.label}")
        energy = block.energy.value
    return InitialState(label=block.label, method=block.method, energy=energy, terms=terms)


def _to_problem(block: ProblemBlock, position: int) -> ElectronicStructureProblem:
    two_body = block.hamiltonian.two_electron_integrals
    if two_body.index_convention.lower() != "mulliken":
        raise ValueError(
            f"Unsupported two-electron index convention '{two_body.index_convention}'"
        )
    for label in ("coulomb_repulsion", "energy_offset", "scf_energy", "fci_energy"):
        q = getattr(block, label)
        if q is not None:
            _check_hartree(q.units, label)

    hamiltonian = OrbitalIntegralHamiltonian()
    hamiltonian.add_terms(
        _parse_integrals(block.hamiltonian.one_electron_integrals, 2, "one_electron_integrals")
    )
    hamiltonian.add_terms(
        _parse_integrals(two_body, 4, "two_electron_integrals")
    )
    attach_offset(hamiltonian, block.coulomb_repulsion.value, block.energy_offset.value)

    basis = block.basis_set.get("name") if block.basis_set else None
    name = str(block.metadata.get("molecule_name", f"problem_{position}"))

    return ElectronicStructureProblem(
        name=name,
        hamiltonian=hamiltonian,
        n_orbitals=block.n_orbitals,
        n_electrons=block.n_electrons,
        basis_set=basis,
        coulomb_repulsion=block.coulomb_repulsion.value,
        energy_offset=block.energy_offset.value,
        scf_energy=block.scf_energy.value if block.scf_energy else None,
        fci_energy=block.fci_energy.value if block.fci_energy else None,
        initial_states=[_to_initial_state(s) for s in block.initial_state_suggestions],
    )


def deserialize(reader: TextIO) -> List[ElectronicStructureProblem]:
    """
    Parse a Broombridge document into problems.

    Raises:
        yaml.YAMLError: Invalid YAML
        ValueError: Unsupported version, units, convention or malformed rows
            (pydantic.ValidationError is a ValueError)
    """
    data = yaml.safe_load(reader)
    if not isinstance(data, dict):
        raise ValueError("Broombridge document must be a YAML mapping")

    doc = BroombridgeDocument.model_validate(data)
    if doc.format.version not in SUPPORTED_VERSIONS:
        raise ValueError(
            f"Unsupported Broombridge version {doc.format.version}; "
            f"expected one of {SUPPORTED_VERSIONS}"
        )
    return [_to_problem(block, i) for i, block in enumerate(doc.problems)]


# ============================================================================
# Serialization
# ============================================================================

def _quantity(value: float) -> Dict[str, Any]:
    return {"units": "hartree", "value": float(value)}


def _sparse_rows(hamiltonian: OrbitalIntegralHamiltonian, term_type: OrbitalTermType) -> list:
    return [
        [i + 1 for i in key] + [float(coeff)]
        for key, coeff in hamiltonian.terms.get(term_type, {}).items()
    ]


def _problem_to_dict(problem: ElectronicStructureProblem) -> Dict[str, Any]:
    ham = problem.hamiltonian
    entry: Dict[str, Any] = {
        "metadata": {"molecule_name": problem.name},
        "basis_set": {"name": problem.basis_set or "unknown", "type": "gaussian"},
        "coulomb_repulsion": _quantity(problem.coulomb_repulsion),
        "energy_offset": _quantity(problem.energy_offset),
        "n_orbitals": int(problem.n_orbitals),
        "n_electrons": int(problem.n_electrons or 0),
        "hamiltonian": {
            "one_electron_integrals": {
                "units": "hartree",
                "format": "sparse",
                "values": _sparse_rows(ham, OrbitalTermType.ONE_BODY),
            },
            "two_electron_integrals": {
                "index_convention": "mulliken",
                "units": "hartree",
                "format": "sparse",
                "values": _sparse_rows(ham, OrbitalTermType.TWO_BODY),
            },
        },
    }
    if problem.scf_energy is not None:
        entry["scf_energy"] = _quantity(problem.scf_energy)
    if problem.fci_energy is not None:
        entry["fci_energy"] = _quantity(problem.fci_energy)
    if problem.initial_states:
        suggestions = []
        for state in problem.initial_states:
            item: Dict[str, Any] = {"label": state.label, "method": state.method}
            if state.energy is not None:
                item["energy"] = _quantity(state.energy)
            item["superposition"] = [
                [float(amp), *ops, "|vacuum>"] for amp, ops in state.terms
            ]
            suggestions.append(item)
        entry["initial_state_suggestions"] = suggestions
    return entry


def serialize(problems: Iterable[ElectronicStructureProblem], writer: TextIO) -> None:
    """Write problems as a Broombridge 0.2 document."""
    doc = {
        "$schema": SCHEMA_URL,
        "format": {"version": "0.2"},
        "problem_description": [_problem_to_dict(p) for p in problems],
    }
    yaml.safe_dump(doc, writer, sort_keys=False, default_flow_style=None)


__all__ = ["SCHEMA_URL", "BroombridgeDocument", "deserialize", "serialize"]
