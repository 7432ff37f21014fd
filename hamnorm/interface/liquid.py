# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
LiQuiD integral dump reader.

Each non-empty line is one problem made of whitespace-separated key=value
tokens:

  tst=h2_sto3g nuc=0.7137 nf=4 0,0=-1.2524 1,1=-0.4759 0,0,0,0=0.6744 ...

  tst   problem name
  nuc   Coulomb (nuclear) repulsion, Hartree
  nf    number of spin orbitals (n_orbitals = nf / 2)
  nel   number of electrons
  p,q / p,q,r,s   zero-based integrals, two-body in Mulliken order

Other alphabetic keys are ignored. Lines starting with '#' are comments.

File: hamnorm/interface/liquid.py
Date: October, 2026
"""

from __future__ import annotations

import re
from typing import List, TextIO

from ..operator.orbital import OrbitalIntegral, OrbitalIntegralHamiltonian
from .problem import ElectronicStructureProblem, attach_offset

_INTEGRAL_KEY_RE = re.compile(r"^\d+(,\d+)*$")
_META_KEY_RE = re.compile(r"^[A-Za-z_]\w*$")


def _parse_float(token: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Malformed LiQuiD token '{token}': {value!r} is not a number") from None


def _parse_int(token: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Malformed LiQuiD token '{token}': {value!r} is not an integer") from None


def parse_line(line: str, line_no: int = 1) -> ElectronicStructureProblem:
    """
    Parse one LiQuiD problem line.

    Raises:
        ValueError: Malformed token, unsupported index count, or no integrals
    """
    name = f"liquid_{line_no}"
    coulomb = 0.0
    n_spin_orbitals = None
    n_electrons = None
    integrals = []

    for token in line.split():
        key, sep, value = token.partition("=")
        if not sep or not key or not value:
            raise ValueError(f"Malformed LiQuiD token '{token}' on line {line_no}")

        if _INTEGRAL_KEY_RE.match(key):
            indices = tuple(int(i) for i in key.split(","))
            if len(indices) not in (2, 4):
                raise ValueError(
                    f"LiQuiD integral '{token}' on line {line_no} must have 2 or 4 indices"
                )
            integrals.append(OrbitalIntegral(indices, _parse_float(token, value)))
        elif _META_KEY_RE.match(key):
            if key == "tst":
                name = value
            elif key == "nuc":
                coulomb = _parse_float(token, value)
            elif key == "nf":
                n_spin_orbitals = _parse_int(token, value)
                if n_spin_orbitals % 2:
                    raise ValueError(
                        f"LiQuiD token '{token}' on line {line_no} must be an even spin-orbital count"
                    )
            elif key == "nel":
                n_electrons = _parse_int(token, value)
        else:
            raise ValueError(f"Malformed LiQuiD token '{token}' on line {line_no}")

    if not integrals:
        raise ValueError(f"LiQuiD line {line_no} contains no integrals")

    hamiltonian = OrbitalIntegralHamiltonian(integrals)
    attach_offset(hamiltonian, coulomb, 0.0)

    n_orbitals = hamiltonian.n_orbitals
    if n_spin_orbitals is not None:
        n_orbitals = max(n_orbitals, n_spin_orbitals // 2)

    return ElectronicStructureProblem(
        name=name,
        hamiltonian=hamiltonian,
        n_orbitals=n_orbitals,
        n_electrons=n_electrons,
        coulomb_repulsion=coulomb,
    )


def deserialize(reader: TextIO) -> List[ElectronicStructureProblem]:
    """Parse every problem line of a LiQuiD dump."""
    problems = []
    for line_no, line in enumerate(reader, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        problems.append(parse_line(stripped, line_no))
    return problems


__all__ = ["deserialize", "parse_line"]
