# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Hamiltonian loading and per-category norm analysis.

File: hamnorm/analysis.py
Date: October, 2026
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO, Union

from .config import AnalysisConfig, DataFormat
from .interface import broombridge, liquid
from .interface.problem import ElectronicStructureProblem
from .operator.fermion import FermionHamiltonian, FermionTermType, to_fermion_hamiltonian
from .utils.monitor import RunContext

_DESERIALIZERS: Dict[DataFormat, Callable[[TextIO], List[ElectronicStructureProblem]]] = {
    DataFormat.BROOMBRIDGE: broombridge.deserialize,
    DataFormat.LIQUID: liquid.deserialize,
}


def load_problems(
    path: Union[str, Path], fmt: Union[str, DataFormat]
) -> List[ElectronicStructureProblem]:
    """
    Deserialize every problem in a file.

    The format is validated before the file is opened.

    Raises:
        ValueError: Invalid format or malformed content
        OSError: Unreadable path
    """
    fmt = DataFormat.parse(fmt)
    with open(Path(path), "r", encoding="utf-8") as reader:
        return _DESERIALIZERS[fmt](reader)


def load_problem(
    path: Union[str, Path], fmt: Union[str, DataFormat]
) -> ElectronicStructureProblem:
    """Deserialize a file that must hold exactly one problem."""
    problems = load_problems(path, fmt)
    if len(problems) != 1:
        raise ValueError(f"Expected exactly one Hamiltonian in {path}, found {len(problems)}")
    return problems[0]


def one_norms(
    hamiltonian: FermionHamiltonian, power: float = 1.0
) -> Dict[FermionTermType, float]:
    """Norm of each present term category."""
    return {t: hamiltonian.norm([t], power) for t in hamiltonian.term_types}


def run_analysis(
    cfg: AnalysisConfig, ctx: Optional[RunContext] = None
) -> Dict[FermionTermType, float]:
    """
    Load cfg.path, convert to a fermion Hamiltonian and log category norms.

    Returns:
        {term type: norm} in category order
    """
    ctx = ctx or RunContext.create()

    ctx.info(f"Processing {cfg.path}...")
    problem = load_problem(cfg.path, cfg.format)
    fermion = to_fermion_hamiltonian(problem.hamiltonian, cfg.convention)
    ctx.info("End read file. Computing one-norms.")

    norms = one_norms(fermion, cfg.power)
    for term_type, value in norms.items():
        ctx.info(f"One-norm for term type {term_type.value}: {value}")
    ctx.info("Computed one-norm.")
    return norms


__all__ = ["load_problems", "load_problem", "one_norms", "run_analysis"]
