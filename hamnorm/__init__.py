# file: hamnorm/__init__.py

"""
HamNorm: one-norm analysis of molecular Hamiltonians.

Reads Broombridge or LiQuiD integral files, expands them into second-quantized
fermion Hamiltonians and reports the norm of every term category.
"""

from .config import AnalysisConfig, DataFormat
from .analysis import load_problem, load_problems, one_norms, run_analysis
from .operator import (
    FermionHamiltonian,
    FermionTermType,
    IndexConvention,
    OrbitalIntegral,
    OrbitalIntegralHamiltonian,
    to_fermion_hamiltonian,
)

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "DataFormat",
    "load_problem",
    "load_problems",
    "one_norms",
    "run_analysis",
    "FermionHamiltonian",
    "FermionTermType",
    "IndexConvention",
    "OrbitalIntegral",
    "OrbitalIntegralHamiltonian",
    "to_fermion_hamiltonian",
]
