# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Export a PySCF molecule to Broombridge and report its term-category norms.

File: examples/run_export.py
Date: October, 2026

Examples:
  python run_export.py
  python run_export.py --atom "Li 0 0 0; H 0 0 1.6" --basis sto-3g --output lih.yaml
"""

from __future__ import annotations

import argparse
from pathlib import Path

from hamnorm.analysis import run_analysis
from hamnorm.config import AnalysisConfig, DataFormat
from hamnorm.interface.builder import export_molecule
from hamnorm.utils.monitor import RunContext


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="PySCF → Broombridge → one-norms",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--atom", type=str, default="H 0 0 0; H 0 0 0.7414", help="PySCF geometry")
    parser.add_argument("--basis", type=str, default="sto-3g", help="Basis set")
    parser.add_argument("--name", type=str, default="H2", help="Molecule name")
    parser.add_argument("--output", type=Path, default=Path("h2_sto-3g.yaml"), help="Broombridge file")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    ctx = RunContext.create()

    ctx.header("Export")
    problem = export_molecule(args.atom, args.basis, args.output, name=args.name)
    ctx.log_kv("Orbitals", str(problem.n_orbitals))
    ctx.log_kv("Electrons", str(problem.n_electrons))
    ctx.log_kv("SCF energy", f"{problem.scf_energy:.8f} Ha")

    ctx.header("One-norms")
    norms = run_analysis(AnalysisConfig(format=DataFormat.BROOMBRIDGE, path=args.output), ctx)
    ctx.log_kv("Total", f"{sum(norms.values()):.8f}")


if __name__ == "__main__":
    main()
