# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures: bundled H2/STO-3G sample files and their reference values.

File: tests/python/conftest.py
Date: October, 2026
"""

from __future__ import annotations

from pathlib import Path

import pytest

from hamnorm.config import DATA_DIR

# H2 / STO-3G at 0.7414 Å (zero-based orbitals, Mulliken order)
H2_E_NUC = 0.713753990544
H2_H1 = {(0, 0): -1.252477495, (1, 1): -0.475934275}
H2_ERI = {
    (0, 0, 0, 0): 0.674493166,
    (0, 0, 1, 1): 0.663472101,
    (0, 1, 0, 1): 0.181287518,
    (1, 1, 1, 1): 0.697397950,
}

# Hand-expanded one-norms per fermion term category
_J00, _J01, _K01, _J11 = 0.674493166, 0.663472101, 0.181287518, 0.697397950
H2_NORMS = {
    "Identity": H2_E_NUC,
    "PP": 2 * (1.252477495 + 0.475934275),
    "PQQP": _J00 + _J11 + 2 * (_J01 - _K01) + 2 * _J01,
    "PQRS": 2 * _K01,
}
H2_TERM_COUNTS = {"Identity": 1, "PP": 4, "PQQP": 6, "PQRS": 2}


@pytest.fixture
def broombridge_path() -> Path:
    return DATA_DIR / "YAML" / "h2_sto-3g_0.741_int.yaml"


@pytest.fixture
def liquid_path() -> Path:
    return DATA_DIR / "Liquid" / "h2_sto3g_4.dat"
