# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Tests for orbital integrals and their symmetry handling.

File: tests/python/test_orbital.py
Date: October, 2026
"""

from __future__ import annotations

import numpy as np
import pytest

from hamnorm.operator.orbital import (
    OrbitalIntegral,
    OrbitalIntegralHamiltonian,
    OrbitalTermType,
    orbital_symmetries,
)

from conftest import H2_E_NUC, H2_ERI, H2_H1


def _h2_hamiltonian() -> OrbitalIntegralHamiltonian:
    ham = OrbitalIntegralHamiltonian()
    ham.add(OrbitalIntegral((), H2_E_NUC))
    for key, val in {**H2_H1, **H2_ERI}.items():
        ham.add(OrbitalIntegral(key, val))
    return ham


# ============================================================================
# OrbitalIntegral
# ============================================================================

@pytest.mark.parametrize(
    "indices, n_variants",
    [
        ((), 1),
        ((0, 0), 1),
        ((0, 1), 2),
        ((0, 0, 0, 0), 1),
        ((0, 0, 1, 1), 2),
        ((0, 1, 0, 1), 4),
        ((0, 1, 2, 3), 8),
    ],
)
def test_symmetry_count(indices, n_variants):
    variants = orbital_symmetries(indices)
    assert len(variants) == n_variants
    assert variants[0] == indices


def test_canonical_picks_smallest_variant():
    assert OrbitalIntegral((3, 2, 1, 0), 0.1).canonical().indices == (0, 1, 2, 3)
    assert OrbitalIntegral((1, 0), 0.1).canonical().indices == (0, 1)


def test_term_type():
    assert OrbitalIntegral().term_type is OrbitalTermType.IDENTITY
    assert OrbitalIntegral((0, 1), 1.0).term_type is OrbitalTermType.ONE_BODY
    assert OrbitalIntegral((0, 1, 1, 0), 1.0).term_type is OrbitalTermType.TWO_BODY


@pytest.mark.parametrize("indices", [(0,), (0, 1, 2), (0, -1)])
def test_invalid_indices_rejected(indices):
    with pytest.raises(ValueError):
        OrbitalIntegral(indices, 1.0)


# ============================================================================
# OrbitalIntegralHamiltonian
# ============================================================================

def test_equivalent_terms_accumulate():
    ham = OrbitalIntegralHamiltonian()
    ham.add(OrbitalIntegral((0, 1), 0.5))
    ham.add(OrbitalIntegral((1, 0), 0.25))
    ham.add(OrbitalIntegral((1, 0, 3, 2), 0.1))
    ham.add(OrbitalIntegral((2, 3, 0, 1), 0.2))

    assert ham.terms[OrbitalTermType.ONE_BODY] == {(0, 1): pytest.approx(0.75)}
    assert ham.terms[OrbitalTermType.TWO_BODY] == {(0, 1, 2, 3): pytest.approx(0.3)}
    assert len(ham) == 2


def test_system_indices_and_size():
    ham = _h2_hamiltonian()
    assert ham.system_indices == {0, 1}
    assert ham.n_orbitals == 2
    assert ham.energy_offset == pytest.approx(H2_E_NUC)
    assert len(ham) == 7
    assert OrbitalIntegralHamiltonian().n_orbitals == 0


def test_to_arrays_fills_symmetric_entries():
    e0, h1, eri = _h2_hamiltonian().to_arrays()

    assert e0 == pytest.approx(H2_E_NUC)
    assert h1.shape == (2, 2)
    assert np.allclose(h1, h1.T)
    assert eri[1, 0, 1, 0] == pytest.approx(H2_ERI[(0, 1, 0, 1)])
    assert eri[1, 1, 0, 0] == pytest.approx(H2_ERI[(0, 0, 1, 1)])
    assert np.allclose(eri, eri.transpose(2, 3, 0, 1))

    with pytest.raises(ValueError):
        _h2_hamiltonian().to_arrays(n_orbitals=1)


def test_from_arrays_keeps_one_entry_per_class():
    e0, h1, eri = _h2_hamiltonian().to_arrays()
    rebuilt = OrbitalIntegralHamiltonian.from_arrays(h1, eri, e0=e0)

    assert len(rebuilt) == 7
    for term_type, bucket in _h2_hamiltonian().terms.items():
        assert rebuilt.terms[term_type] == pytest.approx(bucket)


def test_from_arrays_threshold_drops_small_entries():
    h1 = np.array([[1.0, 1e-10], [1e-10, 2.0]])
    eri = np.zeros((2, 2, 2, 2))
    ham = OrbitalIntegralHamiltonian.from_arrays(h1, eri, threshold=1e-8)
    assert set(ham.terms[OrbitalTermType.ONE_BODY]) == {(0, 0), (1, 1)}
    assert OrbitalTermType.TWO_BODY not in ham.terms
    assert OrbitalTermType.IDENTITY not in ham.terms
