# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
HamNorm Interface Module.

Readers (and a writer) for electronic-structure problem files. The PySCF
exporter lives in hamnorm.interface.builder and is imported on demand.
"""

from .problem import (
    ElectronicStructureProblem,
    InitialState,
)

from . import broombridge, liquid

__all__ = [
    "ElectronicStructureProblem",
    "InitialState",
    "broombridge",
    "liquid",
]
