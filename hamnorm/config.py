# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Analysis configuration using Pydantic.

Holds the input selection (format + path) and norm settings. Can be loaded
from / saved to YAML; relative paths in a YAML file resolve against the
file's directory.

File: hamnorm/config.py
Date: October, 2026
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .operator.fermion import IndexConvention

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_SAMPLE = DATA_DIR / "YAML" / "h2_sto-3g_0.741_int.yaml"


# ============================================================================
# Enums
# ============================================================================

class DataFormat(str, Enum):
    """Supported Hamiltonian file formats."""
    LIQUID = "LiQuiD"
    BROOMBRIDGE = "Broombridge"

    @classmethod
    def parse(cls, value: Union[str, DataFormat]) -> DataFormat:
        """
        Resolve a format selector (case-insensitive).

        Raises:
            ValueError: "Invalid data format <value>."
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(f"Invalid data format {value}.")


# ============================================================================
# Analysis Config
# ============================================================================

class AnalysisConfig(BaseModel):
    """
    Settings for one norm analysis run.

    Attributes:
        format: Input file format
        path: Hamiltonian file
        power: Norm exponent (1.0 = one-norm)
        convention: Spin-orbital index convention
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    format: DataFormat = DataFormat.BROOMBRIDGE
    path: Path = DEFAULT_SAMPLE
    power: float = Field(1.0, gt=0)
    convention: IndexConvention = IndexConvention.UP_DOWN

    @field_validator("format", mode="before")
    @classmethod
    def _parse_format(cls, v: Any) -> DataFormat:
        return DataFormat.parse(v)

    @classmethod
    def load(cls, path: Union[str, Path]) -> AnalysisConfig:
        """Load from YAML; 'path' is resolved relative to the config file."""
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Config file must be a YAML mapping")
        # An empty 'path:' entry falls back to the default sample
        if data.get("path") is None:
            data.pop("path", None)
        else:
            target = Path(data["path"])
            if not target.is_absolute():
                target = path.parent / target
            data["path"] = target
        return cls(**data)

    def save(self, path: Union[str, Path]) -> None:
        """Save to YAML file."""
        path = Path(path)
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)


__all__ = ["DATA_DIR", "DEFAULT_SAMPLE", "DataFormat", "AnalysisConfig"]
