# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface: load a Hamiltonian file and log the one-norm of
each fermion term category.

Examples:
  hamnorm
  hamnorm --format LiQuiD --path h2_sto3g_4.dat
  hamnorm --config analysis.yaml --path other.yaml

File: hamnorm/cli.py
Date: October, 2026
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .analysis import run_analysis
from .config import DEFAULT_SAMPLE, AnalysisConfig, DataFormat
from .utils.monitor import RunContext


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="hamnorm",
        description="Compute one-norms of fermion Hamiltonian term categories",
    )
    parser.add_argument(
        "--format",
        type=str,
        default=None,
        metavar="{" + ",".join(f.value for f in DataFormat) + "}",
        help=f"Format to use when loading data (default: {DataFormat.BROOMBRIDGE.value})",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help=f"Path to data to be loaded (default: {DEFAULT_SAMPLE.name})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML analysis config; explicit flags override it",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AnalysisConfig:
    """Merge config file (if any) with command-line overrides."""
    updates = {}
    if args.format is not None:
        updates["format"] = DataFormat.parse(args.format)

    cfg = AnalysisConfig.load(args.config) if args.config is not None else AnalysisConfig()
    if args.path is not None:
        updates["path"] = args.path
    return cfg.model_copy(update=updates)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the analysis; errors propagate to the caller."""
    args = parse_args(argv)
    cfg = resolve_config(args)

    ctx = RunContext.create(level=logging.WARNING if args.quiet else logging.INFO)
    run_analysis(cfg, ctx)
    return 0


if __name__ == "__main__":
    sys.exit(main())
