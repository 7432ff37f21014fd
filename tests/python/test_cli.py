# Copyright 2026 The HamNorm Authors - All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
End-to-end tests for the command-line entry point.

Covers: one log line per term category, format validation before any file
access, I/O failures, both input formats and run-to-run stability.

File: tests/python/test_cli.py
Date: October, 2026
"""

from __future__ import annotations

import builtins
import logging
import subprocess
import sys

import pytest

from hamnorm import analysis
from hamnorm.cli import main, parse_args, resolve_config
from hamnorm.config import DEFAULT_SAMPLE, DataFormat

from conftest import H2_NORMS

_PREFIX = "One-norm for term type "


# ============================================================================
# Helper Functions
# ============================================================================

def _norm_lines(caplog) -> dict:
    """Collect {term type: value} from logged norm lines."""
    out = {}
    for record in caplog.records:
        msg = record.getMessage()
        if msg.startswith(_PREFIX):
            key, value = msg[len(_PREFIX):].split(": ")
            assert key not in out, f"duplicate norm line for {key}"
            out[key] = float(value)
    return out


def _run(caplog, argv) -> dict:
    caplog.clear()
    with caplog.at_level(logging.INFO, logger="hamnorm"):
        assert main(argv) == 0
    return _norm_lines(caplog)


# ============================================================================
# Argument Handling
# ============================================================================

def test_defaults():
    cfg = resolve_config(parse_args([]))
    assert cfg.format is DataFormat.BROOMBRIDGE
    assert cfg.path == DEFAULT_SAMPLE
    assert cfg.power == 1.0


def test_format_is_case_insensitive():
    cfg = resolve_config(parse_args(["--format", "liquid"]))
    assert cfg.format is DataFormat.LIQUID


# ============================================================================
# Behaviour
# ============================================================================

def test_default_sample_logs_each_category_once(caplog):
    norms = _run(caplog, [])

    assert set(norms) == set(H2_NORMS)
    for key, value in norms.items():
        assert value >= 0.0
        assert value == pytest.approx(H2_NORMS[key])

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == f"Processing {DEFAULT_SAMPLE}..."
    assert messages[1] == "End read file. Computing one-norms."
    assert messages[-1] == "Computed one-norm."


def test_both_formats_agree(caplog, broombridge_path, liquid_path):
    bb = _run(caplog, ["--format", "Broombridge", "--path", str(broombridge_path)])
    lq = _run(caplog, ["--format", "LiQuiD", "--path", str(liquid_path)])

    assert bb and lq
    assert lq == pytest.approx(bb)


def test_repeated_runs_identical(caplog, broombridge_path):
    first = _run(caplog, ["--path", str(broombridge_path)])
    second = _run(caplog, ["--path", str(broombridge_path)])
    assert first == second


def test_invalid_format_fails_before_reading(caplog, monkeypatch, tmp_path):
    opened = []
    monkeypatch.setattr(analysis, "open", lambda *a, **k: opened.append(a), raising=False)

    with caplog.at_level(logging.INFO, logger="hamnorm"):
        with pytest.raises(ValueError, match="Invalid data format XML"):
            main(["--format", "XML", "--path", str(tmp_path / "missing.yaml")])

    assert opened == []
    assert _norm_lines(caplog) == {}


def test_load_problems_validates_format_first(tmp_path):
    with pytest.raises(ValueError, match="Invalid data format"):
        analysis.load_problems(tmp_path / "does-not-exist.dat", "Fcidump")


def test_input_handle_closed_on_parse_error(monkeypatch, tmp_path):
    handles = []

    def tracking_open(*args, **kwargs):
        handle = builtins.open(*args, **kwargs)
        handles.append(handle)
        return handle

    monkeypatch.setattr(analysis, "open", tracking_open, raising=False)
    path = tmp_path / "broken.dat"
    path.write_text("tst=broken 0,0=abc\n", encoding="utf-8")

    with pytest.raises(ValueError, match="not a number"):
        analysis.load_problems(path, "LiQuiD")

    assert len(handles) == 1
    assert handles[0].closed


def test_missing_path_raises_before_norms(caplog, tmp_path):
    with caplog.at_level(logging.INFO, logger="hamnorm"):
        with pytest.raises(FileNotFoundError):
            main(["--path", str(tmp_path / "missing.yaml")])
    assert _norm_lines(caplog) == {}


def test_format_mismatch_propagates(liquid_path):
    with pytest.raises(ValueError):
        main(["--format", "Broombridge", "--path", str(liquid_path)])


def test_quiet_suppresses_info(caplog, broombridge_path):
    with caplog.at_level(logging.INFO, logger="hamnorm"):
        assert main(["--quiet", "--path", str(broombridge_path)]) == 0
    assert _norm_lines(caplog) == {}


def test_module_exit_status(tmp_path):
    ok = subprocess.run(
        [sys.executable, "-m", "hamnorm", "--format", "LiQuiD",
         "--path", str(DEFAULT_SAMPLE.parent.parent / "Liquid" / "h2_sto3g_4.dat")],
        capture_output=True, text=True,
    )
    assert ok.returncode == 0, ok.stderr

    bad = subprocess.run(
        [sys.executable, "-m", "hamnorm", "--format", "XML"],
        capture_output=True, text=True,
    )
    assert bad.returncode != 0
    assert "Invalid data format" in bad.stderr
