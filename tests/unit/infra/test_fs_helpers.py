from __future__ import annotations

"""
Unit tests for the FileSystem helpers.

Verifies path normalization and the directory/file existence guarantees.
"""

import os

import pytest

from levelog.infra.fs import ensure_dir, ensure_file, normalize_path


def test_normalize_path_uses_fallback_when_empty(tmp_path):
    assert normalize_path("", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)


def test_normalize_path_makes_relative_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert normalize_path("logs", "/unused") == os.path.join(str(tmp_path), "logs")


def test_ensure_dir_is_idempotent(tmp_path):
    target = tmp_path / "a" / "b"

    ensure_dir(str(target))
    ensure_dir(str(target))

    assert target.is_dir()


def test_ensure_file_never_truncates(tmp_path):
    target = tmp_path / "dir" / "audit.log"

    ensure_file(str(target))
    assert target.read_text(encoding="utf-8") == ""

    target.write_text("kept\n", encoding="utf-8")
    ensure_file(str(target))
    assert target.read_text(encoding="utf-8") == "kept\n"


def test_ensure_dir_fails_over_existing_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(OSError):
        ensure_dir(str(blocker))
