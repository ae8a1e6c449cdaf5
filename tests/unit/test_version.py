"""Tests for package version lookup."""

from __future__ import annotations

import tomllib
from pathlib import Path

import capsule_studio
from capsule_studio._version import _version_from_pyproject, get_version

REPO_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


class TestVersion:
    def test_matches_checkout_pyproject(self) -> None:
        with open(REPO_PYPROJECT, "rb") as f:
            expected = tomllib.load(f)["project"]["version"]
        assert get_version() == expected
        assert capsule_studio.__version__ == expected

    def test_other_projects_ignored(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "something-else"\nversion = "9.9.9"\n')
        assert _version_from_pyproject(pyproject) is None

    def test_own_project_read(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "capsule-studio"\nversion = "1.2.3"\n')
        assert _version_from_pyproject(pyproject) == "1.2.3"

    def test_missing_or_broken_file(self, tmp_path: Path) -> None:
        assert _version_from_pyproject(tmp_path / "pyproject.toml") is None
        broken = tmp_path / "broken.toml"
        broken.write_text("[project\n")
        assert _version_from_pyproject(broken) is None
