"""Shared fixtures for building throwaway npm projects on disk."""

import json

import pytest


class RecordingRunner:
    """Runner double that records each command instead of executing it."""

    def __init__(self, result="ok"):
        self.calls = []
        self.result = result

    def __call__(self, program, args, config):
        self.calls.append((program, list(args), config))
        return self.result


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def make_project(tmp_path):
    """Factory: make_project(dependencies=..., dev_dependencies=..., installed=..., yarn=False)."""

    def _make(dependencies=None, dev_dependencies=None, installed=None, yarn=False, manifest=True):
        if manifest:
            pkg = {"name": "fixture-project", "version": "1.0.0"}
            if dependencies is not None:
                pkg["dependencies"] = dependencies
            if dev_dependencies is not None:
                pkg["devDependencies"] = dev_dependencies
            (tmp_path / "package.json").write_text(json.dumps(pkg, indent=2))
        for name, version in (installed or {}).items():
            pkg_dir = tmp_path / "node_modules" / name
            pkg_dir.mkdir(parents=True, exist_ok=True)
            (pkg_dir / "package.json").write_text(json.dumps({"name": name, "version": version}))
        if yarn:
            (tmp_path / "yarn.lock").write_text("# yarn lockfile v1\n")
        return str(tmp_path)

    return _make
