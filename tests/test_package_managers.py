"""Tests for package_managers — backend selection and command construction."""

import pytest

from constants import PackageManagers
from package_managers import (
    BackendChoice,
    CommandSpec,
    build_command,
    is_using_yarn,
    select_backend,
    versioned_dep,
)


class TestSelectBackend:
    """Backend detection via yarn.lock."""

    def test_defaults_to_npm(self, make_project):
        root = make_project()
        assert select_backend(False, root) is BackendChoice.NPM

    def test_yarn_lock_selects_yarn(self, make_project):
        root = make_project(yarn=True)
        assert is_using_yarn(root) is True
        assert select_backend(False, root) is BackendChoice.YARN

    def test_force_alternate_wins_without_marker(self, make_project):
        root = make_project()
        assert select_backend(True, root) is BackendChoice.YARN

    def test_choice_values_are_program_names(self):
        assert BackendChoice.NPM.value == PackageManagers.NPM.value == "npm"
        assert BackendChoice.YARN.value == "yarn"


class TestVersionedDep:
    """name@range suffixing."""

    def test_uses_required_range(self):
        assert versioned_dep("lodash", {"lodash": "^4.0.0"}) == "lodash@^4.0.0"

    def test_falls_back_to_latest(self):
        assert versioned_dep("chalk", {}) == "chalk@latest"

    def test_scoped_name(self):
        assert versioned_dep("@types/node", {"@types/node": "^18"}) == "@types/node@^18"


class TestNpmCommand:
    """npm install/uninstall arguments."""

    def test_install_dev(self):
        cmd = build_command(BackendChoice.NPM, ["lodash@^4.0.0"], remove=False, dev=True)
        assert cmd == CommandSpec("npm", ["install", "--save-dev", "lodash@^4.0.0"])

    def test_install_prod(self):
        cmd = build_command(BackendChoice.NPM, ["a@latest", "b@latest"], remove=False, dev=False)
        assert cmd.args == ["install", "--save", "a@latest", "b@latest"]

    def test_uninstall(self):
        cmd = build_command(BackendChoice.NPM, ["lodash"], remove=True, dev=True)
        assert cmd.args == ["uninstall", "--save-dev", "lodash"]

    def test_str(self):
        cmd = build_command(BackendChoice.NPM, ["lodash@latest"])
        assert str(cmd) == "npm install --save-dev lodash@latest"


class TestYarnCommand:
    """yarn add/remove arguments."""

    def test_add_dev(self):
        cmd = build_command(BackendChoice.YARN, ["lodash@^4.0.0"], remove=False, dev=True)
        assert cmd == CommandSpec("yarn", ["add", "--dev", "lodash@^4.0.0"])

    def test_add_prod(self):
        cmd = build_command(BackendChoice.YARN, ["lodash@latest"], remove=False, dev=False)
        assert cmd.args == ["add", "lodash@latest"]

    @pytest.mark.parametrize("dev", [True, False])
    def test_remove_ignores_dev_flag(self, dev):
        cmd = build_command(BackendChoice.YARN, ["lodash", "chalk"], remove=True, dev=dev)
        assert cmd.args == ["remove", "lodash", "chalk"]
