"""Tests for shared helpers: message listing, logging context and errors."""

import logging

from common.errors import ConfigurationError, DepsyncError, ExecutionError
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from common.text import listify


class TestListify:
    def test_empty(self):
        assert listify([]) == ""

    def test_one(self):
        assert listify(["lodash"]) == "lodash"

    def test_two(self):
        assert listify(["lodash", "chalk"]) == "lodash and chalk"

    def test_many(self):
        assert listify(["a", "b", "c", "d"]) == "a, b, c and d"


class TestExtraContext:
    def test_known_keys_are_top_level(self):
        extra = extra_context(event="decision", component="engine", outcome=None)
        assert extra == {"event": "decision", "component": "engine"}

    def test_other_keys_are_grouped(self):
        extra = extra_context(action="install", required="^1.0.0")
        assert extra == {"action": "install", "context": {"required": "^1.0.0"}}


def test_configure_logging_from_env(monkeypatch):
    monkeypatch.setenv("DEPSYNC_LOG_LEVEL", "debug")
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging()
        assert root.level == logging.DEBUG
        assert is_debug_enabled(logging.getLogger("depsync.test"))
        configure_logging("WARNING")
        assert root.level == logging.WARNING
        assert sum(1 for h in root.handlers if getattr(h, "_depsync_handler", False)) == 1
    finally:
        root.setLevel(previous)


def test_error_hierarchy():
    assert issubclass(ConfigurationError, ValueError)
    assert issubclass(ExecutionError, RuntimeError)
    err = ExecutionError("failed", "yarn", ["add", "x@latest"], 1)
    assert isinstance(err, DepsyncError)
    assert err.command == "yarn add x@latest"
    assert str(err) == "failed"
