"""Tests for the command-line entry point (semantic_module.cli)."""

from __future__ import annotations

import os
from unittest.mock import AsyncMock, patch

import pytest

from semantic_module.cli import build_arg_parser, main, parse_args

pytestmark = pytest.mark.unit


class TestParseArgs:
    def test_no_arguments(self):
        module_name, flags, skip_install = parse_args([])
        assert module_name is None
        assert flags == {
            "moduleName": None,
            "packager": None,
            "commitizenAdapter": None,
            "commitlintConfig": None,
        }
        assert skip_install is None

    def test_positional_and_kebab_flags(self):
        module_name, flags, _skip = parse_args(
            ["foo", "--packager", "yarn", "--commitizen-adapter", "cz-customizable",
             "--commitlint-config", "@commitlint/config-angular"]
        )
        assert module_name == "foo"
        assert flags["packager"] == "yarn"
        assert flags["commitizenAdapter"] == "cz-customizable"
        assert flags["commitlintConfig"] == "@commitlint/config-angular"

    def test_camel_case_flags(self):
        _name, flags, _skip = parse_args(["--moduleName", "bar", "--commitizenAdapter", "x"])
        assert flags["moduleName"] == "bar"
        assert flags["commitizenAdapter"] == "x"

    def test_unknown_flags_ignored(self):
        module_name, flags, _skip = parse_args(["foo", "--force", "--skip-cache"])
        assert module_name == "foo"
        assert "force" not in flags

    def test_skip_install(self):
        _name, _flags, skip_install = parse_args(["--skip-install"])
        assert skip_install is True

    def test_help_lists_flags(self):
        text = build_arg_parser().format_help()
        for flag in ("--module-name", "--packager", "--commitizen-adapter", "--commitlint-config"):
            assert flag in text


class TestMain:
    def test_runs_orchestrator(self):
        with patch("semantic_module.cli.ScaffoldOrchestrator") as orchestrator_cls:
            orchestrator_cls.return_value.run = AsyncMock()
            with patch.dict(os.environ, {}, clear=True):
                main(["foo", "--packager", "npm"])

        settings = orchestrator_cls.call_args.args[0]
        assert settings.skip_install is False
        run = orchestrator_cls.return_value.run
        run.assert_awaited_once()
        module_name, flags = run.call_args.args
        assert module_name == "foo"
        assert flags["packager"] == "npm"

    def test_skip_install_flag(self):
        with patch("semantic_module.cli.ScaffoldOrchestrator") as orchestrator_cls:
            orchestrator_cls.return_value.run = AsyncMock()
            with patch.dict(os.environ, {}, clear=True):
                main(["--skip-install"])
        assert orchestrator_cls.call_args.args[0].skip_install is True

    def test_errors_propagate(self):
        with patch("semantic_module.cli.ScaffoldOrchestrator") as orchestrator_cls:
            orchestrator_cls.return_value.run = AsyncMock(side_effect=RuntimeError("boom"))
            with pytest.raises(RuntimeError, match="boom"):
                main([])
