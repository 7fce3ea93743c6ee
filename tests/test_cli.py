"""Tests for the envload command line interface."""

import json
import os
import sys
from unittest.mock import patch

import pytest
import yaml

from envload.cli.main import main


@pytest.fixture
def env_file(tmp_path):
    """Simple environment file."""
    path = tmp_path / "app.env"
    path.write_text(
        "export A=1\n"
        "B=$A/x  # derived\n"
        'GREETING="hello world"\n'
    )
    return path


class TestResolveCommand:
    """Test printing resolved variables."""

    def test_shell_format(self, env_file, capsys):
        exit_code = main(['resolve', '--no-inherit', '--format', 'shell', str(env_file)])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "export A=1",
            "export B=1/x",
            "export GREETING='hello world'",
        ]

    def test_json_format(self, env_file, capsys):
        exit_code = main(['resolve', '--format', 'json', str(env_file)])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {'A': '1', 'B': '1/x', 'GREETING': 'hello world'}

    def test_yaml_format(self, env_file, capsys):
        exit_code = main(['resolve', '--format', 'yaml', str(env_file)])

        assert exit_code == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data == {'A': '1', 'B': '1/x', 'GREETING': 'hello world'}

    def test_all_includes_inherited(self, env_file, capsys):
        with patch.dict(os.environ, {'ENVLOAD_CLI_BASE': 'base'}):
            exit_code = main(['resolve', '--all', '--format', 'json', str(env_file)])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data['ENVLOAD_CLI_BASE'] == 'base'
        assert data['B'] == '1/x'

    def test_no_inherit_leaves_references_unresolved(self, tmp_path, capsys):
        path = tmp_path / "home.env"
        path.write_text("DATA=$HOME/data\n")
        with patch.dict(os.environ, {'HOME': '/home/tester'}):
            main(['resolve', '--no-inherit', '--format', 'json', str(path)])

        data = json.loads(capsys.readouterr().out)
        assert data == {'DATA': '$HOME/data'}

    def test_format_from_environment(self, env_file, capsys):
        with patch.dict(os.environ, {'ENVLOAD_FORMAT': 'json'}):
            exit_code = main(['resolve', str(env_file)])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)['A'] == '1'

    def test_missing_file(self, tmp_path, capsys):
        exit_code = main(['resolve', str(tmp_path / "missing.env")])

        assert exit_code == 1
        assert capsys.readouterr().out == ""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1


class TestExecCommand:
    """Test running a command with the loaded environment."""

    def test_child_sees_resolved_variables(self, env_file):
        check = "import os, sys; sys.exit(0 if os.environ.get('B') == '1/x' else 3)"
        exit_code = main(['exec', str(env_file), '--', sys.executable, '-c', check])
        assert exit_code == 0

    def test_child_exit_code_returned(self, env_file):
        exit_code = main(['exec', str(env_file), '--', sys.executable, '-c', 'raise SystemExit(5)'])
        assert exit_code == 5

    def test_command_not_found(self, env_file):
        exit_code = main(['exec', str(env_file), '--', 'envload-no-such-command-xyz'])
        assert exit_code == 127

    def test_command_not_executable(self, env_file, tmp_path):
        script = tmp_path / "script.sh"
        script.write_text("#!/bin/sh\nexit 0\n")
        script.chmod(0o644)

        exit_code = main(['exec', str(env_file), '--', str(script)])
        assert exit_code == 126

    def test_missing_command(self, env_file):
        assert main(['exec', str(env_file)]) == 1

    def test_missing_file(self, tmp_path):
        exit_code = main(['exec', str(tmp_path / "missing.env"), '--', sys.executable, '-c', 'pass'])
        assert exit_code == 1
