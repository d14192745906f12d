"""
Tests for the command-line interface.
"""

import json

import pytest

from camelcaser import __version__
from camelcaser.cli.main import main


def test_transform_text_output(capsys):
    code = main(["transform", "Hello world. Second sentence", "--log-level", "silent"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines() == ["helloWorld", "secondSentence"]


def test_transform_json_output(capsys):
    code = main(["transform", "Hi there.", "--format", "json", "--log-level", "silent"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["status"] == "success"
    assert len(payload["sentences"]) == 1


def test_unknown_pipeline_fails(capsys):
    code = main(["transform", "Hi", "--pipeline", "missing", "--log-level", "silent"])

    assert code == 1
    assert "PIPELINE_NOT_FOUND" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "camelcaser" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert __version__ in capsys.readouterr().out
