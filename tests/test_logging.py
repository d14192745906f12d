"""
Tests for channel-aware logging configuration.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

from camelcaser.core.logging import (
    LogChannel,
    LogLevel,
    configure_logging,
    get_current_config,
    get_pass_logger,
)


@pytest.fixture(autouse=True)
def restore_silence():
    yield
    configure_logging(level="silent", force=True)


def test_level_from_string():
    assert LogLevel.from_string("VERBOSE") == LogLevel.VERBOSE
    assert LogLevel.from_string("warning") == LogLevel.INFO
    assert LogLevel.from_string("nonsense") == LogLevel.INFO


def test_channel_from_string():
    assert LogChannel.from_string("case") == LogChannel.CASE
    assert LogChannel.from_string("nope") is None


def test_configure_explicit():
    configure_logging(level="debug", format="json", channels=["segment", "bogus"], force=True)

    assert get_current_config() == {
        "level": "DEBUG",
        "format": "json",
        "channels": ["SEGMENT"],
    }


def test_configure_from_environment(monkeypatch):
    monkeypatch.setenv("CAMELCASER_LOG_LEVEL", "verbose")
    monkeypatch.setenv("CAMELCASER_LOG_CHANNELS", "pipeline, case")

    configure_logging(force=True)

    config = get_current_config()
    assert config["level"] == "VERBOSE"
    assert config["channels"] == ["CASE", "PIPELINE"]


def test_configure_is_sticky_without_force():
    configure_logging(level="debug", force=True)
    configure_logging(level="silent")

    assert get_current_config()["level"] == "DEBUG"


@pytest.mark.parametrize(
    "pass_name,channel",
    [
        ("p00_prepare", LogChannel.PIPELINE),
        ("p10_segment", LogChannel.SEGMENT),
        ("p20_tokenize", LogChannel.SEGMENT),
        ("p30_camel_case", LogChannel.CASE),
        ("p80_package", LogChannel.PIPELINE),
    ],
)
def test_pass_channels(pass_name, channel):
    assert get_pass_logger(pass_name).channel == channel


LIBRARY_CALL = """
import logging
import sys

handler = logging.StreamHandler(sys.stdout)
logging.getLogger().addHandler(handler)

import camelcaser

tokens = camelcaser.camel_caser(b"Hello world. Bye now.")
assert tokens == [b"helloWorld", b"byeNow"], tokens
assert handler in logging.getLogger().handlers
print("ok")
"""


def _clean_env() -> dict:
    return {k: v for k, v in os.environ.items() if not k.startswith("CAMELCASER_")}


def test_library_use_leaves_host_logging_alone():
    """Importing and calling the library configures nothing and writes nothing."""
    completed = subprocess.run(
        [sys.executable, "-c", LIBRARY_CALL],
        capture_output=True,
        text=True,
        env=_clean_env(),
        cwd=Path(__file__).resolve().parents[1],
        timeout=60,
    )

    assert completed.returncode == 0, completed.stderr
    assert completed.stdout.strip() == "ok"
    assert completed.stderr == ""


def test_environment_level_enables_library_logging():
    env = _clean_env()
    env["CAMELCASER_LOG_LEVEL"] = "verbose"

    completed = subprocess.run(
        [sys.executable, "-c", "import camelcaser; camelcaser.camel_caser(b'Hi there.')"],
        capture_output=True,
        text=True,
        env=env,
        cwd=Path(__file__).resolve().parents[1],
        timeout=60,
    )

    assert completed.returncode == 0, completed.stderr
    assert "transform_complete" in completed.stderr
