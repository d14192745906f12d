from pathlib import Path

import pytest
import yaml

from camelcaser.api import setup_default_pipeline
from camelcaser.core.engine import Engine
from camelcaser.core.logging import configure_logging

SCENARIOS_FILE = Path(__file__).parent / "data" / "scenarios.yaml"


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep test output free of pipeline logs."""
    configure_logging(level="silent", force=True)


@pytest.fixture(scope="session")
def scenarios():
    with open(SCENARIOS_FILE, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data.get("scenarios", [])


@pytest.fixture
def engine():
    """A fresh engine with the default pipeline registered."""
    eng = Engine()
    setup_default_pipeline(eng)
    return eng
