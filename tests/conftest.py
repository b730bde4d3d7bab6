import pytest
from typer.testing import CliRunner

from my_calculator.config import Settings
from my_calculator.evaluate import Evaluator
from my_calculator.functions import AngleMode


@pytest.fixture
def evaluator():
    return Evaluator()


@pytest.fixture
def radians():
    return Evaluator(Settings(angle_mode=AngleMode.Radians))


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("ANGLE_MODE", "MAX_DEPTH", "PRECISION"):
        monkeypatch.delenv(f"MY_CALCULATOR_{name}", raising=False)
