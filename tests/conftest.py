"""Shared fixtures for the person-records test suite."""

import os

import pytest

from core.domain.models import Gender, PersonRecord
from core.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Run every test in an empty directory with no PERSON_RECORDS_* variables."""
    for key in list(os.environ):
        if key.upper().startswith("PERSON_RECORDS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    setup_logging("WARNING")


@pytest.fixture
def erik():
    return PersonRecord(
        name="Erik Pihl",
        age=31,
        address="Lärdomsgatan 3",
        occupation="Teacher",
        gender=Gender.MALE,
    )


@pytest.fixture
def donald():
    return PersonRecord(
        name="Donald Duck",
        age=88,
        address="1313 Webfoot Street",
        occupation="Comical Character",
        gender=Gender.MALE,
    )


@pytest.fixture
def bruce():
    return PersonRecord(
        name="Bruce Wayne",
        age=40,
        address="Wayne Manor",
        occupation="Batman",
        gender=Gender.MALE,
    )
