"""Shared fixtures: data files on disk and services built from them."""
from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

# Make the package importable when tests run from a source checkout.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from people_service.app.core.config import Settings
from people_service.app.services import PersonQueryService, PersonStore


ALICE_AND_BOB = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]


@pytest.fixture()
def write_people(tmp_path):
    """Write ``records`` (or raw text) to a people file and return its path."""

    def _write(records, name: str = "people.json") -> Path:
        path = tmp_path / name
        if isinstance(records, str):
            path.write_text(records, encoding="utf-8")
        else:
            path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def people_file(write_people) -> Path:
    return write_people(ALICE_AND_BOB)


@pytest.fixture()
def query_service(people_file) -> PersonQueryService:
    return PersonQueryService(PersonStore.load(str(people_file)))


@pytest.fixture()
def make_settings(tmp_path):
    def _make(**overrides) -> Settings:
        values = {
            "people_file": str(tmp_path / "people.json"),
            "log_level": "WARNING",
            "strict_not_found": False,
        }
        values.update(overrides)
        return Settings(**values)

    return _make
