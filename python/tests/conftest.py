"""
Pytest configuration and fixtures for pluralize tests.

Every test gets its own Pluralizer, so rule registrations made by one
test never leak into another.
"""

import pytest

from pluralize import Pluralizer, create_pluralizer
from pluralize.constants import RULES_FILE_ENV


@pytest.fixture
def pluralizer(monkeypatch) -> Pluralizer:
    """Pluralizer loaded with the built-in English rules only."""
    monkeypatch.delenv(RULES_FILE_ENV, raising=False)
    return create_pluralizer()


@pytest.fixture
def empty_pluralizer() -> Pluralizer:
    """Pluralizer with no rules at all."""
    return Pluralizer()


@pytest.fixture
def rules_file(tmp_path):
    """Write a YAML rules file and return its path."""
    def _create_file(content: str, name: str = "rules.yaml"):
        file_path = tmp_path / name
        file_path.write_text(content, encoding="utf-8")
        return file_path
    return _create_file
