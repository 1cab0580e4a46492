"""Pytest configuration and shared fixtures for the contractview test suite."""

import os
from pathlib import Path

import pytest
from hypothesis import Verbosity, settings

settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample documents."""
    return FIXTURES_DIR


@pytest.fixture
def sample_contract_path() -> Path:
    """Path to the service agreement sample document."""
    return FIXTURES_DIR / "service_agreement.json"


@pytest.fixture
def mention_document() -> list:
    """Paragraph holding two occurrences of the same mention and one other mention.

    Returns
    -------
    list
        Untyped node mappings, as decoded from JSON.

    """
    return [
        {
            "type": "p",
            "children": [
                {"text": "Between "},
                {"type": "mention", "id": "party", "value": "ACME", "color": "blue", "children": [{"text": "ACME"}]},
                {"text": " and "},
                {"type": "mention", "id": "client", "value": "Initech", "children": [{"text": "Initech"}]},
                {"text": ". "},
                {"type": "mention", "id": "party", "value": "ACME", "color": "blue", "children": [{"text": "ACME"}]},
            ],
        }
    ]
