"""Pytest configuration and shared fixtures.

Pins settings-relevant environment variables before any vatcheck import so a
developer's .env cannot switch tests to a live VIES endpoint.
Provides a fake registry that records the calls it receives.
"""
import os
import sys
from pathlib import Path

import pytest

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ["VIES_MODE"] = "soap"
os.environ["VIES_SERVICE_URL"] = "https://vies.example.test/checkVatService"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from connectors.vies.client import reset_client


class FakeRegistry:
    """Registry double: answers from a fixed set, or raises a preset error."""

    def __init__(self, known: set[str] | None = None, error: Exception | None = None):
        self.known = known or set()
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def check_vat(self, country_code: str, vat_number: str) -> bool:
        self.calls.append((country_code, vat_number))
        if self.error is not None:
            raise self.error
        return f"{country_code}{vat_number}" in self.known


@pytest.fixture()
def make_registry():
    """Factory for FakeRegistry instances with custom behaviour."""
    return FakeRegistry


@pytest.fixture()
def fake_registry():
    """Registry that knows a couple of real-looking numbers."""
    return FakeRegistry(known={"BE0403199702", "NL004495445B01"})


@pytest.fixture(autouse=True)
def reset_vies_client():
    """Drop the cached VIES client between tests."""
    reset_client()
    yield
    reset_client()
