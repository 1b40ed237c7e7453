"""
Pytest configuration and shared fixtures for the sources extractor tests.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


# =============================================================================
# Configuration Fixtures
# =============================================================================
@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test load settings from its own environment."""
    from shared.utils import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Extractor Fixtures
# =============================================================================
@pytest.fixture
def extractor():
    """Create an empty sources extractor."""
    from services.extractor.src.sources import SourcesExtractor

    return SourcesExtractor()


@pytest.fixture
def paren_formatter():
    """Reference formatter producing ' (n)' markers."""
    return lambda n: f" ({n})"


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================
@pytest.fixture
def text_files(tmp_path):
    """Two text files with one inline source each."""
    first = tmp_path / "first.txt"
    first.write_text("Opening remarks. Source: field notes. Closing remarks.", encoding="utf-8")
    second = tmp_path / "second.txt"
    second.write_text("More findings (Sources: lab <report> & memo).", encoding="utf-8")
    return [first, second]


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_configure(config):
    """Configure pytest environment."""
    import os

    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_LEVEL"] = "DEBUG"
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: end-to-end tests")


def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    - tests/unit/ -> @pytest.mark.unit
    - tests/integration/ -> @pytest.mark.integration
    """
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
