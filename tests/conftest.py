"""
Pytest configuration and shared fixtures for aligned SDK tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Pins a default RuntimeConfig so environment variables don't leak into tests
3. Provides commonly-used fixtures and markers
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from aligned_sdk.config import RuntimeConfig, set_default_config  # noqa: E402
from fixtures.common import (  # noqa: E402
    TEST_PRIVATE_KEY,
    make_verification_data,
)


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from built-in defaults."""
    config = RuntimeConfig()
    set_default_config(config)
    yield config
    set_default_config(None)


@pytest.fixture
def verification_data():
    """Provide the standard Groth16 VerificationData."""
    return make_verification_data()


@pytest.fixture
def private_key():
    """Provide the test signing key."""
    return TEST_PRIVATE_KEY


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
