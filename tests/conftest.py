"""Shared pytest fixtures for the puppet-strings test suite.

This module provides a fake engine that records the calls made to it, a
fresh engine context per test and sample registry data.
"""

import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

from puppet_strings.core.engine import EngineContext, reset_default_context  # noqa: E402
from puppet_strings.core.logging import configure_logging  # noqa: E402
from fakes import FakeEngine  # noqa: E402


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture(autouse=True, scope="session")
def stderr_logging():
    """Send structured logs to stderr so stdout only carries JSON reports."""
    configure_logging(log_level="DEBUG")


@pytest.fixture(autouse=True)
def clean_default_context():
    """Reset the process-wide engine context around every test."""
    reset_default_context()
    yield
    reset_default_context()


@pytest.fixture
def sample_registry() -> List[Dict[str, Any]]:
    """Registry objects as dumped from a small Puppet module."""
    return [
        {
            "name": "ntp",
            "path": "ntp",
            "type": "puppet_class",
            "file": "manifests/init.pp",
            "line": 12,
            "docstring": "Installs and configures NTP.",
            "tags": [
                {"tag_name": "param", "name": "servers", "text": "The NTP servers to use.", "types": ["Array[String]"]},
                {"tag_name": "example", "name": "", "text": "include ntp", "types": None},
            ],
        },
        {
            "name": "ntp::config",
            "path": "ntp::config",
            "type": "puppet_class",
            "file": "manifests/config.pp",
            "line": 3,
            "docstring": "",
            "tags": [],
        },
        {
            "name": "ntp::server",
            "path": "ntp::server",
            "type": "puppet_defined_type",
            "file": "manifests/server.pp",
            "line": 1,
            "docstring": "Declares a single server.",
            "tags": [],
        },
        {
            "name": "ntp_restrict",
            "path": "ntp_restrict",
            "type": "puppet_type",
            "file": "lib/puppet/type/ntp_restrict.rb",
            "line": 1,
            "docstring": "Manages restrict lines.",
            "tags": [],
        },
        {
            "name": "NtpHelper",
            "path": "NtpHelper",
            "type": "module",
            "file": "lib/ntp_helper.rb",
            "line": 1,
            "docstring": "Plain Ruby module.",
            "tags": [],
        },
    ]


@pytest.fixture
def fake_engine(sample_registry) -> FakeEngine:
    return FakeEngine(registry=sample_registry)


@pytest.fixture
def context(fake_engine) -> EngineContext:
    """Fresh, uninitialized context around the fake engine."""
    return EngineContext(engine=fake_engine)


# ============================================================================
# Temporary Directory Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation.

    Yields:
        str: Path to temporary directory
    """
    tmp = tempfile.mkdtemp()
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"
