import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from atc_commands.domain.presets import ATC_TRAINER, VICE
from atc_commands.domain.scheme import Scheme
from atc_commands.services.scheme_registry import (
    SchemeRegistry,
    create_default_registry,
)
from hypothesis import HealthCheck, settings

settings.register_profile(
    "default",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("default")

KNOWN_CALLSIGNS = frozenset({"UAL123", "DAL45", "N172SP"})


@pytest.fixture
def known_callsigns() -> frozenset[str]:
    return KNOWN_CALLSIGNS


@pytest.fixture
def atc_trainer() -> Scheme:
    return ATC_TRAINER


@pytest.fixture
def vice() -> Scheme:
    return VICE


@pytest.fixture
def registry() -> SchemeRegistry:
    """A sealed registry holding the built-in schemes."""
    return create_default_registry()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove ATC_* variables for the test and again afterwards.

    Setting each variable first makes monkeypatch delete whatever a .env file
    loaded during the test.
    """
    for name in ("ATC_SCHEME", "ATC_MAX_SUGGESTIONS", "ATC_LOG_LEVEL", "ATC_LOG_FORMAT"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    """Create a minimal valid YAML config file and return its path."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "default_scheme: VICE\n"
        "max_suggestions: 5\n"
        "log_level: debug\n"
        "log_format: json\n"
        "custom_schemes:\n"
        "  My-Trainer:\n"
        "    base: ATC-Trainer\n"
        "    verbs:\n"
        "      CHANGE_HEADING: [HDG, FH]\n",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo logging configuration done by the code under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
