"""Shared test fixtures for Concentration Insight tests."""

import logging
import os

import numpy as np
import pytest

from concentration_insight.logging_config import ROOT_LOGGER_NAME


@pytest.fixture
def normal_values():
    """Known values for statistics tests: mean 5, sample variance 32/7."""
    return [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


@pytest.fixture
def constant_values():
    """Constant values (zero variance, zero inequality)."""
    return [5.0, 5.0, 5.0, 5.0, 5.0]


@pytest.fixture
def skewed_values():
    """One dominant contributor and a long tail."""
    return [97, 1, 1, 1]


@pytest.fixture
def unsorted_values():
    """Values deliberately out of order, for mutation checks."""
    return [3, 10, 1, 7, 0, 5]


@pytest.fixture
def numpy_values():
    """Integer numpy array input."""
    return np.array([10, 5, 3, 2])


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config discovery from the real home, cwd and environment."""
    for key in list(os.environ):
        if key.startswith("CONCENTRATION_"):
            monkeypatch.delenv(key)
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return tmp_path


@pytest.fixture
def restore_logger():
    """Undo handler/level changes made by setup_logging."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
