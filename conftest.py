import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List

import pytest

logger = logging.getLogger("strong_conftest")

if TYPE_CHECKING:
    from pytest import Config, Parser

REPO_ROOT = Path(__file__).parent.resolve()

# this is analogous to running `python -m pytest`
# this is needed for `pytest` discovery reasons specific to the `strong` namespace package
sys.path.insert(0, str(REPO_ROOT))

from strong.collections import default_registry
from strong.collections import collection_settings

# Project Level pytest fixtures
# these fixtures are available to any test in the repository


@pytest.fixture(autouse=True)
def fresh_defaults():
    """
    Makes sure that every test starts and ends with the default comparers and settings built from the environment
    """
    collection_settings.cache_clear()
    default_registry().reset()
    yield
    default_registry().reset()
    collection_settings.cache_clear()


# Pytest CLI customization
# Includes logic for setting environment variables


def pytest_addoption(parser: "Parser"):
    parser.addini(
        "env_vars", "Environment variables to set", type="args"
    )


def parse_env_vars(name_values: List[str]) -> Dict[str, str]:
    return dict(map(lambda pair: pair.split("="), name_values))


def _configure_env_vars(config: "Config"):
    env_vars = config.getini("env_vars")
    assert isinstance(env_vars, list)
    parsed_vars = parse_env_vars(env_vars)
    logger.debug(f"Adding these environment variables: {parsed_vars}")
    os.environ.update(parsed_vars)


def pytest_configure(config: "Config"):
    _configure_env_vars(config)
