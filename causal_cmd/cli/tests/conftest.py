"""Shared fixtures and test utilities for CLI tests."""

from collections.abc import Callable
from typing import Any

import pytest

from causal_cmd.catalogs.params import ParamCatalog
from causal_cmd.catalogs.providers import CapabilityProvider, StaticNameCatalog
from causal_cmd.cli.options.registry import OptionRegistry, build_registry

SAMPLE_PARAMS: dict[str, dict[str, Any]] = {
    "alpha": {"description": "Significance level.", "default": 0.05},
    "verbose": {"description": "Verbose output.", "default": False},
    "depth": {"description": "Maximum size of conditioning set.", "default": -1},
    "targetName": {"description": "Target variable name.", "default": "y"},
}


@pytest.fixture
def algorithms() -> CapabilityProvider:
    """Provide a small algorithm provider."""
    return CapabilityProvider("algorithms", ["fges", "fci", "gfci"])


@pytest.fixture
def scores() -> CapabilityProvider:
    """Provide a small score provider."""
    return CapabilityProvider("scores", ["sem-bic-score", "bdeu-score"])


@pytest.fixture
def tests() -> CapabilityProvider:
    """Provide a small independence test provider."""
    return CapabilityProvider("independence_tests", ["fisher-z-test", "chi-square-test"])


@pytest.fixture
def delimiters() -> StaticNameCatalog:
    """Provide a small delimiter catalog."""
    return StaticNameCatalog("delimiters", ["comma", "tab"])


@pytest.fixture
def data_types() -> StaticNameCatalog:
    """Provide a small data type catalog."""
    return StaticNameCatalog("data_types", ["continuous", "discrete"])


@pytest.fixture
def param_catalog() -> ParamCatalog:
    """Provide a parameter catalog with one parameter of each type."""
    return ParamCatalog.from_mapping(SAMPLE_PARAMS)


@pytest.fixture
def make_registry(
    algorithms: CapabilityProvider,
    scores: CapabilityProvider,
    tests: CapabilityProvider,
    delimiters: StaticNameCatalog,
    data_types: StaticNameCatalog,
) -> Callable[..., OptionRegistry]:
    """Provide a factory building a registry from raw parameter records."""

    def _make(raw_params: dict[str, dict[str, Any]] | None = None) -> OptionRegistry:
        catalog = ParamCatalog.from_mapping(
            SAMPLE_PARAMS if raw_params is None else raw_params
        )
        return build_registry(catalog, algorithms, scores, tests, delimiters, data_types)

    return _make


@pytest.fixture
def registry(make_registry: Callable[..., OptionRegistry]) -> OptionRegistry:
    """Provide a registry built from the sample catalogs."""
    return make_registry()
