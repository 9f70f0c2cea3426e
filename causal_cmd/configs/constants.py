"""Configuration constants for the causal-cmd CLI."""

import os

# Project paths
PACKAGE_ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
DEFAULT_CATALOG_PATH: str = os.path.join(
    PACKAGE_ROOT, "catalogs", "data", "default_catalogs.yaml"
)

# Environment variable overriding DEFAULT_CATALOG_PATH
CATALOG_PATH_ENV_VAR: str = "CAUSAL_CMD_CATALOGS"

# Catalog file handling
YAML_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml")
JSON_EXTENSIONS: tuple[str, ...] = (".json",)

# Section names inside a catalog file
PARAMETERS_SECTION: str = "parameters"
ALGORITHMS_SECTION: str = "algorithms"
SCORES_SECTION: str = "scores"
TESTS_SECTION: str = "independence_tests"
DELIMITERS_SECTION: str = "delimiters"
DATA_TYPES_SECTION: str = "data_types"

# Used when a catalog file omits the static sections
DEFAULT_DELIMITERS: list[str] = [
    "comma",
    "colon",
    "space",
    "tab",
    "whitespace",
    "semicolon",
    "pipe",
]
DEFAULT_DATA_TYPES: list[str] = ["continuous", "discrete", "mixed"]
