"""Loading of catalog bundles from YAML or JSON files."""

import json
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import yaml

from causal_cmd.catalogs.params import ParamCatalog
from causal_cmd.catalogs.providers import CapabilityProvider, StaticNameCatalog
from causal_cmd.configs.constants import (
    ALGORITHMS_SECTION,
    CATALOG_PATH_ENV_VAR,
    DATA_TYPES_SECTION,
    DEFAULT_CATALOG_PATH,
    DEFAULT_DATA_TYPES,
    DEFAULT_DELIMITERS,
    DELIMITERS_SECTION,
    JSON_EXTENSIONS,
    PARAMETERS_SECTION,
    SCORES_SECTION,
    TESTS_SECTION,
    YAML_EXTENSIONS,
)
from causal_cmd.configs.errors import CatalogParseError, CatalogUnavailableError
from causal_cmd.utils.logging_config import get_logger
from causal_cmd.utils.os import resolve_catalog_path

logger = get_logger(__name__)


class CatalogLoader(yaml.SafeLoader):
    """Safe YAML loader that also reads exponent-only floats such as ``1e-5``."""


CatalogLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(r"^[-+]?[0-9][0-9_]*[eE][-+]?[0-9]+$"),
    list("-+0123456789"),
)


@dataclass(frozen=True)
class CatalogBundle:
    """All catalogs the option registry is built from."""

    params: ParamCatalog
    algorithms: CapabilityProvider
    scores: CapabilityProvider
    tests: CapabilityProvider
    delimiters: StaticNameCatalog
    data_types: StaticNameCatalog


def load_catalog_bundle(path: str | None = None) -> CatalogBundle:
    """
    Load a catalog bundle from file.

    The file is chosen from ``path``, the ``CAUSAL_CMD_CATALOGS``
    environment variable, or the packaged default, in that order.

    :param path: Optional catalog file path
    :type path: str | None
    :return: Loaded catalog bundle
    :rtype: CatalogBundle
    :raises CatalogUnavailableError: If the file does not exist
    :raises CatalogParseError: If the file cannot be parsed
    """
    catalog_path = resolve_catalog_path(path, CATALOG_PATH_ENV_VAR, DEFAULT_CATALOG_PATH)
    if not os.path.exists(catalog_path):
        raise CatalogUnavailableError(catalog_path, "catalog file not found")

    logger.debug("Loading catalogs from %s", catalog_path)
    raw_catalogs = _load_raw(catalog_path)
    return bundle_from_mapping(raw_catalogs)


def bundle_from_mapping(raw_catalogs: Mapping[str, Any]) -> CatalogBundle:
    """
    Build a catalog bundle from already-parsed data.

    Absent algorithm, score, test or parameter sections produce empty
    catalogs; registry construction rejects those. Absent delimiter and
    data type sections fall back to the built-in names.

    :param raw_catalogs: Parsed catalog document
    :type raw_catalogs: Mapping[str, Any]
    :return: Catalog bundle
    :rtype: CatalogBundle
    :raises CatalogParseError: If a section has the wrong shape
    """
    raw_params = _section(raw_catalogs, PARAMETERS_SECTION, (Mapping,), "a mapping")
    return CatalogBundle(
        params=ParamCatalog.from_mapping(raw_params),
        algorithms=_provider(raw_catalogs, ALGORITHMS_SECTION),
        scores=_provider(raw_catalogs, SCORES_SECTION),
        tests=_provider(raw_catalogs, TESTS_SECTION),
        delimiters=_static_names(raw_catalogs, DELIMITERS_SECTION, DEFAULT_DELIMITERS),
        data_types=_static_names(raw_catalogs, DATA_TYPES_SECTION, DEFAULT_DATA_TYPES),
    )


def _section(
    raw_catalogs: Mapping[str, Any],
    section: str,
    expected_types: tuple[type, ...],
    expected: str,
) -> Any:
    value = raw_catalogs.get(section)
    if value is not None and not isinstance(value, expected_types):
        raise CatalogParseError(
            f"Catalog section '{section}' must be {expected}, "
            f"got {type(value).__name__}"
        )
    return value


def _provider(raw_catalogs: Mapping[str, Any], section: str) -> CapabilityProvider:
    commands = _section(raw_catalogs, section, (list, Mapping), "a list or a mapping")
    return CapabilityProvider(section, commands)


def _static_names(
    raw_catalogs: Mapping[str, Any], section: str, default: list[str]
) -> StaticNameCatalog:
    names = _section(raw_catalogs, section, (list,), "a list")
    return StaticNameCatalog(section, names or default)


def _load_raw(path: str) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            if path.endswith(YAML_EXTENSIONS):
                raw_catalogs = yaml.load(f, Loader=CatalogLoader)
            elif path.endswith(JSON_EXTENSIONS):
                raw_catalogs = json.load(f)
            else:
                raise CatalogParseError(f"Unsupported catalog file format: {path}")
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CatalogParseError(f"Could not parse catalog file {path}: {e}") from e
    except OSError as e:
        raise CatalogUnavailableError(path, str(e)) from e

    if raw_catalogs is None:
        return {}
    if not isinstance(raw_catalogs, dict):
        raise CatalogParseError(
            f"Catalog file {path} must contain a mapping at the top level"
        )
    return raw_catalogs
