"""Description text for options whose help lists catalog names."""

from collections.abc import Sequence

from causal_cmd.catalogs.providers import CapabilityProvider, StaticNameCatalog
from causal_cmd.configs.errors import CatalogUnavailableError


def join_names(prefix: str, names: Sequence[str], catalog_name: str) -> str:
    """
    Build ``"<prefix>: a, b, c"``.

    :param prefix: Leading label
    :param names: Names to list, in order
    :param catalog_name: Catalog the names come from, used in errors
    :return: Description text
    :raises CatalogUnavailableError: If there are no names to list
    """
    if not names:
        raise CatalogUnavailableError(catalog_name)
    return f"{prefix}: " + ", ".join(names)


def _provider_description(prefix: str, provider: CapabilityProvider | None) -> str:
    if provider is None:
        raise CatalogUnavailableError(prefix.lower())
    return join_names(prefix, provider.command_tokens(), provider.kind)


def _static_description(prefix: str, catalog: StaticNameCatalog | None) -> str:
    if catalog is None:
        raise CatalogUnavailableError(prefix.lower())
    return join_names(prefix, catalog.names(), catalog.kind)


def algorithm_description(algorithms: CapabilityProvider | None) -> str:
    return _provider_description("Algorithm", algorithms)


def score_description(scores: CapabilityProvider | None) -> str:
    return _provider_description("Score", scores)


def independence_test_description(tests: CapabilityProvider | None) -> str:
    return _provider_description("Independence Test", tests)


def delimiter_description(delimiters: StaticNameCatalog | None) -> str:
    return _static_description("Delimiter", delimiters)


def data_type_description(data_types: StaticNameCatalog | None) -> str:
    return _static_description("Data type", data_types)


def _timeout_description() -> str:
    """Help text for a graph-search time limit."""
    return (
        "Set the time limit for graph searching. "
        "Units: s=second, m=minute, h=hour, d=day. "
        "For an example, 12m = 12 minutes"
    )
