"""
causal_cmd.catalogs: Metadata providers the option registry is built from.

- params: named parameter catalog with typed defaults
- providers: capability providers (algorithms, scores, independence tests)
  and static name catalogs (delimiters, data types)
- loader: reads all of them from a YAML or JSON catalog file
"""

from .loader import CatalogBundle, bundle_from_mapping, load_catalog_bundle
from .params import ArgumentType, DefaultValue, ParamCatalog, ParamDescription
from .providers import CapabilityProvider, StaticNameCatalog

__all__ = [
    "ArgumentType",
    "CapabilityProvider",
    "CatalogBundle",
    "DefaultValue",
    "ParamCatalog",
    "ParamDescription",
    "StaticNameCatalog",
    "bundle_from_mapping",
    "load_catalog_bundle",
]
