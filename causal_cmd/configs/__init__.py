"""
causal_cmd.configs: Error taxonomy and project-wide constants.

Exceptions raised while loading catalogs and building the option registry
live in ``errors``; file locations and catalog section names live in
``constants``.
"""

from .errors import (
    CatalogError,
    CatalogParseError,
    CatalogUnavailableError,
    InvalidCatalogEntryError,
    MissingRequiredOptionError,
    OptionCollisionError,
    OptionError,
)

__all__ = [
    "CatalogError",
    "CatalogParseError",
    "CatalogUnavailableError",
    "InvalidCatalogEntryError",
    "MissingRequiredOptionError",
    "OptionCollisionError",
    "OptionError",
]
