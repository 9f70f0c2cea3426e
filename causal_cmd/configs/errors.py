"""Catalog and option exception classes for the causal-cmd CLI."""

from typing import Any


class CatalogError(Exception):
    """Base exception for catalog errors.

    Every failure that prevents the option registry from being built
    inherits from this class. These are startup-time errors: the entry
    point reports them and exits without exposing a partial registry.
    """


class InvalidCatalogEntryError(CatalogError):
    """Raised when a parameter catalog entry has no usable default value.

    The argument type of a catalog-provided option is inferred from its
    default value, so a missing or unsupported default makes the entry
    unusable.
    """

    def __init__(self, param_name: str, reason: str = "default value is missing"):
        self.param_name = param_name
        self.reason = reason
        super().__init__(f"Invalid catalog entry '{param_name}': {reason}")


class CatalogUnavailableError(CatalogError):
    """Raised when a catalog is missing or empty.

    Description text for the built-in options is composed from the
    capability providers and static name catalogs, and the parameter
    catalog supplies the dynamic options; none of them may be empty.
    """

    def __init__(self, catalog_name: str, reason: str = "catalog is missing or empty"):
        self.catalog_name = catalog_name
        self.reason = reason
        super().__init__(f"Catalog '{catalog_name}' unavailable: {reason}")


class CatalogParseError(CatalogError):
    """Raised when a catalog file exists but cannot be parsed."""


class OptionCollisionError(CatalogError):
    """Raised when a catalog parameter shadows a required built-in option."""

    def __init__(self, option_name: str):
        self.option_name = option_name
        super().__init__(
            f"Catalog parameter '{option_name}' collides with a required built-in option"
        )


class OptionError(Exception):
    """Base exception for errors found while validating supplied options."""


class MissingRequiredOptionError(OptionError):
    """Raised when required options are absent from an invocation.

    The message is built from the ``name`` and ``description`` of each
    missing option definition.

    :param missing: Option definitions that were not supplied
    :type missing: list[Any]
    """

    def __init__(self, missing: list[Any]):
        self.missing = list(missing)
        lines = [f"--{option.name}: {option.description}" for option in self.missing]
        noun = "option" if len(self.missing) == 1 else "options"
        super().__init__(f"Missing required {noun}:\n  " + "\n  ".join(lines))

    @property
    def missing_names(self) -> list[str]:
        """Names of the missing options in checklist order."""
        return [option.name for option in self.missing]
