# causal_cmd/cli/options/__init__.py
"""
Option schema for the causal-cmd command line.

This package provides:
- OptionDefinition: immutable description of one long option
- build_from_param: option for a named parameter catalog entry
- OptionRegistry: read-only table of all options with required, base and
  main views
- build_registry: explicit construction from the catalogs
"""

from .definition import (
    OptionDefinition,
    build_from_param,
    option_key,
    switch_option,
    value_option,
)
from .registry import (
    OptionRegistry,
    build_registry,
    build_registry_from_bundle,
    to_argument_parser,
)

__all__ = [
    "OptionDefinition",
    "OptionRegistry",
    "build_from_param",
    "build_registry",
    "build_registry_from_bundle",
    "option_key",
    "switch_option",
    "to_argument_parser",
    "value_option",
]
