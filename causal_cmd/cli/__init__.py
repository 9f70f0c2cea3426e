"""
causal_cmd.cli: Command-line option schema and entry point.

Core Modules:
- params.py: Long names of the built-in options and the named views
- options/: Option definitions, description text and the option registry
- main_parser.py: argparse parsers built from registry views
- validation.py: Required-option checks for parsed invocations
- constants.py: Exit codes and help settings

Entry Points:
- run_cmd.py: Loads catalogs, builds the registry, answers help/version
  requests and validates invocations
"""

from .constants import ERROR_EXIT_CODE, INTERRUPT_EXIT_CODE, SUCCESS_EXIT_CODE
from .main_parser import (
    build_full_argument_parser,
    build_main_argument_parser,
    parse_options,
    render_help,
)
from .options.registry import OptionRegistry, build_registry, build_registry_from_bundle
from .validation import find_missing_required, validate_required

__all__ = [
    "OptionRegistry",
    "build_registry",
    "build_registry_from_bundle",
    "build_main_argument_parser",
    "build_full_argument_parser",
    "parse_options",
    "render_help",
    "find_missing_required",
    "validate_required",
    "SUCCESS_EXIT_CODE",
    "ERROR_EXIT_CODE",
    "INTERRUPT_EXIT_CODE",
]
