"""Main CLI argument parsers built from the option registry."""

from argparse import ArgumentParser
from collections.abc import Sequence
from typing import Any

from .constants import FULL_HELP_DESCRIPTION, MAIN_HELP_DESCRIPTION, PROGRAM_NAME
from .options.registry import OptionRegistry


def build_main_argument_parser(registry: OptionRegistry) -> ArgumentParser:
    """
    Build the parser for the top-level help view.

    :param registry: Option registry
    :type registry: OptionRegistry
    :return: Parser with the required, base and help/version options
    :rtype: ArgumentParser
    """
    return registry.to_filtered_view(
        registry.main_definitions(),
        prog=PROGRAM_NAME,
        description=MAIN_HELP_DESCRIPTION,
    )


def build_full_argument_parser(registry: OptionRegistry) -> ArgumentParser:
    """
    Build the parser accepting every registered option.

    :param registry: Option registry
    :type registry: OptionRegistry
    :return: Parser with all options in registry order
    :rtype: ArgumentParser
    """
    return registry.to_filtered_view(
        registry.all_definitions(),
        prog=PROGRAM_NAME,
        description=FULL_HELP_DESCRIPTION,
    )


def parse_options(
    registry: OptionRegistry, argv: Sequence[str] | None = None
) -> dict[str, Any]:
    """
    Parse command-line tokens against every registered option.

    :param registry: Option registry
    :type registry: OptionRegistry
    :param argv: Tokens to parse, defaults to ``sys.argv[1:]``
    :type argv: Sequence[str] | None
    :return: Supplied options keyed by long name
    :rtype: dict[str, Any]
    :raises SystemExit: If parsing fails (handled by argparse)
    """
    parser = build_full_argument_parser(registry)
    namespace = parser.parse_args(None if argv is None else list(argv))
    return vars(namespace)


def render_help(registry: OptionRegistry, show_all: bool = False) -> str:
    """
    Render help text for the main view, or for every option.

    :param registry: Option registry
    :type registry: OptionRegistry
    :param show_all: Whether to list every option
    :type show_all: bool
    :return: Help text
    :rtype: str
    """
    if show_all:
        return build_full_argument_parser(registry).format_help()
    return build_main_argument_parser(registry).format_help()
