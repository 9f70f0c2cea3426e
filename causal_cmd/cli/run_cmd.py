"""CLI entry point for the causal-cmd launcher.

This module loads the catalogs, builds the option registry, and checks an
invocation against it: help, full help and version requests are answered
here, every other invocation is parsed and validated for required options
before it would be handed to the execution layer.
"""

import sys
import traceback
from collections.abc import Sequence

from causal_cmd import __version__
from causal_cmd.catalogs.loader import load_catalog_bundle
from causal_cmd.cli import params
from causal_cmd.cli.constants import (
    DEFAULT_LOG_LEVEL,
    ERROR_EXIT_CODE,
    INTERRUPT_EXIT_CODE,
    PROGRAM_NAME,
    SUCCESS_EXIT_CODE,
)
from causal_cmd.cli.main_parser import parse_options, render_help
from causal_cmd.cli.options.registry import OptionRegistry, build_registry_from_bundle
from causal_cmd.cli.validation import validate_required
from causal_cmd.configs.errors import (
    CatalogError,
    InvalidCatalogEntryError,
    MissingRequiredOptionError,
)
from causal_cmd.utils.logging_config import configure_cli_logging, get_logger

logger = get_logger(__name__)

DEFAULT_MAX_TRACEBACK_LINES: int = 3


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the causal-cmd launcher.

    :param argv: Command-line tokens, defaults to ``sys.argv[1:]``
    :type argv: Sequence[str] | None
    :return: Exit code (0 for success, 1 for error or interruption)
    :rtype: int
    :raises SystemExit: On argument parsing errors (handled by argparse)
    """
    configure_cli_logging(DEFAULT_LOG_LEVEL)
    tokens = list(sys.argv[1:] if argv is None else argv)

    try:
        registry = _load_registry()

        if not tokens:
            print(render_help(registry))
            return SUCCESS_EXIT_CODE

        supplied = parse_options(registry, tokens)
        if supplied.get(params.HELP_ALL):
            print(render_help(registry, show_all=True))
            return SUCCESS_EXIT_CODE
        if supplied.get(params.HELP):
            print(render_help(registry))
            return SUCCESS_EXIT_CODE
        if supplied.get(params.VERSION):
            print(f"{PROGRAM_NAME} version: {__version__}")
            return SUCCESS_EXIT_CODE

        validate_required(supplied, registry)
        logger.info(
            "Accepted options: %s",
            ", ".join(f"{name}={value!r}" for name, value in supplied.items()),
        )

    except KeyboardInterrupt:
        print("\n🛑 Interrupted by user")
        return INTERRUPT_EXIT_CODE
    except InvalidCatalogEntryError as e:
        print(f"❌ Invalid parameter catalog entry '{e.param_name}': {e.reason}")
        print("💡 Every parameter needs a description and a boolean, integer, float or string default")
        return ERROR_EXIT_CODE
    except CatalogError as e:
        print(f"❌ Catalog error: {e}")
        print("💡 Check the catalog file or the CAUSAL_CMD_CATALOGS setting")
        _display_detailed_error_info(e)
        return ERROR_EXIT_CODE
    except MissingRequiredOptionError as e:
        print(f"❌ {e}")
        print(f"💡 Run '{PROGRAM_NAME} --help' to see the required options")
        return ERROR_EXIT_CODE

    return SUCCESS_EXIT_CODE


def _load_registry() -> OptionRegistry:
    bundle = load_catalog_bundle()
    return build_registry_from_bundle(bundle)


def _display_detailed_error_info(exception: Exception) -> None:
    """
    Display the cause chain and the last traceback lines of an exception.

    :param exception: The exception to analyze and display
    :type exception: Exception
    """
    if exception.__cause__:
        print(f"  ↳ Caused by: {exception.__cause__}")

    print(f"  Exception type: {type(exception).__name__}")

    traceback_lines = traceback.format_tb(exception.__traceback__)
    if traceback_lines:
        print("  Last few calls:")
        for line in traceback_lines[-DEFAULT_MAX_TRACEBACK_LINES:]:
            print(f"    {line.strip()}")


def run_cmd_main() -> None:
    """
    Execute the main function and exit with its code.

    :raises SystemExit: Always exits with code from main() function
    """
    sys.exit(main())


if __name__ == "__main__":
    run_cmd_main()
