"""CLI-specific constants for causal-cmd command-line interfaces.

Provides shared constants used by the CLI entry point including exit codes
and help settings.
"""

# Standard CLI exit codes following Unix conventions
SUCCESS_EXIT_CODE: int = 0
"""Exit code indicating successful program completion."""

ERROR_EXIT_CODE: int = 1
"""Exit code indicating program failure or error condition."""

INTERRUPT_EXIT_CODE: int = 1
"""Exit code indicating program interruption by user (Ctrl+C)."""

# Help and usage display
PROGRAM_NAME: str = "causal-cmd"
"""Program name shown in usage lines."""

MAIN_HELP_DESCRIPTION: str = "Causal discovery command-line launcher"
"""Description shown above the main options."""

FULL_HELP_DESCRIPTION: str = (
    "Causal discovery command-line launcher: all options, including algorithm parameters"
)
"""Description shown above the complete option list."""

DEFAULT_LOG_LEVEL: str = "WARNING"
"""Console log level for command-line runs."""
