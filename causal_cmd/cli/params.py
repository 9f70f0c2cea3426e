"""Long names of the built-in command-line options."""

# Required options
ALGORITHM: str = "algorithm"
DATASET: str = "dataset"
DELIMITER: str = "delimiter"
DATA_TYPE: str = "data-type"

# Dataset formatting
QUOTE_CHAR: str = "quote-char"
MISSING_MARKER: str = "missing-marker"
COMMENT_MARKER: str = "comment-marker"
NO_HEADER: str = "no-header"

# Help and version
HELP: str = "help"
HELP_ALL: str = "help-all"
VERSION: str = "version"

# Output
FILE_PREFIX: str = "prefix"
JSON: str = "json"
DIR_OUT: str = "out"

# Knowledge and exclusions
KNOWLEDGE: str = "knowledge"
EXCLUDE_VARIABLE: str = "exclude-var"

# Validation and update checks
SKIP_VALIDATION: str = "skip-validation"
SKIP_LATEST: str = "skip-latest"

# Search components
TEST: str = "test"
SCORE: str = "score"

REQUIRED_PARAMS: tuple[str, ...] = (ALGORITHM, DATASET, DELIMITER, DATA_TYPE)
"""Options every invocation must supply."""

BASE_OPTIONAL_PARAMS: tuple[str, ...] = (
    QUOTE_CHAR,
    COMMENT_MARKER,
    FILE_PREFIX,
    JSON,
    DIR_OUT,
    SKIP_VALIDATION,
    SKIP_LATEST,
)
"""Optional options shared by every run mode, in help order."""

MAIN_EXTRA_PARAMS: tuple[str, ...] = (HELP, HELP_ALL, VERSION)
"""Switches appended to the base options for top-level help."""
