"""
causal_cmd: Command-line option schema for a causal discovery launcher.

The option registry merges the built-in options with one option per
algorithm parameter from the parameter catalog, and exposes the required,
base, main and complete views used for parsing, help and validation.
"""

__version__ = "1.0.0"
