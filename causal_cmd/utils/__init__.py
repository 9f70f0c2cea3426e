"""
Utility modules for causal-cmd.

Import directly from specific modules to avoid circular dependencies.

Example:
    from causal_cmd.utils.logging_config import get_logger
"""

from causal_cmd.utils.logging_config import get_logger, setup_logger

__all__ = [
    "setup_logger",
    "get_logger",
]
