"""Required-option validation for parsed invocations."""

from collections.abc import Iterable, Mapping
from typing import Any

from causal_cmd.cli.options.definition import OptionDefinition, option_key
from causal_cmd.cli.options.registry import OptionRegistry
from causal_cmd.configs.errors import MissingRequiredOptionError


def find_missing_required(
    supplied: Mapping[str, Any] | Iterable[str], registry: OptionRegistry
) -> list[OptionDefinition]:
    """
    List the required options absent from an invocation.

    :param supplied: Supplied options keyed by long name, or the names alone
    :type supplied: Mapping[str, Any] | Iterable[str]
    :param registry: Option registry providing the required checklist
    :type registry: OptionRegistry
    :return: Missing required definitions in checklist order
    :rtype: list[OptionDefinition]
    """
    supplied_keys = {option_key(name) for name in supplied}
    return [
        option
        for option in registry.required_definitions()
        if option.key not in supplied_keys
    ]


def validate_required(
    supplied: Mapping[str, Any] | Iterable[str], registry: OptionRegistry
) -> None:
    """
    Ensure every required option was supplied.

    :param supplied: Supplied options keyed by long name, or the names alone
    :type supplied: Mapping[str, Any] | Iterable[str]
    :param registry: Option registry providing the required checklist
    :type registry: OptionRegistry
    :raises MissingRequiredOptionError: If any required option is missing
    """
    missing = find_missing_required(supplied, registry)
    if missing:
        raise MissingRequiredOptionError(missing)
