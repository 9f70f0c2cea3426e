"""
Option registry for the causal-cmd command line.

The registry is the single source of truth for which long options exist.
It merges the built-in options with one option per named parameter and is
read-only once built. Views (required, base, main) are computed from the
owned definitions on each call.
"""

import argparse
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from causal_cmd.catalogs.loader import CatalogBundle
from causal_cmd.catalogs.params import ArgumentType, ParamCatalog
from causal_cmd.catalogs.providers import CapabilityProvider, StaticNameCatalog
from causal_cmd.cli import params
from causal_cmd.cli.options.definition import (
    OptionDefinition,
    build_from_param,
    option_key,
    switch_option,
    value_option,
)
from causal_cmd.cli.options.descriptions import (
    algorithm_description,
    data_type_description,
    delimiter_description,
    independence_test_description,
    score_description,
)
from causal_cmd.configs.errors import CatalogUnavailableError, OptionCollisionError
from causal_cmd.utils.logging_config import get_logger

logger = get_logger(__name__)

ARGUMENT_CONVERTERS = {
    ArgumentType.INTEGER: int,
    ArgumentType.FLOAT: float,
    ArgumentType.STRING: str,
}

REQUIRED_GROUP_TITLE = "required options"
OPTIONAL_GROUP_TITLE = "options"


class OptionRegistry:
    """
    Read-only table of option definitions keyed by case-insensitive name.

    Instances are created by ``build_registry``; iteration follows the
    case-insensitive name order, not insertion order.

    :param definitions: Mapping of lookup key to option definition
    :type definitions: Mapping[str, OptionDefinition]
    """

    def __init__(self, definitions: Mapping[str, OptionDefinition]) -> None:
        ordered = {key: definitions[key] for key in sorted(definitions)}
        self._options: Mapping[str, OptionDefinition] = MappingProxyType(ordered)

    def lookup(self, name: str) -> OptionDefinition | None:
        """
        Find an option by name, ignoring case.

        :param name: Long option name
        :type name: str
        :return: Matching definition, or None when no such option exists
        :rtype: OptionDefinition | None
        """
        return self._options.get(option_key(name))

    def contains(self, name: str) -> bool:
        """
        Check whether an option exists, ignoring case.

        :param name: Long option name
        :type name: str
        :return: True if the option is registered
        :rtype: bool
        """
        return option_key(name) in self._options

    def all_definitions(self) -> list[OptionDefinition]:
        """
        Get every option definition.

        :return: All definitions in registry order
        :rtype: list[OptionDefinition]
        """
        return list(self._options.values())

    def required_definitions(self) -> list[OptionDefinition]:
        """
        Get the options every invocation must supply.

        :return: Required definitions in registry order
        :rtype: list[OptionDefinition]
        """
        return [option for option in self._options.values() if option.required]

    def base_definitions(self) -> list[OptionDefinition]:
        """
        Get the options shared by every run mode.

        :return: Required definitions followed by the base optional options
        :rtype: list[OptionDefinition]
        """
        definitions = self.required_definitions()
        definitions.extend(self._named(params.BASE_OPTIONAL_PARAMS))
        return definitions

    def main_definitions(self) -> list[OptionDefinition]:
        """
        Get the options shown in top-level help.

        :return: Base definitions followed by help, help-all and version
        :rtype: list[OptionDefinition]
        """
        definitions = self.base_definitions()
        definitions.extend(self._named(params.MAIN_EXTRA_PARAMS))
        return definitions

    def to_filtered_view(
        self,
        definitions: Iterable[OptionDefinition],
        prog: str | None = None,
        description: str | None = None,
    ) -> argparse.ArgumentParser:
        """
        Wrap a sequence of definitions into an argument parser.

        :param definitions: Definitions to expose, in help order
        :type definitions: Iterable[OptionDefinition]
        :param prog: Program name shown in usage
        :type prog: str | None
        :param description: Parser description text
        :type description: str | None
        :return: Parser accepting exactly the given options
        :rtype: argparse.ArgumentParser
        """
        return to_argument_parser(definitions, prog=prog, description=description)

    def _named(self, names: Iterable[str]) -> list[OptionDefinition]:
        return [self._options[option_key(name)] for name in names]

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[OptionDefinition]:
        return iter(self._options.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __repr__(self) -> str:
        return f"OptionRegistry({len(self)} options)"


def to_argument_parser(
    definitions: Iterable[OptionDefinition],
    prog: str | None = None,
    description: str | None = None,
) -> argparse.ArgumentParser:
    """
    Build an ``ArgumentParser`` for the given option definitions.

    Value-taking options use their label as metavar and their type as
    converter; switches use ``store_true``. Defaults are suppressed so the
    parsed namespace only holds supplied options, keyed by long name.
    Required-ness is shown in help but not enforced here.

    :param definitions: Definitions to expose
    :param prog: Program name shown in usage
    :param description: Parser description text
    :return: Configured parser
    """
    parser = argparse.ArgumentParser(
        prog=prog,
        description=description,
        add_help=False,
        allow_abbrev=False,
        argument_default=argparse.SUPPRESS,
    )
    required_group = parser.add_argument_group(REQUIRED_GROUP_TITLE)
    optional_group = parser.add_argument_group(OPTIONAL_GROUP_TITLE)

    seen: set[str] = set()
    for option in definitions:
        if option.key in seen:
            continue
        seen.add(option.key)

        group = required_group if option.required else optional_group
        if option.takes_argument:
            group.add_argument(
                f"--{option.name}",
                dest=option.name,
                metavar=option.argument_label,
                type=ARGUMENT_CONVERTERS.get(option.argument_type, str),
                help=_escape_help(option.description),
            )
        else:
            group.add_argument(
                f"--{option.name}",
                dest=option.name,
                action="store_true",
                help=_escape_help(option.description),
            )

    return parser


def _escape_help(text: str) -> str:
    # argparse applies %-formatting to help strings
    return text.replace("%", "%%")


def build_registry(
    params_catalog: ParamCatalog | None,
    algorithms: CapabilityProvider | None,
    scores: CapabilityProvider | None,
    tests: CapabilityProvider | None,
    delimiters: StaticNameCatalog | None,
    data_types: StaticNameCatalog | None,
) -> OptionRegistry:
    """
    Build the option registry from its catalogs.

    Required built-ins are inserted first, then optional built-ins, then one
    option per named parameter in catalog order. A parameter whose name
    matches an optional built-in replaces it; a parameter whose name matches
    a required built-in is rejected.

    :param params_catalog: Named parameter catalog
    :param algorithms: Algorithm provider
    :param scores: Score provider
    :param tests: Independence test provider
    :param delimiters: Delimiter names
    :param data_types: Data type names
    :return: Read-only option registry
    :raises CatalogUnavailableError: If any catalog is missing or empty
    :raises InvalidCatalogEntryError: If a parameter has no usable default
    :raises OptionCollisionError: If a parameter shadows a required option
    """
    if params_catalog is None or len(params_catalog) == 0:
        raise CatalogUnavailableError("parameters")

    options: dict[str, OptionDefinition] = {}
    for option in _required_builtins(algorithms, delimiters, data_types):
        options[option.key] = option
    for option in _optional_builtins(scores, tests):
        options[option.key] = option
    builtin_count = len(options)

    for param in params_catalog:
        option = build_from_param(param)
        existing = options.get(option.key)
        if existing is not None:
            if existing.required:
                raise OptionCollisionError(option.name)
            logger.warning(
                "Parameter '%s' overrides existing option '%s'",
                option.name,
                existing.name,
            )
        options[option.key] = option

    registry = OptionRegistry(options)
    logger.debug(
        "Built option registry: %d built-in options, %d parameters, %d total",
        builtin_count,
        len(params_catalog),
        len(registry),
    )
    return registry


def build_registry_from_bundle(bundle: CatalogBundle) -> OptionRegistry:
    """Build the option registry from a loaded catalog bundle."""
    return build_registry(
        bundle.params,
        bundle.algorithms,
        bundle.scores,
        bundle.tests,
        bundle.delimiters,
        bundle.data_types,
    )


def _required_builtins(
    algorithms: CapabilityProvider | None,
    delimiters: StaticNameCatalog | None,
    data_types: StaticNameCatalog | None,
) -> list[OptionDefinition]:
    return [
        value_option(params.ALGORITHM, algorithm_description(algorithms), required=True),
        value_option(
            params.DATASET,
            "Dataset. Multiple files are separated by commas.",
            argument_label="files",
            required=True,
        ),
        value_option(params.DELIMITER, delimiter_description(delimiters), required=True),
        value_option(params.DATA_TYPE, data_type_description(data_types), required=True),
    ]


def _optional_builtins(
    scores: CapabilityProvider | None, tests: CapabilityProvider | None
) -> list[OptionDefinition]:
    return [
        # dataset options
        value_option(params.QUOTE_CHAR, "Single character denotes quote.", argument_label="character"),
        value_option(params.MISSING_MARKER, "Denotes missing value."),
        value_option(params.COMMENT_MARKER, "Comment marker."),
        switch_option(params.NO_HEADER, "Indicates tabular dataset has no header."),
        # help and version
        switch_option(params.HELP, "Show help."),
        switch_option(params.HELP_ALL, "Show all options and descriptions."),
        switch_option(params.VERSION, "Show version."),
        # output options
        value_option(params.FILE_PREFIX, "Output file name prefix."),
        switch_option(params.JSON, "Write out graph as json."),
        value_option(params.DIR_OUT, "Output directory.", argument_label="directory"),
        # knowledge options
        value_option(params.KNOWLEDGE, "Prior knowledge file.", argument_label="file"),
        value_option(params.EXCLUDE_VARIABLE, "Variables to be excluded from run.", argument_label="file"),
        # validation and update checks
        switch_option(params.SKIP_VALIDATION, "Skip validation."),
        switch_option(params.SKIP_LATEST, "Skip checking for latest software version."),
        # search components
        value_option(params.TEST, independence_test_description(tests)),
        value_option(params.SCORE, score_description(scores)),
    ]
