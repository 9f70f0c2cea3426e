"""
Option definition model and builder.

An ``OptionDefinition`` is an immutable description of one long-form CLI
flag. Built-in options are created with ``value_option`` and
``switch_option``; options for named parameters are created from catalog
entries with ``build_from_param``.
"""

from dataclasses import dataclass

from causal_cmd.catalogs.params import ArgumentType, ParamDescription
from causal_cmd.configs.errors import InvalidCatalogEntryError


@dataclass(frozen=True)
class OptionDefinition:
    """
    Immutable description of a command-line option.

    :ivar name: Long option name, unique under case-insensitive comparison
    :ivar description: Help text, never empty
    :ivar takes_argument: False for presence switches
    :ivar argument_type: Semantic type of the argument
    :ivar argument_label: Placeholder shown in help, empty for switches
    :ivar required: Whether every invocation must supply the option
    """

    name: str
    description: str
    takes_argument: bool
    argument_type: ArgumentType
    argument_label: str
    required: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Option name cannot be empty")
        if not self.description:
            raise ValueError(f"Option '{self.name}' has an empty description")
        if not self.takes_argument:
            if self.argument_type is not ArgumentType.BOOLEAN:
                raise ValueError(
                    f"Switch option '{self.name}' must have a boolean argument type"
                )
            if self.argument_label:
                raise ValueError(
                    f"Switch option '{self.name}' cannot have an argument label"
                )
            if self.required:
                raise ValueError(
                    f"Switch option '{self.name}' cannot be required"
                )

    @property
    def key(self) -> str:
        """Case-insensitive lookup key."""
        return option_key(self.name)

    @property
    def is_switch(self) -> bool:
        return not self.takes_argument


def option_key(name: str) -> str:
    """Normalize an option name for case-insensitive comparison."""
    return name.casefold()


def value_option(
    name: str,
    description: str,
    argument_label: str = ArgumentType.STRING.label,
    required: bool = False,
    argument_type: ArgumentType = ArgumentType.STRING,
) -> OptionDefinition:
    """
    Create a built-in option that takes an argument.

    :param name: Long option name
    :param description: Help text
    :param argument_label: Placeholder shown in help, e.g. ``"file"``
    :param required: Whether the option is required
    :param argument_type: Semantic type of the argument
    :return: Option definition
    """
    return OptionDefinition(
        name=name,
        description=description,
        takes_argument=True,
        argument_type=argument_type,
        argument_label=argument_label,
        required=required,
    )


def switch_option(name: str, description: str) -> OptionDefinition:
    """Create a built-in presence switch."""
    return OptionDefinition(
        name=name,
        description=description,
        takes_argument=False,
        argument_type=ArgumentType.BOOLEAN,
        argument_label="",
    )


def build_from_param(param: ParamDescription) -> OptionDefinition:
    """
    Create the option for a named parameter catalog entry.

    The argument type comes from the entry's tagged default and the label
    is that type's lowercase name. Boolean parameters are modelled as
    presence switches.

    :param param: Catalog entry
    :type param: ParamDescription
    :return: Optional option definition for the parameter
    :rtype: OptionDefinition
    :raises InvalidCatalogEntryError: If the entry has no default value
    """
    if param.default_value is None:
        raise InvalidCatalogEntryError(param.name)

    argument_type = param.default_value.kind
    if argument_type is ArgumentType.BOOLEAN:
        return switch_option(param.name, param.description)

    return OptionDefinition(
        name=param.name,
        description=param.description,
        takes_argument=True,
        argument_type=argument_type,
        argument_label=argument_type.label,
        required=False,
    )
