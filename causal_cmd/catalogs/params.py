"""
Named parameter catalog.

Supplies, for each algorithm-tunable parameter, a description and a typed
default value. The type of a default is resolved once, when the catalog is
built, into a ``DefaultValue`` tagged with an ``ArgumentType``; consumers
match on the tag instead of inspecting Python types.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from causal_cmd.configs.errors import InvalidCatalogEntryError


class ArgumentType(Enum):
    """Semantic type of an option argument."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "double"
    STRING = "string"

    @property
    def label(self) -> str:
        """Placeholder shown in help text for arguments of this type."""
        return self.value


@dataclass(frozen=True)
class DefaultValue:
    """A catalog default value together with its argument type."""

    kind: ArgumentType
    value: bool | int | float | str

    @classmethod
    def from_raw(cls, value: Any, param_name: str = "<unknown>") -> "DefaultValue":
        """
        Tag a raw default value with its argument type.

        Booleans are tested before integers because ``bool`` is a subclass
        of ``int``. Numpy scalars are accepted and converted to the matching
        Python type.

        :param value: Raw default value
        :param param_name: Parameter name used in error messages
        :return: Tagged default value
        :raises InvalidCatalogEntryError: If the value is None or of an unsupported type
        """
        if value is None:
            raise InvalidCatalogEntryError(param_name)
        if isinstance(value, (bool, np.bool_)):
            return cls(ArgumentType.BOOLEAN, bool(value))
        if isinstance(value, (int, np.integer)):
            return cls(ArgumentType.INTEGER, int(value))
        if isinstance(value, (float, np.floating)):
            return cls(ArgumentType.FLOAT, float(value))
        if isinstance(value, str):
            return cls(ArgumentType.STRING, value)
        raise InvalidCatalogEntryError(
            param_name, f"unsupported default value type '{type(value).__name__}'"
        )


@dataclass(frozen=True)
class ParamDescription:
    """Description and default value of one named parameter."""

    name: str
    description: str
    default_value: DefaultValue | None


class ParamCatalog:
    """
    Catalog of named parameters, enumerated in insertion order.

    :param params: Parameter descriptions in enumeration order
    :type params: Iterable[ParamDescription]
    """

    def __init__(self, params: Any = ()) -> None:
        self._params: dict[str, ParamDescription] = {}
        for param in params:
            self._params[param.name] = param

    @classmethod
    def from_mapping(cls, raw_params: Mapping[str, Any] | None) -> "ParamCatalog":
        """
        Build a catalog from ``{name: {"description": ..., "default": ...}}``.

        Entries without a default are kept with ``default_value=None`` so the
        failure can be reported when the option is built, naming the entry.

        :param raw_params: Mapping of parameter names to their records
        :return: Parameter catalog in the mapping's order
        :raises InvalidCatalogEntryError: If a record is not a mapping, has no
            description or has an unsupported default
        """
        params = []
        for name, record in (raw_params or {}).items():
            if not isinstance(record, Mapping):
                raise InvalidCatalogEntryError(
                    str(name), "entry must map 'description' and 'default'"
                )
            raw_default = record.get("default")
            default = (
                None
                if raw_default is None
                else DefaultValue.from_raw(raw_default, str(name))
            )
            description = str(record.get("description") or "").strip()
            if not description:
                raise InvalidCatalogEntryError(str(name), "description is missing")
            params.append(ParamDescription(str(name), description, default))
        return cls(params)

    def names(self) -> set[str]:
        """Return the set of parameter names."""
        return set(self._params)

    def get(self, name: str) -> ParamDescription:
        """
        Return the description of a parameter.

        :raises KeyError: If the parameter is not in the catalog
        """
        return self._params[name]

    def __iter__(self) -> Iterator[ParamDescription]:
        return iter(self._params.values())

    def __len__(self) -> int:
        return len(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params
