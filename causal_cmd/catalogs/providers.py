"""Capability providers and static name catalogs."""

from collections.abc import Mapping
from typing import Any


class CapabilityProvider:
    """
    Catalog of command tokens for one capability.

    Used for algorithms, scores and independence tests. Commands may be
    given as a list of tokens or as a mapping of token to display name.

    :param kind: Catalog name, e.g. ``"algorithms"``
    :type kind: str
    :param commands: Command tokens, or a mapping of token to full name
    :type commands: list[str] | Mapping[str, str]
    """

    def __init__(self, kind: str, commands: Any = None) -> None:
        self.kind = kind
        if isinstance(commands, Mapping):
            self._full_names = {str(k): str(v) for k, v in commands.items()}
        else:
            self._full_names = {str(token): str(token) for token in commands or []}

    def command_tokens(self) -> list[str]:
        """Return the command tokens in declared order."""
        return list(self._full_names)

    def full_names(self) -> dict[str, str]:
        """Return the mapping of command token to display name."""
        return dict(self._full_names)

    def __len__(self) -> int:
        return len(self._full_names)

    def __repr__(self) -> str:
        return f"CapabilityProvider(kind={self.kind!r}, commands={self.command_tokens()!r})"


class StaticNameCatalog:
    """Fixed, ordered list of names (delimiters, data types)."""

    def __init__(self, kind: str, names: Any = None) -> None:
        self.kind = kind
        self._names = [str(name) for name in names or []]

    def names(self) -> list[str]:
        """Return the names in declared order."""
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"StaticNameCatalog(kind={self.kind!r}, names={self._names!r})"
