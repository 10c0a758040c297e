"""In-memory list of (team id, API token) pairs that drive a refresh."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Literal

CredentialField = Literal["team_id", "api_token"]

_FIELD_ALIASES: dict[str, CredentialField] = {
    "team_id": "team_id",
    "teamId": "team_id",
    "api_token": "api_token",
    "apiToken": "api_token",
}


@dataclass
class Credential:
    team_id: str = ""
    api_token: str = field(default="", repr=False)


class CredentialStore:
    """Ordered, index-addressed credential list.

    Starts with one blank entry. The first entry cannot be removed; every
    other operation is unchecked, validation happens when fetching.
    """

    def __init__(self, credentials: list[Credential] | None = None) -> None:
        self._items: list[Credential] = list(credentials) if credentials else [Credential()]

    def add(self) -> Credential:
        credential = Credential()
        self._items.append(credential)
        return credential

    def remove(self, index: int) -> None:
        if index == 0:
            return
        del self._items[index]

    def update(self, index: int, field_name: str, value: str) -> None:
        try:
            name = _FIELD_ALIASES[field_name]
        except KeyError:
            raise ValueError(f"Unknown credential field: {field_name!r}") from None
        setattr(self._items[index], name, value)

    def snapshot(self) -> list[Credential]:
        """Copy of the current entries, safe to hand to a fetch."""
        return [replace(c) for c in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Credential]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Credential:
        return self._items[index]

    def __repr__(self) -> str:
        return f"CredentialStore({len(self._items)} entries)"


__all__ = ["Credential", "CredentialStore", "CredentialField"]
