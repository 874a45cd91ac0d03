"""Owner and group name resolution through the system user database."""

from __future__ import annotations

import grp
import pwd
from typing import Protocol


class NameResolutionError(LookupError):
    """No name is known for a numeric user or group id."""


class NameResolver(Protocol):
    def owner_name(self, uid: int) -> str: ...

    def group_name(self, gid: int) -> str: ...


class SystemNameResolver:
    """Resolve ids with ``pwd``/``grp``, memoizing answers per id."""

    def __init__(self) -> None:
        self._owners: dict[int, str] = {}
        self._groups: dict[int, str] = {}

    def owner_name(self, uid: int) -> str:
        if uid not in self._owners:
            try:
                self._owners[uid] = pwd.getpwuid(uid).pw_name
            except KeyError as exc:
                raise NameResolutionError(f"Error getting user name for uid {uid}") from exc
        return self._owners[uid]

    def group_name(self, gid: int) -> str:
        if gid not in self._groups:
            try:
                self._groups[gid] = grp.getgrgid(gid).gr_name
            except KeyError as exc:
                raise NameResolutionError(f"Error getting group name for gid {gid}") from exc
        return self._groups[gid]


__all__ = [
    "NameResolutionError",
    "NameResolver",
    "SystemNameResolver",
]
