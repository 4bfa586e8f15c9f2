"""Machine (TM/HM) records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import NamedAPIResource


class Machine(TypedDict):
    id: int
    item: NamedAPIResource
    move: NamedAPIResource
    version_group: NamedAPIResource
