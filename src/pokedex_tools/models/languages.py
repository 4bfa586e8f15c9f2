"""Language records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import Name


class Language(TypedDict):
    id: int
    name: str
    official: bool
    iso639: str
    iso3166: str
    names: list[Name]
