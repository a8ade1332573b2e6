"""Store link models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

_STEAM_ID_PATTERN = re.compile(r"steampowered\.com/app/(\d+)(?:/.*)?")


class Store(StrEnum):
    """Storefront a game can be bought from."""

    STEAM = "steam"
    GOG = "gog"
    HUMBLE_BUNDLE = "humblebundle"
    ITCH_IO = "itchio"
    EPIC = "epic"
    UNKNOWN = "unknown"


# Checked in order, first matching url fragment wins
_STORE_FRAGMENTS: tuple[tuple[str, Store], ...] = (
    ("steampowered", Store.STEAM),
    ("gog.com", Store.GOG),
    ("humblebundle.com", Store.HUMBLE_BUNDLE),
    ("itch.io", Store.ITCH_IO),
    ("epicgames.com", Store.EPIC),
)


def _steam_id(url: str) -> int | None:
    """Extract the numeric app id from a Steam store url."""
    match = _STEAM_ID_PATTERN.search(url)
    if match is None:
        return None
    return int(match.group(1))


@dataclass(frozen=True)
class StoreLink:
    """One url of the Store line, with its storefront and store-specific id."""

    url: str
    store: Store = Store.UNKNOWN
    id: int | None = None

    @classmethod
    def from_url(cls, url: str) -> StoreLink:
        for fragment, store in _STORE_FRAGMENTS:
            if fragment in url:
                game_id = _steam_id(url) if store is Store.STEAM else None
                return cls(url=url, store=store, id=game_id)
        return cls(url=url)

    def to_dict(self) -> dict[str, str | int | None]:
        return {"url": self.url, "store": str(self.store), "id": self.id}

    def __str__(self) -> str:
        return self.url
