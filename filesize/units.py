from __future__ import annotations

import dataclasses as dc

from loguru import logger

from filesize.errors import UnitError


@dc.dataclass(frozen=True)
class UnitTier:
    key: str
    aliases: frozenset[str]

    def __contains__(self, unit: str) -> bool:
        return unit in self.aliases


def _tier(key: str, *aliases: str):
    return UnitTier(key=key, aliases=frozenset(aliases))


BYTE = 'B'

# 크기 순서 (B=0, KB=1, ..., YB=8)
UNIT_TABLE: tuple[UnitTier, ...] = (
    _tier(BYTE, 'b', 'byte'),
    _tier('KB', 'k', 'kb', 'kib', 'kilobyte', 'kibibyte'),
    _tier('MB', 'm', 'mb', 'mib', 'megabyte', 'mebibyte'),
    _tier('GB', 'g', 'gb', 'gib', 'gigabyte', 'gibibyte'),
    _tier('TB', 't', 'tb', 'tib', 'terabyte', 'tebibyte'),
    _tier('PB', 'p', 'pb', 'pib', 'petabyte', 'pebibyte'),
    _tier('EB', 'e', 'eb', 'eib', 'exabyte', 'exbibyte'),
    _tier('ZB', 'z', 'zb', 'zib', 'zettabyte', 'zebibyte'),
    _tier('YB', 'y', 'yb', 'yib', 'yottabyte', 'yobibyte'),
)

KEYS: tuple[str, ...] = tuple(x.key for x in UNIT_TABLE)


def sanitize(unit: str) -> str:
    return unit.lower().replace('bytes', 'byte')


class UnitResolver:
    """
    Map arbitrary unit strings to unit keys, such as 'Megabytes' -> 'MB'.

    Resolved strings are cached per instance, keyed by the original
    (case-sensitive) string.
    """

    def __init__(self, table: tuple[UnitTier, ...] = UNIT_TABLE) -> None:
        self._table = table
        self._index = {x.key: i for i, x in enumerate(table)}
        self._cache: dict[str, str] = {}

    @property
    def cache(self) -> dict[str, str]:
        return self._cache

    def resolve(self, unit: str) -> str:
        if unit == BYTE:
            return BYTE

        if (key := self._cache.get(unit)) is not None:
            logger.trace('unit cache hit: "{}" -> {}', unit, key)
            return key

        sanitized = sanitize(unit)
        for tier in self._table:
            if sanitized in tier:
                logger.debug('unit "{}" -> {}', unit, tier.key)
                self._cache[unit] = tier.key
                return tier.key

        raise UnitError(unit)

    def index_from_key(self, key: str) -> int:
        try:
            return self._index[key]
        except KeyError as e:
            raise UnitError(key) from e

    def key_from_index(self, index: int) -> str:
        if not 0 <= index < len(self._table):
            raise UnitError(index)

        return self._table[index].key

    def index(self, unit: str) -> int:
        return self.index_from_key(self.resolve(unit))
