from __future__ import annotations

from collections.abc import Iterable
from typing import Self, TypeAlias

from loguru import logger

from filesize import scale
from filesize.config import SizeConfig
from filesize.errors import ConfigError
from filesize.parser import parse
from filesize.units import BYTE, UnitResolver

Size: TypeAlias = 'str | int | float'
Sizes: TypeAlias = 'Size | Iterable[Size]'


def _flatten(sizes: Iterable[Sizes]):
    for size in sizes:
        if isinstance(size, Iterable) and not isinstance(size, str | bytes | bytearray):
            yield from size
        else:
            yield size


def _check_precision(precision: int):
    if isinstance(precision, bool) or not isinstance(precision, int):
        msg = f'precision must be an int, not {type(precision).__name__}'
        raise TypeError(msg)

    if precision < 0:
        msg = f'precision must be non-negative: {precision}'
        raise ValueError(msg)


def format_number(value: float, precision: int, decimal_mark: str = '.') -> str:
    """
    Round `value` and drop trailing zeros.

    e.g. (1.5, 2) -> '1.5', (-10.0, 2) -> '-10', (1.149, 2) -> '1.15'
    """
    text = f'{round(value, precision):.{precision}f}'

    if '.' in text:
        text = text.rstrip('0').rstrip('.')

    if text == '-0':
        text = '0'

    return text.replace('.', decimal_mark)


class FileSize:
    """
    A byte count parsed from size strings, such as '100 MB' or '1.5 GiB'.

    Arithmetic methods mutate the instance and return it, so calls can be
    chained: `FileSize('1 GB').add('100 MB').as_unit('MB')`.
    """

    def __init__(
        self,
        size: Sizes | None = None,
        base: int = 2,
        decimal_mark: str = '.',
        *,
        precision: int = 2,
    ) -> None:
        self._config = SizeConfig(
            base=base, decimal_mark=decimal_mark, precision=precision
        )
        self._resolver = UnitResolver()
        self._bytes = 0

        if size not in (None, ''):
            self._store(self._sum([size]))

    @classmethod
    def from_config(cls, size: Sizes | None = None, config: SizeConfig | None = None):
        config = config or SizeConfig()
        return cls(
            size,
            base=config.base,
            decimal_mark=config.decimal_mark,
            precision=config.precision,
        )

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._bytes}, base={self.base})'

    def __int__(self) -> int:
        return self._bytes

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileSize):
            return self._bytes == other.bytes

        if isinstance(other, int) and not isinstance(other, bool):
            return self._bytes == other

        return NotImplemented

    @property
    def bytes(self) -> int:
        return self._bytes

    @property
    def config(self) -> SizeConfig:
        return self._config

    @property
    def base(self) -> int:
        return self._config.base

    @property
    def decimal_mark(self) -> str:
        return self._config.decimal_mark

    def to_bytes(self, size: Size) -> int:
        """Byte count of a single size string or number."""
        parsed = parse(size, self.decimal_mark)
        index = self._resolver.index(parsed.unit or BYTE)
        value = scale.scale(parsed.value, index, 0, self.base)

        return scale.to_byte_count(value)

    def _sum(self, sizes: Iterable[Sizes]) -> int:
        # 전체 파싱 후 합산 (일부만 적용되지 않도록)
        return sum(self.to_bytes(x) for x in _flatten(sizes))

    def _store(self, n: float):
        self._bytes = scale.to_byte_count(n)

    def add(self, *sizes: Sizes) -> Self:
        delta = self._sum(sizes)
        logger.debug('{} + {} bytes', self._bytes, delta)
        self._store(self._bytes + delta)

        return self

    def subtract(self, *sizes: Sizes) -> Self:
        """Subtract from this filesize. The result may be negative."""
        delta = self._sum(sizes)
        logger.debug('{} - {} bytes', self._bytes, delta)
        self._store(self._bytes - delta)

        return self

    def multiply_by(self, n: float) -> Self:
        logger.debug('{} * {}', self._bytes, n)
        self._store(self._bytes * n)

        return self

    def divide_by(self, n: float) -> Self:
        if n == 0:
            raise ConfigError(n, 'division by zero')

        return self.multiply_by(1 / n)

    multiply = multiply_by
    divide = divide_by

    def as_unit(self, unit: str, precision: int | None = None) -> int | float:
        """
        Get the filesize in a given unit.

        Parameters
        ----------
        unit : str
            Unit such as 'B', 'KB', 'gigabytes', 'GiB'.
        precision : int | None, optional
            Round to this many decimal places. Configured precision if `None`.

        Returns
        -------
        int | float
            `int` byte count for 'B', rounded `float` otherwise.
        """
        precision = self._config.precision if precision is None else precision
        _check_precision(precision)

        index = self._resolver.index(unit)
        if index == 0:
            return self._bytes

        value = scale.scale(self._bytes, 0, index, self.base)
        return round(value, precision)

    def as_auto(self, precision: int | None = None) -> str:
        """Get the filesize in a human-friendly unit, such as '1.15 TB'."""
        precision = self._config.precision if precision is None else precision
        _check_precision(precision)

        index = scale.tier_index_for_byte_count(self._bytes)
        unit = self._resolver.key_from_index(index)

        if unit == BYTE:
            return f'{self._bytes} {BYTE}'

        value = scale.scale(self._bytes, 0, index, self.base)
        return f'{format_number(value, precision, self.decimal_mark)} {unit}'

    def to_display_string(self) -> str:
        return self.as_auto()
