"""Size string parser: '100 MB' -> (100, 'MB')."""

from __future__ import annotations

import dataclasses as dc
import re
from functools import cache

from filesize.errors import ParseError
from filesize.units import BYTE

# 천 단위 구분자 (소수점 기호로 지정되지 않은 것)
SEPARATORS = ".,'_"


@dc.dataclass(frozen=True)
class ParsedSize:
    value: int | float
    unit: str | None = None


@cache
def size_pattern(decimal_mark: str = '.') -> re.Pattern:
    """
    e.g.
        150
        -10k
        1,024.5 MB
        1.024,5 MB  (decimal_mark=',')
        1 gigabytes
    """
    chars = re.escape(''.join(sorted(set(SEPARATORS + decimal_mark))))
    return re.compile(
        rf'^(?P<sign>[-+]?)(?P<value>[\d{chars}]+)\s*(?P<unit>[A-Za-z]+)?$'
    )


def _number(literal: str, decimal_mark: str) -> int | float:
    digits = ''.join(c for c in literal if c.isdigit() or c == decimal_mark)

    if not any(c.isdigit() for c in digits) or digits.count(decimal_mark) > 1:
        raise ValueError(literal)

    if decimal_mark not in digits:
        return int(digits)

    return float(digits.replace(decimal_mark, '.'))


def parse(size: str | float, decimal_mark: str = '.') -> ParsedSize:
    if isinstance(size, bool):
        raise ParseError(size)

    if isinstance(size, int | float):
        return ParsedSize(size, BYTE)

    if not isinstance(size, str):
        raise ParseError(size)

    if not (m := size_pattern(decimal_mark).match(size.strip())):
        raise ParseError(size)

    try:
        value = _number(m.group('value'), decimal_mark)
    except ValueError as e:
        raise ParseError(size) from e

    if m.group('sign') == '-':
        value = -value

    return ParsedSize(value=value, unit=m.group('unit'))
