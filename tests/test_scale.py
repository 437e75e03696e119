import pytest

from filesize import ConfigError
from filesize.scale import (
    factor_between,
    scale,
    tier_index_for_byte_count,
    to_byte_count,
    wrap_int64,
)


@pytest.mark.parametrize(
    ('delta', 'base', 'factor'),
    [
        (0, 2, 1),
        (1, 2, 1024),
        (4, 2, 2**40),
        (0, 10, 1),
        (2, 10, 1_000_000),
        (8, 10, 10**24),
        (-1, 2, 1 / 1024),
    ],
)
def test_factor_between(delta, base, factor):
    assert factor_between(delta, base) == factor


def test_factor_between_is_int():
    assert isinstance(factor_between(8, 2), int)


@pytest.mark.parametrize('base', [0, 1, 8, 16, 1000, 1024])
def test_factor_between_invalid_base(base):
    with pytest.raises(ConfigError, match='base must be 2 or 10'):
        factor_between(1, base)


def test_scale():
    assert scale(1, 4, 0) == 2**40
    assert scale(123456789, 4, 0) == 123456789 * 2**40
    assert scale(2**20, 0, 2) == 1.0
    assert scale(1500, 0, 1, base=10) == 1.5
    assert scale(7, 3, 3) == 7


@pytest.mark.parametrize(
    ('n', 'index'),
    [
        (0, 0),
        (1, 0),
        (999, 0),
        (1000, 1),
        (1023, 1),
        (1024, 1),
        (999_999, 1),
        (1_000_000, 2),
        (1_048_575, 2),
        (10_485_760, 2),
        (-10_485_760, 2),
        (1_264_151_222_395, 4),
        (2**63 - 1, 6),
    ],
)
def test_tier_index_for_byte_count(n, index):
    assert tier_index_for_byte_count(n) == index


def test_tier_index_monotonic():
    counts = sorted({10**e + d for e in range(19) for d in (-1, 0, 1)})
    indices = [tier_index_for_byte_count(x) for x in counts]

    assert indices == sorted(indices)


@pytest.mark.parametrize(
    ('number', 'expected'),
    [
        (100, 100),
        (99.7, 100),
        (99.0, 99),
        (0.1, 1),
        (-1.5, -1),
        (-0.5, 0),
        (2**63 - 1, 2**63 - 1),
        (2**63, -(2**63)),
        (2**64 + 3, 3),
        (-(2**63) - 1, 2**63 - 1),
    ],
)
def test_to_byte_count(number, expected):
    assert to_byte_count(number) == expected


def test_wrap_int64():
    assert wrap_int64(123456789 * 2**40) == 123456789 * 2**40 - 7 * 2**64


@pytest.mark.parametrize('number', [float('inf'), float('-inf'), float('nan')])
def test_to_byte_count_not_finite(number):
    with pytest.raises(ConfigError, match='byte count must be finite'):
        to_byte_count(number)


def test_to_byte_count_large_int():
    assert to_byte_count(10**400) == wrap_int64(10**400)
