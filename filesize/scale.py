import math

from filesize.errors import ConfigError

# 단위 한 단계당 지수 (2**10=1024, 10**3=1000)
EXPONENT: dict[int, int] = {2: 10, 10: 3}

INT64_MIN = -(2**63)
INT64_RANGE = 2**64


def factor_between(delta: int, base: int = 2) -> int | float:
    """
    Factor between two unit tiers `delta` steps apart.

    Parameters
    ----------
    delta : int
        Tier index difference (from - to).
    base : int, optional
        2 (1024 per tier) or 10 (1000 per tier).

    Returns
    -------
    int | float
        `int` for non-negative `delta`.
    """
    try:
        exponent = EXPONENT[base]
    except KeyError as e:
        raise ConfigError(base, 'base must be 2 or 10') from e

    return base ** (exponent * delta)


def scale(value: float, src: int, dst: int, base: int = 2) -> int | float:
    """Rescale `value` from tier index `src` to tier index `dst`."""
    delta = src - dst

    if delta >= 0:
        return value * factor_between(delta, base)

    return value / factor_between(-delta, base)


def tier_index_for_byte_count(n: int) -> int:
    # log 대신 자릿수 기준 (1~3자리 정수부)
    return (len(str(abs(int(n)))) - 1) // 3


def wrap_int64(n: int) -> int:
    return (n - INT64_MIN) % INT64_RANGE + INT64_MIN


def to_byte_count(number: float) -> int:
    if isinstance(number, float) and not math.isfinite(number):
        raise ConfigError(number, 'byte count must be finite')

    return wrap_int64(math.ceil(number))
