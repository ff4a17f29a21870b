"""
Fixed Point - 고정폭 정수 연산

Python int는 임의 정밀도이므로 온체인 uint256/int256 동작을 명시적으로
흉내내야 한다. 두 가지 의미를 구분한다:

- checked: 범위를 벗어나면 ArithmeticOverflowError (Solidity 0.8 기본 연산)
- wrapping: 2^bits 로 나눈 나머지 (unchecked 블록)

스왑 루프의 누적값과 유동성 변화는 반드시 checked 연산을 사용한다.
"""

from ..constants import (
    UINT256_MAX,
    INT256_MIN,
    INT256_MAX,
)
from ..errors import ArithmeticOverflowError


def check_uint(value: int, bits: int, name: str = "value") -> int:
    """value가 uint{bits} 범위 안인지 확인 후 그대로 반환"""
    if value < 0 or value >= 1 << bits:
        raise ArithmeticOverflowError(f"{name} 이 uint{bits} 범위를 벗어났습니다: {value}")
    return value


def check_int(value: int, bits: int, name: str = "value") -> int:
    """value가 int{bits} 범위 안인지 확인 후 그대로 반환"""
    bound = 1 << (bits - 1)
    if value < -bound or value >= bound:
        raise ArithmeticOverflowError(f"{name} 이 int{bits} 범위를 벗어났습니다: {value}")
    return value


def to_int256(value: int) -> int:
    """uint256 -> int256 변환 (SafeCast.toInt256)"""
    if value < 0 or value > INT256_MAX:
        raise ArithmeticOverflowError(f"int256 으로 변환할 수 없습니다: {value}")
    return value


def checked_add_int256(a: int, b: int) -> int:
    result = a + b
    if result < INT256_MIN or result > INT256_MAX:
        raise ArithmeticOverflowError(f"int256 덧셈 오버플로우: {a} + {b}")
    return result


def checked_sub_int256(a: int, b: int) -> int:
    result = a - b
    if result < INT256_MIN or result > INT256_MAX:
        raise ArithmeticOverflowError(f"int256 뺄셈 오버플로우: {a} - {b}")
    return result


def checked_add_uint256(a: int, b: int) -> int:
    result = a + b
    if result > UINT256_MAX:
        raise ArithmeticOverflowError(f"uint256 덧셈 오버플로우: {a} + {b}")
    return result


def wrapping_add_uint256(a: int, b: int) -> int:
    """(a + b) mod 2^256"""
    return (a + b) & UINT256_MAX


def wrapping_sub_uint256(a: int, b: int) -> int:
    """(a - b) mod 2^256"""
    return (a - b) & UINT256_MAX
