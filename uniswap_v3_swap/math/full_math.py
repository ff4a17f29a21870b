"""
Full Math - 512비트 중간값을 허용하는 곱셈/나눗셈

References:
- Uniswap V3 Core: contracts/libraries/FullMath.sol
- Uniswap V3 Core: contracts/libraries/UnsafeMath.sol

Python int는 중간 곱셈에서 넘치지 않으므로 결과값이 uint256에
들어가는지만 확인하면 된다.
"""

from ..constants import UINT256_MAX
from ..errors import ArithmeticOverflowError, MathError


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator)

    Raises:
        MathError: denominator가 0인 경우
        ArithmeticOverflowError: 결과가 uint256을 넘는 경우
    """
    if denominator == 0:
        raise MathError("mul_div: denominator 가 0 입니다")
    result = (a * b) // denominator
    if result > UINT256_MAX:
        raise ArithmeticOverflowError(f"mul_div 결과가 uint256 을 넘습니다: {result}")
    return result


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """ceil(a * b / denominator)"""
    result = mul_div(a, b, denominator)
    if (a * b) % denominator > 0:
        if result >= UINT256_MAX:
            raise ArithmeticOverflowError("mul_div_rounding_up 올림 오버플로우")
        result += 1
    return result


def div_rounding_up(numerator: int, denominator: int) -> int:
    """numerator / denominator 올림"""
    if denominator == 0:
        raise MathError("div_rounding_up: denominator 가 0 입니다")
    result = numerator // denominator
    if numerator % denominator > 0:
        result += 1
    return result
