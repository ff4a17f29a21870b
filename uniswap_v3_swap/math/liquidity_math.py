"""
Liquidity Math - 유동성과 토큰 수량

두 sqrt 가격 사이에서 유동성 L 이 움직이는 토큰 양, 그리고 틱 크로싱 시
유동성에 부호 있는 변화량을 더하는 연산.

References:
- Uniswap V3 Core: contracts/libraries/SqrtPriceMath.sol (getAmount0Delta, getAmount1Delta)
- Uniswap V3 Core: contracts/libraries/LiquidityMath.sol (addDelta)
- 백서 Section 6.2.1: Concentrated Liquidity

핵심 공식:
    Δx = L * (√P_b - √P_a) / (√P_a * √P_b)
    Δy = L * (√P_b - √P_a)
"""

from ..constants import Q96, RESOLUTION, UINT128_MAX
from ..errors import LiquidityOverflowError, LiquidityUnderflowError, PriceMathError
from .fixed_point import check_int, check_uint
from .full_math import mul_div, mul_div_rounding_up, div_rounding_up


def get_amount0_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool = True
) -> int:
    """두 가격 사이의 token0 변화량

    공식: Δx = L * (√P_b - √P_a) / (√P_a * √P_b)

    Args:
        sqrt_ratio_a_x96: sqrtPriceX96 (순서 무관)
        sqrt_ratio_b_x96: sqrtPriceX96 (순서 무관)
        liquidity: 유동성 (uint128)
        round_up: True면 올림, False면 내림

    Returns:
        amount0 (token0 수량, 최소 단위)
    """
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    if sqrt_ratio_a_x96 <= 0:
        raise PriceMathError("get_amount0_delta: sqrt 가격은 양수여야 합니다")

    numerator1 = liquidity << RESOLUTION
    numerator2 = sqrt_ratio_b_x96 - sqrt_ratio_a_x96

    if round_up:
        return div_rounding_up(
            mul_div_rounding_up(numerator1, numerator2, sqrt_ratio_b_x96),
            sqrt_ratio_a_x96
        )
    else:
        return mul_div(numerator1, numerator2, sqrt_ratio_b_x96) // sqrt_ratio_a_x96


def get_amount1_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool = True
) -> int:
    """두 가격 사이의 token1 변화량

    공식: Δy = L * (√P_b - √P_a)
    """
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    if round_up:
        return mul_div_rounding_up(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)
    else:
        return mul_div(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)


def add_delta(x: int, y: int) -> int:
    """uint128 유동성에 int128 변화량을 더한다 (LiquidityMath.addDelta)

    Args:
        x: 현재 유동성 (uint128)
        y: 변화량 (int128), 틱 크로싱 시 liquidity_net

    Returns:
        새 유동성 (uint128)

    Raises:
        LiquidityUnderflowError: 결과가 0 미만 ("LS")
        LiquidityOverflowError: 결과가 uint128 초과 ("LA")
    """
    check_uint(x, 128, "liquidity")
    check_int(y, 128, "liquidity_delta")

    z = x + y
    if z < 0:
        raise LiquidityUnderflowError(f"유동성 언더플로우: {x} + ({y})")
    if z > UINT128_MAX:
        raise LiquidityOverflowError(f"유동성 오버플로우: {x} + {y}")
    return z
