"""
Sqrt Price Math - sqrtPriceX96 관련 계산

Uniswap V3의 가격은 sqrtPriceX96 형식으로 저장됩니다.
sqrtPriceX96 = sqrt(price) * 2^96

스왑 한 스텝에서 입력/출력 양이 주어졌을 때 다음 가격을 계산한다.
반올림 방향은 항상 풀에 유리한 쪽이다.

References:
- Uniswap V3 Core: contracts/libraries/SqrtPriceMath.sol
"""

from ..constants import Q96, RESOLUTION, UINT160_MAX, UINT256_MAX
from ..errors import PriceMathError
from .fixed_point import check_uint
from .full_math import mul_div, mul_div_rounding_up, div_rounding_up


def sqrt_price_x96_to_price(
    sqrt_price_x96: int,
    decimal0: int = 18,
    decimal1: int = 18
) -> float:
    """sqrtPriceX96을 human-readable 가격으로 변환 (표시용)

    가격 = (sqrtPriceX96 / 2^96)^2 / 10^(decimal1 - decimal0)

    스왑 계산 경로에서는 사용하지 않는다.
    """
    sqrt_price = sqrt_price_x96 / Q96
    price_raw = sqrt_price ** 2

    decimal_adjustment = 10 ** (decimal1 - decimal0)
    return price_raw / decimal_adjustment


def get_next_sqrt_price_from_amount0_rounding_up(
    sqrt_price_x96: int,
    liquidity: int,
    amount: int,
    add: bool
) -> int:
    """amount0 변화에 따른 다음 sqrtPriceX96 계산 (올림)

    공식: √P' = L * √P / (L ± Δx * √P)

    Args:
        sqrt_price_x96: 현재 sqrtPriceX96
        liquidity: 유동성
        amount: amount0 변화량
        add: True면 추가, False면 제거

    Returns:
        새로운 sqrtPriceX96
    """
    if amount == 0:
        return sqrt_price_x96

    numerator1 = liquidity << RESOLUTION
    product = amount * sqrt_price_x96

    if add:
        # product, denominator 가 uint256 안이면 정밀한 공식
        if product <= UINT256_MAX:
            denominator = numerator1 + product
            if denominator <= UINT256_MAX:
                return mul_div_rounding_up(numerator1, sqrt_price_x96, denominator)

        return div_rounding_up(numerator1, check_uint(numerator1 // sqrt_price_x96 + amount, 256))
    else:
        # 제거할 token0 이 풀 잔량 이상이면 불가능
        if product > UINT256_MAX or numerator1 <= product:
            raise PriceMathError("get_next_sqrt_price_from_amount0: 출력량이 너무 큽니다")
        denominator = numerator1 - product
        return check_uint(mul_div_rounding_up(numerator1, sqrt_price_x96, denominator), 160, "sqrt_price")


def get_next_sqrt_price_from_amount1_rounding_down(
    sqrt_price_x96: int,
    liquidity: int,
    amount: int,
    add: bool
) -> int:
    """amount1 변화에 따른 다음 sqrtPriceX96 계산 (내림)

    공식: √P' = √P ± Δy / L
    """
    if add:
        if amount <= UINT160_MAX:
            quotient = (amount << RESOLUTION) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        return check_uint(sqrt_price_x96 + quotient, 160, "sqrt_price")
    else:
        if amount <= UINT160_MAX:
            quotient = div_rounding_up(amount << RESOLUTION, liquidity)
        else:
            quotient = mul_div_rounding_up(amount, Q96, liquidity)
        if sqrt_price_x96 <= quotient:
            raise PriceMathError("get_next_sqrt_price_from_amount1: 출력량이 너무 큽니다")
        return sqrt_price_x96 - quotient


def get_next_sqrt_price_from_input(
    sqrt_price_x96: int,
    liquidity: int,
    amount_in: int,
    zero_for_one: bool
) -> int:
    """입력량 amount_in 을 넣었을 때의 다음 가격

    현재 가격을 넘어가지 않도록 반올림한다.
    """
    if sqrt_price_x96 <= 0:
        raise PriceMathError("sqrt_price_x96 은 양수여야 합니다")
    if liquidity <= 0:
        raise PriceMathError("liquidity 는 양수여야 합니다")

    if zero_for_one:
        return get_next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96, liquidity, amount_in, True)
    return get_next_sqrt_price_from_amount1_rounding_down(sqrt_price_x96, liquidity, amount_in, True)


def get_next_sqrt_price_from_output(
    sqrt_price_x96: int,
    liquidity: int,
    amount_out: int,
    zero_for_one: bool
) -> int:
    """출력량 amount_out 을 받았을 때의 다음 가격

    목표 가격을 넘도록 반올림한다.
    """
    if sqrt_price_x96 <= 0:
        raise PriceMathError("sqrt_price_x96 은 양수여야 합니다")
    if liquidity <= 0:
        raise PriceMathError("liquidity 는 양수여야 합니다")

    if zero_for_one:
        return get_next_sqrt_price_from_amount1_rounding_down(sqrt_price_x96, liquidity, amount_out, False)
    return get_next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96, liquidity, amount_out, False)
