"""
Swap Math - 스왑 한 스텝 계산

현재 가격에서 목표 가격(다음 틱 또는 가격 한도)까지, 남은 수량이
허용하는 만큼만 가격을 움직이고 입력/출력/수수료를 계산한다.

References:
- Uniswap V3 Core: contracts/libraries/SwapMath.sol

amount_remaining 부호:
    양수: exact input (남은 입력량)
    음수: exact output (남은 출력량의 음수)
"""

from typing import NamedTuple

from ..constants import FEE_DENOMINATOR
from .full_math import mul_div, mul_div_rounding_up
from .liquidity_math import get_amount0_delta, get_amount1_delta
from .sqrt_price_math import get_next_sqrt_price_from_input, get_next_sqrt_price_from_output


class SwapStepResult(NamedTuple):
    """스왑 스텝 결과"""
    sqrt_ratio_next_x96: int  # 스텝 후 가격
    amount_in: int  # 수수료 제외 입력량
    amount_out: int  # 출력량
    fee_amount: int  # 수수료


def compute_swap_step(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_target_x96: int,
    liquidity: int,
    amount_remaining: int,
    fee_pips: int
) -> SwapStepResult:
    """스왑 한 스텝 계산

    방향은 두 가격의 대소로 정해진다 (current >= target 이면 zero_for_one).

    Args:
        sqrt_ratio_current_x96: 현재 sqrtPriceX96
        sqrt_ratio_target_x96: 이번 스텝에서 넘을 수 없는 가격
        liquidity: 현재 활성 유동성
        amount_remaining: 남은 수량 (int256, 부호로 exact in/out 구분)
        fee_pips: 수수료 (1/1,000,000 단위)

    Returns:
        SwapStepResult(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)
    """
    zero_for_one = sqrt_ratio_current_x96 >= sqrt_ratio_target_x96
    exact_in = amount_remaining >= 0

    amount_in = 0
    amount_out = 0

    if exact_in:
        amount_remaining_less_fee = mul_div(amount_remaining, FEE_DENOMINATOR - fee_pips, FEE_DENOMINATOR)
        if zero_for_one:
            amount_in = get_amount0_delta(sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, True)
        else:
            amount_in = get_amount1_delta(sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, True)

        if amount_remaining_less_fee >= amount_in:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
        else:
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_input(
                sqrt_ratio_current_x96, liquidity, amount_remaining_less_fee, zero_for_one
            )
    else:
        if zero_for_one:
            amount_out = get_amount1_delta(sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, False)
        else:
            amount_out = get_amount0_delta(sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, False)

        if -amount_remaining >= amount_out:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
        else:
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_output(
                sqrt_ratio_current_x96, liquidity, -amount_remaining, zero_for_one
            )

    reached_target = sqrt_ratio_target_x96 == sqrt_ratio_next_x96

    # 목표 가격에 도달한 쪽의 값은 위에서 이미 계산됨
    if zero_for_one:
        if not (reached_target and exact_in):
            amount_in = get_amount0_delta(sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, True)
        if not (reached_target and not exact_in):
            amount_out = get_amount1_delta(sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, False)
    else:
        if not (reached_target and exact_in):
            amount_in = get_amount1_delta(sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, True)
        if not (reached_target and not exact_in):
            amount_out = get_amount0_delta(sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, False)

    # 출력량은 요청량을 넘지 않는다
    if not exact_in and amount_out > -amount_remaining:
        amount_out = -amount_remaining

    if exact_in and sqrt_ratio_next_x96 != sqrt_ratio_target_x96:
        # 목표에 못 미쳤으면 남은 입력 전부가 수수료
        fee_amount = amount_remaining - amount_in
    else:
        fee_amount = mul_div_rounding_up(amount_in, fee_pips, FEE_DENOMINATOR - fee_pips)

    return SwapStepResult(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)
