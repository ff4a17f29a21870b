"""
Swap Engine - 단일 스왑 시뮬레이션

UniswapV3Pool.swap() 의 가격 이동 루프를 오프체인에서 그대로 재현한다.
틱 상태, bitmap, 전역 수수료 누적값은 기록하지 않는 순수 함수이다.

References:
- Uniswap V3 Core: contracts/UniswapV3Pool.sol (swap)
- 백서 Section 6.2.3: Swapping Within a Single Tick / 6.3.1: Crossing Ticks

루프:
    1. 같은 워드 안의 다음 초기화된 틱 찾기
    2. [MIN_TICK, MAX_TICK] 으로 자르기
    3. 그 틱의 sqrt 가격 계산, 가격 한도를 넘으면 한도를 목표로
    4. compute_swap_step 으로 한 스텝 진행
    5. 남은 수량 / 계산된 수량 누적
    6. 틱 경계에 도달하면 크로싱 (liquidity_net 적용), 아니면 가격에서 틱 재계산
"""

import logging
from dataclasses import dataclass
from typing import List, Mapping

from .constants import (
    MIN_TICK,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MAX_SQRT_RATIO,
    FEE_DENOMINATOR,
)
from .data.types import Slot0, Tick, SwapResult
from .errors import (
    InvalidInputError,
    ArithmeticOverflowError,
    PriceLimitBelowMinError,
    PriceLimitAboveMaxError,
    PriceLimitAboveCurrentError,
    PriceLimitBelowCurrentError,
    TickMapInconsistencyError,
)
from .math.fixed_point import (
    check_int,
    check_uint,
    to_int256,
    checked_add_int256,
    checked_sub_int256,
    checked_add_uint256,
)
from .math.liquidity_math import add_delta
from .math.swap_math import compute_swap_step
from .math.tick_bitmap import next_initialized_tick_within_one_word
from .math.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

logger = logging.getLogger(__name__)


@dataclass
class SwapState:
    """스왑 전체에 걸친 상태 (한 번의 호출 동안만 존재)"""
    amount_specified_remaining: int  # int256, 부호는 호출 시점에 고정
    amount_calculated: int  # int256
    sqrt_price_x96: int
    tick: int
    liquidity: int


@dataclass
class StepComputations:
    """스텝마다 새로 만드는 계산값"""
    sqrt_price_start_x96: int = 0
    tick_next: int = 0
    initialized: bool = False
    sqrt_price_next_x96: int = 0
    amount_in: int = 0
    amount_out: int = 0
    fee_amount: int = 0


def swap(
    ticks: Mapping[int, Tick],
    tick_bitmap: Mapping[int, int],
    tick_spacing: int,
    zero_for_one: bool,
    amount_specified: int,
    sqrt_price_limit: int,
    slot0: Slot0,
    fee_pips: int
) -> SwapResult:
    """스왑 한 번의 결과 계산

    Args:
        ticks: {tick_idx: Tick} 읽기 전용
        tick_bitmap: {word_pos: uint256 word} 읽기 전용
        tick_spacing: 틱 간격
        zero_for_one: True면 token0 → token1 (가격 하락)
        amount_specified: 양수면 exact input, 음수면 exact output
        sqrt_price_limit: 가격 한도 (sqrtPriceX96)
        slot0: 스왑 직전 풀 상태
        fee_pips: 수수료 (1/1,000,000 단위, 예: 3000 = 0.3%)

    Returns:
        SwapResult

    Raises:
        PriceLimitError: 가격 한도가 범위 밖이거나 방향과 맞지 않는 경우
        InvalidInputError: tick_spacing <= 0, 입력이 고정폭 범위를 벗어난 경우
            (slot0.tick 은 int24), slot0.sqrt_price 가 틱 가격 범위 밖인 경우
        SwapError: 루프 도중 변환/bitmap/유동성 연산 오류 (부분 결과 없음)
        TickMapInconsistencyError: bitmap 에서 초기화된 틱이 ticks 에 없는 경우
    """
    if sqrt_price_limit <= MIN_SQRT_RATIO:
        raise PriceLimitBelowMinError(
            f"가격 한도가 MIN_SQRT_RATIO 이하입니다: {sqrt_price_limit}"
        )
    if sqrt_price_limit >= MAX_SQRT_RATIO:
        raise PriceLimitAboveMaxError(
            f"가격 한도가 MAX_SQRT_RATIO 이상입니다: {sqrt_price_limit}"
        )
    if zero_for_one:
        if sqrt_price_limit >= slot0.sqrt_price:
            raise PriceLimitAboveCurrentError(
                f"zero_for_one 스왑의 가격 한도는 현재 가격보다 낮아야 합니다: "
                f"{sqrt_price_limit} >= {slot0.sqrt_price}"
            )
    else:
        if sqrt_price_limit <= slot0.sqrt_price:
            raise PriceLimitBelowCurrentError(
                f"one_for_zero 스왑의 가격 한도는 현재 가격보다 높아야 합니다: "
                f"{sqrt_price_limit} <= {slot0.sqrt_price}"
            )

    _validate_inputs(tick_spacing, amount_specified, slot0, fee_pips)

    exact_input = amount_specified > 0

    state = SwapState(
        amount_specified_remaining=amount_specified,
        amount_calculated=0,
        sqrt_price_x96=slot0.sqrt_price,
        tick=_starting_tick(slot0),
        liquidity=slot0.liquidity,
    )
    ticks_crossed: List[int] = []

    while state.amount_specified_remaining != 0 and state.sqrt_price_x96 != sqrt_price_limit:
        step = StepComputations()
        step.sqrt_price_start_x96 = state.sqrt_price_x96

        step.tick_next, step.initialized = next_initialized_tick_within_one_word(
            tick_bitmap, state.tick, tick_spacing, zero_for_one
        )

        # bitmap 은 최소/최대 틱을 모르므로 여기서 자른다
        if step.tick_next < MIN_TICK:
            step.tick_next = MIN_TICK
        elif step.tick_next > MAX_TICK:
            step.tick_next = MAX_TICK

        step.sqrt_price_next_x96 = get_sqrt_ratio_at_tick(step.tick_next)

        if zero_for_one:
            hit_limit = step.sqrt_price_next_x96 < sqrt_price_limit
        else:
            hit_limit = step.sqrt_price_next_x96 > sqrt_price_limit
        target_price = sqrt_price_limit if hit_limit else step.sqrt_price_next_x96

        (
            state.sqrt_price_x96,
            step.amount_in,
            step.amount_out,
            step.fee_amount,
        ) = compute_swap_step(
            state.sqrt_price_x96,
            target_price,
            state.liquidity,
            state.amount_specified_remaining,
            fee_pips,
        )

        amount_in_with_fee = to_int256(checked_add_uint256(step.amount_in, step.fee_amount))
        if exact_input:
            state.amount_specified_remaining = checked_sub_int256(
                state.amount_specified_remaining, amount_in_with_fee
            )
            state.amount_calculated = checked_sub_int256(
                state.amount_calculated, to_int256(step.amount_out)
            )
        else:
            state.amount_specified_remaining = checked_add_int256(
                state.amount_specified_remaining, to_int256(step.amount_out)
            )
            state.amount_calculated = checked_add_int256(
                state.amount_calculated, amount_in_with_fee
            )

        logger.debug(
            "step tick_next=%d initialized=%s target=%d price=%d in=%d out=%d fee=%d",
            step.tick_next, step.initialized, target_price, state.sqrt_price_x96,
            step.amount_in, step.amount_out, step.fee_amount,
        )

        if state.sqrt_price_x96 == step.sqrt_price_next_x96:
            # 틱 경계 도달
            if step.initialized:
                tick = ticks.get(step.tick_next)
                if tick is None:
                    raise TickMapInconsistencyError(step.tick_next)
                liquidity_net = -tick.liquidity_net if zero_for_one else tick.liquidity_net
                state.liquidity = add_delta(state.liquidity, liquidity_net)
                ticks_crossed.append(step.tick_next)
                logger.debug(
                    "crossed tick=%d liquidity_net=%d liquidity=%d",
                    step.tick_next, liquidity_net, state.liquidity,
                )

            state.tick = step.tick_next - 1 if zero_for_one else step.tick_next
        elif state.sqrt_price_x96 != step.sqrt_price_start_x96:
            state.tick = get_tick_at_sqrt_ratio(state.sqrt_price_x96)

    if zero_for_one == exact_input:
        amount0_delta = checked_sub_int256(amount_specified, state.amount_specified_remaining)
        amount1_delta = state.amount_calculated
    else:
        amount0_delta = state.amount_calculated
        amount1_delta = checked_sub_int256(amount_specified, state.amount_specified_remaining)

    return SwapResult(
        amount0_delta=amount0_delta,
        amount1_delta=amount1_delta,
        sqrt_price_after=state.sqrt_price_x96,
        liquidity_after=state.liquidity,
        tick_after=state.tick,
        ticks_crossed=tuple(ticks_crossed),
    )


def _validate_inputs(tick_spacing: int, amount_specified: int, slot0: Slot0, fee_pips: int) -> None:
    """slot0.tick 은 온체인 저장 폭인 int24 로 검사한다"""
    if tick_spacing <= 0:
        raise InvalidInputError(f"tick_spacing 은 양수여야 합니다: {tick_spacing}")

    try:
        check_int(amount_specified, 256, "amount_specified")
        check_uint(slot0.sqrt_price, 160, "slot0.sqrt_price")
        check_uint(slot0.liquidity, 128, "slot0.liquidity")
        check_int(slot0.tick, 24, "slot0.tick")
    except ArithmeticOverflowError as exc:
        raise InvalidInputError(str(exc)) from exc

    if not MIN_SQRT_RATIO <= slot0.sqrt_price < MAX_SQRT_RATIO:
        raise InvalidInputError(
            f"slot0.sqrt_price 가 [MIN_SQRT_RATIO, MAX_SQRT_RATIO) 범위를 벗어났습니다: {slot0.sqrt_price}"
        )

    if fee_pips < 0 or fee_pips >= FEE_DENOMINATOR:
        raise InvalidInputError(f"fee_pips 는 0 이상 {FEE_DENOMINATOR} 미만이어야 합니다: {fee_pips}")


def _starting_tick(slot0: Slot0) -> int:
    """스냅샷의 틱이 가격과 맞으면 그대로, 아니면 가격에서 다시 계산

    아래 방향 크로싱 직후에는 가격이 tick + 1 경계에 정확히 놓인다.
    """
    price_tick = get_tick_at_sqrt_ratio(slot0.sqrt_price)
    if price_tick == slot0.tick:
        return slot0.tick
    if price_tick == slot0.tick + 1 and get_sqrt_ratio_at_tick(price_tick) == slot0.sqrt_price:
        return slot0.tick

    logger.warning(
        "slot0.tick=%d 이 sqrt_price=%d 와 맞지 않아 틱 %d 에서 시작합니다",
        slot0.tick, slot0.sqrt_price, price_tick,
    )
    return price_tick
