"""
Swap Math 테스트

compute_swap_step 의 온체인 벡터와 스텝 불변식을 검증합니다.
"""

from math import isqrt

import pytest

from ..math.swap_math import compute_swap_step
from ..math.sqrt_price_math import (
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from ..constants import Q96
from ..errors import PriceMathError


def encode_price_sqrt(reserve1: int, reserve0: int) -> int:
    """floor(sqrt(reserve1 / reserve0) * 2^96)"""
    return isqrt(reserve1 * 2 ** 192 // reserve0)


class TestComputeSwapStep:
    """compute_swap_step 테스트"""

    def test_exact_amount_in_capped_at_price_target_one_for_zero(self):
        """목표 가격에서 멈추는 exact input (1 -> 0)"""
        price = encode_price_sqrt(1, 1)
        price_target = encode_price_sqrt(101, 100)
        liquidity = 2 * 10**18
        amount = 10**18
        fee = 600

        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
            price, price_target, liquidity, amount, fee
        )

        assert amount_in == 9975124224178055
        assert fee_amount == 5988667735148
        assert amount_out == 9925619580021728
        assert amount_in + fee_amount < amount
        assert sqrt_q == price_target

    def test_exact_amount_out_capped_at_price_target_one_for_zero(self):
        """목표 가격에서 멈추는 exact output (1 -> 0)"""
        price = encode_price_sqrt(1, 1)
        price_target = encode_price_sqrt(101, 100)
        liquidity = 2 * 10**18
        amount = -(10**18)
        fee = 600

        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
            price, price_target, liquidity, amount, fee
        )

        assert amount_in == 9975124224178055
        assert fee_amount == 5988667735148
        assert amount_out == 9925619580021728
        assert amount_out < -amount
        assert sqrt_q == price_target

    def test_exact_amount_in_fully_spent(self):
        """입력이 전부 쓰이면 목표 가격에 못 미침"""
        price = encode_price_sqrt(1, 1)
        price_target = encode_price_sqrt(1000, 100)
        liquidity = 2 * 10**18
        amount = 10**18
        fee = 600

        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
            price, price_target, liquidity, amount, fee
        )

        assert amount_in + fee_amount == amount
        assert sqrt_q < price_target
        assert sqrt_q == get_next_sqrt_price_from_input(price, liquidity, amount * (10**6 - fee) // 10**6, False)

    def test_amount_out_is_capped_at_desired_amount_out(self):
        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
            417332158212080721273783715441582,
            1452870262520218020823638996,
            159344665391607089467575320103,
            -1,
            1,
        )
        assert amount_in == 1
        assert fee_amount == 1
        assert amount_out == 1
        assert sqrt_q == 417332158212080721273783715441581

    def test_entire_input_amount_taken_as_fee(self):
        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
            2413,
            79887613182836312,
            1985041575832132834610021537970,
            10,
            1872,
        )
        assert amount_in == 0
        assert fee_amount == 10
        assert amount_out == 0
        assert sqrt_q == 2413

    def test_zero_liquidity_moves_to_target(self):
        """유동성 0이면 수량 없이 목표 가격으로 이동"""
        target = encode_price_sqrt(1, 2)
        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(Q96, target, 0, 1000, 3000)
        assert sqrt_q == target
        assert (amount_in, amount_out, fee_amount) == (0, 0, 0)

    def test_fee_zero_partial_step(self):
        """수수료 0 이어도 목표에 못 미치면 반올림 잔여분은 수수료로 잡힘"""
        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
            Q96, encode_price_sqrt(1, 2), 10**18, 10**15, 0
        )
        assert amount_in + fee_amount == 10**15
        assert fee_amount <= 1
        assert amount_out > 0

    @pytest.mark.parametrize("amount_remaining", [1, 10**6, 10**15, -1, -(10**6), -(10**15)])
    @pytest.mark.parametrize("zero_for_one", [True, False])
    def test_step_invariants(self, amount_remaining, zero_for_one):
        """가격은 목표 방향으로만 움직이고 요청량을 넘지 않음"""
        price = encode_price_sqrt(3, 2)
        target = encode_price_sqrt(1, 1) if zero_for_one else encode_price_sqrt(2, 1)
        liquidity = 10**18
        fee = 3000

        sqrt_q, amount_in, amount_out, fee_amount = compute_swap_step(
            price, target, liquidity, amount_remaining, fee
        )

        if zero_for_one:
            assert target <= sqrt_q <= price
        else:
            assert price <= sqrt_q <= target

        if amount_remaining > 0:
            assert amount_in + fee_amount <= amount_remaining
        else:
            assert amount_out <= -amount_remaining


class TestNextSqrtPrice:
    """get_next_sqrt_price_from_input / output 테스트"""

    def test_zero_liquidity_fails(self):
        with pytest.raises(PriceMathError):
            get_next_sqrt_price_from_input(Q96, 0, 10**17, True)
        with pytest.raises(PriceMathError):
            get_next_sqrt_price_from_output(Q96, 0, 10**17, True)

    def test_zero_amount_returns_input_price(self):
        assert get_next_sqrt_price_from_input(Q96, 10**17, 0, True) == Q96
        assert get_next_sqrt_price_from_input(Q96, 10**17, 0, False) == Q96

    def test_input_amount_of_token1(self):
        """token1 0.1 을 넣으면 √P 가 0.1 * 2^96 / L 만큼 증가"""
        price = get_next_sqrt_price_from_input(Q96, 10**18, 10**17, False)
        assert price == Q96 + Q96 // 10

    def test_output_more_than_reserves_fails(self):
        """토큰 잔량보다 많이 빼면 실패"""
        with pytest.raises(PriceMathError):
            get_next_sqrt_price_from_output(Q96, 1, 4, False)

    def test_output_direction(self):
        """출력 후 가격은 방향에 맞게 움직임"""
        assert get_next_sqrt_price_from_output(Q96, 10**18, 10**15, True) < Q96
        assert get_next_sqrt_price_from_output(Q96, 10**18, 10**15, False) > Q96
