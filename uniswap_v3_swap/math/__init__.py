"""
Math layer for Uniswap V3 swap simulation

온체인 수준 정밀도의 수학 함수들:
- fixed_point: 고정폭 정수 (checked / wrapping)
- full_math: mul_div 와 반올림
- tick_math: Tick ↔ sqrtPriceX96 변환
- tick_bitmap: 초기화된 틱 검색
- sqrt_price_math: 다음 sqrtPriceX96 계산
- liquidity_math: 수량 변화량, 유동성 변화 적용
- swap_math: 스왑 한 스텝
"""

from .tick_math import (
    get_tick_at_sqrt_ratio,
    get_sqrt_ratio_at_tick,
    get_tick_spacing_for_fee,
)
from .tick_bitmap import (
    flip_tick,
    next_initialized_tick_within_one_word,
)
from .sqrt_price_math import (
    sqrt_price_x96_to_price,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from .liquidity_math import (
    get_amount0_delta,
    get_amount1_delta,
    add_delta,
)
from .swap_math import (
    compute_swap_step,
    SwapStepResult,
)
