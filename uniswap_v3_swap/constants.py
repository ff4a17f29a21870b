"""
Uniswap V3 상수 정의

온체인 수준 정밀도를 위한 상수들:
- Q96: sqrt price 인코딩에 사용 (2^96)
- Q128: fee growth 인코딩에 사용 (2^128)
- MIN_TICK / MAX_TICK, MIN_SQRT_RATIO / MAX_SQRT_RATIO: 유효 범위
- 고정폭 정수 경계 (uint256, uint160, uint128, int256, int128)
- TICK_SPACINGS: 수수료 티어별 틱 간격
"""

from typing import Dict

# Fixed-point 인코딩 상수
Q96: int = 2 ** 96
Q128: int = 2 ** 128
RESOLUTION: int = 96

# 틱 범위 상수 (TickMath.sol)
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# get_sqrt_ratio_at_tick(MIN_TICK), get_sqrt_ratio_at_tick(MAX_TICK)
MIN_SQRT_RATIO: int = 4295128739
MAX_SQRT_RATIO: int = 1461446703485210103287273052203988822378723970342

# 고정폭 정수 경계
UINT256_MAX: int = 2 ** 256 - 1
UINT160_MAX: int = 2 ** 160 - 1
UINT128_MAX: int = 2 ** 128 - 1
INT256_MIN: int = -(2 ** 255)
INT256_MAX: int = 2 ** 255 - 1
INT128_MIN: int = -(2 ** 127)

# 수수료 단위: 1 pip = 1/1,000,000
FEE_DENOMINATOR: int = 1_000_000

# 수수료 티어(pips)별 틱 간격
# 500 = 0.05%, 3000 = 0.30%, 10000 = 1.00%
TICK_SPACINGS: Dict[int, int] = {
    100: 1,
    500: 10,
    3000: 60,
    10000: 200,
}
