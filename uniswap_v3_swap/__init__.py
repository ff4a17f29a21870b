"""
Uniswap V3 Swap Simulator

온체인 수준 정밀도로 Uniswap V3 단일 스왑의 결과를 계산하는 라이브러리.
틱 경계를 따라 가격을 움직이며 토큰 변화량, 최종 가격/틱/유동성을 구한다.
"""

__version__ = "0.1.0"
__author__ = "Zekiya"

from .constants import Q96, Q128, MIN_TICK, MAX_TICK, MIN_SQRT_RATIO, MAX_SQRT_RATIO
from .data.types import Slot0, Tick, SwapResult
from .errors import SwapError, TickMapInconsistencyError
from .swap import swap
