"""
Uniswap V3 스왑 데이터 타입 정의

풀 스냅샷(Slot0), 틱 상태(Tick), 스왑 결과(SwapResult)를 Python dataclass로 정의.
모든 숫자 필드는 온체인 정밀도를 위해 int 타입 사용.
from_dict 는 Subgraph/온체인 조회 결과의 camelCase 키를 받는다.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Slot0:
    """스왑 직전 풀 상태 (스왑 동안 불변)

    - sqrtPrice: 현재 √가격 (Q64.96 인코딩)
    - liquidity: 현재 가격에서 활성화된 총 유동성
    - tick: 현재 틱 인덱스
    """
    sqrt_price: int  # sqrtPriceX96 (uint160)
    liquidity: int  # uint128
    tick: int  # int24

    @classmethod
    def from_dict(cls, data: dict) -> "Slot0":
        return cls(
            sqrt_price=int(data.get("sqrtPrice", data.get("sqrtPriceX96", 0))),
            liquidity=int(data.get("liquidity", 0)),
            tick=int(data["tick"]),
        )


@dataclass
class Tick:
    """Tick-Indexed State (Section 6.3, Table 2)

    - liquidityGross: 해당 틱을 경계로 하는 총 유동성
    - liquidityNet: 왼쪽→오른쪽으로 크로싱할 때 더해지는 유동성 (ΔL),
      오른쪽→왼쪽이면 부호 반대
    - feeGrowthOutside0X128 / 1X128: 틱 바깥쪽 누적수수료 (현재 틱 기준 상대값)
    - tickCumulativeOutside, secondsPerLiquidityOutsideX128, secondsOutside:
      오라클 누적값 (상대값)
    - initialized: liquidityGross != 0 과 동치
    """
    liquidity_gross: int = 0  # uint128
    liquidity_net: int = 0  # int128
    fee_growth_outside_0_x128: int = 0  # f_o,0
    fee_growth_outside_1_x128: int = 0  # f_o,1
    tick_cumulative_outside: int = 0
    seconds_per_liquidity_outside_x128: int = 0
    seconds_outside: int = 0  # uint32
    initialized: bool = False

    def is_consistent(self) -> bool:
        """initialized ⇔ liquidity_gross != 0"""
        return self.initialized == (self.liquidity_gross != 0)

    @classmethod
    def from_dict(cls, data: dict) -> "Tick":
        liquidity_gross = int(data.get("liquidityGross", 0))
        return cls(
            liquidity_gross=liquidity_gross,
            liquidity_net=int(data.get("liquidityNet", 0)),
            fee_growth_outside_0_x128=int(data.get("feeGrowthOutside0X128", 0)),
            fee_growth_outside_1_x128=int(data.get("feeGrowthOutside1X128", 0)),
            tick_cumulative_outside=int(data.get("tickCumulativeOutside", 0)),
            seconds_per_liquidity_outside_x128=int(data.get("secondsPerLiquidityOutsideX128", 0)),
            seconds_outside=int(data.get("secondsOutside", 0)),
            initialized=bool(data.get("initialized", liquidity_gross != 0)),
        )


@dataclass(frozen=True)
class SwapResult:
    """스왑 결과

    amount0_delta / amount1_delta: 양수는 풀이 받을 양, 음수는 스왑 요청자가 받을 양.
    ticks_crossed: 크로싱한 초기화된 틱 (크로싱 순서). 틱 상태 write-back 은
    호출자 책임이므로 어떤 틱을 건넜는지 알려준다.
    """
    amount0_delta: int  # int256
    amount1_delta: int  # int256
    sqrt_price_after: int
    liquidity_after: int
    tick_after: int
    ticks_crossed: Tuple[int, ...] = ()

    def to_dict(self) -> dict:
        return {
            "amount0Delta": str(self.amount0_delta),
            "amount1Delta": str(self.amount1_delta),
            "sqrtPriceX96After": str(self.sqrt_price_after),
            "liquidityAfter": str(self.liquidity_after),
            "tickAfter": self.tick_after,
            "ticksCrossed": list(self.ticks_crossed),
        }

