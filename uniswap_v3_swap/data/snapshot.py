"""
Pool Snapshot - 스왑 입력 로더

YAML 파일(또는 dict)에서 스왑에 필요한 풀 상태를 읽어온다:
slot0, 틱 상태, tick bitmap, tick spacing, fee.

형식:
    fee: 3000
    tickSpacing: 60          # 생략하면 fee 티어에서 결정
    slot0:
      sqrtPriceX96: "79228162514264337593543950336"
      liquidity: "1000000000000000000"
      tick: 0
    ticks:
      - tickIdx: -60
        liquidityGross: "1000000000000000000"
        liquidityNet: "1000000000000000000"

bitmap 은 초기화된 틱으로부터 flip_tick 으로 만든다.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

from ..errors import InvalidInputError
from ..math.tick_bitmap import flip_tick
from ..math.tick_math import get_tick_spacing_for_fee
from .types import Slot0, Tick


@dataclass
class PoolSnapshot:
    """스왑 한 번에 필요한 풀 상태"""
    slot0: Slot0
    tick_spacing: int
    fee: int
    ticks: Dict[int, Tick] = field(default_factory=dict)
    tick_bitmap: Dict[int, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict, default_fee: Optional[int] = None) -> "PoolSnapshot":
        if "slot0" not in data:
            raise InvalidInputError("스냅샷에 slot0 이 없습니다")

        fee = int(data.get("fee", data.get("feeTier", default_fee if default_fee is not None else 0)))
        if "tickSpacing" in data:
            tick_spacing = int(data["tickSpacing"])
        else:
            tick_spacing = get_tick_spacing_for_fee(fee)

        ticks: Dict[int, Tick] = {}
        tick_bitmap: Dict[int, int] = {}
        for tick_data in data.get("ticks") or []:
            tick_idx = int(tick_data["tickIdx"])
            if tick_idx in ticks:
                raise InvalidInputError(f"중복된 틱: {tick_idx}")
            tick = Tick.from_dict(tick_data)
            if not tick.is_consistent():
                raise InvalidInputError(
                    f"틱 {tick_idx}: initialized 와 liquidityGross 가 맞지 않습니다"
                )
            ticks[tick_idx] = tick
            if tick.initialized:
                flip_tick(tick_bitmap, tick_idx, tick_spacing)

        return cls(
            slot0=Slot0.from_dict(data["slot0"]),
            tick_spacing=tick_spacing,
            fee=fee,
            ticks=ticks,
            tick_bitmap=tick_bitmap,
        )


def load_snapshot(path: Union[str, Path], default_fee: Optional[int] = None) -> PoolSnapshot:
    """YAML 스냅샷 파일 로드

    Args:
        path: YAML 파일 경로
        default_fee: 파일에 fee 가 없을 때 사용할 수수료 티어

    Returns:
        PoolSnapshot
    """
    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise InvalidInputError(f"스냅샷 형식이 올바르지 않습니다: {path}")

    return PoolSnapshot.from_dict(data, default_fee=default_fee)
