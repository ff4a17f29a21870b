"""
Data layer for Uniswap V3 swap simulation

스왑 입력/출력 타입과 YAML 스냅샷 로더
"""

from .types import Slot0, Tick, SwapResult
from .snapshot import PoolSnapshot, load_snapshot
