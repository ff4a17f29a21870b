"""
Tick Bitmap - 초기화된 틱 검색

압축된 틱(tick // tick_spacing) 하나당 1비트. 256개 비트가 한 워드.
스왑은 한 번에 한 워드 안에서만 다음 초기화된 틱을 찾는다.

References:
- Uniswap V3 Core: contracts/libraries/TickBitmap.sol
- Uniswap V3 Core: contracts/libraries/BitMath.sol
"""

from typing import Dict, Mapping, Tuple

from ..constants import UINT256_MAX
from ..errors import InvalidTickSpacingError, TickNotSpacedError, BitmapWordError


def position(compressed_tick: int) -> Tuple[int, int]:
    """압축된 틱의 (word_pos, bit_pos)

    Python의 >> 와 & 는 음수에서도 int16(tick >> 8), uint8(tick % 256)
    캐스팅과 같은 결과를 낸다.
    """
    return compressed_tick >> 8, compressed_tick & 0xFF


def most_significant_bit(x: int) -> int:
    if x <= 0:
        raise BitmapWordError("most_significant_bit: x 는 양수여야 합니다")
    return x.bit_length() - 1


def least_significant_bit(x: int) -> int:
    if x <= 0:
        raise BitmapWordError("least_significant_bit: x 는 양수여야 합니다")
    return (x & -x).bit_length() - 1


def flip_tick(bitmap: Dict[int, int], tick: int, tick_spacing: int) -> None:
    """틱의 초기화 비트를 뒤집는다

    풀 관리 로직(민트/번)에서 쓰는 빌더 함수. 스왑 엔진은 호출하지 않는다.

    Args:
        bitmap: {word_pos: uint256 word} (호출자 소유, 제자리 수정)
        tick: 뒤집을 틱
        tick_spacing: 틱 간격
    """
    _check_spacing(tick_spacing)
    if tick % tick_spacing != 0:
        raise TickNotSpacedError(f"틱 {tick} 이 간격 {tick_spacing} 의 배수가 아닙니다")

    word_pos, bit_pos = position(tick // tick_spacing)
    word = bitmap.get(word_pos, 0) ^ (1 << bit_pos)
    if word:
        bitmap[word_pos] = word
    else:
        bitmap.pop(word_pos, None)


def next_initialized_tick_within_one_word(
    bitmap: Mapping[int, int],
    tick: int,
    tick_spacing: int,
    lte: bool
) -> Tuple[int, bool]:
    """같은 워드 안에서 다음 초기화된 틱 찾기

    lte=True 이면 현재 틱 포함 왼쪽(작은 쪽), False 이면 현재 틱 제외 오른쪽.
    워드 안에 초기화된 틱이 없으면 워드 경계 틱을 initialized=False 로 반환한다.

    Args:
        bitmap: {word_pos: uint256 word} 읽기 전용
        tick: 시작 틱
        tick_spacing: 틱 간격
        lte: 검색 방향 (zero_for_one 스왑이면 True)

    Returns:
        (next_tick, initialized)

    Raises:
        InvalidTickSpacingError: tick_spacing <= 0
        BitmapWordError: 워드가 uint256 범위를 벗어난 경우
    """
    _check_spacing(tick_spacing)

    # Solidity는 0 방향으로 자르고 음수면 하나 빼므로 결과적으로 floor
    compressed = tick // tick_spacing

    if lte:
        word_pos, bit_pos = position(compressed)
        # bit_pos 포함 오른쪽 비트 전부
        mask = (1 << bit_pos) - 1 + (1 << bit_pos)
        masked = _word(bitmap, word_pos) & mask

        initialized = masked != 0
        if initialized:
            next_tick = (compressed - (bit_pos - most_significant_bit(masked))) * tick_spacing
        else:
            next_tick = (compressed - bit_pos) * tick_spacing
    else:
        # 현재 틱은 이미 지나왔으므로 다음 압축 틱부터
        word_pos, bit_pos = position(compressed + 1)
        # bit_pos 포함 왼쪽 비트 전부
        mask = ~((1 << bit_pos) - 1) & UINT256_MAX
        masked = _word(bitmap, word_pos) & mask

        initialized = masked != 0
        if initialized:
            next_tick = (compressed + 1 + (least_significant_bit(masked) - bit_pos)) * tick_spacing
        else:
            next_tick = (compressed + 1 + (0xFF - bit_pos)) * tick_spacing

    return next_tick, initialized


def _check_spacing(tick_spacing: int) -> None:
    if tick_spacing <= 0:
        raise InvalidTickSpacingError(f"tick_spacing 은 양수여야 합니다: {tick_spacing}")


def _word(bitmap: Mapping[int, int], word_pos: int) -> int:
    word = bitmap.get(word_pos, 0)
    if word < 0 or word > UINT256_MAX:
        raise BitmapWordError(f"워드 {word_pos} 가 uint256 범위를 벗어났습니다: {word}")
    return word
