"""
스왑 평가 에러 정의

입력 오류는 라이브러리 전반의 관례대로 ValueError 계열로 발생시킨다.
SwapError 하위 에러는 "이 상태에서는 스왑을 평가할 수 없음"을 의미하며,
같은 입력으로 재시도해도 결과는 같다.

code 속성은 컨트랙트 revert 문자열에 대응한다.

TickMapInconsistencyError는 호출자가 넘긴 bitmap과 tick map이 서로
어긋난 경우로, 복구 가능한 입력 오류가 아니라 불변식 위반이다.
"""

from typing import Optional


class SwapError(ValueError):
    """스왑 평가 실패 (복구 불가, 재시도 무의미)"""

    code: str = "SWAP"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class InvalidInputError(SwapError):
    """고정폭 범위를 벗어난 입력"""

    code = "INPUT"


# 가격 한도 검증 ---------------------------------------------------------

class PriceLimitError(SwapError):
    code = "SPL"


class PriceLimitBelowMinError(PriceLimitError):
    """sqrt_price_limit <= MIN_SQRT_RATIO"""

    code = "SPL_MIN"


class PriceLimitAboveMaxError(PriceLimitError):
    """sqrt_price_limit >= MAX_SQRT_RATIO"""

    code = "SPU_MAX"


class PriceLimitAboveCurrentError(PriceLimitError):
    """zero_for_one 인데 sqrt_price_limit >= 현재 가격"""

    code = "SPL_CUR"


class PriceLimitBelowCurrentError(PriceLimitError):
    """one_for_zero 인데 sqrt_price_limit <= 현재 가격"""

    code = "SPU_CUR"


# Tick ↔ Price 변환 ------------------------------------------------------

class TickOutOfRangeError(SwapError):
    code = "T"


class SqrtPriceOutOfRangeError(SwapError):
    code = "R"


# Tick bitmap ------------------------------------------------------------

class TickBitmapError(SwapError):
    code = "BITMAP"


class InvalidTickSpacingError(TickBitmapError):
    code = "TS"


class TickNotSpacedError(TickBitmapError):
    """틱이 tick_spacing의 배수가 아님"""

    code = "TNS"


class BitmapWordError(TickBitmapError):
    """bitmap 워드가 uint256 범위를 벗어남"""

    code = "WORD"


# 고정소수점 연산 ----------------------------------------------------------

class MathError(SwapError):
    code = "MATH"


class ArithmeticOverflowError(MathError, OverflowError):
    code = "OF"


class LiquidityOverflowError(MathError):
    code = "LA"


class LiquidityUnderflowError(MathError):
    code = "LS"


class PriceMathError(MathError):
    """SqrtPriceMath require 위반 (유동성 0, 출력량 초과 등)"""

    code = "PM"


# 불변식 위반 -------------------------------------------------------------

class TickMapInconsistencyError(RuntimeError):
    """bitmap이 초기화됐다고 보고한 틱이 tick map에 없음"""

    def __init__(self, tick: int):
        super().__init__(
            f"틱 {tick} 은 bitmap 에서 초기화되어 있지만 tick map 에 없습니다"
        )
        self.tick = tick
