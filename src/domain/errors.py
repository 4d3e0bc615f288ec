"""
Error definitions for baseline comparison.

규칙:
- 조용한 실패 금지 → 호출 계약 위반은 즉시 명시적 실패
- 진단(diff 리포트) 경로는 예외를 던지지 않음 → compare 쪽에서 흡수
"""

from typing import Any


class BaselineCompareError(Exception):
    """
    비교 유틸리티의 기본 에러.

    Usage:
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_NULL, param="one")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    @property
    def param(self) -> str | None:
        """문제가 된 인자 이름 (있으면)."""
        return self.context.get("param")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class InvalidArgumentError(BaselineCompareError, ValueError):
    """
    호출 계약 위반.

    - None 스트림
    - 시작 위치가 0이 아닌 스트림
    """


class StreamNotSupportedError(BaselineCompareError):
    """스트림이 읽기/쓰기를 지원하지 않음."""


class TruncatedStreamError(BaselineCompareError):
    """요청한 길이만큼 읽기 전에 스트림이 끝남."""


class NormalizationConflictError(BaselineCompareError):
    """
    같은 원본 텍스트에 서로 다른 치환 결과가 등록되려 할 때.

    기존 매핑을 덮어쓰면 일관성 없는 치환이 가려지므로 즉시 실패.
    """


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Arguments ===
    ARGUMENT_NULL = "ARGUMENT_NULL"
    ARGUMENT_RANGE = "ARGUMENT_RANGE"
    STREAM_POSITION = "STREAM_POSITION"

    # === Streams ===
    STREAM_NOT_READABLE = "STREAM_NOT_READABLE"
    STREAM_NOT_WRITABLE = "STREAM_NOT_WRITABLE"
    STREAM_NOT_SEEKABLE = "STREAM_NOT_SEEKABLE"
    STREAM_TRUNCATED = "STREAM_TRUNCATED"

    # === Normalization ===
    NORMALIZATION_CONFLICT = "NORMALIZATION_CONFLICT"
