"""
스트림 복사 헬퍼: bytes ↔ stream, stream → stream

규칙:
- None / 읽기·쓰기 불가 스트림 → 즉시 명시적 실패
- consume_stream_to_bytes 는 입력 스트림의 소유권을 가져가서 항상 닫음
- 요청한 길이보다 짧게 끝나는 입력 → TruncatedStreamError (무한 루프 금지)
"""

import io
from typing import BinaryIO

from src.domain.constants import STREAM_CHUNK_SIZE
from src.domain.errors import (
    ErrorCodes,
    InvalidArgumentError,
    StreamNotSupportedError,
    TruncatedStreamError,
)

# =============================================================================
# Argument checks
# =============================================================================


def require_not_none(value: object, param: str) -> None:
    """None 인자 거부."""
    if value is None:
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_NULL, param=param)


def require_readable(stream: BinaryIO, param: str) -> None:
    """읽기 가능한 열린 스트림인지 확인."""
    require_not_none(stream, param)
    if stream.closed or not stream.readable():
        raise StreamNotSupportedError(
            ErrorCodes.STREAM_NOT_READABLE,
            param=param,
            reason="Can't read from stream",
        )


def require_writable(stream: BinaryIO, param: str) -> None:
    """쓰기 가능한 열린 스트림인지 확인."""
    require_not_none(stream, param)
    if stream.closed or not stream.writable():
        raise StreamNotSupportedError(
            ErrorCodes.STREAM_NOT_WRITABLE,
            param=param,
            reason="Can't write to stream",
        )


def stream_length(stream: BinaryIO, param: str) -> int:
    """
    스트림 전체 길이 (현재 위치는 그대로 유지).

    Raises:
        StreamNotSupportedError: seek 불가 스트림
    """
    if not stream.seekable():
        raise StreamNotSupportedError(ErrorCodes.STREAM_NOT_SEEKABLE, param=param)

    position = stream.tell()
    end = stream.seek(0, io.SEEK_END)
    stream.seek(position)
    return end


# =============================================================================
# Transfer helpers
# =============================================================================


def bytes_to_stream(data: bytes, out_stream: BinaryIO) -> BinaryIO:
    """
    바이트 배열을 스트림 끝에 이어 쓰기.

    Args:
        data: 쓸 바이트
        out_stream: 쓰기 가능한 열린 스트림

    Returns:
        out_stream (체이닝용)
    """
    require_not_none(data, "data")
    require_writable(out_stream, "out_stream")

    out_stream.write(data)
    return out_stream


def stream_to_stream(
    in_stream: BinaryIO,
    out_stream: BinaryIO,
    length: int = 0,
    chunk_size: int = STREAM_CHUNK_SIZE,
) -> None:
    """
    스트림 → 스트림 복사 (chunk 단위).

    Args:
        in_stream: 읽기 가능한 입력 스트림
        out_stream: 쓰기 가능한 출력 스트림
        length: 복사할 바이트 수 (0이면 현재 위치부터 끝까지)
        chunk_size: 한 번에 읽을 최대 바이트 수

    Raises:
        TruncatedStreamError: length 만큼 읽기 전에 입력이 끝난 경우
    """
    require_readable(in_stream, "in_stream")
    require_writable(out_stream, "out_stream")
    if length < 0:
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param="length", value=length)
    if chunk_size <= 0:
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param="chunk_size", value=chunk_size)

    if length == 0:
        if not in_stream.seekable():
            # 길이를 모르면 EOF까지
            for chunk in iter(lambda: in_stream.read(chunk_size), b""):
                out_stream.write(chunk)
            return
        rest = stream_length(in_stream, "in_stream") - in_stream.tell()
    else:
        rest = length

    requested = rest
    while rest > 0:
        chunk = in_stream.read(min(chunk_size, rest))
        if not chunk:
            raise TruncatedStreamError(
                ErrorCodes.STREAM_TRUNCATED,
                param="in_stream",
                requested=requested,
                copied=requested - rest,
            )
        out_stream.write(chunk)
        rest -= len(chunk)


def consume_stream_to_bytes(in_stream: BinaryIO) -> bytes:
    """
    스트림의 선언된 전체 길이만큼 읽어 bytes로 반환하고 스트림을 닫음.

    소유권이 이 함수로 넘어옴: 호출 후 in_stream 재사용 금지.
    읽기는 현재 위치부터 시작.

    Raises:
        TruncatedStreamError: 선언 길이만큼 읽지 못한 경우
    """
    require_not_none(in_stream, "in_stream")

    try:
        require_readable(in_stream, "in_stream")
        declared = stream_length(in_stream, "in_stream")

        buffer = bytearray(declared)
        view = memoryview(buffer)
        filled = 0
        while filled < declared:
            count = in_stream.readinto(view[filled:])
            if not count:
                raise TruncatedStreamError(
                    ErrorCodes.STREAM_TRUNCATED,
                    param="in_stream",
                    requested=declared,
                    copied=filled,
                )
            filled += count
        view.release()
        return bytes(buffer)
    finally:
        in_stream.close()
