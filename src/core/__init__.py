"""
Core layer: 설정 로드, 스트림 복사 헬퍼.

역할:
- default.yaml → CompareSettings
- bytes ↔ stream, stream → stream 복사
"""

from .config import CompareSettings, load_config
from .streams import bytes_to_stream, consume_stream_to_bytes, stream_to_stream

__all__ = [
    # config
    "CompareSettings",
    "load_config",
    # streams
    "bytes_to_stream",
    "stream_to_stream",
    "consume_stream_to_bytes",
]
