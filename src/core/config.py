"""
설정 로드: default.yaml → CompareSettings

파일이 없으면 빈 설정({})으로 간주하고 constants 기본값 사용.
값이 잘못되면 InvalidArgumentError (조용히 기본값으로 바꾸지 않음).
"""

import codecs
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_COLUMN_ELEMENT,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ENCODING,
    DIFF_CONTEXT_WIDTH,
    STREAM_CHUNK_SIZE,
)
from src.domain.errors import ErrorCodes, InvalidArgumentError

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = Path(__file__).parent.parent.parent / DEFAULT_CONFIG_FILENAME

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


def parse_bool(value: Any, param: str) -> bool:
    """
    YAML 값 → bool.

    따옴표로 감싼 "false" 같은 문자열도 명시적으로 해석.
    그 외 타입(숫자, 리스트 등)은 거부.

    Raises:
        InvalidArgumentError: bool로 해석할 수 없는 값
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False

    raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param=param, value=value)


def _parse_positive_int(value: Any, param: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param=param, value=value)
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param=param, value=value) from e

    if number <= 0:
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param=param, value=value)
    return number


def _parse_encoding(value: Any, param: str) -> str:
    try:
        codecs.lookup(value)
    except (LookupError, TypeError) as e:
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param=param, value=value) from e
    return value


def _section(config: Any, name: str) -> dict:
    if not isinstance(config, dict):
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param="config", value=config)
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise InvalidArgumentError(ErrorCodes.ARGUMENT_RANGE, param=name, value=section)
    return section


@dataclass(frozen=True)
class CompareSettings:
    """비교 관련 설정."""
    strip_column_widths: bool = True
    encoding: str = DEFAULT_ENCODING
    context_width: int = DIFF_CONTEXT_WIDTH
    column_element: str = DEFAULT_COLUMN_ELEMENT
    chunk_size: int = STREAM_CHUNK_SIZE
    log_level: str = "INFO"

    @classmethod
    def from_config(cls, config: dict) -> "CompareSettings":
        """
        설정 dict에서 생성.

        알 수 없는 키는 무시. 누락된 키는 기본값.

        Raises:
            InvalidArgumentError: 알 수 없는 인코딩, 양수가 아닌 길이,
                bool이 아닌 플래그, dict가 아닌 섹션
                (param 에 설정 키 이름)
        """
        compare = _section(config, "compare")
        streams = _section(config, "streams")
        logging_cfg = _section(config, "logging")

        return cls(
            strip_column_widths=parse_bool(
                compare.get("strip_column_widths", cls.strip_column_widths),
                "compare.strip_column_widths",
            ),
            encoding=_parse_encoding(compare.get("encoding", cls.encoding), "compare.encoding"),
            context_width=_parse_positive_int(
                compare.get("context_width", cls.context_width),
                "compare.context_width",
            ),
            column_element=compare.get("column_element", cls.column_element),
            chunk_size=_parse_positive_int(
                streams.get("chunk_size", cls.chunk_size),
                "streams.chunk_size",
            ),
            log_level=str(logging_cfg.get("level", cls.log_level)).upper(),
        )
