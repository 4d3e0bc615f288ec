"""
Domain Constants: 비교 유틸리티 전역 상수.

default.yaml 값이 없을 때 쓰이는 기본값들.
"""

# =============================================================================
# Text Comparison (텍스트 비교)
# =============================================================================
# StreamReader 기본 동작과 같게: UTF-8, BOM 있으면 제거, 깨진 바이트는 U+FFFD

DEFAULT_ENCODING = "utf-8-sig"
DEFAULT_DECODE_ERRORS = "replace"

# diff 리포트에서 불일치 지점 앞/뒤로 보여줄 글자 수
DIFF_CONTEXT_WIDTH = 40
DIFF_MARKER = ">>>|<<<"

# =============================================================================
# Normalization (정규화)
# =============================================================================

DEFAULT_COLUMN_ELEMENT = "x:col"

# =============================================================================
# Streams (스트림 복사)
# =============================================================================

STREAM_CHUNK_SIZE = 512

# =============================================================================
# Packages (XLSX/OOXML zip)
# =============================================================================
# 텍스트로 비교할 part 확장자. 나머지(이미지 등)는 바이트 비교.

TEXT_PART_SUFFIXES = (".xml", ".rels", ".vml")
PACKAGE_REPORT_MAX_DIFFS = 10

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG_FILENAME = "default.yaml"
