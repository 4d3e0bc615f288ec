"""
Pytest fixtures for baseline comparison tests.

- 텍스트 fixture: 스프레드시트 XML 조각
- 패키지 fixture: openpyxl로 만든 실제 XLSX
"""

import io
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest
from openpyxl import Workbook

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def baseline_dir() -> Path:
    """tests/baseline/ 경로 (텍스트 baseline fixture)."""
    return Path(__file__).parent / "baseline"


# =============================================================================
# Text Fixtures
# =============================================================================

@pytest.fixture
def column_xml() -> str:
    """width 속성을 가진 열 정의."""
    return '<x:col min="1" max="1" width="8.43" customWidth="1"/>'


@pytest.fixture
def sample_guid() -> str:
    """중괄호 GUID 리터럴."""
    return "{3F2504E0-4F89-11D3-9A0C-0305E82C3301}"


@pytest.fixture
def make_stream() -> Callable[[str], io.BytesIO]:
    """텍스트 → 위치 0의 바이트 스트림."""
    def _make(text: str, encoding: str = "utf-8") -> io.BytesIO:
        return io.BytesIO(text.encode(encoding))
    return _make


# =============================================================================
# Package Fixtures
# =============================================================================

@pytest.fixture
def make_workbook(tmp_path: Path) -> Callable[..., Path]:
    """
    openpyxl로 XLSX 생성.

    Args:
        name: 파일명
        width: A열 너비
        value: A1 값
    """
    def _make(name: str, width: float = 8.43, value: str = "WO-001") -> Path:
        wb = Workbook()
        ws = wb.active
        ws.title = "Sheet1"
        ws["A1"] = value
        ws["B1"] = 10.05
        ws.column_dimensions["A"].width = width

        path = tmp_path / name
        wb.save(path)
        return path
    return _make


@pytest.fixture
def make_package(tmp_path: Path) -> Callable[..., Path]:
    """임의 part 구성의 zip 패키지 생성."""
    def _make(name: str, parts: dict[str, str | bytes]) -> Path:
        path = tmp_path / name
        with zipfile.ZipFile(path, "w") as zf:
            for part_name, content in parts.items():
                zf.writestr(part_name, content)
        return path
    return _make
