"""
Pytest configuration and shared fixtures for the tsdecl test suite.
"""

import logging
import pytest
import tempfile
import shutil
from pathlib import Path

from tsdecl.language import build_model_str


@pytest.fixture(autouse=True)
def reset_gen_logging():
    """Undo configure_gen_logging() so handlers never outlive a test's streams."""
    yield
    gen_logger = logging.getLogger("tsdecl.gen")
    for handler in list(gen_logger.handlers):
        gen_logger.removeHandler(handler)
    gen_logger.propagate = True
    gen_logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_output_dir():
    """Create a temporary directory for generated output."""
    temp_dir = tempfile.mkdtemp(prefix="tsdecl_test_")
    yield Path(temp_dir)
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def write_schema_file(temp_output_dir):
    """Factory fixture to write schema content to a temporary file."""
    def _write(content: str, filename: str = "test.sdef") -> Path:
        file_path = temp_output_dir / filename
        file_path.write_text(content)
        return file_path
    return _write


@pytest.fixture
def build_schema():
    """Factory fixture to build a model from schema content."""
    def _build(content: str) -> object:
        return build_model_str(content)
    return _build


@pytest.fixture
def point_schema():
    """Schema with a single exported two-field struct."""
    return """
package model

type Point2f struct {
    X *float64 `json:"x"`
    Y *float64 `json:"y"`
}

export (
    Point2f
)
"""


@pytest.fixture
def unsupported_type_schema():
    """Schema whose second exported struct has a field without a translation."""
    return """
package model

type Point2f struct {
    X *float64 `json:"x"`
    Y *float64 `json:"y"`
}

type Signal struct {
    Id    int        `json:"id"`
    Phase complex128 `json:"phase"`
}

type Sensor struct {
    Id int `json:"id"`
}

export (
    Point2f
    Signal
    Sensor
)
"""



@pytest.fixture
def point2f_declaration():
    """Expected declaration for point_schema."""
    return "export type Point2f = {\n\tx: number\n\ty: number\n}"
