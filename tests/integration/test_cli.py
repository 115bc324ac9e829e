"""
CLI tests for the validate, inspect and generate commands.
"""

import io

from click.testing import CliRunner

from tsdecl.cli.cli import cli
from tsdecl.generate import to_tsx


def _bundled_text():
    out = io.StringIO()
    to_tsx(out=out)
    return out.getvalue()


class TestValidateCommand:

    def test_valid_schema(self, write_schema_file, point_schema):
        path = write_schema_file(point_schema)
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Schema validation success" in result.output

    def test_invalid_schema(self, write_schema_file):
        path = write_schema_file("type Broken {\n}\n")
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "Validation failed" in result.output


class TestInspectCommand:

    def test_inspect_lists_structs(self, write_schema_file, unsupported_type_schema):
        path = write_schema_file(unsupported_type_schema)
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "Signal (exported)" in result.output
        assert "Phase: complex128 json=phase" in result.output
        assert "=== EXPORT ORDER ===" in result.output


class TestGenerateCommand:

    def test_generate_defaults_to_bundled_schema(self):
        result = CliRunner().invoke(cli, ["generate", "-q"])
        assert result.exit_code == 0
        assert "export type Point2f = {\n\tx: number\n\ty: number\n}" in result.output
        assert "export type NodeEdge = {" in result.output

    def test_generate_to_file(self, temp_output_dir, write_schema_file, point_schema, point2f_declaration):
        path = write_schema_file(point_schema)
        out_file = temp_output_dir / "out" / "types.ts"
        result = CliRunner().invoke(cli, ["generate", str(path), "--out", str(out_file)])
        assert result.exit_code == 0
        assert out_file.read_text() == point2f_declaration + "\n\n"

    def test_generate_bundled_to_file_matches_to_tsx(self, temp_output_dir):
        out_file = temp_output_dir / "types.ts"
        result = CliRunner().invoke(cli, ["generate", "--out", str(out_file), "-q"])
        assert result.exit_code == 0
        assert out_file.read_text() == _bundled_text()

    def test_generate_unsupported_type_exits_1(self, temp_output_dir, write_schema_file, unsupported_type_schema):
        path = write_schema_file(unsupported_type_schema)
        out_file = temp_output_dir / "types.ts"
        result = CliRunner().invoke(cli, ["generate", str(path), "--out", str(out_file)])
        assert result.exit_code == 1
        assert "complex128" in result.output
        assert "Signal" not in out_file.read_text()

    def test_generate_missing_file_exits_1(self, temp_output_dir):
        result = CliRunner().invoke(cli, ["generate", str(temp_output_dir / "missing.sdef")])
        assert result.exit_code == 1
        assert "Generate failed" in result.output


class TestGenerateStreams:
    """Declarations go to stdout; log and status lines go to stderr only."""

    def test_verbose_logging_stays_off_stdout(self):
        expected = _bundled_text()
        result = CliRunner().invoke(cli, ["generate", "-v"])
        assert result.exit_code == 0
        assert result.stdout == expected
        assert "[DONE]" in result.stderr
        assert "[SKIP] NodeEdge.Node1" in result.stderr
        assert "[GEN] Point2f" in result.stderr

    def test_out_file_leaves_stdout_empty(self, temp_output_dir):
        expected = _bundled_text()
        out_file = temp_output_dir / "types.ts"
        result = CliRunner().invoke(cli, ["generate", "--out", str(out_file), "-v"])
        assert result.exit_code == 0
        assert result.stdout == ""
        assert "Declarations emitted" in result.stderr
        assert "[DONE]" in result.stderr
        assert out_file.read_text() == expected
