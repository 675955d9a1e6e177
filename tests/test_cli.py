"""Tests for the restgen command line."""

from click.testing import CliRunner

from restgen.__main__ import main


class TestCli:
    def test_stdout(self, swagger_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(swagger_path)])
        assert result.exit_code == 0
        assert result.stdout.startswith("-- Code generated by restgen. DO NOT EDIT.")
        assert "function M.authenticate_email(" in result.stdout

    def test_output_file(self, swagger_path, tmp_path):
        out = tmp_path / "nakama.lua"
        runner = CliRunner()
        result = runner.invoke(main, [str(swagger_path), "--output", str(out)])
        assert result.exit_code == 0
        assert "function M.rpc_func(" in out.read_text(encoding="utf-8")
        assert "-- Code generated" not in result.stdout

    def test_short_output_flag(self, swagger_path, tmp_path):
        out = tmp_path / "nakama.lua"
        result = CliRunner().invoke(main, ["-o", str(out), str(swagger_path)])
        assert result.exit_code == 0
        assert out.exists()

    def test_no_input_prints_usage(self):
        result = CliRunner().invoke(main, [])
        assert result.exit_code == 0
        assert "No input file found." in result.output
        assert "--output" in result.output

    def test_missing_input_file(self, tmp_path):
        result = CliRunner().invoke(main, [str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Unable to read file" in result.output

    def test_malformed_input(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{")
        result = CliRunner().invoke(main, [str(bad)])
        assert result.exit_code == 1
        assert "Unable to decode input" in result.output

    def test_unwritable_output(self, swagger_path, tmp_path):
        out = tmp_path / "no" / "such" / "dir.lua"
        result = CliRunner().invoke(main, [str(swagger_path), "-o", str(out)])
        assert result.exit_code == 1
        assert "Unable to create file" in result.output
        assert not out.exists()

    def test_extra_inputs_use_first(self, swagger_path, tmp_path):
        out = tmp_path / "nakama.lua"
        result = CliRunner().invoke(
            main, [str(swagger_path), str(tmp_path / "ignored.json"), "-o", str(out)],
        )
        assert result.exit_code == 0
        assert out.exists()
