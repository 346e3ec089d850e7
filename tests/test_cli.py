from pathlib import Path

from click.testing import CliRunner

from responsive_backend.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliInit:
    def test_init_then_generate(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["init", "--root", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / "api/api.yaml").exists()

        result = runner.invoke(main, ["generate", "-o", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "src/GeneratedControllers/UsersIdController.Generated.cs").exists()
        assert (tmp_path / "src/Controllers/UsersIdController.cs").exists()

    def test_init_twice(self, tmp_path):
        runner = CliRunner()
        runner.invoke(main, ["init", "--root", str(tmp_path)])
        result = runner.invoke(main, ["init", "--root", str(tmp_path)])
        assert result.exit_code == 0
        assert "already exist" in result.output


class TestCliGenerate:
    def test_generate_ruby(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", "-l", "ruby",
            "-d", str(FIXTURES / "api.yaml"),
            "-o", str(tmp_path),
        ])
        assert result.exit_code == 0, result.output
        assert "Found 3 endpoints." in result.output
        assert (tmp_path / "src/generated/OrdersController.rb").exists()
        assert "Done! Generated 3 endpoints" in result.output

    def test_language_from_env(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            main,
            ["generate", "-d", str(FIXTURES / "api.yaml"), "-o", str(tmp_path)],
            env={"RB_LANGUAGE": "JavaScript"},
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "src/generated/UsersIdController.js").exists()

    def test_unsupported_language_writes_nothing(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", "-l", "cobol",
            "-d", str(FIXTURES / "api.yaml"),
            "-o", str(tmp_path),
        ])
        assert result.exit_code == 1
        assert "Unsupported language 'cobol'" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_missing_definition(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "rb init" in result.output
        assert not (tmp_path / "src").exists()

    def test_malformed_definition(self, tmp_path):
        bad = tmp_path / "api.yaml"
        bad.write_text("endpoints: [oops\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "-d", str(bad), "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "Failed to parse API definition" in result.output
        assert not (tmp_path / "src").exists()

    def test_undecodable_definition(self, tmp_path):
        bad = tmp_path / "api.yaml"
        bad.write_bytes(b"title: \xff\xfe bad\n")
        runner = CliRunner()
        result = runner.invoke(main, ["generate", "-d", str(bad), "-o", str(tmp_path)])
        assert result.exit_code == 1
        assert "Failed to parse API definition" in result.output
        assert not (tmp_path / "src").exists()

    def test_skipped_endpoints_reported(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "generate", "-d", str(FIXTURES / "broken_endpoint.yaml"),
            "-o", str(tmp_path),
        ])
        assert result.exit_code == 0
        assert "Skipping GET" in result.output
        assert "skipped 1" in result.output
