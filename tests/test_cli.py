import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from api_routes_gen.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def api_dir(tmp_path):
    target = tmp_path / "api"
    shutil.copytree(FIXTURES / "api", target)
    return target


class TestCliGenerate:
    def test_all_versions(self, api_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir)])

        assert result.exit_code == 0
        assert "generating for all available versions" in result.output
        assert (api_dir / "v2.0.0" / "apidocs.js").exists()
        assert (api_dir / "v3.0.0" / "apidocs.js").exists()

    def test_single_version_with_tests(self, api_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir), "-v", "3.0.0", "-t"])

        assert result.exit_code == 0
        assert "[v3.0.0]   repos: created" in result.output
        assert (api_dir / "v3.0.0" / "reposTest.js").exists()
        assert not (api_dir / "v2.0.0" / "apidocs.js").exists()

    def test_api_dir_from_env(self, api_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["-v", "v2.0.0"], env={"API_ROUTES_GEN_DIR": str(api_dir)})

        assert result.exit_code == 0
        assert (api_dir / "v2.0.0" / "apidocs.js").exists()

    def test_namespace_option(self, api_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir), "-v", "2.0.0", "--namespace", "gitlab"])

        assert result.exit_code == 0
        apidocs = (api_dir / "v2.0.0" / "apidocs.js").read_text(encoding="utf-8")
        assert apidocs.startswith("/** section: gitlab\n * mixin orgs\n")


class TestCliRestore:
    def test_restore(self, api_dir):
        (api_dir / "v3.0.0" / "reposTest.js.bak").write_text("// mine", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir), "-r"])

        assert result.exit_code == 0
        assert "Restored 'reposTest.js.bak' (v3.0.0)" in result.output
        assert (api_dir / "v3.0.0" / "reposTest.js").read_text(encoding="utf-8") == "// mine"
        assert not (api_dir / "v3.0.0" / "apidocs.js").exists()

    def test_restore_with_tests_is_usage_error(self, api_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir), "-r", "-t"])

        assert result.exit_code == 2
        assert "--restore" in result.output


class TestCliErrors:
    def test_unknown_version(self, api_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir), "-v", "9.9.9"])

        assert result.exit_code == 1
        assert "Version 'v9.9.9' is not available" in result.output

    def test_no_versions(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(tmp_path)])

        assert result.exit_code == 1
        assert "No versions available" in result.output

    def test_schema_error_is_fatal(self, api_dir):
        routes = api_dir / "v3.0.0" / "routes.json"
        routes.write_text(routes.read_text(encoding="utf-8").replace('"$page": null,', '"$pages": null,'), encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir), "-t"])

        assert result.exit_code == 1
        assert "FATAL" in result.output
        assert "$pages" in result.output
        assert not (api_dir / "v2.0.0" / "apidocs.js").exists()

    @patch("api_routes_gen.generator.runner.reconcile", side_effect=OSError("read-only file system"))
    def test_io_errors_exit_nonzero(self, mock_reconcile, api_dir):
        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(api_dir), "-t"])

        assert result.exit_code == 1
        assert "read-only file system" in result.output
        assert (api_dir / "v3.0.0" / "apidocs.js").exists()

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-h"])

        assert result.exit_code == 0
        assert "--restore" in result.output
        assert "--tests" in result.output
