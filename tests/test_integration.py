"""End-to-end runs of the command on a freshly written schema."""

import json

from click.testing import CliRunner

from api_routes_gen.cli import main

EXAMPLE_ROUTES = {
    "defines": {
        "params": {"page": {"type": "number"}},
        "request-headers": ["X-Foo"],
    },
    "repos": {
        "get": {
            "url": "/repos/:id",
            "method": "GET",
            "params": {"$page": {}},
        }
    },
}


def _write_schema(tmp_path, routes):
    version_dir = tmp_path / "api" / "v1.0.0"
    version_dir.mkdir(parents=True)
    (version_dir / "routes.json").write_text(json.dumps(routes), encoding="utf-8")
    return version_dir


class TestExampleSchema:
    def test_generates_docs_and_tests(self, tmp_path):
        version_dir = _write_schema(tmp_path, EXAMPLE_ROUTES)

        runner = CliRunner()
        result = runner.invoke(main, ["--api-dir", str(tmp_path / "api"), "-t"])
        assert result.exit_code == 0

        apidocs = (version_dir / "apidocs.js").read_text(encoding="utf-8")
        assert apidocs.startswith("/** section: github\n * mixin repos\n **/\n")
        assert " *  repos#get(msg, callback) -> null" in apidocs
        assert "Valid headers are: 'X-Foo'." in apidocs
        assert " *  - page (number): Optional." in apidocs

        test_file = (version_dir / "reposTest.js").read_text(encoding="utf-8")
        assert "should successfully execute GET /repos/:id (get)" in test_file
        assert "client.repos.get(" in test_file
        assert '{\n                page: "number"\n            }' in test_file
        assert 'version: "1.0.0"' in test_file

    def test_regenerate_after_schema_change_keeps_old_file(self, tmp_path):
        version_dir = _write_schema(tmp_path, EXAMPLE_ROUTES)
        runner = CliRunner()
        runner.invoke(main, ["--api-dir", str(tmp_path / "api"), "-t"])
        before = (version_dir / "reposTest.js").read_text(encoding="utf-8")

        routes = json.loads(json.dumps(EXAMPLE_ROUTES))
        routes["repos"]["get-all"] = {"url": "/repos", "method": "GET", "params": {}}
        (version_dir / "routes.json").write_text(json.dumps(routes), encoding="utf-8")

        result = runner.invoke(main, ["--api-dir", str(tmp_path / "api"), "-t"])
        assert result.exit_code == 0
        assert "repos: backed-up-and-overwritten" in result.output
        assert (version_dir / "reposTest.js.bak").read_text(encoding="utf-8") == before
        assert "client.repos.getAll(" in (version_dir / "reposTest.js").read_text(encoding="utf-8")

        result = runner.invoke(main, ["--api-dir", str(tmp_path / "api"), "-r"])
        assert result.exit_code == 0
        assert (version_dir / "reposTest.js").read_text(encoding="utf-8") == before
