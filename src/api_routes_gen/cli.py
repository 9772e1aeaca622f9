"""CLI entry point for api-routes-gen."""

from pathlib import Path

import click
from pydantic import ValidationError

from api_routes_gen.config import DEFAULT_API_DIR, DEFAULT_NAMESPACE, GeneratorConfig
from api_routes_gen.errors import GeneratorError
from api_routes_gen.generator.runner import VersionReport, run
from api_routes_gen.log import log, set_verbose
from api_routes_gen.parser.versions import discover_versions, select_versions


def _print_report(report: VersionReport) -> None:
    if report.docs_path is not None:
        click.echo(f"[{report.version}] documentation: {report.docs_path}")
    for section, action in report.actions.items():
        click.echo(f"[{report.version}]   {section}: {action.value}")
    if report.restored:
        click.echo(f"[{report.version}] restored {report.restored} file(s)")
    for error in report.errors:
        log(f"[{report.version}] {error}", "error")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--version", "versions", multiple=True, help="Version of the API to generate, e.g. '3.0.0'. Repeatable; defaults to all available versions.")
@click.option("-t", "--tests", is_flag=True, help="Also generate unit test scaffolds.")
@click.option("-r", "--restore", is_flag=True, help="Restore .bak files, generated by a previous run, to the original.")
@click.option("--api-dir", type=click.Path(file_okay=False, path_type=Path), default=DEFAULT_API_DIR, envvar="API_ROUTES_GEN_DIR", show_default=True, help="Directory holding one subdirectory per version.")
@click.option("--templates-dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=None, help="Directory with test_section.js.tpl and test_handler.js.tpl overrides.")
@click.option("--namespace", default=DEFAULT_NAMESPACE, show_default=True, help="Documentation section name written into every comment block.")
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Number of versions processed in parallel.")
@click.option("--verbose", is_flag=True, help="Print debug output.")
def main(versions: tuple[str, ...], tests: bool, restore: bool, api_dir: Path, templates_dir: Path | None, namespace: str, workers: int | None, verbose: bool):
    """Generate API documentation and unit test scaffolds from route schemas."""
    if tests and restore:
        raise click.UsageError("--restore cannot be combined with --tests.")
    set_verbose(verbose)

    try:
        config = GeneratorConfig(
            api_dir=api_dir,
            versions=list(versions),
            tests=tests,
            restore=restore,
            templates_dir=templates_dir,
            doc_namespace=namespace,
            max_workers=workers,
        )
    except ValidationError as e:
        raise click.UsageError(str(e)) from e

    log("Starting up...")
    try:
        available = discover_versions(config.api_dir)
        selected = select_versions(available, config.versions, config.api_dir)
        reports = run(config, selected)
    except GeneratorError as e:
        log(str(e), "fatal")
        raise SystemExit(1) from e

    for report in reports:
        _print_report(report)

    if any(report.errors for report in reports):
        raise SystemExit(1)
    click.echo("Done!")
