"""Per-version orchestration of generation and restore.

Every version is built fully in memory before anything is written, so a
schema error in any version stops the run with no files touched. Writing
then happens per version; I/O failures are collected into that version's
report instead of stopping the others.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from pydantic import BaseModel

from api_routes_gen.config import GeneratorConfig, Templates, load_templates
from api_routes_gen.log import log
from api_routes_gen.parser.routes import load_schema
from .guard import ReconcileAction, reconcile, restore
from .scaffold import render_section_file
from .sections import BuildResult, build_sections


class VersionBuild(BaseModel):
    version: str
    result: BuildResult


class VersionReport(BaseModel):
    """What happened to one version during a run."""

    version: str
    docs_path: Path | None = None
    actions: dict[str, ReconcileAction] = {}
    restored: int = 0
    errors: list[str] = []


def build_version(version: str, schema_path: Path, templates: Templates, namespace: str = "github") -> VersionBuild:
    schema = load_schema(schema_path)
    log(f"Converting routes to functions ({version})")
    return VersionBuild(version=version, result=build_sections(schema, templates.handler, namespace))


def write_version(build: VersionBuild, version_dir: Path, config: GeneratorConfig, templates: Templates) -> VersionReport:
    report = VersionReport(version=build.version)
    log(f"Writing files to version dir ({build.version})")

    docs_path = version_dir / config.docs_filename
    try:
        docs_path.write_text(build.result.apidocs, encoding="utf-8")
        report.docs_path = docs_path
    except OSError as e:
        report.errors.append(f"{docs_path}: {e}")
        log(f"Could not write '{docs_path}': {e}", "error")

    if not config.tests:
        return report

    for name, section in build.result.sections.items():
        body = render_section_file(templates.section, build.version, name, list(section.stubs))
        path = version_dir / config.test_filename(name)
        log(f"Writing test file for {name}, version {build.version}")
        try:
            report.actions[name] = reconcile(path, body)
        except (OSError, UnicodeError) as e:
            report.errors.append(f"{path}: {e}")
            log(f"Could not write '{path}': {e}", "error")
    return report


def restore_version(version: str, version_dir: Path) -> VersionReport:
    report = VersionReport(version=version)
    try:
        report.restored = restore(version_dir, version)
    except OSError as e:
        report.errors.append(f"{version_dir}: {e}")
        log(f"Could not restore backups in '{version_dir}': {e}", "error")
    return report


def _run_all(fn, items: dict, max_workers: int | None) -> dict:
    """Run ``fn(key, value)`` for every item on a thread pool.

    The first exception cancels whatever has not started yet and is re-raised.
    """
    results = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {executor.submit(fn, key, value): key for key, value in items.items()}
        try:
            for future in as_completed(futures):
                results[futures[future]] = future.result()
        except BaseException:
            for future in futures:
                future.cancel()
            raise
    return {key: results[key] for key in items}


def run(config: GeneratorConfig, versions: dict[str, Path]) -> list[VersionReport]:
    """Generate (or restore) every given version.

    ``versions`` maps a version name to its schema file. Reports come back in
    the same order.
    """
    log(f"Generating for versions {list(versions)}")
    version_dirs = {version: schema_path.parent for version, schema_path in versions.items()}

    if config.restore:
        reports = _run_all(restore_version, version_dirs, config.max_workers)
        return list(reports.values())

    templates = load_templates(config.templates_dir)

    def _build(version: str, schema_path: Path) -> VersionBuild | VersionReport:
        try:
            return build_version(version, schema_path, templates, config.doc_namespace)
        except OSError as e:
            log(f"Could not read '{schema_path}': {e}", "error")
            return VersionReport(version=version, errors=[f"{schema_path}: {e}"])

    def _write(version: str, build: VersionBuild | VersionReport) -> VersionReport:
        if isinstance(build, VersionReport):
            return build
        return write_version(build, version_dirs[version], config, templates)

    builds = _run_all(_build, versions, config.max_workers)
    reports = _run_all(_write, builds, config.max_workers)
    return list(reports.values())
