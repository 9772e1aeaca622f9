"""Discovery and selection of schema versions under the api directory."""

from pathlib import Path

from api_routes_gen.errors import InvalidRouteNode, NoVersionsAvailable, VersionNotFound
from api_routes_gen.log import log
from .routes import read_schema_file

SCHEMA_FILENAMES = ("routes.json", "routes.yaml", "routes.yml")


def find_schema_file(version_dir: Path) -> Path | None:
    for name in SCHEMA_FILENAMES:
        path = version_dir / name
        if path.is_file():
            return path
    return None


def discover_versions(api_dir: Path) -> dict[str, Path]:
    """Map each version directory name to its schema file.

    Directories without a route file, or whose route file has no
    ``defines`` block, are not generator input and are skipped.
    """
    versions: dict[str, Path] = {}
    if not api_dir.is_dir():
        return versions

    for version_dir in sorted(p for p in api_dir.iterdir() if p.is_dir()):
        schema_path = find_schema_file(version_dir)
        if schema_path is None:
            continue
        try:
            data = read_schema_file(schema_path)
        except InvalidRouteNode as e:
            log(f"Skipping {schema_path}: {e}", "warning")
            continue
        if not data.get("defines"):
            log(f"Skipping {schema_path}: no defines block", "debug")
            continue
        versions[version_dir.name] = schema_path
    return versions


def normalize_version(version: str) -> str:
    """Prefix a bare version number with ``v`` (``3.0.0`` -> ``v3.0.0``)."""
    return version if version.startswith("v") else "v" + version


def select_versions(available: dict[str, Path], requested: list[str], api_dir: Path | None = None) -> dict[str, Path]:
    """Pick the requested versions out of the available ones.

    An empty request selects every available version.
    """
    if not available:
        raise NoVersionsAvailable(api_dir if api_dir is not None else "the api directory")

    if not requested:
        log("No versions specified via the command line, generating for all available versions.")
        return dict(available)

    selected: dict[str, Path] = {}
    for version in requested:
        version = normalize_version(version)
        if version not in available:
            raise VersionNotFound(version, sorted(available))
        selected[version] = available[version]
    return selected
