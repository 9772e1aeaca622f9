"""Route schema parser.

Reads a version's route file (JSON or YAML) and turns it into a validated
``RouteSchema``. Whether a node is an endpoint or a group is decided here,
once, so the traversal never has to probe fields again.
"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from api_routes_gen.errors import InvalidRouteNode, MissingHttpMethod
from .base import Defines, Endpoint, Group, RouteSchema

YAML_SUFFIXES = (".yaml", ".yml")


def read_schema_file(file_path: Path) -> dict:
    """Load the raw mapping from a route file, keeping the key order."""
    try:
        text = file_path.read_text(encoding="utf-8")
        if file_path.suffix in YAML_SUFFIXES:
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise InvalidRouteNode("", f"cannot parse {file_path.name}: {e}") from e
    if not isinstance(data, dict):
        raise InvalidRouteNode("", f"{file_path.name} does not contain a mapping")
    return data


def load_schema(file_path: Path) -> RouteSchema:
    """Parse a route file into its defines registry and route tree."""
    return parse_schema(read_schema_file(file_path))


def parse_schema(data: dict) -> RouteSchema:
    routes = dict(data)
    raw_defines = routes.pop("defines", None) or {}
    try:
        defines = Defines.model_validate(raw_defines)
    except ValidationError as e:
        raise InvalidRouteNode("defines", _first_error(e)) from e
    return RouteSchema(defines=defines, root=parse_group(routes, ""))


def parse_group(struct: dict, base_path: str) -> Group:
    children: dict[str, Endpoint | Group | None] = {}
    for route_part, block in struct.items():
        path = f"{base_path}/{route_part}"
        if not block:
            children[route_part] = None
        elif not isinstance(block, dict):
            raise InvalidRouteNode(path, f"expected a mapping, got {type(block).__name__}")
        elif "url" in block:
            children[route_part] = parse_endpoint(block, path)
        else:
            children[route_part] = parse_group(block, path)
    return Group(children=children)


def parse_endpoint(block: dict, path: str) -> Endpoint:
    if not block.get("method"):
        raise MissingHttpMethod(path)
    try:
        return Endpoint.model_validate(
            {
                "url": block["url"],
                "method": block["method"],
                "params": block.get("params") or {},
            }
        )
    except ValidationError as e:
        raise InvalidRouteNode(path, _first_error(e)) from e


def _first_error(error: ValidationError) -> str:
    detail = error.errors()[0]
    location = ".".join(str(part) for part in detail["loc"])
    return f"{location}: {detail['msg']}" if location else detail["msg"]
