"""Section builder: walks a route tree and groups endpoints into sections.

The walk happens in two passes. ``iter_endpoints`` flattens the tree into
``(segments, Endpoint)`` pairs in schema key order, then ``SectionBuilder``
folds those pairs into per-section documentation and test stubs.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from api_routes_gen.log import log
from api_routes_gen.naming import to_camel_case
from api_routes_gen.parser.base import Defines, Endpoint, Group, RouteSchema
from .docs import render_comment, render_section_banner
from .resolver import resolve_params
from .scaffold import render_endpoint_stub


class Section(BaseModel):
    """All generated text for one section, in traversal order."""

    model_config = ConfigDict(frozen=True)

    name: str
    func_names: tuple[str, ...] = ()
    docs: tuple[str, ...] = ()
    stubs: tuple[str, ...] = ()


class BuildResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: dict[str, Section]
    apidocs: str


def iter_endpoints(group: Group, segments: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Endpoint]]:
    """Yield every endpoint below ``group`` depth-first, with its path segments."""
    for route_part, node in group.children.items():
        if node is None:
            continue
        path = segments + (route_part,)
        if isinstance(node, Endpoint):
            yield path, node
        else:
            yield from iter_endpoints(node, path)


def endpoint_identity(segments: tuple[str, ...]) -> tuple[str, str]:
    """Return ``(section, func_name)`` for an endpoint's path segments."""
    section = to_camel_case(segments[0])
    func_name = to_camel_case("-".join(segments[1:]))
    return section, func_name


class SectionBuilder:
    """Accumulates documentation blocks and test stubs per section."""

    def __init__(self, defines: Defines, handler_template: str, namespace: str = "github"):
        self.defines = defines
        self.handler_template = handler_template
        self.namespace = namespace
        self._sections: dict[str, dict[str, list[str]]] = {}

    def add(self, segments: tuple[str, ...], endpoint: Endpoint) -> None:
        path = "/" + "/".join(segments)
        section, func_name = endpoint_identity(segments)
        params = resolve_params(endpoint, self.defines, path)

        draft = self._sections.setdefault(section, {"func_names": [], "docs": [], "stubs": []})
        if func_name in draft["func_names"]:
            log(f"Duplicate function name '{section}.{func_name}' generated for {path}", "warning")

        draft["func_names"].append(func_name)
        draft["docs"].append(
            render_comment(section, func_name, params, self.defines.request_headers, self.namespace)
        )
        draft["stubs"].append(
            render_endpoint_stub(self.handler_template, section, func_name, endpoint.method, endpoint.url, params)
        )

    def result(self) -> BuildResult:
        sections = {
            name: Section(
                name=name,
                func_names=tuple(draft["func_names"]),
                docs=tuple(draft["docs"]),
                stubs=tuple(draft["stubs"]),
            )
            for name, draft in self._sections.items()
        }
        apidocs = "".join(
            render_section_banner(name, self.namespace) + "".join(section.docs)
            for name, section in sections.items()
        )
        return BuildResult(sections=sections, apidocs=apidocs)


def build_sections(schema: RouteSchema, handler_template: str, namespace: str = "github") -> BuildResult:
    """Walk the route tree once and return every section it produces."""
    builder = SectionBuilder(schema.defines, handler_template, namespace)
    for segments, endpoint in iter_endpoints(schema.root):
        builder.add(segments, endpoint)
    return builder.result()
