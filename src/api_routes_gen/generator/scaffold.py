"""Test scaffold renderer: endpoint stubs and per-section test files."""

from api_routes_gen.parser.base import ResolvedParam

STUB_INDENT = " " * 12


def render_example_params(params: list[ResolvedParam], indent: str = STUB_INDENT) -> str:
    """Render an object literal with one ``name: "<type>"`` entry per parameter."""
    if not params:
        return "{}"
    values = [f'{indent}    {p.name}: "{p.descriptor.type or "mixed"}"' for p in params]
    return "{\n" + ",\n".join(values) + "\n" + indent + "}"


def render_endpoint_stub(
    template: str,
    section: str,
    func_name: str,
    method: str,
    url: str,
    params: list[ResolvedParam],
) -> str:
    return (
        template.replace("<%name%>", f"{method} {url} ({func_name})", 1)
        .replace("<%funcName%>", f"{section}.{func_name}", 1)
        .replace("<%params%>", render_example_params(params), 1)
    )


def section_version_number(version: str) -> str:
    return version.removeprefix("v")


def render_section_file(template: str, version: str, section: str, stubs: list[str]) -> str:
    """Assemble a section's stubs into one test file body.

    The body is substituted last so placeholders inside stubs stay untouched.
    """
    return (
        template.replace("<%version%>", section_version_number(version), 1)
        .replace("<%sectionName%>", section)
        .replace("<%testBody%>", "\n\n".join(stubs), 1)
    )
