"""Documentation renderer.

Produces pdoc-style comment blocks, one per endpoint, plus the ``mixin``
banner that declares each section.
"""

from api_routes_gen.parser.base import ParamDescriptor, ResolvedParam

MSG_LINE = (
    " *      - msg (Object): Object that contains the parameters and their values to be sent to the server."
)
CALLBACK_LINE = (
    " *      - callback (Function): function to call when the request is finished "
    "with an error as first argument and result data as second argument."
)
EMPTY_PARAMS_LINE = " *  No other params, simply pass an empty Object literal `{}`"
PARAM_LINE_PREFIX = " *  - "


def render_section_banner(section: str, namespace: str = "github") -> str:
    return f"/** section: {namespace}\n * mixin {section}\n **/\n"


def render_headers_line(request_headers: list[str]) -> str:
    valid = "', '".join(request_headers)
    return (
        f"{PARAM_LINE_PREFIX}headers (Object): Optional. Key/ value pair "
        "of request headers to pass along with the HTTP request. "
        f"Valid headers are: '{valid}'."
    )


def render_param_line(name: str, descriptor: ParamDescriptor) -> str:
    line = f"{PARAM_LINE_PREFIX}{name} ({descriptor.type or 'mixed'}): "
    line += "Required." if descriptor.required else "Optional."
    if descriptor.description:
        line += " " + descriptor.description
    if descriptor.validation:
        line += f" Validation rule: ` {descriptor.validation} `."
    return line


def render_comment(
    section: str,
    func_name: str,
    params: list[ResolvedParam],
    request_headers: list[str],
    namespace: str = "github",
) -> str:
    """Render the documentation block of one endpoint."""
    lines = [
        f"/** section: {namespace}",
        f" *  {section}#{func_name}(msg, callback) -> null",
        MSG_LINE,
        CALLBACK_LINE,
        " * ",
        " *  ##### Params on the `msg` object:",
        " * ",
        render_headers_line(request_headers),
    ]
    if not params:
        lines.append(EMPTY_PARAMS_LINE)
    for param in params:
        lines.append(render_param_line(param.name, param.descriptor))

    return "\n".join(lines) + "\n **/\n"
