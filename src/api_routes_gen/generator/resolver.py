"""Parameter resolution against a version's defines registry."""

from api_routes_gen.config import VARIABLE_MARKER
from api_routes_gen.errors import UnresolvedVariableReference
from api_routes_gen.parser.base import Defines, Endpoint, ParamDescriptor, ResolvedParam


def is_variable(param_name: str) -> bool:
    return param_name.startswith(VARIABLE_MARKER)


def resolve(param_name: str, local: ParamDescriptor | None, defines: Defines, path: str = "") -> ParamDescriptor:
    """Return the descriptor a parameter name stands for.

    ``$name`` is looked up in the defines block and the local entry is
    ignored. Any other name uses its local descriptor as-is.
    """
    if is_variable(param_name):
        name = param_name[len(VARIABLE_MARKER):]
        if name not in defines.params:
            raise UnresolvedVariableReference(param_name, path)
        return defines.params[name]
    return local if local is not None else ParamDescriptor()


def resolve_params(endpoint: Endpoint, defines: Defines, path: str = "") -> list[ResolvedParam]:
    """Resolve every declared parameter of an endpoint, in declaration order."""
    return [
        ResolvedParam(
            name=param_name.removeprefix(VARIABLE_MARKER),
            descriptor=resolve(param_name, local, defines, path),
        )
        for param_name, local in endpoint.params.items()
    ]
