"""Exceptions raised by the generator.

Schema and configuration errors are fatal for the whole run. They propagate
out of the library and the command handler turns them into the exit status.
"""


class GeneratorError(Exception):
    """Base class for every fatal generator error."""


class SchemaError(GeneratorError):
    """The route schema of a version is malformed."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class MissingHttpMethod(SchemaError):
    def __init__(self, path: str):
        super().__init__(path, f"No HTTP method specified for {path}")


class UnresolvedVariableReference(SchemaError):
    def __init__(self, param_name: str, path: str = ""):
        self.param_name = param_name
        message = (
            f"Invalid variable parameter name substitution; param '{param_name}' "
            "not found in defines block"
        )
        if path:
            message += f" (endpoint {path})"
        super().__init__(path, message)


class InvalidRouteNode(SchemaError):
    def __init__(self, path: str, detail: str):
        self.detail = detail
        super().__init__(path, f"Invalid route definition at {path or '/'}: {detail}")


class ConfigError(GeneratorError):
    """The requested run cannot be set up."""


class NoVersionsAvailable(ConfigError):
    def __init__(self, api_dir):
        self.api_dir = api_dir
        super().__init__(f"No versions available to generate in {api_dir}.")


class VersionNotFound(ConfigError):
    def __init__(self, version: str, available: list[str]):
        self.version = version
        self.available = available
        listed = ", ".join(available) or "none"
        super().__init__(f"Version '{version}' is not available (available: {listed})")
