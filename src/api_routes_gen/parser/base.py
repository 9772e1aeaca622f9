"""Data models for a parsed route schema.

The schema loader converts each version's route file into these models:
a ``Defines`` registry plus a tree of ``Group`` and ``Endpoint`` nodes.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ParamDescriptor(BaseModel):
    """The contract of a single endpoint parameter."""

    model_config = ConfigDict(frozen=True)

    type: str = "mixed"
    required: bool = False
    description: str = ""
    validation: str = ""

    @field_validator("type", "required", "description", "validation", mode="before")
    @classmethod
    def _null_means_default(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class Defines(BaseModel):
    """Shared parameter definitions and permitted request headers of a version."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    request_headers: list[str] = Field(default=[], alias="request-headers")
    params: dict[str, ParamDescriptor] = {}


class Endpoint(BaseModel):
    """A leaf of the route tree: one callable API operation."""

    model_config = ConfigDict(frozen=True)

    url: str
    method: str  # GET / POST / PUT / DELETE / PATCH
    params: dict[str, ParamDescriptor | None] = {}  # $-prefixed keys reference Defines.params


class Group(BaseModel):
    """An interior node of the route tree. ``None`` children are skipped."""

    model_config = ConfigDict(frozen=True)

    children: dict[str, "Endpoint | Group | None"] = {}


Group.model_rebuild()


class RouteSchema(BaseModel):
    """One version's schema: the defines block and the remaining route tree."""

    model_config = ConfigDict(frozen=True)

    defines: Defines
    root: Group


class ResolvedParam(BaseModel):
    """A parameter after variable references have been looked up."""

    model_config = ConfigDict(frozen=True)

    name: str  # without the variable marker
    descriptor: ParamDescriptor
