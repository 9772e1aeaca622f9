"""Run configuration for the generator."""

from pathlib import Path

from pydantic import BaseModel, model_validator

VARIABLE_MARKER = "$"
BACKUP_SUFFIX = ".bak"
DIVERGENCE_THRESHOLD = 20

DEFAULT_API_DIR = Path("api")
DEFAULT_NAMESPACE = "github"
TEMPLATES_DIR = Path(__file__).parent / "templates"

SECTION_TEMPLATE = "test_section.js.tpl"
HANDLER_TEMPLATE = "test_handler.js.tpl"


class GeneratorConfig(BaseModel):
    """Options of one generator run."""

    api_dir: Path = DEFAULT_API_DIR
    versions: list[str] = []  # empty means every available version
    tests: bool = False
    restore: bool = False
    templates_dir: Path | None = None
    doc_namespace: str = DEFAULT_NAMESPACE
    docs_filename: str = "apidocs.js"
    test_filename_pattern: str = "{section}Test.js"
    max_workers: int | None = None

    @model_validator(mode="after")
    def _check_modes(self):
        if self.restore and self.tests:
            raise ValueError("restore mode cannot be combined with test generation")
        return self

    def test_filename(self, section: str) -> str:
        return self.test_filename_pattern.format(section=section)


class Templates(BaseModel):
    """The two opaque test templates, section level and endpoint level."""

    section: str
    handler: str


def load_templates(templates_dir: Path | None = None) -> Templates:
    """Read the test templates, falling back to the bundled ones."""
    base = templates_dir or TEMPLATES_DIR
    return Templates(
        section=(base / SECTION_TEMPLATE).read_text(encoding="utf-8"),
        handler=(base / HANDLER_TEMPLATE).read_text(encoding="utf-8"),
    )
