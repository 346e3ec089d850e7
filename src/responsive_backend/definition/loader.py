"""YAML loader for API definition documents."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from responsive_backend.definition.base import ApiDefinition
from responsive_backend.errors import DefinitionMalformedError, DefinitionMissingError

DEFAULT_DEFINITION_PATH = Path("api") / "api.yaml"

# Scalars kept as written: `version: 1.10` must not become 1.1
_VERBATIM_TAGS = {"tag:yaml.org,2002:float", "tag:yaml.org,2002:timestamp"}


class DefinitionLoader(yaml.SafeLoader):
    """SafeLoader that leaves float and timestamp scalars as strings."""


DefinitionLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _VERBATIM_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_definition(file_path: Path) -> ApiDefinition:
    """Parse an API definition file into an ApiDefinition.

    Raises DefinitionMissingError if the file does not exist and
    DefinitionMalformedError if it cannot be read or turned into the model.
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise DefinitionMissingError(file_path)

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DefinitionMalformedError(f"not valid UTF-8 ({e.reason} at byte {e.start})", file_path) from e
    except OSError as e:
        raise DefinitionMalformedError(f"cannot read file: {e.strerror or e}", file_path) from e
    return parse_definition(text, source=file_path)


def parse_definition(text: str, source: Path | None = None) -> ApiDefinition:
    """Parse YAML text into an ApiDefinition."""
    try:
        doc = yaml.load(text, Loader=DefinitionLoader)
    except yaml.YAMLError as e:
        raise DefinitionMalformedError(f"YAMLError: {e}", source) from e

    if not isinstance(doc, dict):
        raise DefinitionMalformedError("document must be a mapping", source)

    try:
        return ApiDefinition.model_validate(doc)
    except ValidationError as e:
        raise DefinitionMalformedError(_format_validation_error(e), source) from e


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"])
        lines.append(f"{location}: {err['msg']}")
    return "; ".join(lines)
