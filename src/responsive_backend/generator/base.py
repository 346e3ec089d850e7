"""Emitter contract and the registry of target languages."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import PurePosixPath

from responsive_backend.definition.base import Endpoint
from responsive_backend.errors import GenerationError, UnsupportedTargetError
from responsive_backend.generator.auth import AuthPolicy, encode_auth
from responsive_backend.generator.naming import derive_method_name, derive_type_name, normalize_verb

GENERATED_HEADER = "This file is generated by `rb generate`. Changes will be overwritten."
PLACEHOLDER_MESSAGE = "Replace this with actual logic"
TODO_MARKER = "TODO: Implement business logic here"

EMITTERS: dict[str, type["Emitter"]] = {}


@dataclass(frozen=True)
class EndpointContext:
    """Everything an emitter needs to render one endpoint."""

    path: str
    verb: str | None  # None when the input verb is empty or malformed
    type_name: str
    method_name: str
    auth: AuthPolicy


@dataclass(frozen=True)
class RenderedEndpoint:
    """Both artifacts of an endpoint, rendered but not yet written."""

    type_name: str
    generated_path: PurePosixPath
    generated_source: str
    partner_path: PurePosixPath
    partner_source: str


def build_context(endpoint: Endpoint) -> EndpointContext:
    return EndpointContext(
        path=endpoint.path,
        verb=normalize_verb(endpoint.method),
        type_name=derive_type_name(endpoint.path),
        method_name=derive_method_name(endpoint.method),
        auth=encode_auth(endpoint.auth),
    )


def string_literal(value: str) -> str:
    """Render a double-quoted string literal.

    JSON escaping is valid inside C#, Ruby and JavaScript double-quoted
    strings; targets with extra interpolation rules post-process it.
    """
    return json.dumps(value)


class Emitter(ABC):
    """Renders the generated and partner artifacts for one target language."""

    name: str
    file_extension: str
    generated_dir: str
    partner_dir: str

    def generated_filename(self, type_name: str) -> str:
        return f"{type_name}.{self.file_extension}"

    def partner_filename(self, type_name: str) -> str:
        return f"{type_name}.{self.file_extension}"

    def render(self, endpoint: Endpoint) -> RenderedEndpoint:
        """Render both artifacts of an endpoint.

        Raises GenerationError if the endpoint cannot be rendered.
        """
        try:
            ctx = build_context(endpoint)
            return RenderedEndpoint(
                type_name=ctx.type_name,
                generated_path=PurePosixPath(self.generated_dir) / self.generated_filename(ctx.type_name),
                generated_source=self.render_generated(ctx),
                partner_path=PurePosixPath(self.partner_dir) / self.partner_filename(ctx.type_name),
                partner_source=self.render_partner(ctx),
            )
        except GenerationError as e:
            e.method, e.path = endpoint.method, endpoint.path
            raise

    @abstractmethod
    def render_generated(self, ctx: EndpointContext) -> str:
        """Route binding, auth fragment and delegation into the partner."""

    @abstractmethod
    def render_partner(self, ctx: EndpointContext) -> str:
        """Developer-owned implementation stub."""


def register_emitter(cls: type[Emitter]) -> type[Emitter]:
    EMITTERS[cls.name] = cls
    return cls


def _load_builtin_emitters() -> None:
    from responsive_backend.generator import csharp, javascript, ruby  # noqa: F401


def supported_targets() -> list[str]:
    _load_builtin_emitters()
    return sorted(EMITTERS)


def get_emitter(target: str) -> Emitter:
    """Return an emitter for the target name, matched case-insensitively."""
    _load_builtin_emitters()
    cls = EMITTERS.get((target or "").strip().lower())
    if cls is None:
        raise UnsupportedTargetError(target, supported_targets())
    return cls()
