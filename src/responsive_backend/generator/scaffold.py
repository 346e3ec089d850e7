"""Generation run: definition -> emitter -> writer, one endpoint at a time."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import click

from responsive_backend.definition.base import ApiDefinition
from responsive_backend.errors import GenerationError
from responsive_backend.generator.base import get_emitter
from responsive_backend.generator.writer import EndpointReport, FileAction, ScaffoldWriter


@dataclass
class EndpointFailure:
    method: str
    path: str
    reason: str


@dataclass
class GenerationResult:
    target: str
    reports: list[EndpointReport] = field(default_factory=list)
    failures: list[EndpointFailure] = field(default_factory=list)

    @property
    def written(self) -> list[Path]:
        files = []
        for report in self.reports:
            files.append(report.generated_file)
            if report.partner_action is FileAction.WRITTEN:
                files.append(report.partner_file)
        return files


def generate_scaffolding(
    definition: ApiDefinition,
    target: str,
    root: Path = Path("."),
    echo: Callable[[str], None] = click.echo,
) -> GenerationResult:
    """Generate scaffolding for every endpoint, in definition order.

    The target is resolved before anything is written, so an unsupported
    target raises UnsupportedTargetError with no side effects. Endpoints
    that raise GenerationError are reported and skipped; FilesystemError
    propagates and leaves earlier writes in place.
    Endpoints sharing a type name overwrite each other's generated file.
    """
    emitter = get_emitter(target)
    writer = ScaffoldWriter(root, echo=echo)
    result = GenerationResult(target=emitter.name)

    seen: dict[str, str] = {}
    for endpoint in definition.endpoints:
        label = f"{endpoint.method} {endpoint.path}".strip() or "<unnamed endpoint>"
        try:
            rendered = emitter.render(endpoint)
        except GenerationError as e:
            echo(f"Skipping {label}: {e}")
            result.failures.append(EndpointFailure(endpoint.method, endpoint.path, str(e)))
            continue

        if rendered.type_name in seen:
            echo(
                f"Warning: {label} maps to {rendered.type_name}, already generated for {seen[rendered.type_name]}; "
                "its generated file is overwritten and the existing partner may no longer match it"
            )
        seen[rendered.type_name] = label
        result.reports.append(writer.write(rendered, method=endpoint.method, path=endpoint.path))

    return result
