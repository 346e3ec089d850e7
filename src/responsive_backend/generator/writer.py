"""Scaffold writer: overwrites generated artifacts, never touches existing partners."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

import click

from responsive_backend.errors import FilesystemError
from responsive_backend.generator.base import RenderedEndpoint


class FileAction(str, Enum):
    WRITTEN = "written"
    SKIPPED = "skipped"


@dataclass
class EndpointReport:
    """What happened to the two artifacts of one endpoint."""

    method: str
    path: str
    type_name: str
    generated_file: Path
    generated_action: FileAction
    partner_file: Path
    partner_action: FileAction


class ScaffoldWriter:
    """Writes rendered endpoints below a project root."""

    def __init__(self, root: Path, echo: Callable[[str], None] = click.echo):
        self.root = Path(root)
        self.echo = echo

    def ensure_dir(self, directory: Path) -> bool:
        """Create a directory if absent. Returns True if it was created."""
        existed = directory.is_dir()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(directory, e) from e
        if not existed:
            self.echo(f"Created directory {directory}")
        return not existed

    def write(self, rendered: RenderedEndpoint, method: str = "", path: str = "") -> EndpointReport:
        generated_file = self.root / rendered.generated_path
        partner_file = self.root / rendered.partner_path

        self.ensure_dir(generated_file.parent)
        self.ensure_dir(partner_file.parent)

        self.echo(f"Generating: {generated_file}...")
        self._write_generated(generated_file, rendered.generated_source)

        if self._write_partner(partner_file, rendered.partner_source):
            self.echo(f"Creating developer file: {partner_file}...")
            partner_action = FileAction.WRITTEN
        else:
            self.echo(f"Keeping existing {partner_file}")
            partner_action = FileAction.SKIPPED

        return EndpointReport(
            method=method,
            path=path,
            type_name=rendered.type_name,
            generated_file=generated_file,
            generated_action=FileAction.WRITTEN,
            partner_file=partner_file,
            partner_action=partner_action,
        )

    def _write_generated(self, file_path: Path, source: str) -> None:
        try:
            with open(file_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(source)
        except OSError as e:
            raise FilesystemError(file_path, e) from e

    def _write_partner(self, file_path: Path, source: str) -> bool:
        """Create the partner file. Returns False if it already exists."""
        try:
            with open(file_path, "x", encoding="utf-8", newline="\n") as f:
                f.write(source)
        except FileExistsError:
            return False
        except OSError as e:
            raise FilesystemError(file_path, e) from e
        return True
