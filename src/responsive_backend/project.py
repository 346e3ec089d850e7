"""Project initializer: writes the sample API definition and default settings."""

from pathlib import Path
from typing import Callable

import click

from responsive_backend.errors import FilesystemError


def _render_api_definition() -> str:
    return '''title: Sample API
version: 1.0
endpoints:
  - path: '/users/{id}'
    method: GET
    description: 'Fetch user by ID'
    response:
      200:
        json:
          id: int
          name: string
          email: string
'''


def _render_settings() -> str:
    return '''authentication:
  method: 'JWT'
  secret: 'your-secret-key'
logging:
  enabled: true
  log_level: 'info'
rate_limiting:
  requests_per_minute: 60
'''


DEFAULT_FILES = {
    Path("api") / "api.yaml": _render_api_definition,
    Path("config") / "settings.yaml": _render_settings,
}


def init_project(root: Path = Path("."), echo: Callable[[str], None] = click.echo) -> list[Path]:
    """Create the default project files under root.

    A file is only written when its directory does not exist yet, so an
    already initialized project is left alone. Returns the created files.
    """
    root = Path(root)
    created = []
    for relative, render in DEFAULT_FILES.items():
        directory = root / relative.parent
        if directory.exists():
            continue
        file_path = root / relative
        try:
            directory.mkdir(parents=True)
            file_path.write_text(render(), encoding="utf-8")
        except OSError as e:
            raise FilesystemError(file_path, e) from e
        echo(f"Created {file_path}")
        created.append(file_path)
    return created
