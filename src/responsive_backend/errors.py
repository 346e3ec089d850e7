"""Exceptions raised while loading definitions and generating scaffolding."""


class ScaffoldError(Exception):
    """Base exception for all scaffolding errors."""


class DefinitionMissingError(ScaffoldError):
    """Raised when the API definition file does not exist."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"No API definition found ({path} missing). Run `rb init` first.")


class DefinitionMalformedError(ScaffoldError):
    """Raised when the API definition cannot be converted into the model."""

    def __init__(self, message: str, path=None) -> None:
        self.path = path
        full_message = message if path is None else f"[{path}] {message}"
        super().__init__(f"Failed to parse API definition: {full_message}")


class UnsupportedTargetError(ScaffoldError):
    """Raised when no emitter is registered for the requested target."""

    def __init__(self, target: str, supported: list[str]) -> None:
        self.target = target
        self.supported = supported
        names = ", ".join(f"'{name}'" for name in supported)
        super().__init__(f"Unsupported language '{target}'. Use one of: {names}.")


class GenerationError(ScaffoldError):
    """Raised when a single endpoint cannot be rendered."""

    def __init__(self, message: str, method: str | None = None, path: str | None = None) -> None:
        self.method = method
        self.path = path
        super().__init__(message)


class FilesystemError(ScaffoldError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot write {path}: {cause.strerror or cause}")
