"""Identifier derivation shared by every target emitter.

Both derivations are pure: the same path or verb always yields the same
identifier. Path parameters lose their braces, so ``/users/{id}`` and
``/users/id`` collide on ``UsersIdController``.
"""

import re
from functools import lru_cache

from responsive_backend.errors import GenerationError

CONTROLLER_SUFFIX = "Controller"
FALLBACK_METHOD_NAME = "HandleRequest"

METHOD_NAMES: dict[str, str] = {
    "GET": "Get",
    "POST": "Create",
    "PUT": "Update",
    "DELETE": "Delete",
}

_SEPARATORS = re.compile(r"[^A-Za-z0-9_]+")
_VERB_TOKEN = re.compile(r"^[A-Za-z]+$")


@lru_cache(maxsize=1024)
def derive_type_name(path: str) -> str:
    """Derive a controller type name from a URL path template.

    Examples:
        >>> derive_type_name("/users/{id}")
        'UsersIdController'
        >>> derive_type_name("/orders")
        'OrdersController'
    """
    if not path:
        raise GenerationError("cannot derive an identifier from an empty path", path=path)

    stripped = path.strip("/").replace("{", "").replace("}", "")
    segments = [s for s in _SEPARATORS.split(stripped) if s]
    if not segments:
        raise GenerationError(f"path '{path}' has no segments to derive an identifier from", path=path)

    if segments[0][0].isdigit():
        raise GenerationError(f"path '{path}' starts with a digit, which is not a valid type name", path=path)

    return "".join(s[0].upper() + s[1:] for s in segments) + CONTROLLER_SUFFIX


def derive_method_name(verb: str | None) -> str:
    """Map an HTTP verb to a method identifier, case-insensitively.

    Unknown, empty or malformed verbs map to ``HandleRequest``.
    """
    return METHOD_NAMES.get((verb or "").strip().upper(), FALLBACK_METHOD_NAME)


def normalize_verb(verb: str | None) -> str | None:
    """Return the upper-cased verb, or None if it is not a usable token."""
    verb = (verb or "").strip()
    if not _VERB_TOKEN.match(verb):
        return None
    return verb.upper()


def to_snake_case(identifier: str) -> str:
    """Convert a PascalCase identifier to snake_case.

    Examples:
        >>> to_snake_case("HandleRequest")
        'handle_request'
    """
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", identifier).lower()


def to_camel_case(identifier: str) -> str:
    """Convert a PascalCase identifier to camelCase."""
    if not identifier:
        return identifier
    return identifier[0].lower() + identifier[1:]


def to_route_params(path: str) -> str:
    """Translate ``{name}`` placeholders to ``:name`` route parameters."""
    return re.sub(r"\{([^{}]*)\}", r":\1", path)
