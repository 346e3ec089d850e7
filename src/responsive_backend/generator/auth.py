"""Authorization policy shared by every target emitter.

Authentication is always required. ``auth.enforce`` only decides whether
the endpoint is additionally restricted to a set of roles.
"""

from dataclasses import dataclass

from responsive_backend.definition.base import AuthDefinition


@dataclass(frozen=True)
class AuthPolicy:
    """Structured auth requirement, rendered by each emitter."""

    restrict_roles: bool = False
    roles: tuple[str, ...] = ()

    @property
    def requires_authentication(self) -> bool:
        return True


BASELINE_POLICY = AuthPolicy()


def encode_auth(auth: AuthDefinition | None) -> AuthPolicy:
    """Return the policy for an endpoint's auth block.

    Roles keep their original order and duplicates; they are not escaped
    here, escaping belongs to the emitter that writes them into source.
    """
    if auth is None or not auth.enforce or not auth.roles:
        return BASELINE_POLICY
    return AuthPolicy(restrict_roles=True, roles=tuple(auth.roles))
