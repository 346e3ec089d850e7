"""Express emitter: a generated router delegating to an implementation class."""

from responsive_backend.generator.auth import AuthPolicy
from responsive_backend.generator.base import (
    GENERATED_HEADER,
    PLACEHOLDER_MESSAGE,
    TODO_MARKER,
    Emitter,
    EndpointContext,
    register_emitter,
    string_literal,
)
from responsive_backend.generator.naming import to_camel_case, to_route_params

EXPRESS_VERBS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}


@register_emitter
class JavaScriptEmitter(Emitter):
    name = "javascript"
    file_extension = "js"
    generated_dir = "src/generated"
    partner_dir = "src/controllers"

    def render_auth(self, policy: AuthPolicy) -> list[str]:
        chain = ["authenticateMiddleware"]
        if policy.restrict_roles:
            roles = ", ".join(string_literal(role) for role in policy.roles)
            chain.append(f"authorizeRoles([{roles}])")
        return chain

    def _binding(self, verb: str | None) -> tuple[str, list[str]]:
        """Return the router method and any guard placed before the auth chain."""
        if verb is None:
            return "all", []
        if verb in EXPRESS_VERBS:
            return verb.lower(), []
        guard = f"(req, res, next) => (req.method === {string_literal(verb)} ? next() : next('route'))"
        return "all", [guard]

    def render_generated(self, ctx: EndpointContext) -> str:
        router_method, guards = self._binding(ctx.verb)
        handlers = ", ".join(guards + self.render_auth(ctx.auth))
        route = string_literal(to_route_params(ctx.path))
        impl = f"{ctx.type_name}Implementation"

        return f'''// {GENERATED_HEADER}
import express from 'express';
import {{ {impl} }} from '../controllers/{ctx.type_name}.js';
import {{ authenticateMiddleware, authorizeRoles }} from '../middleware/auth.js';

const router = express.Router();

router.{router_method}({route}, {handlers}, async (req, res) => {{
    const result = await new {impl}().{to_camel_case(ctx.method_name)}(req.params);
    res.json(result);
}});

export default router;
'''

    def render_partner(self, ctx: EndpointContext) -> str:
        return f'''export class {ctx.type_name}Implementation {{
    async {to_camel_case(ctx.method_name)}(params) {{
        // {TODO_MARKER}
        return {{ message: {string_literal(PLACEHOLDER_MESSAGE)} }};
    }}
}}
'''
