"""ASP.NET Core emitter: partial controller classes.

The generated half binds the route and the [Authorize] attribute and calls
a partial method; the developer implements that method in the partner half.
"""

from responsive_backend.errors import GenerationError
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

NAMESPACE = "Controllers"

# Verbs with a dedicated Http*Attribute in ASP.NET Core
HTTP_ATTRIBUTES = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}


@register_emitter
class CSharpEmitter(Emitter):
    name = "csharp"
    file_extension = "cs"
    generated_dir = "src/GeneratedControllers"
    partner_dir = "src/Controllers"

    def generated_filename(self, type_name: str) -> str:
        return f"{type_name}.Generated.cs"

    def render_auth(self, policy: AuthPolicy) -> str:
        if not policy.restrict_roles:
            return "[Authorize]"
        for role in policy.roles:
            if "," in role:
                raise GenerationError(f"role '{role}' contains ',' which [Authorize(Roles)] cannot express")
        return f"[Authorize(Roles = {string_literal(','.join(policy.roles))})]"

    def _verb_attribute(self, verb: str | None) -> str | None:
        if verb is None:
            return None
        if verb in HTTP_ATTRIBUTES:
            return f"[Http{verb.capitalize()}]"
        return f"[AcceptVerbs({string_literal(verb)})]"

    def render_generated(self, ctx: EndpointContext) -> str:
        method_lines = []
        verb_attribute = self._verb_attribute(ctx.verb)
        if verb_attribute:
            method_lines.append(f"        {verb_attribute}")
        method_lines.append(f"        public IActionResult {ctx.method_name}()")
        method_block = "\n".join(method_lines)

        return f'''// <auto-generated>
// {GENERATED_HEADER}
// </auto-generated>
using Microsoft.AspNetCore.Authorization;
using Microsoft.AspNetCore.Mvc;

namespace {NAMESPACE}
{{
    {self.render_auth(ctx.auth)}
    [ApiController]
    [Route({string_literal(ctx.path)})]
    public partial class {ctx.type_name} : ControllerBase
    {{
{method_block}
        {{
            return {ctx.method_name}Implementation();
        }}

        private partial IActionResult {ctx.method_name}Implementation();
    }}
}}
'''

    def render_partner(self, ctx: EndpointContext) -> str:
        return f'''using Microsoft.AspNetCore.Mvc;

namespace {NAMESPACE}
{{
    public partial class {ctx.type_name}
    {{
        private partial IActionResult {ctx.method_name}Implementation()
        {{
            // {TODO_MARKER}
            return Ok(new {{ message = {string_literal(PLACEHOLDER_MESSAGE)} }});
        }}
    }}
}}
'''
