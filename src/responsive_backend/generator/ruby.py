"""Sinatra emitter: a generated app class delegating to an implementation class."""

import json

from responsive_backend.generator.auth import AuthPolicy
from responsive_backend.generator.base import (
    GENERATED_HEADER,
    PLACEHOLDER_MESSAGE,
    TODO_MARKER,
    Emitter,
    EndpointContext,
    register_emitter,
)
from responsive_backend.generator.naming import to_route_params, to_snake_case

# Verbs Sinatra::Base exposes as class-level route helpers
SINATRA_VERBS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "LINK", "UNLINK"}
STANDARD_VERBS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def ruby_string(value: str) -> str:
    """Double-quoted Ruby literal with interpolation disabled.

    Non-ASCII characters stay raw: Ruby rejects the surrogate pairs that
    ASCII-only JSON uses for characters outside the BMP.
    """
    return json.dumps(value, ensure_ascii=False).replace("#", "\\#")


@register_emitter
class RubyEmitter(Emitter):
    name = "ruby"
    file_extension = "rb"
    generated_dir = "src/generated"
    partner_dir = "src/controllers"

    def render_auth(self, policy: AuthPolicy) -> list[str]:
        lines = ["before do authenticate_request end"]
        if policy.restrict_roles:
            roles = ", ".join(ruby_string(role) for role in policy.roles)
            lines.append(f"before do authorize_roles([{roles}]) end")
        return lines

    def _route_block(self, ctx: EndpointContext) -> list[str]:
        route = ruby_string(to_route_params(ctx.path))
        body = f"{ctx.type_name}Implementation.new.{to_snake_case(ctx.method_name)}(params)"

        if ctx.verb is None:
            return [
                f"%w[{' '.join(STANDARD_VERBS)}].each do |verb|",
                f"  send(:route, verb, {route}) do",
                f"    {body}",
                "  end",
                "end",
            ]
        if ctx.verb in SINATRA_VERBS:
            opener = f"{ctx.verb.lower()} {route} do"
        else:
            opener = f"send(:route, {ruby_string(ctx.verb)}, {route}) do"
        return [opener, f"  {body}", "end"]

    def render_generated(self, ctx: EndpointContext) -> str:
        lines = [
            f"# {GENERATED_HEADER}",
            "require 'sinatra/base'",
            f"require_relative '../controllers/{ctx.type_name}'",
            "",
            f"class {ctx.type_name} < Sinatra::Base",
        ]
        lines.extend(f"  {line}" for line in self.render_auth(ctx.auth))
        lines.append("")
        lines.extend(f"  {line}" for line in self._route_block(ctx))
        lines.append("end")
        return "\n".join(lines) + "\n"

    def render_partner(self, ctx: EndpointContext) -> str:
        return f'''require 'json'

class {ctx.type_name}Implementation
  def {to_snake_case(ctx.method_name)}(params)
    # {TODO_MARKER}
    {{ message: {ruby_string(PLACEHOLDER_MESSAGE)} }}.to_json
  end
end
'''
