from pathlib import Path

import pytest

from responsive_backend.definition.base import ApiDefinition, AuthDefinition, Endpoint
from responsive_backend.definition.loader import load_definition, parse_definition
from responsive_backend.errors import DefinitionMalformedError, DefinitionMissingError

FIXTURES = Path(__file__).parent / "fixtures"


class TestEndpoint:
    def test_create_minimal_endpoint(self):
        ep = Endpoint(path="/users", method="GET")
        assert ep.description == ""
        assert ep.auth is None
        assert ep.response == {}

    def test_roles_default_to_empty(self):
        auth = AuthDefinition(enforce=True)
        assert auth.roles == []

    def test_null_roles_mean_no_restriction(self):
        auth = AuthDefinition.model_validate({"enforce": True, "roles": None})
        assert auth.roles == []

    def test_endpoint_is_immutable(self):
        ep = Endpoint(path="/users", method="GET")
        with pytest.raises(Exception):
            ep.path = "/other"


class TestLoadDefinition:
    def test_load_sample(self):
        api = load_definition(FIXTURES / "api.yaml")
        assert api.title == "Sample API"
        assert api.version == "1.0"
        assert [e.path for e in api.endpoints] == ["/users/{id}", "/orders", "/reports"]

    def test_auth_and_response_parsed(self):
        api = load_definition(FIXTURES / "api.yaml")
        users = api.endpoints[0]
        assert users.auth.enforce is True
        assert users.auth.roles == ["admin", "support"]
        assert users.response[200].body == {"id": "int", "name": "string", "email": "string"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(DefinitionMissingError) as exc:
            load_definition(tmp_path / "api" / "api.yaml")
        assert "rb init" in str(exc.value)

    def test_invalid_yaml(self):
        with pytest.raises(DefinitionMalformedError) as exc:
            parse_definition("endpoints: [invalid\n")
        assert "YAMLError" in str(exc.value)

    def test_non_mapping_document(self):
        with pytest.raises(DefinitionMalformedError):
            parse_definition("- just\n- a list\n")

    def test_wrong_field_type(self):
        with pytest.raises(DefinitionMalformedError) as exc:
            parse_definition("endpoints:\n  - path: /x\n    auth: {enforce: [1, 2]}\n")
        assert "enforce" in str(exc.value)

    def test_string_status_codes_become_ints(self):
        api = parse_definition("endpoints:\n  - path: /x\n    method: GET\n    response:\n      '404':\n        json: {}\n")
        assert 404 in api.endpoints[0].response

    def test_invalid_utf8(self, tmp_path):
        bad = tmp_path / "api.yaml"
        bad.write_bytes(b"title: \xff\xfe bad\n")
        with pytest.raises(DefinitionMalformedError) as exc:
            load_definition(bad)
        assert "UTF-8" in str(exc.value)

    def test_version_keeps_trailing_zero(self):
        api = parse_definition("title: Orders\nversion: 1.10\n")
        assert api.version == "1.10"

    def test_yaml_11_scalars_in_title_and_version(self):
        api = parse_definition("title: yes\nversion: 2024-01-31\n")
        assert api.title == "true"
        assert api.version == "2024-01-31"

    def test_integer_version(self):
        assert parse_definition("version: 2\n").version == "2"

    def test_booleans_still_parsed(self):
        api = parse_definition("endpoints:\n  - path: /x\n    auth: {enforce: yes, roles: [admin]}\n")
        assert api.endpoints[0].auth.enforce is True

    def test_no_endpoints(self):
        api = parse_definition("title: Empty\n")
        assert api == ApiDefinition(title="Empty")
        assert api.endpoints == []
