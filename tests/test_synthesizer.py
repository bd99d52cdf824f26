import pytest

from sls_openapi_models.documentation.registry import ModelRegistry
from sls_openapi_models.documentation.synthesizer import ModelSynthesizer, model_prefix, upper_first


def _make_synthesizer(namespace: str = "Api") -> tuple[ModelSynthesizer, ModelRegistry, list[str]]:
    calls: list[str] = []

    def resolve(name: str) -> dict:
        calls.append(name)
        return {"type": "object", "title": name}

    registry = ModelRegistry({}, resolve)
    return ModelSynthesizer(registry, namespace), registry, calls


class TestModelPrefix:
    def test_upper_first_only_touches_first_char(self):
        assert upper_first("getUserById") == "GetUserById"
        assert upper_first("") == ""

    def test_prefix(self):
        assert model_prefix("Api", "getUser") == "Api.GetUser"

    def test_prefix_without_namespace(self):
        assert model_prefix("", "getUser") == "GetUser"


class TestSynthesize:
    def test_get_registers_response_only(self):
        synth, registry, _ = _make_synthesizer()
        http_event = {"method": "get", "documentation": {"summary": "Get user"}}
        synth.synthesize(http_event, "getUser")

        assert registry.names == ["Api.GetUser.Response"]
        doc = http_event["documentation"]
        assert doc["summary"] == "Get user"
        assert "requestModels" not in doc
        assert doc["methodResponses"] == [
            {
                "statusCode": 200,
                "responseBody": {"description": ""},
                "responseModels": {"application/json": "Api.GetUser.Response"},
            }
        ]

    @pytest.mark.parametrize("method", ["post", "PUT", "Patch"])
    def test_write_methods_register_request_and_response(self, method):
        synth, registry, _ = _make_synthesizer()
        http_event = {"method": method, "documentation": {}}
        synth.synthesize(http_event, "saveUser")

        assert registry.names == ["Api.SaveUser.Request.Body", "Api.SaveUser.Response"]
        doc = http_event["documentation"]
        assert doc["requestModels"] == {"application/json": "Api.SaveUser.Request.Body"}
        assert doc["requestBody"] == {"description": ""}
        assert doc["methodResponses"][0]["statusCode"] == 200

    def test_delete_overwrites_method_responses(self):
        synth, registry, calls = _make_synthesizer()
        http_event = {
            "method": "DELETE",
            "documentation": {"methodResponses": [{"statusCode": 200}, {"statusCode": 404}]},
        }
        synth.synthesize(http_event, "removeUser")

        assert http_event["documentation"]["methodResponses"] == [{"statusCode": 204, "responseModels": {}}]
        assert registry.names == []
        assert calls == []

    def test_unsupported_method_is_noop(self):
        synth, registry, calls = _make_synthesizer()
        http_event = {"method": "options", "documentation": {"summary": "CORS"}}
        synth.synthesize(http_event, "cors")
        assert http_event["documentation"] == {"summary": "CORS"}
        assert registry.names == []
        assert calls == []

    def test_repeated_synthesis_is_idempotent(self):
        synth, registry, calls = _make_synthesizer()
        first = {"method": "post", "documentation": {}}
        second = {"method": "post", "documentation": {}}
        synth.synthesize(first, "createOrder")
        synth.synthesize(second, "createOrder")

        assert first["documentation"] == second["documentation"]
        assert registry.names == ["Api.CreateOrder.Request.Body", "Api.CreateOrder.Response"]
        assert calls == ["Api.CreateOrder.Request.Body", "Api.CreateOrder.Response"]
