from sls_openapi_models.models import ModelDef, ParamDoc, Tag


class TestParamDoc:
    def test_default_schema(self):
        p = ParamDoc(name="id", required=True)
        assert p.to_entry() == {"name": "id", "required": True, "schema": {"type": "string"}}

    def test_schema_by_alias(self):
        p = ParamDoc(name="limit", required=False, schema={"type": "integer"})
        assert p.param_schema == {"type": "integer"}


class TestModelDef:
    def test_entry_uses_camel_case(self):
        m = ModelDef(name="Api.Foo.Response", json_schema={"type": "object"})
        assert m.to_entry() == {
            "name": "Api.Foo.Response",
            "contentType": "application/json",
            "schema": {"type": "object"},
        }

    def test_from_entry(self):
        entry = {"name": "Err", "contentType": "application/problem+json", "schema": {}}
        assert ModelDef(**entry).to_entry() == entry


class TestTag:
    def test_dump(self):
        assert Tag(name="Orders API", description="d").model_dump() == {"name": "Orders API", "description": "d"}
