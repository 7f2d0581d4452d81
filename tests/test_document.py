import json
from pathlib import Path

from apidoc_swagger.config import BuildOptions
from apidoc_swagger.generator.document import DocumentBuilder, group_by_url
from apidoc_swagger.parser.apidoc import load_operations, load_project
from apidoc_swagger.parser.base import ApiOperation, ProjectInfo

FIXTURES = Path(__file__).parent / "fixtures"


def _collect_refs(node) -> list[str]:
    if isinstance(node, dict):
        refs = [node["$ref"]] if isinstance(node.get("$ref"), str) else []
        for value in node.values():
            refs.extend(_collect_refs(value))
        return refs
    if isinstance(node, list):
        return [ref for item in node for ref in _collect_refs(item)]
    return []


def _dangling_refs(document: dict) -> list[str]:
    prefix = "#/definitions/"
    return [
        ref for ref in _collect_refs(document)
        if ref[len(prefix):] not in document["definitions"]
    ]


def _op(verb: str, url: str, name: str = "Op", group: str = "Default", **extra) -> ApiOperation:
    return ApiOperation.model_validate({"type": verb, "url": url, "name": name, "group": group, **extra})


class TestGroupByUrl:
    def test_first_appearance_order(self):
        ops = [_op("get", "/b"), _op("get", "/a"), _op("post", "/b")]
        groups = group_by_url(ops)
        assert list(groups) == ["/b", "/a"]
        assert [o.method for o in groups["/b"]] == ["get", "post"]


class TestDocumentBuilder:
    def test_metadata(self):
        project = ProjectInfo(name="svc", version="2.0.1", description="desc", author="a@b.c")
        doc = DocumentBuilder(project).build([])
        assert doc["swagger"] == "2.0"
        assert doc["info"] == {
            "title": "svc",
            "version": "2.0.1",
            "description": "desc",
            "contact": {"email": "a@b.c"},
        }
        assert doc["paths"] == {}
        assert doc["definitions"] == {}
        assert "host" not in doc

    def test_options_add_host_base_path_schemes(self):
        options = BuildOptions(host="api.example.com", base_path="/v1", schemes=["https"])
        doc = DocumentBuilder(options=options).build([])
        assert doc["host"] == "api.example.com"
        assert doc["basePath"] == "/v1"
        assert doc["schemes"] == ["https"]

    def test_del_verb_key_normalized(self):
        doc = DocumentBuilder().build([_op("del", "/pets/:id")])
        assert list(doc["paths"]["/pets/:id"]) == ["delete"]

    def test_tags_in_first_appearance_order(self):
        ops = [_op("get", "/a", group="Pets"), _op("get", "/b", group="Users"), _op("post", "/a", group="Pets")]
        assert DocumentBuilder().build(ops)["tags"] == [{"name": "Pets"}, {"name": "Users"}]

    def test_shared_object_names_merge_across_operations(self):
        ops = [
            _op("post", "/a", name="A", parameter={"fields": {"Parameter": [
                {"field": "user", "type": "Object"},
                {"field": "user.name", "type": "String"},
            ]}}),
            _op("post", "/b", name="B", parameter={"fields": {"Parameter": [
                {"field": "user", "type": "Object"},
                {"field": "user.email", "type": "String", "optional": True},
            ]}}),
        ]
        user = DocumentBuilder().build(ops)["definitions"]["user"]
        assert list(user["properties"]) == ["name", "email"]
        assert user["required"] == ["name"]

    def test_builds_do_not_share_definitions(self):
        builder = DocumentBuilder()
        first = builder.build([_op("post", "/a", name="A")])
        second = builder.build([_op("post", "/b", name="B")])
        assert list(first["definitions"]) == ["A"]
        assert list(second["definitions"]) == ["B"]

    def test_independent_builds_are_identical(self):
        operations = load_operations(FIXTURES / "api_data.json")
        project = load_project(FIXTURES / "api_project.json")
        first = DocumentBuilder(project).build(operations)
        second = DocumentBuilder(project).build(operations)
        assert json.dumps(first["definitions"]) == json.dumps(second["definitions"])

    def test_project_url_sets_location(self):
        project = ProjectInfo(name="svc", url="https://api.example.com/v1/")
        doc = DocumentBuilder(project).build([])
        assert doc["host"] == "api.example.com"
        assert doc["basePath"] == "/v1"
        assert doc["schemes"] == ["https"]

    def test_options_override_project_url(self):
        project = ProjectInfo(name="svc", url="https://api.example.com/v1")
        options = BuildOptions(host="staging.example.com", schemes=["http"])
        doc = DocumentBuilder(project, options).build([])
        assert doc["host"] == "staging.example.com"
        assert doc["basePath"] == "/v1"
        assert doc["schemes"] == ["http"]


class TestReferencesResolve:
    def test_fixture_has_no_dangling_refs(self):
        operations = load_operations(FIXTURES / "api_data.json")
        doc = DocumentBuilder().build(operations)
        assert _collect_refs(doc)
        assert _dangling_refs(doc) == []

    def test_array_property_without_sub_fields(self):
        op = _op("post", "/orders", name="PostOrder", parameter={"fields": {"Parameter": [
            {"field": "name", "type": "String"},
            {"field": "tags", "type": "Array"},
        ]}})
        assert _dangling_refs(DocumentBuilder().build([op])) == []

    def test_object_property_without_sub_fields(self):
        op = _op("post", "/users", name="PostUser", parameter={"fields": {"Parameter": [
            {"field": "user", "type": "Object"},
            {"field": "user.address", "type": "Object", "optional": True},
        ]}})
        assert _dangling_refs(DocumentBuilder().build([op])) == []

    def test_success_block_without_success_200(self):
        op = _op("get", "/x", name="GetX", success={"fields": {"Success 201": [
            {"field": "id", "type": "String"},
        ]}})
        assert _dangling_refs(DocumentBuilder().build([op])) == []
