import importlib.util
import json
import sys
from pathlib import Path

import pytest

from gapibindings.discovery import parse_document, read_document
from gapibindings.generator import class_name, generate, identifier, main, render, scope_const
from gapibindings.media import MIN_CHUNK_SIZE

from conftest import FakeSession, make_response

ROOT = Path(__file__).parent.parent
DISCOVERY = ROOT / "discovery"
BINDINGS = ROOT / "src" / "gapibindings"

TINY = {
    "kind": "discovery#restDescription",
    "id": "tiny:v1",
    "name": "tiny",
    "version": "v1",
    "title": "Tiny API",
    "rootUrl": "https://tiny.example.com/",
    "servicePath": "tiny/v1/",
    "auth": {"oauth2": {"scopes": {
        "https://www.googleapis.com/auth/tiny.readonly": {"description": "View tiny things"},
        "https://www.googleapis.com/auth/tiny": {"description": "Manage tiny things"}}}},
    "schemas": {
        "Thing": {"id": "Thing", "type": "object", "properties": {
            "id": {"type": "string", "format": "int64"},
            "name": {"type": "string", "description": "The \"name\" of the thing"},
            "class": {"type": "string"},
            "owner": {"type": "object", "properties": {"email": {"type": "string"}}},
            "parts": {"type": "array", "items": {"$ref": "Part"}},
            "labels": {"type": "object", "additionalProperties": {"type": "string"}}}},
        "Part": {"id": "Part", "type": "object", "properties": {
            "size": {"type": "string", "format": "uint64"},
            "ratio": {"type": "number"}}},
        "Things": {"id": "Things", "type": "object", "properties": {
            "items": {"type": "array", "items": {"$ref": "Thing"}},
            "nextPageToken": {"type": "string"}}}},
    "resources": {
        "things": {
            "methods": {
                "get": {"id": "tiny.things.get", "path": "things/{thingId}", "httpMethod": "GET",
                        "parameters": {"thingId": {"type": "string", "required": True, "location": "path"},
                                       "view": {"type": "string", "location": "query", "enum": ["BASIC", "FULL"],
                                                "enumDescriptions": ["Basic view", "Full view"]}},
                        "parameterOrder": ["thingId"], "response": {"$ref": "Thing"},
                        "supportsMediaDownload": True},
                "list": {"id": "tiny.things.list", "path": "things", "httpMethod": "GET",
                         "parameters": {"owner": {"type": "string", "required": True, "location": "query"},
                                        "pageToken": {"type": "string", "location": "query"},
                                        "tag": {"type": "string", "repeated": True, "location": "query"},
                                        "since": {"type": "string", "format": "date-time", "location": "query"}},
                         "parameterOrder": ["owner"], "response": {"$ref": "Things"}},
                "insert": {"id": "tiny.things.insert", "path": "things", "httpMethod": "POST",
                           "request": {"$ref": "Thing"}, "response": {"$ref": "Thing"},
                           "mediaUpload": {"accept": ["*/*"], "protocols": {
                               "simple": {"multipart": True, "path": "/upload/tiny/v1/things"},
                               "resumable": {"multipart": True, "path": "/resumable/upload/tiny/v1/things"}}}}},
            "resources": {
                "parts": {"methods": {
                    "delete": {"id": "tiny.things.parts.delete", "path": "things/{thingId}/parts/{part}",
                               "httpMethod": "DELETE",
                               "parameters": {"thingId": {"type": "string", "required": True, "location": "path"},
                                              "part": {"type": "string", "required": True, "location": "path"}},
                               "parameterOrder": ["thingId", "part"]}}}}}},
}


def load_package(pkg_dir: Path, name: str):
    """Import a generated package as gapibindings.<name> so its relative imports resolve."""
    full = f"gapibindings.{name}"
    for k in [k for k in sys.modules if k == full or k.startswith(full + ".")]:
        del sys.modules[k]
    spec = importlib.util.spec_from_file_location(full, pkg_dir / "__init__.py",
                                                  submodule_search_locations=[str(pkg_dir)])
    mod = importlib.util.module_from_spec(spec)
    sys.modules[full] = mod
    spec.loader.exec_module(mod)
    return mod


@pytest.fixture
def tiny(tmp_path):
    files = generate(parse_document(TINY), tmp_path)
    assert(sorted(p.name for p in files) == ["__init__.py", "resources.py", "service.py"])
    yield load_package(tmp_path / "tiny", "tiny")
    for k in [k for k in sys.modules if k.startswith("gapibindings.tiny")]:
        del sys.modules[k]


def test_names():
    assert(class_name("blog_user_info") == "BlogUserInfo")
    assert(class_name("objectAccessControls") == "ObjectAccessControls")
    assert(identifier("class") == "class_")
    assert(identifier("pages", {"pages"}) == "pages_")
    assert(identifier("3d") == "_3d")
    assert(scope_const("https://www.googleapis.com/auth/devstorage.full_control") == "DEVSTORAGE_FULL_CONTROL_SCOPE")


def test_package_module(tiny):
    assert(tiny.API_ID == "tiny:v1")
    assert(tiny.BASE_PATH == "https://tiny.example.com/tiny/v1/")
    assert(tiny.SCOPES == (tiny.TINY_SCOPE, tiny.TINY_READONLY_SCOPE))


def test_resources(tiny):
    res = sys.modules["gapibindings.tiny.resources"]
    t = res.Thing.from_base({"id": "5", "class": "big", "owner": {"email": "a@b"},
                             "parts": [{"size": "9", "ratio": 0.5}], "labels": {"k": "v"}})
    assert(t.id == 5)
    assert(t.class_ == "big")
    assert(isinstance(t.owner, res.ThingOwner))
    assert(t.parts[0].size == 9)
    assert(t.trim() == {"id": "5", "class": "big", "owner": {"email": "a@b"},
                        "parts": [{"size": "9", "ratio": 0.5}], "labels": {"k": "v"}})


def test_calls(tiny):
    session = FakeSession(make_response(200, {"items": [{"id": "1"}], "nextPageToken": "n"}),
                          make_response(200, {"items": [{"id": "2"}]}))
    svc = tiny.Service(session)
    call = svc.things.list("me").tag("a", "b")
    assert([t.id for page in call.pages() for t in page.items] == [1, 2])
    assert(session.sent[0].full_url == "https://tiny.example.com/tiny/v1/things?alt=json&owner=me&tag=a&tag=b")
    with pytest.raises(ValueError):
        svc.things.get("x").view("NONE")
    assert(hasattr(svc.things.get("x"), "download"))
    assert(hasattr(svc.things.insert(None), "resumableMedia"))
    assert(not hasattr(svc.things.insert(None), "download"))
    session.queue(make_response(204))
    assert(svc.things.parts.delete("t1", "p/1").do() is None)
    assert(session.sent[-1].url == "https://tiny.example.com/tiny/v1/things/t1/parts/p%2F1")


def test_upload_path(tiny):
    session = FakeSession(make_response(200, {"id": "3"}))
    svc = tiny.Service(session)
    thing = sys.modules["gapibindings.tiny.resources"].Thing(name="n")
    assert(svc.things.insert(thing).media(b"data", "text/plain").do().id == 3)
    assert(session.sent[0].url == "https://tiny.example.com/upload/tiny/v1/things")


@pytest.mark.parametrize("doc, pkg", [
    ("blogger-v3.json", "blogger"),
    ("coordinate-v1.json", "coordinate"),
    ("storage-v1beta2.json", "storage"),
])
def test_bundled_bindings_are_current(doc, pkg):
    rendered = render(read_document(DISCOVERY / doc))
    for name, src in rendered.items():
        compile(src, f"{pkg}/{name}", "exec")
        assert(src == (BINDINGS / pkg / name).read_text(encoding="utf-8"))


def test_main(tmp_path, capsys):
    p = tmp_path / "tiny.json"
    p.write_text(json.dumps(TINY), encoding="utf-8")
    assert(main(["--discovery", str(p), "--out", str(tmp_path / "out")]) == 0)
    assert((tmp_path / "out" / "tiny" / "service.py").exists())
    assert("service.py" in capsys.readouterr().out)


def test_main_api_needs_version(tmp_path):
    with pytest.raises(SystemExit):
        main(["--api", "tiny", "--out", str(tmp_path)])
