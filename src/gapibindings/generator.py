"""
Generate binding packages from discovery documents.

For each API a package with three modules is written:
    __init__.py    constants, OAuth scopes and the Service
    resources.py   one dataclass per schema
    service.py     one call builder per method, one service per resource and the API Service
Run as:
    gapibindings-gen --discovery discovery/storage-v1beta2.json --out src/gapibindings
    gapibindings-gen --api blogger --version v3 --out src/gapibindings
"""
from pathlib import Path
from typing import Dict, List, Tuple
import argparse
import keyword
import logging
import re
import sys

import chevron

from .discovery import Document, Method, Parameter, Property, Resource, fetch_document, read_document
from .templates import CallTmpl, PackageInitTmpl, ResourceServiceTmpl, ResourcesTmpl, ServiceTmpl

log = logging.getLogger(__name__)

# names the Call base classes already use
_CALL_RESERVED = {"fields", "context", "do", "doHeader", "download", "media", "resumableMedia",
                  "progressUpdater", "pages", "ifNoneMatch"}


def _doc(s: str) -> str:
    """One line of docstring text."""
    s = " ".join(str(s).split())
    return s.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')


def _cap(s: str) -> str:
    return s[:1].upper() + s[1:]


def _lower(s: str) -> str:
    return s[:1].lower() + s[1:]


def class_name(name: str) -> str:
    """CamelCase class name, e.g. blog_user_info -> BlogUserInfo, objectAccessControls -> ObjectAccessControls"""
    return "".join(_cap(p) for p in re.split(r"[^0-9a-zA-Z]+", name) if p)


def identifier(name: str, reserved: set|None = None) -> str:
    """Valid python identifier for an API name, keywords and reserved names get a trailing _"""
    n = re.sub(r"[^0-9a-zA-Z_]", "_", name)
    if n[:1].isdigit():
        n = "_" + n
    if keyword.iskeyword(n) or (reserved and n in reserved):
        n += "_"
    return n


def scope_const(url: str) -> str:
    """https://www.googleapis.com/auth/blogger.readonly -> BLOGGER_READONLY_SCOPE"""
    name = url.split("/auth/", 1)[1] if "/auth/" in url else url.rsplit("/", 1)[-1]
    return re.sub(r"[^0-9a-zA-Z]+", "_", name).strip("_").upper() + "_SCOPE"


_SCALARS = {"string": "str", "integer": "int", "number": "float", "boolean": "bool"}


class _SchemaClasses():
    """
    Works out the resource dataclasses of a document, inline objects included, and orders
    them so each is defined after the classes it references.
    """
    def __init__(self, doc: Document) -> None:
        self.doc = doc
        self.defs = {}
        for s in doc.schemas.values():
            self._collect(class_name(s.id), _doc(s.description) or f"{s.id} resource of the {_doc(doc.title)}.",
                          s.properties)

    def _collect(self, name: str, doc: str, props: List[Property]) -> None:
        self.defs[name] = (doc, props)
        for p in props:
            inner = p.items if p.type == "array" and p.items is not None else p
            if inner.is_inline_object:
                self._collect(name + class_name(p.name), _doc(p.description) or f"{name}.{p.name}",
                              inner.properties)

    def type_of(self, parent: str, p: Property) -> str:
        if p.ref:
            return class_name(p.ref)
        if p.is_inline_object:
            return parent + class_name(p.name)
        if p.type == "array":
            return f"List[{self.type_of(parent, p.items) if p.items is not None else 'object'}]"
        if p.type == "object":
            return "dict"
        if p.is_int64:
            return "int"
        return _SCALARS.get(p.type, "object")

    def deps(self, parent: str, p: Property) -> List[str]:
        inner = p.items if p.type == "array" and p.items is not None else p
        if inner.ref:
            return [class_name(inner.ref)]
        if inner.is_inline_object:
            return [parent + class_name(p.name)]
        return []

    def ordered(self) -> List[dict]:
        out = []
        state = {}

        def visit(name: str) -> None:
            if name in state or name not in self.defs:
                return
            state[name] = "visiting"
            doc, props = self.defs[name]
            for p in props:
                for d in self.deps(name, p):
                    visit(d)
            out.append(self._view(name, doc, props, state))
            state[name] = "done"

        for name in sorted(self.defs):
            visit(name)
        return out

    def _view(self, name: str, doc: str, props: List[Property], state: dict) -> dict:
        fields = []
        int64 = []
        json_names = []
        for p in props:
            attr = identifier(p.name)
            if attr != p.name:
                json_names.append(f'"{attr}": "{p.name}"')
            annotation = self.type_of(name, p) + "|None"
            if any(state.get(d, "") != "done" for d in self.deps(name, p)):
                annotation = f'"{annotation}"'
            fields.append({'name': attr, 'annotation': annotation})
            if p.is_int64 or (p.type == "array" and p.items is not None and p.items.is_int64):
                int64.append(f'"{attr}"')
        return {
            'name': name,
            'doc': doc,
            'has_int64': bool(int64),
            'int64': ", ".join(int64) + ("," if len(int64) == 1 else ""),
            'has_json_names': bool(json_names),
            'json_names': "{" + ", ".join(json_names) + "}",
            'fields': fields,
        }


def _param_annotation(p: Parameter) -> str:
    if p.type == "string" and p.format in ("int64", "uint64"):
        return "int"
    if p.type == "string" and p.format == "date-time":
        return "str|datetime.datetime"
    return _SCALARS.get(p.type, "str")


def _choices(p: Parameter) -> str:
    if not p.enum:
        return ""
    return ", (" + ", ".join(f'"{e}"' for e in p.enum) + ("," if len(p.enum) == 1 else "") + ")"


class _Bindings():
    def __init__(self, doc: Document) -> None:
        self.doc = doc
        self.schemas = _SchemaClasses(doc)
        self.uses_datetime = False
        self.uses_list = False
        self.call_bases = {"ApiService", "ResourceService"}
        self.resource_imports = set()

    def _response_has_next_page(self, m: Method) -> bool:
        s = self.doc.schemas.get(m.response, None)
        return s is not None and any(p.name == "nextPageToken" for p in s.properties)

    def call_view(self, prefix: str, m: Method) -> Tuple[dict, dict]:
        cname = prefix + class_name(m.name) + "Call"
        bases = []
        if m.media_upload is not None:
            bases.append("MediaUploadCall")
        elif m.supports_media_download:
            bases.append("MediaDownloadCall")
        if m.parameter("pageToken") is not None and self._response_has_next_page(m):
            bases.append("PagedCall")
        if not bases:
            bases.append("Call")
        self.call_bases.update(bases)

        ctor_params = []
        path_params = []
        required_query = []
        args = []
        for p in m.required_parameters:
            arg = identifier(p.name, {"service"})
            annotation = _param_annotation(p)
            if p.repeated:
                annotation = f"List[{annotation}]"
                self.uses_list = True
            if "datetime" in annotation:
                self.uses_datetime = True
            ctor_params.append({'name': arg, 'annotation': annotation})
            args.append(arg)
            if p.location == "path":
                path_params.append(f'"{p.name}": {arg}')
            else:
                fn = "_add" if p.repeated else "_set"
                required_query.append({'call': f'{fn}("{p.name}", {arg}{_choices(p)})'})
        body_name = ""
        if m.request:
            rcls = class_name(m.request)
            self.resource_imports.add(rcls)
            body_name = _lower(rcls)
            while body_name in args or keyword.iskeyword(body_name) or body_name == "service":
                body_name += "Body"
            ctor_params.append({'name': body_name, 'annotation': rcls})
            args.append(body_name)
        response = "None"
        if m.response:
            response = class_name(m.response)
            self.resource_imports.add(response)

        setters = []
        for p in m.optional_parameters:
            name = identifier(p.name, _CALL_RESERVED)
            annotation = _param_annotation(p)
            if "datetime" in annotation:
                self.uses_datetime = True
            if p.repeated:
                signature = f"*{name}: {annotation}"
                call = f'_add("{p.name}", {name}{_choices(p)})'
            else:
                signature = f"{name}: {annotation}"
                call = f'_set("{p.name}", {name}{_choices(p)})'
            enum_lines = []
            for i, e in enumerate(p.enum):
                d = p.enum_descriptions[i] if i < len(p.enum_descriptions) else ""
                enum_lines.append(f'"{e}" - {_doc(d)}' if d else f'"{e}"')
            setters.append({
                'name': name,
                'signature': signature,
                'description': _doc(p.description) or p.name,
                'enum_lines': enum_lines,
                'call': call,
            })
        view = {
            'class_name': cname,
            'bases': ", ".join(bases),
            'description': _doc(m.description) or m.id,
            'http_method': m.http_method,
            'path': m.path,
            'id': m.id,
            'response': response,
            'ctor_params': ctor_params,
            'path_params': "{" + ", ".join(path_params) + "}" if path_params else "None",
            'has_body': bool(body_name),
            'body_name': body_name,
            'required_query': required_query,
            'setters': setters,
            'if_none_match': m.http_method == "GET",
        }
        method_view = {
            'name': identifier(m.name),
            'args': ctor_params,
            'call_class': cname,
            'description': _doc(m.description) or m.id,
        }
        return view, method_view

    def resource_views(self, resources: List[Resource], prefix: str = "") -> Tuple[List[str], List[str], List[dict]]:
        """
        Rendered calls and resource services, children before parents, plus the attributes
        to hang off the parent.
        """
        calls = []
        services = []
        attrs = []
        for r in resources:
            rprefix = prefix + class_name(r.name)
            sub_calls, sub_services, sub_attrs = self.resource_views(r.resources, rprefix)
            calls.extend(sub_calls)
            services.extend(sub_services)
            methods = []
            for m in r.methods:
                view, method_view = self.call_view(rprefix, m)
                calls.append(chevron.render(CallTmpl, view))
                methods.append(method_view)
            services.append(chevron.render(ResourceServiceTmpl, {
                'class_name': rprefix + "Service",
                'has_subresources': bool(sub_attrs),
                'subresources': sub_attrs,
                'methods': methods,
            }))
            attrs.append({'attr': identifier(r.name), 'class_name': rprefix + "Service"})
        return calls, services, attrs

    def header(self) -> dict:
        return {
            'title': _doc(self.doc.title or self.doc.name),
            'version': self.doc.version,
            'id': self.doc.id,
            'api_name': self.doc.name,
            'documentation_link': self.doc.documentation_link or self.doc.base_url,
        }

    def render(self) -> Dict[str, str]:
        header = self.header()
        resources = chevron.render(ResourcesTmpl, dict(header, classes=self.schemas.ordered()))
        calls, services, attrs = self.resource_views(self.doc.resources)
        typing_imports = ["List", "Self"] if self.uses_list else ["Self"]
        service = chevron.render(ServiceTmpl, dict(
            header,
            typing_imports=", ".join(typing_imports),
            uses_datetime=self.uses_datetime,
            call_imports=", ".join(sorted(self.call_bases)),
            resource_imports=sorted(self.resource_imports),
            calls="".join(calls),
            resource_services="".join(services),
            root_url=self.doc.root_url,
            service_path=self.doc.service_path,
            resources=attrs,
        ))
        scopes = [{'const': scope_const(s.url), 'url': s.url, 'description': _doc(s.description) or s.url}
                  for s in self.doc.scopes]
        consts = [s['const'] for s in scopes]
        init = chevron.render(PackageInitTmpl, dict(
            header,
            base_path=self.doc.base_url,
            scopes=scopes,
            scope_tuple=", ".join(consts) + ("," if len(consts) == 1 else ""),
        ))
        return {"__init__.py": init, "resources.py": resources, "service.py": service}


def package_name(doc: Document) -> str:
    return identifier(doc.name.lower())


def render(doc: Document) -> Dict[str, str]:
    """Module name -> source for the binding package of doc."""
    return _Bindings(doc).render()


def generate(doc: Document, out_dir: Path|str) -> List[Path]:
    """
    Write the binding package for doc under out_dir, returning the files written.
    """
    out = out_dir if isinstance(out_dir, Path) else Path(str(out_dir))
    pkg = out / package_name(doc)
    pkg.mkdir(parents=True, exist_ok=True)
    written = []
    for name, src in render(doc).items():
        p = pkg / name
        log.debug(f"writing {p}")
        with open(p, 'w', encoding='utf-8') as f:
            f.write(src)
        written.append(p)
    log.info(f"generated {doc.id} into {pkg}: {len(doc.schemas)} schemas, {len(doc.all_methods())} methods")
    return written


def main(argv: List[str]|None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate Python bindings from Google API discovery documents.")
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--discovery", type=Path, nargs="+", help="Local discovery document(s).")
    src.add_argument("--api", help="API name to fetch the discovery document for, e.g. blogger")
    parser.add_argument("--version", help="API version, required with --api, e.g. v3")
    parser.add_argument("--out", type=Path, required=True,
                        help="Directory the API packages are written under (created if missing).")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    if args.api and not args.version:
        parser.error("--version is required with --api")

    docs = [read_document(p) for p in args.discovery] if args.discovery else [fetch_document(args.api, args.version)]
    for doc in docs:
        for p in generate(doc, args.out):
            print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
