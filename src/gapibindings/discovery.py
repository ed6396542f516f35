"""
Parsing of Google API discovery documents, the machine readable service descriptions
the bindings are generated from.
https://developers.google.com/discovery/v1/reference/apis
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List
import json
import logging

import requests
import googleapiclient.discovery_cache as gapi_discovery_cache

from .errors import TransportError
from .googleapi import check_response

log = logging.getLogger(__name__)

DISCOVERY_URL = "https://www.googleapis.com/discovery/v1/apis/{api}/{version}/rest"


@dataclass
class Scope():
    url: str
    description: str = field(default="")


@dataclass
class Property():
    """
    A schema property, or the item type of an array property.
    Inline object definitions keep their properties, references only the ref name.
    """
    name: str
    type: str = field(default="")
    format: str = field(default="")
    ref: str = field(default="")
    description: str = field(default="")
    items: "Property|None" = field(default=None)
    properties: List["Property"] = field(default_factory=list)
    additional: "Property|None" = field(default=None)

    @property
    def is_int64(self) -> bool:
        return self.type == "string" and self.format in ("int64", "uint64")

    @property
    def is_inline_object(self) -> bool:
        return self.type == "object" and not self.ref and bool(self.properties)


@dataclass
class Schema():
    id: str
    type: str = field(default="object")
    description: str = field(default="")
    properties: List[Property] = field(default_factory=list)


@dataclass
class Parameter():
    name: str
    type: str = field(default="string")
    format: str = field(default="")
    location: str = field(default="query")
    required: bool = field(default=False)
    repeated: bool = field(default=False)
    description: str = field(default="")
    enum: List[str] = field(default_factory=list)
    enum_descriptions: List[str] = field(default_factory=list)


@dataclass
class MediaUpload():
    accept: List[str] = field(default_factory=list)
    max_size: str = field(default="")
    simple_path: str = field(default="")
    resumable_path: str = field(default="")


@dataclass
class Method():
    id: str
    name: str
    http_method: str = field(default="GET")
    path: str = field(default="")
    description: str = field(default="")
    parameters: List[Parameter] = field(default_factory=list)
    parameter_order: List[str] = field(default_factory=list)
    request: str = field(default="")
    response: str = field(default="")
    scopes: List[str] = field(default_factory=list)
    supports_media_download: bool = field(default=False)
    supports_subscription: bool = field(default=False)
    media_upload: MediaUpload|None = field(default=None)

    def parameter(self, name: str) -> Parameter|None:
        for p in self.parameters:
            if p.name == name:
                return p
        return None

    @property
    def required_parameters(self) -> List[Parameter]:
        """Required parameters in parameterOrder, which is the order of the call arguments."""
        out = [self.parameter(n) for n in self.parameter_order]
        out = [p for p in out if p is not None]
        out.extend(p for p in self.parameters if p.required and p.name not in self.parameter_order)
        return out

    @property
    def optional_parameters(self) -> List[Parameter]:
        required = {p.name for p in self.required_parameters}
        return sorted((p for p in self.parameters if p.name not in required), key=lambda p: p.name)

    @property
    def path_parameters(self) -> List[Parameter]:
        return [p for p in self.required_parameters if p.location == "path"]


@dataclass
class Resource():
    name: str
    methods: List[Method] = field(default_factory=list)
    resources: List["Resource"] = field(default_factory=list)


@dataclass
class Document():
    id: str
    name: str
    version: str
    title: str = field(default="")
    description: str = field(default="")
    documentation_link: str = field(default="")
    root_url: str = field(default="https://www.googleapis.com/")
    service_path: str = field(default="")
    scopes: List[Scope] = field(default_factory=list)
    schemas: Dict[str, Schema] = field(default_factory=dict)
    resources: List[Resource] = field(default_factory=list)

    @property
    def base_url(self) -> str:
        return self.root_url + self.service_path

    def all_methods(self) -> List[Method]:
        out = []
        todo = list(self.resources)
        while todo:
            r = todo.pop(0)
            out.extend(r.methods)
            todo.extend(r.resources)
        return out


def _property(name: str, d: dict) -> Property:
    p = Property(name=name, type=d.get('type', ""), format=d.get('format', ""),
                 ref=d.get('$ref', ""), description=d.get('description', ""))
    if 'items' in d:
        p.items = _property(name, d['items'])
    if 'additionalProperties' in d:
        p.additional = _property(name, d['additionalProperties'])
    for k, v in sorted(d.get('properties', {}).items()):
        p.properties.append(_property(k, v))
    if p.properties and not p.type:
        p.type = "object"
    return p


def _parameter(name: str, d: dict) -> Parameter:
    return Parameter(name=name, type=d.get('type', "string"), format=d.get('format', ""),
                     location=d.get('location', "query"), required=bool(d.get('required', False)),
                     repeated=bool(d.get('repeated', False)), description=d.get('description', ""),
                     enum=list(d.get('enum', [])), enum_descriptions=list(d.get('enumDescriptions', [])))


def _method(name: str, d: dict) -> Method:
    m = Method(id=d['id'], name=name, http_method=d.get('httpMethod', "GET"), path=d.get('path', ""),
               description=d.get('description', ""),
               parameters=[_parameter(k, v) for k, v in sorted(d.get('parameters', {}).items())],
               parameter_order=list(d.get('parameterOrder', [])),
               request=d.get('request', {}).get('$ref', ""), response=d.get('response', {}).get('$ref', ""),
               scopes=list(d.get('scopes', [])),
               supports_media_download=bool(d.get('supportsMediaDownload', False)),
               supports_subscription=bool(d.get('supportsSubscription', False)))
    mu = d.get('mediaUpload', None)
    if mu:
        protocols = mu.get('protocols', {})
        m.media_upload = MediaUpload(accept=list(mu.get('accept', [])), max_size=mu.get('maxSize', ""),
                                     simple_path=protocols.get('simple', {}).get('path', ""),
                                     resumable_path=protocols.get('resumable', {}).get('path', ""))
    return m


def _resource(name: str, d: dict) -> Resource:
    return Resource(name=name,
                    methods=[_method(k, v) for k, v in sorted(d.get('methods', {}).items())],
                    resources=[_resource(k, v) for k, v in sorted(d.get('resources', {}).items())])


def parse_document(d: dict) -> Document:
    """
    Build a Document from the decoded discovery JSON.
    Older documents only carry baseUrl/basePath, so root and service path are derived from those.
    """
    if d.get('kind', "discovery#restDescription") != "discovery#restDescription":
        raise ValueError(f"Not a discovery document: {d.get('kind')}")
    for k in ('name', 'version'):
        if not d.get(k, ""):
            raise ValueError(f"Discovery document has no {k}")
    root = d.get('rootUrl', "")
    service_path = d.get('servicePath', "")
    if not root:
        base = d.get('baseUrl', "")
        if not base:
            raise ValueError("Discovery document has neither rootUrl nor baseUrl")
        scheme, _, rest = base.partition("://")
        host, _, service_path = rest.partition("/")
        root = f"{scheme}://{host}/"
    scopes = [Scope(url=k, description=v.get('description', ""))
              for k, v in d.get('auth', {}).get('oauth2', {}).get('scopes', {}).items()]
    schemas = {}
    for k, v in sorted(d.get('schemas', {}).items()):
        s = _property(k, v)
        schemas[k] = Schema(id=v.get('id', k), type=s.type or "object", description=s.description,
                            properties=s.properties)
    return Document(id=d.get('id', f"{d['name']}:{d['version']}"), name=d['name'], version=d['version'],
                    title=d.get('title', ""), description=d.get('description', ""),
                    documentation_link=d.get('documentationLink', ""),
                    root_url=root, service_path=service_path,
                    scopes=sorted(scopes, key=lambda s: s.url),
                    schemas=schemas,
                    resources=[_resource(k, v) for k, v in sorted(d.get('resources', {}).items())])


def read_document(path: Path|str) -> Document:
    p = path if isinstance(path, Path) else Path(str(path))
    with open(p, 'r', encoding='utf-8') as f:
        return parse_document(json.load(f))


def fetch_document(api: str, version: str, session: requests.Session|None = None) -> Document:
    """
    Discovery document for api:version.  Uses the copy bundled with google-api-python-client
    when there is one, otherwise asks the discovery service.
    """
    doc = gapi_discovery_cache.get_static_doc(api, version)
    if doc:
        log.info(f"using bundled discovery document for {api}:{version}")
        return parse_document(json.loads(doc))
    url = DISCOVERY_URL.format(api=api, version=version)
    log.info(f"fetching discovery document {url}")
    s = session if session is not None else requests.Session()
    try:
        resp = s.get(url, timeout=30)
    except requests.RequestException as e:
        raise TransportError(f"fetching {url}: {str(e)}") from e
    check_response(resp)
    return parse_document(resp.json())
