# Mustache templates for the generated binding modules, rendered with chevron.
# Everything is pre-escaped by the generator so only triple braces are used.

# Dict contents --
# title, version, id, documentation_link, base_path, api_name, scope_tuple
# scopes: [{const, url, description}]
PackageInitTmpl = '''"""
{{{title}}} {{{version}}} bindings.
{{{documentation_link}}}
Generated from the {{{id}}} discovery document by gapibindings.generator, do not edit.
"""
from .service import Service

API_ID = "{{{id}}}"
API_NAME = "{{{api_name}}}"
API_VERSION = "{{{version}}}"
BASE_PATH = "{{{base_path}}}"
{{#scopes}}

# {{{description}}}
{{{const}}} = "{{{url}}}"
{{/scopes}}

SCOPES = ({{{scope_tuple}}})
'''

# title, version, id
# classes: [{name, doc, has_int64, int64, has_json_names, json_names, fields: [{name, annotation}]}]
ResourcesTmpl = '''"""
{{{title}}} {{{version}}} resources.
Generated from the {{{id}}} discovery document by gapibindings.generator, do not edit.
"""
from dataclasses import dataclass, field
from typing import List

from ..resources import GoogleAPIResourceBase
{{#classes}}


@dataclass
class {{{name}}}(GoogleAPIResourceBase):
    """
    {{{doc}}}
    """
{{#has_int64}}
    _int64 = ({{{int64}}})
{{/has_int64}}
{{#has_json_names}}
    _json_names = {{{json_names}}}
{{/has_json_names}}
{{#fields}}
    {{{name}}}: {{{annotation}}} = field(default=None)
{{/fields}}
{{/classes}}
'''

# One call builder per method.
# class_name, bases, description, http_method, path, id, response,
# ctor_params: [{name, annotation}], path_params, has_body, body_name,
# required_query: [{call}], setters: [{name, signature, description, enum_lines, call}],
# if_none_match
CallTmpl = '''

class {{{class_name}}}({{{bases}}}):
    """
    {{{description}}}
    {{{http_method}}} {{{path}}}
    """
    _method_id = "{{{id}}}"
    _http_method = "{{{http_method}}}"
    _path = "{{{path}}}"
    _response = {{{response}}}

    def __init__(self, service: ApiService{{#ctor_params}}, {{{name}}}: {{{annotation}}}{{/ctor_params}}) -> None:
        super().__init__(service, {{{path_params}}}{{#has_body}}, body={{{body_name}}}{{/has_body}})
{{#required_query}}
        self.{{{call}}}
{{/required_query}}
{{#setters}}

    def {{{name}}}(self, {{{signature}}}) -> Self:
        """
        {{{description}}}
{{#enum_lines}}
        {{{.}}}
{{/enum_lines}}
        """
        return self.{{{call}}}
{{/setters}}
{{#if_none_match}}

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)
{{/if_none_match}}
'''

# class_name, has_subresources, subresources: [{attr, class_name}],
# methods: [{name, args: [{name, annotation}], call_class, description}]
ResourceServiceTmpl = '''

class {{{class_name}}}(ResourceService):
{{#has_subresources}}
    def __init__(self, service: ApiService) -> None:
        super().__init__(service)
{{#subresources}}
        self.{{{attr}}} = {{{class_name}}}(service)
{{/subresources}}
{{/has_subresources}}
{{#methods}}

    def {{{name}}}(self{{#args}}, {{{name}}}: {{{annotation}}}{{/args}}) -> {{{call_class}}}:
        """
        {{{description}}}
        """
        return {{{call_class}}}(self._s{{#args}}, {{{name}}}{{/args}})
{{/methods}}
'''

# title, version, id, documentation_link, uses_datetime, typing_imports, call_imports,
# resource_imports, calls and resource_services (pre-rendered),
# root_url, service_path, resources: [{attr, class_name}]
ServiceTmpl = '''"""
{{{title}}} {{{version}}} calls.
{{{documentation_link}}}
Generated from the {{{id}}} discovery document by gapibindings.generator, do not edit.
"""
from typing import {{{typing_imports}}}
{{#uses_datetime}}
import datetime
{{/uses_datetime}}

import requests

from ..calls import {{{call_imports}}}
from .resources import (
{{#resource_imports}}
    {{{.}}},
{{/resource_imports}}
)
{{{calls}}}{{{resource_services}}}

class Service(ApiService):
    """
    {{{title}}} {{{version}}}
    {{{documentation_link}}}
    """
    _root_url = "{{{root_url}}}"
    _service_path = "{{{service_path}}}"

    def __init__(self, session: requests.Session, root_url: str|None = None,
                 user_agent: str = "", api_key: str|None = None) -> None:
        super().__init__(session, root_url, user_agent, api_key)
{{#resources}}
        self.{{{attr}}} = {{{class_name}}}(self)
{{/resources}}
'''
