"""
Python bindings for a handful of Google REST APIs, generated from their discovery documents.

Each API is a package (blogger, coordinate, storage) holding dataclass resources and a
Service whose methods return call builders.  Optional parameters are chained setters and
do() sends the request:
    objs = service.objects.list("bucket").prefix("logs/").do()
Media uploads can be resumable, sent in chunks that survive transient failures and report
their progress.  gapi in the access module takes care of the OAuth side and hands out the
services.
"""
