"""
Blogger API v3 bindings.
https://developers.google.com/blogger/docs/3.0/getting_started
Generated from the blogger:v3 discovery document by gapibindings.generator, do not edit.
"""
from .service import Service

API_ID = "blogger:v3"
API_NAME = "blogger"
API_VERSION = "v3"
BASE_PATH = "https://www.googleapis.com/blogger/v3/"

# Manage your Blogger account
BLOGGER_SCOPE = "https://www.googleapis.com/auth/blogger"

# View your Blogger account
BLOGGER_READONLY_SCOPE = "https://www.googleapis.com/auth/blogger.readonly"

SCOPES = (BLOGGER_SCOPE, BLOGGER_READONLY_SCOPE)
