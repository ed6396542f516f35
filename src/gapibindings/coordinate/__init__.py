"""
Google Maps Coordinate API v1 bindings.
https://developers.google.com/coordinate/
Generated from the coordinate:v1 discovery document by gapibindings.generator, do not edit.
"""
from .service import Service

API_ID = "coordinate:v1"
API_NAME = "coordinate"
API_VERSION = "v1"
BASE_PATH = "https://www.googleapis.com/coordinate/v1/"

# View and manage your Google Maps Coordinate jobs
COORDINATE_SCOPE = "https://www.googleapis.com/auth/coordinate"

# View your Google Coordinate jobs
COORDINATE_READONLY_SCOPE = "https://www.googleapis.com/auth/coordinate.readonly"

SCOPES = (COORDINATE_SCOPE, COORDINATE_READONLY_SCOPE)
