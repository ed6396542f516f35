"""
Cloud Storage JSON API v1beta2 bindings.
https://developers.google.com/storage/docs/json_api/
Generated from the storage:v1beta2 discovery document by gapibindings.generator, do not edit.
"""
from .service import Service

API_ID = "storage:v1beta2"
API_NAME = "storage"
API_VERSION = "v1beta2"
BASE_PATH = "https://www.googleapis.com/storage/v1beta2/"

# Manage your data and permissions in Google Cloud Storage
DEVSTORAGE_FULL_CONTROL_SCOPE = "https://www.googleapis.com/auth/devstorage.full_control"

# View your data in Google Cloud Storage
DEVSTORAGE_READ_ONLY_SCOPE = "https://www.googleapis.com/auth/devstorage.read_only"

# Manage your data in Google Cloud Storage
DEVSTORAGE_READ_WRITE_SCOPE = "https://www.googleapis.com/auth/devstorage.read_write"

SCOPES = (DEVSTORAGE_FULL_CONTROL_SCOPE, DEVSTORAGE_READ_ONLY_SCOPE, DEVSTORAGE_READ_WRITE_SCOPE)
