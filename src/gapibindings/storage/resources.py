"""
Cloud Storage JSON API v1beta2 resources.
Generated from the storage:v1beta2 discovery document by gapibindings.generator, do not edit.
"""
from dataclasses import dataclass, field
from typing import List

from ..resources import GoogleAPIResourceBase


@dataclass
class BucketAccessControl(GoogleAPIResourceBase):
    """
    BucketAccessControl resource of the Cloud Storage JSON API.
    """
    bucket: str|None = field(default=None)
    domain: str|None = field(default=None)
    email: str|None = field(default=None)
    entity: str|None = field(default=None)
    entityId: str|None = field(default=None)
    etag: str|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    role: str|None = field(default=None)
    selfLink: str|None = field(default=None)


@dataclass
class BucketCors(GoogleAPIResourceBase):
    """
    The bucket's Cross-Origin Resource Sharing (CORS) configuration.
    """
    maxAgeSeconds: int|None = field(default=None)
    method: List[str]|None = field(default=None)
    origin: List[str]|None = field(default=None)
    responseHeader: List[str]|None = field(default=None)


@dataclass
class ObjectAccessControl(GoogleAPIResourceBase):
    """
    ObjectAccessControl resource of the Cloud Storage JSON API.
    """
    _int64 = ("generation",)
    bucket: str|None = field(default=None)
    domain: str|None = field(default=None)
    email: str|None = field(default=None)
    entity: str|None = field(default=None)
    entityId: str|None = field(default=None)
    etag: str|None = field(default=None)
    generation: int|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    object: str|None = field(default=None)
    role: str|None = field(default=None)
    selfLink: str|None = field(default=None)


@dataclass
class BucketLifecycleRuleAction(GoogleAPIResourceBase):
    """
    The action to take.
    """
    type: str|None = field(default=None)


@dataclass
class BucketLifecycleRuleCondition(GoogleAPIResourceBase):
    """
    The condition(s) under which the action will be taken.
    """
    age: int|None = field(default=None)
    createdBefore: str|None = field(default=None)
    isLive: bool|None = field(default=None)
    numNewerVersions: int|None = field(default=None)


@dataclass
class BucketLifecycleRule(GoogleAPIResourceBase):
    """
    A lifecycle management rule, which is made of an action to take and the condition(s) under which the action will be taken.
    """
    action: BucketLifecycleRuleAction|None = field(default=None)
    condition: BucketLifecycleRuleCondition|None = field(default=None)


@dataclass
class BucketLifecycle(GoogleAPIResourceBase):
    """
    The bucket's lifecycle configuration. See object lifecycle management for more information.
    """
    rule: List[BucketLifecycleRule]|None = field(default=None)


@dataclass
class BucketLogging(GoogleAPIResourceBase):
    """
    The bucket's logging configuration, which defines the destination bucket and optional name prefix for the current bucket's logs.
    """
    logBucket: str|None = field(default=None)
    logObjectPrefix: str|None = field(default=None)


@dataclass
class BucketOwner(GoogleAPIResourceBase):
    """
    The owner of the bucket. This is always the project team's owner group.
    """
    entity: str|None = field(default=None)
    entityId: str|None = field(default=None)


@dataclass
class BucketVersioning(GoogleAPIResourceBase):
    """
    The bucket's versioning configuration.
    """
    enabled: bool|None = field(default=None)


@dataclass
class BucketWebsite(GoogleAPIResourceBase):
    """
    The bucket's website configuration.
    """
    mainPageSuffix: str|None = field(default=None)
    notFoundPage: str|None = field(default=None)


@dataclass
class Bucket(GoogleAPIResourceBase):
    """
    Bucket resource of the Cloud Storage JSON API.
    """
    _int64 = ("metageneration",)
    acl: List[BucketAccessControl]|None = field(default=None)
    cors: List[BucketCors]|None = field(default=None)
    defaultObjectAcl: List[ObjectAccessControl]|None = field(default=None)
    etag: str|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    lifecycle: BucketLifecycle|None = field(default=None)
    location: str|None = field(default=None)
    logging: BucketLogging|None = field(default=None)
    metageneration: int|None = field(default=None)
    name: str|None = field(default=None)
    owner: BucketOwner|None = field(default=None)
    selfLink: str|None = field(default=None)
    storageClass: str|None = field(default=None)
    timeCreated: str|None = field(default=None)
    versioning: BucketVersioning|None = field(default=None)
    website: BucketWebsite|None = field(default=None)


@dataclass
class BucketAccessControls(GoogleAPIResourceBase):
    """
    BucketAccessControls resource of the Cloud Storage JSON API.
    """
    items: List[BucketAccessControl]|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class Buckets(GoogleAPIResourceBase):
    """
    Buckets resource of the Cloud Storage JSON API.
    """
    items: List[Bucket]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class Channel(GoogleAPIResourceBase):
    """
    Channel resource of the Cloud Storage JSON API.
    """
    _int64 = ("expiration",)
    address: str|None = field(default=None)
    expiration: int|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    params: dict|None = field(default=None)
    payload: bool|None = field(default=None)
    resourceId: str|None = field(default=None)
    resourceUri: str|None = field(default=None)
    token: str|None = field(default=None)
    type: str|None = field(default=None)


@dataclass
class ObjectOwner(GoogleAPIResourceBase):
    """
    The owner of the object. This will always be the uploader of the object.
    """
    entity: str|None = field(default=None)
    entityId: str|None = field(default=None)


@dataclass
class Object(GoogleAPIResourceBase):
    """
    Object resource of the Cloud Storage JSON API.
    """
    _int64 = ("generation", "metageneration", "size")
    acl: List[ObjectAccessControl]|None = field(default=None)
    bucket: str|None = field(default=None)
    cacheControl: str|None = field(default=None)
    componentCount: int|None = field(default=None)
    contentDisposition: str|None = field(default=None)
    contentEncoding: str|None = field(default=None)
    contentLanguage: str|None = field(default=None)
    contentType: str|None = field(default=None)
    crc32c: str|None = field(default=None)
    etag: str|None = field(default=None)
    generation: int|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    md5Hash: str|None = field(default=None)
    mediaLink: str|None = field(default=None)
    metadata: dict|None = field(default=None)
    metageneration: int|None = field(default=None)
    name: str|None = field(default=None)
    owner: ObjectOwner|None = field(default=None)
    selfLink: str|None = field(default=None)
    size: int|None = field(default=None)
    storageClass: str|None = field(default=None)
    timeDeleted: str|None = field(default=None)
    updated: str|None = field(default=None)


@dataclass
class ComposeRequestSourceObjectsObjectPreconditions(GoogleAPIResourceBase):
    """
    Conditions that must be met for this operation to execute.
    """
    _int64 = ("ifGenerationMatch",)
    ifGenerationMatch: int|None = field(default=None)


@dataclass
class ComposeRequestSourceObjects(GoogleAPIResourceBase):
    """
    The list of source objects that will be concatenated into a single object.
    """
    _int64 = ("generation",)
    generation: int|None = field(default=None)
    name: str|None = field(default=None)
    objectPreconditions: ComposeRequestSourceObjectsObjectPreconditions|None = field(default=None)


@dataclass
class ComposeRequest(GoogleAPIResourceBase):
    """
    ComposeRequest resource of the Cloud Storage JSON API.
    """
    destination: Object|None = field(default=None)
    kind: str|None = field(default=None)
    sourceObjects: List[ComposeRequestSourceObjects]|None = field(default=None)


@dataclass
class ObjectAccessControls(GoogleAPIResourceBase):
    """
    ObjectAccessControls resource of the Cloud Storage JSON API.
    """
    items: List[object]|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class Objects(GoogleAPIResourceBase):
    """
    Objects resource of the Cloud Storage JSON API.
    """
    items: List[Object]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    prefixes: List[str]|None = field(default=None)
