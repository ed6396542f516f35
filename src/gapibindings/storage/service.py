"""
Cloud Storage JSON API v1beta2 calls.
https://developers.google.com/storage/docs/json_api/
Generated from the storage:v1beta2 discovery document by gapibindings.generator, do not edit.
"""
from typing import Self

import requests

from ..calls import ApiService, Call, MediaDownloadCall, MediaUploadCall, PagedCall, ResourceService
from .resources import (
    Bucket,
    BucketAccessControl,
    BucketAccessControls,
    Buckets,
    Channel,
    ComposeRequest,
    Object,
    ObjectAccessControl,
    ObjectAccessControls,
    Objects,
)


class BucketAccessControlsDeleteCall(Call):
    """
    Permanently deletes the ACL entry for the specified entity on the specified bucket.
    DELETE b/{bucket}/acl/{entity}
    """
    _method_id = "storage.bucketAccessControls.delete"
    _http_method = "DELETE"
    _path = "b/{bucket}/acl/{entity}"
    _response = None

    def __init__(self, service: ApiService, bucket: str, entity: str) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity})


class BucketAccessControlsGetCall(Call):
    """
    Returns the ACL entry for the specified entity on the specified bucket.
    GET b/{bucket}/acl/{entity}
    """
    _method_id = "storage.bucketAccessControls.get"
    _http_method = "GET"
    _path = "b/{bucket}/acl/{entity}"
    _response = BucketAccessControl

    def __init__(self, service: ApiService, bucket: str, entity: str) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BucketAccessControlsInsertCall(Call):
    """
    Creates a new ACL entry on the specified bucket.
    POST b/{bucket}/acl
    """
    _method_id = "storage.bucketAccessControls.insert"
    _http_method = "POST"
    _path = "b/{bucket}/acl"
    _response = BucketAccessControl

    def __init__(self, service: ApiService, bucket: str, bucketAccessControl: BucketAccessControl) -> None:
        super().__init__(service, {"bucket": bucket}, body=bucketAccessControl)


class BucketAccessControlsListCall(Call):
    """
    Retrieves ACL entries on the specified bucket.
    GET b/{bucket}/acl
    """
    _method_id = "storage.bucketAccessControls.list"
    _http_method = "GET"
    _path = "b/{bucket}/acl"
    _response = BucketAccessControls

    def __init__(self, service: ApiService, bucket: str) -> None:
        super().__init__(service, {"bucket": bucket})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BucketAccessControlsPatchCall(Call):
    """
    Updates an ACL entry on the specified bucket. This method supports patch semantics.
    PATCH b/{bucket}/acl/{entity}
    """
    _method_id = "storage.bucketAccessControls.patch"
    _http_method = "PATCH"
    _path = "b/{bucket}/acl/{entity}"
    _response = BucketAccessControl

    def __init__(self, service: ApiService, bucket: str, entity: str, bucketAccessControl: BucketAccessControl) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity}, body=bucketAccessControl)


class BucketAccessControlsUpdateCall(Call):
    """
    Updates an ACL entry on the specified bucket.
    PUT b/{bucket}/acl/{entity}
    """
    _method_id = "storage.bucketAccessControls.update"
    _http_method = "PUT"
    _path = "b/{bucket}/acl/{entity}"
    _response = BucketAccessControl

    def __init__(self, service: ApiService, bucket: str, entity: str, bucketAccessControl: BucketAccessControl) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity}, body=bucketAccessControl)


class BucketsDeleteCall(Call):
    """
    Permanently deletes an empty bucket.
    DELETE b/{bucket}
    """
    _method_id = "storage.buckets.delete"
    _http_method = "DELETE"
    _path = "b/{bucket}"
    _response = None

    def __init__(self, service: ApiService, bucket: str) -> None:
        super().__init__(service, {"bucket": bucket})

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)


class BucketsGetCall(Call):
    """
    Returns metadata for the specified bucket.
    GET b/{bucket}
    """
    _method_id = "storage.buckets.get"
    _http_method = "GET"
    _path = "b/{bucket}"
    _response = Bucket

    def __init__(self, service: ApiService, bucket: str) -> None:
        super().__init__(service, {"bucket": bucket})

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl.
        "full" - Include all properties.
        "noAcl" - Omit acl and defaultObjectAcl properties.
        """
        return self._set("projection", projection, ("full", "noAcl"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BucketsInsertCall(Call):
    """
    Creates a new bucket.
    POST b
    """
    _method_id = "storage.buckets.insert"
    _http_method = "POST"
    _path = "b"
    _response = Bucket

    def __init__(self, service: ApiService, project: str, bucket: Bucket) -> None:
        super().__init__(service, None, body=bucket)
        self._set("project", project)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl, unless the bucket resource specifies acl or defaultObjectAcl properties, when it defaults to full.
        "full" - Include all properties.
        "noAcl" - Omit acl and defaultObjectAcl properties.
        """
        return self._set("projection", projection, ("full", "noAcl"))


class BucketsListCall(PagedCall):
    """
    Retrieves a list of buckets for a given project.
    GET b
    """
    _method_id = "storage.buckets.list"
    _http_method = "GET"
    _path = "b"
    _response = Buckets

    def __init__(self, service: ApiService, project: str) -> None:
        super().__init__(service, None)
        self._set("project", project)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of buckets to return.
        """
        return self._set("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> Self:
        """
        A previously-returned page token representing part of the larger set of results to view.
        """
        return self._set("pageToken", pageToken)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl.
        "full" - Include all properties.
        "noAcl" - Omit acl and defaultObjectAcl properties.
        """
        return self._set("projection", projection, ("full", "noAcl"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class BucketsPatchCall(Call):
    """
    Updates a bucket. This method supports patch semantics.
    PATCH b/{bucket}
    """
    _method_id = "storage.buckets.patch"
    _http_method = "PATCH"
    _path = "b/{bucket}"
    _response = Bucket

    def __init__(self, service: ApiService, bucket: str, bucketBody: Bucket) -> None:
        super().__init__(service, {"bucket": bucket}, body=bucketBody)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to full.
        "full" - Include all properties.
        "noAcl" - Omit acl and defaultObjectAcl properties.
        """
        return self._set("projection", projection, ("full", "noAcl"))


class BucketsUpdateCall(Call):
    """
    Updates a bucket.
    PUT b/{bucket}
    """
    _method_id = "storage.buckets.update"
    _http_method = "PUT"
    _path = "b/{bucket}"
    _response = Bucket

    def __init__(self, service: ApiService, bucket: str, bucketBody: Bucket) -> None:
        super().__init__(service, {"bucket": bucket}, body=bucketBody)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the return of the bucket metadata conditional on whether the bucket's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to full.
        "full" - Include all properties.
        "noAcl" - Omit acl and defaultObjectAcl properties.
        """
        return self._set("projection", projection, ("full", "noAcl"))


class ChannelsStopCall(Call):
    """
    Stop watching resources through this channel
    POST channels/stop
    """
    _method_id = "storage.channels.stop"
    _http_method = "POST"
    _path = "channels/stop"
    _response = None

    def __init__(self, service: ApiService, channel: Channel) -> None:
        super().__init__(service, None, body=channel)


class DefaultObjectAccessControlsDeleteCall(Call):
    """
    Permanently deletes the default object ACL entry for the specified entity on the specified bucket.
    DELETE b/{bucket}/defaultObjectAcl/{entity}
    """
    _method_id = "storage.defaultObjectAccessControls.delete"
    _http_method = "DELETE"
    _path = "b/{bucket}/defaultObjectAcl/{entity}"
    _response = None

    def __init__(self, service: ApiService, bucket: str, entity: str) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity})


class DefaultObjectAccessControlsGetCall(Call):
    """
    Returns the default object ACL entry for the specified entity on the specified bucket.
    GET b/{bucket}/defaultObjectAcl/{entity}
    """
    _method_id = "storage.defaultObjectAccessControls.get"
    _http_method = "GET"
    _path = "b/{bucket}/defaultObjectAcl/{entity}"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, entity: str) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class DefaultObjectAccessControlsInsertCall(Call):
    """
    Creates a new default object ACL entry on the specified bucket.
    POST b/{bucket}/defaultObjectAcl
    """
    _method_id = "storage.defaultObjectAccessControls.insert"
    _http_method = "POST"
    _path = "b/{bucket}/defaultObjectAcl"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, objectAccessControl: ObjectAccessControl) -> None:
        super().__init__(service, {"bucket": bucket}, body=objectAccessControl)


class DefaultObjectAccessControlsListCall(Call):
    """
    Retrieves default object ACL entries on the specified bucket.
    GET b/{bucket}/defaultObjectAcl
    """
    _method_id = "storage.defaultObjectAccessControls.list"
    _http_method = "GET"
    _path = "b/{bucket}/defaultObjectAcl"
    _response = ObjectAccessControls

    def __init__(self, service: ApiService, bucket: str) -> None:
        super().__init__(service, {"bucket": bucket})

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        If present, only return default ACL listing if the bucket's current metageneration matches this value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        If present, only return default ACL listing if the bucket's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class DefaultObjectAccessControlsPatchCall(Call):
    """
    Updates a default object ACL entry on the specified bucket. This method supports patch semantics.
    PATCH b/{bucket}/defaultObjectAcl/{entity}
    """
    _method_id = "storage.defaultObjectAccessControls.patch"
    _http_method = "PATCH"
    _path = "b/{bucket}/defaultObjectAcl/{entity}"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, entity: str, objectAccessControl: ObjectAccessControl) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity}, body=objectAccessControl)


class DefaultObjectAccessControlsUpdateCall(Call):
    """
    Updates a default object ACL entry on the specified bucket.
    PUT b/{bucket}/defaultObjectAcl/{entity}
    """
    _method_id = "storage.defaultObjectAccessControls.update"
    _http_method = "PUT"
    _path = "b/{bucket}/defaultObjectAcl/{entity}"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, entity: str, objectAccessControl: ObjectAccessControl) -> None:
        super().__init__(service, {"bucket": bucket, "entity": entity}, body=objectAccessControl)


class ObjectAccessControlsDeleteCall(Call):
    """
    Permanently deletes the ACL entry for the specified entity on the specified object.
    DELETE b/{bucket}/o/{object}/acl/{entity}
    """
    _method_id = "storage.objectAccessControls.delete"
    _http_method = "DELETE"
    _path = "b/{bucket}/o/{object}/acl/{entity}"
    _response = None

    def __init__(self, service: ApiService, bucket: str, object: str, entity: str) -> None:
        super().__init__(service, {"bucket": bucket, "object": object, "entity": entity})

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)


class ObjectAccessControlsGetCall(Call):
    """
    Returns the ACL entry for the specified entity on the specified object.
    GET b/{bucket}/o/{object}/acl/{entity}
    """
    _method_id = "storage.objectAccessControls.get"
    _http_method = "GET"
    _path = "b/{bucket}/o/{object}/acl/{entity}"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, object: str, entity: str) -> None:
        super().__init__(service, {"bucket": bucket, "object": object, "entity": entity})

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class ObjectAccessControlsInsertCall(Call):
    """
    Creates a new ACL entry on the specified object.
    POST b/{bucket}/o/{object}/acl
    """
    _method_id = "storage.objectAccessControls.insert"
    _http_method = "POST"
    _path = "b/{bucket}/o/{object}/acl"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, object: str, objectAccessControl: ObjectAccessControl) -> None:
        super().__init__(service, {"bucket": bucket, "object": object}, body=objectAccessControl)

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)


class ObjectAccessControlsListCall(Call):
    """
    Retrieves ACL entries on the specified object.
    GET b/{bucket}/o/{object}/acl
    """
    _method_id = "storage.objectAccessControls.list"
    _http_method = "GET"
    _path = "b/{bucket}/o/{object}/acl"
    _response = ObjectAccessControls

    def __init__(self, service: ApiService, bucket: str, object: str) -> None:
        super().__init__(service, {"bucket": bucket, "object": object})

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class ObjectAccessControlsPatchCall(Call):
    """
    Updates an ACL entry on the specified object. This method supports patch semantics.
    PATCH b/{bucket}/o/{object}/acl/{entity}
    """
    _method_id = "storage.objectAccessControls.patch"
    _http_method = "PATCH"
    _path = "b/{bucket}/o/{object}/acl/{entity}"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, object: str, entity: str, objectAccessControl: ObjectAccessControl) -> None:
        super().__init__(service, {"bucket": bucket, "object": object, "entity": entity}, body=objectAccessControl)

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)


class ObjectAccessControlsUpdateCall(Call):
    """
    Updates an ACL entry on the specified object.
    PUT b/{bucket}/o/{object}/acl/{entity}
    """
    _method_id = "storage.objectAccessControls.update"
    _http_method = "PUT"
    _path = "b/{bucket}/o/{object}/acl/{entity}"
    _response = ObjectAccessControl

    def __init__(self, service: ApiService, bucket: str, object: str, entity: str, objectAccessControl: ObjectAccessControl) -> None:
        super().__init__(service, {"bucket": bucket, "object": object, "entity": entity}, body=objectAccessControl)

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)


class ObjectsComposeCall(MediaDownloadCall):
    """
    Concatenates a list of existing objects into a new object in the same bucket.
    POST b/{destinationBucket}/o/{destinationObject}/compose
    """
    _method_id = "storage.objects.compose"
    _http_method = "POST"
    _path = "b/{destinationBucket}/o/{destinationObject}/compose"
    _response = Object

    def __init__(self, service: ApiService, destinationBucket: str, destinationObject: str, composeRequest: ComposeRequest) -> None:
        super().__init__(service, {"destinationBucket": destinationBucket, "destinationObject": destinationObject}, body=composeRequest)

    def ifGenerationMatch(self, ifGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation matches the given value.
        """
        return self._set("ifGenerationMatch", ifGenerationMatch)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)


class ObjectsCopyCall(MediaDownloadCall):
    """
    Copies an object to a destination in the same location. Optionally overrides metadata.
    POST b/{sourceBucket}/o/{sourceObject}/copyTo/b/{destinationBucket}/o/{destinationObject}
    """
    _method_id = "storage.objects.copy"
    _http_method = "POST"
    _path = "b/{sourceBucket}/o/{sourceObject}/copyTo/b/{destinationBucket}/o/{destinationObject}"
    _response = Object

    def __init__(self, service: ApiService, sourceBucket: str, sourceObject: str, destinationBucket: str, destinationObject: str, object: Object) -> None:
        super().__init__(service, {"sourceBucket": sourceBucket, "sourceObject": sourceObject, "destinationBucket": destinationBucket, "destinationObject": destinationObject}, body=object)

    def ifGenerationMatch(self, ifGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the destination object's current generation matches the given value.
        """
        return self._set("ifGenerationMatch", ifGenerationMatch)

    def ifGenerationNotMatch(self, ifGenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the destination object's current generation does not match the given value.
        """
        return self._set("ifGenerationNotMatch", ifGenerationNotMatch)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the destination object's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the destination object's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def ifSourceGenerationMatch(self, ifSourceGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the source object's generation matches the given value.
        """
        return self._set("ifSourceGenerationMatch", ifSourceGenerationMatch)

    def ifSourceGenerationNotMatch(self, ifSourceGenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the source object's generation does not match the given value.
        """
        return self._set("ifSourceGenerationNotMatch", ifSourceGenerationNotMatch)

    def ifSourceMetagenerationMatch(self, ifSourceMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the source object's current metageneration matches the given value.
        """
        return self._set("ifSourceMetagenerationMatch", ifSourceMetagenerationMatch)

    def ifSourceMetagenerationNotMatch(self, ifSourceMetagenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the source object's current metageneration does not match the given value.
        """
        return self._set("ifSourceMetagenerationNotMatch", ifSourceMetagenerationNotMatch)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl, unless the object resource specifies the acl property, when it defaults to full.
        "full" - Include all properties.
        "noAcl" - Omit the acl property.
        """
        return self._set("projection", projection, ("full", "noAcl"))

    def sourceGeneration(self, sourceGeneration: int) -> Self:
        """
        If present, selects a specific revision of the source object (as opposed to the latest version, the default).
        """
        return self._set("sourceGeneration", sourceGeneration)


class ObjectsDeleteCall(Call):
    """
    Deletes data blobs and associated metadata. Deletions are permanent if versioning is not enabled for the bucket, or if the generation parameter is used.
    DELETE b/{bucket}/o/{object}
    """
    _method_id = "storage.objects.delete"
    _http_method = "DELETE"
    _path = "b/{bucket}/o/{object}"
    _response = None

    def __init__(self, service: ApiService, bucket: str, object: str) -> None:
        super().__init__(service, {"bucket": bucket, "object": object})

    def generation(self, generation: int) -> Self:
        """
        If present, permanently deletes a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)

    def ifGenerationMatch(self, ifGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation matches the given value.
        """
        return self._set("ifGenerationMatch", ifGenerationMatch)

    def ifGenerationNotMatch(self, ifGenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation does not match the given value.
        """
        return self._set("ifGenerationNotMatch", ifGenerationNotMatch)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)


class ObjectsGetCall(MediaDownloadCall):
    """
    Retrieves objects or their associated metadata.
    GET b/{bucket}/o/{object}
    """
    _method_id = "storage.objects.get"
    _http_method = "GET"
    _path = "b/{bucket}/o/{object}"
    _response = Object

    def __init__(self, service: ApiService, bucket: str, object: str) -> None:
        super().__init__(service, {"bucket": bucket, "object": object})

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)

    def ifGenerationMatch(self, ifGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's generation matches the given value.
        """
        return self._set("ifGenerationMatch", ifGenerationMatch)

    def ifGenerationNotMatch(self, ifGenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's generation does not match the given value.
        """
        return self._set("ifGenerationNotMatch", ifGenerationNotMatch)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl.
        "full" - Include all properties.
        "noAcl" - Omit the acl property.
        """
        return self._set("projection", projection, ("full", "noAcl"))

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class ObjectsInsertCall(MediaUploadCall):
    """
    Stores new data blobs and associated metadata.
    POST b/{bucket}/o
    """
    _method_id = "storage.objects.insert"
    _http_method = "POST"
    _path = "b/{bucket}/o"
    _response = Object

    def __init__(self, service: ApiService, bucket: str, object: Object) -> None:
        super().__init__(service, {"bucket": bucket}, body=object)

    def ifGenerationMatch(self, ifGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation matches the given value.
        """
        return self._set("ifGenerationMatch", ifGenerationMatch)

    def ifGenerationNotMatch(self, ifGenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation does not match the given value.
        """
        return self._set("ifGenerationNotMatch", ifGenerationNotMatch)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def name(self, name: str) -> Self:
        """
        Name of the object. Required when the object metadata is not otherwise provided. Overrides the object metadata's name value, if any.
        """
        return self._set("name", name)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl, unless the object resource specifies the acl property, when it defaults to full.
        "full" - Include all properties.
        "noAcl" - Omit the acl property.
        """
        return self._set("projection", projection, ("full", "noAcl"))


class ObjectsListCall(PagedCall):
    """
    Retrieves a list of objects matching the criteria.
    GET b/{bucket}/o
    """
    _method_id = "storage.objects.list"
    _http_method = "GET"
    _path = "b/{bucket}/o"
    _response = Objects

    def __init__(self, service: ApiService, bucket: str) -> None:
        super().__init__(service, {"bucket": bucket})

    def delimiter(self, delimiter: str) -> Self:
        """
        Returns results in a directory-like mode. items will contain only objects whose names, aside from the prefix, do not contain delimiter. Objects whose names, aside from the prefix, contain delimiter will have their name, truncated after the delimiter, returned in prefixes. Duplicate prefixes are omitted.
        """
        return self._set("delimiter", delimiter)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of items plus prefixes to return. As duplicate prefixes are omitted, fewer total results may be returned than requested.
        """
        return self._set("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> Self:
        """
        A previously-returned page token representing part of the larger set of results to view.
        """
        return self._set("pageToken", pageToken)

    def prefix(self, prefix: str) -> Self:
        """
        Filter results to objects whose names begin with this prefix.
        """
        return self._set("prefix", prefix)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl.
        "full" - Include all properties.
        "noAcl" - Omit the acl property.
        """
        return self._set("projection", projection, ("full", "noAcl"))

    def versions(self, versions: bool) -> Self:
        """
        If true, lists all versions of a file as distinct results.
        """
        return self._set("versions", versions)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class ObjectsPatchCall(Call):
    """
    Updates a data blob's associated metadata. This method supports patch semantics.
    PATCH b/{bucket}/o/{object}
    """
    _method_id = "storage.objects.patch"
    _http_method = "PATCH"
    _path = "b/{bucket}/o/{object}"
    _response = Object

    def __init__(self, service: ApiService, bucket: str, object: str, objectBody: Object) -> None:
        super().__init__(service, {"bucket": bucket, "object": object}, body=objectBody)

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)

    def ifGenerationMatch(self, ifGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation matches the given value.
        """
        return self._set("ifGenerationMatch", ifGenerationMatch)

    def ifGenerationNotMatch(self, ifGenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation does not match the given value.
        """
        return self._set("ifGenerationNotMatch", ifGenerationNotMatch)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to full.
        "full" - Include all properties.
        "noAcl" - Omit the acl property.
        """
        return self._set("projection", projection, ("full", "noAcl"))


class ObjectsUpdateCall(MediaDownloadCall):
    """
    Updates a data blob's associated metadata.
    PUT b/{bucket}/o/{object}
    """
    _method_id = "storage.objects.update"
    _http_method = "PUT"
    _path = "b/{bucket}/o/{object}"
    _response = Object

    def __init__(self, service: ApiService, bucket: str, object: str, objectBody: Object) -> None:
        super().__init__(service, {"bucket": bucket, "object": object}, body=objectBody)

    def generation(self, generation: int) -> Self:
        """
        If present, selects a specific revision of this object (as opposed to the latest version, the default).
        """
        return self._set("generation", generation)

    def ifGenerationMatch(self, ifGenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation matches the given value.
        """
        return self._set("ifGenerationMatch", ifGenerationMatch)

    def ifGenerationNotMatch(self, ifGenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current generation does not match the given value.
        """
        return self._set("ifGenerationNotMatch", ifGenerationNotMatch)

    def ifMetagenerationMatch(self, ifMetagenerationMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration matches the given value.
        """
        return self._set("ifMetagenerationMatch", ifMetagenerationMatch)

    def ifMetagenerationNotMatch(self, ifMetagenerationNotMatch: int) -> Self:
        """
        Makes the operation conditional on whether the object's current metageneration does not match the given value.
        """
        return self._set("ifMetagenerationNotMatch", ifMetagenerationNotMatch)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to full.
        "full" - Include all properties.
        "noAcl" - Omit the acl property.
        """
        return self._set("projection", projection, ("full", "noAcl"))


class ObjectsWatchAllCall(Call):
    """
    Watch for changes on all objects in a bucket.
    POST b/{bucket}/o/watch
    """
    _method_id = "storage.objects.watchAll"
    _http_method = "POST"
    _path = "b/{bucket}/o/watch"
    _response = Channel

    def __init__(self, service: ApiService, bucket: str, channel: Channel) -> None:
        super().__init__(service, {"bucket": bucket}, body=channel)

    def delimiter(self, delimiter: str) -> Self:
        """
        Returns results in a directory-like mode. items will contain only objects whose names, aside from the prefix, do not contain delimiter. Objects whose names, aside from the prefix, contain delimiter will have their name, truncated after the delimiter, returned in prefixes. Duplicate prefixes are omitted.
        """
        return self._set("delimiter", delimiter)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of items plus prefixes to return. As duplicate prefixes are omitted, fewer total results may be returned than requested.
        """
        return self._set("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> Self:
        """
        A previously-returned page token representing part of the larger set of results to view.
        """
        return self._set("pageToken", pageToken)

    def prefix(self, prefix: str) -> Self:
        """
        Filter results to objects whose names begin with this prefix.
        """
        return self._set("prefix", prefix)

    def projection(self, projection: str) -> Self:
        """
        Set of properties to return. Defaults to noAcl.
        "full" - Include all properties.
        "noAcl" - Omit the acl property.
        """
        return self._set("projection", projection, ("full", "noAcl"))

    def versions(self, versions: bool) -> Self:
        """
        If true, lists all versions of a file as distinct results.
        """
        return self._set("versions", versions)


class BucketAccessControlsService(ResourceService):

    def delete(self, bucket: str, entity: str) -> BucketAccessControlsDeleteCall:
        """
        Permanently deletes the ACL entry for the specified entity on the specified bucket.
        """
        return BucketAccessControlsDeleteCall(self._s, bucket, entity)

    def get(self, bucket: str, entity: str) -> BucketAccessControlsGetCall:
        """
        Returns the ACL entry for the specified entity on the specified bucket.
        """
        return BucketAccessControlsGetCall(self._s, bucket, entity)

    def insert(self, bucket: str, bucketAccessControl: BucketAccessControl) -> BucketAccessControlsInsertCall:
        """
        Creates a new ACL entry on the specified bucket.
        """
        return BucketAccessControlsInsertCall(self._s, bucket, bucketAccessControl)

    def list(self, bucket: str) -> BucketAccessControlsListCall:
        """
        Retrieves ACL entries on the specified bucket.
        """
        return BucketAccessControlsListCall(self._s, bucket)

    def patch(self, bucket: str, entity: str, bucketAccessControl: BucketAccessControl) -> BucketAccessControlsPatchCall:
        """
        Updates an ACL entry on the specified bucket. This method supports patch semantics.
        """
        return BucketAccessControlsPatchCall(self._s, bucket, entity, bucketAccessControl)

    def update(self, bucket: str, entity: str, bucketAccessControl: BucketAccessControl) -> BucketAccessControlsUpdateCall:
        """
        Updates an ACL entry on the specified bucket.
        """
        return BucketAccessControlsUpdateCall(self._s, bucket, entity, bucketAccessControl)


class BucketsService(ResourceService):

    def delete(self, bucket: str) -> BucketsDeleteCall:
        """
        Permanently deletes an empty bucket.
        """
        return BucketsDeleteCall(self._s, bucket)

    def get(self, bucket: str) -> BucketsGetCall:
        """
        Returns metadata for the specified bucket.
        """
        return BucketsGetCall(self._s, bucket)

    def insert(self, project: str, bucket: Bucket) -> BucketsInsertCall:
        """
        Creates a new bucket.
        """
        return BucketsInsertCall(self._s, project, bucket)

    def list(self, project: str) -> BucketsListCall:
        """
        Retrieves a list of buckets for a given project.
        """
        return BucketsListCall(self._s, project)

    def patch(self, bucket: str, bucketBody: Bucket) -> BucketsPatchCall:
        """
        Updates a bucket. This method supports patch semantics.
        """
        return BucketsPatchCall(self._s, bucket, bucketBody)

    def update(self, bucket: str, bucketBody: Bucket) -> BucketsUpdateCall:
        """
        Updates a bucket.
        """
        return BucketsUpdateCall(self._s, bucket, bucketBody)


class ChannelsService(ResourceService):

    def stop(self, channel: Channel) -> ChannelsStopCall:
        """
        Stop watching resources through this channel
        """
        return ChannelsStopCall(self._s, channel)


class DefaultObjectAccessControlsService(ResourceService):

    def delete(self, bucket: str, entity: str) -> DefaultObjectAccessControlsDeleteCall:
        """
        Permanently deletes the default object ACL entry for the specified entity on the specified bucket.
        """
        return DefaultObjectAccessControlsDeleteCall(self._s, bucket, entity)

    def get(self, bucket: str, entity: str) -> DefaultObjectAccessControlsGetCall:
        """
        Returns the default object ACL entry for the specified entity on the specified bucket.
        """
        return DefaultObjectAccessControlsGetCall(self._s, bucket, entity)

    def insert(self, bucket: str, objectAccessControl: ObjectAccessControl) -> DefaultObjectAccessControlsInsertCall:
        """
        Creates a new default object ACL entry on the specified bucket.
        """
        return DefaultObjectAccessControlsInsertCall(self._s, bucket, objectAccessControl)

    def list(self, bucket: str) -> DefaultObjectAccessControlsListCall:
        """
        Retrieves default object ACL entries on the specified bucket.
        """
        return DefaultObjectAccessControlsListCall(self._s, bucket)

    def patch(self, bucket: str, entity: str, objectAccessControl: ObjectAccessControl) -> DefaultObjectAccessControlsPatchCall:
        """
        Updates a default object ACL entry on the specified bucket. This method supports patch semantics.
        """
        return DefaultObjectAccessControlsPatchCall(self._s, bucket, entity, objectAccessControl)

    def update(self, bucket: str, entity: str, objectAccessControl: ObjectAccessControl) -> DefaultObjectAccessControlsUpdateCall:
        """
        Updates a default object ACL entry on the specified bucket.
        """
        return DefaultObjectAccessControlsUpdateCall(self._s, bucket, entity, objectAccessControl)


class ObjectAccessControlsService(ResourceService):

    def delete(self, bucket: str, object: str, entity: str) -> ObjectAccessControlsDeleteCall:
        """
        Permanently deletes the ACL entry for the specified entity on the specified object.
        """
        return ObjectAccessControlsDeleteCall(self._s, bucket, object, entity)

    def get(self, bucket: str, object: str, entity: str) -> ObjectAccessControlsGetCall:
        """
        Returns the ACL entry for the specified entity on the specified object.
        """
        return ObjectAccessControlsGetCall(self._s, bucket, object, entity)

    def insert(self, bucket: str, object: str, objectAccessControl: ObjectAccessControl) -> ObjectAccessControlsInsertCall:
        """
        Creates a new ACL entry on the specified object.
        """
        return ObjectAccessControlsInsertCall(self._s, bucket, object, objectAccessControl)

    def list(self, bucket: str, object: str) -> ObjectAccessControlsListCall:
        """
        Retrieves ACL entries on the specified object.
        """
        return ObjectAccessControlsListCall(self._s, bucket, object)

    def patch(self, bucket: str, object: str, entity: str, objectAccessControl: ObjectAccessControl) -> ObjectAccessControlsPatchCall:
        """
        Updates an ACL entry on the specified object. This method supports patch semantics.
        """
        return ObjectAccessControlsPatchCall(self._s, bucket, object, entity, objectAccessControl)

    def update(self, bucket: str, object: str, entity: str, objectAccessControl: ObjectAccessControl) -> ObjectAccessControlsUpdateCall:
        """
        Updates an ACL entry on the specified object.
        """
        return ObjectAccessControlsUpdateCall(self._s, bucket, object, entity, objectAccessControl)


class ObjectsService(ResourceService):

    def compose(self, destinationBucket: str, destinationObject: str, composeRequest: ComposeRequest) -> ObjectsComposeCall:
        """
        Concatenates a list of existing objects into a new object in the same bucket.
        """
        return ObjectsComposeCall(self._s, destinationBucket, destinationObject, composeRequest)

    def copy(self, sourceBucket: str, sourceObject: str, destinationBucket: str, destinationObject: str, object: Object) -> ObjectsCopyCall:
        """
        Copies an object to a destination in the same location. Optionally overrides metadata.
        """
        return ObjectsCopyCall(self._s, sourceBucket, sourceObject, destinationBucket, destinationObject, object)

    def delete(self, bucket: str, object: str) -> ObjectsDeleteCall:
        """
        Deletes data blobs and associated metadata. Deletions are permanent if versioning is not enabled for the bucket, or if the generation parameter is used.
        """
        return ObjectsDeleteCall(self._s, bucket, object)

    def get(self, bucket: str, object: str) -> ObjectsGetCall:
        """
        Retrieves objects or their associated metadata.
        """
        return ObjectsGetCall(self._s, bucket, object)

    def insert(self, bucket: str, object: Object) -> ObjectsInsertCall:
        """
        Stores new data blobs and associated metadata.
        """
        return ObjectsInsertCall(self._s, bucket, object)

    def list(self, bucket: str) -> ObjectsListCall:
        """
        Retrieves a list of objects matching the criteria.
        """
        return ObjectsListCall(self._s, bucket)

    def patch(self, bucket: str, object: str, objectBody: Object) -> ObjectsPatchCall:
        """
        Updates a data blob's associated metadata. This method supports patch semantics.
        """
        return ObjectsPatchCall(self._s, bucket, object, objectBody)

    def update(self, bucket: str, object: str, objectBody: Object) -> ObjectsUpdateCall:
        """
        Updates a data blob's associated metadata.
        """
        return ObjectsUpdateCall(self._s, bucket, object, objectBody)

    def watchAll(self, bucket: str, channel: Channel) -> ObjectsWatchAllCall:
        """
        Watch for changes on all objects in a bucket.
        """
        return ObjectsWatchAllCall(self._s, bucket, channel)


class Service(ApiService):
    """
    Cloud Storage JSON API v1beta2
    https://developers.google.com/storage/docs/json_api/
    """
    _root_url = "https://www.googleapis.com/"
    _service_path = "storage/v1beta2/"

    def __init__(self, session: requests.Session, root_url: str|None = None,
                 user_agent: str = "", api_key: str|None = None) -> None:
        super().__init__(session, root_url, user_agent, api_key)
        self.bucketAccessControls = BucketAccessControlsService(self)
        self.buckets = BucketsService(self)
        self.channels = ChannelsService(self)
        self.defaultObjectAccessControls = DefaultObjectAccessControlsService(self)
        self.objectAccessControls = ObjectAccessControlsService(self)
        self.objects = ObjectsService(self)
