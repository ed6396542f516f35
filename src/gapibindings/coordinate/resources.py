"""
Google Maps Coordinate API v1 resources.
Generated from the coordinate:v1 discovery document by gapibindings.generator, do not edit.
"""
from dataclasses import dataclass, field
from typing import List

from ..resources import GoogleAPIResourceBase


@dataclass
class CustomField(GoogleAPIResourceBase):
    """
    CustomField resource of the Google Maps Coordinate API.
    """
    _int64 = ("customFieldId",)
    customFieldId: int|None = field(default=None)
    kind: str|None = field(default=None)
    value: str|None = field(default=None)


@dataclass
class EnumItemDef(GoogleAPIResourceBase):
    """
    EnumItemDef resource of the Google Maps Coordinate API.
    """
    active: bool|None = field(default=None)
    kind: str|None = field(default=None)
    value: str|None = field(default=None)


@dataclass
class CustomFieldDef(GoogleAPIResourceBase):
    """
    CustomFieldDef resource of the Google Maps Coordinate API.
    """
    _int64 = ("id",)
    enabled: bool|None = field(default=None)
    enumitems: List[EnumItemDef]|None = field(default=None)
    id: int|None = field(default=None)
    kind: str|None = field(default=None)
    name: str|None = field(default=None)
    requiredForCheckout: bool|None = field(default=None)
    type: str|None = field(default=None)


@dataclass
class CustomFieldDefListResponse(GoogleAPIResourceBase):
    """
    CustomFieldDefListResponse resource of the Google Maps Coordinate API.
    """
    items: List[CustomFieldDef]|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class CustomFields(GoogleAPIResourceBase):
    """
    CustomFields resource of the Google Maps Coordinate API.
    """
    customField: List[CustomField]|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class Location(GoogleAPIResourceBase):
    """
    Location resource of the Google Maps Coordinate API.
    """
    addressLine: List[str]|None = field(default=None)
    kind: str|None = field(default=None)
    lat: float|None = field(default=None)
    lng: float|None = field(default=None)


@dataclass
class JobState(GoogleAPIResourceBase):
    """
    JobState resource of the Google Maps Coordinate API.
    """
    assignee: str|None = field(default=None)
    customFields: CustomFields|None = field(default=None)
    customerName: str|None = field(default=None)
    customerPhoneNumber: str|None = field(default=None)
    kind: str|None = field(default=None)
    location: Location|None = field(default=None)
    note: List[str]|None = field(default=None)
    progress: str|None = field(default=None)
    title: str|None = field(default=None)


@dataclass
class JobChange(GoogleAPIResourceBase):
    """
    JobChange resource of the Google Maps Coordinate API.
    """
    _int64 = ("timestamp",)
    kind: str|None = field(default=None)
    state: JobState|None = field(default=None)
    timestamp: int|None = field(default=None)


@dataclass
class Job(GoogleAPIResourceBase):
    """
    Job resource of the Google Maps Coordinate API.
    """
    _int64 = ("id",)
    id: int|None = field(default=None)
    jobChange: List[JobChange]|None = field(default=None)
    kind: str|None = field(default=None)
    state: JobState|None = field(default=None)


@dataclass
class JobListResponse(GoogleAPIResourceBase):
    """
    JobListResponse resource of the Google Maps Coordinate API.
    """
    items: List[Job]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)


@dataclass
class LocationRecord(GoogleAPIResourceBase):
    """
    LocationRecord resource of the Google Maps Coordinate API.
    """
    _int64 = ("collectionTime",)
    collectionTime: int|None = field(default=None)
    confidenceRadius: float|None = field(default=None)
    kind: str|None = field(default=None)
    latitude: float|None = field(default=None)
    longitude: float|None = field(default=None)


@dataclass
class TokenPagination(GoogleAPIResourceBase):
    """
    TokenPagination resource of the Google Maps Coordinate API.
    """
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    previousPageToken: str|None = field(default=None)


@dataclass
class LocationListResponse(GoogleAPIResourceBase):
    """
    LocationListResponse resource of the Google Maps Coordinate API.
    """
    items: List[LocationRecord]|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    tokenPagination: TokenPagination|None = field(default=None)


@dataclass
class Schedule(GoogleAPIResourceBase):
    """
    Schedule resource of the Google Maps Coordinate API.
    """
    _int64 = ("duration", "endTime", "startTime")
    allDay: bool|None = field(default=None)
    duration: int|None = field(default=None)
    endTime: int|None = field(default=None)
    kind: str|None = field(default=None)
    startTime: int|None = field(default=None)


@dataclass
class Team(GoogleAPIResourceBase):
    """
    Team resource of the Google Maps Coordinate API.
    """
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    name: str|None = field(default=None)


@dataclass
class TeamListResponse(GoogleAPIResourceBase):
    """
    TeamListResponse resource of the Google Maps Coordinate API.
    """
    items: List[Team]|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class Worker(GoogleAPIResourceBase):
    """
    Worker resource of the Google Maps Coordinate API.
    """
    id: str|None = field(default=None)
    kind: str|None = field(default=None)


@dataclass
class WorkerListResponse(GoogleAPIResourceBase):
    """
    WorkerListResponse resource of the Google Maps Coordinate API.
    """
    items: List[Worker]|None = field(default=None)
    kind: str|None = field(default=None)
