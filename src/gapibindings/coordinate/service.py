"""
Google Maps Coordinate API v1 calls.
https://developers.google.com/coordinate/
Generated from the coordinate:v1 discovery document by gapibindings.generator, do not edit.
"""
from typing import Self

import requests

from ..calls import ApiService, Call, PagedCall, ResourceService
from .resources import (
    CustomFieldDefListResponse,
    Job,
    JobListResponse,
    LocationListResponse,
    Schedule,
    TeamListResponse,
    WorkerListResponse,
)


class CustomFieldDefListCall(Call):
    """
    Retrieves a list of custom field definitions for a team.
    GET teams/{teamId}/custom_fields
    """
    _method_id = "coordinate.customFieldDef.list"
    _http_method = "GET"
    _path = "teams/{teamId}/custom_fields"
    _response = CustomFieldDefListResponse

    def __init__(self, service: ApiService, teamId: str) -> None:
        super().__init__(service, {"teamId": teamId})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class JobsGetCall(Call):
    """
    Retrieves a job, including all the changes made to the job.
    GET teams/{teamId}/jobs/{jobId}
    """
    _method_id = "coordinate.jobs.get"
    _http_method = "GET"
    _path = "teams/{teamId}/jobs/{jobId}"
    _response = Job

    def __init__(self, service: ApiService, teamId: str, jobId: int) -> None:
        super().__init__(service, {"teamId": teamId, "jobId": jobId})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class JobsInsertCall(Call):
    """
    Inserts a new job. Only the state field of the job should be set.
    POST teams/{teamId}/jobs
    """
    _method_id = "coordinate.jobs.insert"
    _http_method = "POST"
    _path = "teams/{teamId}/jobs"
    _response = Job

    def __init__(self, service: ApiService, teamId: str, address: str, lat: float, lng: float, title: str, job: Job) -> None:
        super().__init__(service, {"teamId": teamId}, body=job)
        self._set("address", address)
        self._set("lat", lat)
        self._set("lng", lng)
        self._set("title", title)

    def assignee(self, assignee: str) -> Self:
        """
        Assignee email address, or empty string to unassign.
        """
        return self._set("assignee", assignee)

    def customField(self, *customField: str) -> Self:
        """
        Sets the value of custom fields. To set a custom field, pass the field id (from /team/teamId/custom_fields), a URL escaped '=' character, and the desired value as a parameter. For example, customField=12%3DAlice. Repeat the parameter for each custom field. Note that '=' cannot appear in the parameter value. Specifying an invalid, or inactive enum field will result in an error 500.
        """
        return self._add("customField", customField)

    def customerName(self, customerName: str) -> Self:
        """
        Customer name
        """
        return self._set("customerName", customerName)

    def customerPhoneNumber(self, customerPhoneNumber: str) -> Self:
        """
        Customer phone number
        """
        return self._set("customerPhoneNumber", customerPhoneNumber)

    def note(self, note: str) -> Self:
        """
        Job note as newline (Unix) separated string
        """
        return self._set("note", note)


class JobsListCall(PagedCall):
    """
    Retrieves jobs created or modified since the given timestamp.
    GET teams/{teamId}/jobs
    """
    _method_id = "coordinate.jobs.list"
    _http_method = "GET"
    _path = "teams/{teamId}/jobs"
    _response = JobListResponse

    def __init__(self, service: ApiService, teamId: str) -> None:
        super().__init__(service, {"teamId": teamId})

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of results to return in one page.
        """
        return self._set("maxResults", maxResults)

    def minModifiedTimestampMs(self, minModifiedTimestampMs: int) -> Self:
        """
        Minimum time a job was modified in milliseconds since epoch.
        """
        return self._set("minModifiedTimestampMs", minModifiedTimestampMs)

    def pageToken(self, pageToken: str) -> Self:
        """
        Continuation token
        """
        return self._set("pageToken", pageToken)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class JobsPatchCall(Call):
    """
    Updates a job. Fields that are set in the job state will be updated. This method supports patch semantics.
    PATCH teams/{teamId}/jobs/{jobId}
    """
    _method_id = "coordinate.jobs.patch"
    _http_method = "PATCH"
    _path = "teams/{teamId}/jobs/{jobId}"
    _response = Job

    def __init__(self, service: ApiService, teamId: str, jobId: int, job: Job) -> None:
        super().__init__(service, {"teamId": teamId, "jobId": jobId}, body=job)

    def address(self, address: str) -> Self:
        """
        Job address as newline (Unix) separated string
        """
        return self._set("address", address)

    def assignee(self, assignee: str) -> Self:
        """
        Assignee email address, or empty string to unassign.
        """
        return self._set("assignee", assignee)

    def customField(self, *customField: str) -> Self:
        """
        Sets the value of custom fields. To set a custom field, pass the field id (from /team/teamId/custom_fields), a URL escaped '=' character, and the desired value as a parameter. For example, customField=12%3DAlice. Repeat the parameter for each custom field. Note that '=' cannot appear in the parameter value. Specifying an invalid, or inactive enum field will result in an error 500.
        """
        return self._add("customField", customField)

    def customerName(self, customerName: str) -> Self:
        """
        Customer name
        """
        return self._set("customerName", customerName)

    def customerPhoneNumber(self, customerPhoneNumber: str) -> Self:
        """
        Customer phone number
        """
        return self._set("customerPhoneNumber", customerPhoneNumber)

    def lat(self, lat: float) -> Self:
        """
        The latitude coordinate of this job's location.
        """
        return self._set("lat", lat)

    def lng(self, lng: float) -> Self:
        """
        The longitude coordinate of this job's location.
        """
        return self._set("lng", lng)

    def note(self, note: str) -> Self:
        """
        Job note as newline (Unix) separated string
        """
        return self._set("note", note)

    def progress(self, progress: str) -> Self:
        """
        Job progress
        "COMPLETED" - Completed
        "IN_PROGRESS" - In progress
        "NOT_ACCEPTED" - Not accepted
        "NOT_STARTED" - Not started
        "OBSOLETE" - Obsolete
        """
        return self._set("progress", progress, ("COMPLETED", "IN_PROGRESS", "NOT_ACCEPTED", "NOT_STARTED", "OBSOLETE"))

    def title(self, title: str) -> Self:
        """
        Job title
        """
        return self._set("title", title)


class JobsUpdateCall(Call):
    """
    Updates a job. Fields that are set in the job state will be updated.
    PUT teams/{teamId}/jobs/{jobId}
    """
    _method_id = "coordinate.jobs.update"
    _http_method = "PUT"
    _path = "teams/{teamId}/jobs/{jobId}"
    _response = Job

    def __init__(self, service: ApiService, teamId: str, jobId: int, job: Job) -> None:
        super().__init__(service, {"teamId": teamId, "jobId": jobId}, body=job)

    def address(self, address: str) -> Self:
        """
        Job address as newline (Unix) separated string
        """
        return self._set("address", address)

    def assignee(self, assignee: str) -> Self:
        """
        Assignee email address, or empty string to unassign.
        """
        return self._set("assignee", assignee)

    def customField(self, *customField: str) -> Self:
        """
        Sets the value of custom fields. To set a custom field, pass the field id (from /team/teamId/custom_fields), a URL escaped '=' character, and the desired value as a parameter. For example, customField=12%3DAlice. Repeat the parameter for each custom field. Note that '=' cannot appear in the parameter value. Specifying an invalid, or inactive enum field will result in an error 500.
        """
        return self._add("customField", customField)

    def customerName(self, customerName: str) -> Self:
        """
        Customer name
        """
        return self._set("customerName", customerName)

    def customerPhoneNumber(self, customerPhoneNumber: str) -> Self:
        """
        Customer phone number
        """
        return self._set("customerPhoneNumber", customerPhoneNumber)

    def lat(self, lat: float) -> Self:
        """
        The latitude coordinate of this job's location.
        """
        return self._set("lat", lat)

    def lng(self, lng: float) -> Self:
        """
        The longitude coordinate of this job's location.
        """
        return self._set("lng", lng)

    def note(self, note: str) -> Self:
        """
        Job note as newline (Unix) separated string
        """
        return self._set("note", note)

    def progress(self, progress: str) -> Self:
        """
        Job progress
        "COMPLETED" - Completed
        "IN_PROGRESS" - In progress
        "NOT_ACCEPTED" - Not accepted
        "NOT_STARTED" - Not started
        "OBSOLETE" - Obsolete
        """
        return self._set("progress", progress, ("COMPLETED", "IN_PROGRESS", "NOT_ACCEPTED", "NOT_STARTED", "OBSOLETE"))

    def title(self, title: str) -> Self:
        """
        Job title
        """
        return self._set("title", title)


class LocationListCall(PagedCall):
    """
    Retrieves a list of locations for a worker.
    GET teams/{teamId}/workers/{workerEmail}/locations
    """
    _method_id = "coordinate.location.list"
    _http_method = "GET"
    _path = "teams/{teamId}/workers/{workerEmail}/locations"
    _response = LocationListResponse

    def __init__(self, service: ApiService, teamId: str, workerEmail: str, startTimestampMs: int) -> None:
        super().__init__(service, {"teamId": teamId, "workerEmail": workerEmail})
        self._set("startTimestampMs", startTimestampMs)

    def maxResults(self, maxResults: int) -> Self:
        """
        Maximum number of results to return in one page.
        """
        return self._set("maxResults", maxResults)

    def pageToken(self, pageToken: str) -> Self:
        """
        Continuation token
        """
        return self._set("pageToken", pageToken)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class ScheduleGetCall(Call):
    """
    Retrieves the schedule for a job.
    GET teams/{teamId}/jobs/{jobId}/schedule
    """
    _method_id = "coordinate.schedule.get"
    _http_method = "GET"
    _path = "teams/{teamId}/jobs/{jobId}/schedule"
    _response = Schedule

    def __init__(self, service: ApiService, teamId: str, jobId: int) -> None:
        super().__init__(service, {"teamId": teamId, "jobId": jobId})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class SchedulePatchCall(Call):
    """
    Replaces the schedule of a job with the provided schedule. This method supports patch semantics.
    PATCH teams/{teamId}/jobs/{jobId}/schedule
    """
    _method_id = "coordinate.schedule.patch"
    _http_method = "PATCH"
    _path = "teams/{teamId}/jobs/{jobId}/schedule"
    _response = Schedule

    def __init__(self, service: ApiService, teamId: str, jobId: int, schedule: Schedule) -> None:
        super().__init__(service, {"teamId": teamId, "jobId": jobId}, body=schedule)

    def allDay(self, allDay: bool) -> Self:
        """
        Whether the job is scheduled for the whole day. Time of day in start/end times is ignored if this is true.
        """
        return self._set("allDay", allDay)

    def duration(self, duration: int) -> Self:
        """
        Job duration in milliseconds.
        """
        return self._set("duration", duration)

    def endTime(self, endTime: int) -> Self:
        """
        Scheduled end time in milliseconds since epoch.
        """
        return self._set("endTime", endTime)

    def startTime(self, startTime: int) -> Self:
        """
        Scheduled start time in milliseconds since epoch.
        """
        return self._set("startTime", startTime)


class ScheduleUpdateCall(Call):
    """
    Replaces the schedule of a job with the provided schedule.
    PUT teams/{teamId}/jobs/{jobId}/schedule
    """
    _method_id = "coordinate.schedule.update"
    _http_method = "PUT"
    _path = "teams/{teamId}/jobs/{jobId}/schedule"
    _response = Schedule

    def __init__(self, service: ApiService, teamId: str, jobId: int, schedule: Schedule) -> None:
        super().__init__(service, {"teamId": teamId, "jobId": jobId}, body=schedule)

    def allDay(self, allDay: bool) -> Self:
        """
        Whether the job is scheduled for the whole day. Time of day in start/end times is ignored if this is true.
        """
        return self._set("allDay", allDay)

    def duration(self, duration: int) -> Self:
        """
        Job duration in milliseconds.
        """
        return self._set("duration", duration)

    def endTime(self, endTime: int) -> Self:
        """
        Scheduled end time in milliseconds since epoch.
        """
        return self._set("endTime", endTime)

    def startTime(self, startTime: int) -> Self:
        """
        Scheduled start time in milliseconds since epoch.
        """
        return self._set("startTime", startTime)


class TeamListCall(Call):
    """
    Retrieves a list of teams for a user.
    GET teams
    """
    _method_id = "coordinate.team.list"
    _http_method = "GET"
    _path = "teams"
    _response = TeamListResponse

    def __init__(self, service: ApiService) -> None:
        super().__init__(service, None)

    def admin(self, admin: bool) -> Self:
        """
        Whether to include teams for which the user has the Admin role.
        """
        return self._set("admin", admin)

    def dispatcher(self, dispatcher: bool) -> Self:
        """
        Whether to include teams for which the user has the Dispatcher role.
        """
        return self._set("dispatcher", dispatcher)

    def worker(self, worker: bool) -> Self:
        """
        Whether to include teams for which the user has the Worker role.
        """
        return self._set("worker", worker)

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class WorkerListCall(Call):
    """
    Retrieves a list of workers in a team.
    GET teams/{teamId}/workers
    """
    _method_id = "coordinate.worker.list"
    _http_method = "GET"
    _path = "teams/{teamId}/workers"
    _response = WorkerListResponse

    def __init__(self, service: ApiService, teamId: str) -> None:
        super().__init__(service, {"teamId": teamId})

    def ifNoneMatch(self, entityTag: str) -> Self:
        """
        Fail with a 304 HTTPError if the resource's ETag matches, see googleapi.is_not_modified()
        """
        return self._header("If-None-Match", entityTag)


class CustomFieldDefService(ResourceService):

    def list(self, teamId: str) -> CustomFieldDefListCall:
        """
        Retrieves a list of custom field definitions for a team.
        """
        return CustomFieldDefListCall(self._s, teamId)


class JobsService(ResourceService):

    def get(self, teamId: str, jobId: int) -> JobsGetCall:
        """
        Retrieves a job, including all the changes made to the job.
        """
        return JobsGetCall(self._s, teamId, jobId)

    def insert(self, teamId: str, address: str, lat: float, lng: float, title: str, job: Job) -> JobsInsertCall:
        """
        Inserts a new job. Only the state field of the job should be set.
        """
        return JobsInsertCall(self._s, teamId, address, lat, lng, title, job)

    def list(self, teamId: str) -> JobsListCall:
        """
        Retrieves jobs created or modified since the given timestamp.
        """
        return JobsListCall(self._s, teamId)

    def patch(self, teamId: str, jobId: int, job: Job) -> JobsPatchCall:
        """
        Updates a job. Fields that are set in the job state will be updated. This method supports patch semantics.
        """
        return JobsPatchCall(self._s, teamId, jobId, job)

    def update(self, teamId: str, jobId: int, job: Job) -> JobsUpdateCall:
        """
        Updates a job. Fields that are set in the job state will be updated.
        """
        return JobsUpdateCall(self._s, teamId, jobId, job)


class LocationService(ResourceService):

    def list(self, teamId: str, workerEmail: str, startTimestampMs: int) -> LocationListCall:
        """
        Retrieves a list of locations for a worker.
        """
        return LocationListCall(self._s, teamId, workerEmail, startTimestampMs)


class ScheduleService(ResourceService):

    def get(self, teamId: str, jobId: int) -> ScheduleGetCall:
        """
        Retrieves the schedule for a job.
        """
        return ScheduleGetCall(self._s, teamId, jobId)

    def patch(self, teamId: str, jobId: int, schedule: Schedule) -> SchedulePatchCall:
        """
        Replaces the schedule of a job with the provided schedule. This method supports patch semantics.
        """
        return SchedulePatchCall(self._s, teamId, jobId, schedule)

    def update(self, teamId: str, jobId: int, schedule: Schedule) -> ScheduleUpdateCall:
        """
        Replaces the schedule of a job with the provided schedule.
        """
        return ScheduleUpdateCall(self._s, teamId, jobId, schedule)


class TeamService(ResourceService):

    def list(self) -> TeamListCall:
        """
        Retrieves a list of teams for a user.
        """
        return TeamListCall(self._s)


class WorkerService(ResourceService):

    def list(self, teamId: str) -> WorkerListCall:
        """
        Retrieves a list of workers in a team.
        """
        return WorkerListCall(self._s, teamId)


class Service(ApiService):
    """
    Google Maps Coordinate API v1
    https://developers.google.com/coordinate/
    """
    _root_url = "https://www.googleapis.com/"
    _service_path = "coordinate/v1/"

    def __init__(self, session: requests.Session, root_url: str|None = None,
                 user_agent: str = "", api_key: str|None = None) -> None:
        super().__init__(session, root_url, user_agent, api_key)
        self.customFieldDef = CustomFieldDefService(self)
        self.jobs = JobsService(self)
        self.location = LocationService(self)
        self.schedule = ScheduleService(self)
        self.team = TeamService(self)
        self.worker = WorkerService(self)
