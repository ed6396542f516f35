import json

import pytest

from gapibindings import coordinate
from gapibindings.coordinate.resources import Job, JobState, Location, Schedule

from conftest import make_response

BASE = "https://www.googleapis.com/coordinate/v1/"


@pytest.fixture
def svc(session):
    return coordinate.Service(session)


def test_insert_job_required_query(svc, session):
    session.queue(make_response(200, {"id": "18446744073709551615", "state": {"title": "Fix sink"}}))
    job = Job(state=JobState(note=["call first"]))
    ret = (svc.jobs.insert("team1", "1 Main St", 37.5, -122.25, "Fix sink", job)
           .customerName("Ann").customField("12=Alice", "13=Bob").do())
    assert(ret.id == 18446744073709551615)
    assert(ret.state.title == "Fix sink")
    sent = session.sent[0]
    assert(sent.url == BASE + "teams/team1/jobs")
    assert(sent.params == [("address", "1 Main St"), ("alt", "json"),
                           ("customField", "12=Alice"), ("customField", "13=Bob"),
                           ("customerName", "Ann"), ("lat", "37.5"), ("lng", "-122.25"),
                           ("title", "Fix sink")])
    assert(json.loads(sent.data) == {"state": {"note": ["call first"]}})


def test_job_int64_path_parameter(svc, session):
    session.queue(make_response(200, {"id": "123", "jobChange": [{"timestamp": "1380000000000",
                                                                   "state": {"progress": "COMPLETED"}}]}))
    job = svc.jobs.get("team1", 123).do()
    assert(session.sent[0].url == BASE + "teams/team1/jobs/123")
    assert(job.jobChange[0].timestamp == 1380000000000)
    assert(job.jobChange[0].state.progress == "COMPLETED")


def test_patch_progress_enum(svc, session):
    with pytest.raises(ValueError):
        svc.jobs.patch("team1", 1, Job()).progress("FINISHED")
    session.queue(make_response(200, {"id": "1"}))
    svc.jobs.patch("team1", 1, Job()).progress("IN_PROGRESS").do()
    assert(("progress", "IN_PROGRESS") in session.sent[0].params)


def test_location_list_pages(svc, session):
    session.queue(make_response(200, {"items": [{"latitude": 1.5, "collectionTime": "10"}],
                                      "nextPageToken": "p2"}),
                  make_response(200, {"items": [{"latitude": 2.5, "collectionTime": "20"}]}))
    call = svc.location.list("team1", "a@example.com", 1380000000000).maxResults(1)
    times = [r.collectionTime for page in call.pages() for r in page.items]
    assert(times == [10, 20])
    assert(session.sent[0].url == BASE + "teams/team1/workers/a%40example.com/locations")
    assert(("startTimestampMs", "1380000000000") in session.sent[1].params)
    assert(("pageToken", "p2") in session.sent[1].params)


def test_schedule_update(svc, session):
    session.queue(make_response(200, {"allDay": False, "startTime": "1380000000000", "duration": "3600000"}))
    s = svc.schedule.update("team1", 5, Schedule(allDay=False, startTime=1380000000000)).do()
    assert(s.duration == 3600000)
    assert(session.sent[0].method == "PUT")
    assert(json.loads(session.sent[0].data) == {"allDay": False, "startTime": "1380000000000"})


def test_location_resource():
    loc = Location.from_base({"addressLine": ["1 Main St", "Springfield"], "lat": 1.0, "lng": 2.0})
    assert(loc.trim() == {"addressLine": ["1 Main St", "Springfield"], "lat": 1.0, "lng": 2.0})


def test_lists_without_paging(svc, session):
    session.queue(make_response(200, {"items": [{"id": "t1", "name": "Team"}]}))
    teams = svc.team.list().do()
    assert(teams.items[0].name == "Team")
    assert(session.sent[0].url == BASE + "teams")
    assert(not hasattr(svc.team.list(), "pages"))
