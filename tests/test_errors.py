from gapibindings.errors import ErrorItem, GoogleAPIError, HTTPError, ProtocolError, UploadError
from gapibindings.googleapi import check_response, check_media_response, is_not_modified

import pytest

from conftest import make_response


def test_plain_body():
    e = HTTPError(502, body="Bad Gateway")
    assert(str(e) == "googleapi: got HTTP response code 502 with body: Bad Gateway")
    assert(isinstance(e, GoogleAPIError))


def test_single_error_item():
    e = HTTPError(404, "Not Found", errors=[ErrorItem("notFound", "Not Found")])
    assert(str(e) == "googleapi: Error 404: Not Found, notFound")


def test_several_error_items():
    e = HTTPError(400, "Invalid", errors=[ErrorItem("required", "Required"), ErrorItem("invalid", "Invalid")])
    assert(str(e) == "googleapi: Error 400: Invalid\nMore details:\n"
                     "Reason: required, Message: Required\nReason: invalid, Message: Invalid\n")


def test_message_only():
    assert(str(HTTPError(401, "Login Required")) == "googleapi: Error 401: Login Required")


def test_check_response_json_reply():
    resp = make_response(404, {"error": {"code": 404, "message": "No such object: b/o",
                                         "errors": [{"domain": "global", "reason": "notFound",
                                                     "message": "No such object: b/o"}]}},
                         headers={'X-Trace': "abc"})
    with pytest.raises(HTTPError) as e:
        check_response(resp)
    assert(e.value.code == 404)
    assert(e.value.message == "No such object: b/o")
    assert(e.value.errors == [ErrorItem("notFound", "No such object: b/o")])
    assert(e.value.header['X-Trace'] == "abc")
    assert("No such object" in e.value.body)


def test_check_response_code_defaults_to_status():
    with pytest.raises(HTTPError) as e:
        check_response(make_response(409, {"error": {"message": "Conflict"}}))
    assert(e.value.code == 409)


def test_check_response_not_json():
    with pytest.raises(HTTPError) as e:
        check_response(make_response(500, "<html>oops</html>"))
    assert(e.value.code == 500)
    assert(e.value.body == "<html>oops</html>")
    assert(e.value.errors == [])


def test_check_response_ok():
    check_response(make_response(200, {}))
    check_response(make_response(204))


def test_media_response_body_prefix():
    with pytest.raises(HTTPError) as e:
        check_media_response(make_response(403, b"x" * 5000))
    assert(len(e.value.body) == 1024)


def test_not_modified():
    assert(is_not_modified(HTTPError(304)))
    assert(not is_not_modified(HTTPError(404)))
    assert(not is_not_modified(ValueError("304")))


def test_protocol_error_is_upload_error():
    assert(issubclass(ProtocolError, UploadError))
