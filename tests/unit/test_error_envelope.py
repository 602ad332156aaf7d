from treasure_map.core.exceptions import ErrorCode, OutOfRangeError, SearchFailedError
from treasure_map.schemas.base import StandardErrorResponse


def test_out_of_range_details():
    exc = OutOfRangeError(5, 2)
    assert exc.error_code is ErrorCode.OUT_OF_RANGE
    assert exc.status_code == 404
    assert exc.details == {"index": 5, "length": 2}


def test_search_failed_keeps_query():
    exc = SearchFailedError("pizza", "timeout", {"status_code": 504})
    assert exc.details == {"query": "pizza", "reason": "timeout", "status_code": 504}
    assert "pizza" in exc.message


def test_standard_error_response_requires_uppercase_code():
    body = StandardErrorResponse(error_code="OUT_OF_RANGE", message="x").model_dump(mode="json")
    assert body["error_code"] == "OUT_OF_RANGE"
    assert isinstance(body["timestamp"], str)


def test_unknown_route_uses_error_envelope(client):
    r = client.get('/nowhere')
    assert r.status_code == 404
    body = r.json()
    assert body['error_code'] == 'NOT_FOUND'
    assert r.headers['X-Request-ID'] == body['request_id']


def test_health_reports_error_counts(client):
    before = client.get('/health').json()['errors']['error_counts'].get('OUT_OF_RANGE', 0)
    client.delete('/treasures/rows/9')

    errors = client.get('/health').json()['errors']
    assert errors['error_counts']['OUT_OF_RANGE'] == before + 1
    assert errors['recent_errors']['OUT_OF_RANGE'] >= 1
    assert errors['total_errors'] >= 1
