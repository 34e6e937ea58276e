import json

import pytest
from starlette.requests import Request

from prephub.common.errors import ConflictError, NotFoundError, StoreError
from prephub.main import _prephub_error_handler, _store_error_handler, _unhandled_error_handler

pytestmark = pytest.mark.anyio("asyncio")

GENERIC = "Server error. Please try again later."


def make_request(path="/api/quiz-history"):
    return Request(
        {
            "type": "http",
            "method": "POST",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "root_path": "",
            "query_string": b"",
            "headers": [],
        }
    )


def body_of(response):
    return json.loads(response.body)


@pytest.mark.anyio("asyncio")
async def test_store_error_hides_detail():
    response = await _store_error_handler(make_request(), StoreError("users.update failed password_hash=$2b$secret"))
    assert response.status_code == 500
    assert body_of(response) == {"success": False, "message": GENERIC}
    assert b"secret" not in response.body


@pytest.mark.anyio("asyncio")
async def test_domain_errors_keep_their_message():
    response = await _prephub_error_handler(make_request(), ConflictError())
    assert response.status_code == 409
    assert body_of(response) == {"success": False, "message": "An account with this email already exists."}

    response = await _prephub_error_handler(make_request("/api/stats/x"), NotFoundError())
    assert response.status_code == 404
    assert body_of(response)["message"] == "User not found."


@pytest.mark.anyio("asyncio")
async def test_unexpected_error_is_generic():
    response = await _unhandled_error_handler(make_request(), RuntimeError("boom at line 42"))
    assert response.status_code == 500
    assert body_of(response) == {"success": False, "message": GENERIC}
