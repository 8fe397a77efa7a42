import pytest
from requests import Response


@pytest.fixture
def anyio_backend():
    return "asyncio"


def make_response(
    status_code: int,
    reason: str,
    body: bytes | None,
    headers: dict[str, str] | None = None,
) -> Response:
    """Build a real requests Response with the given status line and body."""
    response = Response()
    if headers:
        response.headers.update(headers)
    response.status_code = status_code
    response.reason = reason
    response._content = body if body is not None else b""
    response.encoding = "utf-8"
    return response


@pytest.fixture
def response_factory():
    return make_response
