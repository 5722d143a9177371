import httpx
import pytest
import pytest_asyncio

from lambda_runtime.client import RuntimeClient
from lambda_runtime.core import consts, request_context
from lambda_runtime.tests.runtime_api import BASE_URL, FUNCTION_ARN, REQUEST_ID, TRACE_ID


@pytest.fixture
def invocation_headers():
    """A complete, valid set of next-invocation headers."""
    return {
        consts.HEADER_REQUEST_ID: REQUEST_ID,
        consts.HEADER_DEADLINE: "1542409706888",
        consts.HEADER_INVOKED_FUNCTION_ARN: FUNCTION_ARN,
        consts.HEADER_TRACE_ID: TRACE_ID,
    }


@pytest_asyncio.fixture
async def http_client():
    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        yield client


@pytest.fixture
def runtime_client(http_client):
    return RuntimeClient(http_client)


@pytest.fixture(autouse=True)
def _clear_request_context(monkeypatch):
    # setenv first so teardown restores the original (usually unset) value
    monkeypatch.setenv(consts.TRACE_ID_ENV, "")
    monkeypatch.delenv(consts.TRACE_ID_ENV)
    request_context.clear_context()
    yield
    request_context.clear_context()
