from typing import Any, Dict
import pytest

from sparts_cli.services.api.api_service import HttpService


@pytest.fixture()
def base_url() -> str:
    return "http://example.com"


@pytest.fixture()
def mock_sub_route() -> str:
    return "/api/sparts/ledger/suppliers"


@pytest.fixture()
def mock_body() -> Dict[str, Any]:
    return {"example": "some data"}


@pytest.fixture()
def http_service(base_url: str) -> HttpService:
    return HttpService(
        base_url=base_url,
        timeout=1,
        retries=1,
        backoff=0.1,
    )
