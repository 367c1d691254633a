from typing import Dict, Any
from unittest.mock import MagicMock, patch

import pytest
from requests.exceptions import Timeout, ConnectionError
from yarl import URL
from sparts_cli.services.api.api_service import HttpService

PATCHED_MODULE = "sparts_cli.services.api.api_service.request"
PATCHED_SLEEP = "sparts_cli.services.api.api_service.time.sleep"


@patch(PATCHED_MODULE)
def test_do_request_should_succeed(
    mock_post: MagicMock,
    http_service: HttpService,
    mock_body: Dict[str, Any],
) -> None:
    mock_request = MagicMock()
    mock_request.status_code = 200
    mock_request.json.return_value = mock_body
    mock_post.return_value = mock_request

    actual = http_service.do_request(method="POST", json=mock_body)

    assert actual.json() == mock_body
    assert actual.status_code == 200
    mock_post.assert_called_once()


@patch(PATCHED_MODULE)
def test_do_request_should_pass_url_headers_and_body(
    mock_post: MagicMock,
    http_service: HttpService,
    mock_body: Dict[str, Any],
    mock_sub_route: str,
    base_url: str,
) -> None:
    http_service.do_request(
        method="POST",
        sub_route=mock_sub_route,
        json=mock_body,
        headers={"X-Custom-Header": "myvalue"},
    )

    mock_post.assert_called_with(
        method="POST",
        url=f"{base_url}/api/sparts/ledger/suppliers",
        headers={"Content-Type": "application/json", "X-Custom-Header": "myvalue"},
        timeout=1,
        json=mock_body,
    )


@patch(PATCHED_SLEEP)
@patch(PATCHED_MODULE)
def test_do_request_should_retry_until_success(
    mock_request: MagicMock,
    mock_sleep: MagicMock,
    base_url: str,
) -> None:
    service = HttpService(base_url=base_url, timeout=1, retries=3, backoff=0.1)
    ok = MagicMock()
    ok.status_code = 200
    mock_request.side_effect = [ConnectionError("down"), Timeout("slow"), ok]

    actual = service.do_request("GET")

    assert actual is ok
    assert mock_request.call_count == 3
    assert mock_sleep.call_count == 2
    mock_sleep.assert_any_call(0.1)
    mock_sleep.assert_any_call(0.2)


@patch(PATCHED_MODULE)
def test_do_request_should_fail_on_timeout(
    mock_request: MagicMock,
    http_service: HttpService,
) -> None:
    mock_request.side_effect = Timeout("Timeout Error")

    with pytest.raises(ConnectionError) as e:
        http_service.do_request("GET")

    assert "Failed " in str(e)


@patch(PATCHED_MODULE)
def test_do_request_should_fail_on_connection_error(
    mock_request: MagicMock, http_service: HttpService, mock_sub_route: str
) -> None:
    mock_request.side_effect = ConnectionError("Connection Error")

    with pytest.raises(ConnectionError) as e:
        http_service.do_request(method="GET", sub_route=mock_sub_route)

    assert "Failed " in str(e)


def test_make_header_should_succeed(
    http_service: HttpService,
) -> None:
    assert http_service.make_headers() == {"Content-Type": "application/json"}
    assert http_service.make_headers({"X-Extra": "1"}) == {
        "Content-Type": "application/json",
        "X-Extra": "1",
    }


def test_make_target_url_should_join_routes(
    http_service: HttpService, base_url: str
) -> None:
    expected = URL(f"{base_url}/api/sparts/ledger/suppliers/abc")

    assert http_service.make_target_url("/api/sparts/ledger/suppliers/abc") == expected
    assert http_service.make_target_url("api/sparts/ledger/suppliers/abc") == expected
    assert http_service.make_target_url() == URL(base_url)
