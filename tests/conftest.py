import io
from typing import Any, Dict, List
from collections.abc import Generator
from unittest.mock import MagicMock

import inject
import pytest

from sparts_cli.config import reset_config
from sparts_cli.services.alias.memory_provider import AliasMemoryProvider
from sparts_cli.services.api.api_service import HttpService
from sparts_cli.services.ledger.supplier_api import SupplierLedgerApi
from sparts_cli.services.presentation.parts_view import PartsView
from sparts_cli.services.presentation.supplier_view import SupplierView
from sparts_cli.utils.display import Colors, ErrorDisplay

from tests.utils import ALICE_UUID, BOB_UUID, CHARLIE_UUID, PART_UUID


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None, None, None]:
    yield
    reset_config()
    inject.clear()


@pytest.fixture()
def mock_api_service() -> MagicMock:
    return MagicMock(spec=HttpService)


@pytest.fixture()
def supplier_api(mock_api_service: MagicMock) -> SupplierLedgerApi:
    return SupplierLedgerApi(api_service=mock_api_service)


@pytest.fixture()
def aliases() -> Dict[str, str]:
    return {"bob": BOB_UUID, "widget": PART_UUID}


@pytest.fixture()
def alias_provider(aliases: Dict[str, str]) -> AliasMemoryProvider:
    return AliasMemoryProvider(aliases)


@pytest.fixture()
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def err() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def error_display(err: io.StringIO) -> ErrorDisplay:
    return ErrorDisplay(debug=False, colors=Colors(enabled=False), stream=err)


@pytest.fixture()
def supplier_view(
    supplier_api: SupplierLedgerApi,
    alias_provider: AliasMemoryProvider,
    error_display: ErrorDisplay,
    out: io.StringIO,
) -> SupplierView:
    return SupplierView(
        supplier_api=supplier_api,
        alias_provider=alias_provider,
        error_display=error_display,
        parts_view=PartsView(alias_provider=alias_provider, out=out),
        colors=Colors(enabled=False),
        out=out,
    )


@pytest.fixture()
def mock_supplier_list() -> List[Dict[str, Any]]:
    return [
        {"uuid": CHARLIE_UUID, "name": "Charlie", "short_id": "CHR"},
        {"uuid": ALICE_UUID, "name": "Alice", "short_id": "ALC", "url": "http://alice.example"},
        {"uuid": BOB_UUID, "name": "Bob", "short_id": "BOB", "passwd": "RUNNING"},
    ]


@pytest.fixture()
def mock_supplier() -> Dict[str, Any]:
    return {
        "uuid": ALICE_UUID,
        "name": "Alice",
        "short_id": "ALC",
        "url": "http://alice.example",
        "parts": [],
    }
