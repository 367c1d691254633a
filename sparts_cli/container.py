import inject

from sparts_cli.config import get_config
from sparts_cli.services.alias.alias_provider import AliasProvider
from sparts_cli.services.alias.factory import AliasProviderFactory
from sparts_cli.services.api.api_service import HttpService
from sparts_cli.services.ledger.supplier_api import SupplierLedgerApi
from sparts_cli.services.presentation.parts_view import PartsView
from sparts_cli.services.presentation.supplier_view import SupplierView
from sparts_cli.utils.display import Colors, ErrorDisplay


def container_config(binder: inject.Binder) -> None:
    config = get_config()

    api_service = HttpService(
        base_url=config.ledger.base_url,
        timeout=config.ledger.timeout,
        retries=config.ledger.retries,
        backoff=config.ledger.backoff,
    )
    binder.bind(HttpService, api_service)

    supplier_api = SupplierLedgerApi(
        api_service=api_service,
        custom_header_name=config.ledger.custom_header_name,
        custom_header_value=config.ledger.custom_header_value,
    )
    binder.bind(SupplierLedgerApi, supplier_api)

    alias_provider = AliasProviderFactory(config=config).create()
    binder.bind(AliasProvider, alias_provider)

    colors = Colors(enabled=config.app.color)
    error_display = ErrorDisplay(debug=config.app.debug, colors=colors)
    binder.bind(ErrorDisplay, error_display)

    supplier_view = SupplierView(
        supplier_api=supplier_api,
        alias_provider=alias_provider,
        error_display=error_display,
        parts_view=PartsView(alias_provider=alias_provider),
        colors=colors,
    )
    binder.bind(SupplierView, supplier_view)


def get_supplier_api() -> SupplierLedgerApi:
    return inject.instance(SupplierLedgerApi)


def get_supplier_view() -> SupplierView:
    return inject.instance(SupplierView)


def setup_container() -> None:
    inject.configure(container_config, once=True)
