import logging
import sys
from typing import TextIO

from sparts_cli.exceptions import AliasError, LedgerError
from sparts_cli.models.supplier.dto import CreateSupplierResult
from sparts_cli.services.alias.alias_provider import AliasProvider
from sparts_cli.services.ledger.supplier_api import SupplierLedgerApi
from sparts_cli.services.presentation.parts_view import PartsView
from sparts_cli.utils.display import ALIAS_TOKEN, Colors, ErrorDisplay
from sparts_cli.utils.sorting import sort_supplier_list
from sparts_cli.utils.table import TabWriter

logger = logging.getLogger(__name__)

NO_SUPPLIERS_MSG = "  No suppliers are registered with the ledger."
LIST_ALIAS_PLACEHOLDER = "   - "
ALIAS_NOT_DEFINED = "<not defined>"
RULE = "  -----------------------------------------------"


class SupplierView:
    """
    Renders suppliers fetched from the ledger as text. Every display call fetches
    fresh data and reports errors through the error display instead of raising.
    """

    def __init__(
        self,
        supplier_api: SupplierLedgerApi,
        alias_provider: AliasProvider,
        error_display: ErrorDisplay,
        parts_view: PartsView,
        colors: Colors | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.__supplier_api = supplier_api
        self.__alias_provider = alias_provider
        self.__error_display = error_display
        self.__parts_view = parts_view
        self.__colors = colors or Colors()
        self.__out = out

    @property
    def out(self) -> TextIO:
        return self.__out if self.__out is not None else sys.stdout

    def display_supplier_list(self) -> bool:
        try:
            suppliers = self.__supplier_api.get_supplier_list()
            aliases = {s.uuid: self.__alias_provider.lookup_alias(s.uuid)[0] for s in suppliers}
        except (LedgerError, AliasError) as e:
            self.__error_display.check_and_report_error(e)
            return False

        if len(suppliers) == 0:
            print(NO_SUPPLIERS_MSG, file=self.out)
            return True

        suppliers = sort_supplier_list(suppliers)

        w = TabWriter(self.out, padding=1, debug=True)
        w.write("\n")
        w.write("\t%s\t %s\t %s\n" % (" ------------------", "-------", "--------"))
        w.write("\t%s\t %s\t %s\n" % ("   Name  ", " Alias", "  UUID  "))
        w.write("\t%s\t %s\t %s\n" % (" ------------------", "-------", "--------"))

        for supplier in suppliers:
            alias = aliases[supplier.uuid]
            if alias == "":
                alias = LIST_ALIAS_PLACEHOLDER
            elif len(alias) < 4:
                alias = "  " + alias
            w.write("\t %s\t %s\t %s\n" % (supplier.name, alias, supplier.uuid))

        w.write("\n")
        w.flush()
        return True

    def display_supplier(self, uuid: str) -> bool:
        try:
            supplier = self.__supplier_api.get_supplier(uuid)
            alias, found = self.__alias_provider.lookup_alias(uuid)
        except (LedgerError, AliasError) as e:
            self.__error_display.check_and_report_error(e)
            return False

        if not found or alias == "":
            alias = ALIAS_NOT_DEFINED
        else:
            alias = ALIAS_TOKEN + self.__colors.cyan(alias)

        print(RULE, file=self.out)
        print(f"  Name   : {self.__colors.cyan(supplier.name)}", file=self.out)
        print(RULE, file=self.out)
        print(f"  Label  : {supplier.short_id}", file=self.out)
        print(f"  UUID   : {supplier.uuid}", file=self.out)
        print(f"  Alias  : {alias}", file=self.out)
        print(f"  URL    : {supplier.url}", file=self.out)

        if len(supplier.parts) == 0:
            print("  Parts  : <none> ", file=self.out)
        else:
            self.__parts_view.display_parts(supplier.parts)
        return True

    def display_create_result(self, result: CreateSupplierResult) -> bool:
        if not result.created:
            logger.debug(f"Supplier creation failed at {result.failure}: {result.detail}")
            failure = result.failure.value if result.failure else "unknown"
            self.__error_display.display_error_msg(
                f"Supplier could not be created ({failure}).", result.detail
            )
            return False

        print(result.uuid, file=self.out)
        return True
