from enum import Enum


class LedgerError(Exception):
    """
    Base class for errors raised while talking to the ledger. The message is meant for
    the user, the detail holds the underlying cause and is only shown in debug mode.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class LedgerUnreachableError(LedgerError):
    def __init__(self, detail: str | None = None, status_code: int | None = None) -> None:
        super().__init__("Ledger may not be accessible.", detail)
        self.status_code = status_code


class MalformedLedgerResponseError(LedgerError):
    def __init__(self, detail: str | None = None) -> None:
        super().__init__("Ledger response may not be properly formatted", detail)


class MalformedUuidError(LedgerError):
    def __init__(self, uuid: str) -> None:
        super().__init__(f"Supplier UUID is not in a valid format: {uuid}")
        self.uuid = uuid


class SupplierNotFoundError(LedgerError):
    def __init__(self, uuid: str, detail: str | None = None) -> None:
        super().__init__(f"Supplier not found with uuid = '{uuid}'", detail)
        self.uuid = uuid


class CreateFailure(str, Enum):
    serialization = "serialization"
    request_build = "request_build"
    transport = "transport"
    rejected = "rejected"


class AliasError(ValueError):
    """
    The local alias store could not be read.
    """
