import logging
from typing import Any, List

from pydantic import ValidationError
from requests import Response
from requests.exceptions import (
    HTTPError,
    InvalidHeader,
    InvalidSchema,
    InvalidURL,
    MissingSchema,
    RequestException,
    URLRequired,
)

from sparts_cli.exceptions import (
    CreateFailure,
    LedgerUnreachableError,
    MalformedLedgerResponseError,
    MalformedUuidError,
    SupplierNotFoundError,
)
from sparts_cli.models.supplier.dto import (
    CreateSupplierResult,
    SupplierRecord,
    SupplierWithParts,
)
from sparts_cli.services.api.api_service import HttpService
from sparts_cli.utils.uuid_utils import generate_uuid, is_valid_uuid

logger = logging.getLogger(__name__)

SUPPLIERS_ROUTE = "/api/sparts/ledger/suppliers"

# Raised by requests (or yarl) before anything is sent over the wire
_REQUEST_BUILD_ERRORS = (
    InvalidURL,
    InvalidSchema,
    MissingSchema,
    InvalidHeader,
    URLRequired,
    ValueError,
)


class SupplierLedgerApi:
    """
    Supplier operations against the ledger. Every call does at most a single round trip
    through the http service, nothing is cached between calls. Errors are raised as
    LedgerError subclasses and never printed here.
    """

    def __init__(
        self,
        api_service: HttpService,
        custom_header_name: str = "X-Custom-Header",
        custom_header_value: str = "myvalue",
    ) -> None:
        self.__api_service = api_service
        self.__custom_headers = {custom_header_name: custom_header_value}

    def get_supplier_list(self) -> List[SupplierRecord]:
        data = self.__get_json(SUPPLIERS_ROUTE)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.debug(f"Expected a list of suppliers, got {type(data).__name__}")
            raise MalformedLedgerResponseError("expected a JSON array of suppliers")

        try:
            return [SupplierRecord.model_validate(item) for item in data]
        except ValidationError as e:
            logger.debug(f"Could not parse supplier list: {e}")
            raise MalformedLedgerResponseError(str(e))

    def get_supplier(self, uuid: str) -> SupplierWithParts:
        if not is_valid_uuid(uuid):
            raise MalformedUuidError(uuid)

        try:
            data = self.__get_json(f"{SUPPLIERS_ROUTE}/{uuid}")
        except LedgerUnreachableError as e:
            if e.status_code == 404:
                raise SupplierNotFoundError(uuid, e.detail)
            raise

        if data is None:
            data = {}
        if not isinstance(data, dict):
            logger.debug(f"Expected a supplier object, got {type(data).__name__}")
            raise MalformedLedgerResponseError("expected a JSON object for the supplier")

        try:
            supplier = SupplierWithParts.model_validate(data)
        except ValidationError as e:
            logger.debug(f"Could not parse supplier {uuid}: {e}")
            raise MalformedLedgerResponseError(str(e))

        # A well formed reply about another (or no) supplier means ours does not exist
        if supplier.uuid != uuid:
            raise SupplierNotFoundError(uuid)
        return supplier

    def create_supplier(
        self,
        name: str,
        short_id: str,
        uuid: str = "",
        passwd: str = "",
        url: str = "",
    ) -> CreateSupplierResult:
        """
        Registers a new supplier with the ledger. A valid uuid is used as-is, otherwise a
        new one is generated. The ledger signals success by replying with a body
        containing "success", anything else counts as a rejection.
        """
        supplier_uuid = uuid if uuid and is_valid_uuid(uuid) else generate_uuid()

        try:
            payload = SupplierRecord(
                uuid=supplier_uuid,
                name=name,
                short_id=short_id,
                passwd=passwd,
                url=url,
            ).to_ledger_json()
        except ValidationError as e:
            logger.debug(f"Could not serialize supplier {name}: {e}")
            return CreateSupplierResult(failure=CreateFailure.serialization, detail=str(e))

        try:
            response = self.__api_service.do_request(
                "POST",
                sub_route=SUPPLIERS_ROUTE,
                json=payload,
                headers=self.__custom_headers,
            )
            body = response.text
        except _REQUEST_BUILD_ERRORS as e:
            logger.debug(f"Could not build create request for supplier {name}: {e}")
            return CreateSupplierResult(failure=CreateFailure.request_build, detail=str(e))
        except RequestException as e:
            logger.debug(f"Could not send create request for supplier {name}: {e}")
            return CreateSupplierResult(failure=CreateFailure.transport, detail=str(e))

        if "success" not in body:
            logger.debug(f"Ledger rejected supplier {name}: {body}")
            return CreateSupplierResult(failure=CreateFailure.rejected, detail=body)

        return CreateSupplierResult(uuid=supplier_uuid)

    def __get_json(self, route: str) -> Any:
        try:
            response = self.__api_service.do_request("GET", sub_route=route)
            self.__raise_for_status(response)
        except LedgerUnreachableError:
            raise
        except (RequestException, ValueError) as e:
            logger.debug(f"Could not reach the ledger at {route}: {e}")
            raise LedgerUnreachableError(str(e))

        try:
            return response.json()
        except ValueError as e:
            logger.debug(f"Ledger reply from {route} is not valid JSON: {e}")
            raise MalformedLedgerResponseError(str(e))

    @staticmethod
    def __raise_for_status(response: Response) -> None:
        try:
            response.raise_for_status()
        except HTTPError as e:
            logger.debug(f"Ledger replied with status {response.status_code}: {e}")
            raise LedgerUnreachableError(str(e), status_code=response.status_code)
