from typing import Any, Dict, List

from pydantic import AliasChoices, BaseModel, Field, field_validator

from sparts_cli.exceptions import CreateFailure


class SupplierBase(BaseModel):
    uuid: str = ""
    name: str = ""
    # 1-5 alphanumeric characters, uniqueness is enforced by the ledger
    short_id: str = ""
    passwd: str = ""
    url: str = ""

    @field_validator("uuid", "name", "short_id", "passwd", "url", mode="before")
    def validate_null_strings(cls, v: Any) -> Any:
        if v is None:
            return ""
        return v


class SupplierRecord(SupplierBase):
    def to_ledger_json(self) -> Dict[str, Any]:
        """
        Payload as the ledger expects it, optional fields are left out when empty.
        """
        data = self.model_dump()
        for key in ("passwd", "url"):
            if not data[key]:
                del data[key]
        return data


class Part(BaseModel):
    part_id: str = ""


class SupplierWithParts(SupplierBase):
    parts: List[Part] = Field(
        default_factory=list, validation_alias=AliasChoices("parts", "Parts")
    )

    @field_validator("parts", mode="before")
    def validate_parts(cls, v: Any) -> Any:
        if v is None:
            return []
        return v


class CreateSupplierResult(BaseModel):
    """
    Outcome of a create call. On failure uuid is empty and failure names the step that
    went wrong, so callers only interested in "created or not" can test uuid or created.
    """

    uuid: str = ""
    failure: CreateFailure | None = None
    detail: str | None = None

    @property
    def created(self) -> bool:
        return self.failure is None and self.uuid != ""
