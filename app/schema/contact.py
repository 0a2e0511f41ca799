"""
Contact schemas.
"""
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _coerce_favorite(value: Any) -> Any:
    """Accept 0/1, booleans and boolean-like strings; return 0 or 1."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return 1
        if lowered in _FALSE_VALUES:
            return 0
    return value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class ContactCreate(BaseModel):
    """Input for POST /contacts (multipart form fields)."""
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    favorite: int = Field(0, ge=0, le=1)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def email_blank_is_none(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("favorite", mode="before")
    @classmethod
    def favorite_flag(cls, v: Any) -> Any:
        coerced = _coerce_favorite(v)
        return 0 if coerced is None else coerced


class ContactUpdate(BaseModel):
    """Input for PUT /contacts/{id}; only the fields that are set get written."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=32)
    favorite: Optional[int] = Field(None, ge=0, le=1)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("email", mode="before")
    @classmethod
    def email_blank_is_none(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("favorite", mode="before")
    @classmethod
    def favorite_flag(cls, v: Any) -> Any:
        return _coerce_favorite(v)


class ContactResponse(BaseModel):
    """Contact for list/detail."""
    id: int
    name: str
    email: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    favorite: int = 0
    avatar: Optional[str] = None

    class Config:
        from_attributes = True


class PaginationMetadata(BaseModel):
    totalRecords: int = Field(0, description="The total number of records")
    firstPage: int = Field(1, description="The first page")
    lastPage: int = Field(1, description="The last page")
    page: int = Field(1, description="The current page")
    limit: int = Field(5, description="The number of records per page")


class ContactListData(BaseModel):
    contacts: List[ContactResponse]
    metadata: PaginationMetadata


class ContactData(BaseModel):
    contact: ContactResponse


class ContactListEnvelope(BaseModel):
    """{"status": "success", "data": {"contacts": [...], "metadata": {...}}}"""
    status: Literal["success"] = "success"
    data: ContactListData


class ContactEnvelope(BaseModel):
    """{"status": "success", "data": {"contact": {...}}}"""
    status: Literal["success"] = "success"
    data: ContactData


class NoDataEnvelope(BaseModel):
    """{"status": "success", "data": null}"""
    status: Literal["success"] = "success"
    data: None = None


class FailMessage(BaseModel):
    message: str


class FailEnvelope(BaseModel):
    """4xx body: {"status": "fail", "data": {"message": ...}}"""
    status: Literal["fail"] = "fail"
    data: FailMessage


class ErrorEnvelope(BaseModel):
    """5xx body: {"status": "error", "message": ...}"""
    status: Literal["error"] = "error"
    message: str
