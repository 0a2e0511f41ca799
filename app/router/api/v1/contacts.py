"""
Contacts API: list with filters and page/limit, create/update with avatar upload,
get by id, delete one or all. Unbound verbs on each path answer 405.
"""
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import APIRouter, Depends, Form, Query, status
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from app.core import jsend
from app.core.database import get_db
from app.core.error_handlers import format_validation_errors
from app.core.exceptions import BadRequest, MethodNotAllowed
from app.schema.contact import (
    ContactCreate,
    ContactEnvelope,
    ContactListEnvelope,
    ContactResponse,
    ContactUpdate,
    FailEnvelope,
    NoDataEnvelope,
)
from app.service.contact_service import ContactService
from app.utils.avatar_upload import AvatarFile, avatar_upload
from app.utils.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter()

SchemaType = TypeVar("SchemaType", bound=BaseModel)

HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

FAIL_RESPONSES: Dict[int, Dict[str, Any]] = {
    400: {"model": FailEnvelope, "description": "Invalid input or upload"},
}
NOT_FOUND_RESPONSES: Dict[int, Dict[str, Any]] = {
    404: {"model": FailEnvelope, "description": "Contact not found"},
}


def _other_methods(*bound: str):
    return [m for m in HTTP_METHODS if m not in bound]


def _parse(schema: Type[SchemaType], fields: Dict[str, Any]) -> SchemaType:
    """Validate form fields against an input schema; drop fields that were not sent."""
    try:
        return schema.model_validate({k: v for k, v in fields.items() if v is not None})
    except ValidationError as e:
        raise BadRequest(format_validation_errors(e.errors())) from e


def _contact_data(contact) -> Dict[str, Any]:
    return {"contact": ContactResponse.model_validate(contact).model_dump()}


@router.get(
    "",
    response_model=ContactListEnvelope,
    summary="Get contacts by filter",
    responses=FAIL_RESPONSES,
)
def get_contacts_by_filter(
    favorite: Optional[bool] = Query(None, description="Filter by favorite status"),
    name: Optional[str] = Query(None, description="Filter by contact name (case-insensitive, partial match)"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Number of records per page (1-100)"),
    page: int = Query(DEFAULT_PAGE, ge=1, description="Page number (1-based)"),
    db: Session = Depends(get_db),
):
    """List contacts matching the optional favorite/name filters, one page at a time."""
    data = ContactService(db).get_contacts_by_filter(
        favorite=favorite, name=name, page=page, limit=limit
    )
    return jsend.success(data)


@router.post(
    "",
    response_model=ContactEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new contact",
    responses=FAIL_RESPONSES,
)
def create_contact(
    name: Optional[str] = Form(None, description="Contact name (required)"),
    email: Optional[str] = Form(None, description="Contact email"),
    address: Optional[str] = Form(None, description="Contact address"),
    phone: Optional[str] = Form(None, description="Contact phone number"),
    favorite: Optional[str] = Form(None, description="Favorite contact (0 or 1)"),
    avatar: Optional[AvatarFile] = Depends(avatar_upload),
    db: Session = Depends(get_db),
):
    """Create a contact from multipart form fields, with an optional avatarFile image."""
    payload = _parse(
        ContactCreate,
        {"name": name, "email": email, "address": address, "phone": phone, "favorite": favorite},
    )
    contact = ContactService(db).create_contact(payload, avatar)
    return jsend.success(_contact_data(contact))


@router.delete("", response_model=NoDataEnvelope, summary="Delete all contacts")
def delete_all_contacts(db: Session = Depends(get_db)):
    """Delete every contact. Succeeds even when there was nothing to delete."""
    ContactService(db).delete_all_contacts()
    return jsend.success()


@router.api_route("", methods=_other_methods("GET", "POST", "DELETE"), include_in_schema=False)
def contacts_method_not_allowed():
    raise MethodNotAllowed()


@router.get(
    "/{contact_id}",
    response_model=ContactEnvelope,
    summary="Get contact by ID",
    responses=NOT_FOUND_RESPONSES,
)
def get_contact(contact_id: int, db: Session = Depends(get_db)):
    """Get a single contact by id."""
    contact = ContactService(db).get_contact(contact_id)
    return jsend.success(_contact_data(contact))


@router.put(
    "/{contact_id}",
    response_model=ContactEnvelope,
    summary="Update contact by ID",
    responses={**FAIL_RESPONSES, **NOT_FOUND_RESPONSES},
)
def update_contact(
    contact_id: int,
    name: Optional[str] = Form(None, description="Contact name"),
    email: Optional[str] = Form(None, description="Contact email"),
    address: Optional[str] = Form(None, description="Contact address"),
    phone: Optional[str] = Form(None, description="Contact phone number"),
    favorite: Optional[str] = Form(None, description="Favorite contact (0 or 1)"),
    avatar: Optional[AvatarFile] = Depends(avatar_upload),
    db: Session = Depends(get_db),
):
    """
    Update a contact. Only the fields sent are changed; the avatar is replaced
    only when a new avatarFile is uploaded.
    """
    payload = _parse(
        ContactUpdate,
        {"name": name, "email": email, "address": address, "phone": phone, "favorite": favorite},
    )
    contact = ContactService(db).update_contact(contact_id, payload, avatar)
    return jsend.success(_contact_data(contact))


@router.delete(
    "/{contact_id}",
    response_model=NoDataEnvelope,
    summary="Delete contact by ID",
    responses=NOT_FOUND_RESPONSES,
)
def delete_contact(contact_id: int, db: Session = Depends(get_db)):
    """Delete a single contact by id."""
    ContactService(db).delete_contact(contact_id)
    return jsend.success()


@router.api_route("/{contact_id}", methods=_other_methods("GET", "PUT", "DELETE"), include_in_schema=False)
def contact_method_not_allowed():
    raise MethodNotAllowed()
