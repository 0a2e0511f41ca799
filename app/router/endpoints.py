"""
API Router - all endpoints.
"""
from fastapi import APIRouter
from app.router.api.v1 import contacts
from app.schema.contact import ErrorEnvelope

api_router = APIRouter(
    prefix="/api/v1",
    responses={500: {"model": ErrorEnvelope, "description": "Internal server error"}},
)

api_router.include_router(
    contacts.router,
    prefix="/contacts",
    tags=["contacts"],
)
