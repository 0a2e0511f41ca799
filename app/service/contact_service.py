"""
Contact service - turns validated request input into repository calls.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFound
from app.crud import contact_crud
from app.model.contact import Contact
from app.schema.contact import ContactCreate, ContactResponse, ContactUpdate
from app.utils.avatar_upload import AvatarFile, discard_avatar, save_avatar
from app.utils.pagination import pagination_metadata

logger = logging.getLogger(__name__)


class ContactService:
    """Contact operations behind the /contacts routes."""

    def __init__(self, db: Session):
        self.db = db

    def get_contacts_by_filter(
        self,
        *,
        favorite: Optional[bool] = None,
        name: Optional[str] = None,
        page: int = 1,
        limit: int = 5,
    ) -> Dict[str, Any]:
        contacts, total = contact_crud.list_by_filter(
            self.db, favorite=favorite, name=name, page=page, limit=limit
        )
        return {
            "contacts": [ContactResponse.model_validate(c).model_dump() for c in contacts],
            "metadata": pagination_metadata(total, page=page, limit=limit),
        }

    def create_contact(self, payload: ContactCreate, avatar: Optional[AvatarFile] = None) -> Contact:
        obj_in = payload.model_dump()
        if avatar is not None:
            obj_in["avatar"] = save_avatar(avatar)
        try:
            contact = contact_crud.create_from_dict(self.db, obj_in=obj_in)
        except Exception:
            discard_avatar(obj_in.get("avatar"))
            raise
        logger.info(f"Contact created: id={contact.id}")
        return contact

    def get_contact(self, contact_id: int) -> Contact:
        contact = contact_crud.get(self.db, contact_id)
        if not contact:
            raise NotFound("Contact")
        return contact

    def update_contact(
        self, contact_id: int, payload: ContactUpdate, avatar: Optional[AvatarFile] = None
    ) -> Contact:
        """Partial update; the avatar is replaced only when a new file was uploaded."""
        contact = self.get_contact(contact_id)
        obj_in = payload.model_dump(exclude_unset=True)
        old_avatar = contact.avatar
        if avatar is not None:
            obj_in["avatar"] = save_avatar(avatar)
        if not obj_in:
            return contact

        try:
            contact = contact_crud.update(self.db, db_obj=contact, obj_in=obj_in)
        except Exception:
            discard_avatar(obj_in.get("avatar"))
            raise
        if avatar is not None:
            discard_avatar(old_avatar)
        logger.info(f"Contact updated: id={contact.id}, fields={sorted(obj_in)}")
        return contact

    def delete_contact(self, contact_id: int) -> None:
        contact = self.get_contact(contact_id)
        avatar = contact.avatar
        if contact_crud.delete_by_id(self.db, contact_id=contact_id) == 0:
            raise NotFound("Contact")
        discard_avatar(avatar)
        logger.info(f"Contact deleted: id={contact_id}")

    def delete_all_contacts(self) -> int:
        avatars = contact_crud.list_avatars(self.db)
        deleted = contact_crud.delete_all(self.db)
        for path in avatars:
            discard_avatar(path)
        logger.info(f"All contacts deleted: {deleted} removed")
        return deleted
