"""
Contact CRUD operations.
"""
from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.model.contact import Contact
from app.crud.base import CRUDBase


class CRUDContact(CRUDBase[Contact, dict, dict]):
    """Contact CRUD."""

    def list_by_filter(
        self,
        db: Session,
        *,
        favorite: Optional[bool] = None,
        name: Optional[str] = None,
        page: int = 1,
        limit: int = 5,
    ) -> Tuple[List[Contact], int]:
        """
        List contacts with optional filters and page/limit pagination.
        favorite: exact match on the 0/1 flag (optional).
        name: case-insensitive substring of name, % and _ matched literally (optional).
        Returns (contacts, total_count). page is 1-based.
        """
        base = db.query(self.model)
        if favorite is not None:
            base = base.filter(self.model.favorite == int(favorite))
        if name is not None and name.strip():
            base = base.filter(self.model.name.icontains(name, autoescape=True))

        total = base.with_entities(func.count(self.model.id)).scalar() or 0
        skip = (page - 1) * limit
        contacts = base.order_by(self.model.id).offset(skip).limit(limit).all()
        return contacts, total

    def list_avatars(self, db: Session) -> List[str]:
        """Avatar paths of every contact that has one."""
        rows = db.query(self.model.avatar).filter(self.model.avatar.isnot(None)).all()
        return [row.avatar for row in rows]

    def delete_by_id(self, db: Session, *, contact_id: int) -> int:
        """Delete one contact. Returns the number of rows removed (0 or 1)."""
        deleted = db.query(self.model).filter(self.model.id == contact_id).delete()
        self._commit(db)
        return deleted

    def delete_all(self, db: Session) -> int:
        """Delete every contact. Returns the number of rows removed."""
        deleted = db.query(self.model).delete()
        self._commit(db)
        return deleted


contact_crud = CRUDContact(Contact)
