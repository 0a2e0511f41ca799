from app.crud.contact_crud import contact_crud

__all__ = ["contact_crud"]
