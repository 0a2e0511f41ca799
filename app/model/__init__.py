from app.model.contact import Contact

__all__ = ["Contact"]
