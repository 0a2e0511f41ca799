"""
Contact model.
avatar holds the public path of an uploaded image; it is only set by the upload pipeline.
"""
from sqlalchemy import CheckConstraint, Column, Integer, String
from app.core.database import Base


class Contact(Base):
    __tablename__ = "contacts"
    __table_args__ = (
        CheckConstraint("favorite IN (0, 1)", name="ck_contacts_favorite"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=True)
    address = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True)
    favorite = Column(Integer, nullable=False, default=0, server_default="0")
    avatar = Column(String(255), nullable=True)
