"""SQLAlchemy ORM model for the Customer aggregate."""

from sqlalchemy import Column, String

from .base import Base


class CustomerModel(Base):
    """SQLAlchemy ORM model for customers table."""

    __tablename__ = "customers"

    id = Column(String(255), primary_key=True)
    name = Column(String(200), nullable=False)
    email = Column(String(320), nullable=False, index=True)

    def __repr__(self):
        return f"<CustomerModel(id={self.id}, email={self.email})>"
