"""SQLAlchemy ORM model for the Order aggregate."""

from sqlalchemy import JSON, Column, DateTime, Index, String
from sqlalchemy.dialects.postgresql import JSONB

from .base import Base


class OrderModel(Base):
    """
    SQLAlchemy ORM model for orders table.

    Items are stored inline as a JSON array (JSONB on PostgreSQL) since they
    have no life outside their order.
    """

    __tablename__ = "orders"

    id = Column(String(255), primary_key=True)
    customer_id = Column(String(255), nullable=True, index=True)
    items = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    # Plain string; the mapper parses it back into OrderStatus.
    status = Column(String(20), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("idx_status", "status"),
        Index("idx_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, status={self.status})>"
