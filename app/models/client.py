# models/client.py
from sqlalchemy import Column, String, DateTime, JSON, Index
from datetime import datetime
from app.db.base_class import Base


class Client(Base):
    __tablename__ = "clients"

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(String(500), nullable=False)
    status = Column(String(50), nullable=False)
    additional_details = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_clients_email", "email"),
        Index("idx_clients_last_name", "last_name"),
    )
