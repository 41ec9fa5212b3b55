# models/client_document.py
from sqlalchemy import Column, String, DateTime, Index
from datetime import datetime
from app.db.base_class import Base


class ClientDocument(Base):
    __tablename__ = "client_documents"

    client_id = Column(String(36), nullable=False)   # -> clients.id
    document_name = Column(String(255), nullable=False)
    document_url = Column(String(2048), nullable=False)
    document_type = Column(String(50), nullable=False)
    uploaded_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_documents_client", "client_id"),
    )
