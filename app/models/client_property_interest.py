# models/client_property_interest.py
from sqlalchemy import Column, String, Text, Numeric, DateTime, Index
from datetime import datetime
from app.db.base_class import Base


class ClientPropertyInterest(Base):
    __tablename__ = "client_property_interests"

    # references clients.id; checked by the repository, dependents survive a client delete
    client_id = Column(String(36), nullable=False)
    property_type = Column(String(50), nullable=False)
    preferred_location = Column(String(255), nullable=False)
    price_min = Column(Numeric(14, 2, asdecimal=False), nullable=True)
    price_max = Column(Numeric(14, 2, asdecimal=False), nullable=True)
    additional_notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_interest_client", "client_id"),
    )
