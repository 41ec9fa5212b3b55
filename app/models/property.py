# models/property.py
from sqlalchemy import Column, String, Text, Numeric, DateTime, Index
from datetime import datetime
from app.db.base_class import Base


class Property(Base):
    __tablename__ = "properties"

    address = Column(String(500), nullable=False)
    property_type = Column(String(50), nullable=False)  # residential, commercial, ...
    price = Column(Numeric(14, 2, asdecimal=False), nullable=False)
    status = Column(String(50), nullable=False)  # for sale, sold, ...
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_properties_price", "price"),
    )
