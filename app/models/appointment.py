# models/appointment.py
from sqlalchemy import Column, String, Text, Boolean, Date, DateTime, Index
from datetime import datetime
from app.db.base_class import Base


class Appointment(Base):
    __tablename__ = "appointments"

    client_id = Column(String(36), nullable=False)             # -> clients.id
    property_id = Column(String(36), nullable=True)            # -> properties.id
    agent_id = Column(String(36), nullable=False)              # -> users.id
    appointment_date = Column(Date, nullable=False)
    appointment_time = Column(String(20), nullable=False)      # free text, "HH:MM"
    notes = Column(Text, nullable=True)
    is_confirmed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_appointments_client", "client_id"),
        Index("idx_appointments_agent", "agent_id"),
        Index("idx_appointments_date", "appointment_date"),
    )
