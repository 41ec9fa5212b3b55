# models/communication_log.py
from sqlalchemy import Column, String, Text, Boolean, DateTime, Index
from app.db.base_class import Base


class CommunicationLog(Base):
    __tablename__ = "communication_logs"

    client_id = Column(String(36), nullable=False)   # -> clients.id
    user_id = Column(String(36), nullable=False)     # -> users.id
    communication_type = Column(String(50), nullable=False)  # email, call, meeting, ...
    note = Column(Text, nullable=False)
    follow_up_flag = Column(Boolean, nullable=False, default=False)
    timestamp = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("idx_comm_logs_client", "client_id"),
        Index("idx_comm_logs_type", "communication_type"),
    )
