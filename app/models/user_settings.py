# models/user_settings.py
from sqlalchemy import Column, String, DateTime, JSON, UniqueConstraint
from datetime import datetime
from app.db.base_class import Base


class UserSettings(Base):
    __tablename__ = "user_settings"

    user_id = Column(String(36), nullable=False)     # -> users.id
    dashboard_preferences = Column(JSON, nullable=True)
    notification_settings = Column(JSON, nullable=True)
    configuration = Column(JSON, nullable=True)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", name="uq_user_settings_user"),
    )
