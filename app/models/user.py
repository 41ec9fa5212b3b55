# models/user.py
from sqlalchemy import Column, String, DateTime, CheckConstraint
from datetime import datetime
from app.db.base_class import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(150), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("role IN ('admin','agent','manager','support')", name="chk_user_role"),
    )
