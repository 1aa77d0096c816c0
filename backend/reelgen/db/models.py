import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_uuid)
    email = Column(String(320), nullable=False, unique=True, index=True)
    display_name = Column(String(200))
    password_hash = Column(String(256), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class AuthToken(Base):
    __tablename__ = "auth_tokens"

    token = Column(String(128), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)


class SavedReel(Base):
    __tablename__ = "saved_reels"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(Text)

    # Generation input
    business_type = Column(Text, nullable=False)
    pain_point = Column(Text, nullable=False)
    objective = Column(Text, nullable=False)
    tone = Column(Text, nullable=False)

    # Generation output
    script = Column(JSON, nullable=False)
    screen_text = Column(JSON, nullable=False)
    video_prompts = Column(JSON, nullable=False)
    variations = Column(JSON, nullable=False)
    algorithm_objective = Column(Text, nullable=False)
    caption = Column(Text)

    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
