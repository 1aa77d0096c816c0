"""
Saved-reel persistence.

Every query is scoped to the owning user: a reel that belongs to
someone else behaves exactly like a reel that does not exist.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reelgen.db.models import SavedReel
from reelgen.errors import PersistenceFailure, ReelNotFound
from reelgen.schemas import GenerationRequest, GenerationResult

logger = logging.getLogger(__name__)


def insert_reel(
    db: Session,
    user_id: str,
    request: GenerationRequest,
    result: GenerationResult,
    title: Optional[str] = None,
) -> SavedReel:
    dumped = result.model_dump(by_alias=True)
    reel = SavedReel(
        user_id=user_id,
        title=title,
        business_type=request.business_type,
        pain_point=request.pain_point,
        objective=request.objective,
        tone=request.tone,
        script=dumped["script"],
        screen_text=dumped["screenText"],
        video_prompts=dumped["videoPrompts"],
        variations=dumped["variations"],
        algorithm_objective=result.algorithm_objective,
        caption=result.caption,
    )

    try:
        db.add(reel)
        db.commit()
        db.refresh(reel)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error saving reel for user %s: %s", user_id, e)
        raise PersistenceFailure("Error saving reel") from e

    return reel


def list_reels(db: Session, user_id: str) -> List[SavedReel]:
    """Caller's reels, newest first."""
    try:
        return (
            db.query(SavedReel)
            .filter(SavedReel.user_id == user_id)
            .order_by(SavedReel.created_at.desc(), SavedReel.id.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error("Error fetching reels for user %s: %s", user_id, e)
        raise PersistenceFailure("Error fetching reels") from e


def get_reel(db: Session, user_id: str, reel_id: str) -> SavedReel:
    try:
        reel = (
            db.query(SavedReel)
            .filter(SavedReel.id == reel_id, SavedReel.user_id == user_id)
            .one_or_none()
        )
    except SQLAlchemyError as e:
        logger.error("Error fetching reel %s: %s", reel_id, e)
        raise PersistenceFailure("Error fetching reel") from e

    if reel is None:
        raise ReelNotFound()
    return reel


def delete_reel(db: Session, user_id: str, reel_id: str) -> None:
    reel = get_reel(db, user_id, reel_id)

    try:
        db.delete(reel)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error deleting reel %s: %s", reel_id, e)
        raise PersistenceFailure("Error deleting reel") from e
