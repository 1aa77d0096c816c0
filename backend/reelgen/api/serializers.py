from reelgen.db.models import SavedReel, User
from reelgen.schemas import SavedReelOut, UserOut


def serialize_reel(reel: SavedReel) -> SavedReelOut:
    """
    ORM row -> API model.

    JSON columns hold the camelCase wire shape, so they are validated
    back through the same result models the endpoint returns.
    """
    return SavedReelOut.model_validate({
        "id": reel.id,
        "userId": reel.user_id,
        "title": reel.title,
        "businessType": reel.business_type,
        "painPoint": reel.pain_point,
        "objective": reel.objective,
        "tone": reel.tone,
        "script": reel.script,
        "screenText": reel.screen_text,
        "videoPrompts": reel.video_prompts,
        "variations": reel.variations,
        "algorithmObjective": reel.algorithm_objective,
        "caption": reel.caption,
        "createdAt": reel.created_at,
    })


def serialize_user(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        email=user.email,
        display_name=user.display_name,
        created_at=user.created_at,
    )
