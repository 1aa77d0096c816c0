from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Generation input ----

class GenerationRequest(CamelModel):
    business_type: str
    pain_point: str
    objective: str
    tone: str

    @field_validator("business_type", "pain_point", "objective", "tone")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


# ---- Generation output ----

class Script(CamelModel):
    hook: str
    development: str
    closing: str


class ScreenText(CamelModel):
    frame1: str
    frame2: str
    frame3: str


class VideoPrompt(CamelModel):
    title: str
    prompt: str
    continuation_prompt: Optional[str] = None


class Variations(CamelModel):
    alternative_hooks: List[str] = Field(default_factory=list)
    alternative_closings: List[str] = Field(default_factory=list)
    controversial_version: str


LEGACY_VIDEO_PROMPT_TITLE = "Vídeo principal"


class GenerationResult(CamelModel):
    script: Script
    screen_text: ScreenText
    video_prompts: List[VideoPrompt] = Field(min_length=1)
    algorithm_objective: str
    caption: Optional[str] = None
    variations: Variations

    @model_validator(mode="before")
    @classmethod
    def accept_single_video_prompt(cls, data: Any) -> Any:
        # Older prompts asked for one "videoPrompt" string
        if isinstance(data, dict) and "videoPrompts" not in data and "video_prompts" not in data:
            legacy = data.get("videoPrompt")
            if isinstance(legacy, str) and legacy.strip():
                data = dict(data)
                data["videoPrompts"] = [
                    {"title": LEGACY_VIDEO_PROMPT_TITLE, "prompt": legacy}
                ]
        return data


# ---- Saved reels ----

class SaveReelRequest(GenerationRequest):
    title: Optional[str] = None
    result: GenerationResult


class SavedReelOut(GenerationResult):
    id: str
    user_id: str
    title: Optional[str] = None
    business_type: str
    pain_point: str
    objective: str
    tone: str
    created_at: datetime

    def to_result(self) -> GenerationResult:
        return GenerationResult.model_validate(
            self.model_dump(include=set(GenerationResult.model_fields))
        )


# ---- Auth ----

class SignUpRequest(CamelModel):
    email: str
    password: str
    display_name: Optional[str] = None

    @field_validator("email")
    @classmethod
    def looks_like_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value or value.startswith("@") or value.endswith("@"):
            raise ValueError("invalid email address")
        return value

    @field_validator("password")
    @classmethod
    def long_enough(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError("password must have at least 6 characters")
        return value


class SignInRequest(CamelModel):
    email: str
    password: str


class UserOut(CamelModel):
    id: str
    email: str
    display_name: Optional[str] = None
    created_at: datetime


class SessionOut(CamelModel):
    access_token: str
    user: UserOut
