from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from reelgen.schemas import GenerationRequest, GenerationResult


class GenerationStage(str, Enum):
    RECEIVING_REQUEST = "receiving_request"
    BUILDING_PROMPT = "building_prompt"
    CALLING_MODEL = "calling_model"
    PARSING_RESPONSE = "parsing_response"
    RESPONDING = "responding"
    FAILED = "failed"


@dataclass
class GenerationContext:
    # Raw input (authoritative)
    request: GenerationRequest

    stage: GenerationStage = GenerationStage.RECEIVING_REQUEST
    history: List[GenerationStage] = field(
        default_factory=lambda: [GenerationStage.RECEIVING_REQUEST]
    )

    # Filled in as the transaction advances
    system_prompt: Optional[str] = None
    user_prompt: Optional[str] = None
    raw_response: Optional[str] = None
    result: Optional[GenerationResult] = None

    error: Optional[Exception] = None

    def advance(self, stage: GenerationStage):
        self.stage = stage
        self.history.append(stage)

    def fail(self, error: Exception):
        self.error = error
        self.advance(GenerationStage.FAILED)

    @property
    def succeeded(self) -> bool:
        return self.stage is GenerationStage.RESPONDING
