import logging
from typing import Optional

from reelgen.client.session import AuthContext, auth_context
from reelgen.errors import ReelgenError
from reelgen.schemas import GenerationRequest, GenerationResult, SavedReelOut

logger = logging.getLogger(__name__)


class ResultView:
    """Generated reel as shown to the user, with a one-shot save action."""

    def __init__(
        self,
        result: GenerationResult,
        request: GenerationRequest,
        api,
        auth: Optional[AuthContext] = None,
    ):
        self.result = result
        self.request = request
        self.api = api
        self.auth = auth or auth_context

        self.saved_reel: Optional[SavedReelOut] = None
        self.is_saving = False
        self.last_error: Optional[str] = None

    # ----------------------------
    # Save
    # ----------------------------

    @property
    def can_save(self) -> bool:
        return self.saved_reel is None and not self.is_saving

    def save(self, title: Optional[str] = None) -> Optional[SavedReelOut]:
        """
        Persist this result once for the signed-in user.

        Once saved (or while a save is in flight) further calls do nothing.
        Failures, including nobody being signed in, land in last_error
        and return None.
        """
        if not self.can_save:
            return None

        self.is_saving = True
        try:
            token = self.auth.require_token()
            self.saved_reel = self.api.save_reel(token, self.request, self.result, title=title)
        except ReelgenError as e:
            self.last_error = e.message
            return None
        finally:
            self.is_saving = False

        self.last_error = None
        logger.info("Reel saved: %s", self.saved_reel.id)
        return self.saved_reel

    # ----------------------------
    # Rendering
    # ----------------------------

    def full_script(self) -> str:
        script = self.result.script
        return (
            f"GANCHO:\n{script.hook}\n\n"
            f"DESENVOLVIMENTO:\n{script.development}\n\n"
            f"FECHAMENTO:\n{script.closing}"
        )

    def screen_text(self) -> str:
        frames = self.result.screen_text
        return (
            f"Frame 1: {frames.frame1}\n"
            f"Frame 2: {frames.frame2}\n"
            f"Frame 3: {frames.frame3}"
        )

    def video_prompts(self) -> str:
        blocks = []
        for index, prompt in enumerate(self.result.video_prompts, start=1):
            block = f"{index}. {prompt.title}\n{prompt.prompt}"
            if prompt.continuation_prompt:
                block += f"\nContinuação: {prompt.continuation_prompt}"
            blocks.append(block)
        return "\n\n".join(blocks)

    def render(self) -> str:
        variations = self.result.variations
        sections = [
            f"Objetivo algorítmico: {self.result.algorithm_objective}",
            "ROTEIRO DO REEL\n" + self.full_script(),
            "TEXTO NA TELA\n" + self.screen_text(),
            "PROMPTS DE VÍDEO IA\n" + self.video_prompts(),
        ]
        if self.result.caption:
            sections.append("LEGENDA\n" + self.result.caption)
        sections.append(
            "VARIAÇÕES\n"
            + "Hooks alternativos:\n"
            + "\n".join(f"- {hook}" for hook in variations.alternative_hooks)
            + "\nFechamentos alternativos:\n"
            + "\n".join(f"- {closing}" for closing in variations.alternative_closings)
            + f"\nVersão polêmica: {variations.controversial_version}"
        )
        return "\n\n".join(sections)
