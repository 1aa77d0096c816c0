import logging
from typing import List, Optional, Set

from reelgen.client.result_view import ResultView
from reelgen.client.session import AuthContext, auth_context
from reelgen.errors import AuthRequired, ReelgenError
from reelgen.options import OBJECTIVE_LABELS, PAIN_POINT_LABELS, label_for
from reelgen.schemas import GenerationRequest, SavedReelOut

logger = logging.getLogger(__name__)


class SavedReelsList:
    def __init__(self, api, auth: Optional[AuthContext] = None):
        self.api = api
        self.auth = auth or auth_context

        self.reels: List[SavedReelOut] = []
        self.deleting_ids: Set[str] = set()
        self.last_error: Optional[str] = None

    def fetch(self) -> List[SavedReelOut]:
        """Reload the signed-in user's reels, newest first."""
        try:
            self.reels = self.api.list_reels(self.auth.require_token())
        except AuthRequired as e:
            # Signed out: nothing from the previous session stays visible
            self.reels = []
            self.last_error = e.message
            return self.reels
        except ReelgenError as e:
            logger.error("Error fetching reels: %s", e)
            self.last_error = e.message
            return self.reels

        self.last_error = None
        return self.reels

    def open(self, reel_id: str) -> Optional[ResultView]:
        """Load one saved reel into a result view that is already saved."""
        try:
            reel = self.api.get_reel(self.auth.require_token(), reel_id)
        except ReelgenError as e:
            logger.error("Error opening reel %s: %s", reel_id, e)
            self.last_error = e.message
            return None

        request = GenerationRequest(
            business_type=reel.business_type,
            pain_point=reel.pain_point,
            objective=reel.objective,
            tone=reel.tone,
        )
        view = ResultView(reel.to_result(), request, self.api, auth=self.auth)
        view.saved_reel = reel
        self.last_error = None
        return view

    def is_deleting(self, reel_id: str) -> bool:
        return reel_id in self.deleting_ids

    def delete(self, reel_id: str) -> bool:
        """
        Delete one reel. A second call for an id that is already being
        deleted does nothing and returns False.
        """
        if reel_id in self.deleting_ids:
            return False

        self.deleting_ids.add(reel_id)
        try:
            self.api.delete_reel(self.auth.require_token(), reel_id)
        except ReelgenError as e:
            logger.error("Error deleting reel %s: %s", reel_id, e)
            self.last_error = e.message
            return False
        finally:
            self.deleting_ids.discard(reel_id)

        self.reels = [reel for reel in self.reels if reel.id != reel_id]
        self.last_error = None
        return True

    @staticmethod
    def describe(reel: SavedReelOut) -> dict:
        """Card fields for one list entry."""
        return {
            "title": reel.title or reel.business_type,
            "created_at": reel.created_at.strftime("%d/%m/%Y %H:%M"),
            "objective": label_for(OBJECTIVE_LABELS, reel.objective),
            "pain_point": label_for(PAIN_POINT_LABELS, reel.pain_point),
            "hook": reel.script.hook,
        }
