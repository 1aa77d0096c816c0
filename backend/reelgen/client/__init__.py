from reelgen.client.api import ReelApiClient
from reelgen.client.result_view import ResultView
from reelgen.client.saved_reels import SavedReelsList
from reelgen.client.session import AuthContext, auth_context
from reelgen.client.wizard import ReelWizard

__all__ = [
    "ReelApiClient",
    "ResultView",
    "SavedReelsList",
    "AuthContext",
    "auth_context",
    "ReelWizard",
]
