import logging
from typing import Optional

from reelgen.errors import AuthRequired
from reelgen.client import messages
from reelgen.schemas import UserOut

logger = logging.getLogger(__name__)


class AuthContext:
    """
    Current signed-in session for this process.

    Populated by sign_in, cleared by sign_out. Consumers read `user` and
    `token`; nothing else writes them.
    """

    def __init__(self):
        self._token: Optional[str] = None
        self._user: Optional[UserOut] = None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[UserOut]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def require_token(self) -> str:
        if self._token is None:
            raise AuthRequired(messages.SIGN_IN_TO_SAVE)
        return self._token

    def sign_up(self, api, email: str, password: str, display_name: Optional[str] = None) -> UserOut:
        # Sign-up does not open a session; the user signs in afterwards
        return api.sign_up(email, password, display_name)

    def sign_in(self, api, email: str, password: str) -> UserOut:
        session = api.sign_in(email, password)
        self._token = session.access_token
        self._user = session.user
        logger.info("Signed in as %s", session.user.email)
        return session.user

    def sign_out(self, api) -> None:
        token = self._token
        self._token = None
        self._user = None
        if token is not None:
            api.sign_out(token)


# Process-wide session
auth_context = AuthContext()
