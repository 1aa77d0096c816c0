import logging
from typing import List, Optional

import requests
from pydantic import ValidationError

from reelgen.client import messages
from reelgen.errors import (
    AuthRequired,
    InvalidCredentials,
    MalformedResponse,
    PersistenceFailure,
    ReelgenError,
    UpstreamPaymentRequired,
    UpstreamRateLimited,
    UpstreamUnavailable,
    UserAlreadyExists,
)
from reelgen.schemas import (
    GenerationRequest,
    GenerationResult,
    SavedReelOut,
    SessionOut,
    UserOut,
)

logger = logging.getLogger(__name__)


def _is_success(response) -> bool:
    return 200 <= response.status_code < 300


def _error_text(response) -> str:
    try:
        return response.json().get("error", response.text)
    except (ValueError, AttributeError):
        return response.text


class ReelApiClient:
    """
    HTTP client for the reel generator API.

    Works with anything shaped like a requests.Session (post/get/delete
    returning objects with status_code and json()). Every failure is
    raised as a ReelgenError whose message is ready to show the user.
    """

    def __init__(self, base_url: str = "http://localhost:8000", http=None, timeout: float = 120):
        self.base_url = base_url.rstrip("/")
        self.http = http or requests.Session()
        self.timeout = timeout

    # ---- transport ----

    def _request(
        self,
        method: str,
        path: str,
        *,
        failure: ReelgenError,
        token: Optional[str] = None,
        **kwargs,
    ):
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            return getattr(self.http, method)(
                f"{self.base_url}{path}",
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method.upper(), path, e)
            raise failure from e

    # ---- generation ----

    def generate(self, request: GenerationRequest) -> GenerationResult:
        response = self._request(
            "post",
            "/generate-reel",
            json=request.model_dump(by_alias=True),
            failure=UpstreamUnavailable(messages.GENERATION_FAILED),
        )

        if not _is_success(response):
            logger.error("Error generating reel: %s %s", response.status_code, _error_text(response))
            if response.status_code == 429:
                raise UpstreamRateLimited(messages.RATE_LIMITED)
            if response.status_code == 402:
                raise UpstreamPaymentRequired(messages.INSUFFICIENT_CREDITS)
            raise UpstreamUnavailable(messages.GENERATION_FAILED)

        try:
            return GenerationResult.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise MalformedResponse(messages.GENERATION_FAILED) from e

    # ---- auth ----

    def sign_up(self, email: str, password: str, display_name: Optional[str] = None) -> UserOut:
        response = self._request(
            "post",
            "/auth/signup",
            json={"email": email, "password": password, "displayName": display_name},
            failure=PersistenceFailure(messages.SIGN_UP_FAILED),
        )
        if response.status_code == 409:
            raise UserAlreadyExists(messages.ALREADY_REGISTERED)
        if not _is_success(response):
            raise PersistenceFailure(messages.SIGN_UP_FAILED)
        return UserOut.model_validate(response.json())

    def sign_in(self, email: str, password: str) -> SessionOut:
        response = self._request(
            "post",
            "/auth/signin",
            json={"email": email, "password": password},
            failure=PersistenceFailure(messages.SIGN_IN_FAILED),
        )
        if response.status_code == 400:
            raise InvalidCredentials(messages.INVALID_CREDENTIALS)
        if not _is_success(response):
            raise PersistenceFailure(messages.SIGN_IN_FAILED)
        return SessionOut.model_validate(response.json())

    def sign_out(self, token: str) -> None:
        response = self._request(
            "post",
            "/auth/signout",
            token=token,
            failure=PersistenceFailure(messages.SIGN_OUT_FAILED),
        )
        self._check_auth(response, messages.SIGN_OUT_FAILED)

    def current_user(self, token: str) -> UserOut:
        response = self._request(
            "get",
            "/auth/user",
            token=token,
            failure=PersistenceFailure(messages.SIGN_IN_FAILED),
        )
        self._check_auth(response, messages.SIGN_IN_FAILED)
        return UserOut.model_validate(response.json())

    # ---- saved reels ----

    def list_reels(self, token: str) -> List[SavedReelOut]:
        response = self._request(
            "get",
            "/reels",
            token=token,
            failure=PersistenceFailure(messages.LOAD_REELS_FAILED),
        )
        self._check_auth(response, messages.LOAD_REELS_FAILED)
        return [SavedReelOut.model_validate(item) for item in response.json()]

    def get_reel(self, token: str, reel_id: str) -> SavedReelOut:
        response = self._request(
            "get",
            f"/reels/{reel_id}",
            token=token,
            failure=PersistenceFailure(messages.OPEN_REEL_FAILED),
        )
        self._check_auth(response, messages.OPEN_REEL_FAILED)
        return SavedReelOut.model_validate(response.json())

    def save_reel(
        self,
        token: str,
        request: GenerationRequest,
        result: GenerationResult,
        title: Optional[str] = None,
    ) -> SavedReelOut:
        payload = request.model_dump(by_alias=True)
        payload["title"] = title
        payload["result"] = result.model_dump(by_alias=True)

        response = self._request(
            "post",
            "/reels",
            token=token,
            json=payload,
            failure=PersistenceFailure(messages.SAVE_REEL_FAILED),
        )
        self._check_auth(response, messages.SAVE_REEL_FAILED)
        return SavedReelOut.model_validate(response.json())

    def delete_reel(self, token: str, reel_id: str) -> None:
        response = self._request(
            "delete",
            f"/reels/{reel_id}",
            token=token,
            failure=PersistenceFailure(messages.DELETE_REEL_FAILED),
        )
        self._check_auth(response, messages.DELETE_REEL_FAILED)

    @staticmethod
    def _check_auth(response, failure_message: str):
        if response.status_code == 401:
            raise AuthRequired(messages.SIGN_IN_TO_SAVE)
        if not _is_success(response):
            logger.error("API error: %s %s", response.status_code, _error_text(response))
            raise PersistenceFailure(failure_message)
