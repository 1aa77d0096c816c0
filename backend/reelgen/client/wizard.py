import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from reelgen.client import messages
from reelgen.client.result_view import ResultView
from reelgen.client.session import AuthContext
from reelgen.errors import ReelgenError, ValidationIncomplete
from reelgen.schemas import GenerationRequest

logger = logging.getLogger(__name__)


@dataclass
class WizardForm:
    business_type: str = ""
    pain_point: str = ""
    objective: str = ""
    tone: str = ""


class ReelWizard:
    """
    Four-step linear form: business type -> pain point -> objective -> tone.

    Steps are numbered 1..4. Advancing is gated on the current step's
    field; going back never clears anything. While a generation call is
    in flight every navigation and submit call is a no-op.
    """

    FIRST_STEP = 1
    LAST_STEP = 4

    # step -> field collected on that step
    STEP_FIELDS = {
        1: "business_type",
        2: "pain_point",
        3: "objective",
        4: "tone",
    }

    def __init__(self, api, auth: Optional[AuthContext] = None):
        self.api = api
        self.auth = auth

        self.step = self.FIRST_STEP
        self.form = WizardForm()
        self.is_loading = False
        self.result: Optional[ResultView] = None
        self.last_error: Optional[str] = None

    # ----------------------------
    # Fields
    # ----------------------------

    def set_field(self, name: str, value: str) -> bool:
        if self.is_loading or name not in self.STEP_FIELDS.values():
            return False
        setattr(self.form, name, value)
        return True

    def is_step_valid(self, step: int) -> bool:
        value = getattr(self.form, self.STEP_FIELDS[step])
        return len(value.strip()) > 0

    def can_proceed(self) -> bool:
        return self.is_step_valid(self.step)

    @property
    def is_complete(self) -> bool:
        return all(self.is_step_valid(step) for step in self.STEP_FIELDS)

    # ----------------------------
    # Navigation
    # ----------------------------

    def next(self) -> bool:
        if self.is_loading or self.step >= self.LAST_STEP or not self.can_proceed():
            return False
        self.step += 1
        return True

    def back(self) -> bool:
        if self.is_loading or self.step <= self.FIRST_STEP:
            return False
        self.step -= 1
        return True

    def go_to(self, step: int) -> bool:
        """Jump back to any earlier step."""
        if self.is_loading or not self.FIRST_STEP <= step < self.step:
            return False
        self.step = step
        return True

    # ----------------------------
    # Submit
    # ----------------------------

    def build_request(self) -> GenerationRequest:
        if not self.is_complete:
            raise ValidationIncomplete(messages.FILL_ALL_FIELDS)
        try:
            return GenerationRequest(
                business_type=self.form.business_type,
                pain_point=self.form.pain_point,
                objective=self.form.objective,
                tone=self.form.tone,
            )
        except ValidationError as e:
            raise ValidationIncomplete(messages.FILL_ALL_FIELDS) from e

    def submit(self) -> Optional[ResultView]:
        """
        Generate the reel from the last step.

        Raises ValidationIncomplete when called before step 4 or with an
        empty field. Generation failures leave the wizard on the form with
        the toast text in last_error.
        """
        if self.is_loading:
            return None
        if self.step != self.LAST_STEP:
            raise ValidationIncomplete(messages.FILL_ALL_FIELDS)

        request = self.build_request()

        self.is_loading = True
        self.last_error = None
        try:
            result = self.api.generate(request)
        except ReelgenError as e:
            logger.error("Error generating reel: %s", e)
            self.last_error = e.message
            return None
        finally:
            self.is_loading = False

        self.result = ResultView(result, request, self.api, auth=self.auth)
        return self.result

    def reset(self):
        """Discard the result and start a new reel."""
        if self.is_loading:
            return
        self.step = self.FIRST_STEP
        self.form = WizardForm()
        self.result = None
        self.last_error = None
