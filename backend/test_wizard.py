import pytest

from conftest import SAMPLE_RESULT
from reelgen.client import messages
from reelgen.client.wizard import ReelWizard
from reelgen.errors import UpstreamRateLimited, ValidationIncomplete
from reelgen.schemas import GenerationResult


class StubApi:
    def __init__(self, error=None):
        self.error = error
        self.requests = []
        self.on_generate = None

    def generate(self, request):
        self.requests.append(request)
        if self.on_generate:
            self.on_generate()
        if self.error:
            raise self.error
        return GenerationResult.model_validate(SAMPLE_RESULT)


def filled_wizard(api=None):
    wizard = ReelWizard(api or StubApi())
    wizard.set_field("business_type", "clínica")
    wizard.next()
    wizard.set_field("pain_point", "nao_aparece")
    wizard.next()
    wizard.set_field("objective", "alcance_frio")
    wizard.next()
    wizard.set_field("tone", "direto")
    return wizard


@pytest.mark.parametrize(
    "step, field, value",
    [
        (1, "business_type", "clínica"),
        (2, "pain_point", "nao_aparece"),
        (3, "objective", "alcance_frio"),
    ],
)
def test_next_is_blocked_until_step_field_is_set(step, field, value):
    wizard = filled_wizard()
    wizard.step = step
    wizard.set_field(field, "")

    assert not wizard.can_proceed()
    assert not wizard.next()
    assert wizard.step == step

    wizard.set_field(field, value)

    assert wizard.can_proceed()
    assert wizard.next()
    assert wizard.step == step + 1


def test_blank_business_type_does_not_count():
    wizard = ReelWizard(StubApi())
    wizard.set_field("business_type", "   ")

    assert not wizard.next()


def test_last_step_gates_on_tone():
    wizard = filled_wizard()
    wizard.set_field("tone", "")

    assert wizard.step == 4
    assert not wizard.can_proceed()
    with pytest.raises(ValidationIncomplete):
        wizard.submit()

    wizard.set_field("tone", "direto")
    assert wizard.can_proceed()


@pytest.mark.parametrize("field", ["pain_point", "objective", "tone"])
def test_whitespace_code_is_incomplete(field):
    wizard = filled_wizard()
    wizard.set_field(field, "   ")

    assert not wizard.is_complete
    with pytest.raises(ValidationIncomplete) as excinfo:
        wizard.submit()

    assert excinfo.value.message == messages.FILL_ALL_FIELDS
    assert wizard.api.requests == []
    assert not wizard.is_loading


def test_whitespace_tone_blocks_last_step():
    wizard = filled_wizard()
    wizard.set_field("tone", "   ")

    assert not wizard.can_proceed()


def test_back_never_clears_later_fields():
    wizard = filled_wizard()

    assert wizard.go_to(1)
    assert wizard.step == 1
    assert wizard.form.pain_point == "nao_aparece"
    assert wizard.form.objective == "alcance_frio"
    assert wizard.form.tone == "direto"

    wizard.next()
    wizard.next()
    wizard.next()
    assert wizard.back()
    assert wizard.form.tone == "direto"


def test_go_to_only_moves_backwards():
    wizard = ReelWizard(StubApi())
    wizard.set_field("business_type", "loja")
    wizard.next()

    assert not wizard.go_to(3)
    assert not wizard.go_to(2)
    assert wizard.go_to(1)
    assert not wizard.back()


def test_submit_only_from_last_step():
    wizard = filled_wizard()
    wizard.back()

    with pytest.raises(ValidationIncomplete) as excinfo:
        wizard.submit()

    assert excinfo.value.message == messages.FILL_ALL_FIELDS
    assert wizard.api.requests == []


def test_successful_submit_returns_result_view():
    wizard = filled_wizard()

    view = wizard.submit()

    assert view is wizard.result
    assert view.result.script.hook == SAMPLE_RESULT["script"]["hook"]
    assert wizard.api.requests[0].business_type == "clínica"
    assert not wizard.is_loading


def test_failed_submit_stays_on_form_with_toast():
    wizard = filled_wizard(StubApi(error=UpstreamRateLimited(messages.RATE_LIMITED)))

    assert wizard.submit() is None
    assert wizard.last_error == messages.RATE_LIMITED
    assert wizard.step == 4
    assert wizard.result is None
    assert not wizard.is_loading


def test_navigation_and_resubmit_are_disabled_while_loading():
    api = StubApi()
    wizard = filled_wizard(api)
    seen = {}

    def during_call():
        seen["loading"] = wizard.is_loading
        seen["back"] = wizard.back()
        seen["edit"] = wizard.set_field("tone", "polemico")
        seen["resubmit"] = wizard.submit()

    api.on_generate = during_call
    wizard.submit()

    assert seen == {"loading": True, "back": False, "edit": False, "resubmit": None}
    assert len(api.requests) == 1
    assert wizard.form.tone == "direto"


def test_reset_starts_over():
    wizard = filled_wizard()
    wizard.submit()

    wizard.reset()

    assert wizard.step == 1
    assert wizard.result is None
    assert wizard.form.business_type == ""
