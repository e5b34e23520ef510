"""
Unit tests for FormField, FeedbackResult and RenderRequest.
"""
from jsonschema import validate

from formgate.config.schemas import FEEDBACK_RESULT_SCHEMA
from formgate.models.feedback import ErrorField, FeedbackResult
from formgate.models.form_field import FormField
from formgate.models.render_request import RenderRequest


class TestFormField:
    def test_input_detection(self):
        assert FormField("a", kind="text").is_input is True
        assert FormField("a", kind="hidden").is_input is True
        assert FormField("a", kind="select").is_input is False
        assert FormField("a", kind="textarea").is_input is False

    def test_markers(self):
        form_field = FormField("card", classes={"credit-card-number", "required"})
        assert form_field.is_credit_card is True
        assert form_field.has_required_class is True
        assert form_field.has_required_attribute is False

    def test_required_attribute_values(self):
        assert FormField("a").has_required_attribute is False
        assert FormField("a", required="").has_required_attribute is True
        assert FormField("a", required="required").has_required_attribute is True
        assert FormField("a", required="false").has_required_attribute is False


class TestFeedbackResult:
    def test_fresh_result_is_valid(self):
        feedback = FeedbackResult()
        assert feedback.success is True
        assert feedback.status == "valid"
        assert feedback.error_fields == {}

    def test_record_overwrites_status(self):
        feedback = FeedbackResult()
        feedback.record(0, "missingRequiredFields", ErrorField("a"))
        feedback.record(3, "invalid", ErrorField("b"))
        assert feedback.success is False
        assert feedback.status == "invalid"
        assert list(feedback.error_fields) == [0, 3]

    def test_to_dict_wire_shape(self):
        feedback = FeedbackResult()
        feedback.record(1, "mismatch", ErrorField("confirm", "password"))
        data = feedback.to_dict()
        assert data == {
            "success": False,
            "status": "mismatch",
            "errorFields": {"1": {"id": "confirm", "matchId": "password"}},
        }
        validate(instance=data, schema=FEEDBACK_RESULT_SCHEMA)


class TestRenderRequest:
    def test_from_feedback_copies_fields(self):
        feedback = FeedbackResult()
        feedback.record(0, "invalid", ErrorField("email"))
        request = RenderRequest.from_feedback(feedback)
        feedback.error_fields.clear()
        assert request.status == "invalid"
        assert list(request.fields) == [0]

    def test_implicated_ids_include_match_targets(self):
        request = RenderRequest("mismatch", {
            1: ErrorField("confirm", "password"),
            4: ErrorField("email-again", "email"),
        })
        assert request.implicated_ids() == ["confirm", "password", "email-again", "email"]

    def test_implicated_ids_single_for_other_statuses(self):
        request = RenderRequest("invalid", {0: ErrorField("a"), 2: ErrorField("b")})
        assert request.implicated_ids() == ["a", "b"]
