"""
Unit tests for the match stage.
"""
from formgate.engine.match import check_match
from formgate.models.feedback import FeedbackResult


class TestCheckMatch:
    """Tests for cross-field equality."""

    def test_equal_values_pass(self, make_document):
        document = make_document(
            {"id": "password", "value": "s3cret"},
            {"id": "confirm", "value": "s3cret", "match": "password"},
        )
        feedback = FeedbackResult()
        assert check_match(list(document.iter_fields("form")), document, feedback) is True
        assert feedback.status == "valid"

    def test_unequal_values_record_both_ids(self, make_document):
        document = make_document(
            {"id": "password", "value": "s3cret"},
            {"id": "confirm", "value": "s3cret ", "match": "password"},
        )
        feedback = FeedbackResult()
        assert check_match(list(document.iter_fields("form")), document, feedback) is False
        assert feedback.success is False
        assert feedback.status == "mismatch"
        error = feedback.error_fields[1]
        assert error.field_id == "confirm"
        assert error.match_field_id == "password"
        assert error.to_dict() == {"id": "confirm", "matchId": "password"}

    def test_comparison_is_case_sensitive(self, make_document):
        document = make_document(
            {"id": "email", "value": "ada@example.com"},
            {"id": "email-again", "value": "Ada@example.com", "match": "email"},
        )
        feedback = FeedbackResult()
        assert check_match(list(document.iter_fields("form")), document, feedback) is False

    def test_unknown_target_passes(self, make_document):
        document = make_document({"id": "confirm", "value": "x", "match": "ghost"})
        feedback = FeedbackResult()
        assert check_match(list(document.iter_fields("form")), document, feedback) is True

    def test_target_outside_selection_is_found(self, make_document):
        document = make_document(
            {"id": "password", "value": "s3cret"},
            {"id": "confirm", "value": "other", "match": "password"},
        )
        feedback = FeedbackResult()
        fields = [document.get_field("confirm")]
        assert check_match(fields, document, feedback) is False
        assert feedback.error_fields[0].match_field_id == "password"
