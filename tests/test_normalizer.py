"""Tests for upstream response normalization."""

from services.question_generation import normalize_question
from services.question_generation.normalizer import MISSING_QUESTION_TEXT


class TestNormalizeQuestion:
    """Test cases for coercing upstream output into a Question."""

    def test_empty_object_gets_safe_defaults(self):
        """Test {} becomes a valid open question with a placeholder."""
        question = normalize_question({}, "technical", "auto", 0)

        assert question.round == "technical"
        assert question.difficulty == "easy"
        assert question.question_type == "open"
        assert question.question == MISSING_QUESTION_TEXT
        assert question.options == []
        assert question.correct_option_index is None
        assert question.explanation is None
        assert question.followup_tip is None

    def test_empty_object_for_aptitude(self):
        """Test aptitude defaults to mcq with index 0."""
        question = normalize_question({}, "aptitude", "hard", 0)

        assert question.question_type == "mcq"
        assert question.correct_option_index == 0
        assert question.difficulty == "hard"

    def test_well_formed_passes_through(self, mock_aptitude_question):
        """Test a conformant payload is kept as-is."""
        question = normalize_question(mock_aptitude_question, "aptitude", "auto", 0)

        assert question.model_dump() == mock_aptitude_question

    def test_upstream_values_take_precedence(self):
        """Test round and difficulty from upstream override the request."""
        raw = {"round": "hr", "difficulty": "hard", "question": "Why us?"}
        question = normalize_question(raw, "technical", "auto", 0)

        assert question.round == "hr"
        assert question.difficulty == "hard"
        assert question.question == "Why us?"

    def test_wrong_types_are_coerced(self):
        """Test malformed field types never raise."""
        raw = {
            "question_type": "essay",
            "question": "",
            "options": "A, B, C, D",
            "correct_option_index": "2",
            "explanation": 42,
        }
        question = normalize_question(raw, "technical", "auto", 2)

        assert question.question_type == "open"
        assert question.question == MISSING_QUESTION_TEXT
        assert question.options == []
        assert question.correct_option_index is None
        assert question.explanation == "42"
        assert question.difficulty == "medium"

    def test_boolean_index_is_not_numeric(self):
        """Test True is not accepted as an option index."""
        question = normalize_question({"correct_option_index": True}, "aptitude", "auto", 0)
        assert question.correct_option_index == 0

    def test_integral_float_index_accepted(self):
        """Test whole-number floats are accepted as indexes."""
        question = normalize_question({"correct_option_index": 3.0}, "aptitude", "auto", 0)
        assert question.correct_option_index == 3

    def test_non_string_options_are_stringified(self):
        """Test numeric options become strings."""
        question = normalize_question({"options": [1, 2, 3, 4]}, "aptitude", "auto", 0)
        assert question.options == ["1", "2", "3", "4"]

    def test_explicit_null_kept(self):
        """Test explicit nulls for explanation and tip stay null."""
        raw = {"question": "Q?", "explanation": None, "followup_tip": None}
        question = normalize_question(raw, "gd", "auto", 0)

        assert question.explanation is None
        assert question.followup_tip is None

    def test_non_object_payload_treated_as_empty(self):
        """Test a JSON array or scalar is normalized like {}."""
        question = normalize_question(["not", "an", "object"], "me", "auto", 4)

        assert question.round == "me"
        assert question.difficulty == "hard"
        assert question.question == MISSING_QUESTION_TEXT

    def test_fractional_index_falls_back(self):
        """Test a non-integral index is not truncated."""
        question = normalize_question({"correct_option_index": 2.7}, "aptitude", "auto", 0)
        assert question.correct_option_index == 0

        question = normalize_question({"correct_option_index": 2.7}, "technical", "auto", 0)
        assert question.correct_option_index is None

    def test_out_of_range_mcq_index_reset(self):
        """Test an mcq index outside 0-3 is replaced with 0."""
        raw = {"options": ["a", "b", "c", "d"], "correct_option_index": 9}
        assert normalize_question(raw, "aptitude", "auto", 0).correct_option_index == 0

        raw["correct_option_index"] = -1
        assert normalize_question(raw, "aptitude", "auto", 0).correct_option_index == 0

    def test_structured_values_rendered_as_json(self):
        """Test dict and list values become JSON text, not Python reprs."""
        raw = {
            "question": "Q?",
            "options": [{"label": "A"}, ["b"], 3, "d"],
            "explanation": {"steps": ["x", "y"]},
            "followup_tip": ["breathe", "pause"],
        }
        question = normalize_question(raw, "aptitude", "auto", 0)

        assert question.options == ['{"label": "A"}', '["b"]', "3", "d"]
        assert question.explanation == '{"steps": ["x", "y"]}'
        assert question.followup_tip == '["breathe", "pause"]'
