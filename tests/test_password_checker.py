"""Tests for password scoring, classification and feedback."""

import random

import pytest
from core import (
    CommonPasswordSet,
    EMPTY_PASSWORD_MESSAGE,
    BEST_PRACTICES_MESSAGE,
    STRENGTH_LABELS,
    InvalidLengthError,
    build_feedback,
    calculate_score,
    classify_score,
    render_feedback,
)
from core.feedback import (
    SHORT_LENGTH_TIP,
    GOOD_LENGTH_TIP,
    MIX_CASE_TIP,
    ADD_DIGITS_TIP,
    ADD_SYMBOLS_TIP,
    REPEATED_PATTERN_TIP,
    COMMON_PASSWORD_TIP,
)
from password_checker import PasswordAnalyzer, check_password_strength, get_default_analyzer


@pytest.fixture
def analyzer():
    return PasswordAnalyzer(CommonPasswordSet(["password", "qwerty", "123456", "letmein"]))


@pytest.fixture
def bare_analyzer():
    return PasswordAnalyzer()


class TestCalculateScore:
    """Test the weighted scoring rules."""

    def test_empty_password_scores_zero(self):
        assert calculate_score("") == 0
        assert calculate_score("", is_common=True) == 0

    def test_length_saturates_at_ten_characters(self):
        # mixed classes, no repeats: length points + 40 variety
        assert calculate_score("Ab1!") == 16 + 40
        assert calculate_score("Ab1!cdefgh") == 40 + 40
        assert calculate_score("Ab1!cdefghijklmnop") == 80

    def test_single_class_penalty(self):
        # 12 lowercase: 40 length + 10 variety - 15
        assert calculate_score("abcdefghijkl") == 35

    def test_two_classes_have_no_single_class_penalty(self):
        assert calculate_score("abcdefghijk1") == 40 + 20

    def test_repeated_pattern_penalty(self):
        # 8 chars, 4 classes, repeated "Ab1!"
        assert calculate_score("Ab1!Ab1!") == 32 + 40 - 10

    def test_common_password_penalty(self):
        assert calculate_score("Password1!", is_common=True) == 40 + 40 - 40

    def test_penalties_stack_and_clamp_to_zero(self):
        # 16 + 10 - 15 - 10 - 40 = -39
        assert calculate_score("abab", is_common=True) == 0

    def test_short_repeated_password(self):
        assert calculate_score("aaaa") == 16 + 10 - 15 - 10
        assert calculate_score("123123") == 24 + 10 - 15 - 10

    @pytest.mark.parametrize("password", [
        "a", "!", "abab", "password", "Tr0ub4dor&3xyz", "x" * 500, "   ", "ÄÖÜäöü",
    ])
    def test_score_is_bounded(self, password):
        for common in (False, True):
            assert 0 <= calculate_score(password, is_common=common) <= 100

    def test_random_passwords_score_bounded(self):
        rng = random.Random(1234)
        alphabet = "aA1!é "
        for _ in range(200):
            password = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))
            assert 0 <= calculate_score(password) <= 100

    def test_score_is_deterministic(self):
        assert calculate_score("Tr0ub4dor&3xyz") == calculate_score("Tr0ub4dor&3xyz")


class TestClassifyScore:
    """Test label thresholds."""

    @pytest.mark.parametrize("score,label", [
        (0, "Very weak"),
        (24, "Very weak"),
        (25, "Weak"),
        (49, "Weak"),
        (50, "Moderate"),
        (69, "Moderate"),
        (70, "Strong"),
        (84, "Strong"),
        (85, "Very strong"),
        (100, "Very strong"),
    ])
    def test_threshold_boundaries(self, score, label):
        assert classify_score(score) == label

    def test_monotonic_over_full_range(self):
        ranks = [STRENGTH_LABELS.index(classify_score(s)) for s in range(0, 101)]
        assert ranks == sorted(ranks)
        assert set(classify_score(s) for s in range(0, 101)) == set(STRENGTH_LABELS)

    def test_out_of_range_scores_use_end_labels(self):
        assert classify_score(-5) == "Very weak"
        assert classify_score(150) == "Very strong"

    def test_five_labels_in_order(self):
        assert STRENGTH_LABELS == ("Very weak", "Weak", "Moderate", "Strong", "Very strong")


class TestFeedback:
    """Test advice lines and their order."""

    def test_empty_password_single_sentence(self):
        assert build_feedback("") == [EMPTY_PASSWORD_MESSAGE]
        assert render_feedback(build_feedback("")) == EMPTY_PASSWORD_MESSAGE

    def test_short_password_feedback(self):
        feedback = build_feedback("abc")
        assert feedback[0] == SHORT_LENGTH_TIP
        assert "12" in feedback[0]

    def test_good_length_feedback(self):
        assert build_feedback("Tr0ub4dor&3xyz") == [GOOD_LENGTH_TIP]

    def test_mix_case_fires_once(self):
        feedback = build_feedback("1234567890!!")
        assert feedback.count(MIX_CASE_TIP) == 1

    def test_missing_uppercase_only(self):
        assert MIX_CASE_TIP in build_feedback("lowercase123!")

    def test_missing_digits_and_symbols(self):
        feedback = build_feedback("NoDigitsHere")
        assert ADD_DIGITS_TIP in feedback
        assert ADD_SYMBOLS_TIP in feedback

    def test_full_order_for_common_weak_password(self):
        feedback = build_feedback("abab", is_common=True)
        assert feedback == [
            SHORT_LENGTH_TIP,
            MIX_CASE_TIP,
            ADD_DIGITS_TIP,
            ADD_SYMBOLS_TIP,
            REPEATED_PATTERN_TIP,
            COMMON_PASSWORD_TIP,
        ]

    def test_render_uses_bullets(self):
        text = render_feedback(build_feedback("Tr0ub4dor&3xyz"))
        assert text == f"- {GOOD_LENGTH_TIP}\n"

    def test_render_best_practices_standalone(self):
        assert render_feedback([BEST_PRACTICES_MESSAGE]) == BEST_PRACTICES_MESSAGE


class TestPasswordAnalyzer:
    """Test the analyzer facade with a preloaded dictionary."""

    def test_dictionary_loaded(self, analyzer, bare_analyzer):
        assert analyzer.is_dictionary_loaded()
        assert analyzer.dictionary_size == 4
        assert not bare_analyzer.is_dictionary_loaded()

    def test_case_insensitive_common_check(self, analyzer):
        for variant in ["password", "PASSWORD", "Password", "pAsSwOrD"]:
            assert analyzer.is_common_password(variant)
            assert analyzer.is_common_password(variant.upper())

    def test_unloaded_dictionary_never_common(self, bare_analyzer):
        for pwd in ["password", "123456", ""]:
            assert bare_analyzer.is_common_password(pwd) is False

    def test_common_password_scenario(self, analyzer):
        score = analyzer.calculate_score("password")
        assert score == 0
        assert analyzer.classify_score(score) == "Very weak"

    def test_same_password_without_dictionary(self, bare_analyzer):
        # 32 + 10 - 15
        assert bare_analyzer.calculate_score("password") == 27
        assert bare_analyzer.classify_score(27) == "Weak"

    def test_strong_password_scenario(self, analyzer):
        score = analyzer.calculate_score("Tr0ub4dor&3xyz")
        assert score == 80
        assert analyzer.classify_score(score) in ("Strong", "Very strong")

    def test_empty_password_scenario(self, analyzer):
        assert analyzer.calculate_score("") == 0
        assert analyzer.classify_score(0) == "Very weak"
        assert analyzer.get_feedback("") == EMPTY_PASSWORD_MESSAGE

    def test_common_feedback_text(self, analyzer):
        text = analyzer.get_feedback("qwerty")
        assert "common password list" in text
        assert text.startswith("- Consider using at least 12 characters")
        assert text.endswith("\n")

    def test_analyze_report(self, analyzer):
        report = analyzer.analyze("LetMeIn")
        assert report.is_common
        assert report.score == analyzer.calculate_score("LetMeIn")
        assert report.label == analyzer.classify_score(report.score)
        assert list(report.feedback) == analyzer.get_feedback_lines("LetMeIn")
        assert report.signals.length == 7

    def test_analyze_computes_composition_once(self, analyzer, monkeypatch):
        import password_checker

        calls = []
        original = password_checker.analyze_composition

        def counting(password, is_common=False):
            calls.append(password)
            return original(password, is_common)

        monkeypatch.setattr(password_checker, "analyze_composition", counting)
        report = analyzer.analyze("Tr0ub4dor&3xyz")
        assert calls == ["Tr0ub4dor&3xyz"]
        assert report.score == 80
        assert list(report.feedback) == [GOOD_LENGTH_TIP]

    def test_report_feedback_is_immutable(self, analyzer):
        report = analyzer.analyze("qwerty")
        assert isinstance(report.feedback, tuple)
        with pytest.raises(AttributeError):
            report.feedback.append("extra")

    def test_analyze_empty(self, analyzer):
        report = analyzer.analyze("")
        assert report.score == 0
        assert report.label == "Very weak"
        assert report.feedback == (EMPTY_PASSWORD_MESSAGE,)
        assert not report.is_common

    def test_generate_password_delegates(self, analyzer):
        password = analyzer.generate_password(20, allow_symbols=False, rng=random.Random(7))
        assert len(password) == 20
        assert password.isalnum()

    def test_generate_password_invalid_length(self, analyzer):
        with pytest.raises(InvalidLengthError):
            analyzer.generate_password(0)
        # analyzer stays usable after the error
        assert analyzer.calculate_score("abc") >= 0

    def test_from_missing_file(self, tmp_path):
        analyzer = PasswordAnalyzer.from_file(str(tmp_path / "missing.txt"))
        assert not analyzer.is_dictionary_loaded()
        assert analyzer.is_common_password("password") is False


class TestDefaultAnalyzer:
    """Test the bundled dictionary and module helpers."""

    def test_bundled_dictionary_is_loaded(self):
        analyzer = get_default_analyzer()
        assert analyzer.is_dictionary_loaded()
        assert analyzer.dictionary_size >= 50
        assert analyzer.is_common_password("Password")

    def test_default_analyzer_is_shared(self):
        assert get_default_analyzer() is get_default_analyzer()

    def test_check_password_strength(self):
        strength, feedback = check_password_strength("qwerty")
        assert strength == "Very weak"
        assert any("common" in f.lower() for f in feedback)

    def test_check_strong_password(self):
        strength, feedback = check_password_strength("Tr0ub4dor&3xyz")
        assert strength == "Strong"
        assert feedback == [GOOD_LENGTH_TIP]
