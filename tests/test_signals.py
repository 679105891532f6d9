"""
Tests for the Signal Extractor.
"""

import pytest

from jobscreen.signals import (
    analyze_text,
    severity_for_weight,
    confidence_for_score,
)


class TestSeverity:

    @pytest.mark.parametrize("weight,expected", [
        (1.0, "HIGH"),
        (0.8, "HIGH"),
        (0.79, "MEDIUM"),
        (0.5, "MEDIUM"),
        (0.49, "LOW"),
        (-0.2, "LOW"),
        (-0.5, "MEDIUM"),
    ])
    def test_cutoffs(self, weight, expected):
        assert severity_for_weight(weight) == expected


class TestEmptyInput:

    def test_empty_string(self):
        result = analyze_text("")
        assert result.score == 0
        assert result.word_count == 0
        assert result.red_flags == []
        assert result.positive_flags == []
        assert result.grammar_issues == []
        assert result.confidence == 0
        assert result.grammar_score == 100

    def test_whitespace_only(self):
        result = analyze_text("   \n\t ")
        assert result.word_count == 0
        assert result.score == 0


class TestScoring:

    def test_weight_times_matches(self):
        result = analyze_text("Pay a registration fee. Send money today.")
        assert [f.label for f in result.red_flags] == ["REQUEST_MONEY"]
        assert result.red_flags[0].match_count == 2
        assert result.red_flags[0].severity == "HIGH"
        assert result.score == pytest.approx(2.0)
        assert result.confidence == pytest.approx(40.0)

    def test_positive_rules_subtract(self):
        result = analyze_text("Benefits include dental and vision.")
        assert [f.label for f in result.positive_flags] == ["STANDARD_BENEFITS"]
        assert result.positive_flags[0].match_count == 3
        assert result.score == pytest.approx(-1.5)
        assert result.confidence == pytest.approx(30.0)

    def test_evidence_follows_table_order(self):
        result = analyze_text("Send money first. Apply now.")
        assert [f.label for f in result.red_flags] == ["URGENT_HIRING", "REQUEST_MONEY"]

    def test_confidence_clamped(self):
        result = analyze_text("send money " * 50)
        assert result.confidence == 100
        assert confidence_for_score(-12.0) == 100

    def test_word_count_splits_whitespace_runs(self):
        assert analyze_text("  one two\nthree\t ").word_count == 3


class TestDerivedFlags:

    def test_salary_contact_company(self):
        result = analyze_text(
            "Acme LLC pays a salary of $9000 per month. Call 555-123-4567."
        )
        assert result.salary_mentioned is True
        assert result.contact_info_present is True
        assert result.company_info_present is True

    def test_website_alone_is_not_company_info(self):
        result = analyze_text("Details at www.initech.com")
        assert result.company_info_present is False
        assert "COMPANY_WEBSITE" in [f.label for f in result.positive_flags]

    def test_benefits_alone_are_not_company_info(self):
        result = analyze_text("Dental and vision included.")
        assert result.company_info_present is False

    def test_nothing_set_on_plain_text(self):
        result = analyze_text("A quiet description of a warehouse role.")
        assert result.salary_mentioned is False
        assert result.contact_info_present is False
        assert result.company_info_present is False


class TestGrammarScore:

    def test_one_point_of_ten_per_issue_type(self):
        result = analyze_text("YOU MUST APPLY!!! you must")
        assert len(result.grammar_issues) == 3
        assert result.grammar_score == 70
        # repeat matches add score but not grammar penalty
        assert result.grammar_issues[0].match_count == 2

    def test_clean_text(self):
        assert analyze_text("We offer a quiet office.").grammar_score == 100


class TestMonotonicity:

    BASE = "Immediate hiring for a remote job. Benefits include dental."

    def test_extra_red_flag_never_lowers_score(self):
        base = analyze_text(self.BASE).score
        assert analyze_text(self.BASE + " Send money.").score >= base
        assert analyze_text(self.BASE + " Apply now.").score >= base

    def test_extra_positive_never_raises_score(self):
        base = analyze_text(self.BASE).score
        assert analyze_text(self.BASE + " Vision too.").score <= base
        assert analyze_text(self.BASE + " See www.initech.com").score <= base


class TestDeterminism:

    def test_same_input_same_output(self):
        text = "URGENT!!! Send money to jobs@gmail.com, salary $5000 weekly."
        assert analyze_text(text) == analyze_text(text)
