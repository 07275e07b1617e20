"""Unit tests for the word cloud and phrase scoring."""

import pytest

from cvtailor.contexts.targeting.term_frequency import (
    PhraseScore,
    PhraseScorer,
    TermFrequencyModel,
    score_phrase,
)

JOB_POSTING = "Python engineer builds scalable systems"


@pytest.fixture
def model():
    return TermFrequencyModel.build(JOB_POSTING)


class TestBuild:
    """Test word cloud construction."""

    @pytest.mark.unit
    def test_counts_each_word(self, model):
        assert dict(model.counts) == {
            "python": 1,
            "engineer": 1,
            "builds": 1,
            "scalable": 1,
            "systems": 1,
        }
        assert model.total_weight == 5

    @pytest.mark.unit
    def test_repeated_words_accumulate(self):
        model = TermFrequencyModel.build("Python, python and PYTHON; also Go")
        assert model.counts["python"] == 3
        assert model.counts["go"] == 1
        assert model.total_weight == 6

    @pytest.mark.unit
    def test_total_weight_matches_token_count(self):
        text = "  Data\tpipelines,\n\nETL (Airflow) & 5+ years of SQL!  "
        model = TermFrequencyModel.build(text)
        # data pipelines etl airflow years of sql
        assert model.total_weight == 7
        assert model.total_weight == sum(model.counts.values())

    @pytest.mark.unit
    def test_symbols_are_deleted(self):
        """'C++' normalizes to 'c'."""
        model = TermFrequencyModel.build("C++ developer")
        assert "c" in model.counts
        assert "c++" not in model.counts

    @pytest.mark.unit
    def test_empty_text_gives_zero_model(self):
        model = TermFrequencyModel.build("")
        assert dict(model.counts) == {}
        assert model.total_weight == 0

    @pytest.mark.unit
    def test_counts_are_read_only(self, model):
        with pytest.raises(TypeError):
            model.counts["java"] = 10

    @pytest.mark.unit
    def test_mismatched_total_rejected(self):
        with pytest.raises(ValueError):
            TermFrequencyModel(counts={"python": 2}, total_weight=3)

    @pytest.mark.unit
    def test_from_file(self, tmp_path):
        job_file = tmp_path / "posting.md"
        job_file.write_text(JOB_POSTING, encoding="utf-8")

        model = TermFrequencyModel.from_file(job_file)
        assert model.total_weight == 5

    @pytest.mark.unit
    def test_from_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            TermFrequencyModel.from_file(tmp_path / "missing.md")


class TestScore:
    """Test phrase scoring."""

    @pytest.mark.unit
    def test_matching_word(self, model):
        assert score_phrase(model, "Python").weight == 1

    @pytest.mark.unit
    def test_unknown_word(self, model):
        assert score_phrase(model, "Java").weight == 0

    @pytest.mark.unit
    def test_multi_word_sum(self, model):
        """Exact-token matching: 'built' does not match 'builds'."""
        assert score_phrase(model, "built scalable systems").weight == 2
        assert score_phrase(model, "wrote code").weight == 0

    @pytest.mark.unit
    def test_case_insensitive(self, model):
        assert score_phrase(model, "PYTHON Engineer").weight == 2

    @pytest.mark.unit
    def test_repeated_phrase_words_count_each_time(self, model):
        assert score_phrase(model, "python python").weight == 2

    @pytest.mark.unit
    def test_phrase_punctuation_not_stripped(self, model):
        assert score_phrase(model, "Python,").weight == 0

    @pytest.mark.unit
    def test_only_single_spaces_split(self, model):
        """Tabs do not split; double spaces produce an empty token that misses."""
        assert score_phrase(model, "python\tengineer").weight == 0
        assert score_phrase(model, "python  engineer").weight == 2

    @pytest.mark.unit
    @pytest.mark.parametrize("phrase", ["", " ", "   "])
    def test_empty_phrases(self, model, phrase):
        assert score_phrase(model, phrase).weight == 0

    @pytest.mark.unit
    def test_ratio(self, model):
        score = score_phrase(model, "python systems")
        assert score.total_weight == 5
        assert score.ratio == pytest.approx(0.4)

    @pytest.mark.unit
    def test_zero_model_ratio(self):
        model = TermFrequencyModel.build("")
        score = score_phrase(model, "python")
        assert score.weight == 0
        assert score.ratio == 0.0

    @pytest.mark.unit
    def test_scoring_is_repeatable(self, model):
        assert score_phrase(model, "python engineer") == score_phrase(model, "python engineer")

    @pytest.mark.unit
    def test_model_and_scorer_agree(self, model):
        scorer = PhraseScorer(model)
        assert model.score("scalable systems") == scorer.score("scalable systems")
        assert scorer.weight("scalable systems") == 2
        assert scorer.sum_weights(["python", "java", "systems"]) == 2

    @pytest.mark.unit
    def test_str(self):
        assert str(PhraseScore(weight=1, total_weight=4)) == "Word Weight: 1 / 4 = 0.25"


class TestDescribe:
    """Test word cloud display."""

    @pytest.mark.unit
    def test_most_common_order(self):
        model = TermFrequencyModel.build("b a c a b a")
        assert model.most_common() == [("a", 3), ("b", 2), ("c", 1)]
        assert model.most_common(1) == [("a", 3)]

    @pytest.mark.unit
    def test_describe_lists_words(self, model):
        report = model.describe()
        assert "Total Weight: 5" in report
        assert "python" in report
        assert "20.0%" in report

    @pytest.mark.unit
    def test_describe_empty_model(self):
        report = TermFrequencyModel.build("").describe()
        assert "Total Weight: 0" in report
