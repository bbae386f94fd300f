import pytest

from spaneval.config import RecommenderConfig
from spaneval.corpus import samples_frame
from spaneval.errors import IllegalStateError
from spaneval.evaluation.evaluate import evaluate, evaluate_incremental
from spaneval.schemas import Document
from spaneval.training.splitter import IncrementalSplitter, PercentageBasedSplitter


def test_reference_document_gives_exact_scores(merkel_corpus):
    result = evaluate(merkel_corpus, PercentageBasedSplitter(0.5, 500))

    assert result.test_set_size == 3
    assert result.training_set_size == 3
    assert result.compute_accuracy_score() == pytest.approx(1.0 / 3)
    assert result.compute_precision_score() == pytest.approx(1.0 / 9)
    assert result.compute_recall_score() == pytest.approx(1.0 / 3)
    assert result.compute_f1_score() == pytest.approx((2.0 / 27) / (4.0 / 9))
    assert result.sealed
    assert not result.skipped


def test_evaluation_does_not_mutate_corpus(merkel_corpus):
    before = list(merkel_corpus[0].spans)
    evaluate(merkel_corpus, PercentageBasedSplitter(0.5, 500))
    assert merkel_corpus[0].spans == before


def test_evaluation_scores_strictly_between_zero_and_one(growing_corpus):
    result = evaluate(growing_corpus, PercentageBasedSplitter(0.8, 10))
    assert result.training_set_size == 10
    assert result.test_set_size == 10
    for value in result.metrics().values():
        assert 0.0 < value < 1.0


def test_unlabelled_corpus_does_not_raise(unlabeled_corpus):
    result = evaluate(unlabeled_corpus, PercentageBasedSplitter(0.8, 10))
    assert 0.0 <= result.compute_f1_score() <= 1.0
    assert result.total == result.test_set_size


def test_empty_test_set_is_skipped(merkel_corpus):
    result = evaluate(merkel_corpus, PercentageBasedSplitter(1.0, 500))
    assert result.skipped
    assert result.test_set_size == 0
    assert result.compute_f1_score() == 0.0


def test_empty_corpus_is_skipped():
    result = evaluate([], PercentageBasedSplitter(0.5, 10))
    assert result.skipped
    assert result.metrics()["accuracy"] == 0.0


def test_layer_name_is_reported(merkel_corpus):
    result = evaluate(merkel_corpus, PercentageBasedSplitter(0.5, 500), config=RecommenderConfig(layer_name="Entity"))
    assert result.layer_name == "Entity"


def test_samples_follow_document_then_offset_order():
    corpus = [
        Document.from_mapping({(10, 12): "B", (0, 3): "A"}),
        Document.from_mapping({(5, 6): "C"}),
    ]
    frame = samples_frame(corpus)
    assert frame["label"].tolist() == ["A", "B", "C"]
    assert frame["position"].tolist() == [0, 1, 2]
    assert frame["document"].tolist() == [0, 0, 1]


def test_incremental_steps_report_f1_between_zero_and_one(growing_corpus):
    splitter = IncrementalSplitter(0.5, 2, 10)
    steps = 0
    while splitter.has_next() and steps < 3:
        splitter.next()
        result = evaluate(growing_corpus, splitter)
        assert 0.0 < result.compute_f1_score() < 1.0
        assert result.training_set_size == 2 * (steps + 1)
        assert result.test_set_size == 10
        assert result.step == steps + 1
        steps += 1
    assert steps == 3


def test_evaluate_incremental_runs_until_window_stops_growing(growing_corpus):
    results = evaluate_incremental(growing_corpus, IncrementalSplitter(0.5, 4, 10))
    assert [result.training_set_size for result in results] == [4, 8, 10]
    assert {result.test_set_size for result in results} == {10}


def test_evaluate_incremental_honours_max_steps(growing_corpus):
    results = evaluate_incremental(growing_corpus, IncrementalSplitter(0.5, 2, 10), max_steps=2)
    assert len(results) == 2


def test_evaluate_incremental_needs_fresh_splitter(growing_corpus):
    splitter = IncrementalSplitter(0.5, 2, 10)
    splitter.next()
    with pytest.raises(IllegalStateError):
        evaluate_incremental(growing_corpus, splitter)


def test_incremental_split_before_advance_fails(growing_corpus):
    with pytest.raises(IllegalStateError):
        evaluate(growing_corpus, IncrementalSplitter(0.5, 2, 10))
