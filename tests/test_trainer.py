import pytest

from spaneval.errors import EmptyTrainingDataError
from spaneval.schemas import Document
from spaneval.training.trainer import MajorityModel, train, train_from_labels


def test_ranking_is_count_then_label():
    model = train_from_labels(["ORG", "LOC", "PER", "LOC", "PER", "PER", "MISC", "ORG"])
    assert model.ranked == (("PER", 3), ("LOC", 2), ("ORG", 2), ("MISC", 1))
    assert model.majority_label == "PER"
    assert model.total == 8


def test_ranking_ignores_insertion_order():
    first = train_from_labels(["B", "A", "C", "A", "B"])
    second = train_from_labels(["A", "B", "B", "C", "A"])
    assert first == second
    assert first.labels == ["A", "B", "C"]


def test_unlabelled_spans_are_ignored():
    model = train_from_labels(["PER", None, None, "LOC", "PER"])
    assert model.total == 3


def test_empty_training_data_is_tolerated():
    model = train_from_labels([None, None])
    assert model.is_empty
    assert model.majority_label is None
    assert model.top(3) == []
    assert model.score("PER") == 0.0


def test_strict_training_raises_on_empty_data():
    with pytest.raises(EmptyTrainingDataError):
        train_from_labels([], strict=True)


def test_train_reads_gold_spans_only(merkel_document):
    document = merkel_document.copy()
    document.add_span(0, 21, "ORG", 0.9)
    model = train([document])
    assert model.ranked == (("LOC", 3), ("PER", 2), ("ORG", 1))


def test_top_scores_are_relative_frequencies():
    model = train([Document.from_mapping({(0, 1): "PER", (2, 3): "PER", (4, 5): "PER", (6, 7): "LOC", (8, 9): "LOC", (10, 11): "ORG"})])
    top = model.top(3)
    assert [candidate.label for candidate in top] == ["PER", "LOC", "ORG"]
    assert [candidate.rank for candidate in top] == [0, 1, 2]
    scores = [candidate.score for candidate in top]
    assert scores[0] > scores[1] > scores[2]
    assert sum(scores) == pytest.approx(1.0)
    assert model.top(2)[-1].label == "LOC"


def test_default_model_is_empty():
    assert MajorityModel().is_empty
