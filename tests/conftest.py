import pytest

from spaneval.schemas import Document

MERKEL_TEXT = (
    "Angela Dorothea Merkel ist eine deutsche Politikerin (CDU) und seit dem 22. "
    "November 2005 Bundeskanzlerin der Bundesrepublik Deutschland. "
    "Merkel wuchs in der DDR auf und war dort als Physikerin am Zentralinstitut "
    "für Physikalische Chemie wissenschaftlich tätig."
)
MERKEL_LABELS = ["PER", "LOC", "LOC", "PER", "LOC", "ORG"]
MERKEL_OFFSETS = [(0, 21), (54, 56), (110, 135), (138, 143), (158, 160), (197, 236)]

# 20 samples, 5 per document; the first half is the training pool.
GROWING_LABELS = [
    "PER", "PER", "PER", "LOC", "PER", "LOC", "PER", "ORG", "PER", "LOC",
    "PER", "LOC", "PER", "LOC", "ORG", "PER", "PER", "LOC", "PER", "LOC",
]
OFFSETS = [(0, 4), (10, 14), (20, 24), (30, 34), (40, 44)]


@pytest.fixture
def merkel_document():
    document = Document(text=MERKEL_TEXT, name="merkel")
    for (start, end), label in zip(MERKEL_OFFSETS, MERKEL_LABELS):
        document.add_span(start, end, label)
    return document


@pytest.fixture
def merkel_corpus(merkel_document):
    return [merkel_document]


@pytest.fixture
def growing_corpus():
    documents = []
    for index in range(4):
        labels = GROWING_LABELS[index * 5:(index + 1) * 5]
        documents.append(Document.from_mapping(dict(zip(OFFSETS, labels)), name=f"doc-{index}"))
    return documents


@pytest.fixture
def unlabeled_corpus():
    return [Document.from_mapping({offsets: None for offsets in OFFSETS}, name=f"blank-{index}") for index in range(3)]
