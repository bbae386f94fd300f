# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Protocol

import pandas as pd

from .schemas import Document, Span

logger = logging.getLogger(__name__)

SAMPLE_COLUMNS = ["position", "document", "start", "end", "label"]


class CorpusReader(Protocol):
    def read(self) -> Iterable[Document]: ...


class SpanStore(Protocol):
    def add_span(self, document: Document, start: int, end: int, label: str | None, score: float | None) -> Span: ...

    def read_spans(self, document: Document) -> list[Span]: ...


class DocumentSpanStore:
    """Keeps spans directly on the in-memory ``Document``."""

    def add_span(self, document: Document, start: int, end: int, label: str | None, score: float | None) -> Span:
        return document.add_span(start, end, label, score)

    def read_spans(self, document: Document) -> list[Span]:
        return document.read_spans()


def load_corpus(reader: CorpusReader) -> list[Document]:
    documents = list(reader.read())
    logger.info(
        "Loaded %d documents with %d spans",
        len(documents),
        sum(len(document.gold_spans()) for document in documents),
    )
    return documents


def samples_frame(corpus: Sequence[Document]) -> pd.DataFrame:
    """One row per gold span, in document order then offset order.

    ``position`` is the index the splitters work on.
    """
    pairs = [(index, span) for index, document in enumerate(corpus) for span in document.gold_spans()]
    return pd.DataFrame(
        {
            "position": pd.Series(range(len(pairs)), dtype="int64"),
            "document": pd.Series([index for index, _span in pairs], dtype="int64"),
            "start": pd.Series([span.start for _index, span in pairs], dtype="int64"),
            "end": pd.Series([span.end for _index, span in pairs], dtype="int64"),
            # object dtype keeps missing labels as None
            "label": pd.Series([span.label for _index, span in pairs], dtype=object),
        },
        columns=SAMPLE_COLUMNS,
    )


def clean_label(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, float) and value != value:  # NaN
        return None
    return str(value)
