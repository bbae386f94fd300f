# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from .errors import InvalidSpanError


@dataclass(slots=True, frozen=True)
class Span:
    start: int
    end: int
    label: str | None = None
    score: float | None = None

    def __post_init__(self) -> None:
        if self.start < 0 or self.start >= self.end:
            raise InvalidSpanError(f"invalid span offsets: [{self.start}, {self.end})")
        if self.score is not None and not 0.0 < self.score <= 1.0:
            raise InvalidSpanError(f"score must be in (0, 1], got {self.score}")

    @property
    def offsets(self) -> tuple[int, int]:
        return (self.start, self.end)

    @property
    def is_prediction(self) -> bool:
        return self.score is not None

    def without_label(self) -> Span:
        return replace(self, label=None, score=None)


@dataclass(slots=True)
class Document:
    """Bag of spans over one text buffer.

    Gold spans and predictions live side by side; a prediction is any span
    carrying a score.
    """

    spans: list[Span] = field(default_factory=list)
    text: str = ""
    name: str = ""

    @classmethod
    def from_mapping(cls, labels: Mapping[tuple[int, int], str | None], *, text: str = "", name: str = "") -> Document:
        return cls(spans=[Span(start, end, label) for (start, end), label in labels.items()], text=text, name=name)

    def add_span(self, start: int, end: int, label: str | None = None, score: float | None = None) -> Span:
        span = Span(start, end, label, score)
        self.spans.append(span)
        return span

    def read_spans(self) -> list[Span]:
        # Stable sort keeps insertion order among spans sharing offsets.
        return sorted(self.spans, key=lambda span: span.offsets)

    def gold_spans(self) -> list[Span]:
        return [span for span in self.read_spans() if not span.is_prediction]

    def predictions(self) -> list[Span]:
        return [span for span in self.read_spans() if span.is_prediction]

    def copy(self) -> Document:
        return Document(spans=list(self.spans), text=self.text, name=self.name)


@dataclass(slots=True, frozen=True)
class Split:
    training: frozenset[int]
    test: frozenset[int]

    def __post_init__(self) -> None:
        overlap = self.training & self.test
        if overlap:
            raise ValueError(f"training and test positions overlap: {sorted(overlap)[:5]}")

    @property
    def training_size(self) -> int:
        return len(self.training)

    @property
    def test_size(self) -> int:
        return len(self.test)


@dataclass(slots=True)
class PredictionResult:
    label: str
    score: float
    rank: int = 0
