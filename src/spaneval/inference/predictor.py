# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging

from ..config import RecommenderConfig
from ..corpus import DocumentSpanStore, SpanStore
from ..schemas import Document, PredictionResult, Span
from ..training.trainer import MajorityModel

logger = logging.getLogger(__name__)


class MajorityPredictor:
    def __init__(
        self,
        *,
        model: MajorityModel,
        config: RecommenderConfig | None = None,
        store: SpanStore | None = None,
        unlabeled_only: bool = False,
    ) -> None:
        self.model = model
        self.config = config or RecommenderConfig()
        self.store = store or DocumentSpanStore()
        self.unlabeled_only = unlabeled_only

    @property
    def enabled(self) -> bool:
        return not self.model.is_empty

    def candidates(self) -> list[PredictionResult]:
        return self.model.top(self.config.max_recommendations)

    def predict(self, document: Document) -> Document:
        """Return a copy of ``document`` with candidates written at every gold span position.

        With ``unlabeled_only`` set, spans that already carry a label are left alone.
        """
        working = document.copy()
        if not self.enabled:
            return working
        candidates = self.candidates()
        targets = [
            span
            for span in self.store.read_spans(working)
            if not span.is_prediction and not (self.unlabeled_only and span.label is not None)
        ]
        for span in targets:
            for candidate in candidates:
                self.store.add_span(working, span.start, span.end, candidate.label, candidate.score)
        logger.debug("Wrote %d predictions on %d spans", len(targets) * len(candidates), len(targets))
        return working


def best_predictions(spans: list[Span]) -> dict[tuple[int, int], str | None]:
    """Highest-scoring predicted label per offset pair, ties broken by label."""
    best: dict[tuple[int, int], Span] = {}
    for span in spans:
        if not span.is_prediction:
            continue
        current = best.get(span.offsets)
        if current is None or (-span.score, span.label or "") < (-current.score, current.label or ""):
            best[span.offsets] = span
    return {offsets: span.label for offsets, span in best.items()}


def predict(
    model: MajorityModel,
    document: Document,
    *,
    max_recommendations: int | None = None,
    unlabeled_only: bool = False,
) -> Document:
    config = RecommenderConfig() if max_recommendations is None else RecommenderConfig(max_recommendations=max_recommendations)
    return MajorityPredictor(model=model, config=config, unlabeled_only=unlabeled_only).predict(document)
