# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Iterable, Sequence

from .config import RecommenderConfig
from .errors import IllegalStateError
from .evaluation.evaluate import evaluate, evaluate_incremental
from .evaluation.result import EvaluationResult
from .inference.predictor import MajorityPredictor
from .schemas import Document
from .training.splitter import DataSplitter, IncrementalSplitter
from .training.trainer import MajorityModel, train


class MajorityRecommender:
    """Majority-label recommender: train on gold spans, suggest the most frequent labels."""

    def __init__(self, config: RecommenderConfig | None = None) -> None:
        self.config = config or RecommenderConfig()
        self.model: MajorityModel | None = None

    @property
    def trained(self) -> bool:
        return self.model is not None

    def train(self, documents: Iterable[Document]) -> MajorityModel:
        self.model = train(documents)
        return self.model

    def predict(self, document: Document) -> Document:
        if self.model is None:
            raise IllegalStateError("recommender has no trained model")
        return MajorityPredictor(model=self.model, config=self.config).predict(document)

    def evaluate(self, corpus: Sequence[Document], splitter: DataSplitter) -> EvaluationResult:
        return evaluate(corpus, splitter, config=self.config)

    def evaluate_incremental(
        self,
        corpus: Sequence[Document],
        splitter: IncrementalSplitter,
        *,
        max_steps: int | None = None,
    ) -> list[EvaluationResult]:
        return evaluate_incremental(corpus, splitter, config=self.config, max_steps=max_steps)
