# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import EmptyTrainingDataError
from ..schemas import Document, PredictionResult

logger = logging.getLogger(__name__)


def rank_labels(counts: Counter[str]) -> tuple[tuple[str, int], ...]:
    # Explicit sort: count descending, then label, never Counter order.
    return tuple(sorted(counts.items(), key=lambda item: (-item[1], item[0])))


@dataclass(slots=True, frozen=True)
class MajorityModel:
    ranked: tuple[tuple[str, int], ...] = ()

    @property
    def total(self) -> int:
        return sum(count for _label, count in self.ranked)

    @property
    def labels(self) -> list[str]:
        return [label for label, _count in self.ranked]

    @property
    def is_empty(self) -> bool:
        return not self.ranked

    @property
    def majority_label(self) -> str | None:
        return self.ranked[0][0] if self.ranked else None

    def score(self, label: str) -> float:
        total = self.total
        if total <= 0:
            return 0.0
        return dict(self.ranked).get(label, 0) / float(total)

    def top(self, k: int) -> list[PredictionResult]:
        total = self.total
        return [
            PredictionResult(label=label, score=count / float(total), rank=rank)
            for rank, (label, count) in enumerate(self.ranked[: max(k, 0)])
        ]


def train_from_labels(labels: Iterable[str | None], *, strict: bool = False) -> MajorityModel:
    counts = Counter(label for label in labels if label is not None)
    if not counts:
        if strict:
            raise EmptyTrainingDataError("no labelled spans in training data")
        logger.info("No labelled spans in training data, model is empty")
        return MajorityModel()
    model = MajorityModel(ranked=rank_labels(counts))
    logger.debug("Trained majority model on %d labels: %s", model.total, model.ranked[:5])
    return model


def train(documents: Iterable[Document], *, strict: bool = False) -> MajorityModel:
    """Count the gold labels of every document; predictions are not training signal."""
    labels = (span.label for document in documents for span in document.gold_spans())
    return train_from_labels(labels, strict=strict)
