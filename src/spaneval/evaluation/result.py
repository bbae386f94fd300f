# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Confusion accumulator for one evaluation run.

Every test sample adds one ``(gold, predicted)`` pair; either side may be
missing. Scores are derived from the stored pairs on every call:

- accuracy  = true positives / total samples
- precision = mean over labels of per-label precision
- recall    = mean over labels of per-label recall
- f1        = 2 * precision * recall / (precision + recall)

The label set is the union of gold and predicted labels. Any ratio with a
zero denominator counts as 0.
"""
from __future__ import annotations

import pandas as pd
from sklearn.metrics import confusion_matrix, precision_score, recall_score

from ..errors import IllegalStateError

NO_LABEL = "<no-label>"
MISSING = -1


class EvaluationResult:
    def __init__(
        self,
        *,
        layer_name: str = "",
        training_set_size: int = 0,
        test_set_size: int = 0,
        train_ratio: float = 0.0,
        step: int | None = None,
    ) -> None:
        self.layer_name = layer_name
        self.training_set_size = training_set_size
        self.test_set_size = test_set_size
        self.train_ratio = train_ratio
        self.step = step
        self.skipped = False
        self._gold: list[str | None] = []
        self._predicted: list[str | None] = []
        self._sealed = False

    def add(self, gold: str | None, predicted: str | None) -> None:
        if self._sealed:
            raise IllegalStateError("evaluation result is sealed")
        self._gold.append(gold)
        self._predicted.append(predicted)

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def total(self) -> int:
        return len(self._gold)

    @property
    def true_positives(self) -> int:
        return sum(1 for gold, pred in zip(self._gold, self._predicted) if gold is not None and gold == pred)

    @property
    def false_positives(self) -> int:
        return sum(1 for gold, pred in zip(self._gold, self._predicted) if pred is not None and pred != gold)

    @property
    def false_negatives(self) -> int:
        return sum(1 for gold, pred in zip(self._gold, self._predicted) if gold is not None and pred != gold)

    def labels(self) -> list[str]:
        return sorted({label for label in (*self._gold, *self._predicted) if label is not None})

    def _encoded(self) -> tuple[list[int], list[int], list[int]]:
        # Integer codes, MISSING for an absent label, so no label string can alias it.
        codes = {label: code for code, label in enumerate(self.labels())}
        gold = [MISSING if label is None else codes[label] for label in self._gold]
        predicted = [MISSING if label is None else codes[label] for label in self._predicted]
        return gold, predicted, list(codes.values())

    def compute_accuracy_score(self) -> float:
        if self.total == 0:
            return 0.0
        return self.true_positives / float(self.total)

    def compute_precision_score(self) -> float:
        gold, predicted, labels = self._encoded()
        if not labels:
            return 0.0
        return float(precision_score(gold, predicted, labels=labels, average="macro", zero_division=0))

    def compute_recall_score(self) -> float:
        gold, predicted, labels = self._encoded()
        if not labels:
            return 0.0
        return float(recall_score(gold, predicted, labels=labels, average="macro", zero_division=0))

    def compute_f1_score(self) -> float:
        precision = self.compute_precision_score()
        recall = self.compute_recall_score()
        if precision + recall == 0:
            return 0.0
        return 2 * precision * recall / (precision + recall)

    def confusion_frame(self) -> pd.DataFrame:
        """Gold labels as rows, predicted labels as columns, missing labels shown as ``NO_LABEL``."""
        gold, predicted, _labels = self._encoded()
        if not gold:
            return pd.DataFrame()
        codes = sorted(set(gold) | set(predicted))
        names = [NO_LABEL] + self.labels()
        matrix = confusion_matrix(gold, predicted, labels=codes)
        display = [names[code + 1] for code in codes]
        return pd.DataFrame(matrix, index=pd.Index(display, name="gold"), columns=pd.Index(display, name="predicted"))

    def metrics(self) -> dict[str, float]:
        return {
            "accuracy": self.compute_accuracy_score(),
            "precision": self.compute_precision_score(),
            "recall": self.compute_recall_score(),
            "f1": self.compute_f1_score(),
        }

    def as_dict(self) -> dict[str, object]:
        return {
            "layer": self.layer_name,
            "step": self.step,
            "skipped": self.skipped,
            "training_set_size": self.training_set_size,
            "test_set_size": self.test_set_size,
            "train_ratio": float(self.train_ratio),
            "tp": self.true_positives,
            "fp": self.false_positives,
            "fn": self.false_negatives,
            "total": self.total,
            **self.metrics(),
        }

    def __repr__(self) -> str:
        return (
            f"EvaluationResult(layer={self.layer_name!r}, step={self.step}, train={self.training_set_size}, "
            f"test={self.test_set_size}, f1={self.compute_f1_score():.4f}, skipped={self.skipped})"
        )
