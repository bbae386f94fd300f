# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from ..config import RecommenderConfig
from ..corpus import clean_label, samples_frame
from ..errors import IllegalStateError
from ..inference.predictor import MajorityPredictor, best_predictions
from ..schemas import Document, Span
from ..training.splitter import DataSplitter, IncrementalSplitter
from ..training.trainer import train_from_labels
from .result import EvaluationResult

logger = logging.getLogger(__name__)


def _working_copy(document: Document, rows: pd.DataFrame) -> Document:
    # Only the test spans, labels hidden.
    spans = [Span(int(row.start), int(row.end)) for row in rows.itertuples(index=False)]
    return Document(spans=spans, text=document.text, name=document.name)


def evaluate(
    corpus: Sequence[Document],
    splitter: DataSplitter,
    *,
    config: RecommenderConfig | None = None,
) -> EvaluationResult:
    config = config or RecommenderConfig()
    frame = samples_frame(corpus)
    split = splitter.split(len(frame))

    train_df = frame[frame["position"].isin(split.training)]
    test_df = frame[frame["position"].isin(split.test)]
    non_test = len(frame) - len(test_df)
    result = EvaluationResult(
        layer_name=config.layer_name,
        training_set_size=len(train_df),
        test_set_size=len(test_df),
        train_ratio=(len(train_df) / non_test) if non_test > 0 else 0.0,
        step=splitter.step if isinstance(splitter, IncrementalSplitter) else None,
    )

    if test_df.empty:
        logger.info("Not enough data to evaluate (train=%d, test=0), skipping", len(train_df))
        result.skipped = True
        result.seal()
        return result

    model = train_from_labels(clean_label(value) for value in train_df["label"])
    predictor = MajorityPredictor(model=model, config=config)

    for doc_index, rows in test_df.groupby("document", sort=True):
        predicted = predictor.predict(_working_copy(corpus[int(doc_index)], rows))
        by_offsets = best_predictions(predicted.predictions())
        for row in rows.itertuples(index=False):
            result.add(clean_label(row.label), by_offsets.get((int(row.start), int(row.end))))

    result.seal()
    logger.info(
        "Evaluated %s: train=%d test=%d accuracy=%.4f precision=%.4f recall=%.4f f1=%.4f",
        config.layer_name,
        result.training_set_size,
        result.test_set_size,
        result.compute_accuracy_score(),
        result.compute_precision_score(),
        result.compute_recall_score(),
        result.compute_f1_score(),
    )
    return result


def evaluate_incremental(
    corpus: Sequence[Document],
    splitter: IncrementalSplitter,
    *,
    config: RecommenderConfig | None = None,
    max_steps: int | None = None,
) -> list[EvaluationResult]:
    """Advance ``splitter`` and evaluate once per step until it stops growing or ``max_steps`` is hit."""
    if splitter.step != 0:
        raise IllegalStateError("incremental evaluation needs a fresh splitter")
    results: list[EvaluationResult] = []
    while splitter.has_next() and (max_steps is None or len(results) < max_steps):
        splitter.next()
        results.append(evaluate(corpus, splitter, config=config))
    return results
