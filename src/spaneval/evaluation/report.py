# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from ..console import EvalConsole
from .result import EvaluationResult

RESULT_COLUMNS = [
    "layer",
    "step",
    "skipped",
    "training_set_size",
    "test_set_size",
    "train_ratio",
    "tp",
    "fp",
    "fn",
    "total",
    "accuracy",
    "precision",
    "recall",
    "f1",
]


def results_frame(results: Sequence[EvaluationResult]) -> pd.DataFrame:
    return pd.DataFrame([result.as_dict() for result in results], columns=RESULT_COLUMNS)


def report_results(results: Sequence[EvaluationResult], console: EvalConsole | None = None) -> pd.DataFrame:
    console = console or EvalConsole()
    frame = results_frame(results)
    if not results:
        console.status("WARN", "No evaluation results to report")
        return frame
    if len(results) == 1:
        result = results[0]
        if result.skipped:
            console.status("WARN", f"Evaluation skipped: train={result.training_set_size} test={result.test_set_size}")
        console.result_table(result)
        return frame
    console.steps_table(results, title="Incremental evaluation")
    best = max(results, key=lambda result: result.compute_f1_score())
    console.status("OK", f"best f1={best.compute_f1_score():.4f} at step {best.step}")
    return frame
