# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from .evaluate import evaluate, evaluate_incremental
from .report import report_results, results_frame
from .result import EvaluationResult

__all__ = ["EvaluationResult", "evaluate", "evaluate_incremental", "report_results", "results_frame"]
