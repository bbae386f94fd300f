# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Span recommender evaluation package."""

from .config import RecommenderConfig
from .evaluation import EvaluationResult, evaluate, evaluate_incremental
from .recommender import MajorityRecommender
from .schemas import Document, PredictionResult, Span, Split
from .training import IncrementalSplitter, MajorityModel, PercentageBasedSplitter

__all__ = [
    "Span",
    "Document",
    "Split",
    "PredictionResult",
    "RecommenderConfig",
    "PercentageBasedSplitter",
    "IncrementalSplitter",
    "MajorityModel",
    "MajorityRecommender",
    "EvaluationResult",
    "evaluate",
    "evaluate_incremental",
]
