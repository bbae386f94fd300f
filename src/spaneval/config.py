# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass

from .env import get_bool_env, get_env, get_float_env, get_int_env
from .errors import ConfigurationError
from .training.splitter import DataSplitter, IncrementalSplitter, PercentageBasedSplitter

DEFAULT_LAYER_NAME = "NamedEntity"
DEFAULT_FEATURE_NAME = "value"
DEFAULT_MAX_RECOMMENDATIONS = 3


@dataclass(slots=True, frozen=True)
class RecommenderConfig:
    """Host recommender settings.

    Only ``max_recommendations`` changes what the predictor writes; the layer
    and feature names are carried along for reporting.
    """

    layer_name: str = DEFAULT_LAYER_NAME
    feature_name: str = DEFAULT_FEATURE_NAME
    max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS

    def __post_init__(self) -> None:
        if self.max_recommendations < 1:
            raise ConfigurationError(f"max_recommendations must be >= 1, got {self.max_recommendations}")

    @classmethod
    def from_env(cls) -> RecommenderConfig:
        return cls(
            layer_name=get_env("SPANEVAL_LAYER_NAME", DEFAULT_LAYER_NAME) or DEFAULT_LAYER_NAME,
            feature_name=get_env("SPANEVAL_FEATURE_NAME", DEFAULT_FEATURE_NAME) or DEFAULT_FEATURE_NAME,
            max_recommendations=get_int_env("SPANEVAL_MAX_RECOMMENDATIONS", DEFAULT_MAX_RECOMMENDATIONS),
        )


def splitter_from_env() -> DataSplitter:
    train_ratio = get_float_env("SPANEVAL_TRAIN_RATIO", 0.8)
    max_train_samples = get_int_env("SPANEVAL_MAX_TRAIN_SAMPLES", 5000)
    if get_bool_env("SPANEVAL_INCREMENTAL", False):
        batch_size = get_int_env("SPANEVAL_BATCH_SIZE", 10)
        return IncrementalSplitter(train_ratio, batch_size, max_train_samples)
    return PercentageBasedSplitter(train_ratio, max_train_samples)
