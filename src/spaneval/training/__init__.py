# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from .splitter import DataSplitter, IncrementalSplitter, PercentageBasedSplitter, SplitterState
from .trainer import MajorityModel, train, train_from_labels

__all__ = [
    "DataSplitter",
    "IncrementalSplitter",
    "PercentageBasedSplitter",
    "SplitterState",
    "MajorityModel",
    "train",
    "train_from_labels",
]
