# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from .predictor import MajorityPredictor, best_predictions, predict

__all__ = ["MajorityPredictor", "best_predictions", "predict"]
