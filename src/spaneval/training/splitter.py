# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Positional train/test splitters.

Splitters see only a sample count. Positions are assigned in order, the
training share first, so the same count and parameters always give the same
split.
"""
from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum

from ..errors import ConfigurationError, IllegalStateError
from ..schemas import Split

logger = logging.getLogger(__name__)


def _check_ratio(train_ratio: float) -> float:
    ratio = float(train_ratio)
    if not 0.0 < ratio <= 1.0:
        raise ConfigurationError(f"train_ratio must be in (0, 1], got {train_ratio}")
    return ratio


def _check_positive(name: str, value: int) -> int:
    if int(value) != value or value <= 0:
        raise ConfigurationError(f"{name} must be a positive integer, got {value}")
    return int(value)


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError(f"sample count must be >= 0, got {size}")
    return int(size)


class DataSplitter(ABC):
    @abstractmethod
    def split(self, size: int) -> Split:
        """Partition positions ``0..size-1`` into training and test sets."""


class PercentageBasedSplitter(DataSplitter):
    """First ``floor(size * train_ratio)`` positions (capped) train, the rest test."""

    def __init__(self, train_ratio: float, max_train_samples: int) -> None:
        self.train_ratio = _check_ratio(train_ratio)
        self.max_train_samples = _check_positive("max_train_samples", max_train_samples)

    def train_count(self, size: int) -> int:
        size = _check_size(size)
        if size == 0:
            return 0
        count = min(math.floor(size * self.train_ratio), self.max_train_samples)
        return max(count, 1)

    def split(self, size: int) -> Split:
        count = self.train_count(size)
        return Split(training=frozenset(range(count)), test=frozenset(range(count, size)))

    def __repr__(self) -> str:
        return f"PercentageBasedSplitter(train_ratio={self.train_ratio}, max_train_samples={self.max_train_samples})"


class SplitterState(str, Enum):
    INITIALIZED = "initialized"
    STEPPING = "stepping"
    EXHAUSTED = "exhausted"


class IncrementalSplitter(DataSplitter):
    """Growing training window against a fixed held-out tail.

    The caller drives the steps::

        while splitter.has_next():
            splitter.next()
            result = evaluate(corpus, splitter)

    At step ``i`` the window covers the first
    ``min(batch_size * i, max_train_samples, floor(train_ratio * size))``
    positions. The test set is always ``[floor(train_ratio * size), size)``.
    A fresh instance is needed to start over.
    """

    def __init__(self, train_ratio: float, batch_size: int, max_train_samples: int) -> None:
        self.train_ratio = _check_ratio(train_ratio)
        self.batch_size = _check_positive("batch_size", batch_size)
        self.max_train_samples = _check_positive("max_train_samples", max_train_samples)
        self._step = 0
        self._last_size: int | None = None

    @property
    def step(self) -> int:
        return self._step

    @property
    def state(self) -> SplitterState:
        if self._step == 0:
            return SplitterState.INITIALIZED
        if self.has_next():
            return SplitterState.STEPPING
        return SplitterState.EXHAUSTED

    def held_out_start(self, size: int) -> int:
        return math.floor(_check_size(size) * self.train_ratio)

    def window_cap(self, size: int) -> int:
        return min(self.max_train_samples, self.held_out_start(size))

    def window_size(self, size: int) -> int:
        return min(self.batch_size * self._step, self.window_cap(size))

    def has_next(self) -> bool:
        if self._step == 0:
            return True
        current = self.batch_size * self._step
        if current >= self.max_train_samples:
            return False
        if self._last_size is not None and current >= self.held_out_start(self._last_size):
            return False
        return True

    def next(self) -> None:
        if not self.has_next():
            raise IllegalStateError(f"incremental splitter exhausted after {self._step} steps")
        self._step += 1
        logger.debug("Incremental splitter advanced to step %d", self._step)

    def split(self, size: int) -> Split:
        if self._step == 0:
            raise IllegalStateError("call next() before querying the incremental split")
        size = _check_size(size)
        self._last_size = size
        start = self.held_out_start(size)
        window = self.window_size(size)
        return Split(training=frozenset(range(window)), test=frozenset(range(start, size)))

    def __repr__(self) -> str:
        return (
            f"IncrementalSplitter(train_ratio={self.train_ratio}, batch_size={self.batch_size}, "
            f"max_train_samples={self.max_train_samples}, step={self._step})"
        )
