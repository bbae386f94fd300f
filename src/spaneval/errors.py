# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Exceptions shared by the splitters, the trainer and the evaluator.

- ConfigurationError     : invalid splitter / recommender parameters
- IllegalStateError      : operation called in the wrong lifecycle state
- InvalidSpanError       : malformed span offsets or score
- EmptyTrainingDataError : no labels to train on (strict training only)
"""


class SpanEvalError(Exception):
    """Base class for every error raised by spaneval."""


class ConfigurationError(SpanEvalError, ValueError):
    """Invalid construction parameter."""


class IllegalStateError(SpanEvalError, RuntimeError):
    """Operation not allowed in the current state."""


class InvalidSpanError(SpanEvalError, ValueError):
    """Span offsets or score outside their valid range."""


class EmptyTrainingDataError(SpanEvalError):
    """Training data carries no label at all."""
