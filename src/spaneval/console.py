# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from .evaluation.result import EvaluationResult

LEVEL_STYLES = {"INFO": "bold cyan", "WARN": "bold yellow", "OK": "bold green"}
STEP_COLUMNS = ["step", "train", "test", "accuracy", "precision", "recall", "f1"]


@dataclass
class EvalConsole:
    """Prints evaluation results; plain text when ``enabled`` is off."""

    enabled: bool = True
    digits: int = 4

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None

    def status(self, level: str, text: str) -> None:
        if self._console:
            self._console.print(f"[{LEVEL_STYLES.get(level, 'bold')}]{level}[/] {text}")
        else:
            print(f"[{level}] {text}")

    def result_table(self, result: EvaluationResult) -> None:
        title = f"{result.layer_name or 'evaluation'} scores"
        if result.step is not None:
            title = f"{title} (step {result.step})"
        rows = [
            ("training samples", str(result.training_set_size)),
            ("test samples", str(result.test_set_size)),
            ("tp / fp / fn", f"{result.true_positives} / {result.false_positives} / {result.false_negatives}"),
        ]
        rows.extend((name, self._number(value)) for name, value in result.metrics().items())

        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Measure", style="bold")
            table.add_column("Value", justify="right")
            for name, value in rows:
                table.add_row(name, value)
            self._console.print(table)
            return

        print(title)
        for name, value in rows:
            print(f"- {name}: {value}")

    def steps_table(self, results: Sequence[EvaluationResult], *, title: str) -> None:
        rows = [
            [
                "-" if result.step is None else str(result.step),
                str(result.training_set_size),
                "skipped" if result.skipped else str(result.test_set_size),
                self._number(result.compute_accuracy_score()),
                self._number(result.compute_precision_score()),
                self._number(result.compute_recall_score()),
                self._number(result.compute_f1_score()),
            ]
            for result in results
        ]
        if self._console:
            table = Table(title=title)
            for column in STEP_COLUMNS:
                table.add_column(column, justify="right")
            for row in rows:
                table.add_row(*row)
            self._console.print(table)
            return

        print(title)
        print(" ".join(STEP_COLUMNS))
        for row in rows:
            print(" ".join(row))

    def _number(self, value: float) -> str:
        return f"{float(value):.{self.digits}f}"
