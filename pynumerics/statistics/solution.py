"""
Goodness-of-fit solution types.

NormalityTestSolution wraps Result[NormalityParams] and provides a short
printable report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pynumerics.core.result import Result
from pynumerics.statistics._common import NormalityParams

if TYPE_CHECKING:
    from pynumerics.statistics.design import SampleDesign


@dataclass
class NormalityTestSolution:
    """User-facing goodness-of-fit results."""
    _result: Result[NormalityParams]
    _design: 'SampleDesign'

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def p_value(self) -> float | None:
        return self._result.params.p_value

    @property
    def critical_value(self) -> float | None:
        return self._result.params.critical_value

    @property
    def significance(self) -> float | None:
        return self._result.params.significance

    @property
    def reject(self) -> bool | None:
        """True if the fit is rejected at `significance` (table-based tests only)."""
        return self._result.params.reject

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def distribution(self) -> str:
        return self._result.params.distribution

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def estimates(self) -> dict[str, float] | None:
        return self._result.params.estimates

    @property
    def extras(self) -> dict[str, Any] | None:
        return self._result.params.extras

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Multi-line report in the style of R's print.htest."""
        p = self._result.params
        lines = [
            "",
            f"\t{p.method}",
            "",
            f"data:  {self._design.name}",
        ]
        parts = [f"{p.statistic_name} = {p.statistic:.5g}"]
        if p.p_value is not None:
            parts.append(
                "p-value < 2.2e-16" if p.p_value < 2.2e-16
                else f"p-value = {p.p_value:.4g}"
            )
        lines.append(", ".join(parts))
        if p.critical_value is not None:
            verdict = "rejected" if p.reject else "not rejected"
            lines.append(
                f"critical value at {p.significance:g}: {p.critical_value:.3f} "
                f"({p.distribution} fit {verdict})"
            )
        if p.estimates:
            est = ", ".join(f"{k} = {v:.5g}" for k, v in p.estimates.items())
            lines.append(f"estimates: {est}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.summary()
