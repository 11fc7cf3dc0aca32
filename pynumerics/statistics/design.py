"""
SampleDesign: data wrapper for univariate statistics.

Wraps a 1D sample and provides validation and metadata for the
descriptive and normality routines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_min_samples,
)


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for univariate statistics.

    Wraps a finite 1D sample of at least one observation. Immutable after
    construction.

    Construction:
        SampleDesign.from_array([1.0, 2.5, 3.0])
    """
    _x: NDArray[np.floating[Any]]
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = 'x') -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sample. A pandas Series (or anything with .values) is accepted.
        name : str
            Label used in error messages and test output.
        """
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            data = data.values
        x = check_array(data, name)
        check_1d(x, name)
        check_min_samples(x, 1, name)
        check_finite(x, name)
        x = x.copy()
        x.setflags(write=False)
        return cls(_x=x, _name=name)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Read-only sample values."""
        return self._x

    @property
    def n(self) -> int:
        return int(self._x.shape[0])

    @property
    def name(self) -> str:
        return self._name

    def require(self, min_samples: int, operation: str) -> None:
        """Raise ValidationError if the sample is too small for operation."""
        check_min_samples(self._x, min_samples, f"{self._name} ({operation})")

    def __repr__(self) -> str:
        return f"SampleDesign(name={self._name!r}, n={self.n})"
