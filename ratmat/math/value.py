"""
Base class for the printable linear-algebra value types.

Provides:
- Human-readable and LaTeX output formats
- Conversion to native Python and NumPy containers
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


class LinearValue(ABC):
    """
    Base class for Vector and Matrix.

    Concrete subclasses inherit from both BaseModel and LinearValue,
    e.g. `class Vector(BaseModel, LinearValue):`. LinearValue itself does not
    inherit from BaseModel to avoid MRO conflicts.
    """

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to native Python containers, keeping exact scalars."""

    def to_numpy(self) -> np.ndarray:
        """
        Convert to a NumPy array.

        The array uses dtype=object so Fractions and big integers stay exact.
        Pass the result through ``.astype(float)`` for numeric work.
        """
        return np.array(self.to_python(), dtype=object)
