"""Card aspect ratio tags.

Every size, clamp and limit table in the package is keyed by one of
these three shapes.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class AspectRatio(str, Enum):
    """Fixed card shape selected by the user."""

    SQUARE = "1:1"
    PORTRAIT = "5:6"
    STORY = "9:16"

    @classmethod
    def parse(cls, value: Union["AspectRatio", str]) -> "AspectRatio":
        """
        Coerce an enum member or its string tag into an AspectRatio.

        Raises:
            ValueError: If the tag is not one of "1:1", "5:6", "9:16".
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown aspect ratio: {value!r}") from None

    @property
    def css_value(self) -> str:
        """CSS aspect-ratio value, e.g. '9 / 16'."""
        width, height = self.value.split(":")
        return f"{width} / {height}"

    def __str__(self) -> str:
        return self.value


AspectRatioLike = Union[AspectRatio, str]
