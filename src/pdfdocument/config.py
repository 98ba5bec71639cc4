"""
Document Options - Page setup and output defaults.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator


class Orientation(str, Enum):
    PORTRAIT = "P"
    LANDSCAPE = "L"


class PageSize(str, Enum):
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    LEGAL = "Legal"
    LETTER = "Letter"


class Unit(str, Enum):
    POINTS = "pt"
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    INCHES = "in"


MIME_TYPE = "application/pdf"


class DocumentOptions(BaseModel):
    """Options shared by every snapshot of a document."""

    model_config = ConfigDict(frozen=True)

    orientation: Orientation = Orientation.PORTRAIT
    size: Union[PageSize, Tuple[float, float]] = PageSize.A4
    unit: Unit = Unit.MILLIMETERS
    fonts_dir: Optional[Path] = None
    directory_mode: int = 0o755
    mime_type: str = MIME_TYPE

    @field_validator("size")
    @classmethod
    def check_size(cls, value):
        if isinstance(value, tuple) and min(value) <= 0:
            raise ValueError("page dimensions must be positive")
        return value

    def page_size_css(
        self,
        size: Optional[Union[PageSize, Tuple[float, float]]] = None,
        orientation: Optional[Orientation] = None,
    ) -> str:
        """Build the CSS ``size`` value for an @page rule."""
        size = size if size is not None else self.size
        orientation = orientation or self.orientation

        if isinstance(size, tuple):
            width, height = size
            if orientation == Orientation.LANDSCAPE:
                width, height = max(width, height), min(width, height)
            unit = self.unit.value
            return f"{width:g}{unit} {height:g}{unit}"

        keyword = "landscape" if orientation == Orientation.LANDSCAPE else "portrait"
        return f"{PageSize(size).value} {keyword}"
