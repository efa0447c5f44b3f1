# renderer/canvas.py
from pathlib import Path
from typing import List, Union

import numpy as np
from PIL import Image

from core.color import Color

MAX_COLOR = 255
PPM_LINE_LENGTH = 70


class Canvas:
    """
    A width x height grid of colors backed by a float array of shape
    (height, width, 3). Pixel (x, y) is column x of row y.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def pixel_at(self, x: int, y: int) -> Color:
        r, g, b = self.pixels[y, x]
        return Color(r, g, b)

    def write_pixel(self, x: int, y: int, color: Color):
        # Writes outside the canvas are dropped.
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = (color.red, color.green, color.blue)

    def write_rows(self, row_start: int, rows: np.ndarray):
        """Copy a block of full rows, as produced by a render worker."""
        self.pixels[row_start:row_start + rows.shape[0]] = rows

    def to_bytes(self) -> np.ndarray:
        """The image as 8-bit RGB values: scaled, clamped, then truncated."""
        return np.floor(np.clip(self.pixels * MAX_COLOR, 0, MAX_COLOR)).astype(np.uint8)

    def to_ppm(self) -> str:
        """
        Plain PPM (P3) text with no line longer than 70 characters.
        """
        values = self.to_bytes()
        lines = ["P3", f"{self.width} {self.height}", str(MAX_COLOR)]
        for row in values:
            lines.extend(_wrap([str(v) for v in row.ravel()]))
        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_bytes())

    def save(self, path: Union[str, Path]) -> Path:
        """
        Save as PPM text when the suffix is .ppm, otherwise let Pillow pick
        the format from the suffix.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() == ".ppm":
            path.write_text(self.to_ppm(), encoding="ascii")
        else:
            self.to_image().save(path)
        return path


def _wrap(tokens: List[str]) -> List[str]:
    lines = []
    current = ""
    for token in tokens:
        if current and len(current) + 1 + len(token) > PPM_LINE_LENGTH:
            lines.append(current)
            current = token
        else:
            current = f"{current} {token}" if current else token
    if current:
        lines.append(current)
    return lines
