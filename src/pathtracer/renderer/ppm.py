# renderer/ppm.py
from typing import TextIO
import numpy as np

def write_ppm(stream: TextIO, image: np.ndarray) -> None:
    """
    Write an 8-bit (height, width, 3) image as plain-text PPM (P3), rows from
    top to bottom, one "R G B" triple per line.
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (height, width, 3), got {image.shape}")
    height, width = image.shape[:2]
    stream.write(f"P3\n{width} {height}\n255\n")
    for row in image.tolist():
        stream.write("".join(f"{r} {g} {b}\n" for r, g, b in row))
