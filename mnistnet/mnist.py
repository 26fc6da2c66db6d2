"""Reading of IDX-format MNIST files and text rendering of images."""

from __future__ import annotations

import math
import struct
import sys
from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO, Sequence

import numpy as np

IMAGE_SIZE_BYTES = 784
IMAGE_WIDTH = 28
IMAGE_HEIGHT = 28

_GRADIENT = (" ", "░", "▒", "▓", "█")

StrPath = str | PathLike


@dataclass
class MNISTData:
    """Pixels and labels of an MNIST data set."""

    pixels: bytes
    labels: bytes
    pixels_size: int
    images_number: int


def _read_ints(stream: BinaryIO, count: int, path: StrPath) -> tuple[int, ...]:
    raw = stream.read(4 * count)
    if len(raw) < 4 * count:
        raise EOFError(f"{path}: unexpected end of file in header")
    return struct.unpack(f">{count}i", raw)


def _read_payload(stream: BinaryIO, size: int, path: StrPath) -> bytes:
    if size < 0:
        raise ValueError(f"{path}: negative data size {size}")
    payload = stream.read(size)
    if size and not payload:
        raise EOFError(f"{path}: no data after header")
    # A short payload is padded with zero bytes up to the declared size.
    return payload.ljust(size, b"\0")


def read_images(path: StrPath) -> tuple[bytes, int, int, int]:
    """Read an IDX image file; return pixels, image count, rows and columns."""
    with open(path, "rb") as stream:
        _magic, num_images, rows, cols = _read_ints(stream, 4, path)
        data = _read_payload(stream, num_images * rows * cols, path)
    return data, num_images, rows, cols


def read_labels(path: StrPath) -> bytes:
    """Read an IDX label file and return its labels."""
    with open(path, "rb") as stream:
        _magic, size = _read_ints(stream, 2, path)
        return _read_payload(stream, size, path)


def read_data(images_path: StrPath, labels_path: StrPath) -> MNISTData:
    """Read an image file and its label file together."""
    pixels, num_images, rows, cols = read_images(images_path)
    labels = read_labels(labels_path)
    return MNISTData(
        pixels=pixels,
        labels=labels,
        pixels_size=num_images * rows * cols,
        images_number=num_images,
    )


def render_image(data: Sequence[float] | np.ndarray) -> str:
    """Render a 28x28 image as shaded block characters, one line per row."""
    values = np.asarray(data, dtype=np.float64).ravel()
    if values.size != IMAGE_WIDTH * IMAGE_HEIGHT:
        raise ValueError("Array length should be 784 bytes (28x28)")
    inverted = np.clip(255.0 - values, 0.0, 255.0)
    steps = len(_GRADIENT) - 1
    lines = []
    for row in inverted.reshape(IMAGE_HEIGHT, IMAGE_WIDTH):
        lines.append(
            "".join(_GRADIENT[math.floor(v / 255 * steps + 0.5)] for v in row) + "\n"
        )
    return "".join(lines)


def print_image(data: Sequence[float] | np.ndarray) -> None:
    """Print a 28x28 image to standard output."""
    sys.stdout.write(render_image(data))