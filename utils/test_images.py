"""Synthetic test image generators for blur/deblur demos."""

import numpy as np


def _as_rgb(gray: np.ndarray, rgb: bool) -> np.ndarray:
    if not rgb:
        return gray
    return np.repeat(gray[:, :, None], 3, axis=2)


def generate_impulse(nx: int = 4, ny: int = 4, position=(0, 0), value: float = 1.0) -> np.ndarray:
    """Single bright pixel at (row, col) on a zero float plane - shows the kernel itself."""
    img = np.zeros((ny, nx), dtype=np.float64)
    img[position] = value
    return img


def generate_constant(nx: int = 64, ny: int = 64, value: float = 0.5) -> np.ndarray:
    """Flat float plane - any box blur must leave it unchanged."""
    return np.full((ny, nx), value, dtype=np.float64)


def generate_checkerboard(size: int = 256, block_size: int = 32, rgb: bool = False) -> np.ndarray:
    """High-contrast checkerboard - motion blur smears the edges along one axis."""
    img = np.zeros((size, size), dtype=np.uint8)

    for i in range(0, size, block_size):
        for j in range(0, size, block_size):
            if (i // block_size + j // block_size) % 2 == 0:
                img[i:i+block_size, j:j+block_size] = 30
            else:
                img[i:i+block_size, j:j+block_size] = 220

    return _as_rgb(img, rgb)


def generate_gradient(size: int = 256, rgb: bool = True) -> np.ndarray:
    """Smooth diagonal gradient."""
    t = np.add.outer(np.arange(size), np.arange(size)) / (2 * size - 2)
    if not rgb:
        return np.clip(40 + t * 180, 0, 255).astype(np.uint8)
    img = np.stack([40 + t * 180, 60 + t * 140, 120 + t * 100], axis=-1)
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_text_edges(size: int = 256, rgb: bool = False) -> np.ndarray:
    """Thin bars in both orientations - horizontal blur hits the vertical ones hardest."""
    img = np.ones((size, size), dtype=np.uint8) * 245

    margin = size // 10
    bar_height = size // 16

    # Horizontal bars of varying thickness
    y = margin
    for thickness in [bar_height, bar_height // 2, bar_height // 4, 2]:
        img[y:y + thickness, margin:size - margin] = 25
        y += thickness + margin // 2

    # Vertical bars
    x = margin
    for thickness in [bar_height, bar_height // 2, bar_height // 4, 2]:
        img[size // 2 + margin:size - margin, x:x + thickness] = 25
        x += thickness + margin // 2

    return _as_rgb(img, rgb)


def generate_demo_image(key: str) -> np.ndarray | None:
    """Generate demo image by key."""
    generators = {
        "checkerboard": lambda: generate_checkerboard(256, rgb=True),
        "text_edges": lambda: generate_text_edges(256),
        "gradient": lambda: generate_gradient(256),
    }

    if key in generators:
        return generators[key]()

    return None
