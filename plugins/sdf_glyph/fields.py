"""
Procedural Demo Fields

Analytic coverage fields for previews and tests. Each shape field is
0.5 exactly on the shape's edge, rises towards 1 inside and falls
towards 0 outside, reaching the extremes `spread` away from the edge
(in normalized units where the field spans [-1, 1]).

display_pattern() is the odd one out: a small binary bitmap in the
spirit of a 64x32 monochrome display, meant for nearest filtering.
"""

import numpy as np


def _unit_grid(size):
    """Pixel-centre coordinates in [-1, 1] as broadcastable (X, Y)."""
    Y, X = np.ogrid[:size, :size]
    half = size / 2.0
    return (X + 0.5 - half) / half, (Y + 0.5 - half) / half


def _coverage(signed_dist, spread):
    """Map signed distance (negative inside) to [0, 1] with 0.5 on the edge."""
    field = 0.5 - signed_dist / (2.0 * spread)
    return np.clip(field, 0.0, 1.0).astype(np.float32)


def disc_field(size=256, radius=0.6, spread=0.25):
    """Filled disc centred in the field."""
    X, Y = _unit_grid(size)
    dist = np.sqrt(X ** 2 + Y ** 2)
    return _coverage(dist - radius, spread)


def ring_field(size=256, radius=0.55, thickness=0.2, spread=0.15):
    """Annulus of the given centre radius and half-thickness."""
    X, Y = _unit_grid(size)
    dist = np.sqrt(X ** 2 + Y ** 2)
    return _coverage(np.abs(dist - radius) - thickness, spread)


def rounded_box_field(size=256, half_extent=0.55, corner=0.2, spread=0.25):
    """Square with rounded corners, roughly glyph-shaped."""
    X, Y = _unit_grid(size)
    qx = np.abs(X) - half_extent + corner
    qy = np.abs(Y) - half_extent + corner
    outside = np.sqrt(np.maximum(qx, 0.0) ** 2 + np.maximum(qy, 0.0) ** 2)
    inside = np.minimum(np.maximum(qx, qy), 0.0)
    return _coverage(outside + inside - corner, spread)


def display_pattern(width=64, height=32):
    """Binary test card: a one-pixel border, a checkerboard of 4x4 blocks
    in the middle, and a solid paddle near the bottom."""
    pattern = np.zeros((height, width), dtype=np.float32)
    pattern[0, :] = 1.0
    pattern[-1, :] = 1.0
    pattern[:, 0] = 1.0
    pattern[:, -1] = 1.0

    Y, X = np.ogrid[:height, :width]
    checker = ((X // 4) + (Y // 4)) % 2 == 0
    band = (Y >= height // 4) & (Y < height // 2) & (X >= width // 4) & (X < 3 * width // 4)
    pattern[checker & band] = 1.0

    paddle_y = height - 4
    pattern[paddle_y, width // 2 - 4:width // 2 + 4] = 1.0
    return pattern


# Registry of shape fields (size -> field)
FIELDS = {
    "disc": disc_field,
    "ring": ring_field,
    "box": rounded_box_field,
    "display": lambda size=None: display_pattern(),
}

FIELD_ORDER = list(FIELDS.keys())


def make_field(name, size=256):
    """Build a demo field by name. The display pattern has a fixed size."""
    builder = FIELDS.get(name)
    if builder is None:
        raise ValueError(f"Unknown field: {name!r}. Choose from {FIELD_ORDER}")
    return builder(size)
