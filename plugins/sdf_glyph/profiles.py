"""
Scalar Shaping Profiles for Glyph Compositing

Pure functions that turn a field sample into a weight in [0, 1]:

1. smoothstep  - GLSL-style cubic ramp between two edges (soft fill mask)
2. cubic_pulse - smooth bump centred on an isovalue (outline band)
3. mix         - linear blend of two colours keyed on a weight

Every function accepts a plain Python number or a numpy array. Scalars
come back as float (evaluated in double precision), arrays come back as
float32 fields of the same shape, so the same code serves single-pixel
probes and whole-image passes.

Preconditions (edge0 < edge1, w > 0) are the caller's job; compositors
validate them once at configuration time, never per pixel.
"""

import numpy as np


def _as_field(x):
    """Return (array, is_scalar). Scalars stay float64, arrays go float32."""
    if np.ndim(x) == 0:
        return np.float64(x), True
    return np.asarray(x, dtype=np.float32), False


def smoothstep(edge0, edge1, x):
    """Hermite ramp: 0 below edge0, 1 above edge1, 3t^2 - 2t^3 between."""
    x, scalar = _as_field(x)
    t = np.clip((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    s = t * t * (3.0 - 2.0 * t)
    if scalar:
        return float(s)
    return s.astype(np.float32, copy=False)


def cubic_pulse(c, w, x):
    """Smooth bump: 1 at x == c, falling to exactly 0 at |x - c| >= w.

    Uses the smoothstep falloff shape, so both value and slope reach
    zero at the band edges (no visible crease where the band ends).

    Args:
        c: Pulse centre (the isovalue of interest)
        w: Half-width of the band, must be > 0
        x: Sample value(s)

    Returns:
        Weight in [0, 1], float for scalar input, float32 array otherwise
    """
    x, scalar = _as_field(x)
    # Clamping t at 1 makes everything outside the band land on exactly 0
    t = np.minimum(np.abs(x - c) / w, 1.0)
    p = 1.0 - t * t * (3.0 - 2.0 * t)
    if scalar:
        return float(p)
    return p.astype(np.float32, copy=False)


def mix(a, b, t):
    """Linear interpolation between colours a and b by weight t.

    The last axis of a and b is the colour axis; t carries one weight per
    pixel and is broadcast across it, so (H, W) weights blend (H, W, 4)
    colours, and a scalar weight blends two plain colour vectors.
    """
    a = np.asarray(a, dtype=np.float32)
    b = np.asarray(b, dtype=np.float32)
    t = np.asarray(t, dtype=np.float32)[..., np.newaxis]
    return a * (1.0 - t) + b * t
