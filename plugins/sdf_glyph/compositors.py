"""
Sample-to-Colour Compositors

Each compositor maps a field sample (coverage in [0, 1]) to an RGBA
colour. All of them implement the same interface so the renderer and
viewer can drive any material interchangeably:

  - ThresholdOutlineCompositor: soft grayscale fill from a smoothstep
    threshold, with an accent-coloured contour riding on the edge
  - FlatTintCompositor: flat (c, c, blue, alpha) tint, no threshold

Compositors hold configuration only. composite() is a pure function of
its input, so any number of threads may call it on disjoint pixels.
"""

from abc import ABC, abstractmethod
import numpy as np

from .profiles import smoothstep, cubic_pulse, mix


# Defaults matching the glyph material
DEFAULT_FILL_LO = 0.4
DEFAULT_FILL_HI = 0.6
DEFAULT_OUTLINE_CENTER = 0.5
DEFAULT_OUTLINE_WIDTH = 0.1
DEFAULT_ACCENT = (1.0, 0.0, 0.0, 1.0)  # opaque red

# Defaults matching the display material
DEFAULT_TINT_BLUE = 0.5
DEFAULT_TINT_ALPHA = 1.0


def _as_rgba(color, name):
    """Validate an RGB/RGBA tuple and return it as float32 RGBA."""
    rgba = [float(v) for v in color]
    if len(rgba) == 3:
        rgba.append(1.0)
    if len(rgba) != 4:
        raise ValueError(f"{name} must have 3 or 4 components, got {len(rgba)}")
    for v in rgba:
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"{name} components must be in [0, 1], got {tuple(rgba)}")
    return np.array(rgba, dtype=np.float32)


def _check_unit(value, name):
    value = float(value)
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")
    return value


class Compositor(ABC):
    """Base class for sample -> RGBA compositors."""

    compositor_name = ""   # e.g. "threshold_outline"
    compositor_label = ""  # e.g. "Threshold + Outline"

    @abstractmethod
    def composite(self, samples):
        """Map samples of any shape (...) to colours of shape (..., 4) float32."""

    def composite_pixel(self, sample):
        """Single-sample convenience. Returns an (r, g, b, a) tuple of floats."""
        rgba = self.composite(np.float32(sample))
        return tuple(float(c) for c in rgba)

    @abstractmethod
    def set_params(self, **params):
        """Update parameters. Raises ValueError if the result is invalid."""

    @abstractmethod
    def get_params(self):
        """Return dict of current parameter values."""


class ThresholdOutlineCompositor(Compositor):
    """Soft-edged silhouette with a highlighted contour band.

    fill    = smoothstep(fill_lo, fill_hi, d)              -> (c, c, c, 1)
    outline = cubic_pulse(outline_center, outline_width, d)
    colour  = mix(fill, accent, outline)

    With the defaults the pulse (0.5 +/- 0.1) sits exactly on the fill's
    transition band (0.4 .. 0.6), so the contour only shows up on the
    soft edge and never deep inside or outside the shape.
    """

    compositor_name = "threshold_outline"
    compositor_label = "Threshold + Outline"

    def __init__(self, fill_lo=DEFAULT_FILL_LO, fill_hi=DEFAULT_FILL_HI,
                 outline_center=DEFAULT_OUTLINE_CENTER,
                 outline_width=DEFAULT_OUTLINE_WIDTH, accent=DEFAULT_ACCENT):
        """
        Args:
            fill_lo: Sample value where the fill starts to rise
            fill_hi: Sample value where the fill reaches full white
            outline_center: Isovalue the contour is drawn on
            outline_width: Half-width of the contour band (> 0)
            accent: RGB or RGBA contour colour, components in [0, 1]
        """
        self.fill_lo = DEFAULT_FILL_LO
        self.fill_hi = DEFAULT_FILL_HI
        self.outline_center = DEFAULT_OUTLINE_CENTER
        self.outline_width = DEFAULT_OUTLINE_WIDTH
        self.accent = np.array(DEFAULT_ACCENT, dtype=np.float32)
        self.set_params(fill_lo=fill_lo, fill_hi=fill_hi,
                        outline_center=outline_center,
                        outline_width=outline_width, accent=accent)

    def set_params(self, **params):
        fill_lo = float(params.get("fill_lo", self.fill_lo))
        fill_hi = float(params.get("fill_hi", self.fill_hi))
        center = float(params.get("outline_center", self.outline_center))
        width = float(params.get("outline_width", self.outline_width))
        accent = self.accent
        if "accent" in params:
            accent = _as_rgba(params["accent"], "accent")

        if not fill_lo < fill_hi:
            raise ValueError(f"fill_lo must be below fill_hi, got {fill_lo} >= {fill_hi}")
        if not width > 0:
            raise ValueError(f"outline_width must be > 0, got {width}")

        self.fill_lo = fill_lo
        self.fill_hi = fill_hi
        self.outline_center = center
        self.outline_width = width
        self.accent = accent

    def get_params(self):
        return {
            "fill_lo": self.fill_lo,
            "fill_hi": self.fill_hi,
            "outline_center": self.outline_center,
            "outline_width": self.outline_width,
            "accent": tuple(float(c) for c in self.accent),
        }

    @property
    def outline_within_edge(self):
        """True when the contour band lies inside the fill's transition band."""
        return (self.outline_center - self.outline_width >= self.fill_lo and
                self.outline_center + self.outline_width <= self.fill_hi)

    def fill_mask(self, samples):
        """Grayscale fill level for each sample."""
        return smoothstep(self.fill_lo, self.fill_hi, samples)

    def outline_weight(self, samples):
        """Contour weight for each sample."""
        return cubic_pulse(self.outline_center, self.outline_width, samples)

    def composite(self, samples):
        d = np.asarray(samples, dtype=np.float32)
        flat = d.reshape(-1)

        c = self.fill_mask(flat)
        fill = np.empty((flat.size, 4), dtype=np.float32)
        fill[:, :3] = c[:, np.newaxis]
        fill[:, 3] = 1.0

        rgba = mix(fill, self.accent, self.outline_weight(flat))
        np.clip(rgba, 0.0, 1.0, out=rgba)
        return rgba.reshape(d.shape + (4,))


class FlatTintCompositor(Compositor):
    """Flat two-channel tint: colour = (c, c, blue, alpha)."""

    compositor_name = "flat_tint"
    compositor_label = "Flat Tint"

    def __init__(self, blue=DEFAULT_TINT_BLUE, alpha=DEFAULT_TINT_ALPHA):
        self.blue = DEFAULT_TINT_BLUE
        self.alpha = DEFAULT_TINT_ALPHA
        self.set_params(blue=blue, alpha=alpha)

    def set_params(self, **params):
        blue = _check_unit(params.get("blue", self.blue), "blue")
        alpha = _check_unit(params.get("alpha", self.alpha), "alpha")
        self.blue = blue
        self.alpha = alpha

    def get_params(self):
        return {"blue": self.blue, "alpha": self.alpha}

    def composite(self, samples):
        d = np.asarray(samples, dtype=np.float32)
        rgba = np.empty(d.shape + (4,), dtype=np.float32)
        rgba[..., 0] = d
        rgba[..., 1] = d
        rgba[..., 2] = self.blue
        rgba[..., 3] = self.alpha
        return rgba


# Compositor class registry
COMPOSITOR_CLASSES = {
    "threshold_outline": ThresholdOutlineCompositor,
    "flat_tint": FlatTintCompositor,
}


def create_compositor(name, **params):
    """Instantiate a compositor by registry name."""
    cls = COMPOSITOR_CLASSES.get(name)
    if cls is None:
        raise ValueError(f"Unknown compositor: {name!r}. "
                         f"Choose from {sorted(COMPOSITOR_CLASSES)}")
    return cls(**params)
