"""
Field Sampling

FieldSampler stands in for the texture unit: given normalized (u, v)
coordinates it returns the field value there, in [0, 1]. Addressing
follows the usual texel-centre convention (texel i covers
[i/N, (i+1)/N) and its centre is at (i + 0.5)/N).

Filters:
  - linear:  bilinear between the four nearest texel centres
  - nearest: the texel containing the coordinate

Wrap modes:
  - clamp:  clamp-to-edge
  - repeat: tile the field
"""

import numpy as np
from scipy.ndimage import map_coordinates


FILTERS = ("linear", "nearest")
WRAPS = ("clamp", "repeat")

# scipy boundary mode for each wrap mode (linear filter)
_SCIPY_MODES = {"clamp": "nearest", "repeat": "grid-wrap"}


class FieldSampler:
    """Read-only scalar texture with normalized-coordinate lookup."""

    def __init__(self, field, filter="linear", wrap="clamp"):
        """
        Args:
            field: 2D array (H, W) of field values. Stored clamped to [0, 1].
            filter: "linear" or "nearest"
            wrap: "clamp" or "repeat"
        """
        field = np.asarray(field, dtype=np.float32)
        if field.ndim != 2 or field.size == 0:
            raise ValueError(f"field must be a non-empty 2D array, got shape {field.shape}")
        if filter not in FILTERS:
            raise ValueError(f"Unknown filter: {filter!r}. Choose from {FILTERS}")
        if wrap not in WRAPS:
            raise ValueError(f"Unknown wrap mode: {wrap!r}. Choose from {WRAPS}")

        self.field = np.clip(field, 0.0, 1.0)
        self.field.setflags(write=False)
        self.filter = filter
        self.wrap = wrap

    @classmethod
    def from_uint8(cls, pixels, channel=0, **kwargs):
        """Build a sampler from 8-bit texture data.

        Args:
            pixels: (H, W) single-channel or (H, W, C) multi-channel uint8 data
            channel: Channel to read when pixels has a channel axis
            **kwargs: Passed through to FieldSampler (filter, wrap)
        """
        pixels = np.asarray(pixels)
        if pixels.ndim == 3:
            pixels = pixels[:, :, channel]
        return cls(pixels.astype(np.float32) / 255.0, **kwargs)

    @property
    def width(self):
        return self.field.shape[1]

    @property
    def height(self):
        return self.field.shape[0]

    def sample(self, u, v):
        """Sample the field at normalized coordinates.

        Args:
            u: Horizontal coordinate(s), 0 = left edge, 1 = right edge
            v: Vertical coordinate(s), 0 = first row, 1 = past the last row

        Returns:
            float for scalar input, otherwise float32 array shaped like
            the broadcast of u and v
        """
        scalar = np.ndim(u) == 0 and np.ndim(v) == 0
        u, v = np.broadcast_arrays(np.asarray(u, dtype=np.float64),
                                   np.asarray(v, dtype=np.float64))

        if self.filter == "nearest":
            values = self._sample_nearest(u, v)
        else:
            values = self._sample_linear(u, v)

        if scalar:
            return float(values)
        return values

    def _sample_nearest(self, u, v):
        cols = np.floor(u * self.width).astype(np.intp)
        rows = np.floor(v * self.height).astype(np.intp)
        if self.wrap == "repeat":
            cols = cols % self.width
            rows = rows % self.height
        else:
            cols = np.clip(cols, 0, self.width - 1)
            rows = np.clip(rows, 0, self.height - 1)
        return self.field[rows, cols]

    def _sample_linear(self, u, v):
        # Texel centres sit at integer coordinates for map_coordinates
        x = u * self.width - 0.5
        y = v * self.height - 0.5
        out = map_coordinates(
            self.field, [y.ravel(), x.ravel()],
            order=1, mode=_SCIPY_MODES[self.wrap],
            output=np.float32,
        )
        return out.reshape(u.shape)
