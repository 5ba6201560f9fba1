"""
Pixel-Grid Renderer

Drives a compositor over a width x height pixel grid:

    pixel centre -> (u, v) -> sampler.sample -> compositor.composite -> RGBA

Every pixel is independent, so the grid can be split into row bands and
rendered on a thread pool (numpy and scipy release the GIL in the heavy
parts). The banded result is identical to the single pass.

Usage:
    sampler = FieldSampler(disc_field(256))
    rgba = render(sampler, ThresholdOutlineCompositor(), 512, 512, workers=4)
    Image.fromarray(to_uint8(rgba)).save("glyph.png")
"""

from concurrent.futures import ThreadPoolExecutor
import numpy as np


class UVRect:
    """Axis-aligned region of texture space, in normalized coordinates."""

    def __init__(self, u=0.0, v=0.0, width=1.0, height=1.0):
        self.u = float(u)
        self.v = float(v)
        self.width = float(width)
        self.height = float(height)

    @classmethod
    def for_glyph(cls, char_pos, char_size, texture_size):
        """Region covered by one glyph of an atlas.

        Args:
            char_pos: (x, y) top-left of the glyph in atlas pixels
            char_size: (w, h) glyph size in atlas pixels
            texture_size: (w, h) atlas size in pixels
        """
        tw, th = float(texture_size[0]), float(texture_size[1])
        return cls(char_pos[0] / tw, char_pos[1] / th,
                   char_size[0] / tw, char_size[1] / th)

    def __eq__(self, other):
        if not isinstance(other, UVRect):
            return NotImplemented
        return (self.u, self.v, self.width, self.height) == \
            (other.u, other.v, other.width, other.height)

    def __repr__(self):
        return f"UVRect(u={self.u}, v={self.v}, width={self.width}, height={self.height})"


def pixel_coords(width, height, rect=None, rows=None):
    """(U, V) texture coordinates of pixel centres, each shaped (H, W).

    Args:
        width, height: Output grid size in pixels
        rect: UVRect mapped onto the grid (default: whole texture)
        rows: Optional slice of rows to generate (for banded rendering)
    """
    if rect is None:
        rect = UVRect()
    xs = (np.arange(width, dtype=np.float64) + 0.5) / width
    ys = (np.arange(height, dtype=np.float64) + 0.5) / height
    if rows is not None:
        ys = ys[rows]
    U, V = np.meshgrid(rect.u + xs * rect.width, rect.v + ys * rect.height)
    return U, V


def shade_pixel(sampler, compositor, u, v):
    """Colour of a single point: one sample, one composite."""
    return compositor.composite_pixel(sampler.sample(u, v))


def _render_rows(sampler, compositor, width, height, rect, rows):
    U, V = pixel_coords(width, height, rect, rows)
    return compositor.composite(sampler.sample(U, V))


def render(sampler, compositor, width, height, rect=None, workers=1):
    """Render the compositor over a pixel grid.

    Args:
        sampler: FieldSampler providing the field
        compositor: Compositor turning samples into colours
        width, height: Output size in pixels
        rect: UVRect of texture space to cover (default: whole texture)
        workers: Thread count; rows are split into that many bands

    Returns:
        (height, width, 4) float32 RGBA in [0, 1]
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Output size must be positive, got {width}x{height}")

    workers = max(1, min(int(workers), height))
    if workers == 1:
        return _render_rows(sampler, compositor, width, height, rect, slice(None))

    out = np.empty((height, width, 4), dtype=np.float32)
    bounds = np.linspace(0, height, workers + 1).astype(int)
    bands = [slice(lo, hi) for lo, hi in zip(bounds[:-1], bounds[1:])]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            (band, pool.submit(_render_rows, sampler, compositor,
                               width, height, rect, band))
            for band in bands
        ]
        for band, future in futures:
            out[band] = future.result()
    return out


def to_uint8(rgba):
    """Float colours in [0, 1] -> uint8 [0, 255], rounding to nearest."""
    scaled = np.clip(rgba, 0.0, 1.0) * 255.0
    return np.rint(scaled).astype(np.uint8)
