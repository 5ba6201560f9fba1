"""
Material Presets

Each material names a compositor and its parameters, plus the demo
field and filter mode it looks best with. New looks are parameter
variations here rather than new compositor code.
"""

from .compositors import create_compositor
from .fields import make_field
from .renderer import render
from .sampling import FieldSampler

MATERIALS = {
    "glyph_outline": {
        "compositor": "threshold_outline",
        "name": "Glyph Outline",
        "description": "Soft white glyph with a red contour on its edge",
        "field": "box", "filter": "linear",
        "fill_lo": 0.4, "fill_hi": 0.6,
        "outline_center": 0.5, "outline_width": 0.1,
        "accent": (1.0, 0.0, 0.0, 1.0),
    },
    "glyph_gold": {
        "compositor": "threshold_outline",
        "name": "Gold Rim",
        "description": "Same edge band, warm gold contour",
        "field": "disc", "filter": "linear",
        "fill_lo": 0.4, "fill_hi": 0.6,
        "outline_center": 0.5, "outline_width": 0.1,
        "accent": (1.0, 0.78, 0.2, 1.0),
    },
    "glyph_thin": {
        "compositor": "threshold_outline",
        "name": "Thin Edge",
        "description": "Tighter threshold with a hairline contour",
        "field": "ring", "filter": "linear",
        "fill_lo": 0.45, "fill_hi": 0.55,
        "outline_center": 0.5, "outline_width": 0.05,
        "accent": (0.2, 0.8, 1.0, 1.0),
    },
    "display_tint": {
        "compositor": "flat_tint",
        "name": "Display Tint",
        "description": "Monochrome display pixels as a flat yellow/blue tint",
        "field": "display", "filter": "nearest",
        "blue": 0.5, "alpha": 1.0,
    },
}

MATERIAL_ORDER = ["glyph_outline", "glyph_gold", "glyph_thin", "display_tint"]

# Keys describing the material itself rather than compositor parameters
_MATERIAL_KEYS = {"compositor", "name", "description", "field", "filter"}


def get_material(name):
    """Get a material by name. Returns None if not found."""
    return MATERIALS.get(name)


def get_compositor_params(name):
    """Compositor keyword arguments for a material."""
    material = MATERIALS[name]
    return {k: v for k, v in material.items() if k not in _MATERIAL_KEYS}


def build_compositor(name):
    """Instantiate the compositor configured by a material."""
    material = get_material(name)
    if material is None:
        raise ValueError(f"Unknown material: {name!r}. Choose from {MATERIAL_ORDER}")
    return create_compositor(material["compositor"], **get_compositor_params(name))


def list_materials():
    """Return list of (key, name, description) for all materials."""
    return [(k, MATERIALS[k]["name"], MATERIALS[k]["description"])
            for k in MATERIAL_ORDER if k in MATERIALS]


def render_material(name, size=512, field=None, compositor=None, workers=1):
    """Render a material over its demo field.

    Args:
        name: Material key
        size: Output size in pixels (square)
        field: Demo field name, overriding the material's own
        compositor: Pre-built compositor to use instead of the material's
        workers: Thread count for the renderer

    Returns:
        (size, size, 4) float32 RGBA
    """
    material = get_material(name)
    if material is None:
        raise ValueError(f"Unknown material: {name!r}. Choose from {MATERIAL_ORDER}")
    if compositor is None:
        compositor = build_compositor(name)
    sampler = FieldSampler(make_field(field or material["field"]),
                           filter=material["filter"])
    return render(sampler, compositor, size, size, workers=workers)
