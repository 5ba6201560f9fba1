"""
SDF Glyph Compositor - Entry Point

Usage:
    python -m sdf_glyph [material] [--size N] [--field NAME] [--workers N]
                        [--out PATH] [--view]

Examples:
    python -m sdf_glyph
    python -m sdf_glyph glyph_gold --size 1024
    python -m sdf_glyph glyph_outline --field ring --out ring.png
    python -m sdf_glyph display_tint --view

Fields:
    disc     - filled disc
    ring     - annulus
    box      - rounded square (default for glyph_outline)
    display  - 64x32 monochrome test card

Use --list to see all materials.
"""

import os
import sys
import time

from .fields import FIELD_ORDER
from .materials import get_material, list_materials, render_material
from .renderer import to_uint8


def snap(material, size, field=None, workers=1, out=None):
    """Headless mode: render one material and save it as a PNG."""
    from PIL import Image

    if out is None:
        screenshots_dir = os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
            "screenshots"
        )
        os.makedirs(screenshots_dir, exist_ok=True)
        out = os.path.join(screenshots_dir, f"glyph_{material}.png")

    start = time.perf_counter()
    rgba = render_material(material, size=size, field=field, workers=workers)
    elapsed = time.perf_counter() - start

    Image.fromarray(to_uint8(rgba)).save(out)
    print(f"[sdf_glyph] {material}: {size}x{size} in {elapsed * 1000:.1f} ms, saved: {out}")
    return out


def main(argv=None):
    material = "glyph_outline"
    size = 512
    field = None
    workers = os.cpu_count() or 1
    out = None
    view = False

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--size" and i + 1 < len(args):
            size = int(args[i + 1])
            i += 2
        elif arg == "--field" and i + 1 < len(args):
            field = args[i + 1]
            if field not in FIELD_ORDER:
                print(f"Unknown field: {field}")
                print(f"Choose from: {', '.join(FIELD_ORDER)}")
                return 2
            i += 2
        elif arg == "--workers" and i + 1 < len(args):
            workers = max(1, int(args[i + 1]))
            i += 2
        elif arg == "--out" and i + 1 < len(args):
            out = args[i + 1]
            i += 2
        elif arg == "--view":
            view = True
            i += 1
        elif arg == "--list":
            print("\nAvailable materials:\n")
            for key, name, desc in list_materials():
                print(f"    {key:16s} {name:16s} {desc}")
            print()
            return 0
        elif arg in ("--help", "-h"):
            print(__doc__)
            return 0
        elif get_material(arg) is not None:
            material = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print("Use --list to see available materials")
            return 2

    if view:
        from .viewer import Viewer

        print("Starting SDF Glyph Viewer")
        print(f"  Material: {material}")
        print(f"  Size: {size}x{size}")
        print()
        viewer = Viewer(size=size, start_material=material, field=field)
        viewer.run()
        return 0

    snap(material, size, field=field, workers=workers, out=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
