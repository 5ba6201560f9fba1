"""
Interactive Pygame Viewer for Glyph Materials

Renders a material over a demo field and shows it in a window.
Re-renders only when something changes (material, field, parameters).

Controls:
  1-9         Select material
  TAB         Cycle demo field
  UP / DOWN   Widen / narrow the outline band (outline materials)
  S           Save screenshot
  H           Toggle HUD overlay
  Q / ESC     Quit
"""

import os
import time
import numpy as np
import pygame

from .fields import FIELD_ORDER
from .materials import MATERIAL_ORDER, get_material, build_compositor, render_material
from .renderer import to_uint8

OUTLINE_STEP = 0.01
OUTLINE_MIN = 0.01
OUTLINE_MAX = 0.5


class Viewer:

    def __init__(self, size=512, start_material="glyph_outline", field=None):
        self.size = size
        self.running = True
        self.show_hud = True
        self.workers = os.cpu_count() or 1
        self.render_ms = 0.0

        self.material_key = start_material
        self.compositor = build_compositor(start_material)
        self.field_name = field or get_material(start_material)["field"]

        self._surface = None  # Cached render, cleared when state changes

    def _apply_material(self, key):
        self.material_key = key
        self.compositor = build_compositor(key)
        self.field_name = get_material(key)["field"]
        self._surface = None

    def _cycle_field(self):
        idx = FIELD_ORDER.index(self.field_name) if self.field_name in FIELD_ORDER else -1
        self.field_name = FIELD_ORDER[(idx + 1) % len(FIELD_ORDER)]
        self._surface = None

    def _nudge_outline(self, delta):
        params = self.compositor.get_params()
        if "outline_width" not in params:
            return
        width = float(np.clip(params["outline_width"] + delta, OUTLINE_MIN, OUTLINE_MAX))
        self.compositor.set_params(outline_width=width)
        self._surface = None

    def _render_frame(self):
        if self._surface is None:
            start = time.perf_counter()
            rgba = render_material(self.material_key, size=self.size,
                                   field=self.field_name,
                                   compositor=self.compositor,
                                   workers=self.workers)
            self.render_ms = (time.perf_counter() - start) * 1000.0
            rgb = to_uint8(rgba[:, :, :3])
            self._surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1).copy())
        return self._surface

    def _draw_hud(self, screen):
        if not self.show_hud:
            return

        material = get_material(self.material_key)
        params = self.compositor.get_params()
        line = f"{material['name']}  |  field: {self.field_name}"
        if "outline_width" in params:
            line += f"  |  outline: {params['outline_center']:.2f} +/- {params['outline_width']:.2f}"
            if not self.compositor.outline_within_edge:
                line += " (outside edge band)"
        line += f"  |  {self.render_ms:.1f} ms"

        bg_surface = pygame.Surface((screen.get_width(), 24), pygame.SRCALPHA)
        bg_surface.fill((0, 0, 0, 140))
        screen.blit(bg_surface, (0, 0))

        text_surface = self.hud_font.render(line, True, (210, 215, 225))
        screen.blit(text_surface, (10, 6))

    def _save_screenshot(self):
        screenshots_dir = os.path.join(
            os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
            "screenshots"
        )
        os.makedirs(screenshots_dir, exist_ok=True)
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        path = os.path.join(screenshots_dir, f"glyph_{self.material_key}_{timestamp}.png")
        pygame.image.save(self._render_frame(), path)
        print(f"[sdf_glyph] Screenshot saved: {path}")

    def run(self):
        """Main viewer loop."""
        pygame.init()

        screen = pygame.display.set_mode((self.size, self.size))
        pygame.display.set_caption("SDF Glyph")
        clock = pygame.time.Clock()
        self.hud_font = pygame.font.SysFont("menlo", 13)

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event)

            screen.fill((0, 0, 0))
            screen.blit(self._render_frame(), (0, 0))
            self._draw_hud(screen)

            pygame.display.flip()
            clock.tick(30)

        pygame.quit()

    def _handle_keydown(self, event):
        key = event.key

        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False

        elif key == pygame.K_TAB:
            self._cycle_field()

        elif key == pygame.K_UP:
            self._nudge_outline(OUTLINE_STEP)

        elif key == pygame.K_DOWN:
            self._nudge_outline(-OUTLINE_STEP)

        elif key == pygame.K_h:
            self.show_hud = not self.show_hud

        elif key == pygame.K_s:
            self._save_screenshot()

        # Material selection (1-9)
        elif pygame.K_1 <= key <= pygame.K_9:
            idx = key - pygame.K_1
            if idx < len(MATERIAL_ORDER):
                self._apply_material(MATERIAL_ORDER[idx])
