#!/usr/bin/env python3
"""
Blackbody Spectrum application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (viewport) and the Dear PyGui UI
  (running on the main thread).
- Maintains a shared SimulationController that owns the spectrum model, the graph axes
  and the display options; all access is guarded by a re-entrant lock.
- The viewport draws the spectrum graph (live curve, saved curves, draggable wavelength
  probe, band labels), the thermometer with its draggable thumb, and the star with its
  halo and red/green/blue intensity circles.
- The Dear PyGui window holds the temperature controls, reference presets, save/erase/
  reset, zoom buttons, display toggles and numeric readouts.

Threading model
- PygameRenderer runs in a background thread and performs input handling for the
  viewport and drawing. It takes the controller lock only to read a consistent frame
  snapshot or to apply a drag.
- The UI class runs in the main thread via Dear PyGui. It refreshes readouts on a
  periodic frame callback and invokes SimulationController methods as needed.

Units and conventions
- Temperatures in kelvin [K], wavelengths in nanometers [nm].
- Colors are RGB(A) tuples in 0..255.

Running
1) Install dependencies: `pip install -e .`
2) Run this module: `python blackbody_sim.py`
"""

import logging
import math
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from blackbody.config_loader import SimulationConfig, list_presets, load_config
from blackbody.constants import (
    AXES_COLOR,
    BACKGROUND_COLOR,
    GRAPH_COLOR,
    GRAPH_POINT_COLOR,
    INFRARED_WAVELENGTH,
    LABEL_COLOR,
    MAX_TEMPERATURE,
    MIN_TEMPERATURE,
    SAVED_GRAPH_COLORS,
    STAR_OUTER_RADIUS,
    THERMOMETER_COLOR,
    THERMOMETER_FLUID_COLOR,
    TICK_COLOR,
    ULTRAVIOLET_WAVELENGTH,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    VISIBLE_WAVELENGTH,
    XRAY_WAVELENGTH,
)
from blackbody.data_models import Color, ReferencePreset
from blackbody.logger_setup import setup_logging
from blackbody.shapes import curve_points, star_points
from blackbody.spectrum_model import BlackbodySpectrumModel
from blackbody.thermometer import Thermometer
from blackbody.utils import (
    band_for_wavelength,
    format_metric,
    format_spectral_radiance,
    format_temperature,
    format_wavelength_microns,
    try_float,
)
from blackbody.zoomable_axes import ZoomableAxes

logger = logging.getLogger("blackbody_sim")

# Viewport layout (pixels)
GRAPH_ORIGIN = (110, 540)
STAR_CENTER = (770, 150)
CIRCLES_Y = 270
CIRCLE_RADIUS = 15
THERMOMETER_X = 1000
THERMOMETER_BOTTOM = 580
THERMOMETER_TUBE_WIDTH = 20
THERMOMETER_BULB_RADIUS = 18
THUMB_PICK_RADIUS = 15
POINT_PICK_RADIUS = 10

# ============================================================
# Simulation Controller (Shared State)
# ============================================================


@dataclass
class FrameSnapshot:
    """Everything the renderer needs to draw one frame, read under the lock."""
    temperature: float
    wavelengths: List[float]
    live_curve: List[float]
    saved_curves: List[Tuple[float, List[float]]]
    probe_wavelength: float
    probe_radiance: float
    star_color: Color
    halo_color: Color
    halo_radius: float
    channel_colors: Tuple[Color, Color, Color]
    show_graph_values: bool
    show_labels: bool
    show_saved: bool
    show_intensity: bool
    total_intensity: float
    peak_wavelength: float
    saved_temperatures: List[float] = field(default_factory=list)


class SimulationController:
    """
    Shared state between UI thread (DearPyGui) and rendering thread (Pygame).
    Includes thread-safe operations guarded by a lock.
    """
    def __init__(self, config: Optional[SimulationConfig] = None):
        config = config or SimulationConfig()
        self.lock = threading.RLock()
        self.thermometer = Thermometer()
        self.axes = ZoomableAxes()
        self.model = BlackbodySpectrumModel(
            temperature=self.thermometer.clamp_temperature(config.initial_temperature),
            history_capacity=config.history_capacity,
            calibration=config.calibration,
        )
        self.running = True

        # Display options; these never touch the numerics
        self.show_graph_values = True
        self.show_labels = True
        self.show_saved = True
        self.show_intensity = True

        self.last_status_msg: Optional[str] = None

    def set_temperature(self, temperature: float) -> float:
        with self.lock:
            t = self.thermometer.clamp_temperature(float(temperature))
            self.model.set_temperature(t)
            return t

    def get_temperature(self) -> float:
        with self.lock:
            return self.model.temperature

    def save(self):
        with self.lock:
            snapshot = self.model.save()
            self.last_status_msg = f"Saved graph at {format_temperature(snapshot.temperature)}."

    def clear(self):
        with self.lock:
            self.model.clear()
            self.last_status_msg = "Erased saved graphs."

    def reset(self):
        with self.lock:
            self.axes.reset()
            self.model.reset()
            self.show_graph_values = True
            self.show_labels = True
            self.show_saved = True
            self.show_intensity = True
            self.last_status_msg = "Reset."

    def drag_thermometer_to(self, position: float):
        with self.lock:
            self.model.set_temperature(self.thermometer.position_to_temperature(position))

    def drag_probe_to(self, wavelength: float):
        with self.lock:
            self.model.graph_values_point.drag_to(wavelength)

    def zoom(self, direction: str):
        """direction is one of 'in_h', 'out_h', 'in_v', 'out_v'."""
        with self.lock:
            if direction == "in_h":
                self.axes.zoom_in_horizontal()
            elif direction == "out_h":
                self.axes.zoom_out_horizontal()
            elif direction == "in_v":
                self.axes.zoom_in_vertical()
            elif direction == "out_v":
                self.axes.zoom_out_vertical()
            self.model.set_wavelength_max(self.axes.horizontal_zoom)

    def snapshot(self) -> FrameSnapshot:
        with self.lock:
            body = self.model.main_body
            saved = [(b.temperature, self.model.get_coordinates_y(b)) for b in self.model.saved_bodies]
            return FrameSnapshot(
                temperature=body.temperature,
                wavelengths=self.model.get_coordinates_x(),
                live_curve=self.model.get_coordinates_y(),
                saved_curves=saved,
                probe_wavelength=self.model.graph_values_point.wavelength,
                probe_radiance=self.model.graph_values_point.spectral_radiance,
                star_color=body.star_color,
                halo_color=body.glowing_star_halo_color,
                halo_radius=body.glowing_star_halo_radius,
                channel_colors=(body.blue_color, body.green_color, body.red_color),
                show_graph_values=self.show_graph_values,
                show_labels=self.show_labels,
                show_saved=self.show_saved,
                show_intensity=self.show_intensity,
                total_intensity=body.total_intensity,
                peak_wavelength=body.peak_wavelength,
                saved_temperatures=self.model.saved_temperatures(),
            )

# ============================================================
# Pygame Renderer Thread
# ============================================================

_cached_font = None


def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        try:
            _cached_font = pygame.font.SysFont("consolas", 16)
        except pygame.error:
            _cached_font = pygame.font.Font(None, 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))


def draw_dashed_line(surface, color, start, end, dash=6, gap=4):
    x0, y0 = start
    x1, y1 = end
    length = math.hypot(x1 - x0, y1 - y0)
    if length == 0:
        return
    dx, dy = (x1 - x0) / length, (y1 - y0) / length
    pos = 0.0
    while pos < length:
        seg_end = min(pos + dash, length)
        pygame.draw.line(surface, color,
                         (x0 + dx * pos, y0 + dy * pos),
                         (x0 + dx * seg_end, y0 + dy * seg_end), 1)
        pos += dash + gap


class PygameRenderer(threading.Thread):
    """
    Pygame loop: draws graph, thermometer and star.
    Handles dragging of the thermometer thumb and the graph values point.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.surface = None
        self.clock = None
        self.dragging_thumb = False
        self.dragging_point = False
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Blackbody Spectrum - Viewport")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
        self.clock = pygame.time.Clock()
        logger.info("Viewport started (%dx%d)", VIEW_WIDTH, VIEW_HEIGHT)

        while self.running and self.sim.running:
            self.handle_events()
            self.draw()
            self.clock.tick(60)

        pygame.quit()
        logger.info("Viewport stopped")

    # -----------------------
    # Geometry helpers
    # -----------------------

    def thumb_screen_pos(self) -> Tuple[int, int]:
        position = self.sim.thermometer.temperature_to_position(self.sim.get_temperature())
        return (THERMOMETER_X + THERMOMETER_TUBE_WIDTH + 10, int(THERMOMETER_BOTTOM - position))

    def probe_screen_pos(self, snap: FrameSnapshot) -> Tuple[float, float]:
        axes = self.sim.axes
        x = GRAPH_ORIGIN[0] + axes.wavelength_to_view_x(snap.probe_wavelength)
        y = GRAPH_ORIGIN[1] - axes.spectral_radiance_to_view_y(snap.probe_radiance)
        return (x, y)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.sim.running = False
                self.running = False

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                tx, ty = self.thumb_screen_pos()
                if math.hypot(mx - tx, my - ty) <= THUMB_PICK_RADIUS:
                    self.dragging_thumb = True
                    continue
                px, py = self.probe_screen_pos(self.sim.snapshot())
                if math.hypot(mx - px, my - py) <= POINT_PICK_RADIUS:
                    self.dragging_point = True

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.dragging_thumb = False
                self.dragging_point = False

            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                if self.dragging_thumb:
                    self.sim.drag_thermometer_to(THERMOMETER_BOTTOM - my)
                elif self.dragging_point:
                    self.sim.drag_probe_to(self.sim.axes.view_x_to_wavelength(mx - GRAPH_ORIGIN[0]))

    # -----------------------
    # Drawing
    # -----------------------

    def draw_axes(self, surf, snap: FrameSnapshot):
        axes = self.sim.axes
        ox, oy = GRAPH_ORIGIN
        pygame.draw.lines(surf, AXES_COLOR, False,
                          [(ox + axes.width, oy), (ox, oy), (ox, oy - axes.height)], 3)
        for x, major in axes.horizontal_ticks():
            length = 12 if major else 6
            pygame.draw.line(surf, TICK_COLOR, (ox + x, oy), (ox + x, oy - length), 2 if major else 1)

        draw_text(surf, "Wavelength (μm)", ox + axes.width / 2 - 60, oy + 30, LABEL_COLOR)
        draw_text(surf, f"{axes.horizontal_zoom / 1000:g}", ox + axes.width - 10, oy + 8, LABEL_COLOR)
        draw_text(surf, "0", ox - 4, oy + 8, LABEL_COLOR)
        draw_text(surf, "Spectral radiance (MW/m²/μm/sr)", ox - 100, oy - axes.height - 30, LABEL_COLOR)
        draw_text(surf, f"{axes.vertical_zoom:.0f}", ox - 45, oy - axes.height - 8, LABEL_COLOR)

        if snap.show_labels:
            for boundary in (XRAY_WAVELENGTH, ULTRAVIOLET_WAVELENGTH, VISIBLE_WAVELENGTH, INFRARED_WAVELENGTH):
                if boundary <= axes.horizontal_zoom:
                    x = ox + axes.wavelength_to_view_x(boundary)
                    draw_dashed_line(surf, TICK_COLOR, (x, oy), (x, oy - axes.height))
            # band names at the center of each visible span
            spans = [(0, XRAY_WAVELENGTH), (XRAY_WAVELENGTH, ULTRAVIOLET_WAVELENGTH),
                     (ULTRAVIOLET_WAVELENGTH, VISIBLE_WAVELENGTH), (VISIBLE_WAVELENGTH, INFRARED_WAVELENGTH)]
            for lo, hi in spans:
                hi = min(hi, axes.horizontal_zoom)
                if hi - lo < axes.horizontal_zoom * 0.1:
                    continue
                center = (lo + hi) / 2
                draw_text(surf, band_for_wavelength(center),
                          ox + axes.wavelength_to_view_x(center) - 30, oy - axes.height - 8, TICK_COLOR)

    def draw_curves(self, surf, snap: FrameSnapshot):
        axes = self.sim.axes
        if snap.show_saved:
            for i, (temperature, curve) in enumerate(snap.saved_curves):
                color = SAVED_GRAPH_COLORS[i % len(SAVED_GRAPH_COLORS)]
                pts = curve_points(axes, snap.wavelengths, curve, GRAPH_ORIGIN)
                pygame.draw.aalines(surf, color, False, pts)
                draw_text(surf, format_temperature(temperature), GRAPH_ORIGIN[0] + 10, 60 + 20 * i, color)

        pts = curve_points(axes, snap.wavelengths, snap.live_curve, GRAPH_ORIGIN)
        pygame.draw.aalines(surf, GRAPH_COLOR, False, pts)

        if snap.show_graph_values:
            px, py = self.probe_screen_pos(snap)
            top = GRAPH_ORIGIN[1] - axes.height
            if GRAPH_ORIGIN[0] <= px <= GRAPH_ORIGIN[0] + axes.width and py >= top:
                draw_dashed_line(surf, GRAPH_POINT_COLOR, (px, GRAPH_ORIGIN[1]), (px, py))
                draw_dashed_line(surf, GRAPH_POINT_COLOR, (GRAPH_ORIGIN[0], py), (px, py))
                gfxdraw.filled_circle(surf, int(px), int(py), 7, GRAPH_POINT_COLOR)
                gfxdraw.aacircle(surf, int(px), int(py), 7, AXES_COLOR)
                draw_text(surf, format_wavelength_microns(snap.probe_wavelength),
                          px - 30, GRAPH_ORIGIN[1] + 8, GRAPH_POINT_COLOR)
                draw_text(surf, format_spectral_radiance(snap.probe_radiance),
                          GRAPH_ORIGIN[0] - 100, py - 8, GRAPH_POINT_COLOR)

    def draw_star(self, surf, snap: FrameSnapshot):
        cx, cy = STAR_CENTER
        halo_r = int(STAR_OUTER_RADIUS + snap.halo_radius)
        gfxdraw.filled_circle(surf, cx, cy, halo_r, snap.halo_color.to_rgba255())
        pygame.draw.polygon(surf, snap.star_color.to_rgb(), star_points(STAR_CENTER))

        labels = ("B", "G", "R")
        for i, color in enumerate(snap.channel_colors):
            x = cx - 50 + 50 * i
            gfxdraw.filled_circle(surf, x, CIRCLES_Y, CIRCLE_RADIUS, color.to_rgba255())
            gfxdraw.aacircle(surf, x, CIRCLES_Y, CIRCLE_RADIUS, TICK_COLOR)
            draw_text(surf, labels[i], x - 4, CIRCLES_Y + CIRCLE_RADIUS + 6, LABEL_COLOR)

    def draw_thermometer(self, surf, snap: FrameSnapshot):
        therm = self.sim.thermometer
        x = THERMOMETER_X
        top = THERMOMETER_BOTTOM - therm.tube_height
        fluid = therm.temperature_to_position(snap.temperature)

        pygame.draw.rect(surf, THERMOMETER_FLUID_COLOR,
                         (x, THERMOMETER_BOTTOM - fluid, THERMOMETER_TUBE_WIDTH, fluid))
        pygame.draw.rect(surf, THERMOMETER_COLOR, (x, top, THERMOMETER_TUBE_WIDTH, therm.tube_height), 2)
        bulb_center = (x + THERMOMETER_TUBE_WIDTH // 2, THERMOMETER_BOTTOM + THERMOMETER_BULB_RADIUS - 4)
        pygame.draw.circle(surf, THERMOMETER_FLUID_COLOR, bulb_center, THERMOMETER_BULB_RADIUS)
        pygame.draw.circle(surf, THERMOMETER_COLOR, bulb_center, THERMOMETER_BULB_RADIUS, 2)

        if snap.show_labels:
            for position, name in therm.labeled_ticks():
                y = THERMOMETER_BOTTOM - position
                pygame.draw.line(surf, THERMOMETER_COLOR, (x - 8, y), (x, y), 2)
                draw_text(surf, name, x - 100, y - 8, LABEL_COLOR)

        tx, ty = self.thumb_screen_pos()
        pygame.draw.polygon(surf, GRAPH_POINT_COLOR, [(tx - 8, ty), (tx + 8, ty - 8), (tx + 8, ty + 8)])
        draw_text(surf, format_temperature(snap.temperature), x - 20, top - 30, LABEL_COLOR)

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)
        snap = self.sim.snapshot()

        self.draw_axes(surf, snap)
        self.draw_curves(surf, snap)
        self.draw_star(surf, snap)
        self.draw_thermometer(surf, snap)

        if snap.show_intensity:
            draw_text(surf, f"Total intensity: {format_metric(snap.total_intensity, 'W/m²')}",
                      GRAPH_ORIGIN[0], VIEW_HEIGHT - 80, LABEL_COLOR)
        draw_text(surf, "Drag the thermometer thumb to change temperature | Drag the point to read the curve",
                  10, 10, TICK_COLOR)

        pygame.display.flip()

# ============================================================
# Dear PyGui UI
# ============================================================


class UI:
    """
    Dear PyGui interface: temperature controls, presets, saved graphs, zoom and readouts.
    """
    def __init__(self, sim: SimulationController, presets: List[ReferencePreset]):
        self.sim = sim
        self.presets = presets

        self.temperature_entry_id = None
        self.status_msg_id = None
        self.peak_text_id = None
        self.intensity_text_id = None
        self.probe_text_id = None
        self.saved_text_id = None
        self.star_color_id = None

        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (approx ~10Hz)."""
        current = dpg.get_frame_count()
        dpg.set_frame_callback(current + 6, self._sync_ui_with_sim)

    # -----------------------
    # UI Construction
    # -----------------------

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title="Blackbody Spectrum - Controls", width=460, height=640)

        with dpg.window(label="Controls", width=440, height=620, pos=(10, 10), tag="main_window"):
            dpg.add_text("Temperature")
            dpg.add_slider_float(min_value=MIN_TEMPERATURE, max_value=MAX_TEMPERATURE,
                                 default_value=self.sim.get_temperature(), width=380, format="%.0f K",
                                 callback=lambda s, a, u: self.sim.set_temperature(a), tag="temperature_slider")
            with dpg.group(horizontal=True):
                self.temperature_entry_id = dpg.add_input_text(label="K", default_value="", width=120,
                                                               on_enter=True,
                                                               callback=lambda s, a, u: self._apply_temperature_entry())
                dpg.add_button(label="Set", callback=self._apply_temperature_entry)

            dpg.add_text("Reference temperatures")
            with dpg.group(horizontal=True):
                for preset in self.presets:
                    dpg.add_button(label=preset.name, user_data=preset.temperature,
                                   callback=lambda s, a, u: self._apply_preset(u))

            dpg.add_separator()

            dpg.add_text("Saved graphs")
            with dpg.group(horizontal=True):
                dpg.add_button(label="Save", callback=self._on_save)
                dpg.add_button(label="Erase", callback=self._on_erase)
                dpg.add_button(label="Reset All", callback=self._on_reset)
            self.saved_text_id = dpg.add_text("(none)")

            dpg.add_separator()

            dpg.add_text("Graph zoom")
            with dpg.group(horizontal=True):
                dpg.add_text("Wavelength:")
                dpg.add_button(label="-", tag="zoom_out_h", callback=lambda: self.sim.zoom("out_h"))
                dpg.add_button(label="+", tag="zoom_in_h", callback=lambda: self.sim.zoom("in_h"))
                dpg.add_text("Radiance:")
                dpg.add_button(label="-", tag="zoom_out_v", callback=lambda: self.sim.zoom("out_v"))
                dpg.add_button(label="+", tag="zoom_in_v", callback=lambda: self.sim.zoom("in_v"))

            dpg.add_separator()

            dpg.add_text("Display")
            dpg.add_checkbox(label="Graph values", default_value=True, tag="show_graph_values",
                             callback=lambda s, a, u: self._set_option("show_graph_values", a))
            dpg.add_checkbox(label="Intensity", default_value=True, tag="show_intensity",
                             callback=lambda s, a, u: self._set_option("show_intensity", a))
            dpg.add_checkbox(label="Labels", default_value=True, tag="show_labels",
                             callback=lambda s, a, u: self._set_option("show_labels", a))
            dpg.add_checkbox(label="Saved graphs", default_value=True, tag="show_saved",
                             callback=lambda s, a, u: self._set_option("show_saved", a))

            dpg.add_separator()

            dpg.add_text("Readouts")
            self.peak_text_id = dpg.add_text("Peak wavelength: ")
            self.intensity_text_id = dpg.add_text("Total intensity: ")
            self.probe_text_id = dpg.add_text("Probe: ")
            self.star_color_id = dpg.add_color_button(default_value=(0, 0, 0, 255), width=60, height=30,
                                                      no_border=True, label="Star color")
            self.status_msg_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    # -----------------------
    # UI Callbacks
    # -----------------------

    def _set_status(self, msg: str, color=(180, 220, 180)):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=color)

    def _set_error(self, msg: str):
        dpg.set_value(self.status_msg_id, msg)
        dpg.configure_item(self.status_msg_id, color=(255, 120, 120))

    def _apply_temperature_entry(self):
        value = try_float(dpg.get_value(self.temperature_entry_id))
        if value is None:
            self._set_error("Temperature must be a number.")
            return
        applied = self.sim.set_temperature(value)
        if applied != value:
            self._set_status(f"Temperature clamped to {format_temperature(applied)}.", color=(240, 210, 120))
        else:
            self._set_status(f"Temperature set to {format_temperature(applied)}.")

    def _apply_preset(self, temperature: float):
        applied = self.sim.set_temperature(temperature)
        self._set_status(f"Temperature set to {format_temperature(applied)}.")

    def _on_save(self):
        self.sim.save()

    def _on_erase(self):
        self.sim.clear()

    def _on_reset(self):
        self.sim.reset()
        for tag in ("show_graph_values", "show_intensity", "show_labels", "show_saved"):
            dpg.set_value(tag, True)

    def _set_option(self, name: str, value):
        with self.sim.lock:
            setattr(self.sim, name, bool(value))

    def _sync_ui_with_sim(self):
        """
        Periodic UI update: temperature slider, readouts, zoom button state and status.
        """
        snap = self.sim.snapshot()

        if abs(dpg.get_value("temperature_slider") - snap.temperature) > 0.5:
            dpg.set_value("temperature_slider", snap.temperature)

        if math.isfinite(snap.peak_wavelength):
            dpg.set_value(self.peak_text_id, f"Peak wavelength: {snap.peak_wavelength:.0f} nm "
                                             f"({band_for_wavelength(snap.peak_wavelength)})")
        else:
            dpg.set_value(self.peak_text_id, "Peak wavelength: --")
        dpg.set_value(self.intensity_text_id, f"Total intensity: {format_metric(snap.total_intensity, 'W/m²')}")
        dpg.set_value(self.probe_text_id,
                      f"Probe: {format_wavelength_microns(snap.probe_wavelength)}, "
                      f"{format_spectral_radiance(snap.probe_radiance)} MW/m²/μm/sr")
        dpg.set_value(self.star_color_id, snap.star_color.to_rgba255())
        saved = ", ".join(format_temperature(t) for t in snap.saved_temperatures)
        dpg.set_value(self.saved_text_id, saved or "(none)")

        axes = self.sim.axes
        with self.sim.lock:
            dpg.configure_item("zoom_in_h", enabled=axes.can_zoom_in_horizontal)
            dpg.configure_item("zoom_out_h", enabled=axes.can_zoom_out_horizontal)
            dpg.configure_item("zoom_in_v", enabled=axes.can_zoom_in_vertical)
            dpg.configure_item("zoom_out_v", enabled=axes.can_zoom_out_vertical)
            msg = self.sim.last_status_msg
            self.sim.last_status_msg = None
        if msg:
            self._set_status(msg)

        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================


def main():
    config = load_config()
    setup_logging(config.logging)
    logger.info("Application starting at %s", format_temperature(config.initial_temperature))

    sim = SimulationController(config)
    renderer = PygameRenderer(sim)

    # Start Pygame renderer thread
    renderer.start()

    UI(sim, list_presets())

    try:
        dpg.start_dearpygui()
    finally:
        sim.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()
        logger.info("Application shutting down.")


if __name__ == "__main__":
    main()
