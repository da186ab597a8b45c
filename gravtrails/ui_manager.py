import logging

import pygame
import pygame_gui

from . import constants as C
from .errors import InvalidArgument

logger = logging.getLogger(__name__)


class ControlPanel:
    """Sidebar with the simulation controls.

    UI events are translated into setter calls on the controller; the panel
    keeps no simulation state of its own. Reset and Random also send the
    optional ``camera`` back to its initial view.
    """

    def __init__(self, manager: pygame_gui.UIManager, controller, camera=None):
        width = C.UI_SIDEBAR_WIDTH
        self.manager = manager
        self.controller = controller
        self.camera = camera
        self.panel = pygame_gui.elements.UIPanel(
            pygame.Rect(C.WIDTH - width, 0, width, C.HEIGHT),
            manager=manager,
            object_id="#control_panel",
        )
        y = 0
        pygame_gui.elements.UILabel(
            pygame.Rect(0, y, width, 30),
            text="Controls",
            manager=manager,
            container=self.panel,
            object_id="#title_label",
        )
        y += 40
        self.rate_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, y, width - 20, 20),
            self._rate_text(controller.time_rate),
            manager,
            container=self.panel,
        )
        y += 20
        lo, hi = C.TIME_RATE_SLIDER_RANGE
        self.rate_slider = pygame_gui.elements.UIHorizontalSlider(
            pygame.Rect(10, y, width - 20, 20),
            start_value=max(lo, min(controller.time_rate, hi)),
            value_range=C.TIME_RATE_SLIDER_RANGE,
            manager=manager,
            container=self.panel,
        )
        y += 30
        pygame_gui.elements.UILabel(
            pygame.Rect(10, y, width - 20, 20),
            "Bodies",
            manager,
            container=self.panel,
        )
        y += 20
        self.count_entry = pygame_gui.elements.UITextEntryLine(
            pygame.Rect(10, y, width - 20, 30),
            manager=manager,
            container=self.panel,
        )
        self.count_entry.set_allowed_characters("numbers")
        self.count_entry.set_text(str(controller.body_count))
        y += 40
        self.reset_button = pygame_gui.elements.UIButton(
            pygame.Rect(10, y, 65, 25),
            "Reset",
            manager,
            container=self.panel,
        )
        self.random_button = pygame_gui.elements.UIButton(
            pygame.Rect(85, y, 65, 25),
            "Random",
            manager,
            container=self.panel,
        )
        self.pause_button = pygame_gui.elements.UIButton(
            pygame.Rect(160, y, 65, 25),
            "Pause",
            manager,
            container=self.panel,
        )
        y += 35
        self.time_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, y, width - 20, 20),
            "",
            manager,
            container=self.panel,
        )
        y += 20
        self.energy_label = pygame_gui.elements.UILabel(
            pygame.Rect(10, y, width - 20, 20),
            "",
            manager,
            container=self.panel,
        )

    @staticmethod
    def _rate_text(value):
        return f"Time rate: {value:.0f}"

    def set_body_count_text(self, text):
        """Apply the body count typed by the user; bad input is ignored."""
        if not text:
            return
        try:
            self.controller.set_body_count(int(text))
        except (ValueError, InvalidArgument) as exc:
            logger.warning("ignoring body count %r: %s", text, exc)

    def _reset_camera(self):
        if self.camera is not None:
            self.camera.reset()

    def refresh_pause_button(self):
        self.pause_button.set_text("Play" if self.controller.paused else "Pause")

    def process_event(self, event):
        """Handle a pygame_gui event; return True if it was consumed."""
        if event.type == pygame_gui.UI_HORIZONTAL_SLIDER_MOVED:
            if event.ui_element == self.rate_slider:
                self.controller.set_time_rate(event.value)
                self.rate_label.set_text(self._rate_text(event.value))
                return True
        elif event.type == pygame_gui.UI_TEXT_ENTRY_CHANGED:
            if event.ui_element == self.count_entry:
                self.set_body_count_text(event.text)
                return True
        elif event.type == pygame_gui.UI_BUTTON_PRESSED:
            if event.ui_element == self.reset_button:
                self.controller.reset()
                self._reset_camera()
                return True
            if event.ui_element == self.random_button:
                self.controller.randomize()
                self._reset_camera()
                return True
            if event.ui_element == self.pause_button:
                self.controller.toggle_pause()
                self.refresh_pause_button()
                return True
        return False

    def update_stats(self, energy_drift=None, momentum_drift=None):
        self.time_label.set_text(f"t = {self.controller.simulation_time:.1f}")
        if energy_drift is None:
            self.energy_label.set_text("Drift: n/a")
        else:
            self.energy_label.set_text(f"dE {energy_drift:.2e} %  dp {momentum_drift:.1e}")
