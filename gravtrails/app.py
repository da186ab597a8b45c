"""Interactive pygame front end for the simulation."""
import argparse
import logging

import numpy as np
import pygame
import pygame_gui

from . import constants as C
from .analysis import DriftMonitor
from .camera import Camera
from .errors import GravtrailsError
from .rendering import draw_scene
from .simulation import SimulationController
from .ui_manager import ControlPanel

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="N-body gravity with trails")
    parser.add_argument("--bodies", type=int, default=C.DEFAULT_BODY_COUNT,
                        help="Number of bodies generated by Random")
    parser.add_argument("--time-rate", type=float, default=C.DEFAULT_TIME_RATE,
                        help="Simulated seconds per real second")
    parser.add_argument("--trail-length", type=int, default=C.DEFAULT_TRAIL_LENGTH,
                        help="Maximum trail points per body, -1 for unbounded")
    parser.add_argument("--random", action="store_true",
                        help="Start from a random scene instead of the default one")
    parser.add_argument("--seed", type=int, help="Seed for random scenes")
    parser.add_argument("--fps", type=int, default=C.FPS, help="Frame rate cap")
    parser.add_argument("--max-frames", type=int,
                        help="Quit after this many frames")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def create_controller(args):
    """Build a controller from parsed command line arguments."""
    controller = SimulationController(
        time_rate=args.time_rate,
        body_count=args.bodies,
        trail_length=args.trail_length,
        rng=np.random.default_rng(args.seed),
    )
    if args.random:
        controller.randomize()
    return controller


def handle_input(event, controller, camera, manager, dragging):
    """Apply camera and keyboard shortcuts. Returns ``(running, dragging)``."""
    if event.type == pygame.QUIT:
        return False, dragging
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if not manager.get_hovering_any_element():
            dragging = True
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        dragging = False
    elif event.type == pygame.MOUSEMOTION and dragging:
        camera.orbit(*event.rel)
    elif event.type == pygame.MOUSEWHEEL:
        camera.zoom_by(C.CAMERA_ZOOM_STEP ** -event.y)
    elif event.type == pygame.KEYDOWN and not manager.get_focus_set():
        if event.key == pygame.K_ESCAPE:
            return False, dragging
        if event.key == pygame.K_SPACE:
            controller.toggle_pause()
        elif event.key == pygame.K_r:
            controller.reset()
            camera.reset()
        elif event.key == pygame.K_n:
            controller.randomize()
            camera.reset()
    return True, dragging


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        controller = create_controller(args)
    except GravtrailsError as exc:
        logger.error("invalid startup configuration: %s", exc)
        return 2

    pygame.init()
    screen = pygame.display.set_mode((C.WIDTH, C.HEIGHT))
    pygame.display.set_caption("Gravity Trails")

    manager = pygame_gui.UIManager((C.WIDTH, C.HEIGHT))
    camera = Camera()
    panel = ControlPanel(manager, controller, camera)
    view = screen.subsurface(pygame.Rect(0, 0, camera.width, camera.height))
    drift = DriftMonitor(g_constant=controller.g_constant)
    clock = pygame.time.Clock()

    tracked_bodies = None
    dragging = False
    frames = 0
    running = True
    while running:
        time_delta = clock.tick(args.fps) / 1000.0

        for event in pygame.event.get():
            running, dragging = handle_input(event, controller, camera, manager, dragging)
            if not running:
                break
            panel.process_event(event)
            manager.process_events(event)
        if not running:
            break
        panel.refresh_pause_button()

        # a reset or randomize swaps in a new body list
        if controller.bodies is not tracked_bodies:
            tracked_bodies = controller.bodies
            drift.start(tracked_bodies)

        if controller.tick(time_delta):
            drift.sample(controller.bodies, controller.simulation_time)

        manager.update(time_delta)
        panel.update_stats(drift.energy_drift, drift.momentum_drift)

        draw_scene(view, controller, camera)
        manager.draw_ui(screen)
        pygame.display.flip()

        frames += 1
        if args.max_frames is not None and frames >= args.max_frames:
            running = False

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
