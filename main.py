# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from canvas import PygameCanvas
from scene import build_scene
from silhouettes import SilhouetteRenderer

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)


def run_animation_loop(renderer, canvas, clock, log_interval_ticks):
    """
    The main animation loop. Each pass handles window events, runs one full
    tick of the scene, presents it and then waits for the next tick, so
    ticks never overlap.
    """
    running = True
    while running:
        # Event handling
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        # --- Simulation & Drawing ---
        tick = renderer.on_tick(canvas)
        pygame.display.flip()

        # --- Logging (throttled) ---
        logger_setup.log_frame_status(tick, renderer.active_counts(), clock.get_fps(), log_interval_ticks)

        clock.tick(constants.FPS)

    return renderer.tick


def main(config_path='config.json'):
    """
    Main function to initialize and run the firework animation until the
    window is closed.
    """
    # --- Setup ---
    logger_setup.setup_logging(config_path)

    with open(config_path, 'r') as f:
        config = json.load(f)

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Scene (fails fast on bad configuration) ---
    try:
        renderer = build_scene(config, rng, silhouettes=SilhouetteRenderer(constants.WIDTH, constants.HEIGHT))
    except (KeyError, ValueError):
        logger.exception("Invalid scene configuration; aborting start-up.")
        raise

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()
    canvas = PygameCanvas(screen, antialias=True)

    try:
        final_tick = run_animation_loop(
            renderer, canvas, clock, logger_setup.status_interval(config)
        )
        logger.info(f"Animation stopped after {final_tick} ticks.")
    finally:
        logger.info("Application shutting down.")
        pygame.quit()

if __name__ == "__main__":
    main()
