"""Window viewer: renders into a small pygame surface and scales it up."""

from __future__ import annotations

import logging

import pygame

from .game import make_world
from .models import ViewerSettings
from .movement import step_pose
from .surface_pygame import PygameSurface

logger = logging.getLogger(__name__)

FRAME_W = 160
FRAME_H = 120


def run_window(settings: ViewerSettings) -> None:
    """Open a window and run the view until it is closed or Esc is pressed."""
    # --- Pygame setup --- #
    pygame.init()
    pygame.display.set_caption("raymarch3d")
    scale = max(1, settings.scale)
    screen = pygame.display.set_mode((FRAME_W * scale, FRAME_H * scale))
    clock = pygame.time.Clock()
    running = True

    world = make_world(settings)
    frame = PygameSurface.create(FRAME_W, FRAME_H)

    # --- Game Loop --- #
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            if event.type == pygame.KEYDOWN and event.dict["key"] in (pygame.K_ESCAPE, pygame.K_q):
                running = False

        # Held keys, not KEYDOWN: movement is continuous
        keys = pygame.key.get_pressed()
        move_dir = int(keys[pygame.K_w] or keys[pygame.K_UP]) - int(keys[pygame.K_s] or keys[pygame.K_DOWN])
        rot_dir = int(keys[pygame.K_d] or keys[pygame.K_RIGHT]) - int(keys[pygame.K_a] or keys[pygame.K_LEFT])

        dt = clock.tick(30) / 1000.0  # FPS limit
        if move_dir or rot_dir:
            world.set_pose(step_pose(world.grid, world.pose, move_dir, rot_dir, dt))

        # --- Rendering --- #
        world.render(frame)
        frame.blit_scaled(screen)
        pygame.display.flip()

    logger.info("window viewer closed at %s", world.pose)
    pygame.quit()
