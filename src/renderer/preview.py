# renderer/preview.py
import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)

def show_image(pixels: np.ndarray, title: str = "Ray Tracer",
               window_width: int = 0, window_height: int = 0):
    """
    Displays a rendered (height, width, 3) uint8 image in a pygame window,
    scaled to the window, until the window is closed or Escape is pressed.
    """
    height, width, _ = pixels.shape
    window_width = window_width or width
    window_height = window_height or height

    pygame.init()
    try:
        screen = pygame.display.set_mode((window_width, window_height))
        pygame.display.set_caption(title)

        # surfarray expects (width, height, 3).
        surf = pygame.surfarray.make_surface(np.transpose(pixels, (1, 0, 2)))
        surf = pygame.transform.scale(surf, (window_width, window_height))
        screen.blit(surf, (0, 0))
        pygame.display.flip()
        logger.info("Preview open; close the window to continue")

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()
