# renderer/preview.py
import numpy as np
import pygame

def to_display_array(pixels: np.ndarray) -> np.ndarray:
    """
    Converts a (height, width, 3) image to the (width, height, 3) uint8 layout
    pygame surfaces use. Channels outside [0, 255] are clipped for display only.
    """
    return np.ascontiguousarray(pixels.clip(0, 255).astype("uint8").transpose(1, 0, 2))

def show_image(pixels: np.ndarray, caption: str = "Ray Tracer"):
    """
    Opens a window showing the image until it is closed or Escape is pressed.
    """
    pygame.init()
    try:
        height, width = pixels.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        surface = pygame.surfarray.make_surface(to_display_array(pixels))
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()
