# renderer/preview.py
import logging
import numpy as np
import pygame
from renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

class PreviewWindow:
    """
    Live pygame view of a render in progress.

    Pass `update` as the renderer's row callback: each finished row is
    gamma corrected and drawn. Closing the window (or pressing Escape)
    makes `update` return False, which stops the render between rows.
    """
    def __init__(self, width: int, height: int, samples: int, max_window: int = 1280):
        pygame.init()
        self.width = width
        self.height = height
        self.samples = samples
        scale = min(1.0, max_window / max(width, height))
        self.window_size = (max(1, int(width * scale)), max(1, int(height * scale)))
        self.screen = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption("Path tracer preview")
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self.rows_done = 0
        self.open = True

    def update(self, j: int, row: np.ndarray) -> bool:
        if not self.open:
            return False
        self.pixels[j] = gamma_correct(row[np.newaxis, :, :], self.samples)[0]
        self.rows_done += 1
        self._draw()
        return self._pump_events()

    def wait(self):
        """Keep the finished image on screen until the window is closed."""
        clock = pygame.time.Clock()
        while self._pump_events():
            clock.tick(30)
        self.close()

    def close(self):
        self.open = False
        pygame.quit()

    def _draw(self):
        # surfarray wants (width, height, 3)
        surface = pygame.surfarray.make_surface(self.pixels.swapaxes(0, 1))
        if surface.get_size() != self.window_size:
            surface = pygame.transform.scale(surface, self.window_size)
        self.screen.blit(surface, (0, 0))
        pygame.display.set_caption(f"Path tracer preview - {self.rows_done}/{self.height} rows")
        pygame.display.flip()

    def _pump_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.open = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.open = False
        if not self.open:
            logger.info("Preview closed")
        return self.open
