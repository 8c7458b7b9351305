
import logging
import pygame
from arena_config import CONFIG, load_env, setup_logging
from arena_engine import GameEngine
from arena_input import actions_from_events
from arena_overlay import Overlay
from arena_layout import compute_dims
from arena_render import RenderAssets

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    load_env()
    setup_logging()
    pygame.init()
    try:
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
        engine = GameEngine()
        dims = compute_dims(engine.width, engine.height)
        screen = recreate_window(dims)
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont(None, 22)
        big_font = pygame.font.SysFont(None, 42)

        render = RenderAssets(dims, font)
        overlay = Overlay()
        clock = pygame.time.Clock()
        log.info("window %dx%d, seed=%s", dims.total_w, dims.total_h, CONFIG["SEED"])

        running = True
        while running:
            dt = clock.tick(CONFIG["FPS"])
            actions, quit_requested = actions_from_events(pygame.event.get())
            if quit_requested:
                running = False
                continue
            state = engine.tick(dt, actions)
            render.draw(screen, state)
            overlay.sync(state.overlay_text)
            overlay.draw(screen, big_font, dims.total_w, dims.total_h)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
