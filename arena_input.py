"""Keyboard mapping: pygame key events -> engine actions"""
from typing import Dict, Iterable, List, Tuple
import pygame
from arena_engine import Action

KEYMAP: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_q: Action.ROTATE_CCW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_w: Action.ROTATE_CW,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_RETURN: Action.CONFIRM,
    pygame.K_KP_ENTER: Action.CONFIRM,
    pygame.K_SPACE: Action.CONFIRM,
}


def actions_from_events(events: Iterable[pygame.event.Event]) -> Tuple[List[Action], bool]:
    """Translate one frame of events; second value is True when the window was closed."""
    actions = []; quit_requested = False
    for e in events:
        if e.type == pygame.QUIT:
            quit_requested = True
        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_ESCAPE:
                quit_requested = True
            elif e.key in KEYMAP:
                actions.append(KEYMAP[e.key])
    return actions, quit_requested
