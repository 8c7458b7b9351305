"""
Game engine: active piece, spawner, line-clear pipeline and the per-frame state machine.

The engine never touches pygame. A host feeds it elapsed milliseconds and a list of
discrete actions each frame through tick(), and draws whatever RenderState comes back:

    state = engine.tick(dt, actions)

Everything is owned by one GameEngine instance and mutated synchronously inside tick()
or handle_action(); there is no queuing or background work.
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from arena_config import CONFIG
from arena_piece import Player, create_piece, rotate
from arena_board import (Board, create_matrix, clear, collide, merge,
                         detect_full_rows, remove_rows, score_for_rows)
from arena_clear import LineClear
from arena_rng import UniformBag

log = logging.getLogger(__name__)


class GameState(enum.Enum):
    TITLE = "title"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Action(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    CONFIRM = "confirm"


OVERLAY_TEXT = {
    GameState.TITLE: "TETRIS\nPress Enter to start",
    GameState.GAME_OVER: "GAME OVER\nPress Enter to restart",
}


@dataclass(frozen=True)
class RenderState:
    """What the host needs to draw one frame."""
    board: Tuple[Tuple[int, ...], ...]
    piece: Optional[Tuple[Tuple[int, int, int], ...]]  # (x, y, id) per cell
    next_type: Optional[str]
    score: int
    state: GameState
    clearing_rows: Tuple[int, ...]
    blink_visible: bool
    overlay_text: Optional[str]


class GameEngine:
    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 bag: Optional[UniformBag] = None):
        self.width = width or CONFIG["BOARD_WIDTH"]
        self.height = height or CONFIG["BOARD_HEIGHT"]
        self.drop_interval = CONFIG["DROP_INTERVAL_MS"]
        self.board: Board = create_matrix(self.width, self.height)
        self.player = Player()
        self.bag = bag if bag is not None else UniformBag(CONFIG["SEED"])
        self.next_type: Optional[str] = None
        self.score = 0
        self.state = GameState.TITLE
        self.time = 0
        self.drop_counter = 0
        self.clearing = LineClear(CONFIG["CLEAR_BLINK_MS"], CONFIG["CLEAR_DURATION_MS"])

    # ---------- Lifecycle ----------
    def start(self):
        """Zero everything and enter PLAYING with a fresh spawn."""
        clear(self.board)
        self.score = 0
        self.time = 0
        self.drop_counter = 0
        self.clearing.reset()
        self.next_type = self.bag.next_piece()
        self.state = GameState.PLAYING
        log.info("game started (%dx%d)", self.width, self.height)
        self.player_reset()

    # ---------- Active piece / spawner ----------
    def player_reset(self):
        self.player.shape = create_piece(self.next_type)
        self.player.y = 0
        self.player.x = self.width // 2 - self.player.width // 2
        self.next_type = self.bag.next_piece()
        log.debug("spawned piece at x=%d, next=%s", self.player.x, self.next_type)
        if collide(self.board, self.player):
            self.state = GameState.GAME_OVER
            log.info("game over, score %d", self.score)

    def player_move(self, d: int):
        self.player.x += d
        if collide(self.board, self.player):
            self.player.x -= d

    def player_drop(self):
        self.player.y += 1
        if collide(self.board, self.player):
            self.player.y -= 1
            merge(self.board, self.player)
            self.sweep()
        self.drop_counter = 0

    def player_rotate(self, d: int):
        pos = self.player.x
        offset = 1
        rotate(self.player.shape, d)
        while collide(self.board, self.player):
            self.player.x += offset
            offset = -(offset + (1 if offset > 0 else -1))
            if offset > self.player.width:
                rotate(self.player.shape, -d)
                self.player.x = pos
                log.debug("rotation %+d blocked", d)
                return

    # ---------- Line clear pipeline ----------
    def sweep(self):
        rows = detect_full_rows(self.board)
        if not rows:
            self.player_reset()
            return
        log.debug("rows %s full, clearing", rows)
        self.clearing.begin(rows, self.time)

    def _finish_clear(self):
        rows = self.clearing.rows
        remove_rows(self.board, rows)
        gained = score_for_rows(len(rows))
        self.score += gained
        log.info("cleared %d row(s) for %d, score %d", len(rows), gained, self.score)
        self.clearing.reset()
        self.player_reset()
        self.drop_counter = 0

    # ---------- Frame update ----------
    def handle_action(self, action: Action):
        if self.state is not GameState.PLAYING:
            if action is Action.CONFIRM:
                self.start()
            return
        if self.clearing.active:
            return
        if action is Action.MOVE_LEFT:
            self.player_move(-1)
        elif action is Action.MOVE_RIGHT:
            self.player_move(1)
        elif action is Action.SOFT_DROP:
            self.player_drop()
        elif action is Action.ROTATE_CW:
            self.player_rotate(1)
        elif action is Action.ROTATE_CCW:
            self.player_rotate(-1)

    def tick(self, elapsed: float, actions: Iterable[Action] = ()) -> RenderState:
        # a frame spent on the title or game-over screen never counts toward play time
        was_playing = self.state is GameState.PLAYING
        if was_playing:
            self.time += elapsed
        for a in actions:
            self.handle_action(a)
        if was_playing and self.state is GameState.PLAYING:
            if self.clearing.active:
                if self.clearing.update(self.time):
                    self._finish_clear()
            else:
                self.drop_counter += elapsed
                if self.drop_counter > self.drop_interval:
                    self.player_drop()
        return self.snapshot()

    def snapshot(self) -> RenderState:
        show_piece = self.state is GameState.PLAYING and not self.clearing.active
        piece: Optional[Tuple] = tuple(self.player.cells()) if show_piece else None
        return RenderState(
            board=tuple(tuple(r) for r in self.board),
            piece=piece,
            next_type=self.next_type,
            score=self.score,
            state=self.state,
            clearing_rows=tuple(self.clearing.rows),
            blink_visible=self.clearing.blink_visible,
            overlay_text=OVERLAY_TEXT.get(self.state),
        )
