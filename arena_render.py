"""
Rendering helpers for the arena.

- Pre-render one cell sprite per cell id and per size (board + preview).
- Pre-render the static background (grid, side panel, preview frame) once per Dims.
- Cache score/preview surfaces; re-render only when the value changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from arena_layout import Dims, PREVIEW_CELLS
from arena_piece import create_piece
from arena_engine import RenderState

# Colors per cell id (0 is background)
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (255, 13, 114),
    2: (13, 194, 255),
    3: (13, 255, 114),
    4: (245, 56, 255),
    5: (255, 142, 13),
    6: (255, 225, 56),
    7: (56, 119, 255),
}
BLINK_COLOR = (255, 255, 255)

@dataclass
class HudCache:
    score: int = -1
    next_type: Optional[str] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (30,36,64)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        self.pv_cell = max(12, int(d.cell*0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 110
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*PREVIEW_CELLS+12, self.pv_cell*PREVIEW_CELLS+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.pv_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for v, col in COLORS.items():
            s = pygame.Surface((c-2, c-2)); s.fill(col)
            self.cell_surf[v] = s
            p = pygame.Surface((self.pv_cell-2, self.pv_cell-2)); p.fill(col)
            self.pv_surf[v] = p
        self.blink_surf = pygame.Surface((self.dims.board_w, c-2))
        self.blink_surf.fill(BLINK_COLOR)

    def cell_pos(self, bx: int, by: int):
        return (self.dims.board_x + bx*self.dims.cell + 1, self.dims.board_y + by*self.dims.cell + 1)

    def draw_cell(self, screen: pygame.Surface, v: int, bx: int, by: int):
        """Fill one unit cell of the board with the color of cell id v."""
        screen.blit(self.cell_surf[v], self.cell_pos(bx, by))

    # ---------- Frame ----------
    def draw(self, screen: pygame.Surface, state: RenderState):
        screen.blit(self.bg, (0,0))
        for y, row in enumerate(state.board):
            for x, v in enumerate(row):
                if v: self.draw_cell(screen, v, x, y)
        if state.blink_visible:
            for y in state.clearing_rows:
                screen.blit(self.blink_surf, (self.dims.board_x, self.cell_pos(0, y)[1]))
        if state.piece:
            for x, y, v in state.piece:
                self.draw_cell(screen, v, x, y)
        self.draw_panel_hud(screen, state.score, state.next_type)

    # ---------- HUD / Panel ----------
    def _render_preview(self, t: str) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*PREVIEW_CELLS, self.pv_cell*PREVIEW_CELLS), pygame.SRCALPHA)
        shape = create_piece(t)
        offx = (PREVIEW_CELLS - len(shape[0])) // 2
        offy = (PREVIEW_CELLS - len(shape)) // 2
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(self.pv_surf[v], ((x+offx)*self.pv_cell + 1, (y+offy)*self.pv_cell + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, score: int, next_type: Optional[str]):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
            self.hud.next_label = f.render("Next:", True, (200,210,240))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, (200,210,240))
        if next_type != self.hud.next_type:
            self.hud.next_type = next_type
            self.hud.preview = self._render_preview(next_type) if next_type else None
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.next_label, (d.panel_x + 12, d.panel_y + 80))
        if self.hud.preview:
            screen.blit(self.hud.preview, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Drop", True, (165,175,215)),
                f.render("W/↑ Rot CW", True, (165,175,215)),
                f.render("Q/Z Rot CCW", True, (165,175,215)),
                f.render("Enter Start", True, (165,175,215)),
            ]
        y = self.pv_y + self.pv_cell*PREVIEW_CELLS + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
