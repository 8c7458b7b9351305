
import pygame


class Overlay:
    """Full-screen text panel for the title and game-over screens."""
    def __init__(self):
        self.active = False
        self.text = ""

    def show(self, text):
        self.text = text; self.active = True

    def hide(self): self.active = False

    def sync(self, text):
        """Show `text` if given, otherwise hide."""
        if text: self.show(text)
        else: self.hide()

    def draw(self, screen, font, w, h):
        if not self.active: return
        s = pygame.Surface((w, h), pygame.SRCALPHA); s.fill((20, 25, 40, 200))
        screen.blit(s, (0, 0))
        lines = self.text.split("\n")
        y = h // 2 - len(lines) * font.get_linesize() // 2
        for i, line in enumerate(lines):
            col = (255, 255, 255) if i == 0 else (200, 210, 235)
            surf = font.render(line, True, col)
            screen.blit(surf, surf.get_rect(midtop=(w // 2, y)))
            y += font.get_linesize()
