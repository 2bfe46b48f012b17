"""
game_client.py

pygame front end: keyboard/touch input, rendering and the frame loop.
The simulation itself lives in physics_engine.GameEngine.
"""

import math
from typing import Optional

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, STAR_COUNT,
    BACKGROUND_COLOR, STAR_COLOR, SHIP_COLOR, ROCK_COLOR, TEXT_COLOR,
    GAME_OVER_COLOR
)
from .physics_engine import GameEngine

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


class RockDodgeClient:
    def __init__(self, engine: Optional[GameEngine] = None):
        self.engine = engine or GameEngine()
        self.width = int(self.engine.width)
        self.height = int(self.engine.height)

        self.screen = None
        self.clock = None
        self.running = False
        self.last_ticks = 0

        self._font = None
        self._large_font = None

    # ----------------- Input -----------------

    def handle_event(self, event) -> None:
        """Maps one pygame event onto intent flags, restart or quit."""
        engine = self.engine

        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            if event.key in LEFT_KEYS:
                engine.set_move_left(True)
            if event.key in RIGHT_KEYS:
                engine.set_move_right(True)
            if event.key in RESTART_KEYS and engine.request_restart():
                print("Restarting.")

        elif event.type == pygame.KEYUP:
            if event.key in LEFT_KEYS:
                engine.set_move_left(False)
            if event.key in RIGHT_KEYS:
                engine.set_move_right(False)

        # Touch positions are normalized to [0, 1]
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            self._steer_towards(event.x * self.width)
        elif event.type == pygame.FINGERUP:
            self._stop_steering()

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._steer_towards(event.pos[0])
        elif event.type == pygame.MOUSEMOTION and any(event.buttons):
            self._steer_towards(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP:
            self._stop_steering()

    def _steer_towards(self, x: float):
        half = self.width / 2
        self.engine.set_move_left(x < half)
        self.engine.set_move_right(x > half)

    def _stop_steering(self):
        self.engine.set_move_left(False)
        self.engine.set_move_right(False)

    # ----------------- Rendering -----------------

    def _fonts(self):
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 22)
            self._large_font = pygame.font.Font(None, 36)
        return self._font, self._large_font

    def draw(self, surface) -> None:
        """Renders the current state. Reads the engine, never writes to it."""
        font, large_font = self._fonts()
        engine = self.engine
        w, h = self.width, self.height

        surface.fill(BACKGROUND_COLOR)

        for i in range(STAR_COUNT):
            surface.fill(STAR_COLOR, ((i * 53) % w, (i * 97) % h, 1, 1))

        # Ship: triangle pointing up
        p = engine.player
        pygame.draw.polygon(surface, SHIP_COLOR, [
            (p.x + p.width / 2, p.y),
            (p.x, p.y + p.height),
            (p.x + p.width, p.y + p.height),
        ])

        for rock in engine.rocks:
            cx, cy = rock.center
            pygame.draw.circle(surface, ROCK_COLOR, (round(cx), round(cy)),
                               max(1, math.ceil(rock.radius)))

        score_text = font.render(f"Score: {engine.score}", True, TEXT_COLOR)
        surface.blit(score_text, (10, 10))

        if engine.game_over:
            over = large_font.render("GAME OVER", True, GAME_OVER_COLOR)
            surface.blit(over, (w // 2 - over.get_width() // 2, h // 2 - 20))
            hint = font.render("Press Enter to restart", True, GAME_OVER_COLOR)
            surface.blit(hint, (w // 2 - hint.get_width() // 2, h // 2 + 20))

    # ----------------- Frame loop -----------------

    def tick(self, now_ms: int) -> None:
        """One frame: a single engine step followed by a single draw."""
        elapsed_ms = now_ms - self.last_ticks
        self.last_ticks = now_ms

        was_over = self.engine.game_over
        self.engine.step(elapsed_ms, now_ms)
        if self.engine.game_over and not was_over:
            print(f"Game over. Score: {self.engine.score}")

        if self.screen is not None:
            self.draw(self.screen)
            pygame.display.flip()

    def run(self):
        """The main client execution loop."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Rock Dodge")
            self.clock = pygame.time.Clock()

            print("Left/Right or A/D to move, Enter to restart, Esc to quit.")
            self.running = True
            while self.running:
                self.clock.tick(RENDER_FPS)
                for event in pygame.event.get():
                    self.handle_event(event)
                self.tick(pygame.time.get_ticks())
        finally:
            pygame.quit()
            print("Bye.")


def main():
    try:
        RockDodgeClient(GameEngine(width=SCREEN_WIDTH, height=SCREEN_HEIGHT)).run()
    except KeyboardInterrupt:
        pass

