"""Scenes, drawing and the main loop of the memory match game."""

from __future__ import annotations

import argparse
import enum
import random
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from memorymatch.cards import CARD_HEIGHT, CARD_MAX, CARD_WIDTH, Cards, Sound, card_origin
from memorymatch.mouse import MOUSE_LEFT, MOUSE_MIDDLE, MOUSE_RIGHT, MouseInput

WINDOW_W = 1280
WINDOW_H = 720
FPS = 60
TITLE_BLINK_PERIOD = 60
TITLE_BLINK_VISIBLE = 30

BACKGROUND_COLOR = (128, 128, 128)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
BORDER_WIDTH = 5

BACKGROUND_SCALE = 2.5
TITLE_SCALE = 4
CLICK_SCALE = 2
FACE_SCALE = 0.1
BACK_SCALE = 0.5

SCORE_FONT_SIZE = 80
MESSAGE_FONT_SIZE = 40
_FONT_NAMES = "msgothic,meiryo,yugothic,notosanscjkjp,notosansjp,ipagothic,takaogothic,hiraginosans"


class Scene(enum.Enum):
    LOADING = "loading"
    TITLE = "title"
    PLAYING = "playing"
    RESULT = "result"


def result_message(miss_count: int) -> str:
    """Praise shown on the result screen for a number of misses."""
    if miss_count < 10:
        return "チーター？"
    if miss_count < 20:
        return "天才！！"
    if miss_count < 30:
        return "プレイしてくれてありがとう！"
    if miss_count < 40:
        return "クリアおめでとう"
    return "頑張ったで賞\n受賞！！"


@dataclass
class Assets:
    """Images, sounds and fonts, with images already scaled for drawing."""

    background: pygame.Surface
    title: pygame.Surface
    click: pygame.Surface
    card_back: pygame.Surface
    faces: list[pygame.Surface]
    score_font: pygame.font.Font
    message_font: pygame.font.Font
    sounds: dict[Sound, pygame.mixer.Sound] = field(default_factory=dict)

    @classmethod
    def load(cls, directory: str | Path) -> Assets:
        """Load every asset from a data directory laid out as the game expects."""
        base = Path(directory)

        def image(name: str, scale: float) -> pygame.Surface:
            surface = pygame.image.load(str(base / name))
            if pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
            return pygame.transform.rotozoom(surface, 0, scale)

        sounds: dict[Sound, pygame.mixer.Sound] = {}
        if pygame.mixer.get_init():
            sounds = {
                sound: pygame.mixer.Sound(str(base / "mp" / f"{sound.value}.mp3"))
                for sound in Sound
            }

        if not pygame.font.get_init():
            pygame.font.init()

        return cls(
            background=image("trump_BG.jpg", BACKGROUND_SCALE),
            title=image("mj.png", TITLE_SCALE),
            click=image("click_mj.png", CLICK_SCALE),
            card_back=image("card_back.png", BACK_SCALE),
            faces=[image(f"{face}.png", FACE_SCALE) for face in range(CARD_MAX)],
            score_font=pygame.font.SysFont(_FONT_NAMES, SCORE_FONT_SIZE),
            message_font=pygame.font.SysFont(_FONT_NAMES, MESSAGE_FONT_SIZE),
            sounds=sounds,
        )

    def play(self, sound: Sound) -> None:
        """Play a sound effect if it was loaded."""
        effect = self.sounds.get(sound)
        if effect is not None:
            effect.play()


def _blit_centered(screen: pygame.Surface, surface: pygame.Surface, center: tuple[int, int]) -> None:
    screen.blit(surface, surface.get_rect(center=center))


def _draw_text_centered(
    screen: pygame.Surface, font: pygame.font.Font, text: str, top: int
) -> None:
    lines = [font.render(line, True, WHITE) for line in text.split("\n")]
    width = max(line.get_width() for line in lines)
    left = WINDOW_W // 2 - width // 2
    for line in lines:
        screen.blit(line, (left, top))
        top += line.get_height()


class Game:
    """Scene flow: title, playing the board, and the result screen."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.scene = Scene.LOADING
        self.title_frame = 0
        self.cards = Cards(rng)

    def update(self, clicked: bool, mouse_x: int, mouse_y: int) -> list[Sound]:
        """Advance one frame and return the sounds to play."""
        if self.scene is Scene.LOADING:
            self.scene = Scene.TITLE
        elif self.scene is Scene.TITLE:
            self.title_frame += 1
            if self.title_frame > TITLE_BLINK_PERIOD:
                self.title_frame = 0
            if clicked:
                self.scene = Scene.PLAYING
                self.cards.deal()
        elif self.scene is Scene.PLAYING:
            sounds = self.cards.update(clicked, mouse_x, mouse_y)
            if self.cards.all_matched():
                self.scene = Scene.RESULT
            return sounds
        elif self.scene is Scene.RESULT:
            if clicked:
                self.title_frame = 0
                self.scene = Scene.TITLE
        return []

    def render(self, screen: pygame.Surface, assets: Assets) -> None:
        """Draw the current scene onto ``screen``."""
        screen.fill(BACKGROUND_COLOR)
        center = (WINDOW_W // 2, WINDOW_H // 2)
        _blit_centered(screen, assets.background, center)
        if self.scene is Scene.TITLE:
            _blit_centered(screen, assets.title, center)
            if self.title_frame < TITLE_BLINK_VISIBLE:
                _blit_centered(screen, assets.click, (WINDOW_W // 2, WINDOW_H * 3 // 4))
        elif self.scene is Scene.PLAYING:
            self._render_board(screen, assets)
        elif self.scene is Scene.RESULT:
            miss_count = self.cards.miss_count
            _draw_text_centered(
                screen, assets.score_font, f"お手付きの数：{miss_count}", WINDOW_H * 2 // 5
            )
            _draw_text_centered(
                screen, assets.message_font, result_message(miss_count), WINDOW_H * 3 // 5
            )

    def _render_board(self, screen: pygame.Surface, assets: Assets) -> None:
        for card in self.cards.cards:
            left, top = card_origin(card.column, card.row)
            rect = pygame.Rect(left, top, CARD_WIDTH, CARD_HEIGHT)
            pygame.draw.rect(screen, WHITE, rect)
            _blit_centered(screen, assets.faces[card.face], rect.center)
            if not card.selected and not card.matched:
                _blit_centered(screen, assets.card_back, rect.center)
        for card in self.cards.cards:
            left, top = card_origin(card.column, card.row)
            rect = pygame.Rect(left, top, CARD_WIDTH, CARD_HEIGHT)
            if card.selected:
                pygame.draw.rect(screen, RED, rect, BORDER_WIDTH)
            if card.matched:
                pygame.draw.rect(screen, YELLOW, rect, BORDER_WIDTH)


def _button_state() -> int:
    left, middle, right = pygame.mouse.get_pressed(3)
    return (MOUSE_LEFT if left else 0) | (MOUSE_RIGHT if right else 0) | (MOUSE_MIDDLE if middle else 0)


def run(data_dir: str | Path) -> None:
    """Open the window and play until it is closed or Escape is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
        pygame.display.set_caption("Memory Match")
        assets = Assets.load(data_dir)
        game = Game()
        mouse = MouseInput()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            x, y = pygame.mouse.get_pos()
            mouse.update(_button_state(), x, y)
            for sound in game.update(mouse.is_on(MOUSE_LEFT), x, y):
                assets.play(sound)
            game.render(screen, assets)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Pair-matching card game.")
    parser.add_argument("--data-dir", default="data", help="directory holding images and sounds")
    args = parser.parse_args(argv)
    run(args.data_dir)
    return 0