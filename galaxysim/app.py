"""Interactive window that runs and displays the galaxy simulation."""

from __future__ import annotations

import argparse

import pygame

from galaxysim.galaxy import Galaxy
from galaxysim.render import RenderLayer
from galaxysim.simulation import Simulation

WINDOW_TITLE = "Maze Algorithms"
DEFAULT_WIDTH = 1000
DEFAULT_STARS = 2000
DEFAULT_FPS = 120

_PANEL_FRACTION = 0.2
_CONTROLS_HEIGHT_FRACTION = 0.2
_DATA_HEIGHT_FRACTION = 0.1
_PANEL_COLOUR = (40, 40, 40, 128)
_BUTTON_COLOUR = (70, 90, 140)
_TEXT_COLOUR = (255, 255, 255)
_PADDING = 6


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command-line options."""
    parser = argparse.ArgumentParser(
        prog="galaxysim", description="Simulate and display a galaxy of stars."
    )
    parser.add_argument("--stars", type=_non_negative_int, default=DEFAULT_STARS,
                        help="number of stars (default: %(default)s)")
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH,
                        help="window width in pixels (default: %(default)s)")
    parser.add_argument("--fps", type=_positive_int, default=DEFAULT_FPS,
                        help="frame rate limit (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for star generation")
    parser.add_argument("--frames", type=_positive_int, default=None,
                        help="stop after this many frames")
    return parser.parse_args(argv)


def _draw_panel(
    window: pygame.Surface, rect: pygame.Rect, font: pygame.font.Font, lines: list[str]
) -> int:
    """Draw a translucent panel with text lines; return the y below the text."""
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill(_PANEL_COLOUR)
    y = _PADDING
    for line in lines:
        rendered = font.render(line, True, _TEXT_COLOUR)
        panel.blit(rendered, (_PADDING, y))
        y += rendered.get_height() + _PADDING
    window.blit(panel, rect.topleft)
    return rect.top + y


def _draw_button(
    window: pygame.Surface, font: pygame.font.Font, label: str, topleft: tuple[int, int]
) -> pygame.Rect:
    rendered = font.render(label, True, _TEXT_COLOUR)
    rect = rendered.get_rect(topleft=topleft).inflate(2 * _PADDING, _PADDING)
    rect.topleft = topleft
    pygame.draw.rect(window, _BUTTON_COLOUR, rect)
    window.blit(rendered, (rect.left + _PADDING, rect.top + _PADDING // 2))
    return rect


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the simulation until it is closed."""
    args = parse_args(argv)
    window_width = args.width
    window_height = int(window_width * 0.8)

    pygame.init()
    try:
        window = pygame.display.set_mode((window_width, window_height), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()

        galaxy = Galaxy(args.stars, window_width, seed=args.seed)
        simulation = Simulation(galaxy)
        galaxy.init_stars()
        render = RenderLayer(window, galaxy)

        button_rect = pygame.Rect(0, 0, 0, 0)
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif (
                    event.type == pygame.MOUSEBUTTONDOWN
                    and event.button == 1
                    and button_rect.collidepoint(event.pos)
                ):
                    galaxy.init_stars()
                    render.build_stars()
            if not running:
                break

            delta_time = clock.tick(args.fps) / 1000
            window = pygame.display.get_surface()
            width, height = window.get_size()
            window.fill((0, 0, 0))

            panel_width = int(width * _PANEL_FRACTION)
            viewport = pygame.Rect(panel_width, 0, width - panel_width, height)
            render.surface = window.subsurface(viewport)
            render.view_size = (width, height)

            simulation.update_forces()
            simulation.update_euler(delta_time)
            render.build_stars()
            render.render_stars()

            controls_rect = pygame.Rect(
                0, 0, panel_width, int(window_height * _CONTROLS_HEIGHT_FRACTION)
            )
            text_bottom = _draw_panel(window, controls_rect, font, ["Controls"])
            button_rect = _draw_button(window, font, "Test", (_PADDING, text_bottom))

            frame_rate = 1 / delta_time if delta_time > 0 else 0.0
            data_rect = pygame.Rect(
                0,
                controls_rect.bottom,
                panel_width,
                int(window_height * _DATA_HEIGHT_FRACTION),
            )
            _draw_panel(window, data_rect, font, [f"Frame Rate: {frame_rate:.1f} FPS"])

            pygame.display.flip()

            frames += 1
            if args.frames is not None and frames >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())