# cave_visual.py
# Pygame views for the Speleo cave simulator
#   show_cave  : explored map after a mode A run
#   show_sweep : success rate curve after a mode C run

import pygame

import cave_config as cc
import cave_text as ct


# ---------- LAYOUT ----------

MARGIN = 40


def board_rect(size: int, width: int, height: int) -> pygame.Rect:
    """Largest square board of size x size cells that fits the window."""
    side = max(1, min(width, height) - 2 * MARGIN)
    cell = max(1, side // size)
    board = cell * size
    return pygame.Rect((width - board) // 2, (height - board) // 2, board, board)


def cell_rect(board: pygame.Rect, size: int, row: int, col: int) -> pygame.Rect:
    cell = board.width // size
    return pygame.Rect(board.left + col * cell, board.top + row * cell, cell, cell)


def cell_color(cell) -> tuple[int, int, int]:
    if cell.obstructed:
        return cc.ROCK_COLOR
    if cell.visited:
        return cc.VISITED_COLOR
    return cc.OPEN_COLOR


def curve_points(results, plot: pygame.Rect) -> list[tuple[int, int]]:
    """Map (accessibility, success_rate) pairs into the plot rectangle."""
    points = []
    for stats in results:
        x = plot.left + round(stats.accessibility * plot.width)
        y = plot.bottom - round(stats.success_rate * plot.height)
        points.append((x, y))
    return points


# ---------- DRAWING ----------

def draw_cave(screen, cave, font=None, title: str = "") -> None:
    width, height = screen.get_size()
    screen.fill(cc.BG_COLOR)

    board = board_rect(cave.size, width, height)
    for strip in cave:
        for c in strip:
            rect = cell_rect(board, cave.size, c.row, c.col)
            pygame.draw.rect(screen, cell_color(c), rect)
            if rect.width > 4:
                pygame.draw.rect(screen, cc.GRID_EDGE, rect, 1)

    if font is not None and title:
        screen.blit(font.render(title, True, cc.TEXT_COLOR), (20, 10))


def draw_sweep(screen, results, font=None) -> None:
    width, height = screen.get_size()
    screen.fill(cc.BG_COLOR)

    plot = pygame.Rect(MARGIN, MARGIN, width - 2 * MARGIN, height - 2 * MARGIN)
    pygame.draw.line(screen, cc.AXIS_COLOR, plot.bottomleft, plot.bottomright, 1)
    pygame.draw.line(screen, cc.AXIS_COLOR, plot.bottomleft, plot.topleft, 1)

    points = curve_points(results, plot)
    if len(points) >= 2:
        pygame.draw.lines(screen, cc.CURVE_COLOR, False, points, 2)
    for pt in points:
        pygame.draw.circle(screen, cc.CURVE_COLOR, pt, 2)

    if font is not None:
        label = "success rate vs accessibility"
        screen.blit(font.render(label, True, cc.TEXT_COLOR), (MARGIN, 10))


# ---------- MAIN LOOPS ----------

def _view_loop(caption: str, draw) -> None:
    pygame.init()
    screen = pygame.display.set_mode((cc.WINDOW_WIDTH, cc.WINDOW_HEIGHT))
    pygame.display.set_caption(caption)
    font = pygame.font.SysFont(None, 26)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False

        draw(screen, font)
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()


def show_cave(cave, exit_reached: bool) -> None:
    title = ct.exit_banner(exit_reached)
    _view_loop(
        "Speleo - explored cave",
        lambda screen, font: draw_cave(screen, cave, font, f"{title}  (Q / ESC to close)"),
    )


def show_sweep(results) -> None:
    results = list(results)
    _view_loop(
        "Speleo - crossing probability",
        lambda screen, font: draw_sweep(screen, results, font),
    )
