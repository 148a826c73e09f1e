import logging
from typing import List, Optional

import pygame

from maze_meander.algo.base import Generator
from maze_meander.algo.solvers import solution_coords
from maze_meander.core.grid import Grid
from maze_meander.core.walls import wall_layout

logger = logging.getLogger(__name__)


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160)  # Blue tint
    COLOR_INNER = (90, 70, 150)     # Circle cells (type 0)
    COLOR_START = (40, 160, 80)
    COLOR_FINISH = (200, 60, 60)
    COLOR_SOLUTION = (255, 215, 0)  # Gold

    def __init__(self, grid: Grid, generator: Optional[Generator] = None,
                 show_solution: bool = False, width=1280, height=720):
        self.grid = grid
        self.generator = generator
        self.show_solution = show_solution
        self.solution: List = []
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None
        self.walls = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        self.offset_x = (self.screen_width - self.grid.width * self.cell_size) / 2
        self.offset_y = (self.screen_height - self.grid.height * self.cell_size) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Meander - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        # Grid origin is bottom-left, screen origin is top-left
        sx = wx * self.cell_size + self.offset_x
        sy = (self.grid.height - wy) * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_s:
                self.show_solution = not self.show_solution

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(0.001, min(100.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def visible_range(self):
        start_x = max(0, int(-self.offset_x / self.cell_size))
        end_x = min(self.grid.width, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        # Rows count up from the bottom of the maze
        top_row = self.grid.height - int(-self.offset_y / self.cell_size)
        bottom_row = self.grid.height - int((self.screen_height - self.offset_y) / self.cell_size) - 1
        return start_x, end_x, max(0, bottom_row), min(self.grid.height, top_row)

    def fill_cell(self, x, y, color):
        sx, sy = self.world_to_screen(x, y + 1)
        size = int(self.cell_size) + 1
        pygame.draw.rect(self.surface, color, (int(sx), int(sy), size, size))

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        start_x, end_x, start_y, end_y = self.visible_range()

        # Pass 1 - backgrounds
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                cell = self.grid.cell(x, y)
                if cell.start_area:
                    self.fill_cell(x, y, self.COLOR_START)
                elif cell.finish_area:
                    self.fill_cell(x, y, self.COLOR_FINISH)
                elif cell.visited:
                    self.fill_cell(x, y, self.COLOR_INNER if cell.cell_type == 0 else self.COLOR_VISITED)

        if self.show_solution and self.solution:
            for (px, py) in self.solution:
                if start_x <= px < end_x and start_y <= py < end_y:
                    self.fill_cell(px, py, self.COLOR_SOLUTION)

        # Pass 2 - walls, only once generation is over and zoomed in enough
        if self.walls is None or self.cell_size <= 4.0:
            return
        horizontal, vertical = self.walls
        for x in range(start_x, end_x):
            for y in range(start_y, min(end_y + 1, self.grid.height + 1)):
                if horizontal[x, y]:
                    x0, y0 = self.world_to_screen(x, y)
                    x1, _ = self.world_to_screen(x + 1, y)
                    pygame.draw.line(self.surface, self.COLOR_WALL, (x0, y0), (x1, y0), 1)
        for x in range(start_x, min(end_x + 1, self.grid.width + 1)):
            for y in range(start_y, end_y):
                if vertical[x, y]:
                    x0, y0 = self.world_to_screen(x, y)
                    _, y1 = self.world_to_screen(x, y + 1)
                    pygame.draw.line(self.surface, self.COLOR_WALL, (x0, y0), (x0, y1), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.grid.width * self.grid.height
        status = "Done" if self.gen_finished else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({cells:,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]
        if self.gen_finished and self.solution:
            info.append(f"Solution: {len(self.solution)} cells [S to toggle]")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def on_generation_finished(self):
        self.gen_finished = True
        self.walls = wall_layout(self.grid)
        if self.grid.goal_reached:
            self.solution = solution_coords(self.grid)
        logger.debug("Viewer picked up finished maze (solution %d cells)", len(self.solution))

    def run_loop(self):
        gen_iter = self.generator.run() if self.generator else None
        if gen_iter is None:
            self.on_generation_finished()

        while self.running:
            self.handle_input()

            if gen_iter and not self.gen_finished:
                try:
                    for _ in range(10):
                        next(gen_iter)
                except StopIteration:
                    self.on_generation_finished()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
