import numpy as np
import pygame

from prim_maze.core.grid import Grid
from prim_maze.core.analysis import calculate_stats

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_FLOOR = (60, 100, 160) # Blue tint
    COLOR_HOLE = (120, 30, 30)

    def __init__(self, maze: np.ndarray, width=1280, height=720):
        self.maze = np.asarray(maze)
        self.rows, self.cols = self.maze.shape
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.stats = calculate_stats(self.maze)
        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.cols
        zoom_y = available_h / self.rows

        # Taking minimum zoom to fit both dimensions
        self.cell_size = max(1.0, min(zoom_x, zoom_y))

        # Center
        total_maze_w = self.cols * self.cell_size
        total_maze_h = self.rows * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Prim Maze - {self.cols}x{self.rows}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()

                # World coord before zoom
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed

                # Clamp zoom
                self.cell_size = max(1.0, min(100.0, self.cell_size))

                # Adjust offset to keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_maze(self, surface):
        """
        Each cell is a 3x3 block like the ASCII rendering: the centre and
        every doorway side are floor, everything else stays background.
        Cells without any door are filled with the hole colour.
        """
        surface.fill(self.COLOR_BG)
        sw, sh = surface.get_size()
        unit = self.cell_size / 3.0

        # Culling: Calculate visible cell range
        start_x = max(0, int((-self.offset_x) / self.cell_size))
        start_y = max(0, int((-self.offset_y) / self.cell_size))
        end_x = min(self.cols, int((sw - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.rows, int((sh - self.offset_y) / self.cell_size) + 1)

        size = int(unit) + 1
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                cell = int(self.maze[y, x])
                px = x * self.cell_size + self.offset_x
                py = y * self.cell_size + self.offset_y

                if cell == 0:
                    full = int(self.cell_size) + 1
                    pygame.draw.rect(surface, self.COLOR_HOLE, (int(px), int(py), full, full))
                    continue

                pygame.draw.rect(surface, self.COLOR_FLOOR, (int(px + unit), int(py + unit), size, size))
                for dir_bit in (Grid.UP, Grid.DOWN, Grid.RIGHT, Grid.LEFT):
                    if cell & dir_bit:
                        bx = px + (1 + Grid.DX[dir_bit]) * unit
                        by = py + (1 + Grid.DY[dir_bit]) * unit
                        pygame.draw.rect(surface, self.COLOR_FLOOR, (int(bx), int(by), size, size))

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        info = [
            f"FPS: {fps}",
            f"Size: {self.cols}x{self.rows} ({self.maze.size:,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Dead ends: {self.stats['dead_ends']}",
            f"Holes: {self.stats['isolated']}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.draw_maze(self.surface)
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
