import random
from typing import List, Optional, Tuple

import pygame

from fastrtree import RTree

Box = Tuple[float, float, float, float]

# ---------------------------- Drawing helpers ---------------------------- #


def normalize(x0: int, y0: int, x1: int, y1: int) -> Box:
    """Order drag corners into (min_x, min_y, max_x, max_y)."""
    return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))


def to_pygame_rect(box: Box) -> pygame.Rect:
    min_x, min_y, max_x, max_y = box
    return pygame.Rect(
        int(min_x), int(min_y), max(1, int(max_x - min_x)), max(1, int(max_y - min_y))
    )


# ------------------------------ RectViewer ------------------------------ #


class RectViewer:
    def __init__(self, screen, width, height, max_children=4):
        self.screen = screen
        self.width = width
        self.height = height
        self.tree = RTree(max_children)
        self.hits: List[Box] = []
        self.query: Optional[Box] = None

    def add_rect(self, box: Box):
        # Zero-area drags are still valid rectangles
        self.tree.insert(box)
        self.refresh_hits()

    def add_random(self, n: int = 25):
        for _ in range(n):
            x = random.uniform(0, self.width - 40)
            y = random.uniform(0, self.height - 40)
            self.tree.insert((x, y, x + random.uniform(4, 40), y + random.uniform(4, 40)))
        self.refresh_hits()

    def set_query(self, box: Optional[Box]):
        self.query = box
        self.refresh_hits()

    def refresh_hits(self):
        self.hits = self.tree.search(self.query) if self.query is not None else []

    def draw(self):
        for b in self.tree.get_all_node_boundaries():
            pygame.draw.rect(self.screen, (180, 180, 220), to_pygame_rect(b), 1)
        for r in self.tree:
            pygame.draw.rect(self.screen, (60, 60, 60), to_pygame_rect(r), 1)
        for r in self.hits:
            pygame.draw.rect(self.screen, (220, 40, 40), to_pygame_rect(r), 2)
        if self.query is not None:
            pygame.draw.rect(self.screen, (40, 160, 40), to_pygame_rect(self.query), 1)


# ------------------------------- main ------------------------------- #


def main():
    pygame.init()
    width, height = 800, 600
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption("fastrtree - left drag: insert, right drag: search, R: random")
    clock = pygame.time.Clock()
    viewer = RectViewer(screen, width, height)

    insert_start = None
    query_start = None
    running = True
    while running:
        clock.tick(60)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                viewer.add_random()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    insert_start = event.pos
                elif event.button == 3:
                    query_start = event.pos
            elif event.type == pygame.MOUSEMOTION and query_start is not None:
                viewer.set_query(normalize(*query_start, *event.pos))
            elif event.type == pygame.MOUSEBUTTONUP:
                if event.button == 1 and insert_start is not None:
                    viewer.add_rect(normalize(*insert_start, *event.pos))
                    insert_start = None
                elif event.button == 3:
                    query_start = None

        screen.fill((255, 255, 255))
        viewer.draw()
        if insert_start is not None:
            box = normalize(*insert_start, *pygame.mouse.get_pos())
            pygame.draw.rect(screen, (40, 40, 200), to_pygame_rect(box), 1)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
