import os
from typing import List, Sequence

import cv2
import numpy as np

from water_pouring.main.solver.models import Container, PouringSolution


class SolutionVisualizer:
    """Visualizes pouring solutions as one row of containers per step."""

    MAX_CONTAINER_HEIGHT = 90
    CONTAINER_WIDTH = 50
    CONTAINER_GAP = 30
    LABEL_WIDTH = 170
    ROW_PADDING = 35
    MARGIN = 20

    WATER_COLOR = (200, 140, 40)  # BGR
    TARGET_COLOR = (80, 160, 80)
    OUTLINE_COLOR = (40, 40, 40)
    TEXT_COLOR = (60, 60, 60)

    def __init__(self, output_dir: str = 'output'):
        self.output_dir = output_dir

    def visualize_solution(self, solution: PouringSolution, filename: str) -> List[str]:
        """Render the solution and write it to output_dir. Returns written filenames."""
        os.makedirs(self.output_dir, exist_ok=True)

        img = self.render_solution(solution)
        filepath = os.path.join(self.output_dir, filename)
        cv2.imwrite(filepath, img)

        return [filename]

    def render_solution(self, solution: PouringSolution) -> np.ndarray:
        """
        Create an image of the replayed state trace.

        Rows: initial state, one row per move, and a final target row.
        Unsolved puzzles show the initial and target rows only.
        """
        states = solution.states()
        labels = ["start"] + [f"{i}: {move}" for i, move in enumerate(solution.moves or [], start=1)]

        n_containers = len(solution.initial)
        max_capacity = max(c.capacity for c in solution.initial) or 1
        scale = self.MAX_CONTAINER_HEIGHT / max_capacity

        row_height = self.MAX_CONTAINER_HEIGHT + self.ROW_PADDING
        n_rows = len(states) + 1

        img_width = (self.MARGIN * 2 + self.LABEL_WIDTH
                     + n_containers * (self.CONTAINER_WIDTH + self.CONTAINER_GAP))
        img_height = self.MARGIN * 2 + 25 + n_rows * row_height

        img = np.ones((img_height, img_width, 3), dtype=np.uint8) * 255

        cv2.putText(img, f"Status: {solution.status.value}", (self.MARGIN, self.MARGIN + 10),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, (0, 0, 0), 1, cv2.LINE_AA)

        top = self.MARGIN + 25
        for row, (label, state) in enumerate(zip(labels, states)):
            self._draw_row(img, state, label, top + row * row_height, scale, self.WATER_COLOR)

        self._draw_row(img, solution.target, "target", top + len(states) * row_height,
                       scale, self.TARGET_COLOR)

        return img

    def _draw_row(self, img: np.ndarray, state: Sequence[Container], label: str,
                  y: int, scale: float, color) -> None:
        """Draw one state: label on the left, containers bottom-aligned."""
        baseline = y + self.MAX_CONTAINER_HEIGHT

        cv2.putText(img, label, (self.MARGIN, baseline - self.MAX_CONTAINER_HEIGHT // 2),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.45, self.TEXT_COLOR, 1, cv2.LINE_AA)

        for index, container in enumerate(state):
            x = self.MARGIN + self.LABEL_WIDTH + index * (self.CONTAINER_WIDTH + self.CONTAINER_GAP)

            height = max(1, int(round(container.capacity * scale)))
            level = int(round(container.current * scale))

            if level > 0:
                cv2.rectangle(img, (x, baseline - level), (x + self.CONTAINER_WIDTH, baseline),
                              color, -1)
            cv2.rectangle(img, (x, baseline - height), (x + self.CONTAINER_WIDTH, baseline),
                          self.OUTLINE_COLOR, 2)

            text = f"{container.current}/{container.capacity}"
            cv2.putText(img, text, (x + 4, baseline + 16),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.4, self.TEXT_COLOR, 1, cv2.LINE_AA)

