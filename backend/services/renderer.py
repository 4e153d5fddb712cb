"""
Rendering service for GridSnake.

Turns GameState snapshots into pictures:
1. Rendering each frame using PIL (Pillow)
2. Optionally writing frames as PNG files
3. Encoding frames to video using MoviePy/FFmpeg

The core never imports this module; the driver hands it snapshots.
Grid coordinates map straight to pixels (y grows downwards on both).
"""

import logging
import os
from typing import Iterable, List, Sequence, Tuple

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image, ImageDraw, ImageFont

from domain.game_state import GameState

logger = logging.getLogger(__name__)

# Render settings
DEFAULT_FPS = 4  # 250 ms ticks
CELL_SIZE = 30  # 16 cells * 30 px = 480 px window
HUD_HEIGHT = 28


class ColorScheme:
    """Colour configuration for board elements"""

    BACKGROUND = (50, 50, 50)
    WALL = (100, 100, 200)
    SNAKE = (100, 200, 100)
    REWARD = (200, 100, 100)
    GRID_LINE = (60, 60, 60)
    HUD_BG = (30, 30, 30)
    TEXT = (230, 230, 230)
    GAME_OVER_TEXT = (220, 90, 90)


def darken_color(color: Tuple[int, int, int], amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken an RGB colour by a given amount"""
    return tuple(max(0, int(c * (1 - amount))) for c in color)


class BoardRenderer:
    """Render GameState snapshots to PIL images"""

    def __init__(self, cell_size: int = CELL_SIZE, show_grid: bool = True):
        if cell_size <= 0:
            raise ValueError("cell_size must be > 0")
        self.cell_size = cell_size
        self.show_grid = show_grid
        self.font = ImageFont.load_default()

    def frame_size(self, state: GameState) -> Tuple[int, int]:
        return state.width * self.cell_size, state.height * self.cell_size + HUD_HEIGHT

    def cell_box(self, x: int, y: int, padding: int = 0) -> List[int]:
        """Pixel rectangle [x0, y0, x1, y1] of a grid cell"""
        left = x * self.cell_size
        top = HUD_HEIGHT + y * self.cell_size
        return [
            left + padding,
            top + padding,
            left + self.cell_size - 1 - padding,
            top + self.cell_size - 1 - padding,
        ]

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.frame_size(state), ColorScheme.BACKGROUND)
        draw = ImageDraw.Draw(img)

        self._draw_hud(draw, state)

        if self.show_grid:
            self._draw_grid(draw, state)

        for wx, wy in state.walls:
            draw.rectangle(self.cell_box(wx, wy), fill=ColorScheme.WALL)

        if state.reward is not None:
            rx, ry = state.reward
            draw.rectangle(self.cell_box(rx, ry, padding=2), fill=ColorScheme.REWARD)

        self._draw_snake(draw, state)
        return img

    def _draw_hud(self, draw: ImageDraw.ImageDraw, state: GameState):
        width, _ = self.frame_size(state)
        draw.rectangle([0, 0, width, HUD_HEIGHT - 1], fill=ColorScheme.HUD_BG)
        draw.text((8, 8), f"Score: {state.score}", fill=ColorScheme.TEXT, font=self.font)

        if state.over:
            label = "Board cleared!" if state.won else "Game over"
            bbox = draw.textbbox((0, 0), label, font=self.font)
            text_width = bbox[2] - bbox[0]
            draw.text((width - text_width - 8, 8), label, fill=ColorScheme.GAME_OVER_TEXT, font=self.font)

    def _draw_grid(self, draw: ImageDraw.ImageDraw, state: GameState):
        board_w = state.width * self.cell_size
        board_h = state.height * self.cell_size
        for i in range(state.width + 1):
            x = i * self.cell_size
            draw.line([x, HUD_HEIGHT, x, HUD_HEIGHT + board_h], fill=ColorScheme.GRID_LINE, width=1)
        for i in range(state.height + 1):
            y = HUD_HEIGHT + i * self.cell_size
            draw.line([0, y, board_w, y], fill=ColorScheme.GRID_LINE, width=1)

    def _draw_snake(self, draw: ImageDraw.ImageDraw, state: GameState):
        # Body first, head last so it stays on top
        for idx in range(len(state.snake) - 1, -1, -1):
            x, y = state.snake[idx]
            if not (0 <= x < state.width and 0 <= y < state.height):
                continue
            color = darken_color(ColorScheme.SNAKE) if idx == 0 else ColorScheme.SNAKE
            draw.rectangle(self.cell_box(x, y, padding=1), fill=color)

    def save_frames(self, states: Iterable[GameState], output_dir: str, prefix: str = "frame") -> List[str]:
        """
        Write one PNG per snapshot.

        Returns:
            List of written file paths, in order
        """
        os.makedirs(output_dir, exist_ok=True)
        paths = []
        for i, state in enumerate(states):
            path = os.path.join(output_dir, f"{prefix}_{i:05d}.png")
            self.render_frame(state).save(path)
            paths.append(path)
        logger.info(f"Wrote {len(paths)} frames to {output_dir}")
        return paths

    def generate_video(self, states: Sequence[GameState], output_path: str, fps: int = DEFAULT_FPS) -> str:
        """
        Encode a sequence of snapshots into an MP4 file.

        Args:
            states: snapshots to render, in order
            output_path: where to write the video
            fps: frames per second

        Returns:
            Path to the generated video file
        """
        if not states:
            raise ValueError("Cannot generate a video without frames.")

        logger.info(f"Rendering {len(states)} frames...")
        frames = [np.array(self.render_frame(state)) for state in states]

        # Frames of different boards cannot share one clip
        if len({frame.shape for frame in frames}) > 1:
            raise ValueError("All frames must come from boards of the same size.")

        out_dir = os.path.dirname(output_path)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)

        clip = ImageSequenceClip(frames, fps=fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
