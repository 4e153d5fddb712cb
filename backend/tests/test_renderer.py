"""
Tests for the board renderer.
"""

import pytest
import sys
import os
from unittest.mock import patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Game, GameState, RIGHT
from services.renderer import BoardRenderer, ColorScheme, HUD_HEIGHT, darken_color


def cell_center(renderer, x, y):
    return (
        x * renderer.cell_size + renderer.cell_size // 2,
        HUD_HEIGHT + y * renderer.cell_size + renderer.cell_size // 2,
    )


def make_state():
    return Game(4, 3, walls=[(3, 0)], snake=[(1, 1), (0, 1)], reward=(2, 2)).snapshot()


class TestBoardRenderer:
    """Tests for BoardRenderer."""

    def test_invalid_cell_size_raises(self):
        """Cells need a positive pixel size."""
        with pytest.raises(ValueError):
            BoardRenderer(cell_size=0)

    def test_frame_size(self):
        """Frames are cell_size per cell plus the HUD strip."""
        renderer = BoardRenderer(cell_size=10)
        img = renderer.render_frame(make_state())

        assert img.size == (40, 30 + HUD_HEIGHT)

    def test_cells_are_coloured(self):
        """Walls, reward, head and body use their scheme colours."""
        renderer = BoardRenderer(cell_size=20)
        img = renderer.render_frame(make_state())

        assert img.getpixel(cell_center(renderer, 3, 0)) == ColorScheme.WALL
        assert img.getpixel(cell_center(renderer, 2, 2)) == ColorScheme.REWARD
        assert img.getpixel(cell_center(renderer, 1, 1)) == darken_color(ColorScheme.SNAKE)
        assert img.getpixel(cell_center(renderer, 0, 1)) == ColorScheme.SNAKE
        assert img.getpixel(cell_center(renderer, 0, 0)) == ColorScheme.BACKGROUND

    def test_off_board_head_is_skipped(self):
        """A snake that left the board renders without error."""
        state = GameState(
            tick=3, width=3, height=3, walls=[], snake=[(-1, 0), (0, 0)],
            reward=(2, 2), score=0, direction=RIGHT, over=True, death_reason="bounds",
        )
        renderer = BoardRenderer(cell_size=10)
        img = renderer.render_frame(state)

        assert img.getpixel(cell_center(renderer, 0, 0)) == ColorScheme.SNAKE

    def test_save_frames(self, tmp_path):
        """save_frames() writes numbered PNG files."""
        renderer = BoardRenderer(cell_size=8)
        paths = renderer.save_frames([make_state(), make_state()], str(tmp_path))

        assert len(paths) == 2
        assert all(os.path.exists(p) for p in paths)
        assert os.path.basename(paths[0]) == "frame_00000.png"

    def test_generate_video_without_frames_raises(self, tmp_path):
        """An empty replay cannot be encoded."""
        with pytest.raises(ValueError):
            BoardRenderer().generate_video([], str(tmp_path / "out.mp4"))

    @patch('services.renderer.ImageSequenceClip')
    def test_generate_video(self, mock_clip, tmp_path):
        """generate_video() hands rendered frames to MoviePy."""
        output = str(tmp_path / "replay.mp4")
        result = BoardRenderer(cell_size=8).generate_video([make_state(), make_state()], output, fps=4)

        assert result == output
        frames = mock_clip.call_args[0][0]
        assert len(frames) == 2
        assert mock_clip.call_args[1]["fps"] == 4
        mock_clip.return_value.write_videofile.assert_called_once()
