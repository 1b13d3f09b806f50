"""
Video Generation Service for Snake game replays

Generates MP4 videos from the snapshots a game records:
1. Rendering each snapshot with BoardRenderer (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg
"""

import os
import logging
import tempfile
import uuid
from typing import List, Optional, Sequence

import numpy as np
from moviepy import ImageSequenceClip
from PIL import Image, ImageDraw

from domain.game_state import GameState
from services.board_renderer import BoardRenderer, hex_to_rgb

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 8
STATUS_BAR_HEIGHT = 28
STATUS_BAR_COLOR = "#1a1f2e"
STATUS_TEXT_COLOR = "#d1d5db"


class ReplayVideoGenerator:
    """Generate MP4 videos from recorded game snapshots"""

    def __init__(self, fps: int = DEFAULT_FPS, renderer: Optional[BoardRenderer] = None):
        self.fps = fps
        self.renderer = renderer or BoardRenderer()

    def render_frame(self, state: GameState) -> Image.Image:
        """Render the board with a status bar (score, high score, length) underneath"""
        board = self.renderer.render(state)

        # Even dimensions keep libx264 happy
        width = board.width + (board.width % 2)
        height = board.height + STATUS_BAR_HEIGHT
        height += height % 2

        frame = Image.new('RGB', (width, height), hex_to_rgb(STATUS_BAR_COLOR))
        frame.paste(board, (0, 0))

        draw = ImageDraw.Draw(frame)
        status = f"Score {state.score}  Best {state.high_score}  Length {state.length}"
        if state.game_over and state.message:
            status = state.message
        draw.text((6, board.height + 6), status, fill=hex_to_rgb(STATUS_TEXT_COLOR))

        return frame

    def render_frames(self, states: Sequence[GameState]) -> List[np.ndarray]:
        frames = []
        for i, state in enumerate(states):
            if i % 50 == 0:
                logger.info(f"Rendering frame {i + 1}/{len(states)}")
            frames.append(np.array(self.render_frame(state)))
        return frames

    def generate_video(
        self,
        states: Sequence[GameState],
        output_path: Optional[str] = None
    ) -> str:
        """
        Generate a video from recorded snapshots

        Args:
            states: Snapshots in playback order (SnakeGame.history)
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        if not states:
            raise ValueError("Cannot generate a replay video without any frames")

        logger.info(f"Rendering {len(states)} frames")
        frames = self.render_frames(states)

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"snake_{uuid.uuid4().hex}.mp4")

        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
