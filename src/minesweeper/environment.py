"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the board engine.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .tui import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals tile (i // width, i % width).
        Action i >= width * height toggles the flag on tile
        i - width * height.

    Rewards:
        - +1 for a reveal that opens safe tiles
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )

        # One reveal and one flag action per tile
        self._num_tiles = self.config.size
        self.action_space = spaces.Discrete(2 * self._num_tiles)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Seeds a fresh random source for the board. Without a
                seed the board keeps drawing from its current source.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.board = Board(self.config, random.Random(seed))
        else:
            self.board.restart()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1

        if action < self._num_tiles:
            reward = self._reveal_reward(int(action))
        else:
            reward = self._flag_reward(int(action) - self._num_tiles)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _reveal_reward(self, position: int) -> float:
        """Reveal a tile and score the outcome."""
        revealed = self.board.reveal_position(position)

        if not revealed:
            return -0.1
        if self.board.is_lost:
            return -10.0
        if self.board.is_won:
            return 10.0
        return 1.0

    def _flag_reward(self, position: int) -> float:
        """Toggle a flag; only a refused toggle is penalized."""
        if not self.board.flag_position(position):
            return -0.1
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        revealed = sum(1 for _, _, view in self.board.tiles() if view.revealed)

        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": self.config.size - self.config.num_mines,
            "flags": self.board.flag_count(),
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render board as text, fully revealed once the game is over."""
        return render_board(
            self.board, reveal_all=not self.board.is_playing
        )

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of useful actions.

        Returns:
            Boolean array where True = action changes the board: hidden
            tiles can be revealed, and any unrevealed tile can be
            flagged or unflagged.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.width + col] = True
        for row, col, view in self.board.tiles():
            if not view.revealed:
                mask[self._num_tiles + row * self.config.width + col] = True
        return mask



# ============================================================================
# Random Play
# ============================================================================

def play_random_episode(
    env: MinesweeperEnv,
    rng: np.random.Generator,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Play one episode choosing random reveal actions.

    A board that is already decided after reset (for example one with
    no safe tiles) is not stepped.

    Args:
        env: Environment to play in.
        rng: Source for choosing among revealable tiles.
        seed: Optional seed passed to env.reset().

    Returns:
        Info dict of the final state.
    """
    _, info = env.reset(seed=seed)
    num_tiles = env.config.size
    done = not env.board.is_playing

    while not done:
        reveal_mask = env.get_action_mask()[:num_tiles]
        action = int(rng.choice(np.where(reveal_mask)[0]))
        _, _, terminated, truncated, info = env.step(action)
        done = terminated or truncated

    return info
