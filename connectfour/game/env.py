"""
env.py - Gymnasium environment against the heuristic opponent

The agent plays Player.HUMAN; after each accepted agent move the
heuristic answers immediately as Player.COMPUTER. Useful for pitting
learned or scripted players against the built-in opponent.
"""

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from connectfour.ai.heuristic import choose_column
from connectfour.debug import debug
from connectfour.game.rules import GameState
from connectfour.utils import ROWS, COLS, Player, Phase


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Observation is the stored owner grid (0 empty, 1 agent, 2 heuristic),
    action is a column index.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, rows: int = ROWS, cols: int = COLS,
                 render_mode: Optional[str] = None,
                 agent_first: Optional[bool] = None):
        """
        Args:
            rows: Number of board rows
            cols: Number of board columns
            render_mode: 'ascii', 'human' or None
            agent_first: Force who opens; random on each reset if None
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        self.rows = rows
        self.cols = cols
        self.render_mode = render_mode
        self.agent_first = agent_first

        self.action_space = spaces.Discrete(cols)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(rows, cols), dtype=np.int8
        )

        self.state: Optional[GameState] = None

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.0
        self.reward_invalid_move = -0.5
        self.reward_step = 0.0

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        super().reset(seed=seed)

        self.state = GameState(self.rows, self.cols, rng=self.np_random)
        first = None
        if self.agent_first is not None:
            first = Player.HUMAN if self.agent_first else Player.COMPUTER
        self.state.reset(first)

        if self.state.turn == Player.COMPUTER:
            self._opponent_move()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        if self.state is None:
            raise RuntimeError("Call reset() before step()")

        action = int(action)
        if not self.action_space.contains(action) or self.state.board.is_column_full(action) \
                or self.state.is_over:
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        self.state.attempt_move(action)
        if not self.state.is_over:
            self._opponent_move()

        reward = self.reward_step
        terminated = self.state.is_over
        if self.state.phase == Phase.WON:
            reward = self.reward_win if self.state.winner == Player.HUMAN else self.reward_lose
        elif self.state.phase == Phase.DRAWN:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Episode finished: {self.state.phase.name} "
                       f"{self.state.winner.name if self.state.winner else ''}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def _opponent_move(self):
        column = choose_column(self.state.board, Player.HUMAN, Player.COMPUTER, self.np_random)
        self.state.attempt_move(column)

    def render(self) -> Optional[str]:
        if self.render_mode is None or self.state is None:
            return None
        if self.render_mode == "ascii":
            return self.state.render()
        print(self.state.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.state.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        return {
            'valid_moves': [] if self.state.is_over else self.state.board.available_columns(),
            'phase': self.state.phase.name,
            'winner': self.state.winner.name if self.state.winner else None,
            'winning_cells': self.state.board.winning_cells(),
            'last_move': self.state.last_move,
            'moves_made': self.state.moves_made,
        }
