"""
cli.py - Command-line front-end for Connect Four

``play`` runs an interactive game against the heuristic opponent in the
terminal; ``benchmark`` pits the heuristic against itself and reports
results and timing; ``evaluate`` runs a random agent through the
Gymnasium environment against the heuristic.
"""

import argparse
import sys
import time
from typing import List, Optional

import numpy as np

from connectfour.ai.heuristic import HeuristicPlayer
from connectfour.debug import debug, DebugLevel
from connectfour.game.env import ConnectFourEnv
from connectfour.game.rules import new_game
from connectfour.interfaces.driver import TurnDriver
from connectfour.utils import ROWS, COLS, DELAY_COMP, Player, Phase

TICK_SECONDS = 0.05


class SimpleCLI:
    """Terminal interface for playing and exercising the opponent."""

    def __init__(self):
        self.args = None
        self.driver: Optional[TurnDriver] = None

    def parse_args(self, argv: Optional[List[str]] = None) -> argparse.Namespace:
        parser = argparse.ArgumentParser(description='Connect Four against the computer')
        parser.add_argument('--rows', type=int, default=ROWS, help='Board rows')
        parser.add_argument('--cols', type=int, default=COLS, help='Board columns')
        parser.add_argument('--seed', type=int, default=None, help='Random seed')
        parser.add_argument('--debug', action='store_true', help='Shortcut for --debug-level debug')
        parser.add_argument('--debug-level', default='warning',
                            choices=[level.name.lower() for level in DebugLevel],
                            help='Logging level')
        parser.add_argument('--log-file', default=None, help='Also log to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a game interactively')
        play_parser.add_argument('--delay', type=float, default=DELAY_COMP,
                                 help='Seconds the computer thinks before moving')
        play_parser.add_argument('--first', choices=['human', 'computer', 'random'],
                                 default='random', help='Who moves first')

        benchmark_parser = subparsers.add_parser('benchmark', help='Heuristic self-play')
        benchmark_parser.add_argument('--games', type=int, default=100,
                                      help='Number of games to play')

        evaluate_parser = subparsers.add_parser('evaluate',
                                                help='Random agent vs the heuristic in the Gymnasium env')
        evaluate_parser.add_argument('--episodes', type=int, default=100,
                                     help='Number of episodes to run')

        self.args = parser.parse_args(argv)
        self.configure_debug()
        return self.args

    def configure_debug(self):
        level = DebugLevel.DEBUG if self.args.debug else DebugLevel[self.args.debug_level.upper()]
        debug.configure(level=level, log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        if not self.args:
            self.parse_args(argv)

        if self.args.command == 'play':
            self.play_game()
        elif self.args.command == 'evaluate':
            self.evaluate()
        elif self.args.command == 'benchmark':
            self.benchmark()
        else:
            print("Please specify a command. Use --help for options.")
            return 1
        return 0

    def play_game(self):
        rng = np.random.default_rng(self.args.seed)
        self.driver = TurnDriver(self.args.rows, self.args.cols, self.args.delay, rng)
        first = {'human': Player.HUMAN, 'computer': Player.COMPUTER}.get(self.args.first)

        print("Starting a new Connect Four game!")
        print(f"You are {Player.HUMAN}, the computer is {Player.COMPUTER}.")
        print(f"Enter a column number (0-{self.args.cols - 1}), 'r' to restart or 'q' to quit.")
        self.driver.new_game(first)

        while True:
            print(self.driver.board.render())

            if self.driver.game.is_over:
                print(self.driver.status_text())
                if not self.ask_yes_no("Play again? [y/n]: "):
                    return
                self.driver.new_game(first)
                continue

            if self.driver.humans_turn:
                move = self.get_human_move()
                if move == 'q':
                    print("Quitting game.")
                    return
                if move == 'r':
                    self.driver.new_game(first)
                    print("Game restarted.")
                    continue
                result = self.driver.click(move)
                if result is not None and not result.accepted:
                    print(f"Column {move} is full.")
            else:
                self.wait_for_computer()

    def wait_for_computer(self):
        print("Computer is thinking...")
        result = None
        while result is None:
            time.sleep(TICK_SECONDS)
            result = self.driver.tick(TICK_SECONDS)
        print(f"Computer plays column {result.column}")

    def get_human_move(self):
        """
        Read a column or a command from the terminal.

        Returns:
            Column index, 'q', 'r', or None on invalid input
        """
        cols = self.driver.board.cols
        try:
            user_input = input(f"Your move (0-{cols - 1}, r, q): ").strip().lower()
        except EOFError:
            return 'q'

        if user_input in ('q', 'r'):
            return user_input

        try:
            move = int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

        if not 0 <= move < cols:
            print(f"Column must be between 0 and {cols - 1}.")
            return None
        return move

    def ask_yes_no(self, prompt: str) -> bool:
        try:
            return input(prompt).strip().lower().startswith('y')
        except EOFError:
            return False

    def evaluate(self):
        """Run a uniformly random agent against the heuristic and report outcomes."""
        env = ConnectFourEnv(self.args.rows, self.args.cols)
        rng = np.random.default_rng(self.args.seed)
        outcomes = {'win': 0, 'loss': 0, 'draw': 0}
        total_reward = 0.0

        for episode in range(self.args.episodes):
            seed = None if self.args.seed is None else self.args.seed + episode
            _, info = env.reset(seed=seed)
            reward, terminated = 0.0, info['phase'] != 'IN_PROGRESS'
            while not terminated:
                action = int(rng.choice(info['valid_moves']))
                _, reward, terminated, _, info = env.step(action)
            total_reward += reward
            if info['phase'] == 'DRAWN':
                outcomes['draw'] += 1
            elif info['winner'] == Player.HUMAN.name:
                outcomes['win'] += 1
            else:
                outcomes['loss'] += 1
        env.close()

        episodes = max(self.args.episodes, 1)
        print(f"Episodes:       {self.args.episodes}")
        print(f"Agent wins:     {outcomes['win']}")
        print(f"Heuristic wins: {outcomes['loss']}")
        print(f"Draws:          {outcomes['draw']}")
        print(f"Mean reward:    {total_reward / episodes:.3f}")

    def benchmark(self):
        """Play the heuristic against itself and summarise the results."""
        rng = np.random.default_rng(self.args.seed)
        player = HeuristicPlayer(rng=rng)
        tally = {Player.HUMAN: 0, Player.COMPUTER: 0, None: 0}
        total_moves = 0

        start = time.perf_counter()
        for _ in range(self.args.games):
            game = new_game(self.args.rows, self.args.cols, rng=rng)
            while not game.is_over:
                game.attempt_move(player.get_move(game.board, game.turn))
            tally[game.winner if game.phase == Phase.WON else None] += 1
            total_moves += game.moves_made
        elapsed = time.perf_counter() - start

        games = max(self.args.games, 1)
        print(f"Games played:   {self.args.games}")
        print(f"{Player.HUMAN} wins:         {tally[Player.HUMAN]}")
        print(f"{Player.COMPUTER} wins:         {tally[Player.COMPUTER]}")
        print(f"Draws:          {tally[None]}")
        print(f"Average length: {total_moves / games:.1f} moves")
        print(f"Time per move:  {elapsed / max(total_moves, 1) * 1000:.3f} ms")


def main(argv: Optional[List[str]] = None) -> int:
    return SimpleCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
