"""
Command-line front-end for Minesweeper.

Usage:
    minesweeper play [--size N] [--mines N | --difficulty LEVEL] [--seed S]
    minesweeper simulate [--games N] [--size N] [--mines N] [--seed S]
"""
import argparse
import logging
import random
import re
from typing import Callable, Optional, Tuple

from .board import Board
from .config import (
    BoardConfig,
    Difficulty,
    MAX_GRID_DIMENSION,
    MIN_GRID_DIMENSION,
    is_valid_grid_dimension,
    is_valid_mine_count,
    max_mines_for_grid,
)
from .environment import MinesweeperEnv
from .errors import MinesweeperError
from .random_player import RandomPlayer
from .stats import GameResult, GameStats

MOVE_PATTERN = re.compile(r"^(?:(F)\s+)?([A-Z])(\d+)$")

REVEAL = "reveal"
FLAG = "flag"

Move = Tuple[str, int, int]


def parse_move(text: str) -> Optional[Move]:
    """
    Parse a move such as "B3" (reveal) or "F B3" (toggle flag).

    Rows are letters starting at A, columns are numbers starting at 1.

    Returns:
        (action, row, col) with 0-based coordinates, or None if the
        text is not a move.
    """
    match = MOVE_PATTERN.match(text.strip().upper())
    if match is None:
        return None
    flag, letter, number = match.groups()
    action = FLAG if flag else REVEAL
    return action, ord(letter) - ord("A"), int(number) - 1


def render_board(board: Board) -> str:
    """Render the grid with lettered rows and numbered columns."""
    header = "  " + "".join(f"{col + 1} " for col in range(board.cols))
    lines = [header.rstrip()]
    for row in range(board.rows):
        symbols = []
        for col in range(board.cols):
            cell = board.query_cell(row, col)
            if not cell.is_revealed:
                symbols.append("F" if cell.is_flagged else "_")
            elif cell.is_mine:
                symbols.append("X")
            else:
                symbols.append(str(cell.adjacent_mines))
        lines.append(f"{chr(ord('A') + row)} " + " ".join(symbols))
    return "\n".join(lines)


# ============================================================================
# Text Game
# ============================================================================

class TextGame:
    """Interactive text Minesweeper driven by input/print callables."""

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        print_func: Optional[Callable[..., None]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._input = input_func or input
        self._print = print_func or print
        self._rng = rng or random.Random()

    def run(self, size: Optional[int] = None, mine_count: Optional[int] = None) -> None:
        """
        Play games until the player types 'exit'.

        Args:
            size: Grid size to use for every game instead of prompting.
            mine_count: Mine count to use for every game instead of prompting.
        """
        self._print("Welcome to Minesweeper!")
        while True:
            grid_size = size if size is not None else self.prompt_grid_size()
            mines = (
                mine_count if mine_count is not None
                else self.prompt_mine_count(grid_size)
            )
            self.play_game(grid_size, grid_size, mines)

            answer = self._input(
                "Press Enter to play again or type 'exit' to quit. "
            )
            if answer.strip().lower() == "exit":
                self._print("Thank you for playing Minesweeper!")
                return

    def prompt_grid_size(self) -> int:
        """Ask for a grid size until a valid one is entered."""
        while True:
            text = self._input(
                f"Enter the grid size (both rows and columns) "
                f"({MIN_GRID_DIMENSION}-{MAX_GRID_DIMENSION}): "
            )
            try:
                size = int(text)
            except ValueError:
                self._print("Incorrect input.")
                continue
            if is_valid_grid_dimension(size):
                return size
            self._print(
                f"Grid size must be between {MIN_GRID_DIMENSION} "
                f"and {MAX_GRID_DIMENSION}."
            )

    def prompt_mine_count(self, size: int) -> int:
        """Ask for a mine count until a valid one is entered."""
        max_mines = max_mines_for_grid(size, size)
        while True:
            text = self._input(
                f"Enter the number of mines to place on the grid "
                f"(maximum is {max_mines}): "
            )
            try:
                mines = int(text)
            except ValueError:
                self._print("Incorrect input.")
                continue
            if is_valid_mine_count(size, size, mines):
                return mines
            self._print(f"Number of mines must be between 1 and {max_mines}.")

    def play_game(self, rows: int, cols: int, mine_count: int) -> Board:
        """
        Play a single game to completion.

        Returns:
            The finished board.
        """
        stats = GameStats()
        board = Board.create(rows, cols, mine_count, rng=self._rng, stats=stats)
        self._print(render_board(board))

        while board.is_playing:
            move = parse_move(self._input("Enter your move (e.g., A1, F B2): "))
            if move is None:
                self._print("Invalid move format. Please use the format 'A1' or 'F A1'.")
                continue

            action, row, col = move
            if action == FLAG:
                board.toggle_flag(row, col)
            else:
                board.reveal_cell(row, col)
            stats.increment_moves_made()
            self._print(render_board(board))

            if board.is_lost:
                self._print("Oh no, you detonated a mine! Game over.")
            elif board.is_won:
                self._print("Congratulations, you have won the game!")
            self._print_stats(stats)

        return board

    def _print_stats(self, stats: GameStats) -> None:
        self._print("Game Stats:")
        self._print(f"Moves made: {stats.moves_made}")
        self._print(f"Mines uncovered: {stats.mines_uncovered}")
        self._print(f"Total time: {int(stats.elapsed())} seconds")
        self._print(f"Game result: {stats.result.name}")


# ============================================================================
# Commands
# ============================================================================

def play(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Run the interactive text game."""
    if args.size is not None and not is_valid_grid_dimension(args.size):
        parser.error(
            f"--size must be between {MIN_GRID_DIMENSION} and {MAX_GRID_DIMENSION}"
        )

    mines = args.mines
    if args.difficulty is not None:
        if args.size is None:
            parser.error("--difficulty requires --size")
        mines = Difficulty[args.difficulty.upper()].mines_for(args.size, args.size)
    if mines is not None:
        if args.size is None:
            parser.error("--mines requires --size")
        if not is_valid_mine_count(args.size, args.size, mines):
            parser.error(
                f"--mines must be between 1 and "
                f"{max_mines_for_grid(args.size, args.size)}"
            )

    game = TextGame(rng=random.Random(args.seed))
    try:
        game.run(size=args.size, mine_count=mines)
    except (EOFError, KeyboardInterrupt):
        print("\nThank you for playing Minesweeper!")


def simulate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Play random games through the environment and report results."""
    if args.games < 1:
        parser.error("--games must be positive")
    try:
        config = BoardConfig(args.size, args.size, args.mines)
    except MinesweeperError as exc:
        parser.error(str(exc))

    env = MinesweeperEnv(config=config)
    player = RandomPlayer(config.rows, config.cols, seed=args.seed)

    print(f"Simulating {args.games} random games on {config.rows}x{config.cols} "
          f"with {config.mine_count} mines...")

    wins = 0
    total_steps = 0
    total_revealed = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        done = False
        while not done:
            action = player.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        if info["game_state"] == GameResult.WON.name:
            wins += 1
        total_steps += info["steps"]
        total_revealed += info["revealed"]

    print(f"Results over {args.games} games:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minesweeper", description="Minesweeper - uncover every safe cell"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--size", type=int, default=None, help="Grid size (NxN)")
    mines_group = play_parser.add_mutually_exclusive_group()
    mines_group.add_argument("--mines", type=int, default=None, help="Number of mines")
    mines_group.add_argument(
        "--difficulty",
        choices=[level.name.lower() for level in Difficulty],
        default=None,
        help="Derive the mine count from a difficulty level",
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play random games and report the win rate"
    )
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    simulate_parser.add_argument("--size", type=int, default=9, help="Grid size (NxN)")
    simulate_parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    simulate_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    return parser


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args, parser)
    elif args.command == "simulate":
        simulate(args, parser)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
