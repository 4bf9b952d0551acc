"""
Main entry point for TicTacToe.

Launches the Tkinter window by default, or plays in the console
with --no-ui. Both front ends only forward input to the engine and
draw the snapshots it publishes.
"""

import logging
from typing import Callable, Optional

from engine.config import GameConfig
from engine.game_engine import GameEngine
from engine.game_state import Snapshot

HELP_TEXT = "Commands: 0-8 = play cell, r = new game, s = reset score, q = quit"


def format_score(snapshot: Snapshot) -> str:
    """Score line shown under the board."""
    score = snapshot.score
    return (
        f"X: {score.x_wins}   O: {score.o_wins}   Draws: {score.draws}"
        f"   Games: {score.games_played}"
    )


class ConsoleGame:
    """
    Console front end.

    Reads one command per line and redraws the board each time the
    engine publishes a snapshot.
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        self.engine = engine or GameEngine()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.is_running = False

        self._unsubscribe = self.engine.subscribe(self._draw)

    def _draw(self, snapshot: Snapshot):
        """Print the board and score."""
        self.output_fn("")
        self.output_fn(snapshot.render())
        self.output_fn(format_score(snapshot))

        if snapshot.is_game_over:
            self.output_fn("Type r for a new game.")

    def handle_command(self, command: str) -> bool:
        """
        Run one console command.

        Args:
            command: Raw line typed by the player.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        command = command.strip().lower()

        if command in ("q", "quit", "exit"):
            return False

        if command == "r":
            self.engine.reset_board()
        elif command == "s":
            self.engine.reset_score()
        elif command in ("h", "help", "?"):
            self.output_fn(HELP_TEXT)
        elif command.isdecimal():
            try:
                index = int(command)
            except ValueError:
                # Past the interpreter's digit limit for int()
                self.output_fn(HELP_TEXT)
                return True
            snapshot = self.engine.get_snapshot()
            result = self.engine.validator.validate_move(snapshot, index)
            if result.is_valid:
                self.engine.apply_move(index)
            else:
                self.output_fn(result.error_message)
        elif command:
            self.output_fn(f"Unknown command: {command}")
            self.output_fn(HELP_TEXT)

        return True

    def start(self):
        """Run the read-play-draw loop until the player quits."""
        self.output_fn(HELP_TEXT)
        self._draw(self.engine.get_snapshot())

        self.is_running = True
        while self.is_running:
            try:
                command = self.input_fn("> ")
            except EOFError:
                break
            self.is_running = self.handle_command(command)

        self.stop()

    def stop(self):
        """Stop listening to the engine."""
        self.is_running = False
        self._unsubscribe()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--log-level",
        default=GameConfig.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the engine"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=GameConfig.LOG_FORMAT)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI()
        ui.run()
        return

    print("\n" + "=" * 40)
    print("   TicTacToe")
    print("=" * 40)

    game = ConsoleGame()
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
