"""Command-driven Ataxx game loop."""
import logging
from typing import Callable, Iterable, Optional

from ataxx.ai.board import Board, IllegalMoveError
from ataxx.ai.constants import Piece
from ataxx.ai.move import CELL_PATTERN, Move
from ataxx.ai.players import HumanPlayer, MinimaxPlayer, RandomPlayer

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  new                  start a new game
  auto <red|blue>      let the computer play a side
  manual <red|blue>    play a side yourself
  random <red|blue>    let a random mover play a side
  block <cell>         place blocks at a cell and its reflections
  seed <n>             reseed the random movers
  dump                 print the board
  help                 print this message
  quit                 leave
  c3-d4                move from c3 to d4
  -                    pass"""


class Game:
    """Reads commands, asks the players for moves and reports the outcome.

    Args:
        commands: Iterable of command lines, e.g. sys.stdin.
        out: Callable receiving each line of output.
        seed: Seed for random movers.
    """

    def __init__(self, commands: Iterable[str], out: Callable[[str], None] = print, seed: Optional[int] = None):
        self._commands = iter(commands)
        self._out = out
        self._seed = seed
        self.board = Board()
        self.players = {
            Piece.RED: HumanPlayer(Piece.RED, self),
            Piece.BLUE: MinimaxPlayer(Piece.BLUE),
        }
        self._blocks = []
        self._reported = False
        self._quit = False
        self._handlers = {
            "new": self._cmd_new,
            "auto": self._cmd_auto,
            "manual": self._cmd_manual,
            "random": self._cmd_random,
            "block": self._cmd_block,
            "seed": self._cmd_seed,
            "dump": self._cmd_dump,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
        }

    def run(self) -> None:
        """Play until input runs out or a quit command is read."""
        while not self._quit:
            winner = self.board.get_winner()
            if winner is not None:
                if not self._reported:
                    self._report_winner(winner)
                line = self.read_command()
                if line is None:
                    break
                self.execute(line)
                continue

            color = self.board.whose_move
            player = self.players[color]
            move = player.get_move(self.board)
            if move is not None:
                self.play(move)
            elif player.is_auto:
                logger.error("%s found no move; switching it to manual play", color)
                self._out(f"{color} could not find a move; it is now played manually.")
                self.players[color] = HumanPlayer(color, self)

    def read_command(self) -> Optional[str]:
        """Return the next non-blank, non-comment command line, or None at end of input."""
        for line in self._commands:
            line = line.strip()
            if line and not line.startswith("#"):
                return line
        return None

    def quit(self) -> None:
        self._quit = True

    def play(self, move: Move) -> bool:
        """Play MOVE for the side to move. Returns False if it was rejected."""
        color = self.board.whose_move
        try:
            self.board.make_move(move)
        except IllegalMoveError as excp:
            self._out(f"Error: {excp}")
            return False
        if self.players[color].is_auto:
            if move.is_pass:
                self._out(f"{color} passes.")
            else:
                self._out(f"{color} moves {move}.")
        logger.debug("%s played %s", color, move)
        return True

    def execute(self, line: str) -> None:
        """Execute a command line, reporting any error it raises."""
        try:
            try:
                move = Move.parse(line)
            except ValueError:
                move = None
            if move is not None:
                if self.board.get_winner() is not None:
                    raise ValueError("Game is over; start a new one with 'new'.")
                self.play(move)
                return

            words = line.split()
            handler = self._handlers.get(words[0].lower())
            if handler is None:
                raise ValueError(f"Unknown command: {line}")
            handler(words[1:])
        except ValueError as excp:
            self._out(f"Error: {excp}")

    def record(self) -> dict:
        """Return the blocks, moves and result of the current game."""
        winner = self.board.get_winner()
        if winner is None:
            result = None
        elif winner == Piece.EMPTY:
            result = "draw"
        else:
            result = winner.name.lower()
        return {
            "blocks": list(self._blocks),
            "moves": [str(move) for move in self.board.moves],
            "winner": result,
        }

    def _report_winner(self, winner: Piece) -> None:
        self._reported = True
        if winner == Piece.EMPTY:
            self._out("Draw.")
        else:
            self._out(f"{winner} wins.")

    def _color_arg(self, args):
        if len(args) != 1:
            raise ValueError("Expected a color: red or blue")
        color = Piece.from_name(args[0])
        if color not in (Piece.RED, Piece.BLUE):
            raise ValueError(f"Invalid color: {args[0]}")
        return color

    def _cmd_new(self, args):
        self.board.clear()
        self._blocks = []
        self._reported = False

    def _cmd_auto(self, args):
        color = self._color_arg(args)
        self.players[color] = MinimaxPlayer(color)

    def _cmd_manual(self, args):
        color = self._color_arg(args)
        self.players[color] = HumanPlayer(color, self)

    def _cmd_random(self, args):
        color = self._color_arg(args)
        self.players[color] = RandomPlayer(color, self._seed)

    def _cmd_block(self, args):
        match = CELL_PATTERN.match(args[0].lower()) if len(args) == 1 else None
        if match is None:
            raise ValueError("Usage: block <cell>")
        self.board.set_block(*match.groups())
        self._blocks.append(match.group(0))

    def _cmd_seed(self, args):
        if len(args) != 1:
            raise ValueError("Usage: seed <n>")
        self._seed = int(args[0])
        for player in self.players.values():
            if isinstance(player, RandomPlayer):
                player.reseed(self._seed)

    def _cmd_dump(self, args):
        self._out(str(self.board))

    def _cmd_help(self, args):
        self._out(HELP_TEXT)

    def _cmd_quit(self, args):
        self.quit()
