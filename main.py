#!/usr/bin/env python3
"""
Interactive Qwirkle game runner.

Players take turns at one terminal. Each turn shows the board, the current
player's hand and score, and reads one command. Type `h` for the list of
commands.
"""

import argparse
import logging

from config_models import GameConfiguration, load_configuration
from qwirkle.enums.direction import Direction
from qwirkle.models.game_session import GameSession
from qwirkle.models.placement_result import PlacementResult
from qwirkle.persistence import SnapshotError, load_game, save_game

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands (hand positions start at 0, directions are u, d, l, r):
  h                           show this help
  f [d] i [i ...]             first move from the center (direction defaults to r)
  o row col i                 place one tile
  l row col d i [i ...]       place a line of tiles from (row, col) towards d
  m row col i [row col i ...] place tiles at free positions on one line
  p                           pass your turn
  s name                      save the game
  q                           quit"""


class CommandError(ValueError):
    """A command line that cannot be understood."""


def print_banner():
    """Print welcome banner."""
    print("=" * 60)
    print(" 🧩 QWIRKLE")
    print("=" * 60)
    print()


def render_turn(session: GameSession) -> str:
    """Board, then the current player's hand with positions, then the score."""
    player = session.current_player
    hand = "  ".join(f"{i}:{tile}" for i, tile in enumerate(player.hand))
    return "\n".join(
        [
            session.board.pretty_print(),
            "",
            f"{player.name} ({player.score} points) - tiles left in bag: {session.bag.size()}",
            f"Hand: {hand}",
        ]
    )


def render_scores(session: GameSession) -> str:
    lines = ["Final scores:"]
    for player in sorted(session.players, key=lambda p: p.score, reverse=True):
        lines.append(f"  {player.name}: {player.score}")
    winners = ", ".join(player.name for player in session.winners())
    lines.append(f"🏆 Winner: {winners}")
    return "\n".join(lines)


def _parse_ints(parts: list[str]) -> list[int]:
    try:
        return [int(part) for part in parts]
    except ValueError as err:
        msg = f"Expected whole numbers, got {' '.join(parts)!r}"
        raise CommandError(msg) from err


def _describe(result: PlacementResult) -> str:
    if result.ok:
        return f"✅ {result.points} point(s)"
    return f"❌ {result.rejection.message}"


def execute_command(session: GameSession, command: str) -> str:
    """Run one player command against the session and return the message to show.

    Raises:
        CommandError: If the command is unknown or its arguments are malformed
        IndexError: If a hand position does not exist
    """
    parts = command.split()
    if not parts:
        msg = "Empty command, type h for help"
        raise CommandError(msg)

    name, args = parts[0].lower(), parts[1:]

    if name == "h":
        return HELP_TEXT

    if name == "f":
        if not args:
            msg = "Usage: f [d] i [i ...]"
            raise CommandError(msg)
        direction = Direction.RIGHT
        if not args[0].lstrip("-").isdigit():
            direction = _parse_direction(args[0])
            args = args[1:]
        return _describe(session.first(direction, _parse_ints(args)))

    if name == "o":
        if len(args) != 3:
            msg = "Usage: o row col i"
            raise CommandError(msg)
        row, col, index = _parse_ints(args)
        return _describe(session.play_tile(row, col, index))

    if name == "l":
        if len(args) < 4:
            msg = "Usage: l row col d i [i ...]"
            raise CommandError(msg)
        row, col = _parse_ints(args[:2])
        direction = _parse_direction(args[2])
        return _describe(session.play_run(row, col, direction, _parse_ints(args[3:])))

    if name == "m":
        if not args or len(args) % 3 != 0:
            msg = "Usage: m row col i [row col i ...]"
            raise CommandError(msg)
        numbers = _parse_ints(args)
        triples = [tuple(numbers[i : i + 3]) for i in range(0, len(numbers), 3)]
        return _describe(session.play_set(triples))

    if name == "p":
        passing = session.current_player.name
        session.pass_turn()
        return f"{passing} passes"

    if name == "s":
        if len(args) != 1:
            msg = "Usage: s name"
            raise CommandError(msg)
        path = save_game(session, args[0])
        return f"💾 Game saved to {path}"

    msg = f"Unknown command {name!r}, type h for help"
    raise CommandError(msg)


def _parse_direction(text: str) -> Direction:
    try:
        return Direction.from_nickname(text)
    except ValueError as err:
        raise CommandError(str(err)) from err


def ask_player_names() -> list[str]:
    names: list[str] = []
    while len(names) < 4:
        name = input(f"Name of player {len(names) + 1} (Enter to start): ").strip()
        if not name:
            if len(names) >= 2:
                break
            print("❌ At least 2 players are needed.")
            continue
        names.append(name)
    return names


def offer_save(session: GameSession) -> None:
    while True:
        try:
            name = input("Save the game before quitting? Enter a file name, or press Enter to skip: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if not name:
            return
        try:
            path = save_game(session, name)
        except OSError as e:
            print(f"❌ Could not save: {e}")
            continue
        print(f"💾 Game saved to {path}")
        return


def play(session: GameSession) -> None:
    """Run turns until the game is over or a player quits."""
    while not session.is_over():
        print(render_turn(session))
        try:
            command = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            command = "q"
        if command.lower() == "q":
            offer_save(session)
            break
        try:
            print(execute_command(session, command))
        except (CommandError, IndexError) as e:
            print(f"❌ {e}")
        print()

    print(render_scores(session))


def main():
    """Main runner function."""
    parser = argparse.ArgumentParser(description="Play Qwirkle in the terminal")
    parser.add_argument("players", nargs="*", help="Player names, in turn order (2 to 4)")
    parser.add_argument("--config", help="Path to a JSON game configuration file")
    parser.add_argument("--load", help="Resume a saved game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the tile bag")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args()

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    print_banner()

    if args.load:
        try:
            session = load_game(args.load)
        except SnapshotError as e:
            print(f"❌ {e}")
            return
    else:
        config = load_configuration(args.config) if args.config else GameConfiguration()
        updates = {}
        if args.players:
            updates["player_names"] = args.players
        elif not args.config:
            try:
                updates["player_names"] = ask_player_names()
            except (EOFError, KeyboardInterrupt):
                print()
                return
        if args.seed is not None:
            updates["seed"] = args.seed
        config = GameConfiguration.model_validate({**config.model_dump(), **updates})
        logger.info("Starting game with %s", config.model_dump_json())
        session = config.create_session()

    print(HELP_TEXT)
    print()
    play(session)


if __name__ == "__main__":
    main()
