"""Allow running PomoTick as a module: python -m pomotick."""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomoTickApp
from .settings import Settings


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pomotick", description="Pomodoro timer")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--mute", action="store_true", help="disable sound cues")
    parser.add_argument(
        "--volume", type=int, default=Settings.sound_volume,
        help="sound volume, 0-100 (default: %(default)s)",
    )
    # Qt consumes its own flags from sys.argv; ignore what we don't know.
    args, _ = parser.parse_known_args(argv)
    return args


def main() -> None:
    args = _parse_args(sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings(sound_enabled=not args.mute, sound_volume=args.volume)

    app = QApplication(sys.argv)
    app.setApplicationName("PomoTick")
    app.setOrganizationName("PomoTick")

    window = PomoTickApp(settings)
    window.show()
    logging.getLogger(__name__).info("PomoTick ready")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
