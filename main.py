import argparse
import logging
import sys
from typing import Optional, Sequence

from speller.controllers.session_controller import DEFAULT_LANGUAGE, SessionController, SessionState
from speller.domain.errors import ConfigurationError
from speller.services.alphabet_store import CONFIG_ENV_VAR, AlphabetStore
from speller.ui.console_renderer import ConsoleRenderer

logger = logging.getLogger("speller")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="phonetic-speller",
        description="Spell words with a phonetic alphabet, one character at a time.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="alphabets YAML file (default: ${} or the bundled data/alphabets.yaml)".format(CONFIG_ENV_VAR),
    )
    parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        help="language to start with (default: %(default)s)",
    )
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    store = AlphabetStore(args.config)
    try:
        table = store.load_table()
    except ConfigurationError as e:
        print(f"[ERROR] Configuration error: {e}", file=sys.stderr)
        return 1

    if args.language not in table:
        logger.warning(
            "Language %r is not configured (available: %s)",
            args.language,
            ", ".join(table.list_language_ids()),
        )

    renderer = ConsoleRenderer(color=not args.no_color)
    controller = SessionController(table, renderer)
    controller.run(SessionState(current_language=args.language))
    return 0


if __name__ == "__main__":
    sys.exit(main())
