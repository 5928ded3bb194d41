# __main__.py - entry point: python -m text_intelligence [--tui]

import argparse
import sys

from text_intelligence.utils.config_manager import Config


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="text-intelligence",
        description="Chat with an engine that learns word statistics from what you type.",
    )
    p.add_argument("--config", metavar="PATH", help="JSON config file (created on /config set)")
    p.add_argument("--top-n", type=int, metavar="N", help="how many top words to show")
    p.add_argument("--tui", action="store_true", help="full-screen Textual UI instead of the console chat")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    if args.top_n is not None:
        cfg.data["top_n"] = args.top_n

    if args.tui:
        from text_intelligence.tui_app import TextIntelligenceApp

        TextIntelligenceApp(config=cfg).run()
    else:
        from text_intelligence.cli import CLI

        CLI(config=cfg).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
