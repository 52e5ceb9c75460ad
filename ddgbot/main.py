import argparse
import dataclasses
import json
import sys

from ddgbot.config import APP_SETTINGS, ConfigManager, apply_log_settings
from ddgbot.service.search import SearchFacade
from ddgbot.service.search.formatter import format_text

EXIT_FOUND = 0
EXIT_NO_RESULT = 1
EXIT_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddgbot",
        description="Query DuckDuckGo: instant answer first, HTML results as fallback.",
    )
    parser.add_argument("query", nargs="*", help="search query")
    parser.add_argument("--config", default="config.json", help="JSON settings file")
    parser.add_argument("--write-config", metavar="FILE", help="write current settings to FILE and exit")
    parser.add_argument("--json", action="store_true", help="print the rendered result as JSON")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    ConfigManager.load_settings(APP_SETTINGS, args.config)
    apply_log_settings(APP_SETTINGS.log)

    if args.write_config:
        ConfigManager.save_settings(APP_SETTINGS, args.write_config)
        return EXIT_FOUND

    rendered = SearchFacade(APP_SETTINGS).run(" ".join(args.query))

    if args.json:
        print(json.dumps(dataclasses.asdict(rendered), ensure_ascii=False, indent=2))
    else:
        print(format_text(rendered))

    if rendered.failed:
        return EXIT_FAILED
    return EXIT_FOUND if rendered.found else EXIT_NO_RESULT


if __name__ == "__main__":
    sys.exit(main())
