"""Example invocations of the Rosette API.

Usage: ``rosette-example <example> <user_key>``. Prints the service response
as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable

from .client import RosetteClient
from .enums import LanguageCode
from .exceptions import RosetteError
from .models import LanguageRequest, NameTranslationRequest

logger = logging.getLogger(__name__)

LANGUAGE_DATA = "Por favor Señorita, says the man."
TRANSLATED_NAME_DATA = "معمر محمد أبو منيار القذافي"


def _language(client: RosetteClient) -> Any:
    return client.language(LanguageRequest(content=LANGUAGE_DATA))


def _translated_name(client: RosetteClient) -> Any:
    request = NameTranslationRequest(name=TRANSLATED_NAME_DATA, target_language=LanguageCode.ENGLISH)
    return client.translated_name(request)


EXAMPLES: dict[str, Callable[[RosetteClient], Any]] = {
    "language": _language,
    "translated-name": _translated_name,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rosette-example")
    parser.add_argument("example", choices=sorted(EXAMPLES))
    parser.add_argument("user_key", nargs="?", help="Rosette API key")
    parser.add_argument("--base-url", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.user_key:
        print(parser.format_usage(), end="")
        print("Must have API key to run example")
        return 1

    try:
        with RosetteClient(user_key=args.user_key, base_url=args.base_url) as client:
            response = EXAMPLES[args.example](client)
    except RosetteError as exc:
        logger.debug("Example %s failed", args.example, exc_info=True)
        print(f"{args.example} failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(response, ensure_ascii=False, indent=2))
    return 0


def main() -> None:
    raise SystemExit(_main())
