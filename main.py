from __future__ import annotations

import json
import sys
from typing import List, Optional

from loguru import logger

from secret_santa.core.config import load_settings
from secret_santa.core.logging import setup_logging
from secret_santa.domain import GraphError, SecretSantaRequest
from secret_santa.services.game_flow import assign, format_pair

USAGE = "usage: python main.py REQUEST.json"


def load_request(path: str) -> SecretSantaRequest:
    with open(path, encoding="utf-8") as handle:
        return SecretSantaRequest.from_dict(json.load(handle))


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 2

    settings = load_settings()
    setup_logging(settings.log_level, settings.log_path)

    try:
        request = load_request(args[0])
    except (OSError, ValueError) as exc:
        logger.bind(path=args[0]).error("Could not read request: {error}", error=str(exc))
        return 2

    logger.info("Processing Secret Santa request for {count} participants", count=len(request.emails))
    try:
        result = assign(request, settings)
    except GraphError as exc:
        logger.error("Invalid participant graph: {error}", error=str(exc))
        return 2

    for pair in result.pairs:
        logger.info(format_pair(pair, request.mappings))
    logger.info(result.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
