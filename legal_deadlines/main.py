"""Command-line entry point.

Reads one JSON deadline request (with a ``domain`` key) from a file or
stdin and prints the result as camelCase JSON:

    legal-deadlines request.json
    echo '{"domain": "court", ...}' | legal-deadlines -
    legal-deadlines --list

``LEGAL_DEADLINES_TODAY=YYYY-MM-DD`` pins "today" for reproducible output.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import build_clock, load_config
from .errors import DeadlineError, UnknownCaseSubtype, ValidationError
from .models import Domain
from .timeline import DeadlineCalculator, list_case_subtypes

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2

USAGE = "usage: legal-deadlines <request.json | -> | --list"


def _configure_logging(level: str) -> None:
    # stdout carries the JSON result
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _read_payload(source: str) -> dict:
    if source == "-":
        text = sys.stdin.read()
    else:
        text = Path(source).read_text(encoding="utf-8")
    payload = json.loads(text)
    if not isinstance(payload, dict):
        raise ValidationError("Request must be a JSON object", ["domain"])
    return payload


def _error_body(exc: DeadlineError) -> dict:
    body = {"error": type(exc).__name__, "message": str(exc), "fields": []}
    if isinstance(exc, ValidationError):
        body["fields"] = list(exc.fields)
    elif isinstance(exc, UnknownCaseSubtype):
        body["fields"] = [exc.domain, exc.case_subtype]
    return body


def list_catalog() -> dict:
    """Supported case subtypes per domain."""
    return {domain.value: list_case_subtypes(domain) for domain in Domain}


def run(argv: Sequence[str]) -> int:
    config = load_config()
    _configure_logging(config.log_level)

    if len(argv) != 1:
        print(USAGE, file=sys.stderr)
        return EXIT_INVALID

    if argv[0] == "--list":
        print(json.dumps(list_catalog(), indent=config.json_indent))
        return EXIT_OK

    calculator = DeadlineCalculator(clock=build_clock(config))
    try:
        payload = _read_payload(argv[0])
        result = calculator.calculate(payload)
    except json.JSONDecodeError as exc:
        logger.error("Request is not valid JSON: %s", exc)
        print(json.dumps({"error": "InvalidJSON", "message": str(exc), "fields": []}, indent=config.json_indent))
        return EXIT_INVALID
    except OSError as exc:
        logger.error("Cannot read request %s: %s", argv[0], exc)
        body = {"error": "UnreadableRequest", "message": str(exc), "fields": []}
        print(json.dumps(body, indent=config.json_indent, ensure_ascii=False))
        return EXIT_INVALID
    except DeadlineError as exc:
        print(json.dumps(_error_body(exc), indent=config.json_indent, ensure_ascii=False))
        return EXIT_INVALID

    print(
        json.dumps(
            result.model_dump(mode="json", by_alias=True),
            indent=config.json_indent,
            ensure_ascii=False,
        )
    )
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
