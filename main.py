"""Command line entry point for the person assistant.

Run with::

    python main.py                          # prompts for the birthdate
    python main.py --birthdate 1990-05-15
    python main.py --birthdate 2007-01-01 --question adult

The birthdate is checked locally before the agent is built; the question is
then sent through ``invoke_with_audit`` so every run leaves one audit record.
"""

import argparse
import datetime
import json
import logging
import os
import sys
import uuid

from person.agent import create_agent, invoke_with_audit

logger: logging.Logger = logging.getLogger(__name__)

QUESTIONS: dict[str, str] = {
    "age": "How old am I in years, months and days?",
    "adult": "Am I an adult today?",
}

# attributes every LogRecord carries; anything else came from extra={...}
_RECORD_ATTRS: frozenset[str] = frozenset(vars(logging.makeLogRecord({}))) | {"message"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line with the standard fields plus any extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRS
        )
        return json.dumps(payload, default=str)


def _configure_logging() -> None:
    """Log as JSON when LOG_FORMAT=json, as plain text otherwise."""
    if os.environ.get("LOG_FORMAT", "text").lower() == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ask the person assistant about an age.")
    parser.add_argument("--birthdate", help="date of birth, YYYY-MM-DD; prompted for when omitted")
    parser.add_argument(
        "--question",
        choices=sorted(QUESTIONS),
        default="age",
        help="what to ask about the birthdate (default: age)",
    )
    return parser.parse_args(argv)


def _checked_birthdate(raw: str) -> datetime.date:
    """Return ``raw`` as a date, or exit with code 1 if it is invalid or in the future."""
    try:
        birthdate = datetime.date.fromisoformat(raw)
    except ValueError:
        print(
            f"Error: '{raw}' is not a valid date. "
            "Please use the format YYYY-MM-DD (e.g. 1990-05-15)."
        )
        sys.exit(1)

    if birthdate > datetime.date.today():
        print(f"Error: '{raw}' is in the future.")
        sys.exit(1)
    return birthdate


def run(argv: list[str] | None = None) -> None:
    """Validate the birthdate, ask the agent the chosen question and print the answer."""
    _configure_logging()
    args = _parse_args(argv)

    print("Welcome to the Age Calculator!")
    raw = args.birthdate
    if raw is None:
        raw = input("Please enter your birthdate (YYYY-MM-DD, e.g. 1990-05-15): ")
    birthdate = _checked_birthdate(raw.strip())

    agent = create_agent()
    session_id = str(uuid.uuid4())
    prompt = f"My birthdate is {birthdate.isoformat()}. {QUESTIONS[args.question]}"
    logger.info("asking agent", extra={"session_id": session_id, "question": args.question})
    print(invoke_with_audit(agent, prompt, session_id=session_id))


if __name__ == "__main__":
    run()
