from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from sci90.internal_core.config import load_config
from sci90.scoring import (
    AnswerValidationError,
    build_factor_report,
    compute_result,
    result_to_document,
)


def load_answers(path: Path) -> Any:
    data = json.loads(path.read_text(encoding="utf-8"))
    # Accept either a bare answers array/object or a saved progress record.
    if isinstance(data, dict) and "answers" in data:
        data = data["answers"]
        if isinstance(data, str):
            data = json.loads(data)
    return data


def main(argv: list[str] | None = None) -> int:
    config = load_config()
    parser = argparse.ArgumentParser(description="Score a saved SCI-90 answers file.")
    parser.add_argument("answers_file", type=Path, help="JSON file with 90 answers (array or {itemId: answer})")
    parser.add_argument("--strict", action="store_true", help="Reject incomplete or out-of-range answers.")
    parser.add_argument("--report", action="store_true", help="Include per-factor interpretations.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, config.SCI90_LOG_LEVEL, logging.INFO), stream=sys.stderr)

    try:
        answers = load_answers(args.answers_file)
    except (OSError, ValueError) as exc:
        print(f"Cannot read answers: {exc}", file=sys.stderr)
        return 2

    try:
        record = compute_result(answers, strict=args.strict or config.SCI90_STRICT_ANSWERS)
    except (AnswerValidationError, TypeError) as exc:
        print(f"Invalid answers: {exc}", file=sys.stderr)
        return 1

    output: dict[str, Any] = {"result": result_to_document(record)}
    if args.report:
        output["report"] = [asdict(entry) for entry in build_factor_report(record)]
    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
