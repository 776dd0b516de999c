"""
Judge a plan file against a catalog file from the command line.

Runs the same pipeline as the HTTP service, without the envelope.

Usage:
    python scripts/judge_files.py catalog.txt plan.txt
    python scripts/judge_files.py catalog.txt plan.txt --json
    python scripts/judge_files.py catalog.txt plan.txt --legacy-post-edges

Exit codes: 0 accepted, 1 rejected, 2 unreadable input.
"""

import argparse
import json
import os
import sys

BACKEND_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "backend")
sys.path.insert(0, BACKEND_DIR)

from judge import judge  # noqa: E402


def summarize(result) -> str:
    if result.accepted:
        return (
            f"[ACCEPTED] compulsory_count={result.compulsory_count} "
            f"post_courses_count={result.post_courses_count} "
            f"optional_score={result.optional_score}"
        )
    return f"[REJECTED] status={result.status} ({result.status_label}) {result.comment}"


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8") as fh:
        return fh.read()


# ── CLI entry point ───────────────────────────────────────────────────────────

def main(args=None):
    parser = argparse.ArgumentParser(
        description="Judge a term-by-term enrollment plan against a course catalog.",
    )
    parser.add_argument("input", help="Path to the catalog description.")
    parser.add_argument("output", help="Path to the proposed plan.")
    parser.add_argument(
        "--legacy-post-edges", action="store_true",
        help="Attach each postrequisite edge to its target course (legacy scoring).",
    )
    parser.add_argument("--json", action="store_true", help="Print the raw result record as JSON.")
    opts = parser.parse_args(args)

    try:
        input_data = _read_text(opts.input)
        output_data = _read_text(opts.output)
    except OSError as exc:
        print(f"[ERROR] Cannot read input: {exc}", file=sys.stderr)
        return 2

    result = judge(input_data, output_data, legacy_post_edges=opts.legacy_post_edges)
    if opts.json:
        print(json.dumps(result.to_dict(), sort_keys=True))
    else:
        print(summarize(result))
    return 0 if result.accepted else 1


if __name__ == "__main__":
    sys.exit(main())
