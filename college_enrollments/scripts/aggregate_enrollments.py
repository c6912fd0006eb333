# college_enrollments/scripts/aggregate_enrollments.py
"""
Print every enrollment joined with its student and class.

Usage:
    college-report
    college-report --join client
    python -m college_enrollments.scripts.aggregate_enrollments --format table

Enrollments whose student or class does not resolve are left out; see
`college-audit` to list them.
"""
import os, sys, argparse
if not __package__:  # run as a file: python college_enrollments/scripts/<name>.py
    sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from college_enrollments.db import run_job  # noqa: E402
from college_enrollments.utils.enrollment_report import REPORT_FIELDS, aggregate_report, client_report, to_json  # noqa: E402
from college_enrollments.utils.mongo_df import docs_to_df  # noqa: E402

JOINS = {
    "server": aggregate_report,   # $lookup/$unwind pipeline
    "client": client_report,      # fetch all three, join in-process
}


def build_report(db, join="server"):
    return JOINS[join](db)


def render(rows, fmt="json"):
    if fmt == "table":
        if not rows:
            return "Aggregated Enrollments: (none)"
        df = docs_to_df(rows, columns=REPORT_FIELDS)
        return "Aggregated Enrollments:\n" + df.to_string(index=False)
    return "Aggregated Enrollments: " + to_json(rows)


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Join enrollments with students and classes.")
    ap.add_argument("--join", choices=sorted(JOINS), default="server",
                    help="where the join runs (default: server)")
    ap.add_argument("--format", dest="fmt", choices=["json", "table"], default="json")
    return ap.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    rows = run_job(lambda db: build_report(db, args.join), "Error aggregating enrollments")
    if rows is None:
        return None
    print(render(rows, args.fmt), flush=True)
    return rows


def main(argv=None):
    run(argv)


if __name__ == "__main__":
    main()
