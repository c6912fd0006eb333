# college_enrollments/scripts/enroll_students.py
# Link sample students to classes. References are by value and not checked.
import os, sys
if not __package__:  # run as a file: python college_enrollments/scripts/<name>.py
    sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from college_enrollments.db import ENROLLMENTS, insert_batch, run_job, say  # noqa: E402
from college_enrollments.utils.bootstrap_indexes import ensure_indexes  # noqa: E402
from college_enrollments.utils.enrollment_report import ENROLLMENT_FIELDS  # noqa: E402

PAIRS = [
    ("S001", "C001"), ("S001", "C002"), ("S002", "C001"), ("S003", "C003"),
    ("S004", "C004"), ("S005", "C005"), ("S006", "C006"), ("S007", "C001"),
    ("S008", "C005"), ("S009", "C002"), ("S010", "C003"), ("S011", "C004"),
    ("S012", "C005"), ("S013", "C001"), ("S014", "C002"), ("S015", "C003"),
    ("S016", "C004"), ("S017", "C005"), ("S018", "C001"), ("S019", "C002"),
    ("S020", "C003"),
]

SAMPLE_ENROLLMENTS = [
    dict(zip(ENROLLMENT_FIELDS, (f"E{i:03d}", sid, cid)))
    for i, (sid, cid) in enumerate(PAIRS, start=1)
]


def enroll(db, enrollments=SAMPLE_ENROLLMENTS):
    ensure_indexes(db, [ENROLLMENTS])
    n = insert_batch(db, ENROLLMENTS, enrollments)
    say(f"Students enrolled into classes: {n}")
    return n


def run():
    return run_job(enroll, "Error enrolling students")


def main():
    run()


if __name__ == "__main__":
    main()
