# college_enrollments/scripts/audit_enrollment_links.py
# Read-only: list enrollments whose studentId/classId does not resolve.
# These are exactly the enrollments the report leaves out.
import os, sys
if not __package__:  # run as a file: python college_enrollments/scripts/<name>.py
    sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from college_enrollments.db import run_job  # noqa: E402
from college_enrollments.utils.enrollment_report import fetch_all, find_dangling  # noqa: E402


def audit(db):
    enrollments, students, classes = fetch_all(db)
    dangling = find_dangling(enrollments, students, classes)

    print("==== ENROLLMENT LINK AUDIT ====")
    print(f"enrollments total: {len(enrollments)}")
    print(f"students total: {len(students)}")
    print(f"classes total: {len(classes)}")
    print(f"unresolved enrollments: {len(dangling)}")
    for d in dangling:
        print(f"  {d['enrollmentId']}: student={d['studentId']} class={d['classId']} "
              f"missing={','.join(d['missing'])}")
    return dangling


def run():
    return run_job(audit, "Error auditing enrollments")


def main():
    run()


if __name__ == "__main__":
    main()
