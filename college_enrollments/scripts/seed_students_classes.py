# college_enrollments/scripts/seed_students_classes.py
# Seed the fixed sample students and classes.
import os, sys
if not __package__:  # run as a file: python college_enrollments/scripts/<name>.py
    sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))

from college_enrollments.db import CLASSES, STUDENTS, insert_batch, run_job, say  # noqa: E402
from college_enrollments.utils.bootstrap_indexes import ensure_indexes  # noqa: E402
from college_enrollments.utils.enrollment_report import CLASS_FIELDS, STUDENT_FIELDS  # noqa: E402

TERM = "Fall"

STUDENT_ROWS = [
    ("S001", "Joe", "Smith", "Computer Science"),
    ("S002", "Suzan", "Ross", "Engineering"),
    ("S003", "Peanut", "Bindger", "Mathematics"),
    ("S004", "Mark", "Jenkins", "Physics"),
    ("S005", "Alice", "Johnson", "Biology"),
    ("S006", "Bob", "Brown", "Chemistry"),
    ("S007", "Charlie", "Davis", "Quantum Computing"),
    ("S008", "Dana", "Miller", "Artificial Intelligence"),
    ("S009", "Eve", "White", "Astrogation"),
    ("S010", "Frank", "Green", "Computational Biology"),
    ("S011", "Grace", "Taylor", "Computational Materials"),
    ("S012", "Hank", "Wilson", "Artificial Intelligence"),
    ("S013", "Ivy", "Moore", "Quantum Computing"),
    ("S014", "Jack", "Anderson", "Astrogation"),
    ("S015", "Kate", "Thomas", "Computational Biology"),
    ("S016", "Leo", "Harris", "Computational Materials"),
    ("S017", "Mona", "Martinez", "Artificial Intelligence"),
    ("S018", "Nina", "Clark", "Quantum Computing"),
    ("S019", "Owen", "Lewis", "Astrogation"),
    ("S020", "Paul", "Lee", "Computational Biology"),
]

CLASS_ROWS = [
    ("C001", "Quantum Computing 101", "Mon 9AM", "I001", "Room 101"),
    ("C002", "Galactic Astrogation 101", "Wed 11AM", "I002", "Room 102"),
    ("C003", "Computational Biology 101", "Fri 2PM", "I003", "Room 103"),
    ("C004", "Computational Materials 101", "Tue 10AM", "I004", "Room 104"),
    ("C005", "Artificial Intelligence Engineering 101", "Thu 3PM", "I005", "Room 105"),
    ("C006", "Astrophysics 101", "Mon 1PM", "I006", "Room 106"),
]


def make_student(sid, first, last, program, term=TERM):
    return dict(zip(STUDENT_FIELDS, (sid, first, last, program, term)))


def make_class(cid, course, when, instructor, location):
    return dict(zip(CLASS_FIELDS, (cid, course, when, instructor, location)))


SAMPLE_STUDENTS = [make_student(*r) for r in STUDENT_ROWS]
SAMPLE_CLASSES = [make_class(*r) for r in CLASS_ROWS]


def seed(db, students=SAMPLE_STUDENTS, classes=SAMPLE_CLASSES):
    """Students first, then classes; a failure in either stops the run."""
    ensure_indexes(db, [STUDENTS, CLASSES])
    n_students = insert_batch(db, STUDENTS, students)
    n_classes = insert_batch(db, CLASSES, classes)
    say(f"Sample data inserted: students={n_students}, classes={n_classes}")
    return n_students, n_classes


def run():
    return run_job(seed, "Error inserting data")


def main():
    run()


if __name__ == "__main__":
    main()
