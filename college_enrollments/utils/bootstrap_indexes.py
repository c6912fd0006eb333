from college_enrollments.db import CLASSES, ENROLLMENTS, STUDENTS

# Identifiers come from whoever produces the data. The unique index only makes a
# colliding re-insert fail instead of duplicating; it also backs the $lookup
# foreignField of the report join.
UNIQUE_KEYS = {
    STUDENTS: "studentId",
    CLASSES: "classId",
    ENROLLMENTS: "enrollmentId",
}


def ensure_indexes(db, names=None):
    for name in names or UNIQUE_KEYS:
        db[name].create_index(UNIQUE_KEYS[name], unique=True)
