# college_enrollments/utils/enrollment_report.py
from bson import json_util

from college_enrollments.db import CLASSES, ENROLLMENTS, STUDENTS

# Output row shape; order is part of the contract.
REPORT_FIELDS = ("enrollmentId", "firstName", "lastName", "courseName", "dateTime", "location")

# Stored record shapes; also the find() projections for the in-process join.
STUDENT_FIELDS = ("studentId", "firstName", "lastName", "program", "term")
CLASS_FIELDS = ("classId", "courseName", "dateTime", "instructorId", "location")
ENROLLMENT_FIELDS = ("enrollmentId", "studentId", "classId")

# $unwind without preserveNullAndEmptyArrays drops enrollments whose lookup
# came back empty and emits one doc per element when ids are duplicated.
REPORT_PIPELINE = [
    {"$lookup": {
        "from": STUDENTS,
        "localField": "studentId",
        "foreignField": "studentId",
        "as": "studentDetails",
    }},
    {"$lookup": {
        "from": CLASSES,
        "localField": "classId",
        "foreignField": "classId",
        "as": "classDetails",
    }},
    {"$unwind": "$studentDetails"},
    {"$unwind": "$classDetails"},
    {"$project": {
        "_id": 0,
        "enrollmentId": 1,
        "firstName": "$studentDetails.firstName",
        "lastName": "$studentDetails.lastName",
        "courseName": "$classDetails.courseName",
        "dateTime": "$classDetails.dateTime",
        "location": "$classDetails.location",
    }},
]


def _index(docs, key):
    out = {}
    for d in docs:
        out.setdefault(d.get(key), []).append(d)
    return out


def _row(e, s, c):
    # like $project: a field absent from the source is absent from the row
    sources = (e, s, s, c, c, c)
    return {k: src[k] for k, src in zip(REPORT_FIELDS, sources) if k in src}


def join_enrollments(enrollments, students, classes):
    """
    Inner join enrollments -> students -> classes by identifier equality.

    One row per (enrollment, matching student, matching class). An enrollment
    with no matching student or no matching class produces nothing; duplicate
    identifiers fan out. Rows keep enrollment order, then student order, then
    class order, which is the order the server pipeline emits.
    """
    by_student = _index(students, "studentId")
    by_class = _index(classes, "classId")
    rows = []
    for e in enrollments:
        for s in by_student.get(e.get("studentId"), []):
            for c in by_class.get(e.get("classId"), []):
                rows.append(_row(e, s, c))
    return rows


def find_dangling(enrollments, students, classes):
    """Enrollments the join would drop, with which side failed to resolve."""
    sids = {s.get("studentId") for s in students}
    cids = {c.get("classId") for c in classes}
    out = []
    for e in enrollments:
        missing = []
        if e.get("studentId") not in sids:
            missing.append("student")
        if e.get("classId") not in cids:
            missing.append("class")
        if missing:
            out.append({
                "enrollmentId": e.get("enrollmentId"),
                "studentId": e.get("studentId"),
                "classId": e.get("classId"),
                "missing": missing,
            })
    return out


def aggregate_report(db):
    # list() so a mid-cursor failure leaves nothing half-emitted
    return list(db[ENROLLMENTS].aggregate(REPORT_PIPELINE))


def projection(fields):
    p = {"_id": 0}
    p.update({f: 1 for f in fields})
    return p


def fetch_all(db):
    """(enrollments, students, classes) as plain lists of the declared fields."""
    return (
        list(db[ENROLLMENTS].find({}, projection(ENROLLMENT_FIELDS))),
        list(db[STUDENTS].find({}, projection(STUDENT_FIELDS))),
        list(db[CLASSES].find({}, projection(CLASS_FIELDS))),
    )


def client_report(db):
    return join_enrollments(*fetch_all(db))


def to_json(rows):
    return json_util.dumps(rows, indent=2)
