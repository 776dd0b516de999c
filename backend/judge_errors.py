"""
Error taxonomy shared by the catalog builder and the plan validator.

Every error names the offending entity. Which stage raised it decides the
outward status code, not the error class.
"""


class JudgeError(Exception):
    """Base class for all catalog and plan errors."""


# ── Token stream ──────────────────────────────────────────────────────────────

class TokenExhausted(JudgeError):
    def __init__(self, total: int):
        self.total = total
        super().__init__(f"reader out of range: {total}")


class TokenParseError(JudgeError):
    def __init__(self, token: str, expected: str = "integer"):
        self.token = token
        self.expected = expected
        super().__init__(f"invalid {expected}: {token!r}")


# ── Catalog stage ─────────────────────────────────────────────────────────────

class DuplicateCourse(JudgeError):
    def __init__(self, course_code: str):
        self.course_code = course_code
        super().__init__(f"course {course_code} already exists")


class DuplicateClass(JudgeError):
    def __init__(self, class_key: str):
        self.class_key = class_key
        super().__init__(f"class {class_key} already exists")


class UnknownCourseReference(JudgeError):
    """
    A class, prerequisite or postrequisite declaration names a course
    that was never declared.

    role is one of "course", "pre-course", "post-course".
    """

    def __init__(self, course_code: str, role: str = "course"):
        self.course_code = course_code
        self.role = role
        super().__init__(f"{role} {course_code} does not exist")


# ── Plan stage ────────────────────────────────────────────────────────────────

class ClassNotFound(JudgeError):
    def __init__(self, class_key: str):
        self.class_key = class_key
        super().__init__(f"class {class_key} does not exist")


class TermMismatch(JudgeError):
    def __init__(self, course_code: str, term_index: int):
        self.course_code = course_code
        self.term_index = term_index
        super().__init__(f"the term of course {course_code} is incorrect")


class AlreadyLearned(JudgeError):
    def __init__(self, course_code: str):
        self.course_code = course_code
        super().__init__(f"course {course_code} already learned")


class PrerequisiteUnmet(JudgeError):
    def __init__(self, course_code: str, prerequisite_code: str):
        self.course_code = course_code
        self.prerequisite_code = prerequisite_code
        super().__init__(f"pre-course {prerequisite_code} not learned")


class CreditExceeded(JudgeError):
    def __init__(self, term_index: int, credits: int, limit: int):
        self.term_index = term_index
        self.credits = credits
        self.limit = limit
        super().__init__(
            f"credits of term {term_index} exceed the limit: {credits} > {limit}"
        )


class ScheduleConflict(JudgeError):
    def __init__(self, first_key: str, second_key: str):
        self.first_key = first_key
        self.second_key = second_key
        super().__init__(f"class {first_key} and class {second_key} conflicts")
