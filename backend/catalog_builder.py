"""
Builds the course/class graph from a catalog description.

Catalog layout (whitespace-separated tokens, in order):

    course_count class_count pre_edge_count post_edge_count credit_limit term_count
    course_count x   code term credits weight
    class_count  x   course_code class_code day0 .. day6 weeks
    pre_edge_count  x  course_code pre_course_code
    post_edge_count x  course_code post_course_code

The first error aborts the build; no partial catalog is ever returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from judge_errors import DuplicateClass, DuplicateCourse, UnknownCourseReference
from token_reader import TokenReader

DAYS_PER_WEEK = 7


@dataclass(eq=False)
class Course:
    code: str
    term: int
    credits: int
    weight: int
    # 0 until the plan replay completes the course, then the term index.
    learned_at: int = 0
    classes: dict[str, ClassSection] = field(default_factory=dict)
    pre_courses: list[Course] = field(default_factory=list)
    post_courses: list[Course] = field(default_factory=list)

    @property
    def is_optional(self) -> bool:
        return self.weight > 0

    @property
    def learned(self) -> bool:
        return self.learned_at > 0


@dataclass(eq=False)
class ClassSection:
    course: Course
    code: str
    day_masks: tuple[int, ...]
    week_mask: int

    @property
    def key(self) -> str:
        return class_key(self.course.code, self.code)

    def conflicts_with(self, other: ClassSection) -> bool:
        """True when both sections meet in a common week and share a time slot."""
        if self.week_mask & other.week_mask == 0:
            return False
        return any(a & b for a, b in zip(self.day_masks, other.day_masks))


@dataclass(eq=False)
class Catalog:
    courses: dict[str, Course]
    classes: dict[str, ClassSection]
    credit_limit: int
    term_limit: int

    def find_class(self, course_code: str, class_code: str) -> ClassSection | None:
        return self.classes.get(class_key(course_code, class_code))


def class_key(course_code: str, class_code: str) -> str:
    return f"{course_code} {class_code}"


def _read_course(reader: TokenReader) -> Course:
    code = reader.get_string()
    term = reader.get_uint()
    credits = reader.get_uint()
    weight = reader.get_uint()
    return Course(code=code, term=term, credits=credits, weight=weight)


def _resolve(courses: dict[str, Course], code: str, role: str) -> Course:
    course = courses.get(code)
    if course is None:
        raise UnknownCourseReference(code, role)
    return course


def build_catalog(reader: TokenReader, legacy_post_edges: bool = False) -> Catalog:
    """
    Consume a catalog description from reader and return the populated graph.

    legacy_post_edges reproduces the legacy scoring's postrequisite wiring:
    for an edge (course, post) the post course's list is replaced by the
    course's list plus the course itself. By default the edge is recorded as
    named, i.e. post is appended to course.post_courses.
    """
    course_count = reader.get_uint()
    class_count = reader.get_uint()
    pre_edge_count = reader.get_uint()
    post_edge_count = reader.get_uint()
    credit_limit = reader.get_uint()
    term_limit = reader.get_uint()

    courses: dict[str, Course] = {}
    for _ in range(course_count):
        course = _read_course(reader)
        if course.code in courses:
            raise DuplicateCourse(course.code)
        courses[course.code] = course

    classes: dict[str, ClassSection] = {}
    for _ in range(class_count):
        course_code = reader.get_string()
        course = _resolve(courses, course_code, "course")
        class_code = reader.get_string()
        day_masks = tuple(reader.get_uint() for _ in range(DAYS_PER_WEEK))
        week_mask = reader.get_uint()

        key = class_key(course_code, class_code)
        if key in classes:
            raise DuplicateClass(key)
        section = ClassSection(
            course=course,
            code=class_code,
            day_masks=day_masks,
            week_mask=week_mask,
        )
        course.classes[class_code] = section
        classes[key] = section

    for _ in range(pre_edge_count):
        course_code = reader.get_string()
        pre_code = reader.get_string()
        course = _resolve(courses, course_code, "course")
        pre_course = _resolve(courses, pre_code, "pre-course")
        course.pre_courses.append(pre_course)

    for _ in range(post_edge_count):
        course_code = reader.get_string()
        post_code = reader.get_string()
        course = _resolve(courses, course_code, "course")
        post_course = _resolve(courses, post_code, "post-course")
        if legacy_post_edges:
            post_course.post_courses = course.post_courses + [course]
        else:
            course.post_courses.append(post_course)

    return Catalog(
        courses=courses,
        classes=classes,
        credit_limit=credit_limit,
        term_limit=term_limit,
    )
