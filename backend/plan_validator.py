"""
Replays a term-by-term enrollment plan against a built catalog.

Plan layout: for each term, a class count followed by that many
(course_code, class_code) pairs. Terms are replayed with the term index
counting down from catalog.term_limit to 1; a course's learned marker holds
the index of the term that completed it.

No Flask or transport imports.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from itertools import combinations

from catalog_builder import Catalog, ClassSection
from judge_errors import (
    AlreadyLearned,
    ClassNotFound,
    CreditExceeded,
    PrerequisiteUnmet,
    ScheduleConflict,
    TermMismatch,
)
from token_reader import TokenReader


@dataclass
class PlanStats:
    compulsory_count: int = 0
    post_courses_count: int = 0
    optional_score: int = 0

    def to_dict(self) -> dict:
        return asdict(self)


def _enroll(
    catalog: Catalog,
    reader: TokenReader,
    term_index: int,
    stats: PlanStats,
) -> ClassSection:
    """Read one (course, class) pair and apply the per-class checks."""
    course_code = reader.get_string()
    class_code = reader.get_string()
    section = catalog.find_class(course_code, class_code)
    if section is None:
        raise ClassNotFound(f"{course_code} {class_code}")

    course = section.course
    if course.term != term_index & 1:
        raise TermMismatch(course.code, term_index)
    if course.learned:
        raise AlreadyLearned(course.code)
    if course.is_optional:
        stats.optional_score += course.weight

    for pre_course in course.pre_courses:
        if not pre_course.learned:
            raise PrerequisiteUnmet(course.code, pre_course.code)

    # Only downstream courses completed in the adjacent replayed term count.
    for post_course in course.post_courses:
        if post_course.learned_at == term_index + 1:
            stats.post_courses_count += 1

    stats.compulsory_count += 1
    return section


def find_conflict(sections: list[ClassSection]) -> tuple[ClassSection, ClassSection] | None:
    """Return the first pair of overlapping sections, in enrollment order."""
    for first, second in combinations(sections, 2):
        if first.conflicts_with(second):
            return first, second
    return None


def validate_term(
    catalog: Catalog,
    reader: TokenReader,
    term_index: int,
    stats: PlanStats,
) -> list[ClassSection]:
    """
    Validate one term of the plan and return the enrolled sections.

    Learned markers are not touched here; the caller marks the term's
    courses only once every check for the term has passed.
    """
    class_count = reader.get_uint()
    sections: list[ClassSection] = []
    term_credits = 0
    for _ in range(class_count):
        section = _enroll(catalog, reader, term_index, stats)
        term_credits += section.course.credits
        sections.append(section)

    if term_credits > catalog.credit_limit:
        raise CreditExceeded(term_index, term_credits, catalog.credit_limit)

    conflict = find_conflict(sections)
    if conflict is not None:
        first, second = conflict
        raise ScheduleConflict(first.key, second.key)

    return sections


def validate_plan(catalog: Catalog, reader: TokenReader) -> PlanStats:
    """
    Replay every term of the plan and return the accumulated statistics.

    Halts at the first violated constraint by raising the matching
    JudgeError. Tokens left after the last term are ignored.
    """
    stats = PlanStats()
    for term_index in range(catalog.term_limit, 0, -1):
        sections = validate_term(catalog, reader, term_index, stats)
        for section in sections:
            section.course.learned_at = term_index
    return stats
