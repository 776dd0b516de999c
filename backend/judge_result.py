from dataclasses import asdict, dataclass

from plan_validator import PlanStats

STATUS_ACCEPTED = 1
STATUS_PLAN_INVALID = 2
STATUS_CATALOG_INVALID = 3

STATUS_LABELS = {
    STATUS_ACCEPTED: "accepted",
    STATUS_PLAN_INVALID: "plan_invalid",
    STATUS_CATALOG_INVALID: "catalog_invalid",
}


@dataclass(frozen=True)
class JudgeResult:
    compulsory_count: int = 0
    post_courses_count: int = 0
    optional_score: int = 0
    status: int = STATUS_ACCEPTED
    comment: str = ""

    @property
    def accepted(self) -> bool:
        return self.status == STATUS_ACCEPTED

    @property
    def status_label(self) -> str:
        return STATUS_LABELS.get(self.status, "unknown")

    def to_dict(self) -> dict:
        return asdict(self)


def accepted(stats: PlanStats) -> JudgeResult:
    return JudgeResult(
        compulsory_count=stats.compulsory_count,
        post_courses_count=stats.post_courses_count,
        optional_score=stats.optional_score,
        status=STATUS_ACCEPTED,
    )


def plan_rejected(error: Exception) -> JudgeResult:
    """Plan replay failed: counters are dropped, the error text is kept."""
    return JudgeResult(status=STATUS_PLAN_INVALID, comment=str(error))


def catalog_rejected(error: Exception) -> JudgeResult:
    return JudgeResult(status=STATUS_CATALOG_INVALID, comment=str(error))
