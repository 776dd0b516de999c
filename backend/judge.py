"""
Judge pipeline: tokenize -> build catalog -> replay plan -> project result.

Pure and synchronous; every call builds its own graph.
"""

from catalog_builder import build_catalog
from judge_errors import JudgeError
from judge_result import JudgeResult, accepted, catalog_rejected, plan_rejected
from plan_validator import validate_plan
from token_reader import TokenReader


def judge(
    input_data: str,
    output_data: str,
    legacy_post_edges: bool = False,
) -> JudgeResult:
    """
    Judge output_data (the plan) against input_data (the catalog).

    Catalog errors yield status 3, plan errors status 2, success status 1.
    """
    input_reader = TokenReader(input_data)
    output_reader = TokenReader(output_data)

    try:
        catalog = build_catalog(input_reader, legacy_post_edges=legacy_post_edges)
    except JudgeError as exc:
        return catalog_rejected(exc)

    try:
        stats = validate_plan(catalog, output_reader)
    except JudgeError as exc:
        return plan_rejected(exc)

    return accepted(stats)
