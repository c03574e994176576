import re
from typing import Any, Dict, List, Optional, Sequence

MINUTES_PER_QUESTION = 2
TREND_WINDOW = 10


def practice_time(total_questions: int) -> str:
    mins = total_questions * MINUTES_PER_QUESTION
    return f"{mins / 60:.1f}h" if mins > 60 else f"{mins}m"


def category_counts(categories: Sequence[Optional[str]]) -> List[int]:
    """[Technical, Behavioral, SystemDesign]; unknown categories count as Technical."""
    technical = behavioral = system_design = 0
    for cat in categories:
        cat = cat or "Technical"
        if re.search(r"behavioral", cat, re.IGNORECASE):
            behavioral += 1
        elif re.search(r"system", cat, re.IGNORECASE):
            system_design += 1
        else:
            technical += 1
    return [technical, behavioral, system_design]


def _label(ts) -> str:
    return f"{ts:%b} {ts.day}" if ts else ""


def build_dashboard(resume_analysis: Optional[Dict[str, Any]], attempts: Sequence[Any]) -> Dict[str, Any]:
    # attempts must be oldest first
    total = len(attempts)
    total_score = sum(a.score or 0 for a in attempts)
    avg = round(total_score / total, 1) if total else 0

    recent = list(attempts)[-TREND_WINDOW:]

    return {
        "resume": resume_analysis,
        "stats": {
            "totalQuestions": total,
            "avgScore": avg,
            "practiceTime": practice_time(total),
        },
        "charts": {
            "skills": category_counts([a.category for a in attempts]),
            "trendLabels": [_label(a.timestamp) for a in recent],
            "trendData": [a.score for a in recent],
        },
    }
