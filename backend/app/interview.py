import json
from typing import Any, Dict, Optional

ANALYST_ROLE = "System: Expert Technical Recruiter"
RESUME_PROMPT_CHARS = 4000
CATEGORIES = ("Technical", "Behavioral", "System Design")


def build_analysis_prompt(resume_text: str) -> str:
    return f"""
Perform a deep analysis of this resume.
Task:
1. Extract a concise executive summary (3-4 sentences max).
2. Identify the candidate's experience level (Entry, Mid, Senior, Lead).
3. List exactly 5-8 key technical skills (e.g., Python, React, AWS).
4. Suggest 3 specific interview questions related to their projects or skills.
5. Calculate a match score (0-100) for a general Software Engineer role.

RESUME CONTENT:
{(resume_text or "")[:RESUME_PROMPT_CHARS]}

Return JSON strictly:
{{
  "summary": "string",
  "level": "string",
  "skills": ["string", "string"],
  "questions": ["string", "string"],
  "score": number,
  "suggestions": ["string", "string"]
}}
"""


def build_evaluation_prompt(answer: str, mode: str, skill: Optional[str] = None) -> str:
    return f"""
Evaluate this answer.
User Answer: "{answer}"
Context: {mode} interview. Topic: {skill or 'General'}.

Return JSON strictly:
{{
  "score": number (0-10),
  "feedback": "string (concise)",
  "category": "Technical" | "Behavioral" | "System Design"
}}
"""


def build_next_question_prompt(
    answer: str,
    evaluation: Optional[Dict[str, Any]],
    mode: str,
    skill: Optional[str] = None,
    resume_analysis: Optional[Dict[str, Any]] = None,
) -> str:
    if mode == "resume" and resume_analysis:
        context = f"""
Candidate Resume Analysis:
- Level: {resume_analysis.get("level", "Unknown")}
- Detected Skills: {", ".join(resume_analysis.get("skills") or [])}
- Summary: {resume_analysis.get("summary") or "N/A"}

Task: Ask a relevant technical or behavioral interview question tailored to this candidate's profile.
"""
    else:
        context = f"Topic: {skill or 'General Software Engineering'}"

    return f"""
Generate the next interview question.
Context: {context}
Previous Interaction:
- User's Last Answer: "{answer}"
- AI Feedback: {json.dumps(evaluation)}

Constraint: Keep the question concise and professional.
Return JSON strictly: {{ "message": "string" }}
"""


def _number(v: Any) -> float:
    if isinstance(v, bool):
        return 0
    if isinstance(v, (int, float)):
        return v
    try:
        return float(v)
    except (TypeError, ValueError):
        return 0


def _str_list(v: Any) -> list:
    return [str(x) for x in v] if isinstance(v, list) else []


def normalize_analysis(raw: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in whatever the model left out."""
    return {
        "score": _number(raw.get("score")),
        "skills": _str_list(raw.get("skills")),
        "level": raw.get("level") or "Unknown",
        "summary": raw.get("summary") or "Candidate profile analysis unavailable.",
        "suggestions": _str_list(raw.get("suggestions")),
        "questions": _str_list(raw.get("questions")),
    }


def normalize_evaluation(raw: Dict[str, Any]) -> Dict[str, Any]:
    score = max(0, min(10, _number(raw.get("score"))))
    category = raw.get("category")
    return {
        "score": score,
        "feedback": str(raw.get("feedback") or ""),
        "category": category if category in CATEGORIES else "Technical",
    }
