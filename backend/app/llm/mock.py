"""
Smart mock responder used when no live model call succeeds.
Pure and deterministic: no I/O, no randomness.
"""
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

# Picks are len(prompt) % len(choices): deterministic, so equal-length prompts
# on the same topic get the same question.

ANALYSIS_MARKERS = ("analysis of this resume", "analyze this resume")
EVALUATION_MARKER = "evaluate this answer"
NEXT_QUESTION_MARKER = "generate the next interview question"
GREETING_MARKERS = ("start", "begin", "hello")

TECH_KEYWORDS = ("java", "react", "node")
REASONING_KEYWORDS = ("because", "example")

# answers may span lines; the closing quote is the last character on its line
_ANSWER = re.compile(
    r'(?:Evaluate this answer:|User Answer:)\s*"(.*?)"[ \t]*$',
    re.IGNORECASE | re.DOTALL | re.MULTILINE,
)
_TOPIC = re.compile(r"Topic:\s*(.*)", re.IGNORECASE)
_ROLE = re.compile(r"Job Role:\s*(.*)", re.IGNORECASE)
_SKILLS = re.compile(r"- Detected Skills:\s*(.*)", re.IGNORECASE)

_NODE_QUESTIONS = [
    "How does the Event Loop work in Node.js?",
    "What is the purpose of middleware in Express.js?",
    "Explain how streams work in Node.js.",
]

# Order matters: first key found in the context wins ("javascript" before "java")
TOPIC_QUESTIONS: Dict[str, List[str]] = {
    "react": [
        "What are React Hooks and why do we use them?",
        "Can you explain the difference between state and props?",
        "How does the virtual DOM work in React?",
    ],
    "node.js": _NODE_QUESTIONS,
    "node": _NODE_QUESTIONS,
    "javascript": [
        "Explain the difference between let, const, and var.",
        "What is a closure in JavaScript?",
        "Can you explain promises and async/await?",
    ],
    "java": [
        "What is the difference between an interface and an abstract class?",
        "Explain the concept of multithreading in Java.",
        "How does Garbage Collection work in Java?",
    ],
    "python": [
        "What are decorators in Python and how do you use them?",
        "Can you explain the difference between lists and tuples?",
        "What is the Global Interpreter Lock (GIL) in Python?",
    ],
    "sql": [
        "What is the difference between a LEFT JOIN and an INNER JOIN?",
        "Explain what indexing is in a database.",
        "How do you optimize a slow-running SQL query?",
    ],
    "database": [
        "What is the difference between SQL and NoSQL?",
        "Explain what indexing is in a database.",
        "How do you define ACID properties?",
    ],
    "aws": [
        "What is the difference between an EC2 instance and a serverless Lambda function?",
        "Can you explain what an S3 bucket is and how to secure it?",
        "How do you use IAM to control AWS resources?",
    ],
}

GENERIC_QUESTION_TEMPLATES = [
    "Can you explain a complex concept related to {topic}?",
    "What are the best practices for working with {topic}?",
    "Describe a challenging problem you solved using {topic}.",
    "If you were designing a scalable architecture for a system involving {topic}, what key factors would you consider?",
    "Can you tell me about the most difficult bug you've had to fix in {topic}?",
]

MOCK_SKILLS = ["JavaScript", "HTML/CSS", "Node.js", "React", "Problem Solving"]


def _first_group(pattern: re.Pattern, text: str) -> str:
    m = pattern.search(text)
    return m.group(1).strip() if m else ""


def _analysis(prompt: str) -> Dict[str, Any]:
    return {
        "summary": (
            "This is a generated analysis (Smart Mock) because the AI service is unavailable "
            "or returned an error. The candidate appears to have experience in software development."
        ),
        "level": "Intermediate",
        "skills": list(MOCK_SKILLS),
        "questions": [
            "Explain the Virtual DOM in React.",
            "How do you handle asynchronous operations in JavaScript?",
            "Describe a challenging project you worked on.",
        ],
        "score": 75,
        "suggestions": [
            "Deepen your knowledge of System Design patterns.",
            "Consider learning TypeScript for type safety.",
            "Add more metrics to your project descriptions.",
        ],
    }


def _evaluation(prompt: str) -> Dict[str, Any]:
    answer = _first_group(_ANSWER, prompt).lower()

    if len(answer) < 5:
        score, feedback = 2, "Your answer provides no detail. Please elaborate."
    elif any(k in answer for k in TECH_KEYWORDS):
        score, feedback = 8, "Good use of technical terminology."
    elif any(k in answer for k in REASONING_KEYWORDS):
        score, feedback = 7, "Good reasoning provided."
    else:
        score, feedback = 5, "Okay answer."

    return {"score": score, "feedback": feedback, "category": "Technical"}


def pick_question(prompt: str) -> str:
    topic = _first_group(_TOPIC, prompt)
    role = _first_group(_ROLE, prompt)
    skills = _first_group(_SKILLS, prompt)
    context = f"{topic} {role} {skills}".lower()

    key: Optional[str] = next((k for k in TOPIC_QUESTIONS if k in context), None)
    if key is not None:
        choices = TOPIC_QUESTIONS[key]
        return choices[len(prompt) % len(choices)]

    display = topic or role or "your area of expertise"
    template = GENERIC_QUESTION_TEMPLATES[len(prompt) % len(GENERIC_QUESTION_TEMPLATES)]
    return template.format(topic=display)


def _next_question(prompt: str) -> Dict[str, Any]:
    return {"message": pick_question(prompt), "feedback": "Moving to next topic.", "score": 0}


def _greeting(prompt: str) -> Dict[str, Any]:
    return {
        "message": "Great! Let's get started. Please introduce yourself and highlight your key technical skills.",
        "score": 0,
        "feedback": "Introduction phase.",
    }


def _follow_up(prompt: str) -> Dict[str, Any]:
    return {
        "message": "That's interesting. Can you tell me more about your experience with backend testing?",
        "score": 5,
        "feedback": "General probe.",
        "error": None,
    }


def _contains_any(*markers: str) -> Callable[[str], bool]:
    return lambda lowered: any(m in lowered for m in markers)


# (task kind, predicate on lowercased prompt, handler on the unmodified prompt)
RULES: List[Tuple[str, Callable[[str], bool], Callable[[str], Dict[str, Any]]]] = [
    ("resume_analysis", _contains_any(*ANALYSIS_MARKERS), _analysis),
    ("answer_evaluation", _contains_any(EVALUATION_MARKER), _evaluation),
    ("next_question", _contains_any(NEXT_QUESTION_MARKER), _next_question),
    ("greeting", _contains_any(*GREETING_MARKERS), _greeting),
    ("chat", lambda lowered: True, _follow_up),
]


def _rule_for(prompt: str):
    lowered = prompt.lower()
    return next(rule for rule in RULES if rule[1](lowered))


def classify(prompt: str) -> str:
    return _rule_for(prompt or "")[0]


def respond(prompt: str) -> Dict[str, Any]:
    prompt = prompt or ""
    _, _, handler = _rule_for(prompt)
    return handler(prompt)
