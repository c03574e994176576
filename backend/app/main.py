import logging
from typing import Optional

from fastapi import FastAPI, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.app.config import LOG_LEVEL, MAX_UPLOAD_BYTES
from backend.app.dashboard import build_dashboard
from backend.app.db import Base, engine, get_db
from backend.app.interview import (
    ANALYST_ROLE,
    build_analysis_prompt,
    build_evaluation_prompt,
    build_next_question_prompt,
    normalize_analysis,
    normalize_evaluation,
)
from backend.app.llm import get_gateway
from backend.app.llm.gateway import AIGateway
from backend.app.llm.mock import respond
from backend.app.models import InterviewAttempt, Resume, User
from backend.app.resume_parser import ResumeParseError, extract_resume_text
from backend.app.security import hash_password, verify_password

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="AI Mock Interview Backend")
Base.metadata.create_all(bind=engine)

MIN_RESUME_CHARS = 50


@app.get("/")
def root():
    return {"message": "Interview backend running", "try": "/health or /docs"}


@app.get("/health")
def health(gateway: AIGateway = Depends(get_gateway)):
    return {"status": "ok", "llm_mode": gateway.mode}


# ---------------- auth ----------------

class RegisterIn(BaseModel):
    name: str = ""
    email: str
    password: str
    role: Optional[str] = None


class LoginIn(BaseModel):
    email: str
    password: str


@app.post("/register", status_code=201)
def register(data: RegisterIn, db: Session = Depends(get_db)):
    if db.query(User).filter(User.email == data.email).first():
        raise HTTPException(status_code=409, detail="User exists")
    try:
        db.add(User(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role,
        ))
        db.commit()
        return {"success": True}
    except Exception as e:
        db.rollback()
        logger.error("Register error: %s", e)
        raise HTTPException(status_code=500, detail="Error registering user")


@app.post("/login")
def login(data: LoginIn, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == data.email).first()
    if user and verify_password(data.password, user.password_hash):
        return {"success": True}
    return JSONResponse(status_code=401, content={"success": False, "message": "Invalid credentials"})


# ---------------- resume ----------------

@app.post("/upload-resume")
def upload_resume(
    resume: Optional[UploadFile] = File(None),
    email: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    gateway: AIGateway = Depends(get_gateway),
):
    if resume is None:
        raise HTTPException(status_code=400, detail="No file uploaded.")

    # one byte past the limit is enough to know it's too large
    data = resume.file.read(MAX_UPLOAD_BYTES + 1)
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=400, detail="File too large.")

    try:
        text = extract_resume_text(data, resume.content_type)
    except ResumeParseError as e:
        logger.error("Resume upload error: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    if len(text) < MIN_RESUME_CHARS:
        raise HTTPException(status_code=400, detail="Resume text too short.")

    analysis = normalize_analysis(gateway.generate(build_analysis_prompt(text), ANALYST_ROLE))

    if email:
        try:
            existing = db.query(Resume).filter(Resume.user_email == email).first()
            if existing:
                existing.extracted_text = text
                existing.analysis = analysis
            else:
                db.add(Resume(user_email=email, extracted_text=text, analysis=analysis))
            db.commit()
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=str(e))

    return {"success": True, "analysis": analysis}


# ---------------- dashboard ----------------

@app.get("/user-dashboard/{email}")
def user_dashboard(email: str, db: Session = Depends(get_db)):
    resume = db.query(Resume).filter(Resume.user_email == email).first()
    attempts = (
        db.query(InterviewAttempt)
          .filter(InterviewAttempt.user_email == email)
          .order_by(InterviewAttempt.timestamp.asc(), InterviewAttempt.id.asc())
          .all()
    )
    return build_dashboard(resume.analysis if resume else None, attempts)


# ---------------- interview chat ----------------

class ChatContext(BaseModel):
    mode: str = "topic"
    skill: Optional[str] = None


class ChatIn(BaseModel):
    email: str
    message: str = ""
    context: ChatContext = ChatContext()
    isFirst: bool = False
    # question the user is answering, when the client tracks it
    question: Optional[str] = None


@app.post("/interview/chat")
def interview_chat(data: ChatIn, db: Session = Depends(get_db), gateway: AIGateway = Depends(get_gateway)):
    try:
        resume_analysis = None
        if data.context.mode == "resume":
            resume = db.query(Resume).filter(Resume.user_email == data.email).first()
            resume_analysis = resume.analysis if resume else None

        # 1) evaluate the previous answer
        evaluation = None
        if not data.isFirst:
            eval_prompt = build_evaluation_prompt(data.message, data.context.mode, data.context.skill)
            evaluation = normalize_evaluation(gateway.generate(eval_prompt))

            db.add(InterviewAttempt(
                user_email=data.email,
                question=data.question or "Interview Question",
                user_answer=data.message,
                ai_feedback=evaluation["feedback"],
                score=evaluation["score"],
                category=evaluation["category"],
                session_mode=data.context.mode,
            ))
            db.commit()

        # 2) next question
        next_prompt = build_next_question_prompt(
            data.message, evaluation, data.context.mode, data.context.skill, resume_analysis
        )
        next_q = gateway.generate(next_prompt)
        reply = next_q.get("message") or respond(next_prompt)["message"]

        return {"reply": reply, "evaluation": evaluation}

    except Exception as e:
        db.rollback()
        logger.error("Chat error: %s", e)
        raise HTTPException(status_code=500, detail="Chat Logic Failed")
