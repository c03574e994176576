from sqlalchemy import Column, Integer, Float, Text, String, DateTime, JSON
from sqlalchemy.sql import func
from backend.app.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(String)

    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Resume(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    # one resume per user; re-uploads overwrite
    user_email = Column(String, unique=True, index=True, nullable=False)
    extracted_text = Column(Text)
    analysis = Column(JSON, nullable=True)

    uploaded_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class InterviewAttempt(Base):
    __tablename__ = "interview_attempts"

    id = Column(Integer, primary_key=True, index=True)
    user_email = Column(String, index=True, nullable=False)

    question = Column(Text)
    user_answer = Column(Text)
    ai_feedback = Column(Text)
    score = Column(Float, default=0)            # 0-10
    category = Column(String, default="Technical")  # Technical / Behavioral / System Design
    session_mode = Column(String)

    timestamp = Column(DateTime(timezone=True), server_default=func.now())
