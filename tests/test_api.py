"""HTTP surface, run against SQLite with the smart mock standing in for Gemini."""

from backend.app.llm import get_gateway
from backend.app.llm.gateway import AIGateway
from backend.app.llm.mock import MOCK_SKILLS, TOPIC_QUESTIONS
from backend.app import main
from backend.app.main import app

RESUME_TXT = (
    "This is a test resume.\nName: John Doe\nSkills: JavaScript, Node.js\n"
    "Experience: 5 years of software engineering."
).encode()


def upload(client, content=RESUME_TXT, content_type="text/plain", email="john@example.com"):
    return client.post(
        "/upload-resume",
        files={"resume": ("resume.txt", content, content_type)},
        data={"email": email},
    )


def test_health(app_client):
    r = app_client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "llm_mode": "mock"}


class TestAuth:

    def test_register_and_login(self, app_client):
        r = app_client.post("/register", json={"name": "Jane", "email": "jane@example.com", "password": "pw12345"})
        assert r.status_code == 201
        assert r.json() == {"success": True}

        r = app_client.post("/login", json={"email": "jane@example.com", "password": "pw12345"})
        assert r.status_code == 200
        assert r.json() == {"success": True}

    def test_duplicate_register(self, app_client):
        body = {"name": "Jane", "email": "jane@example.com", "password": "pw"}
        app_client.post("/register", json=body)
        r = app_client.post("/register", json=body)
        assert r.status_code == 409

    def test_bad_login(self, app_client):
        app_client.post("/register", json={"email": "jane@example.com", "password": "pw"})
        r = app_client.post("/login", json={"email": "jane@example.com", "password": "nope"})
        assert r.status_code == 401
        assert r.json()["success"] is False

        r = app_client.post("/login", json={"email": "ghost@example.com", "password": "pw"})
        assert r.status_code == 401


class TestUploadResume:

    def test_analysis_with_mock(self, app_client):
        r = upload(app_client)
        assert r.status_code == 200
        body = r.json()
        assert body["success"] is True
        assert body["analysis"]["score"] == 75
        assert body["analysis"]["skills"] == MOCK_SKILLS

        dash = app_client.get("/user-dashboard/john@example.com").json()
        assert dash["resume"]["score"] == 75

    def test_reupload_overwrites(self, app_client, fake_generator):
        upload(app_client)
        client = fake_generator({"m": '{"score": 91, "skills": ["Go"]}'})
        app.dependency_overrides[get_gateway] = lambda: AIGateway(client=client, models=["m"])

        r = upload(app_client)
        analysis = r.json()["analysis"]
        assert analysis["score"] == 91
        assert analysis["skills"] == ["Go"]
        assert analysis["level"] == "Unknown"

        dash = app_client.get("/user-dashboard/john@example.com").json()
        assert dash["resume"]["score"] == 91

    def test_no_file(self, app_client):
        r = app_client.post("/upload-resume", data={"email": "john@example.com"})
        assert r.status_code == 400

    def test_short_text(self, app_client):
        r = upload(app_client, content=b"Name: John Doe, Java developer")
        assert r.status_code == 400
        assert r.json()["detail"] == "Resume text too short."

    def test_too_large(self, app_client, monkeypatch):
        monkeypatch.setattr(main, "MAX_UPLOAD_BYTES", len(RESUME_TXT) - 1)
        r = upload(app_client)
        assert r.status_code == 400
        assert r.json()["detail"] == "File too large."

    def test_exactly_at_limit(self, app_client, monkeypatch):
        monkeypatch.setattr(main, "MAX_UPLOAD_BYTES", len(RESUME_TXT))
        assert upload(app_client).status_code == 200

    def test_unsupported_type(self, app_client):
        r = upload(app_client, content=b"\x89PNG....", content_type="image/png")
        assert r.status_code == 400
        assert "Unsupported file type" in r.json()["detail"]


class TestInterviewChat:

    def test_first_turn(self, app_client):
        r = app_client.post("/interview/chat", json={
            "email": "john@example.com",
            "message": "I am ready for the interview",
            "context": {"mode": "topic", "skill": "React"},
            "isFirst": True,
        })
        assert r.status_code == 200
        body = r.json()
        assert body["evaluation"] is None
        assert body["reply"] in TOPIC_QUESTIONS["react"]

        dash = app_client.get("/user-dashboard/john@example.com").json()
        assert dash["stats"]["totalQuestions"] == 0

    def test_multi_line_answer_is_scored(self, app_client):
        r = app_client.post("/interview/chat", json={
            "email": "john@example.com",
            "message": "I used Node.js for APIs.\nAnd React for the UI.",
            "context": {"mode": "topic", "skill": "Node"},
        })
        assert r.status_code == 200
        assert r.json()["evaluation"]["score"] == 8

    def test_answer_is_scored_and_saved(self, app_client):
        r = app_client.post("/interview/chat", json={
            "email": "john@example.com",
            "message": "ok",
            "context": {"mode": "topic", "skill": "Python"},
        })
        body = r.json()
        assert body["evaluation"] == {
            "score": 2,
            "feedback": "Your answer provides no detail. Please elaborate.",
            "category": "Technical",
        }
        assert body["reply"] in TOPIC_QUESTIONS["python"]

        dash = app_client.get("/user-dashboard/john@example.com").json()
        assert dash["stats"] == {"totalQuestions": 1, "avgScore": 2.0, "practiceTime": "2m"}
        assert dash["charts"]["skills"] == [1, 0, 0]
        assert dash["charts"]["trendData"] == [2.0]

    def test_resume_mode_uses_detected_skills(self, app_client):
        upload(app_client)
        r = app_client.post("/interview/chat", json={
            "email": "john@example.com",
            "message": "start",
            "context": {"mode": "resume"},
            "isFirst": True,
        })
        # mock analysis skills include React, which is first in the topic table
        assert r.json()["reply"] in TOPIC_QUESTIONS["react"]

    def test_live_model_reply(self, app_client, fake_generator):
        client = fake_generator({"m": '{"score": 9, "feedback": "Clear STAR answer.", '
                                      '"category": "Behavioral", "message": "Tell me about a conflict."}'})
        app.dependency_overrides[get_gateway] = lambda: AIGateway(client=client, models=["m"])

        r = app_client.post("/interview/chat", json={
            "email": "john@example.com",
            "message": "I resolved it by listening first",
            "context": {"mode": "topic", "skill": "Leadership"},
        })
        body = r.json()
        assert body["reply"] == "Tell me about a conflict."
        assert body["evaluation"]["category"] == "Behavioral"

        dash = app_client.get("/user-dashboard/john@example.com").json()
        assert dash["charts"]["skills"] == [0, 1, 0]

    def test_reply_falls_back_when_model_omits_message(self, app_client, fake_generator):
        client = fake_generator({"m": '{"score": 6}'})
        app.dependency_overrides[get_gateway] = lambda: AIGateway(client=client, models=["m"])

        r = app_client.post("/interview/chat", json={
            "email": "john@example.com",
            "message": "hello",
            "context": {"mode": "topic", "skill": "AWS"},
            "isFirst": True,
        })
        assert r.json()["reply"] in TOPIC_QUESTIONS["aws"]
