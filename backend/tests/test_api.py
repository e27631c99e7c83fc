import asyncio
import json
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from api.limiter import limiter
from main import app
from services.gemini_client import GeminiError
from services.job_fetcher import JobFetchError, JobPosting

client = TestClient(app)

RESUME = b"Frontend engineer. JavaScript, React and SQL. Built dashboards."
JOB = "Hiring a developer with JavaScript, React, SQL, Docker and AWS."


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "gemini_configured" in data


# --- /api/analyze ---


def test_analyze_with_pasted_description():
    response = client.post(
        "/api/analyze",
        files={"resume": ("resume.txt", RESUME, "text/plain")},
        data={"job_description": JOB},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["app_name"] == "ApplyEasy"
    assert data["job_title"] == "Job"
    assert data["match_score"] == 60
    assert set(data["common_skills"]) == {"javascript", "react", "sql"}
    assert set(data["missing_skills"]) == {"docker", "aws"}
    assert data["extra_skills"] == []
    assert len(data["recommendations"]) == 2
    assert data["resume_snippet"] == RESUME.decode()
    assert data["full_job_text"] == JOB


def test_analyze_requires_file():
    response = client.post("/api/analyze", data={"job_description": JOB})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please upload a resume file."


def test_analyze_rejects_unreadable_resume():
    response = client.post(
        "/api/analyze",
        files={"resume": ("resume.pdf", b"garbage", "application/pdf")},
        data={"job_description": JOB},
    )
    assert response.status_code == 400
    assert "Could not read text from resume" in response.json()["detail"]


def test_analyze_requires_job_text():
    response = client.post(
        "/api/analyze",
        files={"resume": ("resume.txt", RESUME, "text/plain")},
    )
    assert response.status_code == 400
    assert "paste the job description" in response.json()["detail"]


def test_analyze_fetches_job_url():
    posting = JobPosting(
        url="https://jobs.example.com/1",
        title="Frontend Engineer - Acme | Jobs",
        text="React and JavaScript engineer wanted",
    )
    with patch("services.job_fetcher.fetch_job_posting", AsyncMock(return_value=posting)) as fetch:
        response = client.post(
            "/api/analyze",
            files={"resume": ("resume.txt", RESUME, "text/plain")},
            data={"job_url": "https://jobs.example.com/1"},
        )

    fetch.assert_awaited_once_with("https://jobs.example.com/1")
    assert response.status_code == 200
    data = response.json()
    assert data["job_title"] == "Frontend Engineer"
    assert data["company"] == "Acme"
    assert data["job_url"] == "https://jobs.example.com/1"
    assert data["match_score"] == 100


def test_analyze_job_url_fetch_failure():
    with patch(
        "services.job_fetcher.fetch_job_posting",
        AsyncMock(side_effect=JobFetchError("boom")),
    ):
        response = client.post(
            "/api/analyze",
            files={"resume": ("resume.txt", RESUME, "text/plain")},
            data={"job_url": "https://jobs.example.com/1"},
        )
    assert response.status_code == 400


def test_analyze_rejects_large_upload():
    with patch("api.router.settings.max_upload_size_mb", 0):
        response = client.post(
            "/api/analyze",
            files={"resume": ("resume.txt", RESUME, "text/plain")},
            data={"job_description": JOB},
        )
    assert response.status_code == 400
    assert "too large" in response.json()["detail"]


def test_analyze_parses_upload_off_the_event_loop():
    loops = []

    def fake_extract(filename, content):
        try:
            loops.append(asyncio.get_running_loop())
        except RuntimeError:
            loops.append(None)
        return content.decode()

    with patch("services.document_parser.extract_upload_text", side_effect=fake_extract) as extract:
        response = client.post(
            "/api/analyze",
            files={"resume": ("resume.txt", RESUME, "text/plain")},
            data={"job_description": JOB},
        )

    assert response.status_code == 200
    extract.assert_called_once_with("resume.txt", RESUME)
    assert loops == [None]


def test_analyze_quick():
    response = client.post(
        "/api/analyze/quick",
        json={"resume_text": RESUME.decode(), "job_description": "Barista wanted"},
    )
    assert response.status_code == 200
    assert response.json()["match_score"] == 25


def test_analyze_quick_rate_limited():
    limiter.enabled = True
    limiter.reset()
    try:
        statuses = [
            client.post(
                "/api/analyze/quick",
                json={"resume_text": RESUME.decode(), "job_description": JOB},
            ).status_code
            for _ in range(11)
        ]
    finally:
        limiter.reset()

    assert statuses == [200] * 10 + [429]


# --- AI routes ---


def _gemini_returns(payload):
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return patch("services.gemini_client.generate_text", AsyncMock(return_value=text))


def test_cover_letter():
    with _gemini_returns({"coverLetter": "Dear Hiring Manager,"}):
        response = client.post(
            "/api/ai/cover-letter", json={"resume_text": "r", "job_text": "j"}
        )
    assert response.status_code == 200
    assert response.json() == {"cover_letter": "Dear Hiring Manager,"}


def test_cover_letter_falls_back_to_raw_text():
    with _gemini_returns("Plain letter text"):
        response = client.post(
            "/api/ai/cover-letter", json={"resume_text": "r", "job_text": "j"}
        )
    assert response.json() == {"cover_letter": "Plain letter text"}


def test_cover_letter_requires_inputs():
    response = client.post("/api/ai/cover-letter", json={"resume_text": "r"})
    assert response.status_code == 400


def test_ai_route_reports_gemini_failure():
    with patch("services.gemini_client.generate_text", AsyncMock(side_effect=GeminiError("no key"))):
        response = client.post("/api/ai/mentor-chat", json={"message": "How do I prep?"})
    assert response.status_code == 500
    assert response.json()["detail"] == "AI mentor chat failed. Please try again."


def test_mentor_chat_requires_message():
    response = client.post("/api/ai/mentor-chat", json={"message": "   "})
    assert response.status_code == 400


def test_interview_questions_flattened():
    groups = {
        "technical": ["What is a closure?"],
        "project": ["Describe your tracker app"],
        "behavioral": ["", "Tell me about a conflict"],
        "company": [],
    }
    with _gemini_returns(groups):
        response = client.post("/api/ai/interview/questions", json={"job_text": "Frontend role"})
    assert response.status_code == 200
    data = response.json()
    assert data["questions"] == [
        "What is a closure?",
        "Describe your tracker app",
        "Tell me about a conflict",
    ]
    assert data["groups"]["technical"] == ["What is a closure?"]


def test_interview_questions_unparseable():
    with _gemini_returns("sorry, no JSON today"):
        response = client.post("/api/ai/interview/questions", json={"job_text": "Frontend role"})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to parse AI questions. Try again."


def test_interview_feedback():
    with _gemini_returns({"score": 7, "overall": "Good", "tips": ["Use STAR"], "improvedAnswer": "..."}):
        response = client.post(
            "/api/ai/interview/feedback",
            json={"question": "Why us?", "answer": "Because"},
        )
    data = response.json()
    assert data["score"] == 7
    assert data["tips"] == ["Use STAR"]
    assert data["improved_answer"] == "..."


def test_interview_feedback_fallback():
    with _gemini_returns("raw feedback"):
        response = client.post(
            "/api/ai/interview/feedback",
            json={"question": "Why us?", "answer": "Because"},
        )
    data = response.json()
    assert data["score"] == 0
    assert data["tips"] == ["raw feedback"]


def test_resume_guide():
    with _gemini_returns({"resumeTips": ["Add metrics"], "newBullets": ["Cut latency 30%"], "newHeadline": "SRE"}):
        response = client.post("/api/ai/resume-guide", json={"resume_text": "r", "job_text": "j"})
    assert response.json() == {
        "resume_tips": ["Add metrics"],
        "new_bullets": ["Cut latency 30%"],
        "new_headline": "SRE",
    }


def test_linkedin_profile_fallback():
    with _gemini_returns("About me text"):
        response = client.post("/api/ai/linkedin-profile", json={"target_role": "SRE"})
    assert response.json() == {"about": "About me text", "headlines": []}


def test_linkedin_profile_rejects_unknown_tone():
    response = client.post("/api/ai/linkedin-profile", json={"tone": "pirate"})
    assert response.status_code == 422


def test_resume_builder():
    with _gemini_returns({"resumeText": "JANE DOE\nSUMMARY"}):
        response = client.post("/api/ai/resume-builder", json={"full_name": "Jane", "role": "SRE"})
    assert response.json() == {"resume_text": "JANE DOE\nSUMMARY"}


def test_resume_builder_requires_name_and_role():
    response = client.post("/api/ai/resume-builder", json={"full_name": "Jane"})
    assert response.status_code == 400


# --- Tracker ---


@pytest.fixture
def tracker_client(tracker_app):
    return TestClient(tracker_app)


def test_tracker_crud(tracker_client):
    created = tracker_client.post(
        "/api/tracker/jobs",
        json={"user_id": "u1", "job_title": "SRE", "company": "Acme", "match_score": 64},
    )
    assert created.status_code == 201
    job = created.json()["job"]
    assert job["status"] == "saved"

    listed = tracker_client.get("/api/tracker/jobs", params={"user_id": "u1"})
    assert [j["id"] for j in listed.json()["jobs"]] == [job["id"]]

    patched = tracker_client.patch(f"/api/tracker/jobs/{job['id']}", json={"status": "applied"})
    assert patched.status_code == 200
    assert patched.json()["job"]["status"] == "applied"
    assert patched.json()["job"]["company"] == "Acme"

    deleted = tracker_client.delete(f"/api/tracker/jobs/{job['id']}")
    assert deleted.json() == {"success": True}
    assert tracker_client.get("/api/tracker/jobs", params={"user_id": "u1"}).json() == {"jobs": []}


def test_tracker_requires_user_id(tracker_client):
    assert tracker_client.get("/api/tracker/jobs").status_code == 400
    assert tracker_client.post("/api/tracker/jobs", json={"job_title": "SRE"}).status_code == 400


def test_tracker_update_unknown_job(tracker_client):
    response = tracker_client.patch("/api/tracker/jobs/missing", json={"status": "offer"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Job not found."


def test_tracker_rejects_invalid_status(tracker_client):
    response = tracker_client.post("/api/tracker/jobs", json={"user_id": "u1", "status": "ghosted"})
    assert response.status_code == 422


# --- Resume PDF ---


def test_resume_pdf_download():
    response = client.post(
        "/api/resume-pdf",
        json={"name": "Jane Doe", "summary": "Backend engineer", "skills_languages": "Go"},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="ApplyEasy_Resume.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")
