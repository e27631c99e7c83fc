"""Thin Gemini proxy routes: prompt in, parsed JSON out."""

import logging

from fastapi import APIRouter, HTTPException

from models.requests import (
    CoverLetterRequest,
    InterviewFeedbackRequest,
    InterviewQuestionsRequest,
    LinkedInProfileRequest,
    MentorChatRequest,
    ResumeBuilderRequest,
    ResumeGuideRequest,
)
from models.responses import (
    CoverLetterResponse,
    InterviewFeedbackResponse,
    InterviewQuestionGroups,
    InterviewQuestionsResponse,
    LinkedInProfileResponse,
    MentorChatResponse,
    ResumeBuilderResponse,
    ResumeGuideResponse,
)
from services import gemini_client, prompt_builder
from services.gemini_client import GeminiError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


async def _ask(prompt: str, failure_detail: str) -> str:
    """Call Gemini, turning any failure into a 500 with the route's message."""
    try:
        return await gemini_client.generate_text(prompt)
    except GeminiError:
        raise HTTPException(status_code=500, detail=failure_detail)


def _str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v]


@router.post("/resume-guide", response_model=ResumeGuideResponse)
async def resume_guide(body: ResumeGuideRequest):
    if not body.resume_text or not body.job_text:
        raise HTTPException(status_code=400, detail="Missing resume_text or job_text in request.")

    prompt = prompt_builder.build_resume_guide_prompt(body.resume_text, body.job_text)
    content = await _ask(prompt, "AI resume guide failed. Please try again later.")

    data = gemini_client.parse_json(content)
    if data is None:
        return ResumeGuideResponse(resume_tips=[content])
    return ResumeGuideResponse(
        resume_tips=_str_list(data.get("resumeTips")),
        new_bullets=_str_list(data.get("newBullets")),
        new_headline=str(data.get("newHeadline") or ""),
    )


@router.post("/interview/questions", response_model=InterviewQuestionsResponse)
async def interview_questions(body: InterviewQuestionsRequest):
    if not body.job_text:
        raise HTTPException(status_code=400, detail="job_text is required.")

    prompt = prompt_builder.build_interview_questions_prompt(body.job_text, body.resume_text)
    content = await _ask(prompt, "AI interview questions failed. Please try again.")

    data = gemini_client.parse_json(content)
    if data is None:
        raise HTTPException(status_code=500, detail="Failed to parse AI questions. Try again.")

    groups = InterviewQuestionGroups(
        technical=_str_list(data.get("technical")),
        project=_str_list(data.get("project")),
        behavioral=_str_list(data.get("behavioral")),
        company=_str_list(data.get("company")),
    )
    questions = groups.technical + groups.project + groups.behavioral + groups.company
    return InterviewQuestionsResponse(groups=groups, questions=questions)


@router.post("/interview/feedback", response_model=InterviewFeedbackResponse)
async def interview_feedback(body: InterviewFeedbackRequest):
    if not body.question or not body.answer:
        raise HTTPException(status_code=400, detail="question and answer are required.")

    prompt = prompt_builder.build_interview_feedback_prompt(
        body.question, body.answer, job_text=body.job_text, resume_text=body.resume_text
    )
    content = await _ask(prompt, "AI interview feedback failed. Please try again.")

    data = gemini_client.parse_json(content)
    if data is None:
        return InterviewFeedbackResponse(
            score=0,
            overall="Could not parse AI feedback, but here is the raw text.",
            tips=[content],
        )

    try:
        score = float(data.get("score") or 0)
    except (TypeError, ValueError):
        score = 0
    return InterviewFeedbackResponse(
        score=score,
        overall=str(data.get("overall") or ""),
        tips=_str_list(data.get("tips")),
        improved_answer=str(data.get("improvedAnswer") or ""),
    )


@router.post("/cover-letter", response_model=CoverLetterResponse)
async def cover_letter(body: CoverLetterRequest):
    if not body.resume_text or not body.job_text:
        raise HTTPException(status_code=400, detail="resume_text and job_text are required.")

    prompt = prompt_builder.build_cover_letter_prompt(
        body.resume_text,
        body.job_text,
        job_title=body.job_title,
        company_name=body.company_name,
        applicant_name=body.applicant_name,
    )
    content = await _ask(prompt, "AI cover letter generation failed. Please try again.")

    data = gemini_client.parse_json(content)
    if data is None:
        return CoverLetterResponse(cover_letter=content)
    return CoverLetterResponse(cover_letter=str(data.get("coverLetter") or ""))


@router.post("/mentor-chat", response_model=MentorChatResponse)
async def mentor_chat(body: MentorChatRequest):
    if not body.message.strip():
        raise HTTPException(status_code=400, detail="message is required for mentor chat.")

    prompt = prompt_builder.build_mentor_chat_prompt(
        body.message, resume_text=body.resume_text, job_text=body.job_text
    )
    content = await _ask(prompt, "AI mentor chat failed. Please try again.")

    data = gemini_client.parse_json(content)
    if data is None:
        return MentorChatResponse(reply=content)
    return MentorChatResponse(reply=str(data.get("reply") or ""))


@router.post("/linkedin-profile", response_model=LinkedInProfileResponse)
async def linkedin_profile(body: LinkedInProfileRequest):
    prompt = prompt_builder.build_linkedin_profile_prompt(
        resume_text=body.resume_text,
        job_text=body.job_text,
        target_role=body.target_role,
        tone=body.tone,
    )
    content = await _ask(prompt, "AI LinkedIn optimizer failed. Please try again later.")

    data = gemini_client.parse_json(content)
    if data is None:
        return LinkedInProfileResponse(about=content)
    return LinkedInProfileResponse(
        about=str(data.get("about") or ""),
        headlines=_str_list(data.get("headlines")),
    )


@router.post("/resume-builder", response_model=ResumeBuilderResponse)
async def resume_builder(body: ResumeBuilderRequest):
    if not body.full_name or not body.role:
        raise HTTPException(status_code=400, detail="full_name and role are required.")

    prompt = prompt_builder.build_resume_builder_prompt(
        body.full_name,
        body.role,
        email=body.email,
        phone=body.phone,
        location=body.location,
        level=body.level,
        skills=body.skills,
        projects=body.projects,
        achievements=body.achievements,
    )
    content = await _ask(prompt, "AI resume builder failed. Please try again later.")

    data = gemini_client.parse_json(content)
    if data is None:
        return ResumeBuilderResponse(resume_text=content)
    return ResumeBuilderResponse(resume_text=str(data.get("resumeText") or ""))
