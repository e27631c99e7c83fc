from pydantic import BaseModel


class AnalysisResponse(BaseModel):
    app_name: str = "ApplyEasy"
    job_title: str = "Job"
    company: str = ""
    job_url: str = ""
    match_score: int = 0
    summary: str = ""
    recommendations: list[str] = []
    common_skills: list[str] = []
    missing_skills: list[str] = []
    extra_skills: list[str] = []
    job_snippet: str = ""
    resume_snippet: str = ""
    full_job_text: str = ""
    full_resume_text: str = ""


class ResumeGuideResponse(BaseModel):
    resume_tips: list[str] = []
    new_bullets: list[str] = []
    new_headline: str = ""


class InterviewQuestionGroups(BaseModel):
    technical: list[str] = []
    project: list[str] = []
    behavioral: list[str] = []
    company: list[str] = []


class InterviewQuestionsResponse(BaseModel):
    groups: InterviewQuestionGroups = InterviewQuestionGroups()
    questions: list[str] = []


class InterviewFeedbackResponse(BaseModel):
    score: float = 0
    overall: str = ""
    tips: list[str] = []
    improved_answer: str = ""


class CoverLetterResponse(BaseModel):
    cover_letter: str = ""


class MentorChatResponse(BaseModel):
    reply: str = ""


class LinkedInProfileResponse(BaseModel):
    about: str = ""
    headlines: list[str] = []


class ResumeBuilderResponse(BaseModel):
    resume_text: str = ""


class TrackerJob(BaseModel):
    id: str
    user_id: str
    job_title: str | None = None
    company: str | None = None
    job_url: str | None = None
    match_score: float | None = None
    status: str = "saved"
    notes: str | None = None
    created_at: str
    updated_at: str


class TrackerJobList(BaseModel):
    jobs: list[TrackerJob] = []


class TrackerJobEnvelope(BaseModel):
    job: TrackerJob


class DeleteResponse(BaseModel):
    success: bool = True
