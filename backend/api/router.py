import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from api.dependencies import get_match_engine
from api.limiter import limiter
from config import settings
from models.requests import QuickAnalyzeRequest, ResumePdfRequest
from models.responses import AnalysisResponse
from services import document_parser, job_fetcher, resume_analyzer, resume_pdf
from services.match_engine import MatchEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/api/analyze", response_model=AnalysisResponse)
@limiter.limit("10/minute")
async def analyze(
    request: Request,
    resume: UploadFile | None = File(None),
    job_url: str = Form(""),
    job_description: str = Form(""),
    engine: MatchEngine = Depends(get_match_engine),
):
    if resume is None or not resume.filename:
        raise HTTPException(status_code=400, detail="Please upload a resume file.")

    # Read and validate size
    content = await resume.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    resume_text = await run_in_threadpool(
        document_parser.extract_upload_text, resume.filename, content
    )
    if not resume_text.strip():
        raise HTTPException(
            status_code=400,
            detail="Could not read text from resume. Try uploading a .txt or simple .pdf.",
        )

    job_text = job_description
    page_title = ""
    if not job_text.strip() and job_url:
        try:
            posting = await job_fetcher.fetch_job_posting(job_url)
            job_text, page_title = posting.text, posting.title
        except job_fetcher.JobFetchError as e:
            logger.warning("Error fetching job URL: %s", e)

    if not job_text.strip():
        raise HTTPException(
            status_code=400,
            detail=(
                "Could not read job description from the URL. "
                "Please paste the job description text instead."
            ),
        )

    return resume_analyzer.analyze(
        resume_text, job_text, page_title=page_title, job_url=job_url, engine=engine
    )


@router.post("/api/analyze/quick", response_model=AnalysisResponse)
@limiter.limit("10/minute")
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    engine: MatchEngine = Depends(get_match_engine),
):
    return resume_analyzer.analyze(body.resume_text, body.job_description, engine=engine)


@router.post("/api/resume-pdf")
def resume_pdf_download(body: ResumePdfRequest):
    try:
        pdf = resume_pdf.render_resume_pdf(body)
    except Exception as e:
        logger.error("Resume PDF error: %s", e)
        raise HTTPException(status_code=500, detail="Failed to generate resume PDF. Try again.")

    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{resume_pdf.PDF_FILENAME}"'},
    )
