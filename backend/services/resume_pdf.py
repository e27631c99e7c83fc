"""Render structured resume fields into a one-page A4 PDF."""

import io
import logging
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer

from models.requests import ResumePdfRequest

logger = logging.getLogger(__name__)

PDF_FILENAME = "ApplyEasy_Resume.pdf"
PAGE_MARGIN = 45


def _styles():
    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name="NameHeader", parent=styles["Normal"],
        fontName="Helvetica-Bold", fontSize=20, leading=24, alignment=TA_CENTER,
    ))
    styles.add(ParagraphStyle(
        name="Contact", parent=styles["Normal"],
        fontName="Helvetica", fontSize=9.5, leading=12, alignment=TA_CENTER,
        spaceAfter=10,
    ))
    styles.add(ParagraphStyle(
        name="SectionTitle", parent=styles["Normal"],
        fontName="Helvetica-Bold", fontSize=11, leading=14,
        textColor=colors.black, spaceBefore=6,
    ))
    styles.add(ParagraphStyle(
        name="Body", parent=styles["Normal"],
        fontName="Helvetica", fontSize=10, leading=13,
        textColor=colors.HexColor("#111111"),
    ))
    styles.add(ParagraphStyle(name="BodyJustified", parent=styles["Body"], alignment=TA_JUSTIFY))
    styles.add(ParagraphStyle(
        name="ProjectTitle", parent=styles["Normal"],
        fontName="Helvetica-Bold", fontSize=10.5, leading=13,
    ))
    styles.add(ParagraphStyle(
        name="ProjectTech", parent=styles["Normal"],
        fontName="Helvetica-Oblique", fontSize=9, leading=11,
        textColor=colors.HexColor("#444444"),
    ))
    return styles


def _para(text: str, style) -> Paragraph:
    # Paragraph parses mini-markup; user text must be escaped and keep its line breaks
    return Paragraph(escape(text).replace("\n", "<br/>"), style)


def _bullet_lines(text: str) -> list[str]:
    return [line.strip() for line in str(text).split("\n") if line.strip()]


def skill_lines(req: ResumePdfRequest) -> list[str]:
    lines = []
    if req.skills_languages:
        lines.append(f"Programming Languages: {req.skills_languages}")
    if req.skills_frameworks:
        lines.append(f"Frameworks / Stack: {req.skills_frameworks}")
    if req.skills_databases:
        lines.append(f"Databases: {req.skills_databases}")
    if req.skills_tools:
        lines.append(f"Tools / Others: {req.skills_tools}")
    return lines


def projects(req: ResumePdfRequest) -> list[dict[str, str]]:
    """Projects that have a title or description to show."""
    candidates = [
        {"title": req.project1_title, "desc": req.project1_desc, "tech": req.project1_tech},
        {"title": req.project2_title, "desc": req.project2_desc, "tech": req.project2_tech},
    ]
    return [p for p in candidates if p["title"] or p["desc"]]


def build_story(req: ResumePdfRequest) -> list:
    styles = _styles()
    story: list = []

    def section(title: str) -> None:
        story.append(Paragraph(escape(title.upper()), styles["SectionTitle"]))
        story.append(HRFlowable(
            width="100%", thickness=0.5, color=colors.HexColor("#555555"),
            spaceBefore=1, spaceAfter=6,
        ))

    def gap() -> None:
        story.append(Spacer(1, 10))

    story.append(_para(req.name or "Your Name", styles["NameHeader"]))
    story.append(Spacer(1, 4))

    contact = "  |  ".join(c for c in (req.phone, req.email, req.linkedin, req.github) if c)
    if contact:
        story.append(_para(contact, styles["Contact"]))

    if req.summary:
        section("Profile")
        story.append(_para(req.summary, styles["BodyJustified"]))
        gap()

    if req.education:
        section("Education")
        story.append(_para(req.education, styles["Body"]))
        gap()

    lines = skill_lines(req)
    if lines:
        section("Technical Skills")
        for line in lines:
            story.append(_para(f"• {line}", styles["Body"]))
        gap()

    shown = projects(req)
    if shown:
        section("Projects")
        for p in shown:
            story.append(_para(p["title"] or "Project", styles["ProjectTitle"]))
            if p["tech"]:
                story.append(_para(p["tech"], styles["ProjectTech"]))
            if p["desc"]:
                story.append(Spacer(1, 1))
                story.append(_para(p["desc"], styles["BodyJustified"]))
            story.append(Spacer(1, 8))

    for title, text in (("Certifications", req.certs), ("Extracurricular / Additional", req.extras)):
        items = _bullet_lines(text) if text else []
        if items:
            section(title)
            for item in items:
                story.append(_para(f"• {item}", styles["Body"]))
            gap()

    return story


def render_resume_pdf(req: ResumePdfRequest) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=f"{req.name or 'Resume'} - Resume",
    )
    doc.build(build_story(req))
    pdf = buf.getvalue()
    logger.info("Rendered resume PDF (%d bytes)", len(pdf))
    return pdf
