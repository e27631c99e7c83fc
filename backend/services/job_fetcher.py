"""Fetch a job posting page and reduce it to plain text."""

import logging
import re
from dataclasses import dataclass

import httpx
from bs4 import BeautifulSoup

from config import settings

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "Mozilla/5.0 (compatible; ApplyEasy/1.0)"}

# Separators between job title and company in page titles,
# e.g. "Backend Engineer - Acme | LinkedIn"
_TITLE_SPLIT_RE = re.compile(r"[-|·]")


class JobFetchError(Exception):
    """Raised when a job posting URL cannot be fetched."""


@dataclass
class JobPosting:
    url: str
    title: str = ""
    text: str = ""


def html_to_text(html: str) -> tuple[str, str]:
    """Return (page_title, visible_text) for an HTML document."""
    soup = BeautifulSoup(html, "html.parser")
    title = soup.title.get_text(strip=True) if soup.title else ""
    for tag in soup(["script", "style"]):
        tag.decompose()
    text = soup.get_text(" ")
    return title, re.sub(r"\s+", " ", text).strip()


def split_page_title(page_title: str) -> tuple[str, str]:
    """Split a page title into (job_title, company). Either may be empty."""
    if not page_title:
        return "", ""
    parts = [p.strip() for p in _TITLE_SPLIT_RE.split(page_title)]
    job_title = parts[0]
    company = parts[1] if len(parts) >= 2 else ""
    return job_title, company


async def fetch_job_posting(url: str, client: httpx.AsyncClient | None = None) -> JobPosting:
    """Download a job posting and extract its title and text."""
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(
            timeout=settings.job_fetch_timeout_seconds,
            follow_redirects=True,
            headers=HEADERS,
        )
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise JobFetchError(f"Could not fetch {url}: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    title, text = html_to_text(response.text)
    logger.info("Fetched job posting %s (%d chars)", url, len(text))
    return JobPosting(url=url, title=title, text=text)
