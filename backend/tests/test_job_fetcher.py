import httpx
import pytest

from services.job_fetcher import JobFetchError, fetch_job_posting, html_to_text, split_page_title

HTML = """
<html>
  <head>
    <title>Backend Engineer - Acme Corp | Careers</title>
    <style>body { color: red; }</style>
    <script>var tracking = "python";</script>
  </head>
  <body>
    <h1>Backend Engineer</h1>
    <p>We use <b>Python</b>, Docker and AWS.</p>
  </body>
</html>
"""


def test_html_to_text_strips_markup():
    title, text = html_to_text(HTML)
    assert title == "Backend Engineer - Acme Corp | Careers"
    assert "Python" in text
    assert "Docker and AWS." in text
    assert "tracking" not in text
    assert "color: red" not in text
    assert "<p>" not in text


def test_split_page_title():
    assert split_page_title("Backend Engineer - Acme Corp | Careers") == ("Backend Engineer", "Acme Corp")
    assert split_page_title("Data Analyst · Globex") == ("Data Analyst", "Globex")
    assert split_page_title("Careers") == ("Careers", "")
    assert split_page_title("") == ("", "")


@pytest.mark.asyncio
async def test_fetch_job_posting():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url == "https://jobs.example.com/42"
        return httpx.Response(200, text=HTML)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        posting = await fetch_job_posting("https://jobs.example.com/42", client=client)

    assert posting.url == "https://jobs.example.com/42"
    assert posting.title.startswith("Backend Engineer")
    assert "Docker" in posting.text


@pytest.mark.asyncio
async def test_fetch_job_posting_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(404, text="gone"))
    async with httpx.AsyncClient(transport=transport) as client:
        with pytest.raises(JobFetchError):
            await fetch_job_posting("https://jobs.example.com/missing", client=client)


@pytest.mark.asyncio
async def test_fetch_job_posting_connection_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(JobFetchError):
            await fetch_job_posting("https://jobs.example.com/down", client=client)
