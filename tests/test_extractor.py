"""Tests for link and transcript extraction from rendered pages."""

from __future__ import annotations

from transcript_crawler.scraper.extractor import (
    base_url_of,
    extract_links,
    extract_transcript,
    resolve_links,
)
from transcript_crawler.transcript.models import SpeakerTurn
from transcript_crawler.transcript.parser import parse_transcript


_TRANSCRIPT_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Larry King Live</title></head>
<body>
  <a href="/show">Index</a>
  <a href="/show/ep1">Episode 1</a>
  <a href="https://other.com/x">Elsewhere</a>
  <a name="no-href">Anchor without href</a>
  <a href="#top">Top</a>
  <a href="/show/ep1">Episode 1 again</a>
  <div class="cnnBodyText">LARRY KING: Good evening.<br>Tonight, a guest.<br></div>
  <div class="sidebar">Not part of the transcript</div>
  <div class="cnnBodyText">JOHN: Hi there<br>how are you?</div>
</body>
</html>
"""


class TestBaseUrlOf:
    def test_scheme_and_host(self) -> None:
        assert base_url_of("https://transcripts.cnn.com/show/lkl") == "https://transcripts.cnn.com"

    def test_port_kept(self) -> None:
        assert base_url_of("http://localhost:8000/show?x=1") == "http://localhost:8000"


class TestExtractLinks:
    def test_document_order_without_filtering(self) -> None:
        assert extract_links(_TRANSCRIPT_HTML) == [
            "/show",
            "/show/ep1",
            "https://other.com/x",
            "#top",
            "/show/ep1",
        ]

    def test_no_links_returns_empty(self) -> None:
        assert extract_links("<html><body>no links</body></html>") == []


class TestResolveLinks:
    def test_relative_and_absolute(self) -> None:
        resolved = resolve_links(["/show", "/show/ep1", "https://other.com/x"], "https://site.com")
        assert resolved == [
            "https://site.com/show",
            "https://site.com/show/ep1",
            "https://other.com/x",
        ]

    def test_query_preserved(self) -> None:
        assert resolve_links(["/show/ep2?tab=full"], "https://site.com") == [
            "https://site.com/show/ep2?tab=full"
        ]


class TestExtractTranscript:
    def test_inner_markup_joined_with_br(self) -> None:
        html = '<p class="cnnBodyText">A<br>B</p><p class="cnnBodyText">C</p>'
        assert extract_transcript(html) == "A<br/>B<br>C"

    def test_no_matching_elements(self) -> None:
        assert extract_transcript("<html><body><p>nothing</p></body></html>") == ""

    def test_custom_selector(self) -> None:
        html = '<div id="body">JOHN: Hi</div><div class="cnnBodyText">ignored</div>'
        assert extract_transcript(html, selector="#body") == "JOHN: Hi"

    def test_output_parses_into_turns(self) -> None:
        turns = parse_transcript(extract_transcript(_TRANSCRIPT_HTML))
        assert turns == [
            SpeakerTurn("assistant", "Good evening. Tonight, a guest."),
            SpeakerTurn("JOHN", "Hi there how are you?"),
        ]

    def test_non_ascii_text_kept_verbatim(self) -> None:
        html = '<div class="cnnBodyText">JOHN: Café ’til dawn<br>PELÉ: olá</div>'
        assert extract_transcript(html) == "JOHN: Café ’til dawn<br/>PELÉ: olá"

    def test_only_markup_characters_escaped(self) -> None:
        html = '<div class="cnnBodyText">Q&amp;A: 3 &lt; 4 “quoted”</div>'
        assert extract_transcript(html) == "Q&amp;A: 3 &lt; 4 “quoted”"

    def test_accented_text_survives_parsing(self) -> None:
        html = '<div class="cnnBodyText">JOHN: Café ’til dawn<br>PELÉ: olá</div>'
        # Labels are ASCII-only, so the accented line continues JOHN's turn.
        assert parse_transcript(extract_transcript(html)) == [
            SpeakerTurn("JOHN", "Café ’til dawn PELÉ: olá"),
        ]
