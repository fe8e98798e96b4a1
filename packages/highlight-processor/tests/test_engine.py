"""Tests for highlighted page rendering."""

import html
import re

import pytest
from dbox_shared import UnknownLanguage
from pygments.token import Keyword, Name, Text

from highlight_processor import HighlightEngine, HighlightJobDescriptor, engine, highlight_to_html
from highlight_processor.languages import resolve_lexer


def _job(code_lang: str = "python") -> HighlightJobDescriptor:
    return HighlightJobDescriptor(
        inode_id="inode-7",
        inode_s3_key="inodes/u1/inode-7",
        input_file_name="greet.py",
        to_mime_type="text/html",
        app_url="https://dbox.example.com",
        code_lang=code_lang,
    )


def test_code_lang_defaults_to_auto() -> None:
    job = HighlightJobDescriptor.model_validate({
        "inodeId": "i",
        "inodeS3Key": "k",
        "inputFileName": "f",
        "toMimeType": "text/html",
        "appUrl": "https://dbox.example.com",
    })
    assert job.code_lang == "auto"


def test_page_structure() -> None:
    result = HighlightEngine().transform(b"x = 1\n", _job())
    page = result.body.decode("utf-8")
    assert result.content_type == "text/html"
    assert page.startswith("<!DOCTYPE html>")
    assert (
        '<link rel="stylesheet" href="https://dbox.example.com/assets/inodes/code_preview_iframe.css" />'
        in page
    )
    assert '<pre><code class="hljs language-python">' in page
    assert page.count("</code></pre>") == 1


def test_keywords_and_strings_get_hljs_scopes() -> None:
    out = highlight_to_html("def f():\n    return 'a'\n", resolve_lexer("python"))
    assert '<span class="hljs-keyword">def</span>' in out
    assert '<span class="hljs-title">f</span>' in out
    assert "<span class=\"hljs-string\">'a'</span>" in out


def test_source_text_preserved_after_unescaping() -> None:
    source = "if a < b && c > d:\n\tpass\n"
    out = highlight_to_html(source, resolve_lexer("python"))
    assert html.unescape(re.sub(r"</?span[^>]*>", "", out)) == source
    assert "&lt;" in out
    assert "&amp;&amp;" in out


def test_auto_detection_labels_code() -> None:
    page = HighlightEngine().transform(
        b"#!/usr/bin/env python3\nprint('hi')\n", _job("auto")
    ).body.decode("utf-8")
    assert '<code class="hljs language-python">' in page


def test_plaintext_escapes_markup() -> None:
    page = HighlightEngine().transform(b"<b>not markup", _job("plaintext")).body.decode("utf-8")
    assert "&lt;b&gt;not markup" in page
    assert '<code class="hljs language-plaintext">' in page


def test_invalid_utf8_replaced() -> None:
    page = HighlightEngine().transform(b"x = '\xff'\n", _job()).body.decode("utf-8")
    assert "\ufffd" in page


def test_unknown_language_raises() -> None:
    with pytest.raises(UnknownLanguage):
        HighlightEngine().transform(b"+++", _job("brainfudge"))


def test_token_scope_walks_to_nearest_mapped_parent() -> None:
    assert engine._scope(Keyword.Namespace) == "keyword"
    assert engine._scope(Name.Function.Magic) == "title"
    assert engine._scope(Text) is None
    assert not hasattr(engine, "_TokenType")
