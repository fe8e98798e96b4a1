"""
Source code -> highlighted HTML engine.

Tokens come from Pygments and are emitted as highlight.js-style
<span class="hljs-<scope>"> markup, so the app's code_preview_iframe.css
styles the preview the same way it styles client-side highlighting.
"""

import html
import itertools
import logging
from typing import Any

from dbox_shared import TransformResult
from media_processor.engine import HTML_MIME_TO_EXT, HTML_MIME_TYPE
from pygments.lexer import Lexer
from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
)

from .languages import AUTO_LANGUAGE, detect_lexer, resolve_lexer
from .models import HighlightJobDescriptor

logger = logging.getLogger(__name__)

STYLESHEET_PATH = "/assets/inodes/code_preview_iframe.css"

# Most specific Pygments token type wins; unmapped types render unstyled
_TOKEN_SCOPES: dict[Any, str] = {
    Keyword: "keyword",
    Keyword.Constant: "literal",
    Keyword.Type: "type",
    Name.Builtin: "built_in",
    Name.Builtin.Pseudo: "variable",
    Name.Class: "title",
    Name.Function: "title",
    Name.Exception: "title",
    Name.Decorator: "meta",
    Name.Tag: "name",
    Name.Attribute: "attr",
    Name.Variable: "variable",
    String: "string",
    String.Escape: "subst",
    String.Interpol: "subst",
    String.Regex: "regexp",
    Number: "number",
    Comment: "comment",
    Comment.Preproc: "meta",
    Comment.PreprocFile: "string",
    Operator: "operator",
    Operator.Word: "keyword",
    Punctuation: "punctuation",
    Generic.Deleted: "deletion",
    Generic.Inserted: "addition",
    Generic.Heading: "section",
    Generic.Subheading: "section",
    Generic.Emph: "emphasis",
    Generic.Strong: "strong",
    Generic.Prompt: "meta",
}

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <meta name="color-scheme" content="dark light" />
    <link rel="stylesheet" href="{css_url}" />
  </head>
  <body>
    <pre><code class="hljs language-{language}">{highlighted}</code></pre>
  </body>
</html>
"""


def _scope(ttype: Any) -> str | None:
    while ttype is not None:
        scope = _TOKEN_SCOPES.get(ttype)
        if scope is not None:
            return scope
        ttype = ttype.parent
    return None


def highlight_to_html(text: str, lexer: Lexer) -> str:
    """Escaped text with hljs-<scope> spans; adjacent tokens of one scope share a span."""
    out = []
    for scope, tokens in itertools.groupby(lexer.get_tokens(text), key=lambda tok: _scope(tok[0])):
        chunk = html.escape("".join(value for _, value in tokens), quote=False)
        out.append(f'<span class="hljs-{scope}">{chunk}</span>' if scope else chunk)
    return "".join(out)


class HighlightEngine:
    """TransformationEngine for source code files."""

    name = "highlight-processor"
    detail_type = "HighlightProcStatus"
    descriptor_model = HighlightJobDescriptor
    mime_to_ext = HTML_MIME_TO_EXT

    def transform(self, source: bytes, job: HighlightJobDescriptor) -> TransformResult:
        """
        Raises:
            UnknownLanguage: job.code_lang is neither "auto" nor a registered language.
        """
        text = source.decode("utf-8", errors="replace")
        if job.code_lang == AUTO_LANGUAGE:
            lexer, language = detect_lexer(text)
            logger.info("%s: inode_id=%s detected language=%s", self.name, job.inode_id, language)
        else:
            lexer, language = resolve_lexer(job.code_lang), job.code_lang
        page = _PAGE_TEMPLATE.format(
            css_url=html.escape(job.app_url + STYLESHEET_PATH),
            language=html.escape(language),
            highlighted=highlight_to_html(text, lexer),
        )
        return TransformResult(body=page.encode("utf-8"), content_type=HTML_MIME_TYPE)
