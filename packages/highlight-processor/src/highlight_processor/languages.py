"""
Language registry: highlight.js language names -> Pygments lexers.

Requests name languages the way the web app does (highlight.js names). Only
names listed here are accepted; anything else is an UnknownLanguage.
"""

from collections.abc import Mapping
from functools import lru_cache

from dbox_shared import UnknownLanguage
from pygments.lexer import Lexer
from pygments.lexers import find_lexer_class_by_name, guess_lexer
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

AUTO_LANGUAGE = "auto"

HLJS_TO_PYGMENTS: Mapping[str, str] = {
    "apache": "apacheconf",
    "bash": "bash",
    "c": "c",
    "clojure": "clojure",
    "cpp": "cpp",
    "csharp": "csharp",
    "css": "css",
    "dart": "dart",
    "diff": "diff",
    "dockerfile": "docker",
    "elixir": "elixir",
    "erlang": "erlang",
    "fsharp": "fsharp",
    "go": "go",
    "graphql": "graphql",
    "groovy": "groovy",
    "haskell": "haskell",
    "html": "html",
    "ini": "ini",
    "java": "java",
    "javascript": "javascript",
    "json": "json",
    "julia": "julia",
    "kotlin": "kotlin",
    "latex": "tex",
    "less": "less",
    "lua": "lua",
    "makefile": "make",
    "markdown": "markdown",
    "matlab": "matlab",
    "nginx": "nginx",
    "objectivec": "objective-c",
    "ocaml": "ocaml",
    "perl": "perl",
    "php": "php",
    "php-template": "html+php",
    "plaintext": "text",
    "powershell": "powershell",
    "properties": "properties",
    "protobuf": "protobuf",
    "python": "python",
    "python-repl": "pycon",
    "r": "splus",
    "ruby": "ruby",
    "rust": "rust",
    "scala": "scala",
    "scss": "scss",
    "shell": "console",
    "sql": "sql",
    "swift": "swift",
    "typescript": "typescript",
    "vbnet": "vb.net",
    "x86asm": "nasm",
    "xml": "xml",
    "yaml": "yaml",
}

# First highlight.js name per Pygments alias, for labelling auto-detected code
_PYGMENTS_TO_HLJS: dict[str, str] = {}
for _hljs, _alias in HLJS_TO_PYGMENTS.items():
    _PYGMENTS_TO_HLJS.setdefault(_alias, _hljs)


@lru_cache(maxsize=None)
def _lexer_class(code_lang: str) -> type[Lexer]:
    alias = HLJS_TO_PYGMENTS.get(code_lang)
    if alias is None:
        raise UnknownLanguage(code_lang)
    try:
        return find_lexer_class_by_name(alias)
    except ClassNotFound as e:
        raise UnknownLanguage(code_lang) from e


def resolve_lexer(code_lang: str) -> Lexer:
    """
    Return a fresh lexer for a highlight.js language name.

    Raises:
        UnknownLanguage: code_lang is not registered.
    """
    return _lexer_class(code_lang)(stripnl=False, ensurenl=False)


def detect_lexer(text: str) -> tuple[Lexer, str]:
    """
    Guess the language of text. Returns (lexer, highlight.js name).

    Guesses outside the registry fall back to plain text, so the label is always
    a highlight.js name.
    """
    try:
        lexer = guess_lexer(text, stripnl=False, ensurenl=False)
    except ClassNotFound:
        return TextLexer(stripnl=False, ensurenl=False), "plaintext"
    for alias in lexer.aliases:
        if alias in _PYGMENTS_TO_HLJS:
            return lexer, _PYGMENTS_TO_HLJS[alias]
    return TextLexer(stripnl=False, ensurenl=False), "plaintext"
