"""Render Markdown documents to HTML with highlighted code blocks."""

import html
import re

import markdown
from loguru import logger
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from docs_browser.config import HIGHLIGHT_STYLES
from docs_browser.errors import RenderFailure

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "nl2br", "sane_lists"]

# Python-Markdown emits fenced blocks as <pre><code class="language-x">, indented
# blocks without a class. Contents are already HTML-escaped.
_CODE_BLOCK = re.compile(
    r'<pre><code(?: class="language-(?P<lang>[^"]+)")?>(?P<code>.*?)</code></pre>',
    re.DOTALL,
)

_FORMATTER = HtmlFormatter(nowrap=True)


def _lexer_for(code: str, lang: str | None) -> Lexer:
    if lang:
        try:
            return get_lexer_by_name(lang)
        except ClassNotFound:
            logger.debug("Unknown code language {!r}, guessing", lang)
    return guess_lexer(code)


def highlight_code(code: str, lang: str | None = None) -> str:
    """Highlight one code block, returning a complete <pre> element.

    Uses the language tag when Pygments knows it, otherwise auto-detection.
    Any highlighting error yields the escaped, unhighlighted block.
    """
    try:
        lexer = _lexer_for(code, lang)
        body = highlight(code, lexer, _FORMATTER)
    except Exception:
        logger.debug("Highlighting failed for {!r} block, emitting plain text", lang)
        css_class = f' class="language-{html.escape(lang)}"' if lang else ""
        return f"<pre><code{css_class}>{html.escape(code)}</code></pre>"

    alias = lexer.aliases[0] if lexer.aliases else (lang or "text")
    return f'<pre class="highlight"><code class="language-{html.escape(alias)}">{body}</code></pre>'


def _highlight_match(match: re.Match[str]) -> str:
    code = html.unescape(match.group("code"))
    return highlight_code(code, match.group("lang"))


def render_markdown(text: str) -> str:
    """Convert Markdown to HTML.

    Line breaks inside paragraphs become <br>, GitHub-style tables and
    fenced code are supported, raw HTML passes through untouched.

    Raises:
        RenderFailure: If the Markdown conversion itself fails.
    """
    try:
        body = markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS, output_format="html")
    except Exception as e:
        msg = f"Markdown conversion failed: {e}"
        raise RenderFailure(msg) from e
    return _CODE_BLOCK.sub(_highlight_match, body)


def highlight_stylesheet(theme: str) -> str:
    """Pygments CSS for the given theme ("light" or "dark")."""
    try:
        style = HIGHLIGHT_STYLES[theme]
    except KeyError:
        msg = f"Unknown theme {theme!r}"
        raise ValueError(msg) from None
    return HtmlFormatter(style=style).get_style_defs(".highlight")
