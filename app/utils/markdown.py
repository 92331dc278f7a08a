"""
Rendering pipeline for user-generated forum content.

=== SECURITY MODEL ===

1. MARKUP FIELDS (comments, posts):
   - Use render() for display
   - render() escapes ALL HTML first, then inserts its own tags
   - Store raw user input in DB (no escaping needed)
   - Render exactly once per raw input; output is not valid input

2. PLAIN TEXT FIELDS (topic titles, group descriptions, announcements):
   - Bypass markup entirely
   - Still pass through the censor filter (app.services.censor)

3. REPLY COMPOSITION:
   - quote_for_reply() produces plain text for the reply textarea,
     not HTML. It is rendered like any other comment once submitted.

=== SUPPORTED MARKUP ===

- ```fenced``` code blocks (optional language tag on the opening fence)
- 4-space indented code (legacy, only when no fence is present)
- Blank line → new paragraph, single newline → <br>
- **bold** and *italic*
- Bare http:// and https:// URLs become links

Step order matters and is fixed in build_render_steps().
"""

import re
from collections.abc import Callable
from enum import Enum
from html import escape as html_escape

from app.services.censor import CensorFilter, get_censor_filter

FENCE = "```"

# Opening fence (optional language tag) through the next closing fence.
# Shared by the renderer and the reply quoter. MULTILINE lets a fence open
# right after the newline a previous closing fence consumed.
FENCED_CODE_RE = re.compile(
    r"(?:\n|^)```[^\n]*\n(.+?)\n```(?:\n|\Z)", re.DOTALL | re.MULTILINE
)
INDENTED_CODE_RE = re.compile(r"(?:^|\n) {4}([^\n]+)")
PRE_BLOCK_RE = re.compile(r"(<pre>.*?</pre>)", re.DOTALL)
BOLD_RE = re.compile(r"\*\*([^*\n]+)\*\*")
ITALIC_RE = re.compile(r"\*([^*\n]+)\*")
# An escaped <, >, " or ' ends a URL, so <https://x.com> links x.com only
NOT_ESCAPED_MARKUP = r"(?!&(?:lt|gt|quot|#x27);)"
LINK_RE = re.compile(
    r"https?://"
    r"(?:[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+|localhost)"
    r"(?::[0-9]+)?"
    rf"(?:(?:{NOT_ESCAPED_MARKUP}[A-Za-z0-9@:%_+.~#?&/=;-])*"
    rf"{NOT_ESCAPED_MARKUP}[A-Za-z0-9@:%_+~#?&/=;-])?"
)
QUOTE_LINE_RE = re.compile(r"((?:^|\n)>*) *(\S[^\n]*)")

RenderStep = tuple[str, Callable[[str], str]]


class CodeDialect(Enum):
    """Which code block syntax a document uses. Never mixed in one document."""

    FENCED = "fenced"
    INDENTED = "indented"


def normalize_line_endings(text: str) -> str:
    return text.replace("\r", "")


def escape(raw: str) -> str:
    """
    Escape &, <, >, " and ' as HTML entities.

    Must run before any step that inserts tags, otherwise the pipeline's
    own markup would be escaped too.
    """
    return html_escape(raw, quote=True)


def sniff_code_dialect(text: str) -> CodeDialect:
    """
    Pick the code block dialect for a whole document.

    Any fence anywhere switches the document to fenced syntax and disables
    legacy indented detection.
    """
    if FENCE in normalize_line_endings(text):
        return CodeDialect.FENCED
    return CodeDialect.INDENTED


def render_fenced_code(text: str) -> str:
    # Unterminated fences don't match and pass through unchanged
    return FENCED_CODE_RE.sub(r"<pre>\1</pre>", text)


def render_indented_code(text: str) -> str:
    """
    Turn 4-space indented lines into <pre> blocks.

    Each line becomes its own block first, then adjacent blocks are merged
    so a run of indented lines reads as one multi-line block.
    """
    text = INDENTED_CODE_RE.sub(r"<pre>\1</pre>", text)
    return text.replace("</pre><pre>", "\n")


CODE_BLOCK_RENDERERS: dict[CodeDialect, Callable[[str], str]] = {
    CodeDialect.FENCED: render_fenced_code,
    CodeDialect.INDENTED: render_indented_code,
}


def convert_line_breaks(text: str) -> str:
    """
    Convert blank lines to paragraph boundaries and newlines to <br>.

    Double newlines are handled before single ones; reversing the order
    would turn every paragraph break into two <br>. Newlines inside <pre>
    blocks are left alone.
    """
    parts = PRE_BLOCK_RE.split(text)
    for i in range(0, len(parts), 2):
        # Even indices are outside <pre>
        parts[i] = parts[i].replace("\n\n", "</p><p>").replace("\n", "<br>")
    return "".join(parts)


def apply_bold(text: str) -> str:
    return BOLD_RE.sub(r"<b>\1</b>", text)


def apply_italic(text: str) -> str:
    # Runs after apply_bold so **x** is never half-consumed here
    return ITALIC_RE.sub(r"<em>\1</em>", text)


def autolink(text: str) -> str:
    """Wrap bare http(s) URLs in links, using the matched text as href and label."""
    return LINK_RE.sub(r'<a href="\g<0>">\g<0></a>', text)


def wrap_paragraph(text: str) -> str:
    return f"<p>{text}</p>"


def build_render_steps(dialect: CodeDialect) -> tuple[RenderStep, ...]:
    """
    Return the ordered markup steps for a document of the given dialect.

    Order constraints:
    - escape before anything that inserts tags
    - code blocks before line breaks (fences and indents are line-based)
    - paragraph breaks before single line breaks
    - bold before italic
    """
    return (
        ("normalize_line_endings", normalize_line_endings),
        ("escape", escape),
        ("code_blocks", CODE_BLOCK_RENDERERS[dialect]),
        ("line_breaks", convert_line_breaks),
        ("bold", apply_bold),
        ("italic", apply_italic),
        ("autolink", autolink),
        ("wrap_paragraph", wrap_paragraph),
    )


def render(raw: str, censor_filter: CensorFilter | None = None) -> str:
    """
    Render raw user content to HTML that is safe to embed in a page.

    Args:
        raw: Unescaped text exactly as the user submitted it
        censor_filter: Filter applied to the finished HTML. Defaults to the
            process-wide filter bound to the live site configuration.

    Returns:
        HTML wrapped in a single <p>. Must not be escaped again.
    """
    if censor_filter is None:
        censor_filter = get_censor_filter()

    dialect = sniff_code_dialect(raw)
    text = raw
    for _name, step in build_render_steps(dialect):
        text = step(text)

    return censor_filter.censor(text)


def strip_fenced_code(text: str) -> str:
    """Replace fenced code blocks with their bare body, dropping the fence lines."""
    return FENCED_CODE_RE.sub(r"\n\1\n", text)


def quote_lines(text: str) -> str:
    """
    Add one level of > quoting to every non-blank line.

    An existing run of > is kept and spaces after it are dropped, so
    "> hi" becomes ">> hi" and nested reply chains keep their depth.
    """
    return QUOTE_LINE_RE.sub(r"\1> \2", text)


def quote_for_reply(author: str, original: str) -> str:
    """
    Build the quoted text used to seed a reply composer.

    Args:
        author: Username of the person being quoted
        original: Raw text of the post being replied to

    Returns:
        Plain text: a fenced block headed by "<author> wrote:" containing the
        original with one extra level of > quoting.

    Example:
        >>> quote_for_reply("alice", "hello")
        '```\\nalice wrote:\\n> hello\\n```\\n'
    """
    text = normalize_line_endings(original)
    text = strip_fenced_code(text)
    if text.startswith("\n"):
        text = text[1:]
    text = quote_lines(text)
    return f"{FENCE}\n{author} wrote:\n{text}\n{FENCE}\n"
