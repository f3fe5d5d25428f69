"""Markdown-ish model text to a constrained HTML subset."""

import html
import re
from typing import List

from ..core.constants import FallbackConstants, PromptConstants, TagConstants

_FENCE_RE = re.compile(r"```(.*?)```", re.DOTALL)
_LANG_RE = re.compile(r"[\w+#.-]*")
_PLACEHOLDER = "\x00CODE{}\x00"
_PLACEHOLDER_RE = re.compile(r"^\x00CODE(\d+)\x00$")

_HEADING_RE = re.compile(r"^(#{1,3})\s+(.*)$")
_ORDERED_RE = re.compile(r"^\d+[.)]\s+(.*)$")
_UNORDERED_RE = re.compile(r"^[-*+]\s+(.*)$")

_INLINE_CODE_RE = re.compile(r"`([^`\n]+)`")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*([^*\n]+?)\*")


def _code_body(raw: str) -> str:
    """Drop the language tag line of a fenced block, if there is one."""
    first, sep, rest = raw.partition("\n")
    if sep and _LANG_RE.fullmatch(first.strip()):
        raw = rest
    return raw.strip("\n")


def _escape(text: str) -> str:
    return html.escape(text, quote=False)


def _inline(text: str) -> str:
    parts = _INLINE_CODE_RE.split(text)
    out = []
    for i, part in enumerate(parts):
        if i % 2:
            out.append(f"<code>{_escape(part)}</code>")
            continue
        part = _escape(part)
        part = _BOLD_RE.sub(r"<strong>\1</strong>", part)
        part = _ITALIC_RE.sub(r"<em>\1</em>", part)
        out.append(part)
    return "".join(out)


def format_as_html(text) -> str:
    """Render model text as HTML.

    Supports ``#``-``###`` headings, bold/italic/inline code, fenced code
    blocks, ordered and unordered list lines and blank-line paragraphs. All
    text is escaped first, so raw angle brackets never reach the output.
    """
    if not isinstance(text, str) or not text.strip():
        return FallbackConstants.UNFORMATTABLE_HTML
    
    code_blocks: List[str] = []
    
    def _stash(match):
        code_blocks.append(_code_body(match.group(1)))
        return "\n" + _PLACEHOLDER.format(len(code_blocks) - 1) + "\n"
    
    text = _FENCE_RE.sub(_stash, text.replace("\r\n", "\n"))
    
    parts: List[str] = []
    paragraph: List[str] = []
    list_items: List[str] = []
    list_tag = None
    
    def flush_paragraph():
        if paragraph:
            parts.append("<p>" + "<br>".join(paragraph) + "</p>")
            paragraph.clear()
    
    def flush_list():
        nonlocal list_tag
        if list_items:
            items = "".join(f"<li>{item}</li>" for item in list_items)
            parts.append(f"<{list_tag}>{items}</{list_tag}>")
            list_items.clear()
        list_tag = None
    
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        
        placeholder = _PLACEHOLDER_RE.match(line)
        if placeholder:
            flush_paragraph()
            flush_list()
            code = code_blocks[int(placeholder.group(1))]
            parts.append(f"<pre><code>{_escape(code)}</code></pre>")
            continue
        
        if not line:
            flush_paragraph()
            flush_list()
            continue
        
        heading = _HEADING_RE.match(line)
        if heading:
            flush_paragraph()
            flush_list()
            level = len(heading.group(1))
            parts.append(f"<h{level}>{_inline(heading.group(2))}</h{level}>")
            continue
        
        ordered = _ORDERED_RE.match(line)
        unordered = None if ordered else _UNORDERED_RE.match(line)
        if ordered or unordered:
            flush_paragraph()
            tag = "ol" if ordered else "ul"
            if list_tag != tag:
                flush_list()
                list_tag = tag
            list_items.append(_inline((ordered or unordered).group(1)))
            continue
        
        flush_list()
        paragraph.append(_inline(line))
    
    flush_paragraph()
    flush_list()
    return "".join(parts)


def extract_code_examples(text: str) -> List[str]:
    """Bodies of all fenced code blocks, in order."""
    if not isinstance(text, str):
        return []
    examples = [_code_body(block).strip() for block in _FENCE_RE.findall(text)]
    return [example for example in examples if example]


def extract_related_topics(text: str) -> List[str]:
    """Known topic keywords mentioned in the text."""
    if not isinstance(text, str):
        return []
    text_lower = text.lower()
    topics = [topic for topic in TagConstants.RELATED_TOPIC_KEYWORDS if topic.lower() in text_lower]
    return topics[:PromptConstants.MAX_RELATED_TOPICS]
