"""Docusaurus admonition -> Quarto callout rewriting as a single-pass line state machine"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from markdown_it import MarkdownIt

from doc2quarto.core.utils.lines import split_ending, split_lines


ADMONITION_MAP: Mapping[str, str] = MappingProxyType({
    "note":    "note",
    "tip":     "tip",
    "info":    "note",
    "caution": "caution",
    "warning": "warning",
    "danger":  "important",
})

# ':::type', ':::type Title' or the v3 ':::type[Title]' form.
OPEN_RE = re.compile(r'^:::(?P<type>\w+)(?:\[(?P<bracket>.*)\]|\s+(?P<title>.*))?\s*$')
CLOSE_RE = re.compile(r'^:::\s*$')

CALLOUT_OPEN = ":::: {{.callout-{kind}}}"
CALLOUT_CLOSE = "::::"


class ScanState(str, Enum):
    """Scanner position relative to an admonition block"""
    outside = "outside"
    inside = "inside"


def callout_type(admonition_type: str) -> str | None:
    """Return the Quarto callout type for a Docusaurus admonition type, else None."""
    return ADMONITION_MAP.get(admonition_type.lower())


def parse_opening(line: str) -> tuple[str, str] | None:
    """Return (callout_type, title) if line opens a recognized admonition, else None."""
    m = OPEN_RE.match(line)
    if not m:
        return None
    kind = callout_type(m.group("type"))
    if kind is None:
        return None
    title = m.group("bracket") if m.group("bracket") is not None else m.group("title")
    return kind, (title or "").strip()


def fenced_code_lines(text: str, preset: str = "commonmark") -> set[int]:
    """Return 0-based line numbers covered by fenced code blocks, via markdown-it token.map.

    Line numbers match split_lines: markdown-it treats a lone '\\r' as a line break,
    so it is blanked out before parsing to keep '\\n' the only separator.
    """
    source = text.replace("\r\n", "\n").replace("\r", " ")
    tokens = MarkdownIt(preset, options_update={"linkify": False}).parse(source)
    covered: set[int] = set()
    for tok in tokens:
        if tok.type == 'fence' and tok.map:
            start, end = tok.map
            covered.update(range(start, end))
    return covered


def rewrite_admonitions(
    text: str,
    protect_code_fences: bool = True,
    parser_config: str = "commonmark",
    ) -> tuple[str, list[str]]:
    """Return (text, warnings) with recognized admonitions rewritten as Quarto callouts.

    Unknown admonition types and stray ':::' lines pass through unchanged. A block
    still open at end of input is closed with an appended '::::' and reported.
    """
    lines = split_lines(text)
    if protect_code_fences and ":::" in text:
        protected = fenced_code_lines(text, parser_config)
    else:
        protected = set()

    out: list[str] = []
    warnings: list[str] = []
    state = ScanState.outside
    opened_at = 0

    for i, line in enumerate(lines):
        content, ending = split_ending(line)
        if i in protected:
            out.append(line)
            continue

        if state is ScanState.outside:
            opening = parse_opening(content)
            if opening is None:
                out.append(line)
                continue
            kind, title = opening
            nl = ending or "\n"
            out.append(CALLOUT_OPEN.format(kind=kind) + (nl if title else ending))
            if title:
                out.append(f"## {title}{ending}")
            state = ScanState.inside
            opened_at = i + 1
        elif CLOSE_RE.match(content):
            out.append(CALLOUT_CLOSE + ending)
            state = ScanState.outside
        else:
            out.append(line)

    if state is ScanState.inside:
        if out and not out[-1].endswith("\n"):
            out[-1] += "\n"
            out.append(CALLOUT_CLOSE)
        else:
            out.append(CALLOUT_CLOSE + "\n")
        warnings.append(f"unterminated admonition opened on line {opened_at}: closed at end of file")

    return ''.join(out), warnings
