"""Docusaurus -> Quarto frontmatter key rewriting"""

import re

from doc2quarto.core.utils.lines import split_ending, split_lines


DELIMITER = "---"

# Docusaurus key -> Quarto key. Values are never touched.
KEY_MAP: dict[str, str] = {
    "sidebar_position": "order",
}

KEY_RE = re.compile(r'^(?P<key>[A-Za-z_][\w-]*)(?=[ \t]*:)')


def is_delimiter(line: str) -> bool:
    """True if line (with or without its ending) is a bare '---' fence."""
    content, _ = split_ending(line)
    return content.rstrip() == DELIMITER


def rewrite_line(line: str) -> str:
    """Rename a top-level frontmatter key per KEY_MAP, keeping separator and value verbatim."""
    m = KEY_RE.match(line)
    if m and m.group("key") in KEY_MAP:
        return KEY_MAP[m.group("key")] + line[m.end("key"):]
    return line


def rewrite_frontmatter(text: str) -> tuple[str, list[str]]:
    """Return (text, warnings) with frontmatter keys renamed and the body untouched.

    Only a '---' on the very first line opens a frontmatter block. When the block
    is never closed, the whole remainder is rewritten as frontmatter, no closing
    delimiter is added, and a warning is returned.
    """
    lines = split_lines(text)
    if not lines or not is_delimiter(lines[0]):
        return text, []

    out = [lines[0]]
    for i in range(1, len(lines)):
        if is_delimiter(lines[i]):
            out.append(lines[i])
            return ''.join(out) + ''.join(lines[i + 1:]), []
        out.append(rewrite_line(lines[i]))

    return ''.join(out), ["unterminated frontmatter: no closing '---' before end of file"]
