"""Line-ending helpers for line-oriented rewriting"""


def split_lines(text: str) -> list[str]:
    """Split text on '\\n' only, keeping endings, so ''.join(result) == text."""
    parts = text.split("\n")
    lines = [p + "\n" for p in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def split_ending(line: str) -> tuple[str, str]:
    """Split a line into (content, ending) where ending is '\\r\\n', '\\n' or ''."""
    if line.endswith("\r\n"):
        return line[:-2], "\r\n"
    if line.endswith("\n"):
        return line[:-1], "\n"
    return line, ""
