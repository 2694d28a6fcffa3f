"""Document title extraction."""


def title_from_text(text: str, fallback: str) -> str:
    """Text after the first line starting with '# ', else the fallback."""
    for line in text.split("\n"):
        if line.startswith("# "):
            return line[2:].rstrip("\r")
    return fallback
