import re

from .catalog import TECHNIQUES


def _phrase_pattern(phrase):
    return re.compile(r"(?<!\w)" + re.escape(phrase.lower()) + r"(?!\w)")


def _build_phrase_index(techniques):
    index = []
    for technique in techniques:
        phrases = [technique.name]
        phrases.extend(technique.aliases or ())
        index.append((technique, [_phrase_pattern(p) for p in phrases]))
    return index


phrase_index = _build_phrase_index(TECHNIQUES)


def find_techniques_in_text(text):
    """Return catalog techniques whose name or alias appears in the text."""
    text_lowercase = text.lower()
    found_techniques = []

    for technique, patterns in phrase_index:
        if any(pattern.search(text_lowercase) for pattern in patterns):
            found_techniques.append(technique)

    return found_techniques


def page_bounds(total, page, per_page):
    """Clamp page to the valid range and return (page, total_pages, start, end)."""
    total_pages = max(1, -(-total // per_page))
    page = max(1, min(page, total_pages))
    start = (page - 1) * per_page
    end = start + per_page
    return page, total_pages, start, end
