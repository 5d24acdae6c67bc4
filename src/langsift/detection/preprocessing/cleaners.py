"""
Text cleaners applied before character normalization.

Cleaners remove content that would only add noise to the n-gram statistics:
markup, URLs and e-mail addresses. Each cleaner implements the
BasePreprocessor interface so they can be chained.

Example:
    >>> pipeline = [MarkupCleaner(), AddressCleaner()]
    >>> text = "<p>Visit <a href='https://example.org'>us</a> today</p>"
    >>> for cleaner in pipeline:
    ...     text = cleaner(text)
"""

import re

from bs4 import BeautifulSoup

from langsift.detection.base import BasePreprocessor

URL_RE = re.compile(r"https?://[-_.?&~;+=/#0-9A-Za-z]{1,2076}")
MAIL_RE = re.compile(r"[-_.0-9A-Za-z]{1,64}@[-_0-9A-Za-z]{1,255}[-_.0-9A-Za-z]{1,255}")


class MarkupCleaner(BasePreprocessor):
    """
    HTML content cleaner and text extractor.

    Removes tags, scripts and styles while keeping the visible text. Block
    boundaries become line breaks so words from adjacent elements are not
    glued together into n-grams that never occur in the language.
    """

    def process(self, content: str) -> str:
        soup = BeautifulSoup(content, "html.parser")

        # Remove script and style elements
        for script_or_style in soup(["script", "style"]):
            script_or_style.decompose()

        text = soup.get_text(separator="\n")

        lines = (line.strip() for line in text.splitlines())
        return "\n".join(line for line in lines if line)


class AddressCleaner(BasePreprocessor):
    """Replaces URLs and e-mail addresses with a space"""

    def process(self, content: str) -> str:
        content = URL_RE.sub(" ", content)
        return MAIL_RE.sub(" ", content)
