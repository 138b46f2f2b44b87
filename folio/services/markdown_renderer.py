import logging
import re

import markdown
from bs4 import BeautifulSoup
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

# Elements and attributes that could make rendered posts executable
UNSAFE_TAGS = ["script", "iframe", "object", "embed"]
URL_ATTRIBUTES = ("href", "src", "action", "formaction", "xlink:href")
UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:text/html")

LANGUAGE_PREFIX = "language-"
DEFAULT_LANGUAGE = "text"

_CONTROL_CHARS = re.compile(r"[\s\x00-\x1f]+")


class MarkdownRenderer:
    """
    Converts a markdown body to an inert HTML string.

    Fenced code blocks are wrapped as
    ``<div class="code-block" data-language="LANG"><pre class="highlight">
    <code class="language-LANG">...</code></pre></div>`` with Pygments token
    spans inside the ``code`` element, so the block's text content stays equal
    to the literal code.
    """

    def __init__(self, style: str = "default", css_class: str = "highlight"):
        self.style = style
        self.css_class = css_class
        self.formatter = HtmlFormatter(nowrap=True)

    def render(self, body: str) -> str:
        # Markdown instances are not thread-safe; markdown.markdown makes one per call
        html = markdown.markdown(
            body, extensions=MARKDOWN_EXTENSIONS, output_format="html"
        )
        soup = BeautifulSoup(html, "html.parser")
        strip_unsafe_markup(soup)
        self._highlight_code_blocks(soup)
        return str(soup)

    def stylesheet(self) -> str:
        """CSS rules for the token classes emitted by render()."""
        return HtmlFormatter(style=self.style).get_style_defs(f".{self.css_class}")

    def _highlight_code_blocks(self, soup: BeautifulSoup) -> None:
        for code in soup.select("pre > code"):
            pre = code.parent
            language = get_code_language(code)
            source = code.get_text().rstrip("\n")

            highlighted = highlight(source, self._lexer_for(language), self.formatter)
            # parsed inside <pre> so whitespace-only strings between spans survive
            spans = highlighted.rstrip("\n")
            fragment = BeautifulSoup(f"<pre>{spans}</pre>", "html.parser")
            code.clear()
            code["class"] = [f"{LANGUAGE_PREFIX}{language}"]
            code.extend(list(fragment.pre.contents))

            pre["class"] = [self.css_class]
            wrapper = soup.new_tag(
                "div", attrs={"class": "code-block", "data-language": language}
            )
            pre.wrap(wrapper)

    @staticmethod
    def _lexer_for(language: str):
        try:
            return get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.debug(f"No lexer for '{language}', rendering as plain text")
            return get_lexer_by_name(DEFAULT_LANGUAGE, stripnl=False, ensurenl=False)


def get_code_language(code) -> str:
    for css_class in code.get("class") or []:
        if css_class.startswith(LANGUAGE_PREFIX) and len(css_class) > len(
            LANGUAGE_PREFIX
        ):
            return css_class[len(LANGUAGE_PREFIX) :].lower()
    return DEFAULT_LANGUAGE


def strip_unsafe_markup(soup: BeautifulSoup) -> None:
    """Remove script-capable elements, event handlers and script URLs in place."""
    for tag in soup.find_all(UNSAFE_TAGS):
        if not tag.decomposed:
            tag.decompose()

    for tag in soup.find_all(True):
        for attr in list(tag.attrs):
            name = attr.lower()
            if name.startswith("on"):
                del tag.attrs[attr]
            elif name in URL_ATTRIBUTES and _is_script_url(tag.attrs[attr]):
                del tag.attrs[attr]


def _is_script_url(value) -> bool:
    if not isinstance(value, str):
        return False
    normalized = _CONTROL_CHARS.sub("", value).lower()
    return normalized.startswith(UNSAFE_URL_SCHEMES)
