import datetime
from pathlib import Path
from typing import Iterable, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from folio.schemas.blog import PostDocument, PostSummary
from folio.settings import Settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def format_date(value: str) -> str:
    """'2023-01-01' -> 'January 1, 2023'"""
    parsed = datetime.date.fromisoformat(value[:10])
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


class PageRenderer:
    """Wraps page bodies in the site shell: header, about widget, social links, footer."""

    def __init__(
        self,
        settings: Settings,
        templates_dir: Path = TEMPLATES_DIR,
        year: Optional[int] = None,
    ):
        self.settings = settings
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )
        self.env.filters["format_date"] = format_date
        self.env.globals.update(
            site=settings,
            year=year or datetime.date.today().year,
        )

    def render_index(self, posts: Iterable[PostSummary]) -> str:
        template = self.env.get_template("index.html")
        return template.render(
            title=self.settings.SITE_TITLE,
            description=self.settings.SITE_DESCRIPTION,
            posts=list(posts),
            root="",
        )

    def render_post(self, post_id: str, document: PostDocument) -> str:
        template = self.env.get_template("post.html")
        return template.render(
            title=f"{document.title} | {self.settings.SITE_TITLE}",
            description=self.settings.SITE_DESCRIPTION,
            post_id=post_id,
            post=document,
            copy_feedback_ms=self.settings.COPY_FEEDBACK_MS,
            root="../",
        )
