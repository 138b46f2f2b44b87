import datetime
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

import frontmatter

from folio.errors import DuplicateId, InvalidMetadata, MissingMetadata, PostNotFound
from folio.schemas.blog import PostDocument, PostSummary
from folio.services.content_parser import ContentParser
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.post_index import PostIndex

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "date", "description")


class PostsService:
    def __init__(self, repo, parser=None, renderer=None):
        self.repo = repo
        self.parser = parser or ContentParser(repo)
        self.renderer = renderer or MarkdownRenderer()

    def build_index(self) -> PostIndex:
        """Read every post's front-matter and return the ordered index."""
        sources: Dict[str, Path] = {}
        folded_ids: Dict[str, str] = {}
        posts: List[PostSummary] = []

        for path in self.repo.list_post_files():
            post_id = _normalize_id(path.name)
            # Hello.md and hello.md collide on case-insensitive filesystems
            key = post_id.casefold()
            if key in folded_ids:
                raise DuplicateId(post_id, [sources[folded_ids[key]].name, path.name])

            post_data = parse_post_data(self.parser.parse(path), path.name)
            folded_ids[key] = post_id
            sources[post_id] = path
            posts.append(
                PostSummary(
                    id=post_id,
                    date=post_data["date"],
                    title=post_data["title"],
                    description=post_data["description"],
                )
            )

        # Two stable sorts: newest first, equal dates by id
        posts.sort(key=lambda p: p.id)
        posts.sort(key=lambda p: p.date, reverse=True)
        logger.info(f"Indexed {len(posts)} posts")
        return PostIndex(posts, sources)

    def get_post(self, post_id: str, index: Optional[PostIndex] = None) -> PostDocument:
        """
        Render one post. With an index, only ids in that index are found;
        without one, the posts directory is searched directly.
        """
        if index is not None:
            path = index.source_for(post_id)
        else:
            path = self.repo.get_post_file(post_id)
            if path is None:
                raise PostNotFound(post_id)

        try:
            post = self.parser.parse(path)
        except FileNotFoundError:
            raise PostNotFound(post_id) from None

        post_data = parse_post_data(post, Path(path).name, include_content=True)
        return PostDocument(
            title=post_data["title"],
            date=post_data["date"],
            contentHtml=self.renderer.render(post_data["content"]),
        )


def parse_post_data(
    post: frontmatter.Post, source: str, include_content: bool = False
) -> dict:
    """Validate front-matter and return standardized post data"""
    metadata = post.metadata or {}

    missing = [field for field in REQUIRED_FIELDS if _is_blank(metadata.get(field))]
    if missing:
        raise MissingMetadata(source, missing)

    date = _convert_date(metadata["date"])
    if date is None:
        raise InvalidMetadata(
            source, f"date '{metadata['date']}' is not an ISO 8601 date"
        )

    post_data = {
        "title": str(metadata["title"]),
        "date": date,
        "description": str(metadata["description"]),
    }
    if include_content:
        post_data["content"] = post.content
    return post_data


def _normalize_id(filename: str) -> str:
    base, _ = os.path.splitext(filename)
    return base


def _is_blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _convert_date(value) -> Optional[str]:
    """Normalize a front-matter date to YYYY-MM-DD; None if it is not ISO 8601."""
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()

    text = str(value).strip()
    try:
        return datetime.date.fromisoformat(text).isoformat()
    except ValueError:
        pass
    try:
        return datetime.datetime.fromisoformat(text).date().isoformat()
    except ValueError:
        return None
