import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")


class MarkdownPostsRepo:
    def __init__(self, posts_dir: Path):
        self.posts_dir = Path(posts_dir)

    def list_post_files(self) -> List[Path]:
        if not self.posts_dir.is_dir():
            raise FileNotFoundError(f"Posts directory not found: {self.posts_dir}")
        files = [
            path
            for path in self.posts_dir.iterdir()
            if path.is_file() and self._is_markdown(path)
        ]
        logger.debug(f"Found {len(files)} markdown files in {self.posts_dir}")
        return sorted(files, key=lambda p: p.name)

    def get_post_file(self, post_id: str) -> Optional[Path]:
        # ids come from filenames, anything path-like cannot name a post
        if not post_id or "/" in post_id or "\\" in post_id or post_id.startswith("."):
            return None
        for suffix in MARKDOWN_SUFFIXES:
            candidate = self.posts_dir / f"{post_id}{suffix}"
            if candidate.is_file():
                return candidate
        return None

    @staticmethod
    def read(path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    @staticmethod
    def _is_markdown(path: Path) -> bool:
        return path.suffix.lower() in MARKDOWN_SUFFIXES and not path.name.startswith(".")
