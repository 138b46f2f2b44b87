import logging
from pathlib import Path

import frontmatter
import yaml

from folio.errors import InvalidMetadata

logger = logging.getLogger(__name__)


class ContentParser:
    def __init__(self, repo):
        self.repo = repo

    def get_markdown_content(self, path: Path) -> str:
        """Get the full markdown text of a post file, front-matter included."""
        try:
            return self.repo.read(path)
        except UnicodeDecodeError as e:
            raise InvalidMetadata(Path(path).name, f"file is not valid UTF-8 ({e})")

    def parse(self, path: Path) -> frontmatter.Post:
        """Split a post file into front-matter metadata and markdown body."""
        markdown = self.get_markdown_content(path)
        try:
            post = frontmatter.loads(markdown)
        except yaml.YAMLError as e:
            raise InvalidMetadata(Path(path).name, f"front-matter is not valid YAML ({e})")
        except ValueError as e:
            # YAML timestamps such as 2023-02-30 fail while being converted to dates
            raise InvalidMetadata(Path(path).name, f"front-matter has an invalid value ({e})")
        logger.debug(f"Parsed {Path(path).name}: {sorted(post.metadata)}")
        return post
