import logging
import shutil
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from folio.errors import PostNotFound
from folio.schemas.blog import PostDocument
from folio.schemas.site import INDEX_PATH, StaticFile, StaticSite, post_path
from folio.services.page_renderer import PageRenderer
from folio.services.post_index import PostIndex
from folio.services.posts_service import PostsService

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

# output path -> (file under folio/static, media type)
STATIC_ASSETS = {
    "assets/site.css": ("site.css", "text/css"),
    "assets/copy-code.js": ("copy-code.js", "text/javascript"),
}
PYGMENTS_CSS_PATH = "assets/pygments.css"


class SiteGenerator:
    def __init__(
        self,
        service: PostsService,
        pages: PageRenderer,
        workers: int = 1,
        static_dir: Path = STATIC_DIR,
    ):
        self.service = service
        self.pages = pages
        self.workers = max(1, workers)
        self.static_dir = Path(static_dir)

    def generate(self) -> StaticSite:
        """
        Run one full generation: index, render every post, lay out pages.

        MissingMetadata, InvalidMetadata and DuplicateId propagate and abort the
        run. A post that cannot be found while rendering is left out of the
        listing and of the generated paths.
        """
        index = self.service.build_index()
        documents = self._render_posts(index)
        posts = tuple(post for post in index.posts if post.id in documents)

        files: Dict[str, StaticFile] = {
            INDEX_PATH: StaticFile(path=INDEX_PATH, content=self.pages.render_index(posts))
        }
        for post in posts:
            path = post_path(post.id)
            files[path] = StaticFile(
                path=path, content=self.pages.render_post(post.id, documents[post.id])
            )
        files.update(self._assets())

        logger.info(f"Generated {len(posts)} post pages, {len(files)} files in total")
        return StaticSite(files=files, posts=posts, documents=documents)

    def write(self, site: StaticSite, output_dir: Path) -> List[Path]:
        """Write every generated file below output_dir, dropping stale post pages."""
        output_dir = Path(output_dir)
        stale_posts = output_dir / "posts"
        if stale_posts.is_dir():
            shutil.rmtree(stale_posts)

        written = []
        for path in sorted(site.paths):
            target = output_dir / path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(site.files[path].content, encoding="utf-8")
            written.append(target)

        logger.info(f"Wrote {len(written)} files to {output_dir}")
        return written

    def _render_posts(self, index: PostIndex) -> Dict[str, PostDocument]:
        post_ids = [post.id for post in index.posts]

        def render(post_id: str) -> Tuple[str, Optional[PostDocument]]:
            try:
                return post_id, self.service.get_post(post_id, index=index)
            except PostNotFound:
                logger.warning(f"Post {post_id} disappeared during the build, skipping")
                return post_id, None

        if self.workers > 1 and len(post_ids) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                results = list(executor.map(render, post_ids))
        else:
            results = [render(post_id) for post_id in post_ids]

        return {post_id: doc for post_id, doc in results if doc is not None}

    def _assets(self) -> Dict[str, StaticFile]:
        assets = {
            PYGMENTS_CSS_PATH: StaticFile(
                path=PYGMENTS_CSS_PATH,
                content=self.service.renderer.stylesheet(),
                media_type="text/css",
            )
        }
        for path, (filename, media_type) in STATIC_ASSETS.items():
            content = (self.static_dir / filename).read_text(encoding="utf-8")
            assets[path] = StaticFile(path=path, content=content, media_type=media_type)
        return assets
