from folio.dependencies import (
    build_site,
    get_posts_repo,
    get_posts_service,
    get_settings,
    get_site_generator,
)
from folio.repos.posts_repo import MarkdownPostsRepo
from folio.services.posts_service import PostsService
from folio.services.site_generator import SiteGenerator
from folio.settings import Settings, settings
from tests.conftest import make_post


def test_get_settings_returns_global_instance():
    assert get_settings() is settings


def test_get_posts_repo_uses_posts_dir(tmp_path):
    repo = get_posts_repo(Settings(POSTS_DIR=str(tmp_path)))

    assert isinstance(repo, MarkdownPostsRepo)
    assert repo.posts_dir == tmp_path


def test_get_posts_service_applies_pygments_style():
    class FakeRepo:
        pass

    repo = FakeRepo()
    svc = get_posts_service(repo=repo, current_settings=Settings(PYGMENTS_STYLE="monokai"))

    assert isinstance(svc, PostsService)
    assert svc.repo is repo
    assert svc.renderer.style == "monokai"


def test_get_site_generator_constructs_generator():
    svc = object()
    generator = get_site_generator(service=svc, current_settings=Settings(BUILD_WORKERS=3))

    assert isinstance(generator, SiteGenerator)
    assert generator.service is svc
    assert generator.workers == 3


def test_build_site_generates_from_posts_dir(posts_dir):
    (posts_dir / "hello.md").write_text(make_post(title="Hello"), encoding="utf-8")

    site = build_site(Settings(POSTS_DIR=str(posts_dir)))

    assert "posts/hello.html" in site.paths
    assert [post.title for post in site.posts] == ["Hello"]
