from fastapi import Depends, Request

from folio.repos.posts_repo import MarkdownPostsRepo
from folio.schemas.site import StaticSite
from folio.services.markdown_renderer import MarkdownRenderer
from folio.services.page_renderer import PageRenderer
from folio.services.posts_service import PostsService
from folio.services.site_generator import SiteGenerator
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return MarkdownPostsRepo(current_settings.posts_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    renderer = MarkdownRenderer(style=current_settings.PYGMENTS_STYLE)
    return PostsService(repo=repo, renderer=renderer)


def get_site_generator(
    service=Depends(get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    return SiteGenerator(
        service=service,
        pages=PageRenderer(current_settings),
        workers=current_settings.BUILD_WORKERS,
    )


def build_site(current_settings: Settings) -> StaticSite:
    """Run one generation outside of a request (startup, CLI)."""
    repo = get_posts_repo(current_settings)
    service = get_posts_service(repo=repo, current_settings=current_settings)
    generator = get_site_generator(service=service, current_settings=current_settings)
    return generator.generate()


def get_site(request: Request) -> StaticSite:
    return request.app.state.site
