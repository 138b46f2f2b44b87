from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from folio import dependencies as deps
from folio.schemas.blog import PostDocument, PostSummary
from folio.schemas.site import INDEX_PATH, StaticSite, post_path

router = APIRouter()


@router.get("/")
@router.get("/index.html")
def index(site: StaticSite = Depends(deps.get_site)):
    """Listing page."""
    return _serve(site, INDEX_PATH)


@router.get("/posts/{post_id}")
def post_page(post_id: str, site: StaticSite = Depends(deps.get_site)):
    """Generated page of a single post; ids outside the build are 404."""
    return _serve(site, post_path(post_id.removesuffix(".html")))


@router.get("/assets/{name}")
def asset(name: str, site: StaticSite = Depends(deps.get_site)):
    return _serve(site, f"assets/{name}")


@router.get("/api/posts", response_model=List[PostSummary])
def list_posts(site: StaticSite = Depends(deps.get_site)):
    """Get all posts metadata, newest first."""
    return list(site.posts)


@router.get("/api/posts/{post_id}", response_model=PostDocument)
def get_post(post_id: str, site: StaticSite = Depends(deps.get_site)):
    """Get a single rendered post."""
    document = site.documents.get(post_id)
    if document is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return document


def _serve(site: StaticSite, path: str) -> Response:
    static_file = site.get(path)
    if static_file is None:
        raise HTTPException(status_code=404, detail="Not found")
    return Response(content=static_file.content, media_type=static_file.media_type)
