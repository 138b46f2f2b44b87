from typing import Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from folio.schemas.blog import PostDocument, PostSummary

INDEX_PATH = "index.html"


def post_path(post_id: str) -> str:
    return f"posts/{post_id}.html"


class StaticFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    media_type: str = "text/html"


class StaticSite(BaseModel):
    """Output of one generation run. The set of paths is closed."""

    model_config = ConfigDict(frozen=True)

    files: Dict[str, StaticFile] = Field(default_factory=dict)
    posts: Tuple[PostSummary, ...] = ()
    documents: Dict[str, PostDocument] = Field(default_factory=dict)

    @property
    def paths(self) -> FrozenSet[str]:
        return frozenset(self.files)

    def get(self, path: str) -> Optional[StaticFile]:
        return self.files.get(path)
