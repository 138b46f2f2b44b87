from pydantic import BaseModel
from pydantic.config import ConfigDict


class PostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    date: str
    title: str
    description: str


class PostDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    date: str
    contentHtml: str
