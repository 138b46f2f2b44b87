from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, Mapping, Tuple

from folio.errors import PostNotFound
from folio.schemas.blog import PostSummary


class PostIndex:
    """
    Every post known to one generation run, newest first.

    Built once by ``PostsService.build_index`` and read-only afterwards; pass it
    to whatever needs the post set instead of re-reading the posts directory.
    """

    __slots__ = ("_posts", "_sources")

    def __init__(self, posts: Iterable[PostSummary], sources: Mapping[str, Path]):
        self._posts: Tuple[PostSummary, ...] = tuple(posts)
        self._sources = MappingProxyType(dict(sources))

    @property
    def posts(self) -> Tuple[PostSummary, ...]:
        return self._posts

    @property
    def ids(self) -> FrozenSet[str]:
        return frozenset(self._sources)

    def source_for(self, post_id: str) -> Path:
        try:
            return self._sources[post_id]
        except KeyError:
            raise PostNotFound(post_id) from None

    def __contains__(self, post_id: object) -> bool:
        return post_id in self._sources

    def __iter__(self) -> Iterator[PostSummary]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)
