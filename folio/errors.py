from typing import Iterable, Sequence


class PostError(Exception):
    """Base class for problems found while ingesting posts."""


class MissingMetadata(PostError):
    def __init__(self, source: str, fields: Iterable[str]):
        self.source = source
        self.fields: Sequence[str] = tuple(fields)
        super().__init__(
            f"{source} is missing required front-matter: {', '.join(self.fields)}"
        )


class InvalidMetadata(PostError):
    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source} has invalid front-matter: {reason}")


class DuplicateId(PostError):
    def __init__(self, post_id: str, sources: Iterable[str]):
        self.post_id = post_id
        self.sources: Sequence[str] = tuple(sources)
        super().__init__(
            f"Post id '{post_id}' is produced by more than one file: "
            f"{', '.join(self.sources)}"
        )


class PostNotFound(PostError):
    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(f"Post '{post_id}' not found")
