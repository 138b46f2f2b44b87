import textwrap
from pathlib import Path

import pytest


def make_post(
    title="Title", date="2023-01-01", description="Description", body="Body text"
) -> str:
    """Markdown file text with front-matter; None leaves a field out."""
    lines = ["---"]
    for key, value in (("title", title), ("date", date), ("description", description)):
        if value is not None:
            lines.append(f"{key}: {value}")
    lines.append("---")
    lines.append(textwrap.dedent(body).strip())
    return "\n".join(lines) + "\n"


class FakeRepo:
    """
    In-memory stand-in for MarkdownPostsRepo, keyed by filename.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []

    def list_post_files(self):
        return [Path(name) for name in sorted(self.files)]

    def get_post_file(self, post_id):
        for name in sorted(self.files):
            if Path(name).stem == post_id:
                return Path(name)
        return None

    def read(self, path):
        self.reads.append(Path(path).name)
        if Path(path).name not in self.files:
            raise FileNotFoundError(path)
        return self.files[Path(path).name]


class FakeTimer:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """
    Records scheduled callbacks instead of running them; call fire() to run them.
    """

    def __init__(self):
        self.timers = []

    def __call__(self, delay, callback):
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    def fire(self, include_cancelled=False):
        pending, self.timers = self.timers, []
        for timer in pending:
            if include_cancelled or not timer.cancelled:
                timer.callback()


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory
