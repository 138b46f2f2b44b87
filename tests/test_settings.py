from pathlib import Path

from folio.settings import Settings, choose_env_file


def test_social_urls_use_nickname_and_email():
    s = Settings(NICKNAME="nick", EMAIL="nick@example.com")
    assert s.linkedin_url == "https://www.linkedin.com/in/nick"
    assert s.github_url == "https://github.com/nick"
    assert s.mailto_url == "mailto:nick@example.com?subject=Hey nick!"


def test_paths_are_built_from_dirs():
    s = Settings(POSTS_DIR="content/posts", OUTPUT_DIR="public")
    assert s.posts_path == Path("content/posts")
    assert s.output_path == Path("public")


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("COPY_FEEDBACK_MS", "200")
    monkeypatch.setenv("ABOUT", '{"who": ["tester"]}')
    s = Settings()
    assert s.COPY_FEEDBACK_MS == 200
    assert s.ABOUT == {"who": ["tester"]}


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
