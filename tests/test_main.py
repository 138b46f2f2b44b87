from fastapi.testclient import TestClient

import folio.main as main_module
from folio.main import app
from folio.settings import Settings
from tests.conftest import make_post


def test_lifespan_builds_site_once_and_serves_it(monkeypatch, posts_dir):
    (posts_dir / "hello.md").write_text(make_post(title="Hello"), encoding="utf-8")
    monkeypatch.setattr(main_module, "settings", Settings(POSTS_DIR=str(posts_dir)))

    calls = []
    real_build_site = main_module.build_site

    def counting_build_site(current_settings):
        calls.append(current_settings.POSTS_DIR)
        return real_build_site(current_settings)

    monkeypatch.setattr(main_module, "build_site", counting_build_site)

    with TestClient(app) as client:
        res = client.get("/")
        assert res.status_code == 200
        assert "posts/hello.html" in res.text

        assert client.get("/posts/hello").status_code == 200
        assert client.get("/assets/copy-code.js").status_code == 200
        assert client.get("/api/posts").json()[0]["id"] == "hello"

        # posts added after startup are not part of the build
        (posts_dir / "late.md").write_text(make_post(title="Late"), encoding="utf-8")
        assert client.get("/posts/late").status_code == 404

    assert calls == [str(posts_dir)]
    assert app.state.site is None
