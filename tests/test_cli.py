from folio.cli import build_main
from tests.conftest import make_post


def test_build_writes_site(tmp_path, posts_dir, capsys):
    (posts_dir / "hello.md").write_text(make_post(title="Hello"), encoding="utf-8")
    out = tmp_path / "out"

    code = build_main(["--posts", str(posts_dir), "--out", str(out), "--workers", "2"])

    assert code == 0
    assert (out / "index.html").is_file()
    assert (out / "posts" / "hello.html").is_file()
    assert "Built 1 posts" in capsys.readouterr().out


def test_build_fails_on_missing_metadata(tmp_path, posts_dir, capsys):
    (posts_dir / "broken.md").write_text(make_post(description=None), encoding="utf-8")
    out = tmp_path / "out"

    code = build_main(["--posts", str(posts_dir), "--out", str(out)])

    assert code == 1
    assert "broken.md" in capsys.readouterr().err
    assert not out.exists()


def test_build_fails_on_missing_posts_dir(tmp_path, capsys):
    code = build_main(["--posts", str(tmp_path / "nope"), "--out", str(tmp_path / "out")])

    assert code == 1
    assert "Build failed" in capsys.readouterr().err


def test_build_fails_cleanly_on_impossible_date(tmp_path, posts_dir, capsys):
    (posts_dir / "leap.md").write_text(make_post(date="2023-02-30"), encoding="utf-8")

    code = build_main(["--posts", str(posts_dir), "--out", str(tmp_path / "out")])

    assert code == 1
    assert "leap.md" in capsys.readouterr().err


def test_build_fails_cleanly_on_non_utf8_post(tmp_path, posts_dir, capsys):
    (posts_dir / "latin.md").write_bytes(b"---\ntitle: \xff\n---\n")

    code = build_main(["--posts", str(posts_dir), "--out", str(tmp_path / "out")])

    assert code == 1
    err = capsys.readouterr().err
    assert "latin.md" in err
    assert "UTF-8" in err
