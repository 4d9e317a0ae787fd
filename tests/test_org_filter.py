from followcheck.org_filter import (
    EMBED_ORG_HINTS,
    ORG_HINTS_ENV,
    filter_orgs,
    load_org_hints,
    looks_like_org,
)
from followcheck.pipeline import ComparisonPipeline


def test_looks_like_org():
    assert looks_like_org("bookclub99", ["club"])
    assert not looks_like_org("alice", ["club"])
    assert not looks_like_org("bookclub99", [])


def test_known_false_positive_is_kept():
    # Personal handles containing a hint are hidden too
    assert looks_like_org("maria.daily.life", EMBED_ORG_HINTS)


def test_filter_orgs_toggle():
    handles = ["alice", "bookclub99", "zed"]

    assert filter_orgs(handles, ["club"], enabled=True) == ["alice", "zed"]
    assert filter_orgs(handles, ["club"], enabled=False) == handles


def test_filter_does_not_touch_underlying_counts():
    following = "alice\nbookclub99\nbob"
    followers = "bookclub99\nbob"

    shown = ComparisonPipeline({'exclude_orgs': True, 'org_hints': ["club"]}).run(following, followers)
    hidden = ComparisonPipeline({'exclude_orgs': False, 'org_hints': ["club"]}).run(following, followers)

    assert "bookclub99" not in shown.mutuals
    assert "bookclub99" in hidden.mutuals
    assert shown.following_count == hidden.following_count == 3
    assert shown.followers_count == hidden.followers_count == 2
    assert "bookclub99" in shown.following


def test_load_org_hints_from_file(tmp_path):
    hints_file = tmp_path / "hints.txt"
    hints_file.write_text("# comment\nClub\n\nshop\n", encoding="utf-8")

    assert load_org_hints(str(hints_file)) == ["club", "shop"]


def test_load_org_hints_env_override(tmp_path, monkeypatch):
    hints_file = tmp_path / "hints.txt"
    hints_file.write_text("bakery\n", encoding="utf-8")
    monkeypatch.setenv(ORG_HINTS_ENV, str(hints_file))

    assert load_org_hints() == ["bakery"]


def test_load_org_hints_missing_file_falls_back(tmp_path):
    assert load_org_hints(str(tmp_path / "missing.txt")) == EMBED_ORG_HINTS


def test_default_hints_include_club(monkeypatch):
    monkeypatch.delenv(ORG_HINTS_ENV, raising=False)
    assert "club" in load_org_hints()
