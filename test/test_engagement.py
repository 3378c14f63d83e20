from datetime import datetime, timedelta
from vidtube.model.comment import CommentModel
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel, VideoPrivacy
from vidtube.service.engagement import shape_user, shape_owner, shape_video, shape_comment
from vidtube.service.search import relevance_score, rank_videos
from vidtube.service.visibility import is_visible_to

NOW = datetime(2026, 1, 31, 12, 0, 0)


def make_user(**overrides):
    values = dict(
        id=1, username="alice", email="alice@example.com", full_name="Alice Tester",
        password="$2b$12$hash", avatar_url="https://cdn/a.png", cover_url="", bio="hi",
        created_at=NOW, updated_at=NOW,
    )
    values.update(overrides)
    return UserModel(**values)


def make_video(**overrides):
    values = dict(
        id=10, owner_id=1, title="Cooking pasta", description="A quick dinner", url="https://cdn/v.mp4",
        thumbnail_url="", videoformat="mp4", duration=61.5, views=0, is_published=True,
        privacy=VideoPrivacy.PUBLIC, category="general", tags=["food"], created_at=NOW, updated_at=NOW,
    )
    values.update(overrides)
    return VideoModel(**values)


def test_shape_user_never_exposes_password():
    shaped = shape_user(make_user())
    assert "password" not in shaped
    assert shaped["fullName"] == "Alice Tester"
    assert shaped["avatarUrl"] == "https://cdn/a.png"


def test_shape_user_none():
    assert shape_user(None) is None


def test_shape_owner_optionally_carries_subscribers():
    user = make_user()
    assert "subscribersCount" not in shape_owner(user)
    assert shape_owner(user, 7)["subscribersCount"] == 7
    assert set(shape_owner(user)) == {"id", "username", "fullName", "avatarUrl"}


def test_shape_video_defaults_to_zero_engagement():
    shaped = shape_video(make_video(), shape_owner(make_user()))
    assert shaped["likesCount"] == 0
    assert shaped["commentsCount"] == 0
    assert shaped["isLiked"] is False
    assert shaped["isSubscribed"] is False
    assert shaped["privacy"] == "public"
    assert shaped["owner"]["username"] == "alice"
    assert "owner_id" not in shaped


def test_shape_video_normalizes_numbers():
    shaped = shape_video(make_video(views=None, duration=3), None, likes_count=None)
    assert shaped["views"] == 0
    assert shaped["duration"] == 3.0
    assert isinstance(shaped["duration"], float)
    assert shaped["likesCount"] == 0


def test_shape_comment():
    comment = CommentModel(id=5, content="nice", video_id=10, owner_id=1, parent_id=None, created_at=NOW, updated_at=NOW)
    shaped = shape_comment(comment, shape_owner(make_user()), likes_count=2, is_liked=True)
    assert shaped["videoId"] == 10
    assert shaped["likesCount"] == 2
    assert shaped["isLiked"] is True


def test_title_match_outranks_description_match_regardless_of_boosts():
    title_only = relevance_score("Pasta night", "", "pasta", views=0, likes=0, created_at=NOW - timedelta(days=365), now=NOW)
    description_only = relevance_score(
        "Dinner", "making pasta", "pasta", views=10 ** 9, likes=10 ** 9, created_at=NOW, now=NOW,
    )
    assert title_only > description_only


def test_score_is_case_insensitive():
    assert relevance_score("PASTA", "", "pasta", 0, 0, NOW - timedelta(days=60), NOW) == 10


def test_recency_boost_fades_over_a_month():
    fresh = relevance_score("x", "", "y", 0, 0, NOW, NOW)
    half = relevance_score("x", "", "y", 0, 0, NOW - timedelta(days=15), NOW)
    old = relevance_score("x", "", "y", 0, 0, NOW - timedelta(days=45), NOW)
    assert fresh == 1
    assert abs(half - 0.5) < 1e-9
    assert old == 0


def test_popularity_boosts_are_capped():
    huge = relevance_score("x", "", "y", 10 ** 12, 10 ** 12, NOW - timedelta(days=90), NOW)
    assert huge == 2


def test_rank_breaks_ties_by_newest_first():
    older = make_video(id=1, title="pasta", created_at=NOW - timedelta(days=40))
    newer = make_video(id=2, title="pasta", created_at=NOW - timedelta(days=35))
    ranked = rank_videos([older, newer], "pasta", {}, NOW)
    assert [video.id for video in ranked] == [2, 1]


def test_rank_uses_like_counts():
    plain = make_video(id=1, title="pasta", created_at=NOW - timedelta(days=60))
    liked = make_video(id=2, title="pasta", created_at=NOW - timedelta(days=60))
    ranked = rank_videos([plain, liked], "pasta", {2: 100}, NOW)
    assert ranked[0].id == 2


def test_visibility_rules():
    public = make_video(owner_id=1)
    unlisted = make_video(owner_id=1, privacy=VideoPrivacy.UNLISTED)
    private = make_video(owner_id=1, privacy=VideoPrivacy.PRIVATE)
    draft = make_video(owner_id=1, is_published=False)

    assert is_visible_to(public, None)
    assert is_visible_to(unlisted, 2)
    assert not is_visible_to(private, 2)
    assert not is_visible_to(draft, None)
    assert is_visible_to(private, 1)
    assert is_visible_to(draft, 1)
