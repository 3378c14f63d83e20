from conftest import PASSWORD, auth, register_user, login_user, create_user, upload_video

USERS = "/api/v1/users"


def test_register_returns_sanitized_user(client, fake_supabase):
    response = register_user(client, "Alice_01", email="Alice@Example.com", cover=True)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["statusCode"] == 201
    user = body["data"]
    assert user["username"] == "alice_01"
    assert user["email"] == "alice@example.com"
    assert user["avatarUrl"].startswith("https://storage.test/")
    assert user["coverUrl"]
    assert "password" not in user
    assert len(fake_supabase.storage.objects) == 2


def test_register_duplicate_email_names_the_field(client):
    assert register_user(client, "alice").status_code == 201

    response = register_user(client, "someone", email="alice@example.com")
    assert response.status_code == 409
    assert "email" in response.json()["message"]


def test_register_duplicate_username(client):
    register_user(client, "alice")
    response = register_user(client, "ALICE", email="other@example.com")
    assert response.status_code == 409
    assert "username" in response.json()["message"]


def test_register_validates_fields(client):
    response = register_user(client, "al")
    assert response.status_code == 400
    assert response.json()["error"][0]["field"] == "username"

    response = register_user(client, "alice", password="short")
    assert response.status_code == 400
    assert response.json()["error"][0]["field"] == "password"

    response = register_user(client, "alice", email="not-an-email")
    assert response.status_code == 400


def test_register_requires_avatar(client):
    response = client.post(
        f"{USERS}/register",
        data={"fullName": "No Avatar", "username": "noavatar", "email": "n@example.com", "password": PASSWORD},
    )
    assert response.status_code == 400
    assert response.json()["error"][0]["field"] == "avatar"


def test_register_reports_missing_fields(client):
    response = client.post(f"{USERS}/register", data={"username": "bob"})
    assert response.status_code == 400
    fields = {error["field"] for error in response.json()["error"]}
    assert fields == {"fullName", "email", "password", "avatar"}


def test_login_with_email_or_username(client):
    register_user(client, "alice")

    by_email = client.post(f"{USERS}/login", json={"email": "ALICE@example.com", "password": PASSWORD})
    assert by_email.status_code == 200
    data = by_email.json()["data"]
    assert data["accessToken"] and data["refreshToken"]
    assert "password" not in data["user"]
    assert "accessToken" in by_email.cookies
    assert "refreshToken" in by_email.cookies

    client.cookies.clear()
    assert login_user(client, "alice")["user"]["username"] == "alice"


def test_login_rejects_bad_credentials(client):
    register_user(client, "alice")
    assert client.post(f"{USERS}/login", json={"username": "alice", "password": "wrong-password"}).status_code == 401
    assert client.post(f"{USERS}/login", json={"username": "nobody", "password": PASSWORD}).status_code == 401
    assert client.post(f"{USERS}/login", json={"password": PASSWORD}).status_code == 400


def test_profile_requires_authentication(client):
    assert client.get(f"{USERS}/profile").status_code == 401
    assert client.get(f"{USERS}/profile", headers=auth("garbage")).status_code == 401

    _, token = create_user(client, "alice")
    response = client.get(f"{USERS}/profile", headers=auth(token))
    assert response.status_code == 200
    assert response.json()["data"]["username"] == "alice"


def test_access_token_cookie_authenticates(client):
    register_user(client, "alice")
    client.post(f"{USERS}/login", json={"username": "alice", "password": PASSWORD})
    assert client.get(f"{USERS}/profile").status_code == 200


def test_refresh_token_rotation(client):
    register_user(client, "alice")
    tokens = login_user(client, "alice")

    first = client.post(f"{USERS}/refresh-token", json={"refreshToken": tokens["refreshToken"]})
    assert first.status_code == 200
    rotated = first.json()["data"]
    assert rotated["refreshToken"] != tokens["refreshToken"]
    client.cookies.clear()

    # the used token is gone
    replay = client.post(f"{USERS}/refresh-token", json={"refreshToken": tokens["refreshToken"]})
    assert replay.status_code == 401

    again = client.post(f"{USERS}/refresh-token", json={"refreshToken": rotated["refreshToken"]})
    assert again.status_code == 200


def test_refresh_token_rejects_missing_or_invalid(client):
    assert client.post(f"{USERS}/refresh-token").status_code == 401
    assert client.post(f"{USERS}/refresh-token", json={"refreshToken": "nope"}).status_code == 401

    _, access_token = create_user(client, "alice")
    # an access token is not a refresh token
    assert client.post(f"{USERS}/refresh-token", json={"refreshToken": access_token}).status_code == 401


def test_logout_revokes_refresh_token(client):
    register_user(client, "alice")
    tokens = login_user(client, "alice")

    response = client.post(
        f"{USERS}/logout",
        json={"refreshToken": tokens["refreshToken"]},
        headers=auth(tokens["accessToken"]),
    )
    assert response.status_code == 200
    assert client.post(f"{USERS}/refresh-token", json={"refreshToken": tokens["refreshToken"]}).status_code == 401


def test_check_username_and_email(client):
    register_user(client, "alice")

    taken = client.get(f"{USERS}/check-username/Alice").json()["data"]
    assert taken == {"username": "alice", "available": False}
    assert client.get(f"{USERS}/check-username/bob").json()["data"]["available"] is True
    assert client.get(f"{USERS}/check-username/b!").status_code == 400

    assert client.get(f"{USERS}/check-email/alice@example.com").json()["data"]["available"] is False
    assert client.get(f"{USERS}/check-email/bob@example.com").json()["data"]["available"] is True
    assert client.get(f"{USERS}/check-email/not-an-email").status_code == 400
    assert client.get(f"{USERS}/check-email/ALICE@Example.com").json()["data"]["available"] is False


def test_update_profile(client):
    _, token = create_user(client, "alice")
    create_user(client, "bob")

    response = client.patch(
        f"{USERS}/update-profile",
        json={"fullName": "Alice Renamed", "bio": "cooking videos"},
        headers=auth(token),
    )
    assert response.status_code == 200
    assert response.json()["data"]["fullName"] == "Alice Renamed"
    assert response.json()["data"]["bio"] == "cooking videos"

    conflict = client.patch(f"{USERS}/update-profile", json={"username": "bob"}, headers=auth(token))
    assert conflict.status_code == 409

    # keeping one's own email is not a conflict
    same = client.patch(f"{USERS}/update-profile", json={"email": "alice@example.com"}, headers=auth(token))
    assert same.status_code == 200

    assert client.patch(f"{USERS}/update-profile", json={}, headers=auth(token)).status_code == 400


def test_avatar_replacement_deletes_old_media(client, fake_supabase):
    _, token = create_user(client, "alice")
    old_avatar = client.get(f"{USERS}/profile", headers=auth(token)).json()["data"]["avatarUrl"]

    response = client.patch(
        f"{USERS}/avatar",
        files={"avatar": ("new.png", b"new-avatar", "image/png")},
        headers=auth(token),
    )
    assert response.status_code == 200
    new_avatar = response.json()["data"]["avatarUrl"]
    assert new_avatar != old_avatar
    assert ("avatars", old_avatar.split("/")[-1]) not in fake_supabase.storage.objects

    assert client.patch(f"{USERS}/avatar", headers=auth(token)).status_code == 400


def test_cover_image_update_survives_storage_failure(client, fake_supabase):
    _, token = create_user(client, "alice")
    client.patch(f"{USERS}/cover-image", files={"coverImage": ("a.png", b"a", "image/png")}, headers=auth(token))

    fake_supabase.storage.fail_removals = True
    response = client.patch(
        f"{USERS}/cover-image",
        files={"coverImage": ("b.png", b"b", "image/png")},
        headers=auth(token),
    )
    assert response.status_code == 200


def test_change_password(client):
    register_user(client, "alice")
    tokens = login_user(client, "alice")
    headers = auth(tokens["accessToken"])

    wrong = client.patch(
        f"{USERS}/change-password",
        json={"currentPassword": "not-it-at-all", "newPassword": "brand-new-pass"},
        headers=headers,
    )
    assert wrong.status_code == 401

    same = client.patch(
        f"{USERS}/change-password",
        json={"currentPassword": PASSWORD, "newPassword": PASSWORD},
        headers=headers,
    )
    assert same.status_code == 400

    ok = client.patch(
        f"{USERS}/change-password",
        json={"currentPassword": PASSWORD, "newPassword": "brand-new-pass"},
        headers=headers,
    )
    assert ok.status_code == 200

    # every refresh token was dropped
    assert client.post(f"{USERS}/refresh-token", json={"refreshToken": tokens["refreshToken"]}).status_code == 401
    assert login_user(client, "alice", password="brand-new-pass")["user"]["username"] == "alice"


def test_toggle_subscription_twice_restores_state(client):
    alice_id, alice = create_user(client, "alice")
    bob_id, bob = create_user(client, "bob")

    first = client.post(f"{USERS}/toggle-subscription/{alice_id}", headers=auth(bob))
    assert first.status_code == 200
    assert first.json()["data"] == {
        "channelId": alice_id,
        "isSubscribed": True,
        "action": "subscribed",
        "subscribersCount": 1,
    }

    second = client.post(f"{USERS}/toggle-subscription/{alice_id}", headers=auth(bob))
    assert second.json()["data"]["isSubscribed"] is False
    assert second.json()["data"]["action"] == "unsubscribed"
    assert second.json()["data"]["subscribersCount"] == 0


def test_cannot_subscribe_to_self_or_missing_channel(client):
    alice_id, alice = create_user(client, "alice")
    assert client.post(f"{USERS}/toggle-subscription/{alice_id}", headers=auth(alice)).status_code == 400
    assert client.post(f"{USERS}/toggle-subscription/9999", headers=auth(alice)).status_code == 404
    assert client.post(f"{USERS}/toggle-subscription/abc", headers=auth(alice)).status_code == 400


def test_subscription_notifies_channel_owner(client):
    alice_id, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")

    client.post(f"{USERS}/toggle-subscription/{alice_id}", headers=auth(bob))

    notifications = client.get("/api/v1/notifications", headers=auth(alice)).json()["data"]
    assert [n["type"] for n in notifications] == ["subscription"]
    assert notifications[0]["relatedUser"]["username"] == "bob"


def test_channel_profile(client):
    alice_id, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    upload_video(client, alice)
    upload_video(client, alice, privacy="private")
    client.post(f"{USERS}/toggle-subscription/{alice_id}", headers=auth(bob))

    as_bob = client.get(f"{USERS}/c/Alice", headers=auth(bob)).json()["data"]
    assert as_bob["subscribersCount"] == 1
    assert as_bob["videosCount"] == 1
    assert as_bob["isSubscribed"] is True
    assert "email" not in as_bob

    anonymous = client.get(f"{USERS}/c/alice").json()["data"]
    assert anonymous["isSubscribed"] is False

    as_owner = client.get(f"{USERS}/c/alice", headers=auth(alice)).json()["data"]
    assert as_owner["videosCount"] == 2

    bob_channel = client.get(f"{USERS}/c/bob").json()["data"]
    assert bob_channel["channelsSubscribedToCount"] == 1

    assert client.get(f"{USERS}/c/nobody").status_code == 404


def test_watch_history_most_recent_first(client):
    _, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    first = upload_video(client, alice, title="First")
    second = upload_video(client, alice, title="Second")

    client.post(f"/api/v1/videos/{first['id']}/watch", headers=auth(bob))
    client.post(f"/api/v1/videos/{second['id']}/watch", headers=auth(bob))
    client.post(f"/api/v1/videos/{first['id']}/watch", headers=auth(bob))

    response = client.get(f"{USERS}/watch-history", headers=auth(bob))
    assert response.status_code == 200
    body = response.json()
    assert [video["title"] for video in body["data"]] == ["First", "Second"]
    assert body["meta"]["pagination"]["total"] == 2


def test_watch_history_hides_videos_made_private(client):
    _, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    video = upload_video(client, alice)
    client.post(f"/api/v1/videos/{video['id']}/watch", headers=auth(bob))

    client.patch(f"/api/v1/videos/{video['id']}", data={"privacy": "private"}, headers=auth(alice))

    assert client.get(f"{USERS}/watch-history", headers=auth(bob)).json()["data"] == []
