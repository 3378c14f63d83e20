from conftest import auth, create_user, upload_video

PLAYLISTS = "/api/v1/playlists"


def create_playlist(client, token, name="Favourites", **fields):
    payload = {"name": name, **fields}
    response = client.post(PLAYLISTS, json=payload, headers=auth(token))
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_playlist(client):
    alice_id, alice = create_user(client, "alice")

    playlist = create_playlist(client, alice, name="  Road trip  ", description="songs")
    assert playlist["name"] == "Road trip"
    assert playlist["description"] == "songs"
    assert playlist["isPublic"] is True
    assert playlist["videosCount"] == 0
    assert playlist["owner"]["id"] == alice_id

    assert client.post(PLAYLISTS, json={"name": ""}, headers=auth(alice)).status_code == 400
    assert client.post(PLAYLISTS, json={"name": "x" * 101}, headers=auth(alice)).status_code == 400
    assert client.post(PLAYLISTS, json={"name": "anon"}).status_code == 401


def test_private_playlist_is_only_readable_by_owner(client):
    _, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    playlist = create_playlist(client, alice, isPublic=False)

    assert client.get(f"{PLAYLISTS}/{playlist['id']}", headers=auth(bob)).status_code == 403
    assert client.get(f"{PLAYLISTS}/{playlist['id']}").status_code == 403
    assert client.get(f"{PLAYLISTS}/{playlist['id']}", headers=auth(alice)).status_code == 200
    assert client.get(f"{PLAYLISTS}/9999").status_code == 404


def test_add_video_to_playlist(client):
    _, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    playlist = create_playlist(client, alice)
    first = upload_video(client, bob, title="first")
    second = upload_video(client, bob, title="second")

    client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{first['id']}", headers=auth(alice))
    response = client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{second['id']}", headers=auth(alice))
    assert response.status_code == 200
    detail = response.json()["data"]
    assert detail["videosCount"] == 2
    assert [v["title"] for v in detail["videos"]] == ["first", "second"]

    duplicate = client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{first['id']}", headers=auth(alice))
    assert duplicate.status_code == 409


def test_add_video_rules(client):
    _, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    playlist = create_playlist(client, alice)
    draft = upload_video(client, alice, isPublished="false")
    video = upload_video(client, alice)

    assert client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{draft['id']}", headers=auth(alice)).status_code == 404
    assert client.post(f"{PLAYLISTS}/{playlist['id']}/videos/5555", headers=auth(alice)).status_code == 404
    assert client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{video['id']}", headers=auth(bob)).status_code == 403
    assert client.post(f"{PLAYLISTS}/5555/videos/{video['id']}", headers=auth(alice)).status_code == 404


def test_remove_video_keeps_order_contiguous(client):
    _, alice = create_user(client, "alice")
    playlist = create_playlist(client, alice)
    videos = [upload_video(client, alice, title=title) for title in ("one", "two", "three")]
    for video in videos:
        client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{video['id']}", headers=auth(alice))

    response = client.delete(f"{PLAYLISTS}/{playlist['id']}/videos/{videos[1]['id']}", headers=auth(alice))
    assert response.status_code == 200
    assert [v["title"] for v in response.json()["data"]["videos"]] == ["one", "three"]

    missing = client.delete(f"{PLAYLISTS}/{playlist['id']}/videos/{videos[1]['id']}", headers=auth(alice))
    assert missing.status_code == 404

    # appending after a removal lands at the end
    client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{videos[1]['id']}", headers=auth(alice))
    detail = client.get(f"{PLAYLISTS}/{playlist['id']}", headers=auth(alice)).json()["data"]
    assert [v["title"] for v in detail["videos"]] == ["one", "three", "two"]


def test_playlist_hides_videos_the_viewer_cannot_see(client):
    _, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    playlist = create_playlist(client, alice)
    public = upload_video(client, alice, title="public")
    private = upload_video(client, alice, title="private", privacy="private")
    for video in (public, private):
        client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{video['id']}", headers=auth(alice))

    seen_by_bob = client.get(f"{PLAYLISTS}/{playlist['id']}", headers=auth(bob)).json()["data"]
    assert [v["title"] for v in seen_by_bob["videos"]] == ["public"]
    seen_by_alice = client.get(f"{PLAYLISTS}/{playlist['id']}", headers=auth(alice)).json()["data"]
    assert [v["title"] for v in seen_by_alice["videos"]] == ["public", "private"]


def test_user_playlists_listing(client):
    alice_id, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    create_playlist(client, alice, name="open")
    create_playlist(client, alice, name="secret", isPublic=False)

    as_owner = client.get(f"{PLAYLISTS}/user/{alice_id}", headers=auth(alice)).json()
    assert sorted(p["name"] for p in as_owner["data"]) == ["open", "secret"]
    assert as_owner["meta"]["pagination"]["total"] == 2

    as_other = client.get(f"{PLAYLISTS}/user/{alice_id}", headers=auth(bob)).json()
    assert [p["name"] for p in as_other["data"]] == ["open"]
    assert client.get(f"{PLAYLISTS}/user/4242").status_code == 404


def test_update_and_delete_playlist(client):
    _, alice = create_user(client, "alice")
    _, bob = create_user(client, "bob")
    playlist = create_playlist(client, alice)
    video = upload_video(client, alice)
    client.post(f"{PLAYLISTS}/{playlist['id']}/videos/{video['id']}", headers=auth(alice))

    assert client.patch(f"{PLAYLISTS}/{playlist['id']}", json={"name": "mine"}, headers=auth(bob)).status_code == 403
    assert client.patch(f"{PLAYLISTS}/{playlist['id']}", json={}, headers=auth(alice)).status_code == 400

    updated = client.patch(
        f"{PLAYLISTS}/{playlist['id']}",
        json={"name": "Renamed", "isPublic": False},
        headers=auth(alice),
    ).json()["data"]
    assert updated["name"] == "Renamed"
    assert updated["isPublic"] is False
    assert updated["videosCount"] == 1

    assert client.delete(f"{PLAYLISTS}/{playlist['id']}", headers=auth(bob)).status_code == 403
    assert client.delete(f"{PLAYLISTS}/{playlist['id']}", headers=auth(alice)).status_code == 200
    assert client.get(f"{PLAYLISTS}/{playlist['id']}", headers=auth(alice)).status_code == 404
