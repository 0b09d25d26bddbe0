"""
HTTP surface for follow state, follow/unfollow and visibility-gated reads.
"""
import uuid

from tests.helpers import API, auth_headers


async def test_follow_state_anonymous(client, make_user):
    a = await make_user("alice")

    resp = await client.get(f"{API}/users/{a.id}/follow-state")

    assert resp.status_code == 200
    assert resp.json() == {"followers": 0, "following": 0, "isFollowing": False, "requested": False}


async def test_follow_public_user(client, make_user):
    a = await make_user("alice")
    b = await make_user("bob")

    resp = await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"}, headers=auth_headers(b))

    assert resp.status_code == 200
    assert resp.json() == {"followers": 1, "following": 0, "isFollowing": True, "requested": False}

    resp = await client.get(f"{API}/users/{a.id}/follow-state", headers=auth_headers(b))
    assert resp.json()["isFollowing"] is True

    resp = await client.get(f"{API}/notifications", headers=auth_headers(a))
    [notification] = resp.json()
    assert notification["type"] == "FOLLOWED_YOU"
    assert notification["actor"]["id"] == str(b.id)
    assert notification["actor"]["username"] == "bob"
    assert notification["actor"]["name"] == "Bob"
    assert notification["actor"]["image"] == "https://cdn.example.com/bob.png"
    assert notification["isRead"] is False

    resp = await client.get(f"{API}/notifications", headers=auth_headers(b))
    assert resp.json() == []


async def test_follow_private_user_creates_request(client, make_user):
    a = await make_user("alice", is_private=True)
    b = await make_user("bob")

    resp = await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"}, headers=auth_headers(b))

    assert resp.json() == {"followers": 0, "following": 0, "isFollowing": True, "requested": True}

    resp = await client.get(f"{API}/notifications", headers=auth_headers(a))
    [notification] = resp.json()
    assert notification["type"] == "FOLLOW_REQUEST"
    assert notification["follow"]["status"] == "PENDING"
    assert notification["followId"] == notification["follow"]["id"]


async def test_toggle_without_body(client, make_user):
    a = await make_user("alice")
    b = await make_user("bob")

    first = await client.post(f"{API}/users/{a.id}/follow", headers=auth_headers(b))
    second = await client.post(f"{API}/users/{a.id}/follow", headers=auth_headers(b))

    assert first.json()["isFollowing"] is True
    assert second.json()["isFollowing"] is False
    assert second.json()["followers"] == 0


async def test_unfollow_action_and_delete(client, make_user):
    a = await make_user("alice")
    b = await make_user("bob")
    await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"}, headers=auth_headers(b))

    resp = await client.post(f"{API}/users/{a.id}/follow", json={"action": "unfollow"}, headers=auth_headers(b))
    assert resp.json()["isFollowing"] is False

    resp = await client.delete(f"{API}/users/{a.id}/follow", headers=auth_headers(b))
    assert resp.status_code == 200
    assert resp.json()["followers"] == 0


async def test_follow_requires_auth(client, make_user):
    a = await make_user("alice")

    resp = await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"})

    assert resp.status_code == 401
    assert resp.json() == {"message": "Unauthorized"}


async def test_follow_with_bad_token(client, make_user):
    a = await make_user("alice")

    resp = await client.post(
        f"{API}/users/{a.id}/follow",
        json={"action": "follow"},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert resp.status_code == 401


async def test_follow_with_missing_viewer_record(client, make_user):
    from app.core.security import create_access_token

    a = await make_user("alice")
    ghost = {"Authorization": f"Bearer {create_access_token(uuid.uuid4())}"}

    resp = await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"}, headers=ghost)

    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


async def test_cannot_follow_yourself(client, make_user):
    a = await make_user("alice")

    resp = await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"}, headers=auth_headers(a))

    assert resp.status_code == 400
    assert resp.json() == {"message": "Cannot follow yourself"}


async def test_invalid_action_is_rejected(client, make_user):
    a = await make_user("alice")
    b = await make_user("bob")

    resp = await client.post(f"{API}/users/{a.id}/follow", json={"action": "befriend"}, headers=auth_headers(b))

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid request"


async def test_followers_and_following_lists(client, make_user):
    a = await make_user("alice")
    b = await make_user("bob")
    c = await make_user("carol")
    await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"}, headers=auth_headers(b))
    await client.post(f"{API}/users/{c.id}/follow", json={"action": "follow"}, headers=auth_headers(b))

    resp = await client.get(f"{API}/users/{a.id}/followers")
    assert resp.json() == [
        {"id": str(b.id), "username": "bob", "name": "Bob", "image": "https://cdn.example.com/bob.png"}
    ]

    resp = await client.get(f"{API}/users/{b.id}/following")
    assert {u["username"] for u in resp.json()} == {"alice", "carol"}


async def test_private_followers_list_is_gated(client, make_user):
    a = await make_user("alice", is_private=True)
    b = await make_user("bob")

    resp = await client.get(f"{API}/users/{a.id}/followers", headers=auth_headers(b))
    assert resp.status_code == 403
    assert resp.json() == {"message": "Private account"}

    resp = await client.get(f"{API}/users/{a.id}/followers", headers=auth_headers(a))
    assert resp.status_code == 200


async def test_private_posts_gated_until_accepted(client, make_user):
    a = await make_user("alice", is_private=True)
    b = await make_user("bob")
    created = await client.post(
        f"{API}/posts",
        json={"title": "Leg day", "content": "5x5 squats", "imageUrl": "https://cdn.example.com/squat.jpg"},
        headers=auth_headers(a),
    )
    assert created.status_code == 201
    post_id = created.json()["id"]

    resp = await client.get(f"{API}/users/{a.id}/posts", headers=auth_headers(b))
    assert resp.status_code == 403
    assert resp.json() == {"message": "Private account"}
    resp = await client.get(f"{API}/posts/{post_id}/preview", headers=auth_headers(b))
    assert resp.status_code == 403

    # Owner always sees their own posts
    resp = await client.get(f"{API}/users/{a.id}/posts", headers=auth_headers(a))
    assert [p["title"] for p in resp.json()] == ["Leg day"]

    await client.post(f"{API}/users/{a.id}/follow", json={"action": "follow"}, headers=auth_headers(b))
    resp = await client.get(f"{API}/users/{a.id}/posts", headers=auth_headers(b))
    assert resp.status_code == 403

    [request] = (await client.get(f"{API}/notifications", headers=auth_headers(a))).json()
    await client.post(f"{API}/notifications/{request['id']}/accept", headers=auth_headers(a))

    resp = await client.get(f"{API}/users/{a.id}/posts", headers=auth_headers(b))
    assert resp.status_code == 200
    assert resp.json()[0]["imageUrl"] == "https://cdn.example.com/squat.jpg"

    resp = await client.get(f"{API}/posts/{post_id}/preview", headers=auth_headers(b))
    assert resp.status_code == 200
    body = resp.json()
    assert body["type"] == "post"
    assert body["post"]["content"] == "5x5 squats"
    assert body["post"]["author"]["username"] == "alice"


async def test_public_posts_visible_anonymously(client, make_user):
    a = await make_user("alice")
    await client.post(f"{API}/posts", json={"content": "hello"}, headers=auth_headers(a))

    resp = await client.get(f"{API}/users/{a.id}/posts")

    assert resp.status_code == 200
    assert len(resp.json()) == 1


async def test_posts_of_unknown_user(client):
    resp = await client.get(f"{API}/users/{uuid.uuid4()}/posts")
    assert resp.status_code == 200
    assert resp.json() == []


async def test_admin_sees_private_posts(client, make_user):
    a = await make_user("alice", is_private=True)
    admin = await make_user("root", is_superadmin=True)
    await client.post(f"{API}/posts", json={"content": "hidden"}, headers=auth_headers(a))

    resp = await client.get(f"{API}/users/{a.id}/posts", headers=auth_headers(admin))

    assert resp.status_code == 200
    assert len(resp.json()) == 1
