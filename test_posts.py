"""Post lifecycle over HTTP: create, list, edit, delete, images."""

from conftest import JPEG_BYTES, PNG_BYTES
from app.crud import crud_comment, crud_post, crud_post_like
from app.utils.file_handler import resolve_upload_path


def _stored_files(upload_dir):
    return sorted(p.name for p in upload_dir.iterdir())


def test_create_post_redirects_to_category(alice_client, db):
    response = alice_client.post(
        "/posts",
        data={"title": "Yeni laptop", "body": "Önerisi olan?", "category": "Teknoloji"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/category/Teknoloji"

    post = crud_post.get_all(db)[0]
    assert post.title == "Yeni laptop"
    assert post.image_path is None


def test_create_post_quotes_category_in_redirect(alice_client):
    response = alice_client.post(
        "/posts",
        data={"title": "Maç", "body": "Bu akşam", "category": "Spor Haberleri"},
    )
    assert response.headers["location"] == "/category/Spor%20Haberleri"


def test_create_post_requires_login(client, db):
    response = client.post(
        "/posts",
        data={"title": "x", "body": "y", "category": "Genel"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert crud_post.count(db) == 0


def test_create_post_missing_fields(alice_client, db):
    response = alice_client.post("/posts", data={"title": "  ", "body": "y", "category": "Genel"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Başlık, içerik ve kategori zorunludur"
    assert crud_post.count(db) == 0


def test_create_post_with_image(alice_client, create_post, upload_dir):
    post = create_post(alice_client, image=("kedi.png", PNG_BYTES, "image/png"))

    assert post.image_path.startswith("/uploads/image-")
    assert post.image_path.endswith(".png")
    assert resolve_upload_path(post.image_path).is_file()
    assert len(_stored_files(upload_dir)) == 1


def test_rejected_upload_leaves_no_file(alice_client, db, upload_dir):
    response = alice_client.post(
        "/posts",
        data={"title": "Belge", "body": "PDF", "category": "Genel"},
        files={"image": ("notlar.pdf", b"%PDF-1.4", "application/pdf")},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Sadece resim dosyaları kabul edilir!"
    assert crud_post.count(db) == 0
    assert _stored_files(upload_dir) == []


def test_oversized_upload_is_rejected(alice_client, db, upload_dir, monkeypatch):
    from app.config import settings

    monkeypatch.setattr(settings, "MAX_IMAGE_SIZE", 32)
    response = alice_client.post(
        "/posts",
        data={"title": "Büyük", "body": "Resim", "category": "Genel"},
        files={"image": ("buyuk.png", PNG_BYTES, "image/png")},
    )

    assert response.status_code == 400
    assert crud_post.count(db) == 0
    assert _stored_files(upload_dir) == []


def test_category_lists_newest_first(alice_client, bob_client, create_post):
    first = create_post(alice_client, title="İlk")
    second = create_post(bob_client, title="İkinci")
    create_post(alice_client, title="Başka", category="Spor")

    response = alice_client.get("/category/Teknoloji")
    assert response.status_code == 200

    page = response.json()
    assert page["icon"] == "💻"
    assert [p["id"] for p in page["posts"]] == [second.id, first.id]
    assert page["current_user"]["username"] == "alice"


def test_unknown_category_uses_fallback_info(client, db):
    page = client.get("/category/Bilinmeyen").json()

    assert page["posts"] == []
    assert page["icon"] == "📁"
    assert page["description"] == "Bu kategori hakkında"


def test_home_counts_posts_per_category(alice_client, client, create_post):
    create_post(alice_client, category="Teknoloji")
    create_post(alice_client, category="Teknoloji")
    create_post(alice_client, category="Kampüs Kedileri")

    home = client.get("/").json()
    counts = {c["name"]: c["post_count"] for c in home["categories"]}

    assert counts["Teknoloji"] == 2
    assert counts["Genel"] == 0
    assert counts["Kampüs Kedileri"] == 1
    assert home["current_user"] is None


def test_new_post_form_preselects_category(alice_client):
    response = alice_client.get("/posts/new", params={"category": "Müzik"})

    assert response.status_code == 200
    assert response.json()["selected_category"] == "Müzik"


def test_post_detail_and_404(client, alice_client, create_post):
    post = create_post(alice_client)

    detail = client.get(f"/posts/{post.id}").json()
    assert detail["title"] == "Başlık"
    assert detail["author"]["username"] == "alice"
    assert detail["comments"] == []

    response = client.get("/posts/9999")
    assert response.status_code == 404
    assert response.json()["detail"] == "Post bulunamadı"


def test_owner_edits_post(alice_client, create_post, db):
    post = create_post(alice_client)

    response = alice_client.put(
        f"/posts/{post.id}",
        data={"title": "Güncel", "body": "Yeni içerik", "category": "Genel"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == f"/posts/{post.id}"

    db.expire_all()
    updated = crud_post.get_by_id(db, post_id=post.id)
    assert updated.title == "Güncel"
    assert updated.category == "Genel"
    assert updated.author_id == post.author_id


def test_edit_through_method_override(alice_client, create_post, db):
    post = create_post(alice_client)

    response = alice_client.post(
        f"/posts/{post.id}/edit?_method=PUT",
        data={"title": "Form", "body": "HTML formu", "category": "Genel"},
    )

    assert response.status_code == 303
    db.expire_all()
    assert crud_post.get_by_id(db, post_id=post.id).title == "Form"


def test_edit_form_is_owner_only(alice_client, bob_client, create_post):
    post = create_post(alice_client)

    assert alice_client.get(f"/posts/{post.id}/edit").status_code == 200
    assert bob_client.get(f"/posts/{post.id}/edit").status_code == 403


def test_non_owner_cannot_edit(alice_client, bob_client, admin_client, create_post, db):
    post = create_post(alice_client)
    form = {"title": "Hack", "body": "x", "category": "Genel"}

    assert bob_client.put(f"/posts/{post.id}", data=form).status_code == 403
    assert admin_client.put(f"/posts/{post.id}", data=form).status_code == 403

    db.expire_all()
    assert crud_post.get_by_id(db, post_id=post.id).title == "Başlık"


def test_replacing_image_removes_old_file(alice_client, create_post, db, upload_dir):
    post = create_post(alice_client, image=("eski.png", PNG_BYTES, "image/png"))
    old_path = resolve_upload_path(post.image_path)

    response = alice_client.put(
        f"/posts/{post.id}",
        data={"title": "Başlık", "body": "İçerik", "category": "Teknoloji"},
        files={"image": ("yeni.jpg", JPEG_BYTES, "image/jpeg")},
    )
    assert response.status_code == 303

    db.expire_all()
    updated = crud_post.get_by_id(db, post_id=post.id)
    assert updated.image_path.endswith(".jpg")
    assert not old_path.exists()
    assert resolve_upload_path(updated.image_path).is_file()
    assert len(_stored_files(upload_dir)) == 1


def test_edit_without_image_keeps_existing(alice_client, create_post, db):
    post = create_post(alice_client, image=("kedi.png", PNG_BYTES, "image/png"))

    alice_client.put(
        f"/posts/{post.id}",
        data={"title": "Sadece metin", "body": "İçerik", "category": "Teknoloji"},
    )

    db.expire_all()
    updated = crud_post.get_by_id(db, post_id=post.id)
    assert updated.image_path == post.image_path
    assert resolve_upload_path(updated.image_path).is_file()


def test_owner_deletes_post_with_image_comments_and_likes(alice_client, bob_client, create_post, db, upload_dir):
    post = create_post(alice_client, image=("kedi.png", PNG_BYTES, "image/png"))
    post_id = post.id
    bob_client.post(f"/posts/{post_id}/comments", data={"body": "Güzel"})
    bob_client.post(f"/posts/{post_id}/like")

    response = alice_client.delete(f"/posts/{post_id}")

    assert response.status_code == 303
    assert response.headers["location"] == "/"
    assert alice_client.get(f"/posts/{post_id}").status_code == 404
    assert _stored_files(upload_dir) == []

    db.expire_all()
    assert crud_comment.get_by_post(db, post_id=post_id) == []
    assert crud_post_like.count_for(db, target_id=post_id) == 0


def test_delete_through_method_override(alice_client, create_post):
    post = create_post(alice_client)

    response = alice_client.post(f"/posts/{post.id}?_method=DELETE")

    assert response.status_code == 303
    assert alice_client.get(f"/posts/{post.id}").status_code == 404


def test_delete_permissions(client, alice_client, bob_client, admin_client, create_post):
    post = create_post(alice_client)

    anonymous = client.delete(f"/posts/{post.id}")
    assert anonymous.status_code == 303
    assert anonymous.headers["location"] == "/login"

    assert bob_client.delete(f"/posts/{post.id}").status_code == 403
    assert client.get(f"/posts/{post.id}").status_code == 200

    assert admin_client.delete(f"/posts/{post.id}").status_code == 303
    assert client.get(f"/posts/{post.id}").status_code == 404


def test_forum_scenario(alice_client, bob_client, admin_client, create_post, upload_dir):
    post = create_post(
        alice_client, title="Yeni GPU", category="Teknoloji",
        image=("gpu.png", PNG_BYTES, "image/png"),
    )

    listing = bob_client.get("/category/Teknoloji").json()
    assert listing["posts"][0]["id"] == post.id

    response = bob_client.put(
        f"/posts/{post.id}",
        data={"title": "Değişti", "body": "x", "category": "Teknoloji"},
    )
    assert response.status_code == 403

    response = admin_client.delete(f"/admin/posts/{post.id}")
    assert response.status_code == 303
    assert response.headers["location"] == "/admin"

    panel = admin_client.get("/admin").json()
    assert post.id not in [p["id"] for p in panel["posts"]]
    assert _stored_files(upload_dir) == []


def test_category_page_reports_total_beyond_limit(alice_client, create_post):
    for n in range(3):
        create_post(alice_client, title=f"Gönderi {n}")

    page = alice_client.get("/category/Teknoloji", params={"limit": 2}).json()
    assert len(page["posts"]) == 2
    assert page["total"] == 3

    rest = alice_client.get("/category/Teknoloji", params={"skip": 2, "limit": 2}).json()
    assert len(rest["posts"]) == 1
    assert rest["total"] == 3
