"""Registration, login, logout and session handling."""

from datetime import datetime, timedelta

from app.config import settings
from app.core.security import create_session_cookie
from app.crud import crud_user, crud_user_session
from app.models import UserSession


def _register(client, username="carol", email="carol@imu.edu.tr", password="Sifre1234!"):
    return client.post(
        "/register",
        data={"username": username, "email": email, "password": password},
    )


def test_register_starts_session(client, db):
    response = _register(client)

    assert response.status_code == 303
    assert response.headers["location"] == "/"
    assert settings.SESSION_COOKIE_NAME in response.cookies

    profile = client.get("/profile")
    assert profile.status_code == 200
    assert profile.json()["username"] == "carol"
    assert profile.json()["is_admin"] is False


def test_register_normalizes_email(client, db):
    _register(client, email="  Carol@IMU.edu.tr ")

    assert crud_user.get_by_email(db, "carol@imu.edu.tr") is not None


def test_register_with_missing_field(client, db):
    response = _register(client, password="")

    assert response.status_code == 400
    assert response.json()["detail"] == "Tüm alanları doldurunuz"
    assert crud_user.count(db) == 0


def test_register_with_malformed_email(client, db):
    response = _register(client, email="not-an-email")

    assert response.status_code == 400
    assert response.json()["detail"] == "Geçerli bir email adresi giriniz"


def test_register_duplicate_email_or_username(client, alice, db):
    by_email = _register(client, username="yeni", email=alice.email)
    by_username = _register(client, username=alice.username, email="yeni@imu.edu.tr")

    for response in (by_email, by_username):
        assert response.status_code == 400
        assert response.json()["detail"] == "Bu email veya kullanıcı adı zaten kullanılıyor"

    assert crud_user.count(db) == 1


def test_login_with_wrong_password(client, alice):
    response = client.post("/login", data={"email": alice.email, "password": "yanlis"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Geçersiz email veya şifre"


def test_login_with_missing_fields(client):
    response = client.post("/login", data={"email": ""})

    assert response.status_code == 400
    assert response.json()["detail"] == "Email ve şifre gerekli"


def test_login_email_is_case_insensitive(client, alice):
    response = client.post("/login", data={"email": alice.email.upper(), "password": "Sifre1234!"})
    assert response.status_code == 303


def test_forms_render_current_user(alice_client, client):
    assert client.get("/login").json() == {"form": "login", "current_user": None}
    assert alice_client.get("/register").json()["current_user"]["username"] == "alice"


def test_profile_requires_session(client):
    response = client.get("/profile")

    assert response.status_code == 303
    assert response.headers["location"] == "/login"


def test_logout_destroys_session(alice_client, alice, db):
    assert db.query(UserSession).filter_by(user_id=alice.id).count() == 1

    response = alice_client.get("/logout")

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert db.query(UserSession).filter_by(user_id=alice.id).count() == 0
    assert alice_client.get("/profile").status_code == 303


def test_tampered_cookie_is_anonymous(client, alice):
    client.cookies.set(settings.SESSION_COOKIE_NAME, "not-a-jwt")

    assert client.get("/").json()["current_user"] is None


def test_expired_session_is_purged(client, alice, db):
    session = crud_user_session.create_session(db, user_id=alice.id)
    token = session.token
    session.expires_at = datetime.utcnow() - timedelta(minutes=1)
    db.commit()

    cookie = create_session_cookie(token, datetime.utcnow() + timedelta(days=1))
    client.cookies.set(settings.SESSION_COOKIE_NAME, cookie)

    assert client.get("/profile").status_code == 303
    db.expire_all()
    assert crud_user_session.get_active(db, token=token) is None
    assert db.query(UserSession).filter_by(token=token).count() == 0
