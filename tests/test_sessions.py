from datetime import timedelta

from portfolio_cms.core import sessions
from portfolio_cms.core.security import get_password_hash
from portfolio_cms.models.session import UserSession
from portfolio_cms.models.user import User


def make_user(db, username="alice", is_admin=False):
    user = User(username=username, email=f"{username}@x.com", password=get_password_hash("pw123456"), is_admin=is_admin)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def test_session_round_trip(db):
    user = make_user(db)
    token = sessions.create_session(db, user)

    restored = sessions.restore_user(db, token)
    assert restored is not None
    assert restored.id == user.id


def test_missing_or_tampered_token_is_anonymous(db):
    user = make_user(db)
    token = sessions.create_session(db, user)

    assert sessions.restore_user(db, None) is None
    assert sessions.restore_user(db, "") is None
    assert sessions.restore_user(db, token.rsplit(".", 1)[0] + ".forged") is None
    assert sessions.restore_user(db, "not-a-token") is None


def test_expired_session_is_anonymous_and_removed(db):
    user = make_user(db)
    token = sessions.create_session(db, user)
    row = db.query(UserSession).one()
    row.expires_at = sessions.utcnow() - timedelta(minutes=1)
    db.commit()

    assert sessions.restore_user(db, token) is None
    assert db.query(UserSession).count() == 0


def test_destroy_session_invalidates_token(db):
    user = make_user(db)
    token = sessions.create_session(db, user)
    sessions.destroy_session(db, token)

    assert sessions.restore_user(db, token) is None


def test_sessions_are_independent(db):
    user = make_user(db)
    laptop = sessions.create_session(db, user)
    phone = sessions.create_session(db, user)
    sessions.destroy_session(db, laptop)

    assert sessions.restore_user(db, laptop) is None
    assert sessions.restore_user(db, phone).id == user.id


def test_deleted_user_is_anonymous(db):
    user = make_user(db)
    token = sessions.create_session(db, user)
    db.delete(user)
    db.commit()

    assert sessions.restore_user(db, token) is None


def test_prune_removes_only_expired_rows(db):
    user = make_user(db)
    sessions.create_session(db, user)
    sessions.create_session(db, user)
    stale = db.query(UserSession).first()
    stale.expires_at = sessions.utcnow() - timedelta(hours=1)
    db.commit()

    assert sessions.prune_expired_sessions(db) == 1
    assert db.query(UserSession).count() == 1
