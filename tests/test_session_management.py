from datetime import timedelta

import pytest

from p3_academy.models.interview_session import InterviewSession
from p3_academy.services.session_management import SessionManagementService, utcnow


@pytest.fixture()
def manager():
    return SessionManagementService(timeout_minutes=30, abandoned_hours=24, cleanup_interval_minutes=15)


def _session(db, user, status="in_progress", **fields):
    session = InterviewSession(user_id=user.id, module="practice", status=status, **fields)
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def test_active_session_reports_minutes_remaining(db, user, manager):
    session = _session(db, user, started_at=utcnow() - timedelta(minutes=10))
    status = manager.get_session_status(session)

    assert status["status"] == "active"
    assert 19 <= status["time_remaining"] <= 20
    assert manager.is_session_active(session) is True


def test_auto_save_counts_as_activity(db, user, manager):
    session = _session(
        db, user,
        started_at=utcnow() - timedelta(hours=3),
        auto_saved_at=utcnow() - timedelta(minutes=5),
    )
    assert manager.get_session_status(session)["status"] == "active"


def test_idle_session_times_out(db, user, manager):
    session = _session(db, user, started_at=utcnow() - timedelta(minutes=45))

    assert manager.get_session_status(session)["status"] == "timeout"
    assert manager.is_session_active(session) is False

    recovery = manager.recover_session(db, session)
    assert recovery["can_recover"] is False


def test_completed_session_never_times_out(db, user, manager):
    session = _session(db, user, status="completed", started_at=utcnow() - timedelta(days=3))

    assert manager.is_session_active(session) is True
    assert manager.get_session_status(session)["status"] == "completed"
    assert manager.recover_session(db, session)["can_recover"] is False


def test_recover_extends_active_session(db, user, manager):
    session = _session(db, user, started_at=utcnow() - timedelta(minutes=20))
    recovery = manager.recover_session(db, session)

    assert recovery["can_recover"] is True
    assert session.auto_saved_at is not None
    assert manager.get_session_status(session)["time_remaining"] >= 29


def test_cleanup_pauses_abandoned_sessions(db, user, manager):
    stale = _session(db, user, started_at=utcnow() - timedelta(days=2))
    fresh = _session(db, user, started_at=utcnow() - timedelta(hours=1))
    done = _session(db, user, status="completed", started_at=utcnow() - timedelta(days=5))

    assert manager.cleanup_abandoned_sessions(db) == 1

    db.refresh(stale)
    db.refresh(fresh)
    db.refresh(done)
    assert stale.status == "paused"
    assert fresh.status == "in_progress"
    assert done.status == "completed"


def test_archive_old_completed_sessions(db, user, manager):
    old = _session(db, user, status="completed", completed_at=utcnow() - timedelta(days=120))
    recent = _session(db, user, status="completed", completed_at=utcnow() - timedelta(days=10))

    assert manager.archive_old_completed_sessions(db, older_than_days=90) == 1

    db.refresh(old)
    db.refresh(recent)
    assert old.archived_at is not None
    assert recent.archived_at is None


def test_user_session_stats(db, user, manager):
    _session(db, user, status="completed", duration=600)
    _session(db, user, status="completed", duration=1200)
    _session(db, user, started_at=utcnow() - timedelta(minutes=5))
    _session(db, user, started_at=utcnow() - timedelta(days=1))

    stats = manager.get_user_session_stats(db, user.id)
    assert stats == {
        "total_sessions": 4,
        "active_sessions": 1,
        "completed_sessions": 2,
        "abandoned_sessions": 1,
        "average_session_duration": 15.0,
    }
