"""
Lifecycle housekeeping for Practice and Perform interview sessions.

Sessions time out after ``SESSION_TIMEOUT_MINUTES`` of inactivity, where the
last activity is the auto-save stamp or, failing that, the start time. A
background task pauses sessions abandoned for ``SESSION_ABANDONED_HOURS``.
"""
import asyncio
import logging
import math
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from p3_academy.core.config import settings
from p3_academy.db.session import SessionLocal
from p3_academy.models.interview_session import InterviewSession

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes (e.g. from SQLite) as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionManagementService:
    def __init__(
        self,
        timeout_minutes: int = settings.SESSION_TIMEOUT_MINUTES,
        abandoned_hours: int = settings.SESSION_ABANDONED_HOURS,
        cleanup_interval_minutes: int = settings.SESSION_CLEANUP_INTERVAL_MINUTES,
    ):
        self.timeout = timedelta(minutes=timeout_minutes)
        self.abandoned_after = timedelta(hours=abandoned_hours)
        self.cleanup_interval = cleanup_interval_minutes * 60

    def last_activity(self, session: InterviewSession) -> Optional[datetime]:
        return as_utc(session.auto_saved_at or session.started_at)

    def is_session_active(self, session: InterviewSession) -> bool:
        # Completed sessions never time out
        if session.status == "completed":
            return True

        last_activity = self.last_activity(session)
        if last_activity is None:
            return False
        return utcnow() < last_activity + self.timeout

    def get_session_status(self, session: InterviewSession) -> Dict[str, Any]:
        last_activity = self.last_activity(session)
        if session.status == "completed":
            return {"status": "completed", "time_remaining": None, "last_activity": last_activity, "message": "Session completed"}
        if last_activity is None:
            return {"status": "expired", "time_remaining": None, "last_activity": None, "message": "Session data unavailable"}

        timeout_at = last_activity + self.timeout
        now = utcnow()
        if now > timeout_at:
            return {
                "status": "timeout",
                "time_remaining": None,
                "last_activity": last_activity,
                "message": "Session timed out due to inactivity",
            }

        remaining = math.ceil((timeout_at - now).total_seconds() / 60)
        return {
            "status": "active",
            "time_remaining": remaining,
            "last_activity": last_activity,
            "message": f"Session active - {remaining} minutes remaining",
        }

    def extend_session(self, db: Session, session: InterviewSession) -> InterviewSession:
        session.auto_saved_at = utcnow()
        db.commit()
        db.refresh(session)
        logger.info(f"Extended session {session.id} for user {session.user_id}")
        return session

    def recover_session(self, db: Session, session: InterviewSession) -> Dict[str, Any]:
        if session.status == "completed":
            return {"can_recover": False, "session": session, "message": "Session already completed"}

        status = self.get_session_status(session)
        if status["status"] in ("timeout", "expired"):
            return {"can_recover": False, "session": session, "message": "Session has expired and cannot be recovered"}

        self.extend_session(db, session)
        return {
            "can_recover": True,
            "session": session,
            "message": f"Session recovered - {status['time_remaining']} minutes remaining",
        }

    def get_user_session_stats(self, db: Session, user_id: int) -> Dict[str, Any]:
        sessions = db.query(InterviewSession).filter(InterviewSession.user_id == user_id).all()
        active = completed = abandoned = 0
        durations = []

        for session in sessions:
            if session.status == "completed":
                completed += 1
                if session.duration:
                    durations.append(session.duration)
            elif self.is_session_active(session):
                active += 1
            else:
                abandoned += 1

        return {
            "total_sessions": len(sessions),
            "active_sessions": active,
            "completed_sessions": completed,
            "abandoned_sessions": abandoned,
            # minutes
            "average_session_duration": round(sum(durations) / len(durations) / 60, 1) if durations else 0,
        }

    def cleanup_abandoned_sessions(self, db: Session) -> int:
        """Pause unfinished sessions with no activity since the abandonment cutoff."""
        cutoff = utcnow() - self.abandoned_after
        candidates = (
            db.query(InterviewSession)
            .filter(InterviewSession.status.in_(["setup", "in_progress"]))
            .all()
        )
        stale = [s for s in candidates if (self.last_activity(s) or cutoff) <= cutoff]
        for session in stale:
            session.status = "paused"
        db.commit()
        logger.info(f"Cleaned up {len(stale)} abandoned sessions")
        return len(stale)

    def archive_old_completed_sessions(self, db: Session, older_than_days: int = settings.SESSION_ARCHIVE_DAYS) -> int:
        cutoff = utcnow() - timedelta(days=older_than_days)
        candidates = (
            db.query(InterviewSession)
            .filter(InterviewSession.status == "completed", InterviewSession.archived_at.is_(None))
            .all()
        )
        old = [s for s in candidates if s.completed_at is not None and as_utc(s.completed_at) < cutoff]
        now = utcnow()
        for session in old:
            session.archived_at = now
        db.commit()
        logger.info(f"Archived {len(old)} old completed sessions")
        return len(old)

    def _run_cleanup_once(self) -> None:
        db = SessionLocal()
        try:
            self.cleanup_abandoned_sessions(db)
            self.archive_old_completed_sessions(db)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error in session cleanup: {str(e)}")
        finally:
            db.close()

    async def run_periodic_cleanup(self) -> None:
        logger.info(f"Session cleanup task started (every {self.cleanup_interval // 60} minutes)")
        while True:
            await asyncio.sleep(self.cleanup_interval)
            await asyncio.to_thread(self._run_cleanup_once)


session_manager = SessionManagementService()
