import math
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from app.models.certificate import Certificate
from app.models.course import Enrollment
from app.models.discussion import Discussion

ACTIVITY_LIMIT = 5
COMPLETED_PROGRESS = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def _course_title(row) -> str:
    return row.course.title if row.course is not None else "a course"


def build_activity_feed(enrollments, certificates, limit: int = ACTIVITY_LIMIT) -> List[Dict]:
    """Merge enrollments and certificates into one feed, newest first."""
    items = []

    for enrollment in enrollments:
        title = _course_title(enrollment)
        if enrollment.progress == COMPLETED_PROGRESS:
            activity_type = "course_completed"
            message = f"Completed {title}"
        else:
            activity_type = "course_started"
            message = f"Started {title}"
        items.append({
            "type": activity_type,
            "message": message,
            "timestamp": enrollment.created_at,
            "course_id": enrollment.course_id,
        })

    for certificate in certificates:
        items.append({
            "type": "certificate_earned",
            "message": f"Earned a certificate for {_course_title(certificate)}",
            "timestamp": certificate.issued_at,
            "course_id": certificate.course_id,
        })

    items.sort(key=lambda item: item["timestamp"], reverse=True)
    return items[:limit]


class DashboardService:
    def __init__(self, db: Session):
        self.db = db

    # === Stats ===
    def count_active_courses(self, user_id: int) -> int:
        return self.db.query(func.count(Enrollment.id)).filter(
            Enrollment.user_id == user_id,
            Enrollment.progress < COMPLETED_PROGRESS
        ).scalar() or 0

    def average_progress(self, user_id: int) -> int:
        """Mean progress over all of the user's enrollments, 0 when there are none."""
        average: Optional[float] = self.db.query(func.avg(Enrollment.progress)).filter(
            Enrollment.user_id == user_id
        ).scalar()
        if average is None:
            return 0
        return round_half_up(float(average))

    def count_certificates(self, user_id: int) -> int:
        return self.db.query(func.count(Certificate.id)).filter(
            Certificate.user_id == user_id
        ).scalar() or 0

    def count_discussions(self, user_id: int) -> int:
        return self.db.query(func.count(Discussion.id)).filter(
            Discussion.user_id == user_id
        ).scalar() or 0

    def get_stats(self, user_id: int) -> Dict[str, int]:
        # Sequential queries; the first failure aborts the whole result
        return {
            "active_courses": self.count_active_courses(user_id),
            "average_progress": self.average_progress(user_id),
            "certificates": self.count_certificates(user_id),
            "discussions": self.count_discussions(user_id),
        }

    # === Activity ===
    def recent_enrollments(self, user_id: int, limit: int = ACTIVITY_LIMIT) -> List[Enrollment]:
        return self.db.query(Enrollment).options(
            joinedload(Enrollment.course)
        ).filter(
            Enrollment.user_id == user_id
        ).order_by(Enrollment.created_at.desc()).limit(limit).all()

    def recent_certificates(self, user_id: int, limit: int = ACTIVITY_LIMIT) -> List[Certificate]:
        return self.db.query(Certificate).options(
            joinedload(Certificate.course)
        ).filter(
            Certificate.user_id == user_id
        ).order_by(Certificate.issued_at.desc()).limit(limit).all()

    def get_activity(self, user_id: int) -> List[Dict]:
        enrollments = self.recent_enrollments(user_id)
        certificates = self.recent_certificates(user_id)
        return build_activity_feed(enrollments, certificates)
