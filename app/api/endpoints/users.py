from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db, store_operation
from app.schemas.course import EnrollmentWithCourse
from app.schemas.dashboard import ActivityItem, UserStats
from app.crud import course as crud_course
from app.core.exceptions import StoreErrorKind
from app.api.dependencies import get_current_user
from app.models.user import User
from app.services.dashboard_service import DashboardService

router = APIRouter()

@router.get("/enrollments", response_model=List[EnrollmentWithCourse])
def read_my_enrollments(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Enrollments of the current user, each with its course"""
    with store_operation(db, StoreErrorKind.READ):
        return crud_course.get_user_enrollments(db, user_id=current_user.id)

@router.get("/stats", response_model=UserStats)
def read_my_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Dashboard counters for the current user"""
    dashboard_service = DashboardService(db)
    with store_operation(db, StoreErrorKind.READ):
        stats = dashboard_service.get_stats(current_user.id)
    return UserStats(**stats)

@router.get("/activity", response_model=List[ActivityItem])
def read_my_activity(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Latest five events: courses started or completed, certificates earned"""
    dashboard_service = DashboardService(db)
    with store_operation(db, StoreErrorKind.READ):
        return dashboard_service.get_activity(current_user.id)
