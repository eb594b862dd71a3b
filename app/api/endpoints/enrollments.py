import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db, store_operation
from app.schemas.course import EnrollmentResponse, ProgressUpdate
from app.crud import course as crud_course
from app.core.exceptions import EnrollmentNotFoundException, StoreError, StoreErrorKind
from app.api.dependencies import get_current_user
from app.models.course import INTEGER_MAX, INTEGER_MIN
from app.models.user import User

logger = logging.getLogger(__name__)

router = APIRouter()

@router.put("/{enrollment_id}/progress", response_model=EnrollmentResponse)
def update_enrollment_progress(
    enrollment_id: int,
    progress_update: ProgressUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Set progress on one of the current user's enrollments"""
    # Not clamped to 0-100, only kept within what the column can hold
    if not INTEGER_MIN <= progress_update.progress <= INTEGER_MAX:
        logger.info("Progress %s does not fit the enrollments column", progress_update.progress)
        raise StoreError(StoreErrorKind.WRITE)
    
    with store_operation(db, StoreErrorKind.WRITE):
        enrollment = crud_course.update_progress(
            db,
            enrollment_id=enrollment_id,
            user_id=current_user.id,
            progress=progress_update.progress
        )
    
    if not enrollment:
        raise EnrollmentNotFoundException(enrollment_id)
    
    return enrollment
