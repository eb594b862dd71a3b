import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db, store_operation
from app.schemas.course import CourseCreate, CourseResponse, CourseWithInstructor, EnrollmentResponse
from app.crud import course as crud_course
from app.core.exceptions import StoreErrorKind
from app.api.dependencies import get_current_user, require_role
from app.models.user import User, UserRole

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[CourseWithInstructor])
def read_courses(db: Session = Depends(get_db)):
    """All courses with their instructor's name"""
    with store_operation(db, StoreErrorKind.READ):
        return crud_course.get_courses(db)

@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    course: CourseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_role(UserRole.INSTRUCTOR))
):
    """Create a course (instructors only)"""
    with store_operation(db, StoreErrorKind.WRITE):
        db_course = crud_course.create_course(db=db, course=course, instructor_id=current_user.id)
    
    logger.info("Instructor %s created course %s", current_user.id, db_course.id)
    return db_course

@router.post("/{course_id}/enroll", response_model=EnrollmentResponse, status_code=status.HTTP_201_CREATED)
def enroll_in_course(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Enroll the current user in a course"""
    with store_operation(db, StoreErrorKind.WRITE):
        enrollment = crud_course.enroll_user(db, user_id=current_user.id, course_id=course_id)
    
    logger.info("User %s enrolled in course %s", current_user.id, course_id)
    return enrollment
