from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload
from app.core.exceptions import AlreadyEnrolledError
from app.models.course import Course, Enrollment
from app.schemas.course import CourseCreate

def get_courses(db: Session):
    return db.query(Course).options(joinedload(Course.instructor)).order_by(Course.id).all()

def create_course(db: Session, course: CourseCreate, instructor_id: int):
    db_course = Course(**course.model_dump(), instructor_id=instructor_id)
    db.add(db_course)
    db.commit()
    db.refresh(db_course)
    return db_course

def get_enrollment(db: Session, user_id: int, course_id: int):
    return db.query(Enrollment).filter(
        Enrollment.user_id == user_id,
        Enrollment.course_id == course_id
    ).first()

def enroll_user(db: Session, user_id: int, course_id: int):
    enrollment = Enrollment(user_id=user_id, course_id=course_id, progress=0)
    db.add(enrollment)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # Unique (user_id, course_id) violated, or the course does not exist
        if get_enrollment(db, user_id=user_id, course_id=course_id):
            raise AlreadyEnrolledError()
        raise
    db.refresh(enrollment)
    return enrollment

def get_user_enrollments(db: Session, user_id: int):
    return db.query(Enrollment).filter(
        Enrollment.user_id == user_id
    ).options(joinedload(Enrollment.course)).order_by(Enrollment.id).all()

def update_progress(db: Session, enrollment_id: int, user_id: int, progress: int):
    # Owner is part of the filter, so someone else's enrollment is simply not found
    enrollment = db.query(Enrollment).filter(
        Enrollment.id == enrollment_id,
        Enrollment.user_id == user_id
    ).first()
    if not enrollment:
        return None
    
    enrollment.progress = progress
    db.commit()
    db.refresh(enrollment)
    return enrollment
