from .user import (
    get_user,
    get_user_by_email,
    authenticate_user,
    create_user
)

from .course import (
    get_courses,
    create_course,
    get_enrollment,
    enroll_user,
    get_user_enrollments,
    update_progress
)
