from .user import (
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
    AuthResponse
)

from .course import (
    CourseBase,
    CourseCreate,
    CourseInDB,
    CourseResponse,
    CourseWithInstructor,
    InstructorName,
    EnrollmentResponse,
    EnrollmentWithCourse,
    ProgressUpdate
)

from .dashboard import (
    ActivityItem,
    UserStats
)
