from .user import User, UserRole
from .course import Course, Enrollment
from .certificate import Certificate
from .discussion import Discussion
