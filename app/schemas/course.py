from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class CourseBase(BaseModel):
    title: str
    description: Optional[str] = None
    category: Optional[str] = None
    level: Optional[str] = None

class CourseCreate(CourseBase):
    pass

class CourseInDB(CourseBase):
    id: int
    instructor_id: int
    created_at: datetime
    
    class Config:
        from_attributes = True

class CourseResponse(CourseInDB):
    pass

class InstructorName(BaseModel):
    name: str
    
    class Config:
        from_attributes = True

class CourseWithInstructor(CourseInDB):
    instructor: Optional[InstructorName] = None

class EnrollmentResponse(BaseModel):
    id: int
    user_id: int
    course_id: int
    progress: int
    created_at: datetime
    
    class Config:
        from_attributes = True

class EnrollmentWithCourse(EnrollmentResponse):
    course: CourseResponse

class ProgressUpdate(BaseModel):
    progress: int
