from pydantic import BaseModel, Field
from typing import Literal
from datetime import datetime

ActivityType = Literal["course_started", "course_completed", "certificate_earned"]

class UserStats(BaseModel):
    active_courses: int = Field(alias="activeCourses")
    average_progress: int = Field(alias="averageProgress")
    certificates: int
    discussions: int
    
    class Config:
        populate_by_name = True

class ActivityItem(BaseModel):
    type: ActivityType
    message: str
    timestamp: datetime
    course_id: int
