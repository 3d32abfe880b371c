"""
Teacher Use Cases

Read-only access to teachers.
"""

from .list_teachers_use_case import ListTeachersUseCase
from .get_teacher_use_case import GetTeacherUseCase
from .dtos import TeacherDto

__all__ = [
    "ListTeachersUseCase",
    "GetTeacherUseCase",
    "TeacherDto",
]
