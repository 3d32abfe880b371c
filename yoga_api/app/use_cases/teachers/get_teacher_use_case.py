from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Error, Result, Return
from .dtos import TeacherDto


class GetTeacherUseCase:
    """Use case for reading a single teacher"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, teacher_id: int) -> Result[TeacherDto]:
        async with self.uow:
            teacher = await self.uow.teachers.get_by_id(teacher_id)
            if teacher is None:
                return Return.err(Error("TEACHER_NOT_FOUND", "Teacher not found"))

            return Return.ok(TeacherDto.from_entity(teacher))
