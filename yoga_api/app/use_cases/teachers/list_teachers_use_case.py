from typing import List

from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.libs.result import Result, Return
from .dtos import TeacherDto


class ListTeachersUseCase:
    """Use case for listing every teacher"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[TeacherDto]]:
        async with self.uow:
            teachers = await self.uow.teachers.list_all()
            return Return.ok([TeacherDto.from_entity(t) for t in teachers])
