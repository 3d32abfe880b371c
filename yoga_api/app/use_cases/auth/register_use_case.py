import logging

from sqlalchemy.exc import IntegrityError

from yoga_api.api.utils.password import hash_password
from yoga_api.app.services.unit_of_work import UnitOfWork
from yoga_api.domain.entities import User
from yoga_api.libs.result import Error, Result, Return
from .dtos import MessageResponse, SignupCommand

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Reject the email if an account already uses it
    2. Hash password with bcrypt
    3. Create a non-admin User
    4. Commit; a unique-email violation at this point also means the
       email is taken
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[MessageResponse]:
        async with self.uow:
            if await self.uow.users.exists_by_email(command.email):
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Error: Email is already taken!")
                )

            user = User(
                email=command.email,
                first_name=command.first_name,
                last_name=command.last_name,
                password=hash_password(command.password),
                admin=False,
            )
            try:
                await self.uow.users.create(user)
                await self.uow.commit()
            except IntegrityError:
                # A concurrent registration claimed the email first
                logger.info(f"Registration lost unique email race: {command.email}")
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Error: Email is already taken!")
                )

            return Return.ok(MessageResponse(message="User registered successfully!"))
