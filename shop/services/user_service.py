from sqlalchemy.orm import Session

from shop.data.models.user import UserModel
from shop.domain.hooks import clean_email
from shop.domain.schemas import LoginIn, UserCreate, UserRead
from shop.repos.user_repo import UserRepo
from shop.utils.logging import get_logger
from shop.utils.security import hash_password, verify_password

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def register(self, payload: UserCreate) -> UserRead:
        email = clean_email(payload.email)
        if self.repo.get_by_email(email):
            raise ValueError("User already exists")

        user = UserModel(
            email=email,
            username=payload.username,
            name=payload.name,
            password=hash_password(payload.password),
        )
        created = self.repo.create_user(user)
        logger.info(f"User {created.id} registered")
        return UserRead.model_validate(created)

    def authenticate(self, payload: LoginIn) -> UserRead:
        """Checks credentials only, issuing a session is left to the identity provider."""
        user = self.repo.get_by_email(clean_email(payload.email))
        # unknown email, password-less (OAuth) account and wrong password look the same
        if not user or not verify_password(payload.password, user.password):
            raise PermissionError("Invalid email or password")
        return UserRead.model_validate(user)
