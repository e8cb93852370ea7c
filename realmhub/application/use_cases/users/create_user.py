"""Use case for registering users."""

from sqlalchemy.orm import Session

from realmhub.domain.entities import User
from realmhub.infrastructure.repositories import UserRepository
from realmhub.infrastructure.security import get_password_hash


def create_user(
    session: Session,
    *,
    username: str,
    email: str,
    password: str,
    bio: str | None = None,
) -> User:
    """Create a new user ensuring unique usernames and email addresses."""

    repository = UserRepository(session)
    if repository.is_taken(username=username, email=email):
        msg = "El nombre de usuario o el correo electrónico ya está registrado"
        raise ValueError(msg)

    user = User(
        id=None,
        username=username,
        email=email,
        password=get_password_hash(password),
        bio=bio,
        is_active=True,
        created_at=None,
    )
    return repository.create(user)
