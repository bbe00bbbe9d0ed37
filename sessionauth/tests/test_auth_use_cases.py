from __future__ import annotations

import pytest

from sessionauth.application.services.password_hashing import BcryptPasswordHasher
from sessionauth.application.use_cases.users.login_user import LoginUserUseCase
from sessionauth.application.use_cases.users.register_user import RegisterUserUseCase
from sessionauth.domain.users.entities import PublicUser, UserRecord
from sessionauth.domain.users.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from sessionauth.domain.users.repositories import PasswordHasher, UserRepository
from sessionauth.shared.errors.base import ValidationError


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}

    def find_by_username(self, username: str) -> UserRecord | None:
        return self._users.get(username)

    def insert(self, record: UserRecord) -> UserRecord:
        if record.username in self._users:
            raise UserAlreadyExistsError()
        self._users[record.username] = record
        return record

    def count(self) -> int:
        return len(self._users)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def register(users: InMemoryUserRepository) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, password_hasher=DeterministicHasher())


@pytest.fixture()
def login(users: InMemoryUserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, password_hasher=DeterministicHasher())


def test_register_user_success(
    register: RegisterUserUseCase, users: InMemoryUserRepository
) -> None:
    user = register.execute("alice", "secret1")

    assert isinstance(user, PublicUser)
    assert user.username == "alice"
    assert user.id
    stored = users.find_by_username("alice")
    assert stored is not None
    assert stored.password_hash == "hashed:secret1"


def test_register_assigns_distinct_ids(register: RegisterUserUseCase) -> None:
    assert register.execute("alice", "secret1").id != register.execute("bobby", "secret1").id


def test_register_user_duplicate_raises(register: RegisterUserUseCase) -> None:
    register.execute("alice", "secret1")

    with pytest.raises(UserAlreadyExistsError):
        register.execute("alice", "another1")


@pytest.mark.parametrize(
    ("username", "password", "field"),
    [("al", "secret1", "username"), ("alice", "short", "password")],
)
def test_register_validates_input(
    register: RegisterUserUseCase,
    users: InMemoryUserRepository,
    username: str,
    password: str,
    field: str,
) -> None:
    with pytest.raises(ValidationError) as info:
        register.execute(username, password)

    assert info.value.field == field
    assert users.count() == 0


def test_login_returns_same_identity_as_register(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    registered = register.execute("alice", "secret1")

    assert login.execute("alice", "secret1") == registered


def test_login_wrong_password_raises(
    register: RegisterUserUseCase, login: LoginUserUseCase
) -> None:
    register.execute("alice", "secret1")

    with pytest.raises(InvalidCredentialsError) as info:
        login.execute("alice", "wrong-password")
    assert info.value.status == 401


def test_login_unknown_user_raises(login: LoginUserUseCase) -> None:
    with pytest.raises(UserNotFoundError) as info:
        login.execute("nobody", "secret1")
    assert info.value.status == 404


def test_login_validates_input(login: LoginUserUseCase) -> None:
    with pytest.raises(ValidationError):
        login.execute("alice", "123")


def test_bcrypt_hasher_salts_and_verifies() -> None:
    hasher = BcryptPasswordHasher(rounds=4)

    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert "secret1" not in first
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)
    assert not hasher.verify("secret2", first)


def test_bcrypt_hasher_uses_cost_factor_ten_by_default() -> None:
    assert BcryptPasswordHasher().hash("secret1").startswith("$2b$10$")


def test_bcrypt_hasher_rejects_malformed_hash() -> None:
    hasher = BcryptPasswordHasher(rounds=4)

    assert hasher.verify("secret1", "not-a-bcrypt-hash") is False
    assert hasher.verify("secret1", "") is False


def test_bcrypt_hasher_accepts_long_passwords() -> None:
    hasher = BcryptPasswordHasher(rounds=4)
    password = "x" * 100

    assert hasher.verify(password, hasher.hash(password))
