import uuid

import pytest

from bookshelf.user import User, UserId, Username, UserRepository, UserRepositoryOnMemory


def make_user(name):
    return User(id=UserId(uuid.uuid4()), name=Username(name))


def test_username_keeps_value():
    assert Username("alice").value == "alice"


def test_user_id_keeps_value():
    raw = uuid.uuid4()
    assert UserId(raw).value == raw


def test_empty_repository():
    assert UserRepositoryOnMemory().get_users() == []


def test_get_users_returns_copy():
    users = [make_user("alice"), make_user("bob")]
    repo = UserRepositoryOnMemory(users)
    listed = repo.get_users()
    listed.clear()
    assert repo.get_users() == users


def test_get_user_found():
    alice, bob = make_user("alice"), make_user("bob")
    repo = UserRepositoryOnMemory([alice, bob])
    assert repo.get_user(bob.id) == bob


def test_get_user_missing():
    repo = UserRepositoryOnMemory([make_user("alice")])
    with pytest.raises(LookupError):
        repo.get_user(UserId(uuid.uuid4()))


def test_user_repository_is_abstract():
    with pytest.raises(TypeError):
        UserRepository()