"""
Name: Task Access Policy Tests

Responsibilities:
  - Validate the owner/admin decision matrix
  - Ensure listing filters follow the same rule
"""

import pytest

from taskmanager.domain.entities import Task
from taskmanager.domain.task_policy import (
    Caller,
    can_access,
    can_access_task,
    filter_visible,
)
from taskmanager.identity.users import UserRole

pytestmark = pytest.mark.unit


def _task(task_id: int, owner_id: int) -> Task:
    return Task(id=task_id, title=f"Task {task_id}", user_id=owner_id)


@pytest.mark.parametrize(
    "caller_id, role, owner_id, expected",
    [
        (1, UserRole.ADMIN, 99, True),
        (1, UserRole.ADMIN, 1, True),
        (5, UserRole.USER, 5, True),
        (5, UserRole.USER, 6, False),
        (5, "User", 5, True),
        (5, "Admin", 6, True),
    ],
)
def test_can_access_matrix(caller_id, role, owner_id, expected):
    assert can_access(caller_id, role, owner_id) is expected


def test_unknown_role_is_denied_even_for_owner():
    assert can_access(5, "Superuser", 5) is False


def test_can_access_task_uses_task_owner(alice, bob):
    task = _task(1, owner_id=alice.user_id)

    assert can_access_task(alice, task) is True
    assert can_access_task(bob, task) is False


def test_admin_sees_every_task(admin_caller):
    tasks = [_task(1, 2), _task(2, 3), _task(3, 2)]

    assert filter_visible(tasks, admin_caller) == tasks


def test_user_sees_only_own_tasks_in_order(alice):
    tasks = [_task(1, 2), _task(2, 3), _task(3, 2)]

    visible = filter_visible(tasks, alice)

    assert [t.id for t in visible] == [1, 3]


def test_caller_is_admin_flag():
    assert Caller(user_id=1, role=UserRole.ADMIN).is_admin is True
    assert Caller(user_id=1, role=UserRole.USER).is_admin is False
