"""Tests for the project access policy.

Covers the owner/member/stranger truth table and the not-found-before-denied
ordering of require_access / require_owner.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from brandkit.core.auth import UserInfo
from brandkit.models import MemberRole, ProjectMember
from brandkit.services.access import (
    AccessDeniedError,
    ProjectAccessPolicy,
    ProjectNotFoundError,
    is_owner,
)


def _identity(user) -> UserInfo:
    return UserInfo(id=user.id, username=user.username, name=user.name, email=user.email)


async def _add_member(session: AsyncSession, project_id: int, user_id: int, role: MemberRole):
    session.add(ProjectMember(project_id=project_id, user_id=user_id, role=role.value))
    await session.flush()


class TestIsOwner:
    async def test_owner(self, make_user, make_project):
        owner = await make_user()
        project = await make_project(owner.id)
        assert is_owner(_identity(owner), project) is True

    async def test_other_user(self, make_user, make_project):
        owner = await make_user()
        other = await make_user()
        project = await make_project(owner.id)
        assert is_owner(_identity(other), project) is False


class TestCanAccess:
    async def test_owner_can_access(self, db_session, make_user, make_project):
        owner = await make_user()
        project = await make_project(owner.id)
        policy = ProjectAccessPolicy(db_session)
        assert await policy.can_access(_identity(owner), project) is True

    async def test_non_member_cannot_access(self, db_session, make_user, make_project):
        owner = await make_user()
        stranger = await make_user()
        project = await make_project(owner.id)
        policy = ProjectAccessPolicy(db_session)
        assert await policy.can_access(_identity(stranger), project) is False

    @pytest.mark.parametrize("role", list(MemberRole))
    async def test_member_of_any_role_can_access(
        self, db_session, make_user, make_project, role
    ):
        owner = await make_user()
        member = await make_user()
        project = await make_project(owner.id)
        await _add_member(db_session, project.id, member.id, role)

        policy = ProjectAccessPolicy(db_session)
        assert await policy.can_access(_identity(member), project) is True

    async def test_membership_is_per_project(self, db_session, make_user, make_project):
        owner = await make_user()
        member = await make_user()
        first = await make_project(owner.id, name="First")
        second = await make_project(owner.id, name="Second")
        await _add_member(db_session, first.id, member.id, MemberRole.ADMIN)

        policy = ProjectAccessPolicy(db_session)
        assert await policy.can_access(_identity(member), second) is False


class TestRequireAccess:
    async def test_returns_project_for_member(self, db_session, make_user, make_project):
        owner = await make_user()
        member = await make_user()
        project = await make_project(owner.id)
        await _add_member(db_session, project.id, member.id, MemberRole.VIEWER)

        resolved = await ProjectAccessPolicy(db_session).require_access(
            _identity(member), project.id
        )
        assert resolved.id == project.id

    async def test_missing_project_is_not_found(self, db_session, make_user):
        user = await make_user()
        with pytest.raises(ProjectNotFoundError):
            await ProjectAccessPolicy(db_session).require_access(_identity(user), 9999)

    async def test_stranger_is_denied(self, db_session, make_user, make_project):
        owner = await make_user()
        stranger = await make_user()
        project = await make_project(owner.id)
        with pytest.raises(AccessDeniedError):
            await ProjectAccessPolicy(db_session).require_access(
                _identity(stranger), project.id
            )


class TestRequireOwner:
    async def test_owner_passes(self, db_session, make_user, make_project):
        owner = await make_user()
        project = await make_project(owner.id)
        resolved = await ProjectAccessPolicy(db_session).require_owner(
            _identity(owner), project.id
        )
        assert resolved is project

    @pytest.mark.parametrize("role", list(MemberRole))
    async def test_member_cannot_write(self, db_session, make_user, make_project, role):
        owner = await make_user()
        member = await make_user()
        project = await make_project(owner.id)
        await _add_member(db_session, project.id, member.id, role)

        with pytest.raises(AccessDeniedError):
            await ProjectAccessPolicy(db_session).require_owner(
                _identity(member), project.id
            )

    async def test_missing_project_reported_before_denial(self, db_session, make_user):
        user = await make_user()
        with pytest.raises(ProjectNotFoundError):
            await ProjectAccessPolicy(db_session).require_owner(_identity(user), 12345)
