"""Tests for load_project_with_details."""

import logging

import pytest
from pydantic import ValidationError

from brandkit.models import BrandColor, BrandTypography, MemberRole, ProjectMember
from brandkit.services.project import load_project_with_details


class TestLoadProjectWithDetails:
    async def test_missing_project_returns_none(self, db_session):
        assert await load_project_with_details(db_session, 4242) is None

    async def test_empty_project_has_empty_collections(self, db_session, make_user, make_project):
        owner = await make_user(name="Olive Owner")
        project = await make_project(owner.id)

        details = await load_project_with_details(db_session, project.id)

        assert details is not None
        assert details.colors == ()
        assert details.typography == ()
        assert details.members == ()
        assert details.owner.id == owner.id
        assert details.owner.name == "Olive Owner"
        assert details.owner.username == owner.username

    async def test_colors_ordered_by_order_then_insertion(
        self, db_session, make_user, make_project
    ):
        owner = await make_user()
        project = await make_project(owner.id)
        for name, order in [("Late", 2), ("Early A", 0), ("Middle", 1), ("Early B", 0)]:
            db_session.add(
                BrandColor(project_id=project.id, name=name, hex_code="#000000", order=order)
            )
        await db_session.flush()

        details = await load_project_with_details(db_session, project.id)

        assert [c.name for c in details.colors] == ["Early A", "Early B", "Middle", "Late"]

    async def test_includes_typography_and_members(
        self, db_session, make_user, make_project
    ):
        owner = await make_user()
        member = await make_user(name="Mia Member")
        project = await make_project(owner.id)
        db_session.add(
            BrandTypography(
                project_id=project.id,
                type="primary",
                font_family="Inter",
                weights=["400", "700"],
            )
        )
        db_session.add(
            ProjectMember(project_id=project.id, user_id=member.id, role=MemberRole.ADMIN.value)
        )
        await db_session.flush()

        details = await load_project_with_details(db_session, project.id)

        assert len(details.typography) == 1
        assert details.typography[0].font_family == "Inter"
        assert details.typography[0].weights == ["400", "700"]
        assert len(details.members) == 1
        assert details.members[0].role == "admin"
        assert details.members[0].user.name == "Mia Member"
        assert details.members[0].user.id == member.id

    async def test_only_own_assets_are_included(self, db_session, make_user, make_project):
        owner = await make_user()
        project = await make_project(owner.id, name="Mine")
        other = await make_project(owner.id, name="Other")
        db_session.add(BrandColor(project_id=other.id, name="Elsewhere", hex_code="#111"))
        await db_session.flush()

        details = await load_project_with_details(db_session, project.id)

        assert details.colors == ()

    async def test_missing_owner_gets_placeholder(
        self, db_session, make_project, caplog
    ):
        project = await make_project(owner_id=777)

        with caplog.at_level(logging.WARNING):
            details = await load_project_with_details(db_session, project.id)

        assert details.owner.id == 777
        assert details.owner.name == ""
        assert details.owner.username == ""
        assert "Project owner row missing" in caplog.text

    async def test_result_is_immutable(self, db_session, make_user, make_project):
        owner = await make_user()
        project = await make_project(owner.id)
        details = await load_project_with_details(db_session, project.id)

        with pytest.raises(ValidationError):
            details.name = "Changed"
