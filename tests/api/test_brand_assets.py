"""Tests for the color and typography endpoints.

- Create/list/update/delete colors with ordering and hex validation
- Color writes require ownership of the color's project
- Create/list/update/delete typography entries
"""

from httpx import AsyncClient


async def _add_member(client: AsyncClient, project_id: int, user_id: int, owner: dict) -> None:
    response = await client.post(
        f"/api/projects/{project_id}/members", json={"userId": user_id}, headers=owner
    )
    assert response.status_code == 201, response.text


class TestColors:
    async def test_create_color(self, async_client: AsyncClient, register, create_project) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)

        response = await async_client.post(
            f"/api/projects/{project['id']}/colors",
            json={"name": "Primary Blue", "hexCode": "#1A73E8", "usage": "Buttons"},
            headers=headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Primary Blue"
        assert data["hexCode"] == "#1A73E8"
        assert data["usage"] == "Buttons"
        assert data["order"] == 0
        assert data["projectId"] == project["id"]

    async def test_list_follows_order(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)
        url = f"/api/projects/{project['id']}/colors"
        for name, order in [("Third", 2), ("First", 0), ("Second", 1)]:
            await async_client.post(
                url, json={"name": name, "hexCode": "#000000", "order": order}, headers=headers
            )

        response = await async_client.get(url, headers=headers)

        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["First", "Second", "Third"]

    async def test_invalid_hex_rejected(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)

        response = await async_client.post(
            f"/api/projects/{project['id']}/colors",
            json={"name": "Red", "hexCode": "red"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "hexCode"

    async def test_css_breaking_name_rejected(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)

        response = await async_client.post(
            f"/api/projects/{project['id']}/colors",
            json={"name": "x: y; }", "hexCode": "#000"},
            headers=headers,
        )

        assert response.status_code == 400

    async def test_comment_opening_name_rejected(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)

        response = await async_client.post(
            f"/api/projects/{project['id']}/colors",
            json={"name": "Brand /* accent", "hexCode": "#ffffff"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "name"

    async def test_member_cannot_add_color(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, owner = await register("owner")
        member_user, member = await register("member")
        project = await create_project(owner)
        await _add_member(async_client, project["id"], member_user["id"], owner)

        response = await async_client.post(
            f"/api/projects/{project['id']}/colors",
            json={"name": "Red", "hexCode": "#F00"},
            headers=member,
        )

        assert response.status_code == 403

    async def test_member_can_list_colors(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, owner = await register("owner")
        member_user, member = await register("member")
        project = await create_project(owner)
        await _add_member(async_client, project["id"], member_user["id"], owner)

        response = await async_client.get(
            f"/api/projects/{project['id']}/colors", headers=member
        )

        assert response.status_code == 200

    async def test_stranger_cannot_list_colors(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, owner = await register("owner")
        _, stranger = await register("stranger")
        project = await create_project(owner)

        response = await async_client.get(
            f"/api/projects/{project['id']}/colors", headers=stranger
        )

        assert response.status_code == 403

    async def test_update_color(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)
        color = (
            await async_client.post(
                f"/api/projects/{project['id']}/colors",
                json={"name": "Red", "hexCode": "#FF0000"},
                headers=headers,
            )
        ).json()

        response = await async_client.put(
            f"/api/colors/{color['id']}",
            json={"hexCode": "#CC0000", "order": 3},
            headers=headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["hexCode"] == "#CC0000"
        assert data["order"] == 3
        assert data["name"] == "Red"

    async def test_stranger_cannot_update_color(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, owner = await register("owner")
        _, stranger = await register("stranger")
        project = await create_project(owner)
        color = (
            await async_client.post(
                f"/api/projects/{project['id']}/colors",
                json={"name": "Red", "hexCode": "#FF0000"},
                headers=owner,
            )
        ).json()

        update = await async_client.put(
            f"/api/colors/{color['id']}", json={"name": "Mine"}, headers=stranger
        )
        delete = await async_client.delete(f"/api/colors/{color['id']}", headers=stranger)

        assert update.status_code == 403
        assert delete.status_code == 403

    async def test_delete_color(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)
        color = (
            await async_client.post(
                f"/api/projects/{project['id']}/colors",
                json={"name": "Red", "hexCode": "#FF0000"},
                headers=headers,
            )
        ).json()

        response = await async_client.delete(f"/api/colors/{color['id']}", headers=headers)

        assert response.status_code == 204
        listed = await async_client.get(f"/api/projects/{project['id']}/colors", headers=headers)
        assert listed.json() == []

    async def test_missing_color(self, async_client: AsyncClient, register) -> None:
        _, headers = await register("owner")

        response = await async_client.delete("/api/colors/31337", headers=headers)

        assert response.status_code == 404
        assert response.json()["error"] == "Color not found"


class TestTypography:
    async def test_create_and_list(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)
        url = f"/api/projects/{project['id']}/typography"

        response = await async_client.post(
            url,
            json={
                "type": "primary",
                "fontFamily": "Inter",
                "googleFontUrl": "https://fonts.googleapis.com/css2?family=Inter",
                "weights": ["400", "700"],
            },
            headers=headers,
        )

        assert response.status_code == 201
        created = response.json()
        assert created["fontFamily"] == "Inter"
        assert created["weights"] == ["400", "700"]

        listed = await async_client.get(url, headers=headers)
        assert [t["id"] for t in listed.json()] == [created["id"]]

    async def test_weights_default_to_empty(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)

        response = await async_client.post(
            f"/api/projects/{project['id']}/typography",
            json={"type": "secondary", "fontFamily": "Fira Code"},
            headers=headers,
        )

        assert response.status_code == 201
        assert response.json()["weights"] == []
        assert response.json()["googleFontUrl"] is None

    async def test_unsafe_font_family_rejected(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)

        response = await async_client.post(
            f"/api/projects/{project['id']}/typography",
            json={"type": "primary", "fontFamily": "Inter'; } body { color: red"},
            headers=headers,
        )

        assert response.status_code == 400

    async def test_update_and_delete(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, headers = await register("owner")
        project = await create_project(headers)
        entry = (
            await async_client.post(
                f"/api/projects/{project['id']}/typography",
                json={"type": "primary", "fontFamily": "Inter"},
                headers=headers,
            )
        ).json()

        updated = await async_client.put(
            f"/api/typography/{entry['id']}",
            json={"fontFamily": "Roboto", "weights": ["300"]},
            headers=headers,
        )
        assert updated.status_code == 200
        assert updated.json()["fontFamily"] == "Roboto"
        assert updated.json()["weights"] == ["300"]
        assert updated.json()["type"] == "primary"

        deleted = await async_client.delete(f"/api/typography/{entry['id']}", headers=headers)
        assert deleted.status_code == 204
        missing = await async_client.delete(f"/api/typography/{entry['id']}", headers=headers)
        assert missing.status_code == 404

    async def test_member_cannot_add_typography(
        self, async_client: AsyncClient, register, create_project
    ) -> None:
        _, owner = await register("owner")
        member_user, member = await register("member")
        project = await create_project(owner)
        await _add_member(async_client, project["id"], member_user["id"], owner)

        response = await async_client.post(
            f"/api/projects/{project['id']}/typography",
            json={"type": "primary", "fontFamily": "Inter"},
            headers=member,
        )

        assert response.status_code == 403

    async def test_missing_project(self, async_client: AsyncClient, register) -> None:
        _, headers = await register("owner")

        response = await async_client.post(
            "/api/projects/999/typography",
            json={"type": "primary", "fontFamily": "Inter"},
            headers=headers,
        )

        assert response.status_code == 404
