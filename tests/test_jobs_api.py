"""채용 공고 CRUD API 테스트.

Job CRUD API tests — public reads, admin-only writes, validation,
and the HTTP status codes the domain errors map to.
"""

from httpx import AsyncClient

from tests.conftest import auth_header

URL = "/api/v1/jobs"

ENGINEER = {"title": "Engineer", "salary": 100000, "equity": "0.1", "company_handle": "acme"}


async def _create(client: AsyncClient, token: str, **overrides) -> dict:
    res = await client.post(URL, json={**ENGINEER, **overrides}, headers=auth_header(token))
    assert res.status_code == 201, res.text
    return res.json()


class TestJobCreate:
    """공고 생성 테스트."""

    async def test_create_job(self, client: AsyncClient, companies, admin_token):
        data = await _create(client, admin_token)
        assert isinstance(data["id"], int)
        assert data["title"] == "Engineer"
        assert data["salary"] == 100000
        assert float(data["equity"]) == 0.1
        assert data["company_handle"] == "acme"

    async def test_create_job_non_admin(self, client: AsyncClient, companies, user_token):
        """일반 사용자로 생성 시 401."""
        res = await client.post(URL, json=ENGINEER, headers=auth_header(user_token))
        assert res.status_code == 401

    async def test_create_job_no_auth(self, client: AsyncClient, companies):
        res = await client.post(URL, json=ENGINEER)
        assert res.status_code == 401

    async def test_create_job_invalid_token(self, client: AsyncClient, companies):
        res = await client.post(URL, json=ENGINEER, headers=auth_header("not-a-jwt"))
        assert res.status_code == 401

    async def test_create_duplicate_job(self, client: AsyncClient, companies, admin_token):
        await _create(client, admin_token)
        res = await client.post(URL, json=ENGINEER, headers=auth_header(admin_token))
        assert res.status_code == 409

    async def test_create_job_invalid_equity(self, client: AsyncClient, companies, admin_token):
        res = await client.post(URL, json={**ENGINEER, "equity": "1.5"}, headers=auth_header(admin_token))
        assert res.status_code == 422

    async def test_create_job_missing_title(self, client: AsyncClient, companies, admin_token):
        body = {k: v for k, v in ENGINEER.items() if k != "title"}
        res = await client.post(URL, json=body, headers=auth_header(admin_token))
        assert res.status_code == 422


class TestJobRead:
    """공고 조회 테스트."""

    async def test_list_jobs_public(self, client: AsyncClient, companies, admin_token):
        await _create(client, admin_token, title="Sales", salary=50000, equity="0")
        await _create(client, admin_token)

        res = await client.get(URL)
        assert res.status_code == 200
        assert [j["title"] for j in res.json()] == ["Engineer", "Sales"]

    async def test_list_jobs_filters(self, client: AsyncClient, companies, admin_token):
        await _create(client, admin_token, title="Sales", salary=50000, equity="0")
        await _create(client, admin_token)
        await _create(client, admin_token, title="Engineering Manager", salary=90000, equity=None)

        res = await client.get(URL, params={"title": "eng"})
        assert [j["title"] for j in res.json()] == ["Engineer", "Engineering Manager"]

        res = await client.get(URL, params={"minSalary": 60000, "hasEquity": "true"})
        assert [j["title"] for j in res.json()] == ["Engineer"]

        res = await client.get(URL, params={"hasEquity": "false"})
        assert len(res.json()) == 3

    async def test_list_jobs_empty(self, client: AsyncClient):
        res = await client.get(URL)
        assert res.status_code == 200
        assert res.json() == []

    async def test_list_jobs_negative_min_salary(self, client: AsyncClient):
        res = await client.get(URL, params={"minSalary": -1})
        assert res.status_code == 422

    async def test_get_job(self, client: AsyncClient, companies, admin_token):
        created = await _create(client, admin_token)
        res = await client.get(f"{URL}/{created['id']}")
        assert res.status_code == 200
        assert res.json() == created

    async def test_get_nonexistent_job(self, client: AsyncClient):
        """존재하지 않는 공고 조회 시 404."""
        res = await client.get(f"{URL}/0")
        assert res.status_code == 404
        assert res.json()["detail"] == "No job: 0"


class TestJobUpdate:
    """공고 수정 테스트."""

    async def test_update_job(self, client: AsyncClient, companies, admin_token):
        created = await _create(client, admin_token)
        res = await client.patch(
            f"{URL}/{created['id']}", json={"salary": 110000}, headers=auth_header(admin_token)
        )
        assert res.status_code == 200
        assert res.json() == {**created, "salary": 110000}

    async def test_update_empty_body(self, client: AsyncClient, companies, admin_token):
        """빈 수정 요청은 400."""
        created = await _create(client, admin_token)
        res = await client.patch(f"{URL}/{created['id']}", json={}, headers=auth_header(admin_token))
        assert res.status_code == 400

    async def test_update_null_title(self, client: AsyncClient, companies, admin_token):
        """제목을 null로 변경하면 400, 기존 제목 유지."""
        created = await _create(client, admin_token)
        res = await client.patch(
            f"{URL}/{created['id']}", json={"title": None}, headers=auth_header(admin_token)
        )
        assert res.status_code == 400

        res = await client.get(f"{URL}/{created['id']}")
        assert res.json()["title"] == created["title"]

    async def test_update_company_handle_rejected(self, client: AsyncClient, companies, admin_token):
        created = await _create(client, admin_token)
        res = await client.patch(
            f"{URL}/{created['id']}", json={"company_handle": "globex"}, headers=auth_header(admin_token)
        )
        assert res.status_code == 422

    async def test_update_nonexistent_job(self, client: AsyncClient, admin_token):
        res = await client.patch(f"{URL}/0", json={"title": "X"}, headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_update_job_non_admin(self, client: AsyncClient, companies, admin_token, user_token):
        created = await _create(client, admin_token)
        res = await client.patch(
            f"{URL}/{created['id']}", json={"salary": 1}, headers=auth_header(user_token)
        )
        assert res.status_code == 401


class TestJobDelete:
    """공고 삭제 테스트."""

    async def test_delete_job(self, client: AsyncClient, companies, admin_token):
        created = await _create(client, admin_token)
        res = await client.delete(f"{URL}/{created['id']}", headers=auth_header(admin_token))
        assert res.status_code == 204

        res = await client.get(f"{URL}/{created['id']}")
        assert res.status_code == 404

    async def test_delete_nonexistent_job(self, client: AsyncClient, admin_token):
        res = await client.delete(f"{URL}/0", headers=auth_header(admin_token))
        assert res.status_code == 404

    async def test_delete_job_non_admin(self, client: AsyncClient, companies, admin_token, user_token):
        created = await _create(client, admin_token)
        res = await client.delete(f"{URL}/{created['id']}", headers=auth_header(user_token))
        assert res.status_code == 401


class TestHealth:
    async def test_health(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}
