"""사용자 지원 API 테스트 — 본인 또는 관리자 권한 검사.

User application API tests — applying to jobs and listing applications,
guarded by the same-user-or-admin check.
"""

from httpx import AsyncClient

from tests.conftest import auth_header, make_token

JOBS_URL = "/api/v1/jobs"
USERS_URL = "/api/v1/users"


async def _job_id(client: AsyncClient, admin_token: str, title: str = "Engineer") -> int:
    res = await client.post(JOBS_URL, json={
        "title": title,
        "salary": 100000,
        "equity": "0.1",
        "company_handle": "acme",
    }, headers=auth_header(admin_token))
    assert res.status_code == 201, res.text
    return res.json()["id"]


class TestApply:
    """공고 지원 테스트."""

    async def test_apply_as_self(self, client: AsyncClient, companies, admin_token, user_token):
        job_id = await _job_id(client, admin_token)
        res = await client.post(f"{USERS_URL}/u1/jobs/{job_id}", headers=auth_header(user_token))
        assert res.status_code == 201
        assert res.json() == {"applied": job_id}

    async def test_apply_as_admin_for_other(self, client: AsyncClient, companies, admin_token):
        job_id = await _job_id(client, admin_token)
        res = await client.post(f"{USERS_URL}/u1/jobs/{job_id}", headers=auth_header(admin_token))
        assert res.status_code == 201

    async def test_apply_for_other_user(self, client: AsyncClient, companies, admin_token, user_token):
        """다른 사용자 대신 지원 시 401."""
        job_id = await _job_id(client, admin_token)
        res = await client.post(f"{USERS_URL}/u2/jobs/{job_id}", headers=auth_header(user_token))
        assert res.status_code == 401

    async def test_apply_no_auth(self, client: AsyncClient, companies, admin_token):
        job_id = await _job_id(client, admin_token)
        res = await client.post(f"{USERS_URL}/u1/jobs/{job_id}")
        assert res.status_code == 401

    async def test_apply_missing_job(self, client: AsyncClient, user_token):
        res = await client.post(f"{USERS_URL}/u1/jobs/0", headers=auth_header(user_token))
        assert res.status_code == 404

    async def test_apply_twice(self, client: AsyncClient, companies, admin_token, user_token):
        job_id = await _job_id(client, admin_token)
        await client.post(f"{USERS_URL}/u1/jobs/{job_id}", headers=auth_header(user_token))
        res = await client.post(f"{USERS_URL}/u1/jobs/{job_id}", headers=auth_header(user_token))
        assert res.status_code == 409


class TestListApplications:
    """지원 목록 테스트."""

    async def test_list_own_applications(self, client: AsyncClient, companies, admin_token, user_token):
        first = await _job_id(client, admin_token, "Engineer")
        second = await _job_id(client, admin_token, "Designer")
        for job_id in (second, first):
            await client.post(f"{USERS_URL}/u1/jobs/{job_id}", headers=auth_header(user_token))

        res = await client.get(f"{USERS_URL}/u1/jobs", headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json() == {"username": "u1", "jobs": sorted([first, second])}

    async def test_list_other_user_applications(self, client: AsyncClient):
        res = await client.get(f"{USERS_URL}/u1/jobs", headers=auth_header(make_token("u2")))
        assert res.status_code == 401

    async def test_admin_lists_any_user(self, client: AsyncClient, admin_token):
        res = await client.get(f"{USERS_URL}/someone/jobs", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert res.json() == {"username": "someone", "jobs": []}
