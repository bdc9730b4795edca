"""Tests for POST /api/generate/long-video and its detached jobs."""
import asyncio
import logging
import re
import time

import pytest
from fastapi.testclient import TestClient

from app import app
from videos import services


class TestLongVideoSubmission:
    """The job is accepted immediately; its outcome is never exposed."""

    def test_returns_202_with_job_id(self, test_client):
        resp = test_client.post("/api/generate/long-video", json={"prompt": "a journey"})
        assert resp.status_code == 202
        data = resp.json()
        assert data["success"] is True
        assert data["message"]
        assert re.fullmatch(r"job-video-long-\d{13}-\d+", data["jobId"])
        assert set(data) == {"success", "message", "jobId"}

    def test_job_ids_are_unique(self, test_client):
        ids = {test_client.post("/api/generate/long-video", json={}).json()["jobId"] for _ in range(10)}
        assert len(ids) == 10

    def test_latency_independent_of_long_delay(self, set_delays):

        set_delays(long_video=60.0)
        with TestClient(app) as client:
            start = time.perf_counter()
            resp = client.post("/api/generate/long-video", json={})
            elapsed = time.perf_counter() - start
            assert resp.status_code == 202
            assert elapsed < 5.0
        # Shutdown cancelled the still-running job
        assert services.pending_job_count() == 0

    def test_no_status_endpoint(self, test_client):
        job_id = test_client.post("/api/generate/long-video", json={}).json()["jobId"]
        assert test_client.get(f"/api/generate/long-video/{job_id}").status_code in (404, 405)


class TestDetachedJob:
    """Background completion is only visible in the logs."""

    @pytest.mark.asyncio
    async def test_job_runs_after_response(self, async_client, set_delays):
        set_delays(long_video=0.2)
        resp = await async_client.post("/api/generate/long-video", json={})
        assert resp.status_code == 202
        assert services.pending_job_count() >= 1

        await asyncio.sleep(0.5)
        assert services.pending_job_count() == 0

    @pytest.mark.asyncio
    async def test_completion_is_logged(self, async_client, set_delays, caplog):
        set_delays(long_video=0.0)
        with caplog.at_level(logging.INFO, logger="app.videos.services"):
            resp = await async_client.post("/api/generate/long-video", json={})
            job_id = resp.json()["jobId"]
            for _ in range(20):
                if services.pending_job_count() == 0:
                    break
                await asyncio.sleep(0.01)

        assert any(
            f"Job {job_id} completed" in record.getMessage() and f"{job_id}.mp4" in record.getMessage()
            for record in caplog.records
        )

    @pytest.mark.asyncio
    async def test_cancel_background_jobs(self, async_client, set_delays):
        set_delays(long_video=30.0)
        await async_client.post("/api/generate/long-video", json={})
        await async_client.post("/api/generate/long-video", json={})

        cancelled = await services.cancel_background_jobs()

        assert cancelled == 2
        assert services.pending_job_count() == 0
