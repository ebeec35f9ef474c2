"""Tests for the HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from brand_identity import main


class TestRetentionAPI:
    """Tests for /api/retention endpoints."""

    def test_analyze_chapters(self, test_client: TestClient, scenario_chapters) -> None:
        response = test_client.post(
            "/api/retention/analyze", json={"chapters": scenario_chapters}
        )
        assert response.status_code == 200
        segments = response.json()["segments"]
        assert [segment["score"] for segment in segments] == [95, 50, 38]
        assert segments[0]["label"] == "Strong Engagement"
        assert segments[2]["reason"] == "Wind-down phase"

    def test_analyze_provider_field_names(self, test_client: TestClient) -> None:
        response = test_client.post(
            "/api/retention/analyze",
            json={
                "chapters": [
                    {"headline": "Background", "start": 100, "end": 130},
                ],
                "highlights": [{"highlightTitle": "Moment", "start": 110.4}],
            },
        )
        assert response.status_code == 200
        segment = response.json()["segments"][0]
        assert segment["reason"] == "Key moment, Early content, Setup phase"
        assert segment["score"] == 75

    def test_analyze_empty_body_returns_fallback(self, test_client: TestClient) -> None:
        response = test_client.post("/api/retention/analyze", json={})
        assert response.status_code == 200
        assert response.json()["segments"] == [
            {
                "start": 0,
                "end": 60,
                "score": 60,
                "label": "Moderate Risk",
                "reason": "No detailed segmentation available",
            }
        ]

    def test_label(self, test_client: TestClient) -> None:
        response = test_client.get("/api/retention/label", params={"score": 70})
        assert response.status_code == 200
        assert response.json() == {"score": 70, "label": "Strong Engagement"}

    def test_label_out_of_range(self, test_client: TestClient) -> None:
        response = test_client.get("/api/retention/label", params={"score": 101})
        assert response.status_code == 422


class TestMemoryAPI:
    """Tests for /api/memory endpoints."""

    def test_read_default_document(self, test_client: TestClient) -> None:
        response = test_client.get("/api/memory/content")
        assert response.status_code == 200
        assert response.json() == {"ideas": [], "published": [], "videoAnalyses": []}

    def test_unknown_document(self, test_client: TestClient) -> None:
        response = test_client.get("/api/memory/settings")
        assert response.status_code == 422

    def test_write_merges_by_default(self, test_client: TestClient) -> None:
        response = test_client.put(
            "/api/memory/profile",
            json={"patch": {"creator": {"name": "Ada", "goals": ["grow"]}}},
        )
        assert response.status_code == 200
        profile = response.json()
        assert profile["creator"]["name"] == "Ada"
        assert profile["creator"]["experienceLevel"] == "beginner"

        response = test_client.get("/api/memory/profile")
        assert response.json()["creator"]["goals"] == ["grow"]

    def test_write_replace(self, test_client: TestClient) -> None:
        response = test_client.put(
            "/api/memory/brand",
            json={"patch": {"confidenceScore": 0.9}, "merge": False},
        )
        assert response.status_code == 200
        assert test_client.get("/api/memory/brand").json() == {"confidenceScore": 0.9}

    def test_status_initialize_and_reset(self, test_client: TestClient) -> None:
        assert test_client.get("/api/memory/status").json() == {
            "initialized": False,
            "onboardingComplete": False,
        }

        response = test_client.post("/api/memory/initialize")
        assert response.status_code == 200
        assert response.json()["initialized"] is True

        response = test_client.post("/api/memory/onboarding/complete")
        assert response.status_code == 200
        assert response.json()["onboardingComplete"] is True
        assert test_client.get("/api/memory/status").json()["onboardingComplete"] is True

        response = test_client.post("/api/memory/reset")
        assert response.status_code == 200
        assert response.json() == {"initialized": True, "onboardingComplete": False}

    def test_target_audience(self, test_client: TestClient) -> None:
        assert test_client.get("/api/memory/profile/target-audience").json() == {
            "targetAudience": None
        }

        test_client.put(
            "/api/memory/profile",
            json={"patch": {"audience": {"aiGeneratedSummary": "Busy parents"}}},
        )
        assert test_client.get("/api/memory/profile/target-audience").json() == {
            "targetAudience": "Busy parents"
        }


class TestVideoAnalysesAPI:
    """Tests for /api/videos and /api/brand-coherence endpoints."""

    def test_store_and_read_timeline(self, test_client: TestClient, scenario_chapters) -> None:
        response = test_client.post(
            "/api/videos/vid-1/retention-timeline",
            json={"chapters": scenario_chapters, "fileName": "clip.mp4", "topics": ["editing"]},
        )
        assert response.status_code == 200
        record = response.json()
        assert record["id"] == "vid-1"
        assert record["fileName"] == "clip.mp4"
        assert record["topics"] == ["editing"]
        assert len(record["retentionTimeline"]) == 3

        response = test_client.get("/api/videos/vid-1/retention-timeline")
        assert response.status_code == 200
        body = response.json()
        assert body["video_id"] == "vid-1"
        assert [segment["score"] for segment in body["segments"]] == [95, 50, 38]

        content = test_client.get("/api/memory/content").json()
        assert content["videoAnalyses"][0]["retentionTimeline"][0]["score"] == 95

    def test_timeline_not_found(self, test_client: TestClient) -> None:
        response = test_client.get("/api/videos/missing/retention-timeline")
        assert response.status_code == 404
        assert response.json() == {"detail": "Video analysis not found"}

    def test_list_videos(self, test_client: TestClient) -> None:
        assert test_client.get("/api/videos").json() == []

        test_client.post("/api/videos/vid-1/retention-timeline", json={})
        videos = test_client.get("/api/videos").json()
        assert [video["id"] for video in videos] == ["vid-1"]

    def test_brand_coherence(self, test_client: TestClient) -> None:
        response = test_client.get("/api/brand-coherence")
        assert response.status_code == 200
        assert response.json()["coherenceScore"] is None

        test_client.post("/api/videos/vid-1/retention-timeline", json={"fileName": "a.mp4"})
        response = test_client.put(
            "/api/videos/vid-1/brand-alignment",
            json={
                "overallScore": 82,
                "dimensionScores": {
                    "tone": 80,
                    "authority": 70,
                    "depth": 60,
                    "emotion": 90,
                    "risk": 40,
                },
                "strengths": ["Strong hook"],
                "improvements": [],
                "recommendation": "Post it",
            },
        )
        assert response.status_code == 200

        coherence = test_client.get("/api/brand-coherence").json()
        assert coherence["coherenceScore"] == 82
        assert coherence["videoCount"] == 1
        assert coherence["dimensionAverages"]["emotion"] == 90
        assert coherence["latestVideo"] == "a.mp4"

    def test_brand_alignment_validation(self, test_client: TestClient) -> None:
        test_client.post("/api/videos/vid-1/retention-timeline", json={})
        response = test_client.put(
            "/api/videos/vid-1/brand-alignment", json={"overallScore": 140}
        )
        assert response.status_code == 422


class TestUninitialized:
    def test_memory_routes_return_503(self, uninitialized_client: TestClient) -> None:
        assert uninitialized_client.get("/api/memory/profile").status_code == 503
        assert uninitialized_client.get("/api/videos").status_code == 503
        assert uninitialized_client.get("/api/brand-coherence").status_code == 503


class TestHealth:
    def test_health(self) -> None:
        client = TestClient(main.app)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_config_health_reports_missing_keys(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BACKBOARD_API_KEY", "key")
        monkeypatch.delenv("TWELVE_LABS_API_KEY", raising=False)
        monkeypatch.delenv("XAI_API_KEY", raising=False)

        response = TestClient(main.app).get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["configured"] == ["BACKBOARD_API_KEY"]
        assert body["missing"] == ["TWELVE_LABS_API_KEY", "XAI_API_KEY"]
        assert body["message"] == "Missing environment variables: TWELVE_LABS_API_KEY, XAI_API_KEY"
