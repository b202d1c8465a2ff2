import httpx


class TestGetTopics:
    async def test_success(self, test_client: httpx.AsyncClient, fake_store):
        fake_store.add_result(
            [
                {"slug": "mitch", "description": "The man, the Mitch, the legend"},
                {"slug": "cats", "description": "Not dogs"},
            ]
        )

        response = await test_client.get("/api/topics")
        assert response.status_code == 200
        topics = response.json()["topics"]
        assert len(topics) == 2
        for topic in topics:
            assert set(topic) == {"slug", "description"}

    async def test_empty(self, test_client: httpx.AsyncClient, fake_store):
        fake_store.add_result([])

        response = await test_client.get("/api/topics")
        assert response.status_code == 200
        assert response.json() == {"topics": []}
