"""
API 服务测试
"""

import pytest
from fastapi.testclient import TestClient

from pinyin_translator.api import server


@pytest.fixture
def client():
    with TestClient(server.app) as c:
        yield c


class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_not_ready_without_lifespan(self):
        c = TestClient(server.app)
        assert c.get("/health").json()["status"] == "not_ready"
        assert c.post("/translate", json={"text": "阿飞"}).status_code == 503


class TestTranslate:

    def test_translate(self, client):
        resp = client.post("/translate", json={"text": "网名是独孤影！"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"] == "wǎngmíngshìdúgūyǐng！"
        assert data["tokens"] == ["wǎng", "míng", "shì", "dú", "gū", "yǐng", "！"]
        assert "X-Request-ID" in resp.headers

    def test_translate_unmark(self, client):
        resp = client.post("/translate", json={"text": "绿色", "unmark": True})
        assert resp.json()["result"] == "lüse"

    def test_empty_text(self, client):
        resp = client.post("/translate", json={"text": ""})
        assert resp.status_code == 200
        assert resp.json() == {"text": "", "result": "", "tokens": []}

    def test_missing_text(self, client):
        assert client.post("/translate", json={}).status_code == 422

    def test_simple(self, client):
        resp = client.get("/translate/simple", params={"text": "银行"})
        assert resp.json() == {"text": "银行", "result": "yínháng"}
        resp = client.get("/translate/simple", params={"text": "银行", "unmark": "true"})
        assert resp.json()["result"] == "yinhang"
