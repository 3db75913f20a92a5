class TestHealth:
    def test_root(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.text == "JustAI Jobs Backend is running"

    def test_check_db(self, client):
        r = client.get("/check-db")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "success"
        assert data["time"]

    def test_cors_allows_any_origin(self, client):
        r = client.get("/api/jobs/newest", headers={"Origin": "https://frontend.example"})
        assert r.headers["access-control-allow-origin"] == "*"
