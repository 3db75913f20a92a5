from justai.models import User


class TestRegister:
    def _register(self, client, **overrides):
        body = {
            "name": "Ana",
            "email": "ana@x.com",
            "password": "p",
            "account_type": "Worker",
        }
        body.update(overrides)
        return client.post("/api/register", json=body)

    def test_register_worker(self, client):
        r = self._register(client)
        assert r.status_code == 201
        assert r.json()["message"] == "User registered successfully."

    def test_register_employer(self, client):
        r = self._register(
            client,
            email="boss@x.com",
            account_type="Employer",
            role="Hiring Manager",
            company="Acme",
        )
        assert r.status_code == 201

    def test_register_sets_active_status_and_hashes_password(self, client, db):
        self._register(client)
        user = db.query(User).filter(User.email == "ana@x.com").one()
        assert user.status == "Active"
        assert user.password_hash != "p"
        assert user.password_hash.startswith("$argon2")

    def test_duplicate_email_rejected(self, client):
        assert self._register(client).status_code == 201
        r = self._register(client, name="Someone Else", password="other", account_type="Employer",
                           role="Owner", company="Other Co")
        assert r.status_code == 400
        assert r.json()["message"] == "Email already registered."

    def test_duplicate_email_is_case_insensitive(self, client):
        self._register(client)
        r = self._register(client, email="ANA@X.com")
        assert r.status_code == 400

    def test_employer_requires_role_and_company(self, client):
        r = self._register(client, email="e1@x.com", account_type="Employer", company="Acme")
        assert r.status_code == 400
        r = self._register(client, email="e2@x.com", account_type="Employer", role="Owner")
        assert r.status_code == 400

    def test_worker_does_not_need_role_or_company(self, client):
        r = self._register(client, role=None, company=None)
        assert r.status_code == 201

    def test_missing_field_rejected(self, client):
        for field in ("name", "email", "password", "account_type"):
            r = self._register(client, **{field: None})
            assert r.status_code == 400, field
            assert r.json()["message"] == "All fields are required."

    def test_blank_field_rejected(self, client):
        r = self._register(client, name="   ")
        assert r.status_code == 400

    def test_unknown_account_type_rejected(self, client):
        r = self._register(client, account_type="Admin")
        assert r.status_code == 400
        assert r.json()["code"] == "VALIDATION_ERROR"

    def test_malformed_body_is_a_400(self, client):
        r = client.post("/api/register", content="not json", headers={"Content-Type": "application/json"})
        assert r.status_code == 400


class TestLogin:
    def _register(self, client, email="ana@x.com", password="p"):
        client.post("/api/register", json={
            "name": "Ana",
            "email": email,
            "password": password,
            "account_type": "Worker",
        })

    def test_login_after_register(self, client):
        self._register(client)
        r = client.post("/api/login", json={"email": "ana@x.com", "password": "p"})
        assert r.status_code == 200
        data = r.json()
        assert data["token"]
        assert data["user"]["email"] == "ana@x.com"
        assert data["user"]["name"] == "Ana"
        assert data["user"]["account_type"] == "Worker"
        assert "password" not in data["user"]
        assert "password_hash" not in data["user"]

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        self._register(client)
        wrong_password = client.post("/api/login", json={"email": "ana@x.com", "password": "nope"})
        unknown_email = client.post("/api/login", json={"email": "ghost@x.com", "password": "p"})
        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["message"] == "Invalid email or password."

    def test_missing_credentials(self, client):
        r = client.post("/api/login", json={"email": "ana@x.com"})
        assert r.status_code == 400
        assert r.json()["message"] == "Email and password are required."

    def test_email_lookup_ignores_case(self, client):
        self._register(client)
        r = client.post("/api/login", json={"email": " Ana@X.com ", "password": "p"})
        assert r.status_code == 200
