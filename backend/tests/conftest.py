import pytest
from fastapi.testclient import TestClient

from justai.config import Settings
from justai.main import create_app
from justai.models import Job, Payment, Review, Testimonial, User
from justai.utils.security import hash_password


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'test.sqlite'}",
        jwt_secret="test-secret-key-for-the-justai-suite",
        frontend_url="*",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan, which creates the tables.
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client, app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed(db):
    """Insert rows the HTTP API has no endpoint for (payments, reviews, testimonials)."""

    class Seeder:
        def user(self, name, email, account_type="Worker", **kwargs):
            user = User(
                name=name,
                email=email,
                password_hash=hash_password("secret"),
                account_type=account_type,
                **kwargs,
            )
            db.add(user)
            db.commit()
            return user

        def job(self, employer, title, **kwargs):
            kwargs.setdefault("job_status", "Open")
            job = Job(employer_id=employer.id, title=title, **kwargs)
            db.add(job)
            db.commit()
            return job

        def payment(self, worker, job, hours_worked, amount, status):
            payment = Payment(
                worker_id=worker.id,
                job_id=job.id,
                hours_worked=hours_worked,
                amount=amount,
                status=status,
            )
            db.add(payment)
            db.commit()
            return payment

        def review(self, reviewer, reviewee, comment, rating, **kwargs):
            review = Review(
                reviewer_id=reviewer.id,
                reviewee_id=reviewee.id,
                comment=comment,
                rating=rating,
                **kwargs,
            )
            db.add(review)
            db.commit()
            return review

        def testimonial(self, user, content, to_display=True, **kwargs):
            testimonial = Testimonial(user_id=user.id, content=content, to_display=to_display, **kwargs)
            db.add(testimonial)
            db.commit()
            return testimonial

    return Seeder()
