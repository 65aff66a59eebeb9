"""
Unit tests for MemoryStore, including concurrent access.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from jobboard.domain.entities import ApplicationStatus
from jobboard.domain.exceptions import (
    ApplicationNotFoundError,
    JobNotFoundError,
    NotFoundError,
)
from jobboard.domain.services import IdentityService
from jobboard.infrastructure.storage import MemoryStore


def post(store: MemoryStore, title: str = "Engineer") -> str:
    return store.create_job_posting(
        title=title,
        company="Acme",
        location="Remote",
        description="Build things",
        skills="Go,SQL",
        salary="100k-120k",
    )


class TestJobPostings:
    """Tests for job posting creation and listing."""

    def test_ids_strictly_increase(self, store: MemoryStore):
        """Sequential creates should yield JOB1, JOB2, ..."""
        ids = [post(store) for _ in range(5)]

        assert ids == ["JOB1", "JOB2", "JOB3", "JOB4", "JOB5"]
        numbers = [int(i.removeprefix("JOB")) for i in ids]
        assert numbers == sorted(set(numbers))

    def test_created_posting_is_listed(self, store: MemoryStore):
        job_id = post(store, title="Data Engineer")

        postings = store.list_job_postings()

        assert [p.job_id for p in postings] == [job_id]
        assert postings[0].title == "Data Engineer"
        assert postings[0].salary == "100k-120k"

    def test_listing_preserves_insertion_order(self, store: MemoryStore):
        for title in ("a", "b", "c"):
            post(store, title=title)

        assert [p.title for p in store.list_job_postings()] == ["a", "b", "c"]

    def test_listing_is_a_snapshot(self, store: MemoryStore):
        """A listing taken earlier should not grow with later creates."""
        post(store)
        snapshot = store.list_job_postings()
        post(store)

        assert len(snapshot) == 1
        assert len(store.list_job_postings()) == 2

    def test_custom_prefixes(self):
        store = MemoryStore(job_id_prefix="J-", application_id_prefix="A-")
        job_id = post(store)

        assert job_id == "J-1"
        assert store.create_application(job_id, "JS1", "cv") == "A-1"

    def test_get_job_posting(self, store: MemoryStore):
        job_id = post(store)

        assert store.get_job_posting(job_id).job_id == job_id
        assert store.get_job_posting("JOB999") is None


class TestApplications:
    """Tests for application creation, lookup and status updates."""

    def test_create_application_pending(self, store: MemoryStore):
        job_id = post(store)

        app_id = store.create_application(job_id, "seeker-1", "my resume")

        app = store.get_application(app_id)
        assert app_id == "APP1"
        assert app.job_id == job_id
        assert app.job_seeker_id == "seeker-1"
        assert app.status == ApplicationStatus.PENDING
        assert app.resume == "my resume"

    def test_create_application_unknown_job(self, store: MemoryStore):
        """Unknown job IDs should raise and insert nothing."""
        with pytest.raises(JobNotFoundError) as exc_info:
            store.create_application("JOB42", "seeker-1", "resume")

        assert isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.record_id == "JOB42"
        assert store.list_all_applications() == []

    def test_failed_create_does_not_consume_id(self, store: MemoryStore):
        job_id = post(store)
        with pytest.raises(JobNotFoundError):
            store.create_application("JOB42", "", "resume")

        assert store.create_application(job_id, "", "resume") == "APP1"

    def test_blank_job_seeker_id_is_synthesized(self, store: MemoryStore):
        job_id = post(store)

        app = store.get_application(store.create_application(job_id, "", "resume"))

        assert app.job_seeker_id.startswith("JS")
        assert len(app.job_seeker_id) > len("JS")

    def test_identity_service_is_used(self):
        store = MemoryStore(identity=IdentityService(prefix="ANON"))
        job_id = post(store)

        app = store.get_application(store.create_application(job_id, "", "resume"))

        assert app.job_seeker_id.startswith("ANON")

    def test_update_status(self, store: MemoryStore):
        job_id = post(store)
        app_id = store.create_application(job_id, "seeker-1", "resume")

        store.update_application_status(app_id, ApplicationStatus.ACCEPTED)

        assert store.get_application(app_id).status == ApplicationStatus.ACCEPTED

    def test_status_transitions_unconstrained(self, store: MemoryStore):
        """Any status may follow any other."""
        job_id = post(store)
        app_id = store.create_application(job_id, "seeker-1", "resume")

        for status in (
            ApplicationStatus.ACCEPTED,
            ApplicationStatus.REJECTED,
            ApplicationStatus.PENDING,
            ApplicationStatus.ACCEPTED,
        ):
            store.update_application_status(app_id, status)
            assert store.get_application(app_id).status == status

    def test_update_unknown_application(self, store: MemoryStore):
        """Unknown application IDs should raise and mutate nothing."""
        job_id = post(store)
        app_id = store.create_application(job_id, "seeker-1", "resume")

        with pytest.raises(ApplicationNotFoundError):
            store.update_application_status("APP99", ApplicationStatus.REJECTED)

        assert [a.status for a in store.list_all_applications()] == [ApplicationStatus.PENDING]
        assert store.get_application(app_id).status == ApplicationStatus.PENDING

    def test_returned_applications_are_copies(self, store: MemoryStore):
        """Mutating a listed application should not touch the store."""
        job_id = post(store)
        app_id = store.create_application(job_id, "seeker-1", "resume")

        listed = store.list_all_applications()[0]
        listed.status = ApplicationStatus.REJECTED

        assert store.get_application(app_id).status == ApplicationStatus.PENDING

    def test_list_for_job_seeker(self, store: MemoryStore):
        """Should return exactly the seeker's applications in creation order."""
        job_a = post(store)
        job_b = post(store)
        first = store.create_application(job_a, "alice", "r1")
        store.create_application(job_a, "bob", "r2")
        second = store.create_application(job_b, "alice", "r3")

        alice = store.list_applications_for_job_seeker("alice")

        assert [a.application_id for a in alice] == [first, second]
        assert store.list_applications_for_job_seeker("carol") == []
        assert store.list_applications_for_job_seeker("ALICE") == []


class TestConcurrency:
    """Tests for concurrent access from many threads."""

    def test_concurrent_job_creation(self, store: MemoryStore):
        """N concurrent creates should yield N distinct IDs and N postings."""
        n = 500
        with ThreadPoolExecutor(max_workers=32) as pool:
            ids = list(pool.map(lambda i: post(store, title=f"job-{i}"), range(n)))

        assert len(set(ids)) == n
        postings = store.list_job_postings()
        assert len(postings) == n
        assert {p.job_id for p in postings} == set(ids)
        assert sorted(int(i.removeprefix("JOB")) for i in ids) == list(range(1, n + 1))

    def test_concurrent_mixed_operations(self, store: MemoryStore):
        """Creates, updates and listings interleaved should lose nothing."""
        job_ids = [post(store) for _ in range(10)]
        start = threading.Barrier(8)
        errors: list[Exception] = []

        def worker(worker_id: int) -> None:
            try:
                start.wait()
                for i in range(50):
                    job_id = job_ids[i % len(job_ids)]
                    app_id = store.create_application(job_id, f"seeker-{worker_id}", "resume")
                    store.update_application_status(app_id, ApplicationStatus.ACCEPTED)
                    for app in store.list_all_applications():
                        assert app.application_id.startswith("APP")
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(w,)) for w in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        applications = store.list_all_applications()
        assert len(applications) == 8 * 50
        assert len({a.application_id for a in applications}) == 8 * 50
        assert all(a.status == ApplicationStatus.ACCEPTED for a in applications)
        assert len(store.list_applications_for_job_seeker("seeker-3")) == 50
