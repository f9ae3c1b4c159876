"""Tests for the applicant lifecycle service."""
import asyncio

import pytest
from bson import ObjectId

from app.schemas.applicant import ApplicantStatus
from app.services import applicants
from app.utils.errors import InvalidInput, NotFound


async def make_applicant(db, **overrides):
    fields = {"name": "Asha Rao", "job_id": "JOB-7", "email": "asha@example.com"}
    fields.update(overrides)
    return await applicants.create_applicant(db, fields)


async def test_create_defaults_to_pending_with_empty_feedback(db) -> None:
    applicant_id = await make_applicant(db)

    applicant = await applicants.get_applicant(db, applicant_id)
    assert applicant["status"] == "Pending"
    assert applicant["feedback"] == []
    assert applicant["rejection_reason"] is None


async def test_create_keeps_explicit_status(db) -> None:
    applicant_id = await make_applicant(db, status=ApplicantStatus.INTERVIEW)
    applicant = await applicants.get_applicant(db, applicant_id)
    assert applicant["status"] == "Interview"


async def test_feedback_appends_in_call_order(db) -> None:
    applicant_id = await make_applicant(db)
    entries = ["Strong SQL", {"round": 2, "rating": 4}, "Culture fit"]

    for entry in entries:
        await applicants.append_feedback(db, applicant_id, entry)

    applicant = await applicants.get_applicant(db, applicant_id)
    assert applicant["feedback"] == entries


async def test_feedback_never_shrinks_across_status_changes(db) -> None:
    applicant_id = await make_applicant(db)
    await applicants.append_feedback(db, applicant_id, "first")
    await applicants.update_status(db, applicant_id, ApplicantStatus.REJECTED, "No visa")
    await applicants.append_feedback(db, applicant_id, "second")
    await applicants.update_status(db, applicant_id, ApplicantStatus.PENDING)

    applicant = await applicants.get_applicant(db, applicant_id)
    assert applicant["feedback"] == ["first", "second"]


async def test_concurrent_feedback_appends_are_all_kept(db) -> None:
    applicant_id = await make_applicant(db)

    await asyncio.gather(*(applicants.append_feedback(db, applicant_id, f"note {i}") for i in range(20)))

    applicant = await applicants.get_applicant(db, applicant_id)
    assert sorted(applicant["feedback"]) == sorted(f"note {i}" for i in range(20))


async def test_any_status_may_follow_any_status(db) -> None:
    applicant_id = await make_applicant(db)

    for status in (ApplicantStatus.HIRED, ApplicantStatus.PENDING, ApplicantStatus.OFFERED):
        await applicants.update_status(db, applicant_id, status)
        assert (await applicants.get_applicant(db, applicant_id))["status"] == status.value


async def test_rejection_reason_only_kept_for_rejection(db) -> None:
    applicant_id = await make_applicant(db)

    await applicants.update_status(db, applicant_id, ApplicantStatus.REJECTED, "Salary mismatch")
    assert (await applicants.get_applicant(db, applicant_id))["rejection_reason"] == "Salary mismatch"

    await applicants.update_status(db, applicant_id, ApplicantStatus.INTERVIEW, "ignored")
    assert (await applicants.get_applicant(db, applicant_id))["rejection_reason"] is None


async def test_unknown_applicant_is_not_found(db) -> None:
    missing = str(ObjectId())

    with pytest.raises(NotFound):
        await applicants.update_status(db, missing, ApplicantStatus.REVIEWED)
    with pytest.raises(NotFound):
        await applicants.append_feedback(db, missing, "hello")
    with pytest.raises(NotFound):
        await applicants.get_applicant(db, missing)


async def test_malformed_id_is_invalid_input(db) -> None:
    with pytest.raises(InvalidInput):
        await applicants.append_feedback(db, "42", "hello")


async def test_list_is_newest_first(db) -> None:
    first = await make_applicant(db, name="First")
    second = await make_applicant(db, name="Second")

    listed = await applicants.list_applicants(db)
    assert [row["id"] for row in listed] == [second, first]
