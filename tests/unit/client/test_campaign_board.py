"""
Tests for the CampaignBoard client.

This module runs the full submit -> review -> publish flow through the
caller-facing operations.
"""
import json

import pytest
from unittest.mock import AsyncMock

from campaign_board.client.campaign_board import REVIEW_PENDING_MESSAGE, CampaignBoard
from campaign_board.domains import ProjectStatus, ViolationCode


@pytest.fixture
def config():
    return {
        "identity": {
            "sessions": {"user-token": "user-1", "admin-token": "admin-1"},
            "roles": {"admin-1": ["admin"]},
        },
    }


@pytest.fixture
def board(config):
    return CampaignBoard(config=config)


@pytest.fixture
def payload():
    return {
        "title": "Books for Our Reading Corner",
        "description": "Our third grade classroom needs new books for the reading corner this year.",
        "campaignLink": "https://www.gofundme.com/f/x",
        "goalAmount": 500,
        "category": "education",
        "contactName": "Jo Lee",
        "contactEmail": "jo@x.edu",
    }


def test_requires_config():
    with pytest.raises(ValueError, match="config"):
        CampaignBoard()


def test_loads_json_config(tmp_path, config):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config))

    board = CampaignBoard(config_path=str(path))

    assert board.services.access_control.require_admin("admin-token") == "admin-1"


@pytest.mark.asyncio
async def test_submit_review_publish_flow(board, payload):
    """Test the end-to-end moderation scenario."""
    submitted = await board.submit_project(payload, "user-token")
    assert submitted.ok
    assert submitted.message == REVIEW_PENDING_MESSAGE
    project_id = submitted.data

    pending = await board.list_pending_projects("admin-token")
    assert pending.ok
    assert project_id in [p.id for p in pending.data]

    hidden = await board.get_active_project(project_id)
    assert hidden.error.code == "not_found"

    approved = await board.approve_project(project_id, "admin-token")
    assert approved.ok
    assert approved.data.status == ProjectStatus.ACTIVE

    rejected = await board.reject_project(project_id, "dup", "admin-token")
    assert not rejected.ok
    assert rejected.error.code == "invalid_transition"

    browse = await board.list_active_projects()
    assert [p.id for p in browse.data] == [project_id]
    assert (await board.get_active_project(project_id)).data.id == project_id

    pending = await board.list_pending_projects("admin-token")
    assert pending.data == []


@pytest.mark.asyncio
async def test_submitter_sees_rejection_reason(board, payload):
    project_id = (await board.submit_project(payload, "user-token")).data

    await board.reject_project(project_id, "  Please link the school's own campaign ", "admin-token")

    mine = await board.list_my_projects("user-token")
    assert mine.ok
    assert mine.data[0].status == ProjectStatus.REJECTED
    assert mine.data[0].rejection_reason == "Please link the school's own campaign"


@pytest.mark.asyncio
async def test_validation_errors_are_reported(board, payload):
    payload["title"] = "Books"

    result = await board.submit_project(payload, "user-token")

    assert not result.ok
    assert result.data is None
    assert result.error.code == "validation_failed"
    assert [(v.field, v.code) for v in result.error.violations] == [("title", ViolationCode.TOO_SHORT)]


@pytest.mark.asyncio
async def test_access_errors_are_reported(board, payload):
    project_id = (await board.submit_project(payload, "user-token")).data

    assert (await board.submit_project(payload, None)).error.code == "unauthenticated"
    assert (await board.list_pending_projects("user-token")).error.code == "forbidden"
    assert (await board.approve_project(project_id, "user-token")).error.code == "forbidden"
    assert (await board.reject_project(project_id, "Spam", None)).error.code == "unauthenticated"


@pytest.mark.asyncio
async def test_moderation_errors_are_reported(board, payload):
    project_id = (await board.submit_project(payload, "user-token")).data

    assert (await board.reject_project(project_id, " ", "admin-token")).error.code == "missing_reason"
    assert (await board.approve_project("missing", "admin-token")).error.code == "not_found"
    assert (await board.list_active_projects("sports")).error.code == "validation_failed"


@pytest.mark.asyncio
async def test_unexpected_errors_propagate(board):
    board.services.catalog.list_active = AsyncMock(side_effect=RuntimeError("store offline"))

    with pytest.raises(RuntimeError, match="store offline"):
        await board.list_active_projects()
