"""Unit tests for the visitor status state machine."""

import pytest

from app.core.exceptions import InvalidArgumentError
from app.services.visitor_status import StatusToken, VisitorStatus, parse_status_token


class TestParseStatusToken:
    @pytest.mark.parametrize("raw", ["approve", "APPROVE", "Approve", "aPpRoVe"])
    def test_tokens_are_case_insensitive(self, raw):
        assert parse_status_token(raw) is StatusToken.approve

    @pytest.mark.parametrize("raw", ["bogus", "", "approved", " approve", "in progress"])
    def test_unknown_tokens_are_rejected(self, raw):
        with pytest.raises(InvalidArgumentError) as exc_info:
            parse_status_token(raw)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == f"Invalid status: {raw}"


class TestVisitorStatus:
    def test_approve_sets_approved_and_in_progress(self):
        status = VisitorStatus(complete=True).apply(StatusToken.approve)

        assert status == VisitorStatus(is_approved=True, inprogress=True, complete=True, exit=False)

    def test_disapprove_only_clears_approval(self):
        status = VisitorStatus(is_approved=True, inprogress=True).apply(StatusToken.disapprove)

        assert status == VisitorStatus(is_approved=False, inprogress=True)

    @pytest.mark.parametrize(
        ("token", "flag"),
        [
            (StatusToken.inprogress, "inprogress"),
            (StatusToken.complete, "complete"),
            (StatusToken.exit, "exit"),
        ],
    )
    def test_single_flag_transitions(self, token, flag):
        status = VisitorStatus().apply(token)

        assert getattr(status, flag) is True
        assert sum(vars(status).values()) == 1

    def test_transitions_accumulate_in_any_order(self):
        status = VisitorStatus()
        for token in (StatusToken.exit, StatusToken.complete, StatusToken.disapprove):
            status = status.apply(token)

        assert status == VisitorStatus(is_approved=False, inprogress=False, complete=True, exit=True)

    def test_apply_returns_new_value(self):
        original = VisitorStatus()

        original.apply(StatusToken.approve)

        assert original == VisitorStatus()
