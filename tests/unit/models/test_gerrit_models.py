"""Tests for entity models, aliases and timestamp handling."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from gerrit_client.models import AccountInfo, ChangeInfo, ChangeInput, GroupInfo
from gerrit_client.models.common import format_timestamp, parse_timestamp
from gerrit_client.models.groups import MembersInput


class TestTimestamps:
    """Test Gerrit's nanosecond UTC timestamp format."""

    def test_parse_nanoseconds_truncated(self):
        parsed = parse_timestamp("2013-02-01 09:59:32.126000000")
        assert parsed == datetime(2013, 2, 1, 9, 59, 32, 126000, tzinfo=timezone.utc)

    def test_parse_without_fraction(self):
        parsed = parse_timestamp("2013-02-01 09:59:32")
        assert parsed == datetime(2013, 2, 1, 9, 59, 32, tzinfo=timezone.utc)

    def test_other_shapes_passed_through(self):
        assert parse_timestamp("2013-02-01T09:59:32Z") == "2013-02-01T09:59:32Z"
        assert parse_timestamp(1359712772) == 1359712772

    def test_format(self):
        value = datetime(2013, 2, 1, 9, 59, 32, 126000, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2013-02-01 09:59:32.126000000"

    def test_model_round_trip(self):
        info = ChangeInfo.model_validate({"created": "2013-02-01 09:59:32.126000000"})

        assert isinstance(info.created, datetime)
        assert json.loads(info.to_json())["created"] == "2013-02-01 09:59:32.126000000"


class TestAliases:
    def test_underscore_fields(self):
        account = AccountInfo.model_validate(
            {"_account_id": 1000096, "_more_accounts": True}
        )

        assert account.account_id == 1000096
        assert account.more_accounts is True
        assert json.loads(account.to_json()) == {
            "_account_id": 1000096,
            "_more_accounts": True,
        }

    def test_field_names_accepted(self):
        assert AccountInfo(account_id=7).account_id == 7

    def test_unknown_fields_kept(self):
        group = GroupInfo.model_validate({"id": "abc", "future_field": 1})
        assert json.loads(group.to_json())["future_field"] == 1

    def test_input_alias_serialized(self):
        body = MembersInput(one_member="jdoe").model_dump(by_alias=True, exclude_none=True)
        assert body == {"_one_member": "jdoe"}


class TestInputs:
    def test_change_input_requires_core_fields(self):
        with pytest.raises(ValidationError):
            ChangeInput(project="demo", branch="main")

    def test_inputs_reject_unknown_fields(self):
        with pytest.raises(ValidationError):
            ChangeInput(project="demo", branch="main", subject="x", sujbect="typo")
