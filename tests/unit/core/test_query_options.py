"""Tests for query option encoding."""

from enum import Enum
from typing import List, Optional

import pytest
from pydantic import Field

from gerrit_client.exceptions import RequestBuildError
from gerrit_client.models.changes import QueryChangeOptions
from gerrit_client.models.projects import MergeOptions, ProjectOptions
from gerrit_client.query_options import KEEP_EMPTY, QueryOptions, encode_options


class Color(Enum):
    RED = "red"


class SampleOptions(QueryOptions):
    limit: Optional[int] = Field(default=None, alias="n")
    flag: Optional[bool] = None
    names: Optional[List[str]] = Field(default=None, alias="o")
    color: Optional[Color] = None
    required: str = Field(default="", json_schema_extra=KEEP_EMPTY)


class TestEncodeOptions:
    """Test conversion of option models into query parameters."""

    def test_none_encodes_to_nothing(self):
        assert encode_options(None) == []

    def test_project_limit_only(self):
        assert encode_options(ProjectOptions(limit=25)) == [("n", "25")]

    def test_zero_values_are_omitted(self):
        options = ProjectOptions(limit=0, skip=0, prefix="", description=False)
        assert encode_options(options) == []

    def test_aliases_are_parameter_names(self):
        options = ProjectOptions(limit=10, skip=5, prefix="platform/", tree=True)
        params = encode_options(options)

        assert ("n", "10") in params
        assert ("S", "5") in params
        assert ("p", "platform/") in params
        assert ("t", "true") in params
        assert len(params) == 4

    def test_field_names_also_accepted_on_construction(self):
        assert SampleOptions(n=3).limit == 3
        assert SampleOptions(limit=3).limit == 3

    def test_lists_repeat_the_parameter(self):
        options = QueryChangeOptions(
            query=["is:open", "owner:self"], additional_fields=["LABELS", "MESSAGES"]
        )
        params = encode_options(options)

        assert params.count(("q", "is:open")) == 1
        assert params.count(("q", "owner:self")) == 1
        assert ("o", "LABELS") in params
        assert ("o", "MESSAGES") in params

    def test_booleans_and_enums(self):
        params = encode_options(SampleOptions(flag=True, color=Color.RED, required="x"))

        assert ("flag", "true") in params
        assert ("color", "red") in params

    def test_keep_empty_field_is_sent_when_empty(self):
        assert encode_options(SampleOptions()) == [("required", "")]

    def test_merge_options_always_send_source(self):
        assert ("source", "") in encode_options(MergeOptions())

    def test_mapping_is_accepted(self):
        params = encode_options({"q": "status:open", "n": 5, "empty": ""})
        assert params == [("q", "status:open"), ("n", "5")]

    def test_unsupported_value_rejected(self):
        with pytest.raises(RequestBuildError):
            encode_options(["n", "25"])
