"""Tests for resource link id history tracking."""

from __future__ import annotations

import json

from ltibridge.fields import LTI_ID, LTI_ID_HISTORY, LTI_SETTINGS
from ltibridge.history import resource_link_history, track_resource_link_id


def _history(content) -> str:
    return json.loads(content[LTI_SETTINGS])[LTI_ID_HISTORY]


class TestTrackResourceLinkId:
    def test_history_flow(self):
        old_content = {
            LTI_SETTINGS: json.dumps({LTI_ID_HISTORY: "content:1,content:2"}),
            LTI_ID: "4",
        }
        assert resource_link_history(old_content) == "content:1,content:2,content:4"

        new_content = {LTI_SETTINGS: json.dumps({LTI_ID_HISTORY: "content:2,content:3"})}
        assert track_resource_link_id(new_content, old_content) is True
        assert _history(new_content) == "content:1,content:2,content:3,content:4"

        # No double add
        assert track_resource_link_id(new_content, old_content) is False

        # Empty settings on the new item, the usual case
        del new_content[LTI_SETTINGS]
        assert track_resource_link_id(new_content, old_content) is True
        assert _history(new_content) == "content:1,content:2,content:4"

    def test_known_id_in_unsorted_history_is_a_no_op(self):
        stored = json.dumps({LTI_ID_HISTORY: "content:2,content:1"})
        new_content = {LTI_SETTINGS: stored}
        assert track_resource_link_id(new_content, {LTI_ID: "1"}) is False
        assert new_content[LTI_SETTINGS] == stored

    def test_known_id_in_spaced_history_is_a_no_op(self):
        stored = json.dumps({LTI_ID_HISTORY: "content:1, content:2"})
        new_content = {LTI_SETTINGS: stored}
        assert track_resource_link_id(new_content, {LTI_ID: "2"}) is False
        assert new_content[LTI_SETTINGS] == stored

    def test_new_id_normalises_stored_history(self):
        new_content = {LTI_SETTINGS: json.dumps({LTI_ID_HISTORY: "content:2, content:1"})}
        assert track_resource_link_id(new_content, {LTI_ID: "3"}) is True
        assert _history(new_content) == "content:1,content:2,content:3"

    def test_other_settings_are_kept(self):
        new_content = {LTI_SETTINGS: json.dumps({"color": "blue"})}
        track_resource_link_id(new_content, {LTI_ID: 7})
        assert json.loads(new_content[LTI_SETTINGS]) == {"color": "blue", LTI_ID_HISTORY: "content:7"}

    def test_ids_sort_numerically(self):
        old_content = {LTI_SETTINGS: {LTI_ID_HISTORY: "content:10,content:9"}, LTI_ID: 100}
        assert resource_link_history(old_content) == "content:9,content:10,content:100"

    def test_unparseable_settings_are_ignored(self):
        assert resource_link_history({LTI_SETTINGS: "{not json", LTI_ID: 1}) == "content:1"
        assert resource_link_history({}) == ""
