from __future__ import annotations

import pytest

from blog_backend.domain.posts.entities import PostChanges, parse_post_id
from blog_backend.domain.posts.exceptions import InvalidPostIdError


@pytest.mark.parametrize(("raw", "expected"), [("1", 1), ("42", 42), (7, 7), (" 9 ", 9)])
def test_parse_post_id_accepts_positive_integers(raw, expected):
    assert parse_post_id(raw) == expected


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "-3", "0", 0, -1, True, None, "٣"])
def test_parse_post_id_rejects_everything_else(raw):
    with pytest.raises(InvalidPostIdError):
        parse_post_id(raw)


def test_post_changes_only_reports_given_fields():
    changes = PostChanges(title="new", img_credit=None)

    assert changes.as_dict() == {"title": "new"}
    assert changes.with_cover("u").as_dict() == {"title": "new", "cover": "u"}
