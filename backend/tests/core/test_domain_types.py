"""Domain Types: value-type behavior."""

import dataclasses

import pytest

from postboard.core.domain_types import NewPost, PageRequest, UserId


def test_page_request_offset():
    assert PageRequest(page_number=2, page_size=4).offset == 8


def test_page_request_is_immutable():
    page = PageRequest(page_number=0, page_size=4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        page.page_size = 10


def test_new_post_holds_values():
    new_post = NewPost(user_id=UserId("u1"), title="T", body="B")
    assert (new_post.user_id, new_post.title, new_post.body) == ("u1", "T", "B")
