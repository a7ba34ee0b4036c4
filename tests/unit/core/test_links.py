"""Unit tests for core/links.py"""

import pytest

from mdimport.core.links import find_local_image_links, rewrite_link


@pytest.mark.parametrize("content,expected", [
    ("![x](photo.jpg)", ["photo.jpg"]),
    ("![x](img/photo.jpeg)", ["img/photo.jpeg"]),
    ("![](/images/a.jpg)", ["/images/a.jpg"]),
    ('![cap](photo.jpg "A title")', ["photo.jpg"]),
    ("![x](photo.png)", []),
    ("![x](photo.JPG)", []),
    ("[not an image](photo.jpg)", []),
    ("![x](http://example.com/photo.jpg)", []),
    ("![x](https://cdn.example.com/a.jpeg)", []),
    ("![x](photos/beach(1).jpg)", ["photos/beach(1).jpg"]),
    ("![a [b] c](photo.jpg)", ["photo.jpg"]),
    ("![x](my photo.jpg)", ["my photo.jpg"]),
    ('![x](my photo.jpeg "Beach")', ["my photo.jpeg"]),
    ("![x](beach(1.jpg)", []),
])
def test_find_local_image_links(content, expected):
    """Only local jpg/jpeg image paths are returned."""
    assert find_local_image_links(content) == expected


def test_find_links_document_order_with_duplicates():
    """Paths come back in source order, once per occurrence."""
    content = "![a](b.jpg)\ntext ![c](d.jpeg) more ![e](b.jpg)"
    assert find_local_image_links(content) == ["b.jpg", "d.jpeg", "b.jpg"]


def test_find_links_skips_remote_between_local():
    content = "![a](one.jpg) ![b](http://x.org/two.jpg) ![c](three.jpg)"
    assert find_local_image_links(content) == ["one.jpg", "three.jpg"]


def test_find_links_is_restartable():
    """Each call returns a fresh list."""
    content = "![a](one.jpg)"
    first = find_local_image_links(content)
    first.clear()
    assert find_local_image_links(content) == ["one.jpg"]


def test_rewrite_replaces_all_occurrences():
    content = "![a](p.jpg) and again ![b](p.jpg)"
    assert rewrite_link(content, "p.jpg", "/uploads/sha256-00") == (
        "![a](/uploads/sha256-00) and again ![b](/uploads/sha256-00)"
    )


def test_rewrite_no_occurrence_is_noop():
    assert rewrite_link("nothing here", "p.jpg", "/uploads/x") == "nothing here"


def test_find_links_unmatched_paths_do_not_swallow_later_links():
    """A non-jpg image followed by a jpg image on the same line yields only the jpg path."""
    content = "![a](one.png) then ![b](two (copy).jpg)"
    assert find_local_image_links(content) == ["two (copy).jpg"]
