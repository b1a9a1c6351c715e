"""Tag value equality: None, unrelated types, same text, hashing, sets."""
import dataclasses

import pytest

from poeaa.domain import Person, Tag, ValueObject


def test_is_not_equal_none():
    tag = Tag(text="work")
    assert not tag.__eq__(None)
    assert tag != None  # noqa: E711


def test_is_not_equal_different_type():
    tag = Tag(text="work")
    person = Person(first_name="Kaio", last_name="Silveira")
    assert tag != person
    assert person != tag
    assert tag.__eq__(person) is False


def test_is_not_equal_plain_string_with_same_text():
    assert Tag("work") != "work"


def test_is_equal_another_tag_with_same_text():
    tag1 = Tag(text="work")
    tag2 = Tag(text="work")
    assert tag1 is not tag2
    assert tag1 == tag2


def test_equality_is_case_sensitive():
    assert Tag("work") != Tag("Work")
    assert Tag("work") != Tag("work ")


def test_equality_is_symmetric_and_transitive():
    a, b, c = Tag("x"), Tag("x"), Tag("x")
    assert a == a
    assert (a == b) and (b == a)
    assert (a == b) and (b == c) and (a == c)


@pytest.mark.parametrize("text", ["work", "home", "ünïcödé", "with space", "a" * 500])
def test_equal_tags_have_equal_hashes(text):
    assert Tag(text) == Tag(text)
    assert hash(Tag(text)) == hash(Tag(text))


def test_is_found_correctly_inside_hash_sets():
    tag = Tag(text="work")
    tags = {tag}
    assert len(tags) == 1

    tags.add(Tag(text="work"))
    assert len(tags) == 1
    assert Tag(text="work") in tags


def test_lookup_returns_stored_instance():
    tag = Tag(text="work")
    index = {tag: tag}

    result = index.get(Tag(text="work"), Tag(text=""))
    assert result is tag
    assert result == tag


def test_distinct_texts_stay_distinct_in_set():
    assert len({Tag("work"), Tag("home"), Tag("work"), Tag("")}) == 3


def test_empty_text_hashes_to_zero():
    assert hash(Tag("")) == 0


def test_none_text_hashes_to_zero_and_never_raises():
    tag = Tag(None)
    assert hash(tag) == 0
    assert tag == Tag(None)
    assert tag != Tag("")
    assert tag != None  # noqa: E711
    assert str(tag) == ""


def test_empty_text_equality():
    assert Tag("") == Tag("")
    assert Tag("") != Tag("work")
    assert Tag("work") != Tag("")


def test_text_is_read_only():
    tag = Tag("work")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tag.text = "home"


def test_str_and_repr():
    tag = Tag("work")
    assert str(tag) == "work"
    assert repr(tag) == "Tag(text='work')"


def test_tag_is_a_value_object():
    assert isinstance(Tag("work"), ValueObject)
