import pytest

from museumdesk.collection import MuseumCollection
from museumdesk.exhibit import ArtExhibit, Exhibit


@pytest.fixture
def collection():
    items = MuseumCollection()
    items.add_item(Exhibit("Mona", "Portrait", 80, 4.5))
    items.add_item(ArtExhibit("Night", "Stars", 60, 4.0, artist="Vincent"))
    return items


def test_empty_collection():
    items = MuseumCollection()
    assert len(items) == 0
    assert list(items) == []
    assert items.describe() == "Total Items: 0"


def test_len_and_order(collection):
    assert len(collection) == 2
    assert [item.title for item in collection] == ["Mona", "Night"]


def test_getitem(collection):
    assert collection[1].artist == "Vincent"
    assert collection[0] == Exhibit("Mona", "Portrait", 80, 4.5)


@pytest.mark.parametrize("index", [2, -1, 10])
def test_getitem_out_of_range(collection, index):
    with pytest.raises(IndexError):
        collection[index]
    assert len(collection) == 2
    assert collection[1].title == "Night"


def test_describe_numbers_items_from_zero(collection):
    text = collection.describe()
    first = collection[0].describe()
    second = collection[1].describe()
    assert text == f"Total Items: 2\n\nItem #0:\n{first}\n\nItem #1:\n{second}"


def test_describe_includes_subclass_details(collection):
    assert "Artist: Vincent" in collection.describe()