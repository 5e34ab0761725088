import json

import pytest

from museumdesk.exhibit import (
    ArtExhibit,
    Exhibit,
    HistoryExhibit,
    TechExhibit,
    exhibit_from_dict,
)


@pytest.mark.parametrize(
    "popularity, status",
    [
        (100, "Highly Popular"),
        (75, "Highly Popular"),
        (74, "Moderately Popular"),
        (50, "Moderately Popular"),
        (49, "Somewhat Popular"),
        (25, "Somewhat Popular"),
        (24, "Not Popular"),
        (0, "Not Popular"),
    ],
)
def test_popularity_status_thresholds(popularity, status):
    assert Exhibit("t", "d", popularity, 1.0).popularity_status() == status


def test_increment_popularity_moves_status_over_threshold():
    exhibit = Exhibit("t", "d", 74, 1.0)
    exhibit.increment_popularity()
    assert exhibit.popularity == 75
    assert exhibit.popularity_status() == "Highly Popular"


def test_defaults_are_empty():
    exhibit = Exhibit()
    assert (exhibit.title, exhibit.description, exhibit.popularity, exhibit.rating) == (
        "",
        "",
        0,
        0.0,
    )


def test_describe_lists_fields():
    exhibit = Exhibit("Mona", "Portrait", 80, 4.5)
    assert exhibit.describe() == (
        "Title: Mona\nDescription: Portrait\nPopularity: 80\nRating: 4.5"
    )


def test_describe_whole_rating_has_no_decimal_point():
    assert Exhibit("Mona", "Portrait", 80, 3.0).describe().endswith("Rating: 3")


@pytest.mark.parametrize(
    "exhibit, last_line",
    [
        (ArtExhibit("a", "b", 1, 2.0, artist="Leo"), "Artist: Leo"),
        (HistoryExhibit("a", "b", 1, 2.0, era="Bronze Age"), "Era: Bronze Age"),
        (TechExhibit("a", "b", 1, 2.0, technology="Steam"), "Technology: Steam"),
    ],
)
def test_subclass_describe_appends_extra_field(exhibit, last_line):
    lines = exhibit.describe().split("\n")
    assert lines[-1] == last_line
    assert lines[0] == "Title: a"
    assert len(lines) == 5


def test_str_joins_title_and_description():
    assert str(Exhibit("Mona", "Portrait", 1, 1.0)) == "MonaPortrait"


def test_to_dict_keys():
    assert Exhibit("t", "d", 3, 2.5).to_dict() == {
        "title": "t",
        "description": "d",
        "popularity": 3,
        "rating": 2.5,
    }


def test_art_to_dict_adds_artist():
    data = ArtExhibit("t", "d", 3, 2.5, artist="Leo").to_dict()
    assert data["artist"] == "Leo"
    assert set(data) == {"title", "description", "popularity", "rating", "artist"}


@pytest.mark.parametrize(
    "exhibit",
    [
        Exhibit("t", "d", 3, 2.5),
        ArtExhibit("t", "d", 3, 2.5, artist="Leo"),
        HistoryExhibit("t", "d", 3, 2.5, era="Roman"),
        TechExhibit("t", "d", 3, 2.5, technology="Radio"),
    ],
)
def test_round_trip_through_json(exhibit):
    data = json.loads(json.dumps(exhibit.to_dict()))
    restored = exhibit_from_dict(data)
    assert type(restored) is type(exhibit)
    assert restored == exhibit


def test_from_dict_of_subclass_keeps_type():
    data = HistoryExhibit("t", "d", 3, 2.5, era="Roman").to_dict()
    restored = HistoryExhibit.from_dict(data)
    assert isinstance(restored, HistoryExhibit)
    assert restored.era == "Roman"


def test_exhibit_from_dict_prefers_artist():
    data = {**Exhibit("t", "d", 1, 1.0).to_dict(), "artist": "Leo", "era": "Roman"}
    restored = exhibit_from_dict(data)
    assert type(restored) is ArtExhibit
    assert restored.artist == "Leo"
    assert restored.title == "t"
    assert restored == ArtExhibit("t", "d", 1, 1.0, artist="Leo")


def test_from_dict_missing_key():
    with pytest.raises(KeyError):
        Exhibit.from_dict({"title": "t", "description": "d", "popularity": 1})


def test_art_from_dict_missing_artist():
    with pytest.raises(KeyError):
        ArtExhibit.from_dict(Exhibit("t", "d", 1, 1.0).to_dict())


@pytest.mark.parametrize(
    "key, value",
    [("title", 5), ("popularity", "many"), ("rating", True)],
)
def test_from_dict_wrong_type(key, value):
    data = {**Exhibit("t", "d", 1, 1.0).to_dict(), key: value}
    with pytest.raises(TypeError):
        Exhibit.from_dict(data)


def test_from_dict_converts_numbers():
    restored = Exhibit.from_dict(
        {"title": "t", "description": "d", "popularity": 7.0, "rating": 4}
    )
    assert restored.popularity == 7
    assert isinstance(restored.popularity, int)
    assert restored.rating == 4.0


def test_equality_compares_all_fields():
    assert Exhibit("t", "d", 1, 1.0) == Exhibit("t", "d", 1, 1.0)
    assert Exhibit("t", "d", 1, 1.0) != Exhibit("t", "d", 2, 1.0)