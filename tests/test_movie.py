import pytest

from gopl import movie

COMPACT = (
    '[{"Title":"Casablanca","released":1942,"Actors":["Humphrey Bogart","Ingr'
    'id Bergman"]},{"Title":"Cool Hand Luke","released":1967,"color":true,"Ac'
    'tors":["Paul Newman"]},{"Title":"Bullitt","released":1968,"color":true,"'
    'Actors":["Steve McQueen","Jacqueline Bisset"]}]'
)


def test_marshal():
    assert movie.marshal(movie.MOVIES) == COMPACT


def test_indent_layout():
    text = movie.marshal_indent(movie.MOVIES)
    assert text.splitlines()[:4] == ["[", "    {", '        "Title": "Casablanca",',
                                     '        "released": 1942,']


def test_titles_round_trip():
    for text in (movie.marshal(movie.MOVIES), movie.marshal_indent(movie.MOVIES)):
        assert movie.titles(text) == ["Casablanca", "Cool Hand Luke", "Bullitt"]


def test_html_escaped():
    text = movie.marshal([movie.Movie("<a>", 1)])
    assert "<" not in text
    assert movie.titles(text) == ["<a>"]


def test_titles_rejects_non_array():
    with pytest.raises(ValueError):
        movie.titles('{"Title": "x"}')