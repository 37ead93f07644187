import json

from primer.movie import MOVIES, Movie, main, marshal, marshal_indent, movie_to_dict, titles

EXPECTED = [
    {
        "Title": "Casablanca",
        "released": 1942,
        "Actors": ["Humphrey Bogart", "Ingrid Bergman"],
    },
    {
        "Title": "Cool Hand Luke",
        "released": 1967,
        "color": True,
        "Actors": ["Paul Newman"],
    },
    {
        "Title": "Bullitt",
        "released": 1968,
        "color": True,
        "Actors": ["Steve McQueen", "Jacqueline Bisset"],
    },
]


def test_marshal_compact_content():
    assert json.loads(marshal(MOVIES)) == EXPECTED


def test_marshal_compact_layout():
    out = marshal(MOVIES)
    assert out.startswith('[{"Title":"Casablanca","released":1942,"Actors":[')
    assert "\n" not in out
    assert '": ' not in out
    assert out.endswith('"Jacqueline Bisset"]}]')


def test_marshal_key_order():
    decoded = json.loads(marshal(MOVIES))
    assert list(decoded[0]) == ["Title", "released", "Actors"]
    assert list(decoded[1]) == ["Title", "released", "color", "Actors"]


def test_marshal_indent_content():
    assert json.loads(marshal_indent(MOVIES)) == EXPECTED


def test_marshal_indent_layout():
    lines = marshal_indent(MOVIES).split("\n")
    assert lines[:4] == [
        "[",
        "    {",
        '        "Title": "Casablanca",',
        '        "released": 1942,',
    ]
    assert lines[5] == '            "Humphrey Bogart",'
    assert lines[-2:] == ["    }", "]"]


def test_color_omitted_when_false():
    assert "color" not in movie_to_dict(MOVIES[0])
    assert movie_to_dict(MOVIES[1])["color"] is True


def test_round_trip_titles():
    assert titles(marshal(MOVIES)) == [m.title for m in MOVIES]
    assert titles(marshal_indent(MOVIES)) == [m.title for m in MOVIES]


def test_decoded_matches_fields():
    decoded = json.loads(marshal([Movie("Heat", 1995, True, ["Al Pacino"])]))
    assert decoded[0]["released"] == 1995
    assert decoded[0]["Actors"] == ["Al Pacino"]


def test_html_characters_escaped():
    out = marshal([Movie("<&>", 2000)])
    assert "\\u003c\\u0026\\u003e" in out
    assert titles(out) == ["<&>"]


def test_main_prints_titles(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == marshal(MOVIES)
    assert out[-1] == "[{Casablanca} {Cool Hand Luke} {Bullitt}]"