import pytest
import requests

from ghibli_assets import api
from ghibli_assets.errors import FilmListError

from conftest import CASTLE_ID, make_response

FILMS = [
    {
        "id": CASTLE_ID,
        "title": "Castle in the Sky",
        "image": "https://example.com/castle.jpg",
        "movie_banner": "https://example.com/castle-banner.jpg",
    },
    {"id": "12cfb892", "title": "Grave of the Fireflies"},
]


def test_fetch_films_parses_records(mocker):
    session = mocker.Mock()
    session.get.return_value = make_response(json_data=FILMS)

    films = api.fetch_films(session, "https://api.test/")

    session.get.assert_called_once_with("https://api.test/films", timeout=None)
    assert [film.id for film in films] == [CASTLE_ID, "12cfb892"]
    assert films[0].image == "https://example.com/castle.jpg"
    assert films[1].image is None
    assert films[1].movie_banner is None


def test_fetch_films_http_error_is_fatal(mocker):
    session = mocker.Mock()
    resp = make_response(status_code=500)
    resp.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    session.get.return_value = resp

    with pytest.raises(FilmListError):
        api.fetch_films(session)


def test_fetch_films_network_error_is_fatal(mocker):
    session = mocker.Mock()
    session.get.side_effect = requests.ConnectionError("down")

    with pytest.raises(FilmListError):
        api.fetch_films(session)
    assert session.get.call_count == 1


def test_fetch_films_rejects_non_list(mocker):
    session = mocker.Mock()
    session.get.return_value = make_response(json_data={"films": []})

    with pytest.raises(FilmListError):
        api.fetch_films(session)


def test_fetch_films_rejects_invalid_json(mocker):
    session = mocker.Mock()
    resp = make_response()
    resp.json.side_effect = ValueError("no json")
    session.get.return_value = resp

    with pytest.raises(FilmListError):
        api.fetch_films(session)


def test_fetch_films_rejects_record_without_id(mocker):
    session = mocker.Mock()
    session.get.return_value = make_response(json_data=[{"title": "Nameless"}])

    with pytest.raises(FilmListError):
        api.fetch_films(session)


def test_fetch_film_returns_none_on_failure(mocker):
    session = mocker.Mock()
    session.get.side_effect = requests.ConnectionError("down")

    assert api.fetch_film(session, CASTLE_ID) is None


def test_fetch_film_success(mocker):
    session = mocker.Mock()
    session.get.return_value = make_response(json_data=FILMS[0])

    film = api.fetch_film(session, CASTLE_ID, "https://api.test")

    session.get.assert_called_once_with(f"https://api.test/films/{CASTLE_ID}", timeout=None)
    assert film.title == "Castle in the Sky"


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://ghibliapi.vercel.app/people/ba924631", True),
        ("https://ghibliapi.vercel.app/people/", False),
        ("https://ghibliapi.vercel.app/species", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_resource_url(url, expected):
    assert api.is_valid_resource_url(url) is expected


def test_extract_id_from_url():
    assert api.extract_id_from_url("https://ghibliapi.vercel.app/films/abc") == "abc"
    assert api.extract_id_from_url("https://ghibliapi.vercel.app/films/abc/") == "abc"
