import pytest

from monkey_explorer.models import GeoLocation, Monkey


def test_from_dict_accepts_any_field_casing():
    m = Monkey.from_dict({"NAME": "Baboon", "location": "Africa & Asia", "Population": 10000, "LATITUDE": -8.783195, "longitude": 34.508523})
    assert m.name == "Baboon"
    assert m.location == "Africa & Asia"
    assert m.population == 10000
    assert m.latitude == -8.783195


def test_from_dict_defaults_optional_fields():
    m = Monkey.from_dict({"Name": "Henry"})
    assert m.location is None and m.details is None and m.image is None
    assert m.population == 0
    assert m.coordinates == GeoLocation(0.0, 0.0)


def test_missing_name_rejected():
    with pytest.raises(ValueError):
        Monkey.from_dict({"Location": "nowhere"})


@pytest.mark.parametrize("population", [-1, "many", 1.5, True])
def test_bad_population_rejected(population):
    with pytest.raises(ValueError):
        Monkey(name="oldie", population=population)


def test_non_numeric_coordinates_rejected():
    with pytest.raises(ValueError):
        Monkey.from_dict({"Name": "lost", "Latitude": "north"})


def test_integer_coordinates_become_floats():
    m = Monkey(name="roundy", latitude=10, longitude=-20)
    assert isinstance(m.latitude, float)
    assert str(m.coordinates) == "10.000000, -20.000000"


def test_coordinates_formatted_to_six_places():
    m = Monkey(name="Baboon", latitude=-8.783195, longitude=34.508523)
    assert str(m.coordinates) == "-8.783195, 34.508523"


def test_monkey_is_immutable():
    m = Monkey(name="luna")
    with pytest.raises(AttributeError):
        m.name = "sol"


def test_blank_name_is_representable_but_unnamed():
    m = Monkey(name="   ")
    assert not m.is_named


def test_to_dict_uses_dataset_field_names():
    d = Monkey(name="luna", population=2).to_dict()
    assert d["Name"] == "luna"
    assert d["Population"] == 2
    assert Monkey.from_dict(d) == Monkey(name="luna", population=2)
