from placement_portal.services.csv_parser import CSVParser


def test_plain_fields():
    assert CSVParser.parse_line("Ada,R1,CSE") == ["Ada", "R1", "CSE"]


def test_quoted_field_keeps_comma():
    assert CSVParser.parse_line('"Lovelace, Ada",R1') == ["Lovelace, Ada", "R1"]


def test_quotes_are_stripped():
    assert CSVParser.parse_line('"Ada","R1"') == ["Ada", "R1"]


def test_empty_line_is_single_empty_field():
    assert CSVParser.parse_line("") == [""]


def test_trailing_comma_keeps_empty_field():
    assert CSVParser.parse_line("Ada,R1,") == ["Ada", "R1", ""]


def test_join_then_parse_returns_fields():
    fields = ["name", "roll 1", "", "CSE", "2020-2024"]
    assert CSVParser.parse_line(",".join(fields)) == fields


def test_split_rows_numbers_physical_lines():
    headers, rows = CSVParser.split_rows("name,rollNumber\n\nAda,R1\r\nBob\n")
    assert headers == ["name", "rollNumber"]
    assert rows == [
        (3, {"name": "Ada", "rollNumber": "R1"}),
        (4, {"name": "Bob", "rollNumber": ""}),
    ]


def test_split_rows_empty_text():
    assert CSVParser.split_rows("  \n\n") == ([], [])


def test_decode_drops_bom():
    assert CSVParser.decode("\ufeffname\nAda".encode("utf-8")) == "name\nAda"


def test_decode_drops_invalid_utf8_and_warns(caplog):
    with caplog.at_level("WARNING", logger="placement_portal"):
        text = CSVParser.decode("name\nJosé".encode("latin-1"))
    assert text == "name\nJos"
    assert "not valid UTF-8" in caplog.text


def test_decode_valid_utf8_keeps_accents(caplog):
    with caplog.at_level("WARNING", logger="placement_portal"):
        assert CSVParser.decode("name\nJosé".encode("utf-8")) == "name\nJosé"
    assert caplog.text == ""
