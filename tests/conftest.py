import pytest


# properly formed INI
WELL_FORMED = [
    ";string values",
    "[fruit]",
    "apple=good",
    "banana=very good",
    "grape=supreme",
    "orange=fantastic",
    ";number values",
    "[vegetables]",
    "garlic=-3",
    "pepper=0.76",
    "pumpkin=-2",
    ";booleans",
    "[nuts]",
    "almond=false",
    "walnut=0",
    "peanut=",
    "cashew=no",
    "coconut=yes",
]

# same data, plenty of garbage around
NOT_WELL_FORMED = [
    "GARBAGE",
    "",
    "; ;; ; ;;;",
    "      ;  string values    ",
    "",
    "[fruit]          ",
    "",
    "   GARBAGE",
    "apple= good",
    "GARB    AGE    ",
    "banana =           very good",
    "   GARBAGE  ",
    "grape=supreme",
    "GARBAGE",
    "orange =fantastic",
    "",
    ";number values",
    "GARBAGE",
    "[    vegetables    ]  ",
    "GARBAGE",
    "",
    "garlic = -3",
    "GARBAGE",
    "pepper= 0.76",
    "pumpkin =-2",
    ";booleans",
    "",
    "               [ nuts ]               ",
    "",
    "almond=false",
    "GARBAGE",
    "  walnut=                  0",
    "  peanut=                    ",
    "cashew                  =no",
    "GARBAGE",
    "     coconut=   yes",
    "",
    "GARBAGE",
]

SECTIONLESS = ["ignored1=value1", "ignored2=value2"]

SECTIONLESS_THEN_DATA = [
    "ignored1=value1",
    "ignored2=value2",
    "[data]",
    "proper1=a",
    "proper2=b",
]

MANY_EMPTY = ["[empty1]", "[empty2]", "[empty3]", "[empty4]", "[empty5]"]

EMPTY_AROUND_DATA = [
    "[empty1]",
    "[empty2]",
    "[notempty]",
    "a=1",
    "b=2",
    "c=3",
    "[empty3]",
    "[empty4]",
    "[empty5]",
]


@pytest.fixture
def write_ini(tmp_path):
    """Writes lines into a file under tmp_path, returns its path."""
    def _write(name, lines, encoding='utf-8', newline='\n'):
        path = tmp_path / name
        path.write_bytes(newline.join(lines).encode(encoding))
        return path
    return _write
