import pytest

from nbfc.program_name import program_name


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/usr/bin/nbfc_service", "nbfc_service"),
        ("./ec_probe", "ec_probe"),
        ("nbfc", "nbfc"),
        ("a/b/", "b/"),
        ("a//", "/"),
        ("/", "/"),
        ("", ""),
    ],
)
def test_program_name(path, expected):
    assert program_name(path) == expected


def test_result_is_suffix_of_path():
    path = "/opt/tools/bin/nbfc"
    name = program_name(path)
    assert path.endswith(name)
    assert "/" not in name