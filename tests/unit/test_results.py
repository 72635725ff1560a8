import pytest
from hamcrest import assert_that, equal_to, none

from cypher_http.results import extract_rows, extract_scalar


def test_scalar_from_row_wrapped_data():
    results = [{"columns": ["count"], "data": [{"row": [42]}]}]
    assert_that(extract_scalar(results), equal_to(42))


def test_scalar_from_bare_list_data():
    results = [{"columns": ["count"], "data": [[42]]}]
    assert_that(extract_scalar(results), equal_to(42))


def test_scalar_can_be_an_object():
    student = {"name": "Scott Riggs", "grade": 12}
    results = [{"columns": ["s"], "data": [{"row": [student]}]}]
    assert_that(extract_scalar(results), equal_to(student))


def test_scalar_only_reads_first_result():
    results = [
        {"columns": ["a"], "data": [{"row": [1]}]},
        {"columns": ["b"], "data": [{"row": [2]}]},
    ]
    assert_that(extract_scalar(results), equal_to(1))


@pytest.mark.parametrize(
    "results",
    [
        [],
        None,
        [{}],
        [{"columns": ["a"]}],
        [{"columns": ["a"], "data": []}],
    ],
)
def test_scalar_is_none_without_rows(results):
    assert_that(extract_scalar(results), none())


def test_scalar_is_none_for_multiple_columns():
    results = [{"columns": ["a", "b"], "data": [{"row": [1, 2]}]}]
    assert_that(extract_scalar(results), none())


def test_rows_are_keyed_by_column():
    results = [
        {
            "columns": ["name", "grade"],
            "data": [{"row": ["Tommy Riggs", 12]}, ["Susan Williams", 11]],
        }
    ]
    assert_that(
        extract_rows(results),
        equal_to(
            [
                {"name": "Tommy Riggs", "grade": 12},
                {"name": "Susan Williams", "grade": 11},
            ]
        ),
    )


def test_rows_are_empty_without_data():
    assert_that(extract_rows([{"columns": ["a"], "data": []}]), equal_to([]))
