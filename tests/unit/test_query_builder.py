import pytest
from cymple.builder import QueryBuilder
from hamcrest import assert_that, equal_to, is_not, contains_string

from cypher_http.properties import properties_to_set_clauses
from cypher_http.query_builder import CypherQueryBuilder


@pytest.fixture
def query_builder():
    return CypherQueryBuilder()


def test_fragments_are_joined_with_single_spaces(query_builder):
    query_builder.add("CREATE (s:Student {name:{student}.name})")
    query_builder.add("RETURN s")
    assert_that(
        query_builder.render(),
        equal_to("CREATE (s:Student {name:{student}.name}) RETURN s"),
    )


def test_list_of_fragments_is_flattened(query_builder):
    query_builder.add(["MATCH (s:Student)", "WHERE s.grade = 12"])
    query_builder.add("RETURN s")
    assert_that(
        str(query_builder), equal_to("MATCH (s:Student) WHERE s.grade = 12 RETURN s")
    )


def test_empty_builder_renders_empty_string(query_builder):
    assert_that(query_builder.render(), equal_to(""))


@pytest.mark.parametrize(
    "fragments",
    [
        ["MATCH (n)\n", "\tRETURN n"],
        ["  MATCH (n)  ", "\r\nWHERE n.x = 1\r\n", "RETURN\tn"],
        ["MATCH (n)\nRETURN n"],
        ["", "   ", "\n\n"],
        [["MATCH   (n)", "  \t RETURN n "]],
    ],
)
def test_rendered_statement_has_no_control_characters_or_double_spaces(
    query_builder, fragments
):
    for fragment in fragments:
        query_builder.add(fragment)
    rendered = query_builder.render()
    for forbidden in ("\n", "\r", "\t", "  "):
        assert_that(rendered, is_not(contains_string(forbidden)))
    assert_that(rendered, equal_to(rendered.strip()))


@pytest.mark.parametrize(
    "fragment,expected",
    [
        ("MATCH (n)\nRETURN n", "MATCH (n)RETURN n"),
        ("a\tb", "ab"),
        ("a\r\nb", "ab"),
        ("MATCH (n)\n  RETURN n", "MATCH (n) RETURN n"),
    ],
)
def test_lone_line_breaks_and_tabs_are_dropped(query_builder, fragment, expected):
    query_builder.add(fragment)
    assert_that(query_builder.render(), equal_to(expected))


def test_set_clauses_stay_separate_once_rendered(query_builder):
    query_builder.add("MATCH (s:Student {name:{student}.name})")
    query_builder.add(
        properties_to_set_clauses("s", "student", {"name": "A", "grade": 9})
    )
    assert_that(
        query_builder.render(),
        equal_to(
            "MATCH (s:Student {name:{student}.name}) "
            "SET s.name = {student}.name SET s.grade = {student}.grade"
        ),
    )


def test_render_does_not_consume_fragments(query_builder):
    query_builder.add("RETURN 1")
    assert_that(query_builder.render(), equal_to(query_builder.render()))
    assert_that(query_builder.fragments, equal_to(["RETURN 1"]))


def test_add_is_chainable(query_builder):
    query_builder.add("MATCH (n)").add("RETURN n")
    assert_that(query_builder.render(), equal_to("MATCH (n) RETURN n"))


def test_accepts_cymple_builders_as_fragments(query_builder):
    query_builder.add(
        QueryBuilder().match().node(labels="Student", ref_name="s").detach_delete("s")
    )
    assert_that(query_builder.render(), equal_to("MATCH (s: Student) DETACH DELETE s"))
