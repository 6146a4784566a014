"""Property-based tests for element rendering using Hypothesis.

These tests verify invariants that hold for any tree:
1. Areas render children in append order with no separator
2. Rendering is pure and repeatable
3. Preamble setters are last-write-wins
4. Commands emit braces only when they have parameters
5. Command parameters are concatenated with no delimiter
"""

from string import ascii_letters

from hypothesis import given, settings
from hypothesis import strategies as st

from texbox import Area, Command, Document, Literal, Preamble

names = st.text(alphabet=ascii_letters, min_size=1, max_size=12)
plain = st.text(alphabet=ascii_letters + " .,-", max_size=20)
literals = st.builds(Literal, st.text(max_size=20))
commands = st.builds(
    lambda name, params: Command(name, tuple(params)),
    names,
    st.lists(plain, max_size=4),
)
elements = st.one_of(literals, commands)


class TestOrderProperties:
    """Append order is render order."""

    @given(children=st.lists(elements, max_size=10))
    @settings(max_examples=100)
    def test_area_render_is_concatenation(self, children: list) -> None:
        area = Area()
        for child in children:
            area = area.with_(child)
        assert area.render() == "".join(child.render() for child in children)

    @given(children=st.lists(elements, max_size=10))
    @settings(max_examples=50)
    def test_document_middle_is_concatenation(self, children: list) -> None:
        doc = Document.new()
        for child in children:
            doc = doc.with_(child)
        middle = "".join(child.render() for child in children)
        assert doc.render().endswith(f"\\begin{{document}}\n{middle}\n\\end{{document}}\n")


class TestPurityProperties:
    """Rendering never changes the tree."""

    @given(children=st.lists(elements, max_size=10), title=plain, author=plain)
    @settings(max_examples=50)
    def test_render_twice_is_identical(self, children: list, title: str, author: str) -> None:
        doc = Document.new()
        doc.preamble.set_title(title).set_author(author)
        for child in children:
            doc = doc.with_(child)
        assert doc.render() == doc.render()


class TestPreambleProperties:
    """Setters replace, never accumulate."""

    @given(first=plain, second=plain)
    def test_title_last_write_wins(self, first: str, second: str) -> None:
        preamble = Preamble().set_title(first).set_title(second)
        assert preamble.render() == Preamble().set_title(second).render()

    @given(first=plain, second=plain)
    def test_author_last_write_wins(self, first: str, second: str) -> None:
        preamble = Preamble().set_author(first).set_author(second)
        assert preamble.render() == Preamble().set_author(second).render()


class TestCommandProperties:
    """Brace elision and delimiter-free parameters."""

    @given(name=names)
    def test_no_parameters_no_braces(self, name: str) -> None:
        output = Command(name).render()
        assert output == f"\\{name}"
        assert "{" not in output

    @given(name=names, params=st.lists(plain, min_size=1, max_size=6))
    def test_one_brace_pair_for_any_count(self, name: str, params: list[str]) -> None:
        cmd = Command(name)
        for param in params:
            cmd = cmd.param(param)
        output = cmd.render()
        assert output.count("{") == 1
        assert output.count("}") == 1
        assert output == f"\\{name}{{{''.join(params)}}}"

    @given(a=plain, b=plain)
    def test_two_parameters_concatenate(self, a: str, b: str) -> None:
        assert Command("x").param(a).param(b).render() == f"\\x{{{a}{b}}}"
