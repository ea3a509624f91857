"""Unit tests for table extraction from HTML markup."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from bs4 import BeautifulSoup

from doc_enhancer.tables.html import extract_from_markup

TWO_BY_THREE = """
<p>Intro</p>
<table>
  <tr><th>Part</th><th>Qty</th><th>Price</th></tr>
  <tr><td> Bolt </td><td>10</td><td>0.25</td></tr>
</table>
"""


class TestExtractFromMarkup:

    def test_two_by_three(self):
        tables = extract_from_markup(TWO_BY_THREE)
        assert len(tables) == 1
        table = tables[0]
        assert table.index == 1
        assert table.row_count == 2
        assert table.column_count == 3
        assert table.rows == [["Part", "Qty", "Price"], ["Bolt", "10", "0.25"]]

    def test_accepts_parsed_tree(self):
        soup = BeautifulSoup(TWO_BY_THREE, "html.parser")
        assert extract_from_markup(soup)[0].rows[1] == ["Bolt", "10", "0.25"]

    def test_accepts_table_tag(self):
        soup = BeautifulSoup(TWO_BY_THREE, "html.parser")
        assert extract_from_markup(soup.find("table"))[0].row_count == 2

    def test_tables_in_document_order(self):
        html = "<table><tr><td>first</td></tr></table><p>x</p><table><tr><td>second</td></tr></table>"
        tables = extract_from_markup(html)
        assert [t.rows[0][0] for t in tables] == ["first", "second"]
        assert [t.index for t in tables] == [1, 2]

    def test_empty_table_skipped(self):
        html = "<table></table><table><tr></tr></table><table><tr><td>kept</td></tr></table>"
        tables = extract_from_markup(html)
        assert len(tables) == 1
        assert tables[0].index == 1
        assert tables[0].rows == [["kept"]]

    def test_rows_inside_tbody(self):
        html = "<table><thead><tr><th>A</th><th>B</th></tr></thead><tbody><tr><td>1</td><td>2</td></tr></tbody></table>"
        assert extract_from_markup(html)[0].rows == [["A", "B"], ["1", "2"]]

    def test_nested_table_not_extracted_separately(self):
        html = (
            "<table>"
            "<tr><td>outer</td><td><table><tr><td>inner</td><td>x</td><td>y</td></tr></table></td></tr>"
            "<tr><td>a</td><td>b</td></tr>"
            "</table>"
        )
        tables = extract_from_markup(html)
        assert len(tables) == 1
        assert tables[0].row_count == 2
        assert tables[0].rows[1] == ["a", "b"]

    def test_irregular_rows_use_max_column_count(self):
        html = "<table><tr><td>a</td></tr><tr><td>b</td><td>c</td><td>d</td></tr></table>"
        assert extract_from_markup(html)[0].column_count == 3

    def test_cell_text_includes_inline_markup(self):
        html = "<table><tr><td><p>Total <strong>due</strong></p></td><td>5</td></tr></table>"
        assert extract_from_markup(html)[0].rows == [["Total due", "5"]]

    def test_no_tables(self):
        assert extract_from_markup("<p>No tables here.</p>") == []

    def test_markup_tables_have_no_line_span(self):
        table = extract_from_markup(TWO_BY_THREE)[0]
        assert table.start_line is None
        assert table.end_line is None
