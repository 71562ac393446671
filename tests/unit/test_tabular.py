import io

import pandas as pd

from csample.parsing.tabular import line_to_row, lines_to_rows


def test_line_with_structure_attribute():
    row = line_to_row("  7: <text_id a1>: the old <house> stood")
    assert row == '"7","a1","the old","house","stood"'


def test_line_without_structure_attribute():
    row = line_to_row("   3: left side <match> right side")
    assert row == '"3","left side","match","right side"'


def test_double_quotes_are_escaped():
    row = line_to_row('  2: <text_id b2>: a "quoted" <home> is here')
    assert row == "\"2\",\"b2\",\"a ''quoted''\",\"home\",\"is here\""


def test_rows_parse_as_csv():
    lines = [
        "  1: <text_id a1>: the old <house> stood there",
        "  2: <text_id b2>: a \"quoted\" <home> is here",
        " 13: <text_id c3>: into the <garden shed> went",
    ]
    rows = lines_to_rows(lines)
    df = pd.read_csv(io.StringIO("\n".join(rows) + "\n"), header=None)

    assert df.shape == (3, 5)
    assert df[0].tolist() == [1, 2, 13]
    assert df[1].tolist() == ["a1", "b2", "c3"]
    assert df[3].tolist() == ["house", "home", "garden shed"]
    assert df.iloc[1, 2] == "a ''quoted''"
    assert df.iloc[2, 4] == "went"
