import io

from arraylab.demo import main, run_demo


def _lines():
    out = io.StringIO()
    run_demo(out)
    return out.getvalue().splitlines()


def test_reports_full_array():
    lines = _lines()
    assert "[Append] FAILED: Not enough space." in lines
    assert "[Insert] FAILED: Not enough space." in lines


def test_section_headers_in_order():
    lines = _lines()
    positions = [lines.index(title) for title in ("UNION:", "INTERSECTION:", "DIFFERENCE:")]
    assert positions == sorted(positions)


def test_union_results():
    lines = _lines()
    assert "1 3 19 23 2 8 18 7 11" in lines
    assert "1 2 3 5 6 7 11 13 15" in lines


def test_intersection_results():
    lines = _lines()
    assert "3 7" in lines
    assert "1 23" in lines


def test_difference_results():
    lines = _lines()
    assert "1 5 11" in lines
    assert "3 19 2 8" in lines


def test_missing_key_reported_as_minus_one():
    lines = _lines()
    assert "[BinarySearch] Element 7 is at index: -1" in lines
    assert "[RBinarySearch] Element 7 is at index: -1" in lines


def test_main_writes_to_stdout(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out.splitlines()
    assert captured == _lines()