import io

import pytest

from dsworkbench.streamops import (
    StreamOperation,
    count_alpha,
    main,
    process_file,
    replace_all,
)


def _copy(text, **options):
    operation = StreamOperation()
    target = io.StringIO()
    operation.copy(io.StringIO(text), target, **options)
    return operation, target.getvalue()


def test_plain_copy_keeps_every_line():
    text = "alpha\n\nbeta"
    _, output = _copy(text)
    assert output == text + "\n"


def test_trailing_newline_produces_extra_empty_line():
    _, output = _copy("x\n")
    assert output == "x\n\n"


def test_remove_blank_lines_counts_removed():
    operation, output = _copy("a\n\nb", remove_blank_lines=True)
    assert output == "a\nb\n"
    assert operation.lines_removed == 1


def test_written_plus_removed_equals_input_lines():
    text = "one\n\ntwo\n\n\nthree\n"
    operation, output = _copy(text, remove_blank_lines=True)
    assert len(output.splitlines()) + operation.lines_removed == len(text.split("\n"))
    assert "" not in output.splitlines()


def test_numbering_is_sequential_from_one():
    text = "first\nsecond\n\nthird"
    _, output = _copy(text, remove_blank_lines=True, number_lines=True)
    lines = output.splitlines()
    numbers = [line.split(" ", 1)[0] for line in lines]
    assert numbers == [str(i) for i in range(1, len(lines) + 1)]
    assert [line.split(" ", 1)[1] for line in lines] == ["first", "second", "third"]


def test_copy_replaces_semicolons():
    _, output = _copy("int x;", old=";", new="SEMI-COLON")
    assert output == "int xSEMI-COLON\n"


def test_alpha_count_taken_before_replacement():
    text = "a;b\nc;d"
    operation, _ = _copy(text, old=";", new="SEMI-COLON")
    assert operation.alpha_count == count_alpha(text)


def test_statistics_reset_between_copies():
    operation = StreamOperation()
    operation.copy(io.StringIO("abc\n\n"), io.StringIO(), remove_blank_lines=True)
    operation.copy(io.StringIO("z"), io.StringIO(), remove_blank_lines=True)
    assert operation.lines_removed == 0
    assert operation.alpha_count == count_alpha("z")


def test_replace_all_every_occurrence():
    assert replace_all("a;b;c", ";", "SEMI-COLON") == "aSEMI-COLONbSEMI-COLONc"


def test_replace_all_without_match_is_identity():
    assert replace_all("nothing here", ";", "SEMI-COLON") == "nothing here"


def test_replace_all_leaves_no_old_text():
    result = replace_all(";;x;;", ";", "SEMI-COLON")
    assert ";" not in result
    assert result.count("SEMI-COLON") == 4


@pytest.mark.parametrize("old, new", [("", "x"), ("a", "ba")])
def test_replace_all_rejects_endless_replacement(old, new):
    with pytest.raises(ValueError):
        replace_all("abc", old, new)


def test_count_alpha_ignores_digits_and_punctuation():
    assert count_alpha("abc123;!") == count_alpha("abc")
    assert count_alpha("") == 0
    assert count_alpha("123 ;") == 0


def test_count_alpha_is_additive():
    assert count_alpha("Hello, ") + count_alpha("World!") == count_alpha("Hello, World!")


def test_process_file_writes_totals(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    text = "int a;\n\nint b;\n"
    source.write_text(text, encoding="utf-8")
    operation = process_file(str(source), str(target))
    lines = target.read_text(encoding="utf-8").split("\n")
    assert lines[-2] == f"Lines Removed: {operation.lines_removed}"
    assert lines[-1] == f"Alphabetic Characters: {count_alpha(text)}"
    assert all(";" not in line for line in lines)


def test_main_with_two_arguments(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("x;\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8").startswith("1 xSEMI-COLON\n")


def test_main_wrong_argument_count_prints_usage(capsys):
    assert main(["only-one"]) == 0
    assert "input_file output_file" in capsys.readouterr().out


def test_main_missing_input_reports_error(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing), str(tmp_path / "out.txt")]) == 1
    assert "[X] Error" in capsys.readouterr().err