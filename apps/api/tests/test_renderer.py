from promptlab.services import FormattedLine, LineKind, iter_formatted_lines


def test_sectioned_lines_split_header_and_content():
    lines = list(iter_formatted_lines("C – Kontext: ...\nL – Länge: 100 Wörter"))
    assert lines == [
        FormattedLine(kind=LineKind.SECTIONED, header="C – ", content="Kontext: ..."),
        FormattedLine(kind=LineKind.SECTIONED, header="L – ", content="Länge: 100 Wörter"),
    ]


def test_plain_line_kept_as_trimmed_text():
    assert list(iter_formatted_lines("  Hier ist Ihr Prompt.  ")) == [
        FormattedLine(kind=LineKind.PLAIN, text="Hier ist Ihr Prompt."),
    ]


def test_blank_lines_produce_nothing():
    lines = list(iter_formatted_lines("\n   \nT – Aufgabe\n\t\n\n"))
    assert len(lines) == 1
    assert lines[0].header == "T – "


def test_empty_body():
    assert list(iter_formatted_lines("")) == []


def test_order_is_preserved():
    body = "Einleitung\nT – Eins\nZwischentext\nC – Zwei"
    kinds = [line.kind for line in iter_formatted_lines(body)]
    assert kinds == [LineKind.PLAIN, LineKind.SECTIONED, LineKind.PLAIN, LineKind.SECTIONED]


def test_pattern_mid_line_is_not_split():
    line = "Nutze das Muster T – Inhalt nur am Anfang"
    assert list(iter_formatted_lines(line)) == [FormattedLine(kind=LineKind.PLAIN, text=line)]


def test_only_first_separator_splits():
    (line,) = iter_formatted_lines("R – Rolle – Experte")
    assert line.header == "R – "
    assert line.content == "Rolle – Experte"


def test_hyphen_is_not_a_section_separator():
    (line,) = iter_formatted_lines("T - Aufgabe")
    assert line.kind is LineKind.PLAIN


def test_lowercase_prefix_is_plain():
    (line,) = iter_formatted_lines("t – Aufgabe")
    assert line.kind is LineKind.PLAIN


def test_multi_letter_prefix_is_header_by_default():
    (line,) = iter_formatted_lines("TC – Kombiniert")
    assert line.kind is LineKind.SECTIONED
    assert line.header == "TC – "


def test_crlf_line_endings():
    lines = list(iter_formatted_lines("T – Eins\r\nC – Zwei\r\n"))
    assert [line.content for line in lines] == ["Eins", "Zwei"]


class TestStrictHeaders:
    def test_known_letter_is_header(self):
        (line,) = iter_formatted_lines("E – Bewertung", strict=True)
        assert line.kind is LineKind.SECTIONED

    def test_unknown_letter_is_plain(self):
        (line,) = iter_formatted_lines("X – foo", strict=True)
        assert line == FormattedLine(kind=LineKind.PLAIN, text="X – foo")

    def test_letter_run_is_plain(self):
        (line,) = iter_formatted_lines("TC – foo", strict=True)
        assert line.kind is LineKind.PLAIN

    def test_framework_name_is_plain(self):
        (line,) = iter_formatted_lines("CLEAR – Überblick", strict=True)
        assert line.kind is LineKind.PLAIN
