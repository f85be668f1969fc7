from .base import Base
from commentini import (
    Document,
    IniReader,
    IniSyntaxError,
    KeyNullError,
    ParseContext,
    Parameters,
    DuplicateSectionWarning,
    DanglingCommentWarning,
    loads,
    parse_lines,
    read_ini,
)
from io import StringIO
import pytest
import warnings


class TestReadValues:

    test_parameters = [
        {"value": "value1", "result": "value1"},
        {"value": "  padded  ", "result": "padded"},
        {"value": "a=b=c", "result": "a=b=c"},
        {"value": "# not a comment", "result": "# not a comment"},
        {"value": "", "result": None},
        {"value": "   ", "result": ""},
        {"value": "value1", "result": "value1", "delimiter": " = "},
        {"value": "value1", "result": "value1", "delimiter": " ="},
        {"value": "", "result": None, "delimiter": " ="},
        {"value": "value1", "result": "value1", "in_section": False},
        {"value": "", "result": None, "in_section": False},
        {"value": "value1", "result": "value1", "comments": 1},
        {"value": "value1", "result": "value1", "comments": 3},
        {"value": "value1", "result": "value1", "comments": 2, "in_section": False},
    ]

    @pytest.mark.parametrize(
        *Base.create_parametrization(Base.test_value, parameters=test_parameters)
    )
    def test_value(self, value, result, delimiter, in_section, comments):
        Base().test_value(value, result, delimiter, in_section, comments)


class TestReadStructure:

    def test_global_and_section_pairs(self):
        base = Base()
        base.add_pair()
        base.add_empty_line()
        base.add_section()
        base.add_pair()
        base.test_read()

    def test_multiple_sections_and_global_pairs(self):
        base = Base()
        base.add_pair()
        base.add_pair()
        base.add_empty_line()
        for _ in range(3):
            base.add_section()
            base.add_pair()
            base.add_empty_line()
        document = base.test_read()
        assert len(document.global_pairs) == 2
        assert len(document.sections) == 3

    def test_order_is_kept(self):
        base = Base()
        keys = [base.add_pair() for _ in range(5)]
        names = []
        for _ in range(5):
            names.append(base.add_section())
            base.add_pair()
        document = base.test_read()
        assert list(document.global_pairs) == keys
        assert list(document.sections) == names

    def test_empty_lines_are_ignored(self):
        base = Base()
        base.add_section()
        base.add_empty_line()
        base.add_pair()
        base.add_empty_line("   \t")
        base.add_section()
        base.add_empty_line()
        base.add_pair()
        base.test_read()

    def test_empty_content(self):
        document = loads("")
        assert len(document.sections) == 0
        assert len(document.global_pairs) == 0
        assert document == Document()

    def test_empty_section(self):
        document = loads("[section1]\n")
        assert "section1" in document.sections
        assert len(document.sections["section1"].pairs) == 0

    def test_section_followed_by_section(self):
        document = loads("[first]\n# comment\n\n[second]\nkey=value\n")
        assert len(document.sections["first"].pairs) == 0
        assert document.sections["second"].pairs["key"].raw == "value"
        assert document.sections["second"].trimmed_comment == "comment"

    def test_section_name_is_trimmed(self):
        document = loads("[  spaced name ]\n")
        assert list(document.sections) == ["spaced name"]

    def test_section_names_are_case_sensitive(self):
        document = loads("[Section]\na=1\n[section]\na=2\n")
        assert document.sections["Section"].pairs["a"].raw == "1"
        assert document.sections["section"].pairs["a"].raw == "2"

    def test_whitespace_around_key_and_value(self):
        document = loads("[section1]\nkey1 = value1\nkey2= value2 \nkey3 =value3\n")
        pairs = document.sections["section1"].pairs
        assert [pairs[f"key{i}"].raw for i in (1, 2, 3)] == [
            "value1",
            "value2",
            "value3",
        ]

    def test_windows_line_endings(self):
        document = loads("[section]\r\nkey=value\r\n")
        assert document.sections["section"].pairs["key"].raw == "value"

    def test_carriage_return_line_endings(self):
        document = loads("[s]\ra=1\r")
        assert len(document.global_pairs) == 0
        assert document.sections["s"].pairs["a"].raw == "1"


class TestDuplicates:

    def test_duplicate_key_keeps_last_value(self):
        document = loads("key=value1\nkey=value2\n")
        assert len(document.global_pairs) == 1
        assert document.global_pairs["key"].raw == "value2"

    def test_duplicate_key_keeps_last_comment(self):
        document = loads("[s]\n# first\nkey=1\nother=2\n# second\nkey=3\n")
        pairs = document.sections["s"].pairs
        assert pairs.get_key("key").trimmed_comment == "second"
        # position of the first occurrence
        assert list(pairs) == ["key", "other"]

    def test_same_key_in_different_scopes(self):
        document = loads("key=global\n[s]\nkey=local\n")
        assert document.global_pairs["key"].raw == "global"
        assert document.sections["s"].pairs["key"].raw == "local"

    def test_duplicate_section_replaces_content(self):
        with pytest.warns(DuplicateSectionWarning):
            document = loads("[s]\na=1\n[t]\n[s]\nb=2\n")
        assert list(document.sections["s"].pairs) == ["b"]
        assert list(document.sections) == ["s", "t"]


class TestComments:

    @pytest.mark.parametrize("prefix", ["#", ";"])
    def test_comments_are_attached(self, prefix):
        base = Base(comment_prefix=prefix)
        base.add_comment()
        base.add_pair()
        base.add_comment()
        base.add_comment()
        base.add_section()
        base.add_comment()
        base.add_pair()
        base.add_pair()
        base.test_read()

    def test_comment_lines_are_concatenated(self):
        document = loads("# foo\n# bar\n[s]\n")
        assert document.sections["s"].comment == " foo bar"
        assert document.sections["s"].trimmed_comment == "foo bar"

    def test_empty_lines_keep_pending_comment(self):
        document = loads("; note\n\n   \n[s]\n")
        assert document.sections["s"].trimmed_comment == "note"

    def test_comment_is_used_once(self):
        document = loads("# note\n[s]\nkey=value\n")
        assert document.sections["s"].has_comment
        assert not document.sections["s"].pairs.get_key("key").has_comment

    def test_comment_suppression(self):
        enabled = loads("# note\n[s]\n")
        disabled = loads("# note\n[s]\n", parse_comments=False)
        assert enabled.sections["s"].trimmed_comment == "note"
        assert not disabled.sections["s"].has_comment
        assert disabled.sections["s"].trimmed_comment == ""

    def test_suppression_keeps_buffer(self):
        context = ParseContext(parse_comments=False)
        context.feed("# note")
        context.feed("[s]")
        assert context.document.sections["s"].comment == ""
        assert context.comment_buffer == [" note"]

    def test_dangling_comment_warns(self):
        with pytest.warns(DanglingCommentWarning):
            loads("key=value\n# nothing follows\n")

    def test_dangling_comment_without_comment_parsing(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            loads("key=value\n# nothing follows\n", parse_comments=False)


class TestErrors:

    def test_invalid_line(self):
        with pytest.raises(IniSyntaxError) as excinfo:
            loads("[section]\nkey=value\ninvalid_line\n")
        assert excinfo.value.line_number == 3
        assert excinfo.value.line == "invalid_line"
        assert excinfo.value.detail is None
        assert str(excinfo.value) == "Error in line 3: 'invalid_line'"

    def test_invalid_line_is_counted_with_empty_lines(self):
        base = Base()
        base.add_empty_line()
        base.add_comment()
        base.add_section()
        base.add_pair()
        base.add_empty_line()
        line = base.add_invalid_entity()
        with pytest.raises(IniSyntaxError) as excinfo:
            loads(base.content)
        assert excinfo.value.line_number == base.line_count
        assert excinfo.value.line == line

    def test_child_section(self):
        with pytest.raises(IniSyntaxError) as excinfo:
            loads("[.child]\n")
        assert excinfo.value.detail == "child section without parent"
        assert excinfo.value.line_number == 1
        assert str(excinfo.value) == (
            "Error 'child section without parent' in line 1: '[.child]'"
        )

    @pytest.mark.parametrize(
        "line",
        [
            "[a]]",
            "[[a]",
            "[a][b]",
            " [a]",
            "[a",
            "a]",
            "  # indented comment",
        ],
    )
    def test_invalid_section_lines(self, line):
        with pytest.raises(IniSyntaxError):
            loads(f"{line}\n")

    def test_blank_key(self):
        with pytest.raises(KeyNullError):
            loads("[s]\n = value\n")


class TestIniReader:

    def test_parse_resets_state(self):
        stream = StringIO("[s]\nkey=value\n")
        reader = IniReader(stream)
        first = reader.parse()
        stream.seek(0)
        second = reader.parse()
        assert first == second
        assert first is not second

    def test_parse_after_failure(self):
        stream = StringIO("oops\n")
        reader = IniReader(stream)
        with pytest.raises(IniSyntaxError):
            reader.parse()
        stream.seek(0)
        stream.truncate()
        stream.write("key=value\n")
        stream.seek(0)
        assert reader.parse().global_pairs["key"].raw == "value"

    def test_parse_comments_flag(self):
        reader = IniReader(StringIO("# note\nkey=value\n"))
        assert reader.parse_comments
        reader.parse_comments = False
        assert not reader.parse().global_pairs.get_key("key").has_comment

    def test_parameters_are_copied(self):
        parameters = Parameters()
        reader = IniReader(StringIO(""), parameters, parse_comments=False)
        assert not reader.parse_comments
        assert parameters.parse_comments

    def test_context_closes_stream(self):
        stream = StringIO("[s]\n")
        with IniReader(stream) as reader:
            reader.parse()
        assert stream.closed

    def test_context_closes_stream_on_error(self):
        stream = StringIO("invalid\n")
        with pytest.raises(IniSyntaxError):
            with IniReader(stream) as reader:
                reader.parse()
        assert stream.closed

    def test_parse_lines(self):
        document = parse_lines(["[s]\n", "a=1", "b=\n"])
        assert document.sections["s"].pairs["a"].raw == "1"
        assert document.sections["s"].pairs["b"].is_absent


class TestFiles:

    def test_read_ini(self, tmp_path):
        base = Base()
        base.add_comment()
        base.add_pair()
        base.add_section()
        base.add_comment()
        base.add_pair()
        base.test_read(tmp_path)

    def test_read_ini_with_encoding(self, tmp_path):
        path = tmp_path / "latin.ini"
        path.write_bytes("[s]\nname=Müller\n".encode("latin-1"))
        document = read_ini(path, encoding="latin-1")
        assert document.sections["s"].pairs["name"].raw == "Müller"

    def test_read_ini_carriage_returns(self, tmp_path):
        path = tmp_path / "mac.ini"
        path.write_bytes(b"[s]\ra=1\r")
        document = read_ini(path)
        assert document == read_ini(path, encoding="utf-8")
        assert document.sections["s"].pairs["a"].raw == "1"
