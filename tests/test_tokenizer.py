import io

import pytest

from dgpkit.tokenizer import FileTokenizer, StringTokenizer, TokenizerError


def test_splits_on_all_separators():
    tkn = StringTokenizer("a b\tc\nd,e\rf")
    assert list(tkn) == ["a", "b", "c", "d", "e", "f"]


def test_get_returns_false_at_end():
    tkn = StringTokenizer("  one  ")
    assert tkn.get() is True
    assert tkn.token == "one"
    assert tkn.get() is False
    assert tkn.token == ""


def test_empty_input():
    tkn = StringTokenizer("")
    assert tkn.get() is False
    assert list(tkn) == []


def test_comments_are_skipped_by_default():
    tkn = StringTokenizer("# a comment line\nShape {\n}")
    assert list(tkn) == ["Shape", "{", "}"]


def test_comments_kept_when_not_skipping():
    tkn = StringTokenizer("#VRML V2.0 utf8\nGroup", skip_comments=False)
    assert tkn.get()
    assert tkn.token == "#VRML V2.0 utf8"
    assert tkn.get()
    assert tkn.token == "Group"


def test_str_is_current_token():
    tkn = StringTokenizer("solid cube")
    tkn.get()
    tkn.get()
    assert str(tkn) == "cube"


def test_equals_and_expecting():
    tkn = StringTokenizer("facet normal outer")
    assert tkn.expecting("facet")
    assert tkn.equals("facet")
    assert not tkn.equals("normal")
    assert tkn.expecting("normal")
    assert not tkn.expecting("loop")
    assert tkn.token == "outer"


def test_expecting_false_at_end():
    tkn = StringTokenizer("")
    assert tkn.expecting("endsolid") is False


def test_require_success_and_failure():
    tkn = StringTokenizer("DEF")
    tkn.require("missing token")
    assert tkn.token == "DEF"
    with pytest.raises(TokenizerError, match="missing token after DEF"):
        tkn.require("missing token after DEF")


@pytest.mark.parametrize("word", ["t", "true", "T", "TRUE"])
def test_get_bool_true(word):
    assert StringTokenizer(word).get_bool() is True


@pytest.mark.parametrize("word", ["f", "false", "F", "FALSE"])
def test_get_bool_false(word):
    assert StringTokenizer(word).get_bool() is False


@pytest.mark.parametrize("text", ["yes", "True", "", "1"])
def test_get_bool_rejects(text):
    with pytest.raises(TokenizerError):
        StringTokenizer(text).get_bool()


def test_get_int_values():
    tkn = StringTokenizer("42 -7 12abc")
    assert tkn.get_int() == 42
    assert tkn.get_int() == -7
    assert tkn.get_int() == 12


def test_get_int_rejects_non_number():
    with pytest.raises(TokenizerError):
        StringTokenizer("abc").get_int()


def test_get_uint_values():
    tkn = StringTokenizer("17 -1")
    assert tkn.get_uint() == 17
    assert tkn.get_uint() == 4294967295


def test_get_float_values():
    tkn = StringTokenizer("2.5 -0.25 3 .5")
    assert tkn.get_float() == 2.5
    assert tkn.get_float() == -0.25
    assert tkn.get_float() == 3.0
    assert tkn.get_float() == 0.5


def test_get_float_prefix_only():
    assert StringTokenizer("0.75xyz").get_float() == 0.75


def test_get_float_rejects_missing_and_bad():
    with pytest.raises(TokenizerError):
        StringTokenizer("").get_float()
    with pytest.raises(TokenizerError):
        StringTokenizer("vertex").get_float()


def test_vectors_and_color():
    tkn = StringTokenizer("0.8 0.8 0.8  1 2  1 2 3  0 0 1 0")
    assert tkn.get_color() == (0.8, 0.8, 0.8)
    assert tkn.get_vec2f() == (1.0, 2.0)
    assert tkn.get_vec3f() == (1.0, 2.0, 3.0)
    assert tkn.get_vec4f() == (0.0, 0.0, 1.0, 0.0)


def test_vector_with_commas():
    assert StringTokenizer("1,2,3").get_vec3f() == (1.0, 2.0, 3.0)


def test_vec3f_too_short_raises():
    with pytest.raises(TokenizerError):
        StringTokenizer("1 2").get_vec3f()


def test_vec3f_bad_component_raises():
    with pytest.raises(TokenizerError):
        StringTokenizer("1 2 endloop").get_vec3f()


def test_getline_reads_rest_of_line():
    tkn = StringTokenizer("first second third\nnext")
    tkn.get()
    assert tkn.getline() is True
    assert tkn.token == "second third"
    assert tkn.get()
    assert tkn.token == "next"


def test_getline_empty_line():
    tkn = StringTokenizer("\nword")
    assert tkn.getline() is False
    assert tkn.token == ""


def test_nextline_discards_line():
    tkn = StringTokenizer("skip these tokens\nkeep")
    tkn.nextline()
    assert list(tkn) == ["keep"]


def test_file_tokenizer_on_stream():
    stream = io.StringIO("solid name\n facet normal 0 0 1\nendsolid name\n")
    tkn = FileTokenizer(stream)
    assert tkn.expecting("solid")
    assert tkn.get()
    assert tkn.token == "name"
    assert tkn.expecting("facet")
    assert tkn.expecting("normal")
    assert tkn.get_vec3f() == (0.0, 0.0, 1.0)
    assert tkn.expecting("endsolid")


def test_file_tokenizer_on_real_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("Material { shininess 0.5 }\n")
    with path.open() as fp:
        tkn = FileTokenizer(fp)
        assert tkn.expecting("Material")
        assert tkn.expecting("{")
        assert tkn.expecting("shininess")
        assert tkn.get_float() == 0.5
        assert tkn.expecting("}")
        assert tkn.get() is False


def test_string_and_file_tokenizers_agree():
    text = "Group { children [ Shape { } ] }\n# trailing\n"
    assert list(StringTokenizer(text)) == list(FileTokenizer(io.StringIO(text)))