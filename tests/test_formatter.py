import pytest

from src.rename_seq.formatter import RenderContext, format_index, render
from src.rename_seq.pattern import compile_pattern


def test_literal_pattern_renders_verbatim_for_any_index():
    compiled = compile_pattern("asdf.txt")
    for index in (0, 1, 42, 12345):
        assert render(compiled, RenderContext(index=index, padding_width=3)) == "asdf.txt"


@pytest.mark.parametrize(
    "index,width,expected",
    [
        (0, 1, "0"),
        (7, 3, "007"),
        (42, 2, "42"),
        (123, 2, "123"),
        (5, 4, "0005"),
    ],
)
def test_format_index_pads_without_truncating(index, width, expected):
    assert format_index(index, width) == expected


def test_render_prefix_index_suffix():
    compiled = compile_pattern("photo-{padded_idx}.jpg")
    assert render(compiled, RenderContext(index=3, padding_width=3)) == "photo-003.jpg"


def test_render_wider_index_than_padding():
    compiled = compile_pattern("p{padded_idx}")
    assert render(compiled, RenderContext(index=1000, padding_width=2)) == "p1000"


def test_render_context_rejects_zero_width():
    with pytest.raises(ValueError):
        RenderContext(index=0, padding_width=0)


def test_render_context_rejects_negative_index():
    with pytest.raises(ValueError):
        RenderContext(index=-1, padding_width=1)
