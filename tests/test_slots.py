import pytest

from slotgen.dom import parse_fragment
from slotgen.renderer import Renderer
from slotgen.slots import find_inserts

BUTTON = "<button><slot>Submit</slot></button>"
PARAGRAPH = '<p><slot name="my-text">My default text</slot></p>'
CONTENT = '<h2>My Content</h2><slot name="title"><h3>Title</h3></slot><slot></slot>'


def _render(templates: dict, markup: str) -> str:
    registry = {tag: (lambda source: lambda attrs: source)(source) for tag, source in templates.items()}
    return Renderer(registry, body_only=True).render(markup)


def test_empty_element_shows_default_content():
    html = _render({"my-button": BUTTON}, "<my-button></my-button>")

    assert html == "<my-button><button>Submit</button></my-button>"


def test_whitespace_counts_as_content():
    html = _render({"my-button": BUTTON}, "<my-button> </my-button>")

    assert html == "<my-button><button> </button></my-button>"
    assert "Submit" not in html


def test_content_replaces_unnamed_slot():
    html = _render({"my-button": BUTTON}, "<my-button>Let's Go!</my-button>")

    assert html == "<my-button><button>Let's Go!</button></my-button>"


def test_unfilled_named_slot_wraps_default_text_in_span():
    html = _render({"my-paragraph": PARAGRAPH}, "<my-paragraph></my-paragraph>")

    assert html == '<my-paragraph><p><span slot="my-text">My default text</span></p></my-paragraph>'


def test_named_slot_is_replaced_by_insert():
    html = _render(
        {"my-p": '<p><slot name="t">Default</slot></p>'},
        '<my-p><span slot="t">Real</span></my-p>',
    )

    assert html == '<my-p><p><span slot="t">Real</span></p></my-p>'


def test_insert_subtree_is_preserved():
    html = _render(
        {"my-p": '<p><slot name="t">Default</slot></p>'},
        '<my-p><div slot="t" class="x"><em>deep</em> text</div></my-p>',
    )

    assert html == '<my-p><p><div slot="t" class="x"><em>deep</em> text</div></p></my-p>'


def test_as_attribute_picks_wrapper_tag():
    html = _render(
        {"my-slot-as": '<slot as="div" name="stuff">stuff</slot>'},
        "<my-slot-as></my-slot-as>",
    )

    assert html == '<my-slot-as><div slot="stuff">stuff</div></my-slot-as>'


def test_several_default_children_are_wrapped():
    template = (
        '<slot name="my-content" as="div">My default text<h3>A smaller heading</h3>'
        "Random text<code> a code block</code></slot>"
    )
    html = _render({"my-multiples": template}, "<my-multiples></my-multiples>")

    assert html == (
        '<my-multiples><div slot="my-content">My default text<h3>A smaller heading</h3>'
        "Random text<code> a code block</code></div></my-multiples>"
    )


def test_single_default_element_is_promoted():
    html = _render(
        {"my-title": '<slot name="title"> <h3>Title</h3> </slot>'},
        "<my-title></my-title>",
    )

    assert html == '<my-title> <h3 slot="title">Title</h3> </my-title>'


def test_empty_unfilled_named_slot_yields_empty_wrapper():
    html = _render({"my-e": '<slot name="icon"></slot><b>x</b>'}, "<my-e></my-e>")

    assert html == '<my-e><span slot="icon"></span><b>x</b></my-e>'


def test_unslotted_children_fill_unnamed_slot():
    html = _render(
        {"my-content": CONTENT},
        '<my-content id="0"><h4 slot="title">Custom title</h4></my-content>',
    )

    assert html == '<my-content id="0"><h2>My Content</h2><h4 slot="title">Custom title</h4></my-content>'


def test_unmatched_insert_falls_into_unnamed_slot():
    html = _render(
        {"my-d": "<div><slot></slot></div>"},
        '<my-d><b slot="nope">x</b>y</my-d>',
    )

    assert html == '<my-d><div><b slot="nope">x</b>y</div></my-d>'


def test_unmatched_insert_without_unnamed_slot_is_dropped():
    html = _render({"my-d": "<div>fixed</div>"}, '<my-d><b slot="nope">x</b></my-d>')

    assert html == "<my-d><div>fixed</div></my-d>"


def test_last_duplicate_insert_wins():
    html = _render(
        {"my-p": '<p><slot name="t">D</slot></p>'},
        '<my-p><b slot="t">one</b><i slot="t">two</i></my-p>',
    )

    assert html == '<my-p><p><i slot="t">two</i></p></my-p>'


def test_second_unnamed_slot_keeps_default_content():
    html = _render(
        {"my-two": "<p><slot>A</slot></p><div><slot>B</slot></div>"},
        "<my-two>x</my-two>",
    )

    assert html == "<my-two><p>x</p><div>B</div></my-two>"


def test_slots_inside_a_replaced_slot_are_skipped():
    html = _render(
        {"my-x": '<p><slot name="t"><slot></slot></slot></p><div><slot>D</slot></div>'},
        '<my-x><b slot="t">B</b>text</my-x>',
    )

    assert html == '<my-x><p><b slot="t">B</b></p><div>text</div></my-x>'


def test_named_slot_inside_a_replaced_slot_is_not_promoted():
    html = _render(
        {"my-x": '<p><slot name="t"><slot name="inner">I</slot></slot></p>'},
        '<my-x><b slot="t">B</b></my-x>',
    )

    assert html == '<my-x><p><b slot="t">B</b></p></my-x>'


def test_host_keeps_tag_and_attributes():
    html = _render({"my-button": BUTTON}, '<my-button id="b" data-kind="primary">Go</my-button>')

    assert html == '<my-button id="b" data-kind="primary"><button>Go</button></my-button>'


@pytest.mark.parametrize(
    "markup",
    [
        "<my-unknown><slot>keep</slot></my-unknown>",
        '<my-unknown a="1"><b slot="x">y</b></my-unknown>',
    ],
)
def test_unregistered_custom_elements_pass_through(markup: str):
    assert _render({"my-button": BUTTON}, markup) == markup


def test_non_custom_registered_names_are_ignored():
    templates = {"button": "<b>nope</b>", "font-face": "<b>nope</b>"}
    markup = "<button>x</button><font-face>y</font-face>"

    assert _render(templates, markup) == markup


def test_find_inserts_only_looks_at_direct_children():
    element = parse_fragment(
        '<my-x><b slot="a">1</b><div><i slot="b">2</i></div>text</my-x>'
    ).find("my-x")

    assert [insert.name for insert in find_inserts(element)] == ["b"]
