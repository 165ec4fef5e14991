"""Tests for AnimationDefinition parsing and merge policy."""
from __future__ import annotations

from parallax.attribute import AnimationSource, parse_attribute
from parallax.definition import AnimationDefinition
from parallax.errors import ResolutionError
from parallax.host import StaticRuleSource
from parallax.modifiers import Modifier
from parallax.repository import AnimationRepository
from parallax.rules import KeyframeBlock, KeyframesRule


def repo(*rules: KeyframesRule) -> AnimationRepository:
    return AnimationRepository([StaticRuleSource(rules)])


def build(attribute: str, repository: AnimationRepository) -> AnimationDefinition:
    result = AnimationDefinition.build(parse_attribute(attribute), repository)
    assert isinstance(result, AnimationDefinition)
    return result


FADE = KeyframesRule.from_dict("fade", {0: {"opacity": "0"}, 100: {"opacity": "1"}})


class TestBuild:
    def test_single_animation(self) -> None:
        d = build("fade", repo(FADE))
        assert list(d.properties) == ["opacity"]
        assert d.values_at(0.25) == {"opacity": "0.25"}
        assert d.rules == (FADE,)
        assert d.sources == (AnimationSource("fade"),)

    def test_properties_in_first_seen_order(self) -> None:
        rule = KeyframesRule.from_dict(
            "grow",
            {0: {"height": "100px", "width": "100%"}, 50: {"color": "red", "height": "500px"}},
        )
        d = build("grow", repo(rule))
        assert list(d.properties) == ["height", "width", "color"]

    def test_block_with_several_offsets(self) -> None:
        rule = KeyframesRule(
            "pulse",
            (
                KeyframeBlock(offsets=(0.0, 1.0), declarations=(("opacity", "1"),)),
                KeyframeBlock(offsets=(0.5,), declarations=(("opacity", "0"),)),
            ),
        )
        d = build("pulse", repo(rule))
        assert [e.progress for e in d.properties["opacity"].entries] == [0.0, 0.5, 1.0]
        assert d.values_at(0.25) == {"opacity": "0.5"}

    def test_missing_animation(self) -> None:
        result = AnimationDefinition.build(parse_attribute("fade does-not-exist"), repo(FADE))
        assert isinstance(result, ResolutionError)
        assert result.name == "does-not-exist"
        assert 'Cannot find animation "does-not-exist"' in str(result)


class TestModifiers:
    def test_reverse_sole_keyframe(self) -> None:
        rule = KeyframesRule.from_dict("dot", {30: {"left": "3px"}})
        d = build("dot:reverse", repo(rule))
        assert [e.progress for e in d.properties["left"].entries] == [0.7]

    def test_shift_and_scale(self) -> None:
        shifted = build("a:shift(10)", repo(KeyframesRule.from_dict("a", {20: {"x": "1"}})))
        assert shifted.properties["x"].entries[0].progress == 0.3
        scaled = build("a:scale(2)", repo(KeyframesRule.from_dict("a", {25: {"x": "1"}})))
        assert scaled.properties["x"].entries[0].progress == 0.5

    def test_reverse_flips_direction(self) -> None:
        d = build("fade:reverse", repo(FADE))
        assert d.values_at(0.25) == {"opacity": "0.75"}

    def test_modifiers_only_affect_their_source(self) -> None:
        slide = KeyframesRule.from_dict("slide", {0: {"left": "0px"}, 100: {"left": "100px"}})
        d = build("fade slide:reverse", repo(FADE, slide))
        assert d.values_at(0.25) == {"opacity": "0.25", "left": "75px"}
        assert d.sources[1].modifiers == (Modifier("reverse"),)

    def test_unknown_modifier_does_not_move_keys(self) -> None:
        d = build("fade:bogus", repo(FADE))
        assert [e.progress for e in d.properties["opacity"].entries] == [0.0, 1.0]


class TestMerge:
    def test_later_source_wins_at_same_key(self) -> None:
        a = KeyframesRule.from_dict("a", {50: {"color": "rgb(255, 0, 0)"}})
        b = KeyframesRule.from_dict("b", {50: {"color": "rgb(0, 0, 255)"}})
        assert build("a b", repo(a, b)).values_at(0.5) == {"color": "rgb(0, 0, 255)"}
        assert build("b a", repo(a, b)).values_at(0.5) == {"color": "rgb(255, 0, 0)"}

    def test_different_keys_coexist(self) -> None:
        a = KeyframesRule.from_dict("a", {0: {"x": "0"}, 100: {"x": "100"}})
        b = KeyframesRule.from_dict("b", {50: {"x": "0"}})
        d = build("a b", repo(a, b))
        assert [e.progress for e in d.properties["x"].entries] == [0.0, 0.5, 1.0]
        assert d.values_at(0.75) == {"x": "50"}

    def test_same_name_twice_with_shift_splices(self) -> None:
        a = KeyframesRule.from_dict("a", {0: {"x": "0"}, 50: {"x": "10"}})
        d = build("a a:shift(50)", repo(a))
        assert [e.progress for e in d.properties["x"].entries] == [0.0, 0.5, 1.0]
        assert d.values_at(0.5) == {"x": "0"}


class TestTimelineAccess:
    def test_timeline_created_lazily(self) -> None:
        d = AnimationDefinition()
        tl = d.timeline("width")
        assert d.timeline("width") is tl
        assert list(d.properties) == ["width"]

    def test_values_at_unset(self) -> None:
        d = build("fade", repo(FADE))
        assert d.values_at(1.5, unset_outside=True) == {"opacity": None}
