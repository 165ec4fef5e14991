"""parallax - scroll-driven keyframe interpolation."""
from __future__ import annotations

from parallax.attribute import AnimationSource, parse_attribute
from parallax.config import ParallaxConfig
from parallax.definition import AnimationDefinition
from parallax.engine import UNSET, AnimationEngine, EngineState, initialize
from parallax.errors import (
    AttributeSyntaxError,
    ContainerNotFoundError,
    DegenerateGeometryError,
    ModifierSyntaxError,
    ParallaxError,
    ParseError,
    ResolutionError,
    SourceAccessError,
)
from parallax.host import RuleSource, StaticPage, StaticRuleSource, StatusReport
from parallax.modifiers import MODIFIERS, Modifier
from parallax.progress import ContainerGeometry, ProgressCalculator, ProgressState, ViewportState
from parallax.repository import AnimationRepository
from parallax.rules import KeyframeBlock, KeyframesRule
from parallax.scheduler import Binding, ParallaxScheduler
from parallax.timeline import FIXUPS, PropertyTimeline
from parallax.values import ValueTemplate

__all__ = [
    "AnimationDefinition",
    "AnimationEngine",
    "AnimationRepository",
    "AnimationSource",
    "AttributeSyntaxError",
    "Binding",
    "ContainerGeometry",
    "ContainerNotFoundError",
    "DegenerateGeometryError",
    "EngineState",
    "FIXUPS",
    "KeyframeBlock",
    "KeyframesRule",
    "MODIFIERS",
    "Modifier",
    "ModifierSyntaxError",
    "ParallaxConfig",
    "ParallaxError",
    "ParallaxScheduler",
    "ParseError",
    "ProgressCalculator",
    "ProgressState",
    "PropertyTimeline",
    "ResolutionError",
    "RuleSource",
    "SourceAccessError",
    "StaticPage",
    "StaticRuleSource",
    "StatusReport",
    "UNSET",
    "ValueTemplate",
    "ViewportState",
    "initialize",
    "parse_attribute",
]
