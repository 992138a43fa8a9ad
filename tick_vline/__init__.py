"""tick-vline - A row of V-line glyphs that toggle one at a time on click."""

from tick_vline.config import VLineConfig
from tick_vline.easing import clamped_remainder, envelope, segment_share
from tick_vline.loop import LoopDriver
from tick_vline.nodes import GlyphNode, build_chain
from tick_vline.progress import ProgressState
from tick_vline.renderer import Renderer
from tick_vline.sequence import GlyphSequence
from tick_vline.types import RenderSink

__all__ = [
    "VLineConfig",
    "LoopDriver",
    "ProgressState",
    "GlyphNode",
    "GlyphSequence",
    "Renderer",
    "RenderSink",
    "build_chain",
    "clamped_remainder",
    "segment_share",
    "envelope",
]
