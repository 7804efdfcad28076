"""Preset serializers, one module per target format."""

from .ableton_adg import AbletonAdgSerializer
from .fl_studio_fst import FlStudioFstSerializer
from .logic_patch import LogicPatchSerializer
from .pro_tools_xml import ProToolsXmlSerializer
from .reaper_rfx import ReaperRfxSerializer
from .studio_one_preset import StudioOnePresetSerializer
from .stub_zip import StubZipSerializer

__all__ = [
    "AbletonAdgSerializer",
    "FlStudioFstSerializer",
    "LogicPatchSerializer",
    "ProToolsXmlSerializer",
    "ReaperRfxSerializer",
    "StudioOnePresetSerializer",
    "StubZipSerializer",
]
