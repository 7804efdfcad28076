# tests/conftest.py
import io
import zipfile

import pytest

from toneterminal_presets.models import (
    PluginChain,
    PluginChainPlugin,
    PluginIdentifierMap,
    PluginParameter,
    SongInfo,
)


def make_chain(**overrides) -> PluginChain:
    """Build the chain used across serializer tests, with field overrides."""
    values = dict(
        daw="FL Studio",
        daw_id="fl_studio",
        summary="Test chain",
        clip_window="00:00 - 00:15",
        song=SongInfo(title="Unit Test", artist="ToneTerminal", album=None, timecode="0:10"),
        plugins=[
            PluginChainPlugin(
                name="Tone EQ",
                type="Equalizer",
                settings={"Gain": "+3dB", "Frequency": "5kHz"},
                comment="Boost presence",
            )
        ],
    )
    values.update(overrides)
    return PluginChain(**values)


def minimal_chain(daw: str, daw_id: str) -> PluginChain:
    return PluginChain(
        daw=daw,
        daw_id=daw_id,
        plugins=[PluginChainPlugin(name="Bare Comp", type="Compressor", settings={})],
    )


def read_zip(data: bytes) -> dict:
    """Return {member name: bytes} for a zip archive."""
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return {name: archive.read(name) for name in archive.namelist()}


@pytest.fixture
def chain() -> PluginChain:
    return make_chain()


@pytest.fixture
def chain_factory():
    return make_chain


@pytest.fixture
def minimal_chain_factory():
    return minimal_chain


@pytest.fixture
def zip_members():
    return read_zip


@pytest.fixture
def rich_plugin() -> PluginChainPlugin:
    """A plugin carrying both parameters and settings."""
    return PluginChainPlugin(
        name="Pro-Q 3",
        type="Equalizer",
        settings={"Ignored": "yes"},
        vendor="FabFilter",
        identifiers=PluginIdentifierMap(
            generic="fabfilter.proq3",
            vst3="FabFilter Pro-Q 3",
            au="aufx:FQ3p:FabF",
            aax="com.fabfilter.ProQ3",
            fl_studio="Fruity Pro-Q 3",
            ableton="Pro-Q 3 Device",
            logic="FabFilter: Pro-Q 3",
            pro_tools="Pro-Q 3 (AAX)",
            studio_one="VST3/Pro-Q 3",
            reaper="VST3: Pro-Q 3 (FabFilter)",
        ),
        parameters=[
            PluginParameter(id="band1_gain", label="Band 1 Gain", value="-2.5"),
            PluginParameter(id="band1_freq", value="220"),
        ],
    )


@pytest.fixture
def control_char_chain_factory():
    """Chains whose text fields carry control characters XML cannot hold."""

    def factory(**overrides) -> PluginChain:
        plugin = PluginChainPlugin(
            name="Tone\x0bEQ",
            type="Equalizer",
            settings={"Gain": "+3\x0cdB"},
            comment="warm\x00vocal",
        )
        values = dict(
            summary="warm\x0cvocal",
            song=SongInfo(title="Night\x1bDrive", artist="Mock\x08Artist"),
            plugins=[plugin],
        )
        values.update(overrides)
        return make_chain(**values)

    return factory
