"""Tests for the renderer-facing descriptor projections."""

from __future__ import annotations

from photoEditor.core.descriptors import (
    RAW_KEYS,
    FilterOperation,
    composable_descriptor,
    filter_style,
    raw_descriptor,
)
from photoEditor.core.parameters import FILTER_KEYS, ParameterSet


def test_default_chain_holds_five_base_operations() -> None:
    chain = composable_descriptor(ParameterSet())
    assert [op.name for op in chain] == [
        "brightness",
        "contrast",
        "saturate",
        "sepia",
        "grayscale",
    ]
    assert [op.amount for op in chain] == [100, 100, 100, 0, 0]


def test_sharpness_adds_contrast_boost() -> None:
    params = ParameterSet({"sharpness": 30})
    chain = composable_descriptor(params)
    assert chain[-1] == FilterOperation("contrast", 103)
    assert len(chain) == 6


def test_zero_or_negative_sharpness_emits_no_boost() -> None:
    assert len(composable_descriptor(ParameterSet({"sharpness": 0}))) == 5
    assert len(composable_descriptor(ParameterSet({"sharpness": -20}))) == 5


def test_tint_adds_hue_rotation_after_sharpness() -> None:
    params = ParameterSet({"tint": 45, "sharpness": 10})
    chain = composable_descriptor(params)
    assert [op.name for op in chain[-2:]] == ["contrast", "hue-rotate"]
    assert chain[-1].css() == "hue-rotate(45deg)"


def test_zero_tint_emits_no_hue_rotation() -> None:
    chain = composable_descriptor(ParameterSet({"tint": 0}))
    assert all(op.name != "hue-rotate" for op in chain)


def test_filter_style_renders_css_chain() -> None:
    params = ParameterSet({"brightness": 120, "sharpness": 30, "tint": -15})
    assert filter_style(params) == (
        "brightness(120%) contrast(100%) saturate(100%) sepia(0%) grayscale(0%) "
        "contrast(103%) hue-rotate(-15deg)"
    )


def test_raw_descriptor_keeps_tint_and_sharpness() -> None:
    params = ParameterSet({"tint": 12, "sharpness": 40, "vignette": 3})
    raw = raw_descriptor(params)
    assert list(raw) == list(RAW_KEYS)
    assert raw["tint"] == 12
    assert raw["sharpness"] == 40
    assert raw["vignette"] == 3
    assert "brightness" not in raw


def test_descriptors_cover_every_key() -> None:
    composable_keys = {"brightness", "contrast", "saturation", "sepia", "grayscale"}
    assert composable_keys | set(RAW_KEYS) == set(FILTER_KEYS)


def test_projection_does_not_mutate_parameters() -> None:
    params = ParameterSet({"tint": 45})
    before = params.values_dict()
    composable_descriptor(params)
    raw_descriptor(params)["tint"] = 0
    assert params.values_dict() == before
