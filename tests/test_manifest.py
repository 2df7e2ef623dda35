"""Tests documents — parse / dump sans perte, migration legacy, intégrité."""
import copy

import pytest

from hero_builder import DataIntegrityError, HeroBlock, dump_document, parse_document, upgrade_legacy_document
from conftest import load_seed


# ── Round-trip ───────────────────────────────────────────────────────────────

def test_load_demo_seed():
    block = parse_document(load_seed("demo_hero.json"))
    assert [l.id for l in block.logos] == ["logo-main"]
    assert [t.id for t in block.texts] == ["text-title", "text-tagline"]
    assert block.texts[1].below_image.mobile is True
    assert block.buttons[0].action.type == "scroll-to-anchor"
    assert block.overlay.opacity == 40


def test_round_trip_is_lossless(demo_block):
    data = dump_document(demo_block)
    assert parse_document(data) == demo_block
    assert dump_document(parse_document(data)) == data


def test_dump_uses_stored_names(demo_block):
    data = dump_document(demo_block)
    text = data["texts"][0]
    assert "belowImage" in text and "fontSize" in text and "fontFamily" in text
    assert "offsetX" in text["position"]["desktop"]
    assert data["logos"][0]["logoRef"] == "salon-logo"
    assert data["buttons"][1]["style"]["borderRadius"] == "medium"
    assert set(text["visible"]) == {"mobile", "tablet", "desktop"}


def test_default_hero_is_complete():
    data = dump_document(HeroBlock())
    assert data["height"] == {"mobile": "400px", "tablet": "500px", "desktop": "600px"}
    assert data["overlay"] == {"enabled": False, "color": "#000000", "opacity": 50.0}
    assert data["background"] == {"image": "", "x": 50.0, "y": 50.0}


# ── Intégrité ────────────────────────────────────────────────────────────────

def test_partial_map_is_data_integrity_error():
    data = load_seed("demo_hero.json")
    del data["texts"][0]["visible"]["tablet"]
    with pytest.raises(DataIntegrityError):
        parse_document(data)


def test_duplicate_ids_rejected():
    data = load_seed("demo_hero.json")
    data["buttons"][0]["id"] = "text-title"
    with pytest.raises(DataIntegrityError, match="dupliqué"):
        parse_document(data)


def test_out_of_range_opacity_rejected():
    data = load_seed("demo_hero.json")
    data["overlay"]["opacity"] = 140
    with pytest.raises(DataIntegrityError):
        parse_document(data)


def test_extra_device_key_is_data_integrity_error():
    data = load_seed("demo_hero.json")
    data["texts"][0]["visible"]["wide"] = False
    with pytest.raises(DataIntegrityError):
        parse_document(data)


def test_logo_scale_out_of_range_rejected():
    data = load_seed("demo_hero.json")
    data["logos"][0]["scale"]["mobile"] = -200
    with pytest.raises(DataIntegrityError):
        parse_document(data)
    data["logos"][0]["scale"]["mobile"] = 250
    with pytest.raises(DataIntegrityError):
        parse_document(data)


def test_unknown_anchor_rejected():
    data = load_seed("demo_hero.json")
    data["texts"][0]["position"]["mobile"]["horizontal"] = "far-left"
    with pytest.raises(DataIntegrityError):
        parse_document(data)


# ── Legacy ───────────────────────────────────────────────────────────────────

def test_legacy_document_strict_load_fails():
    with pytest.raises(DataIntegrityError):
        parse_document(load_seed("legacy_hero.json"))


def test_legacy_document_upgraded_on_load():
    block = parse_document(load_seed("legacy_hero.json"), legacy=True)
    assert block.background.image == "/media/legacy.jpg"
    assert (block.background.x, block.background.y) == (30, 70)
    assert block.height.mobile == "500px"  # mobile ← tablet

    logo = block.logos[0]
    assert logo.logo_ref == "salon-logo"
    assert logo.scale.mobile == 100
    assert logo.position.mobile.vertical == "top-center"

    button = block.buttons[0]
    assert button.label == "Kontakt"
    assert button.action.type == "scroll-to-anchor"
    assert button.position.mobile.horizontal == "center"   # ← tablet
    assert button.position.desktop.horizontal == "right"
    assert button.visible.mobile is True                    # ← desktop
    assert button.below_image.tablet is False               # ← desktop
    assert button.below_image.mobile is True                # explicite


def test_legacy_upgrade_does_not_mutate_input():
    data = load_seed("legacy_hero.json")
    snapshot = copy.deepcopy(data)
    upgrade_legacy_document(data)
    assert data == snapshot


def test_legacy_phone_action_renamed():
    data = load_seed("legacy_hero.json")
    data["buttons"][0]["action"] = {"type": "phone", "value": "0301234"}
    block = parse_document(data, legacy=True)
    assert block.buttons[0].action.type == "telephone"


def test_legacy_map_without_desktop_is_integrity_error():
    data = load_seed("legacy_hero.json")
    data["buttons"][0]["order"] = {"mobile": 1}
    with pytest.raises(DataIntegrityError, match="desktop"):
        parse_document(data, legacy=True)


def test_legacy_map_with_unknown_device_is_integrity_error():
    data = load_seed("legacy_hero.json")
    data["buttons"][0]["order"] = {"desktop": 1, "wide": 2}
    with pytest.raises(DataIntegrityError, match="wide"):
        parse_document(data, legacy=True)


def test_current_document_unchanged_by_upgrade():
    data = load_seed("demo_hero.json")
    assert upgrade_legacy_document(data) == data
