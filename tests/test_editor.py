"""Tests opérations d'édition + brouillon HeroDraft."""
import pytest
from pydantic import ValidationError

from hero_builder import (
    ElementNotFoundError, HeroBlock, HeroDraft, MemoryContentStore, Position,
    add_button, add_logo, add_text, create_default_hero, composite, load_document, remove_element,
    set_device_value, set_height, set_position, update_background, update_element, update_overlay,
)


# ── Ajout ────────────────────────────────────────────────────────────────────

def test_add_text_with_complete_defaults():
    block, text = add_text(create_default_hero())
    assert block.texts == (text,)
    assert text.font_size.desktop == 48 and text.font_size.tablet == 36 and text.font_size.mobile == 28
    assert text.visible.mobile and text.visible.tablet and text.visible.desktop
    assert not (text.below_image.mobile or text.below_image.tablet or text.below_image.desktop)
    assert text.position.mobile == Position(horizontal="center", vertical="middle")


def test_add_button_and_logo_defaults():
    block, button = add_button(HeroBlock())
    block, logo = add_logo(block, "salon-logo")
    assert button.position.desktop.vertical == "bottom-center"
    assert button.action.type == "link"
    assert logo.position.tablet.vertical == "top-center"
    assert logo.scale.mobile == 100
    assert logo.logo_ref == "salon-logo"


def test_order_bookkeeping_counts_per_kind():
    block, t1 = add_text(HeroBlock())
    block, t2 = add_text(block)
    block, b1 = add_button(block)
    assert (t1.order.desktop, t2.order.mobile, b1.order.tablet) == (0, 1, 0)


def test_ids_are_unique():
    block = HeroBlock()
    ids = set()
    for _ in range(5):
        block, text = add_text(block)
        ids.add(text.id)
    assert len(ids) == 5


# ── Mise à jour ──────────────────────────────────────────────────────────────

def test_set_device_value_touches_one_slice():
    block, text = add_text(HeroBlock())
    edited = set_device_value(block, text.id, "below_image", "mobile", True)
    t = edited.find(text.id)
    assert t.below_image.mobile is True
    assert t.below_image.tablet is False
    assert t.below_image.desktop is False
    assert t.visible == text.visible
    assert t.position == text.position
    # entrée intacte
    assert block.find(text.id).below_image.mobile is False


def test_set_device_value_drives_composition():
    block, text = add_text(HeroBlock())
    block = set_device_value(block, text.id, "below_image", "mobile", True)
    assert [p.id for p in composite(block, "mobile").flow] == [text.id]
    assert [p.id for p in composite(block, "desktop").overlay] == [text.id]


def test_set_device_value_validates_logo_scale():
    block, logo = add_logo(HeroBlock(), "salon-logo")
    with pytest.raises(ValidationError):
        set_device_value(block, logo.id, "scale", "mobile", 0)
    edited = set_device_value(block, logo.id, "scale", "mobile", 150)
    assert edited.find(logo.id).scale.mobile == 150


def test_set_device_value_rejects_non_responsive_field():
    block, text = add_text(HeroBlock())
    with pytest.raises(ValueError):
        set_device_value(block, text.id, "content", "mobile", "x")


def test_set_position_one_device():
    block, text = add_text(HeroBlock())
    block = set_position(block, text.id, "desktop", horizontal="right", offset_x=-4)
    t = block.find(text.id)
    assert t.position.desktop == Position(horizontal="right", vertical="middle", offset_x=-4)
    assert t.position.mobile == Position()


def test_update_element_validates():
    block, button = add_button(HeroBlock())
    block2 = update_element(block, button.id, label="Buchen", action={"type": "email", "value": "a@b.de"})
    b = block2.find(button.id)
    assert b.label == "Buchen"
    assert b.action.type == "email"
    with pytest.raises(ValidationError):
        update_element(block, button.id, action={"type": "fax", "value": "1"})


def test_update_element_keeps_id_stable():
    block, text = add_text(HeroBlock())
    with pytest.raises(ValueError):
        update_element(block, text.id, id="other")


def test_unknown_element():
    with pytest.raises(ElementNotFoundError):
        update_element(HeroBlock(), "missing", content="x")
    with pytest.raises(ElementNotFoundError):
        remove_element(HeroBlock(), "missing")
    with pytest.raises(ElementNotFoundError):
        set_device_value(HeroBlock(), "missing", "visible", "mobile", False)


def test_remove_element_keeps_siblings_order():
    block, t1 = add_text(HeroBlock())
    block, t2 = add_text(block)
    block, t3 = add_text(block)
    block = remove_element(block, t2.id)
    assert [t.id for t in block.texts] == [t1.id, t3.id]


def test_background_overlay_height():
    block = update_background(HeroBlock(), image="/bg.jpg", x=20)
    block = update_overlay(block, enabled=True, opacity=70)
    block = set_height(block, "tablet", "70vh")
    assert block.background.image == "/bg.jpg"
    assert (block.background.x, block.background.y) == (20, 50)
    assert block.overlay.enabled and block.overlay.opacity == 70
    assert (block.height.mobile, block.height.tablet, block.height.desktop) == ("400px", "70vh", "600px")
    with pytest.raises(ValidationError):
        update_overlay(block, opacity=-1)


# ── Brouillon ────────────────────────────────────────────────────────────────

def test_draft_apply_and_save():
    store = MemoryContentStore()
    draft = HeroDraft("home", "hero-1", create_default_hero())
    text = draft.apply(add_text)
    draft.apply(set_device_value, text.id, "below_image", "mobile", True)
    assert draft.version == 2
    assert draft.dirty

    draft.save(store)
    assert not draft.dirty
    assert load_document(store, "home", "hero-1") == draft.block


class FailingStore:
    def get(self, page_id, block_id):
        return None

    def put(self, page_id, block_id, document):
        raise ConnectionError("store indisponible")


def test_draft_keeps_rendering_when_save_fails():
    draft = HeroDraft("home", "hero-1", HeroBlock())
    text = draft.apply(add_text)
    with pytest.raises(ConnectionError):
        draft.save(FailingStore())
    assert draft.dirty
    assert draft.render("desktop").find_key(text.id) is not None
