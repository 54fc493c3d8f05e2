import pytest
from dice_clicker.ui.panels import PanelManager, PanelPhase


def test_toggle_fades_in_and_out():
    changes = []
    pm = PanelManager(on_change=lambda n, old, new: changes.append((n, new)))
    pm.toggle('shop')
    assert pm.is_visible('shop')
    assert pm.alpha('shop') == 0
    pm.update(150)
    assert pm.alpha('shop') == 128
    pm.update(150)
    assert pm.get('shop').phase is PanelPhase.OPEN
    assert pm.alpha('shop') == 255
    pm.toggle('shop')
    assert pm.is_visible('shop')
    assert not pm.get('shop').shown
    pm.update(300)
    assert not pm.is_visible('shop')
    assert changes == [('shop', PanelPhase.OPENING), ('shop', PanelPhase.OPEN),
                       ('shop', PanelPhase.CLOSING), ('shop', PanelPhase.HIDDEN)]


def test_panels_are_independent():
    pm = PanelManager()
    pm.open('shop')
    pm.open('skills')
    assert pm.visible_panels() == ['shop', 'skills']
    pm.close_all()
    pm.update(300)
    assert pm.visible_panels() == []


def test_reopen_while_closing():
    pm = PanelManager()
    pm.open('settings')
    pm.update(300)
    pm.close('settings')
    pm.update(100)
    pm.toggle('settings')
    assert pm.get('settings').phase is PanelPhase.OPENING


def test_hide_all_skips_fade():
    pm = PanelManager()
    pm.open('combat')
    pm.hide_all()
    assert not pm.is_visible('combat')


def test_unknown_panel():
    with pytest.raises(ValueError):
        PanelManager().toggle('inventory')


def test_latest_opened_panel_is_on_top():
    pm = PanelManager()
    assert pm.top() is None
    pm.open('settings')
    pm.open('shop')
    assert pm.visible_panels() == ['settings', 'shop']
    assert pm.top() == 'shop'
    assert not pm.is_top('settings')
    pm.close('shop')
    pm.update(300)
    assert pm.top() == 'settings'
