"""Smoke tests for the UI module (no display required)."""

from __future__ import annotations

from powderbox.materials.material import Material
from powderbox.ui.pygame_client import _COLOURS, PygameRenderer, _palette


def test_pygame_renderer_importable() -> None:
    """PygameRenderer class is importable without initialising pygame."""
    assert PygameRenderer is not None


def test_main_module_importable() -> None:
    """The __main__ module is importable and exposes main()."""
    from powderbox.__main__ import main

    assert callable(main)


def test_every_material_has_a_colour() -> None:
    assert set(_COLOURS) == set(Material)


def test_palette_lookup() -> None:
    table = _palette()
    assert tuple(table[Material.SAND.value]) == _COLOURS[Material.SAND]
    assert tuple(table[Material.EMPTY.value]) == _COLOURS[Material.EMPTY]
