"""Platformer core: asset bundles, save slots, audio mixing and sfxr synthesis, menus, HUD and transitions."""

__version__ = "1.0.0"