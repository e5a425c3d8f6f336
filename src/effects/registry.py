"""Effect registry — central lookup for all registered effects."""

from typing import Any, Callable

EffectFn = Callable[..., Any]

_REGISTRY: dict[str, dict] = {}


def register(effect_id: str, fn: EffectFn, params: dict, name: str, category: str):
    """Register an effect."""
    _REGISTRY[effect_id] = {
        "fn": fn,
        "params": params,
        "name": name,
        "category": category,
    }


def get(effect_id: str) -> dict | None:
    """Get effect info by ID."""
    return _REGISTRY.get(effect_id)


def list_all() -> list[dict]:
    """List all registered effects with metadata."""
    return [
        {
            "id": eid,
            "name": info["name"],
            "category": info["category"],
            "params": info["params"],
        }
        for eid, info in _REGISTRY.items()
    ]


def _auto_register():
    """Import and register all built-in effects."""
    from effects.fx import (
        brightness,
        channel_swap,
        checker_twist,
        flip_swap,
        kaleidoscope,
        merge,
        strong,
        wave,
    )

    for mod in [
        channel_swap,
        flip_swap,
        brightness,
        wave,
        kaleidoscope,
        merge,
        strong,
        checker_twist,
    ]:
        register(
            mod.EFFECT_ID, mod.apply, mod.PARAMS, mod.EFFECT_NAME, mod.EFFECT_CATEGORY
        )


_auto_register()
