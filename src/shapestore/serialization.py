"""
Serialization helpers for figures and figure stores.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Stores are rebuilt through the validating add_* calls, so a malformed
document raises BadPropertyError instead of producing an invalid store.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from shapestore.model import Circle, Figure, Square
from shapestore.store import FigureStore


def figure_to_dict(f: Figure) -> Dict[str, Any]:
    if isinstance(f, Circle):
        return {"type": "circle", "radius": f.radius}
    if isinstance(f, Square):
        return {"type": "square", "side": f.side}
    raise TypeError(f"Unsupported Figure type: {type(f)}")


def figure_from_dict(d: Dict[str, Any]) -> Figure:
    t = d.get("type")
    if t == "circle":
        return Circle(d["radius"])
    if t == "square":
        return Square(d["side"])
    raise TypeError(f"Unsupported figure dict type: {t}")


def store_to_dict(s: FigureStore) -> Dict[str, Any]:
    return {"figures": [figure_to_dict(f) for f in s.figures]}


def store_from_dict(d: Dict[str, Any]) -> FigureStore:
    s = FigureStore()
    for fd in d.get("figures", []):
        f = figure_from_dict(fd)
        s.add(f.figure_type, f.value)
    return s


def store_to_json(s: FigureStore) -> str:
    return json.dumps(store_to_dict(s), sort_keys=True)


def store_from_json(s: str) -> FigureStore:
    d = json.loads(s)
    return store_from_dict(d)


def store_to_yaml(s: FigureStore) -> str:
    return yaml.safe_dump(store_to_dict(s))


def store_from_yaml(s: str) -> FigureStore:
    # an empty document is an empty store
    d = yaml.safe_load(s) or {}
    return store_from_dict(d)
