from __future__ import annotations

from enum import Enum


class ModelAction(str, Enum):
    """Tags passed to observers describing the kind of state change."""

    INIT = "init"
    ADD_POINT = "add_point"
    UPDATE_POINT = "update_point"
    DELETE_POINT = "delete_point"
    TOGGLE_FAVORITE = "toggle_favorite"
