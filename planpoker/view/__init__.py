"""
View Module - Stateless projection of client state for rendering.
"""

from .projector import (
    ViewModel,
    PlayerView,
    CenterView,
    ButtonView,
    RegisterFormView,
    CardGridView,
    CardView,
    project,
)

__all__ = [
    "ViewModel",
    "PlayerView",
    "CenterView",
    "ButtonView",
    "RegisterFormView",
    "CardGridView",
    "CardView",
    "project",
]
