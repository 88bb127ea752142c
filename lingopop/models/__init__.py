# Domain enums shared by schemas, services and the locale table

from .language import Language, Scenario, Posture, first_label_token

__all__ = [
    "Language",
    "Scenario",
    "Posture",
    "first_label_token",
]
