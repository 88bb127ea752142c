from lingopop.models.language import Language
from lingopop.schemas.base import CamelModel


class AppState(CamelModel):
    """Persisted user configuration; the parameter source for every request."""

    native_lang: Language = Language.CHINESE
    target_lang: Language = Language.ENGLISH
    has_onboarded: bool = False
