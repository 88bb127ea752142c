"""
UI label table keyed by (language, key).

Lookups fall back from the requested language to English, then to Chinese
(Simplified), then to the raw key.
"""

from typing import Dict, Optional

from lingopop.models.language import Language, first_label_token

TRANSLATIONS: Dict[Language, Dict[str, str]] = {
    Language.CHINESE: {
        "discover": "地道表达",
        "searchPlaceholder": "想表达什么？输入意思或词汇...",
        "myNotebook": "生词本",
        "noSavedWords": "还没有保存。",
        "goFindSome": "去搜一些！",
        "storyMode": "故事模式",
        "studyMode": "复习闪卡",
        "aiMagic": "AI 魔法",
        "savedWords": "已存记录",
        "askAi": "深入追问教练",
        "chatTitle": "探讨",
        "chatPlaceholder": "输入你的问题...",
        "lingoTip": "教练私房话",
        "variations": "看场合，怎么说？",
        "iSpeak": "我的母语",
        "iWantToLearn": "我想学",
        "letsGo": "开启探索",
        "consulting": "正在解析地道潜台词...",
        "startTyping": "输入你想表达的意思，看看地道方案",
        "search": "搜索",
        "notebook": "记忆",
        "scan": "扫描",
        "scanTitle": "视觉翻译",
        "analyzingImage": "识别中...",
        "noTextFound": "未识别到文字。",
        "internetMemeWarning": "互联网冲浪风险提示",
        "oops": "哎呀，出了点问题",
        "scenario_academic": "学术",
        "scenario_formal": "正式",
        "scenario_social": "社交",
        "scenario_meme": "梗/俚语",
        "scenario_daily": "日常",
        "posture_neutral": "中性",
        "posture_friendly": "亲切",
        "posture_ironic": "阴阳怪气",
        "posture_reserved": "委婉",
        "posture_direct": "直白",
        "posture_confident": "自信",
        "cultural_logic": "文化逻辑",
    },
    Language.ENGLISH: {
        "discover": "Authentic Expressions",
        "searchPlaceholder": "What's on your mind? Type a concept or word...",
        "myNotebook": "Notebook",
        "noSavedWords": "Nothing saved yet.",
        "goFindSome": "Go find some!",
        "storyMode": "Story Mode",
        "studyMode": "Flashcards",
        "aiMagic": "AI Magic",
        "savedWords": "Saved Records",
        "askAi": "Deep Dive with Coach",
        "chatTitle": "Discuss",
        "chatPlaceholder": "Ask the coach anything...",
        "lingoTip": "Coach's Pro Tips",
        "variations": "Situational 'How-to'?",
        "iSpeak": "My Native Language",
        "iWantToLearn": "I want to learn",
        "letsGo": "Start Exploring",
        "consulting": "Analyzing cultural nuances...",
        "startTyping": "Describe an intent or word to see authentic options",
        "search": "Search",
        "notebook": "Memory",
        "scan": "Scan",
        "scanTitle": "Visual Scan",
        "analyzingImage": "Analyzing...",
        "noTextFound": "No text detected.",
        "internetMemeWarning": "Internet Meme Risk Warning",
        "oops": "Oops, something went wrong",
        "scenario_academic": "Academic",
        "scenario_formal": "Formal",
        "scenario_social": "Social",
        "scenario_meme": "Meme",
        "scenario_daily": "Daily",
        "posture_neutral": "Neutral",
        "posture_friendly": "Friendly",
        "posture_ironic": "Ironic",
        "posture_reserved": "Reserved",
        "posture_direct": "Direct",
        "posture_confident": "Confident",
        "cultural_logic": "CULTURAL LOGIC",
    },
}


def get_translation(lang: Language, key: str, table: Optional[Dict[Language, Dict[str, str]]] = None) -> str:
    table = TRANSLATIONS if table is None else table
    english = table.get(Language.ENGLISH, {})
    selected = table.get(lang) or english
    return (
        selected.get(key)
        or english.get(key)
        or table.get(Language.CHINESE, {}).get(key)
        or key
    )


def _badge_label(prefix: str, raw: Optional[str], lang: Language) -> Optional[str]:
    if not raw:
        return None
    token = first_label_token(str(getattr(raw, "value", raw)))
    key = f"{prefix}_{token.lower()}"
    label = get_translation(lang, key)
    return token if label == key else label


def scenario_label(raw: Optional[str], lang: Language) -> Optional[str]:
    """Badge text for a scenario value; unknown labels render as their first token."""
    return _badge_label("scenario", raw, lang)


def posture_label(raw: Optional[str], lang: Language) -> Optional[str]:
    return _badge_label("posture", raw, lang)


def is_meme_term(entry) -> bool:
    """True when any variant is tagged with the Meme scenario."""
    for variant in getattr(entry, "variants", None) or []:
        scenario = getattr(variant.scenario, "value", variant.scenario)
        if scenario and "Meme" in scenario:
            return True
    return False


def oops_message(lang: Language, error: BaseException) -> str:
    """User-facing failure text: localized prefix plus the raw error message."""
    detail = getattr(error, "message", None) or str(error) or "Unknown error"
    return f"{get_translation(lang, 'oops')}: {detail}"
