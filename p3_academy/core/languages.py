"""
Interview language tables shared by the AI clients and the voice service.
"""
from typing import Dict

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES: Dict[str, str] = {
    "en": "English",
    "ms": "Bahasa Malaysia",
    "id": "Bahasa Indonesia",
    "th": "Thai",
    "vi": "Vietnamese",
    "fil": "Filipino",
    "my": "Myanmar",
    "km": "Khmer",
    "lo": "Lao",
    "zh-sg": "Chinese (Singapore)",
}

# Short instructions keep the reasoning models from explaining their output
LANGUAGE_INSTRUCTIONS: Dict[str, str] = {
    "en": "Respond in English only. No explanations.",
    "id": "Respons dalam Bahasa Indonesia saja. Tidak ada penjelasan.",
    "ms": "Respons dalam Bahasa Melayu sahaja. Tiada penjelasan.",
    "th": "ตอบเป็นภาษาไทยเท่านั้น ห้ามอธิบาย",
    "vi": "Chỉ trả lời bằng tiếng Việt. Không giải thích.",
    "fil": "Tumugon sa Filipino lamang. Walang paliwanag.",
    "my": "မြန်မာဘာသာဖြင့်သာ ဖြေကြားပါ။ ရှင်းလင်းမှု မလိုအပ်။",
    "km": "ឆ្លើយជាភាសាខ្មែរបុណ្ណោះ។ មិនត្រូវអធិប្បាយទេ។",
    "lo": "ຕອບເປັນພາສາລາວເທົ່ານັ້ນ. ບໍ່ຕ້ອງອະທິບາຍ.",
    "zh-sg": "只用中文回答。不要解释。",
}

CHINESE_ONLY_INSTRUCTION = "***关键要求***：仅输出中文汉字，严禁拼音、英文、括号注释。不要解释或翻译，直接回答问题。"

# Languages routed to SeaLion first for evaluation
ASEAN_EVALUATION_LANGUAGES = ["id", "ms", "th", "vi", "tl", "my", "km", "lo", "bn", "hi", "zh", "ta"]

# Languages SeaLion handles for question generation, besides English
SEA_QUESTION_LANGUAGES = ["id", "ms", "th", "vi", "tl", "my", "km", "lo", "jv", "su"]


def is_supported_language(language: str) -> bool:
    return language in SUPPORTED_LANGUAGES


def normalize_language(language: str) -> str:
    """Map unknown or empty codes to English."""
    if not language:
        return DEFAULT_LANGUAGE
    language = language.strip()
    return language if is_supported_language(language) else DEFAULT_LANGUAGE


def get_language_name(language: str) -> str:
    return SUPPORTED_LANGUAGES.get(language, language)


def get_language_instructions(language: str) -> str:
    return LANGUAGE_INSTRUCTIONS.get(language, LANGUAGE_INSTRUCTIONS[DEFAULT_LANGUAGE])
