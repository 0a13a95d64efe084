"""
Voice and translation helpers.

Speech synthesis and recognition run in the browser by default; the server
prepares the text, suggests voices and, when a recording is uploaded,
transcribes it with Whisper.
"""
import logging
import math
from typing import Any, Dict, List, Optional

from p3_academy.core.languages import get_language_name
from p3_academy.services import openai_service
from p3_academy.services.ai_router import ai_router
from p3_academy.services.redis_service import RedisService

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 150
TRANSLATION_CACHE_TTL = 24 * 3600
MAX_AUDIO_SIZE = 10 * 1024 * 1024

VOICE_LANGUAGES: List[Dict[str, Any]] = [
    {"code": "en", "name": "English", "local_name": "English", "browser_support": True},
    {"code": "ms", "name": "Bahasa Malaysia", "local_name": "Bahasa Malaysia", "browser_support": True},
    {"code": "id", "name": "Bahasa Indonesia", "local_name": "Bahasa Indonesia", "browser_support": True},
    {"code": "th", "name": "Thai", "local_name": "ไทย", "browser_support": True},
    {"code": "vi", "name": "Vietnamese", "local_name": "Tiếng Việt", "browser_support": True},
    {"code": "fil", "name": "Filipino", "local_name": "Filipino", "browser_support": True},
    {"code": "my", "name": "Myanmar", "local_name": "မြန်မာ", "browser_support": False},
    {"code": "km", "name": "Khmer", "local_name": "ខ្មែរ", "browser_support": False},
    {"code": "lo", "name": "Lao", "local_name": "ລາວ", "browser_support": False},
    {"code": "zh-cn", "name": "Simplified Chinese", "local_name": "简体中文", "browser_support": True},
    {"code": "zh-tw", "name": "Traditional Chinese", "local_name": "繁體中文", "browser_support": True},
    {"code": "zh-hk", "name": "Chinese (Hong Kong)", "local_name": "中文 (香港)", "browser_support": True},
]

TTS_VOICES: Dict[str, List[str]] = {
    "en": ["en-US-Standard-A", "en-US-Standard-B", "en-US-Standard-C", "en-US-Standard-D"],
    "ms": ["ms-MY-Standard-A", "ms-MY-Standard-B"],
    "id": ["id-ID-Standard-A", "id-ID-Standard-B"],
    "th": ["th-TH-Standard-A", "th-TH-Standard-B"],
    "vi": ["vi-VN-Standard-A", "vi-VN-Standard-B"],
    "fil": ["fil-PH-Standard-A", "fil-PH-Standard-B"],
    "zh-cn": ["zh-CN-Standard-A", "zh-CN-Standard-B", "zh-CN-Standard-C", "zh-CN-Standard-D"],
    "zh-tw": ["zh-TW-Standard-A", "zh-TW-Standard-B", "zh-TW-Standard-C"],
    "zh-hk": ["zh-HK-Standard-A", "zh-HK-Standard-B"],
}

BROWSER_VOICES: Dict[str, List[str]] = {
    "en": ["Google US English", "Microsoft David Desktop", "Microsoft Zira Desktop", "Samantha"],
    "ms": ["Google Bahasa Malaysia", "Microsoft Rizwan Desktop"],
    "id": ["Google Bahasa Indonesia", "Microsoft Andika Desktop"],
    "th": ["Google ไทย", "Microsoft Pattara Desktop"],
    "vi": ["Google Tiếng Việt", "Microsoft An Desktop"],
    "fil": ["Google Filipino", "Microsoft Angelo Desktop"],
    "zh-cn": ["Google 普通话 (中国大陆)", "Microsoft Yaoyao Desktop", "Microsoft Kangkang Desktop"],
    "zh-tw": ["Google 國語 (台灣)", "Microsoft Zhiwei Desktop", "Microsoft Yating Desktop"],
    "zh-hk": ["Google 粵語 (香港)", "Microsoft Tracy Desktop", "Microsoft Danny Desktop"],
}

STT_MODELS = ["browser-speech-api", "whisper-1"]
SUPPORTED_AUDIO_FORMATS = ["wav", "mp3", "m4a", "webm", "ogg"]

STT_LOCALES = [
    "en-US", "en-GB", "en-AU", "en-CA", "en-IN",
    "ms-MY", "id-ID", "th-TH", "vi-VN", "fil-PH",
    "zh-CN", "zh-TW", "zh-HK", "ja-JP", "ko-KR",
]

SPEAKING_TIPS: Dict[str, List[str]] = {
    "en": [
        "Speak clearly and at a moderate pace",
        "Pause briefly between sentences",
        "Use proper pronunciation for technical terms",
    ],
    "ms": [
        "Bercakap dengan jelas dan perlahan-lahan",
        "Gunakan sebutan yang betul untuk istilah teknikal",
        "Jeda sebentar antara ayat",
    ],
    "id": [
        "Berbicara dengan jelas dan perlahan",
        "Gunakan pengucapan yang benar untuk istilah teknis",
        "Berhenti sebentar di antara kalimat",
    ],
    "th": [
        "พูดชัดเจนและช้าๆ",
        "ใช้การออกเสียงที่ถูกต้องสำหรับคำศัพท์ทางเทคนิค",
        "หยุดสักครู่ระหว่างประโยค",
    ],
    "vi": [
        "Nói rõ ràng và chậm rãi",
        "Sử dụng phát âm đúng cho thuật ngữ kỹ thuật",
        "Tạm dừng giữa các câu",
    ],
    "zh-cn": ["说话清楚，语速适中", "专业术语需要准确发音", "句子之间要有短暂停顿"],
    "zh-tw": ["說話清楚，語速適中", "專業術語需要準確發音", "句子之間要有短暫停頓"],
    "zh-hk": ["講話清楚，語速適中", "專業術語需要準確發音", "句子之間要有短暫停頓"],
}


def get_browser_voices(language: str) -> List[str]:
    return BROWSER_VOICES.get(language, ["Default Voice"])


def estimate_duration(text: str) -> int:
    """Seconds needed to read ``text`` aloud at 150 words per minute."""
    words = len(text.split(" "))
    return math.ceil(words / WORDS_PER_MINUTE * 60)


def quality_recommendations(metrics: Optional[Dict[str, Any]], language: str = "en") -> List[str]:
    recommendations: List[str] = []

    if metrics:
        volume = metrics.get("volume")
        duration = metrics.get("duration")
        noise = metrics.get("noise_level")

        if volume is not None and volume < 0.1:
            recommendations.append("Audio volume is too low. Please speak closer to the microphone.")
        elif volume is not None and volume > 0.9:
            recommendations.append("Audio volume is too high. Please speak further from the microphone.")

        if duration is not None and duration < 2:
            recommendations.append("Audio is too short. Please speak for at least 2-3 seconds.")

        if noise is not None and noise > 0.3:
            recommendations.append("Background noise detected. Please find a quieter environment.")

    recommendations.extend(SPEAKING_TIPS.get(language, SPEAKING_TIPS["en"]))
    return recommendations


class LanguageService:
    def __init__(self):
        self.cache = RedisService.get_instance()

    def get_voice_config(self) -> Dict[str, Any]:
        return {
            "supported_languages": VOICE_LANGUAGES,
            "tts_voices": TTS_VOICES,
            "browser_voices": BROWSER_VOICES,
            "stt_models": STT_MODELS,
            "max_file_size": "10MB",
            "supported_formats": SUPPORTED_AUDIO_FORMATS,
        }

    def get_supported_stt_locales(self) -> List[str]:
        return list(STT_LOCALES)

    async def translate(self, text: str, target_language: str, source_language: str = "en") -> Dict[str, Any]:
        """
        Translate ``text`` through the AI router.

        English targets and same-language requests are returned untouched.
        Results are cached in Redis for a day.
        """
        if target_language == "en" or target_language == source_language:
            return {"translated_text": text, "method": "passthrough", "cached": False}

        cache_key = self.cache.generate_cache_key("translation", source_language, target_language, text)
        cached = self.cache.get_cache(cache_key)
        if cached:
            return {"translated_text": cached, "method": "cache", "cached": True}

        prompt = (
            f"Translate this text from {get_language_name(source_language)} "
            f"to {get_language_name(target_language)}: \"{text}\". "
            "Ensure the translation is natural, culturally appropriate, and maintains the original meaning. "
            "Return only the translation, no explanations."
        )
        response = await ai_router.generate_response(
            [{"role": "user", "content": prompt}],
            max_tokens=1000,
            temperature=0.3,
            language=target_language,
            domain="general",
        )
        translated = response.content.strip().strip('"')
        self.cache.set_cache(cache_key, translated, expiry=TRANSLATION_CACHE_TTL)
        return {"translated_text": translated, "method": response.provider, "cached": False}

    async def optimize_for_speech(self, text: str, language: str = "en") -> str:
        """Rewrite text for speech synthesis; on AI failure the original text is spoken."""
        prompt = (
            f"Optimize this text for speech synthesis in {get_language_name(language)}: \"{text}\". "
            "Add natural pauses and ensure it flows well when spoken. "
            "Return only the optimized text, no explanations."
        )
        try:
            response = await ai_router.generate_response(
                [{"role": "user", "content": prompt}],
                max_tokens=500,
                temperature=0.3,
                language=language,
            )
        except Exception as e:
            logger.warning(f"Speech optimisation failed, using original text: {str(e)}")
            return text

        optimized = response.content.strip().strip('"')
        return optimized or text

    async def prepare_tts(
        self,
        text: str,
        language: str = "en",
        voice: Optional[str] = None,
        rate: float = 1.0,
        pitch: float = 1.0,
    ) -> Dict[str, Any]:
        processed = await self.optimize_for_speech(text, language)
        voices = get_browser_voices(language)
        selected = voice or voices[0]
        return {
            "text": processed,
            "original_text": text,
            "language": language,
            "voice": selected,
            "available_voices": voices,
            "rate": rate,
            "pitch": pitch,
            "duration": estimate_duration(processed),
            "method": "browser-speech-api",
        }

    async def transcribe(self, audio: bytes, filename: str, language: str = "en") -> Dict[str, Any]:
        if len(audio) > MAX_AUDIO_SIZE:
            raise ValueError("Audio file exceeds the 10MB limit")

        result = await openai_service.transcribe_audio(audio, filename, language)
        logger.info(f"Transcribed {len(audio)} bytes of {language} audio")
        return {
            "transcription": result["text"],
            "language": result["language"],
            "duration": result["duration"],
            "confidence": 0.9,
            "method": "openai-whisper",
        }

    def browser_stt_config(self, language: str = "en", continuous: bool = False, interim_results: bool = True) -> Dict[str, Any]:
        return {
            "language": language,
            "continuous": continuous,
            "interim_results": interim_results,
            "method": "browser-speech-api",
            "max_alternatives": 1,
            "supported_languages": self.get_supported_stt_locales(),
        }


language_service = LanguageService()
