import logging
from typing import Optional, Protocol

from .converter import get_transliterator

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "You are an expert Bengali translator and grammar corrector. Convert the "
    "following Banglish (Bengali written in English letters) text to proper "
    "Bengali script with correct grammar, proper word connections (সন্ধি), and "
    "accurate spelling. Ensure the output follows pure Bengali grammar rules and "
    "sentence structure. Only output the converted Bengali text, nothing else.\n"
    "\n"
    "Text to convert: {text}"
)

PREPASS_TEMPLATE = "\nPhonetic draft: {draft}"


class CorrectorUnavailable(RuntimeError):
    """The correction provider could not produce an answer"""


class Corrector(Protocol):
    def correct(self, prompt: str) -> str:
        """Return corrected Bengali text or raise CorrectorUnavailable"""
        ...


def build_prompt(text: str, draft: Optional[str] = None) -> str:
    prompt = PROMPT_TEMPLATE.format(text=text)
    if draft:
        prompt += PREPASS_TEMPLATE.format(draft=draft)
    return prompt


def correct_text(
    text: str, corrector: Optional[Corrector] = None, prepass: bool = False
) -> str:
    """
    Correct Banglish text through an external corrector.

    The phonetic engine's output is used whenever the corrector is missing,
    unavailable or returns nothing. With `prepass`, the engine's output is
    sent along as a draft for the corrector to refine.
    """
    if not text.strip():
        return ""

    transliterate = get_transliterator()
    if corrector is None:
        return transliterate(text)

    draft = transliterate(text) if prepass else None
    try:
        answer = corrector.correct(build_prompt(text, draft))
    except CorrectorUnavailable as e:
        logger.warning("Corrector unavailable, using phonetic conversion: %s", e)
        return draft if draft is not None else transliterate(text)

    answer = (answer or "").strip()
    if not answer:
        logger.warning("Corrector returned an empty answer, using phonetic conversion")
        return draft if draft is not None else transliterate(text)
    return answer
