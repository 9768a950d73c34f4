"""Prompt and message assembly helpers.

This module only builds strings. Validation, model invocation and transport
happen elsewhere.

Design constraints:
    - Deterministic construction for identical inputs.
    - No I/O and no global state mutation.

Prompt safety model:
    - Safety is instruction-led: the persona prompt forbids explicit, unethical
      or illegal content.
    - User text is interpolated as a raw string into model prompts.
    - Feedback text is HTML-escaped because the messaging bot parses HTML.
"""

import html
from typing import Optional


# =========================================================
# SYSTEM IDENTITY
# =========================================================
# Always placed before the user question in chat prompts.

SYSTEM_IDENTITY = (
    "Kamu adalah SatriaCb, asisten AI yang tegas, jujur, cepat, dan ahli di "
    "coding, algoritma, matematika, serta desain. Berikan jawaban yang jelas, "
    "lengkap, dan (jika perlu) contoh kode. Jangan gunakan bahasa eksplisit, "
    "tidak etis, atau instruksi yang mendorong kegiatan ilegal."
)


def build_chat_prompt(message: str) -> str:
    """Build the chat prompt: persona first, then the user question.

    Args:
        message: Raw user message, already checked to be non-empty.

    Returns:
        Fully assembled prompt string.
    """
    return f"{SYSTEM_IDENTITY}\n\nPertanyaan pengguna: {message}"


# =========================================================
# IMAGE GENERATION
# =========================================================

def build_image_prompt(prompt: str) -> str:
    return f"Generate an image for the following prompt (return base64 PNG): {prompt}"


# =========================================================
# IMAGE ANALYSIS
# =========================================================
# Sent together with the uploaded image as an inline part.

ANALYSIS_PROMPT = (
    "Analisis gambar ini. Beri deskripsi singkat dari isi gambar, objek penting, "
    "warna dominan, dan kemungkinan konteks penggunaan. Hati-hati terhadap "
    "privasi dan jangan berasumsi detail sensitif."
)


# =========================================================
# FEEDBACK
# =========================================================

ANONYMOUS_NAME = "Tidak disebutkan"


def build_feedback_text(name: Optional[str], message: str) -> str:
    """Format a feedback message for the messaging bot.

    Edge cases:
        - Missing or blank `name` becomes `ANONYMOUS_NAME`.
        - Both fields are HTML-escaped since the bot uses `parse_mode=HTML`.
    """
    display_name = (name or "").strip() or ANONYMOUS_NAME
    return (
        f"Nama: {html.escape(display_name)}\n"
        f"Feedback dari web SatriaCb:\n"
        f"{html.escape(message)}"
    )
