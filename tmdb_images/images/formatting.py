from __future__ import annotations

from tmdb_images.images.grouping import BACKDROP_LANGUAGES, POSTER_LANGUAGES
from tmdb_images.models.images import NO_LANGUAGE_KEY, GroupedImages, SelectedEntity

BACKDROP_TITLES = {
    "en": "🇺🇸 English Landscape",
    "hi": "🇮🇳 Hindi Landscape",
    NO_LANGUAGE_KEY: "🌐 Clean Landscape",
}

POSTER_TITLES = {
    "en": "🇺🇸 English Posters",
    "hi": "🇮🇳 Hindi Posters",
    "ta": "🇮🇳 Tamil Posters",
    "te": "🇮🇳 Telugu Posters",
    "ja": "🇯🇵 Japanese Posters",
    "ko": "🇰🇷 Korean Posters",
}

LOGOS_TITLE = "🎯 Logos (All Languages)"
SKIPPED_TITLE = "⚠️ Skipped:"


def _logo_label(lang: str) -> str:
    if lang == NO_LANGUAGE_KEY:
        return "🌐 No Language"
    return f"🌐 {lang.upper()}"


def _section(title: str, urls: list[str]) -> list[str]:
    lines = [title]
    lines.extend(f"{i}. {url}" for i, url in enumerate(urls, start=1))
    lines.append("")
    return lines


def format_results(
    entity: SelectedEntity,
    backdrops: GroupedImages,
    posters: GroupedImages,
    logos: GroupedImages,
    skipped: list[str],
) -> str:
    """
    Render the human-readable report.

    Sections appear only for non-empty buckets: backdrops (en, hi, null), posters (en, hi, ta, te, ja, ko),
    then logos in first-seen language order, then the skipped list.
    """

    lines = [f"🎬 Results for {entity.title} ({entity.media_type.upper()})", ""]

    for lang in BACKDROP_LANGUAGES:
        urls = backdrops.get(lang) or []
        if urls:
            lines.extend(_section(BACKDROP_TITLES[lang], urls))

    for lang in POSTER_LANGUAGES:
        urls = posters.get(lang) or []
        if urls:
            lines.extend(_section(POSTER_TITLES[lang], urls))

    if logos:
        lines.append(LOGOS_TITLE)
        for lang, urls in logos.items():
            lines.extend(_section(_logo_label(lang), urls))

    if skipped:
        lines.append(SKIPPED_TITLE)
        lines.extend(f"- {entry}" for entry in skipped)
        lines.append("")

    return "\n".join(lines) + "\n"
