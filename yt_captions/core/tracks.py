from typing import Iterable, List, Optional, Sequence
from yt_captions.models.caption import CaptionTrack, SelectedTrack

SRV3_SUFFIX = "&fmt=srv3"

def _select(track: CaptionTrack) -> SelectedTrack:
    # srv3 is not parseable here; without it the platform serves plain timedtext XML.
    return SelectedTrack(
        url=track.base_url.replace(SRV3_SUFFIX, ""),
        language_code=track.language_code,
        kind=track.kind,
    )

def _matches(track: CaptionTrack, lang: str) -> bool:
    code = track.language_code or ""
    return code == lang or code.lower().startswith(lang)

def _scan(tracks: List[CaptionTrack], prefs: List[str]) -> Optional[CaptionTrack]:
    for lang in prefs:
        for track in tracks:
            if _matches(track, lang):
                return track
    return None

def _usable(tracks: Sequence[CaptionTrack], index) -> Optional[CaptionTrack]:
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    if 0 <= index < len(tracks) and tracks[index].base_url:
        return tracks[index]
    return None

def choose_track(
    tracks: Sequence[CaptionTrack],
    preferred_languages: Optional[Iterable[str]] = None,
    default_caption_track_index: Optional[int] = None,
    default_translation_source_indices: Optional[Iterable[int]] = None,
) -> Optional[SelectedTrack]:
    """Pick the caption track to download.

    Preferred languages are tried against manual tracks first and only then
    against auto-generated ones. Without a preference hit, the platform's own
    default hints are used, then the first manual track, then the first asr
    track. Returns None when nothing has a usable URL.
    """
    manual = [t for t in tracks if not t.is_asr and t.base_url]
    asr = [t for t in tracks if t.is_asr and t.base_url]
    prefs = [lang.strip().lower() for lang in preferred_languages or [] if lang and lang.strip()]

    direct = _scan(manual, prefs) or _scan(asr, prefs)
    if direct:
        return _select(direct)

    default = _usable(tracks, default_caption_track_index)
    if default:
        return _select(default)

    for index in default_translation_source_indices or []:
        source = _usable(tracks, index)
        if source:
            return _select(source)

    if manual:
        return _select(manual[0])
    if asr:
        return _select(asr[0])
    return None
