import re
import requests
from pydantic import ValidationError
from typing import Any, Callable, Dict, List, Optional, Tuple
from yt_captions.core.errors import (
    InvalidVideoUrl,
    IpBlocked,
    NoCaptionsFound,
    TranscriptError,
    VideoInaccessible,
    YouTubeRequestFailed,
    classify_error,
)
from yt_captions.core.playability import assert_playability
from yt_captions.core.tracks import choose_track
from yt_captions.core.url import extract_video_id
from yt_captions.core.video import VideoSource
from yt_captions.models.caption import CaptionHints, CaptionTrack, PlayabilityStatus
from yt_captions.models.transcript import TranscriptResult, TranscriptSegment
from yt_captions.utils.logger import logger
from yt_captions.utils.subtitles import normalize_segments, parse_segments
from yt_captions.config import settings

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
INNERTUBE_API_URL = "https://www.youtube.com/youtubei/v1/player?key={api_key}"
# The client identity decides which caption track fields the player endpoint returns.
INNERTUBE_CONTEXT = {"client": {"clientName": "ANDROID", "clientVersion": "20.10.38"}}
# Only the English page layout is parsed.
ACCEPT_LANGUAGE = "en-US"

CONSENT_MARKER = 'action="https://consent.youtube.com/s"'
CONSENT_TOKEN_PATTERN = re.compile(r'name="v" value="(.*?)"')
API_KEY_PATTERN = re.compile(r'"INNERTUBE_API_KEY":\s*"([a-zA-Z0-9_-]+)"')

def extract_consent_token(html: str) -> Optional[str]:
    m = CONSENT_TOKEN_PATTERN.search(html)
    return m.group(1) if m else None

def extract_innertube_api_key(html: str) -> Optional[str]:
    m = API_KEY_PATTERN.search(html)
    return m.group(1) if m else None

def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}

def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

def _caption_track(raw: Any) -> CaptionTrack:
    # Unreadable entries stay in place as empty tracks so platform indices still line up.
    if not isinstance(raw, dict):
        return CaptionTrack()
    try:
        return CaptionTrack.model_validate(raw)
    except ValidationError:
        return CaptionTrack()

def read_playability(data: Dict[str, Any]) -> Optional[PlayabilityStatus]:
    raw = data.get("playabilityStatus")
    if not isinstance(raw, dict):
        return None
    return PlayabilityStatus.model_validate(raw)

def read_caption_tracks(data: Dict[str, Any]) -> Tuple[List[CaptionTrack], CaptionHints]:
    renderer = _as_dict(_as_dict(data.get("captions")).get("playerCaptionsTracklistRenderer"))

    raw_tracks = renderer.get("captionTracks")
    tracks = [_caption_track(t) for t in raw_tracks] if isinstance(raw_tracks, list) else []

    default_index = None
    audio_tracks = renderer.get("audioTracks")
    if isinstance(audio_tracks, list) and audio_tracks:
        candidate = _as_dict(audio_tracks[0]).get("defaultCaptionTrackIndex")
        if _is_index(candidate):
            default_index = candidate

    raw_indices = renderer.get("defaultTranslationSourceTrackIndices")
    indices = [i for i in raw_indices if _is_index(i)] if isinstance(raw_indices, list) else []

    return tracks, CaptionHints(
        default_caption_track_index=default_index,
        default_translation_source_indices=indices,
    )

class YouTubeProvider(VideoSource):
    def __init__(self, session_factory: Callable[[], requests.Session] = requests.Session, timeout: Optional[float] = None):
        self._session_factory = session_factory
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT

    def get_transcript(self, url: str, preferred_languages: Optional[List[str]] = None) -> TranscriptResult:
        video_id = None
        try:
            video_id = extract_video_id(url)
            if not video_id:
                raise InvalidVideoUrl()
            # One session per call: nothing about a run is shared with concurrent runs.
            with self._session_factory() as session:
                segments, language = self._fetch_segments(session, video_id, preferred_languages)
            logger.info(f"Fetched {len(segments)} segments ({language}) for {video_id}")
            return TranscriptResult(video_id=video_id, language=language, segments=segments)
        except TranscriptError as e:
            record = classify_error(e)
            logger.warning(f"[{record.category.value}] {record.message}")
        except Exception as e:
            record = classify_error(e)
            logger.exception(f"[{record.category.value}] {record.message}")
        return TranscriptResult.failure(record, video_id=video_id)

    def _fetch_segments(self, session: requests.Session, video_id: str, preferred_languages: Optional[List[str]]) -> Tuple[List[TranscriptSegment], str]:
        html = self.fetch_watch_html(session, video_id)
        api_key = extract_innertube_api_key(html)
        if not api_key:
            raise VideoInaccessible("innertube_api_key_not_found")

        data = self.fetch_innertube_player(session, api_key, video_id)
        assert_playability(read_playability(data))

        tracks, hints = read_caption_tracks(data)
        if not tracks:
            raise NoCaptionsFound("no_caption_tracks_found")
        logger.debug(f"Caption tracks: {[(t.language_code, t.kind) for t in tracks]}")

        picked = choose_track(
            tracks,
            preferred_languages,
            hints.default_caption_track_index,
            hints.default_translation_source_indices,
        )
        if not picked:
            raise NoCaptionsFound("no_suitable_track_found")
        logger.info(f"Selected caption track: {picked.language_code} ({picked.kind or 'manual'})")

        xml = self.fetch_caption_xml(session, picked.url)
        segments = normalize_segments(parse_segments(xml))
        if not segments:
            raise NoCaptionsFound("no_segments_after_parsing")
        return segments, picked.language_code

    def fetch_watch_html(self, session: requests.Session, video_id: str) -> str:
        """Load the watch page, passing the cookie-consent wall at most once."""
        url = WATCH_URL.format(video_id=video_id)
        html = self._get_text(session, url)
        if CONSENT_MARKER not in html:
            return html

        logger.info("Consent page served, retrying with CONSENT cookie...")
        token = extract_consent_token(html)
        if token is None:
            raise VideoInaccessible("consent_cookie_create_failed")
        html = self._get_text(session, url, headers={"Cookie": f"CONSENT=YES+{token}"})
        if CONSENT_MARKER in html:
            raise VideoInaccessible("consent_cookie_invalid")
        return html

    def fetch_innertube_player(self, session: requests.Session, api_key: str, video_id: str) -> Dict[str, Any]:
        response = self._request(
            session,
            "POST",
            INNERTUBE_API_URL.format(api_key=api_key),
            headers={"Content-Type": "application/json"},
            json={"context": INNERTUBE_CONTEXT, "videoId": video_id},
        )
        if response.status_code == 429:
            raise IpBlocked()
        data = self._raise_http_errors(response).json()
        if not isinstance(data, dict):
            raise ValueError("invalid_player_response")
        return data

    def fetch_caption_xml(self, session: requests.Session, url: str) -> str:
        return self._get_text(session, url)

    def _get_text(self, session: requests.Session, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        return self._raise_http_errors(self._request(session, "GET", url, headers=headers)).text

    def _request(self, session: requests.Session, method: str, url: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> requests.Response:
        request_headers = {"Accept-Language": ACCEPT_LANGUAGE, "User-Agent": settings.USER_AGENT}
        request_headers.update(headers or {})
        try:
            return session.request(method, url, headers=request_headers, timeout=self.timeout, **kwargs)
        except requests.Timeout as e:
            raise YouTubeRequestFailed("request_timeout") from e
        except requests.ConnectionError as e:
            raise YouTubeRequestFailed("connection_error") from e
        except requests.RequestException as e:
            raise YouTubeRequestFailed("request_error") from e

    @staticmethod
    def _raise_http_errors(response: requests.Response) -> requests.Response:
        if not 200 <= response.status_code < 300:
            raise YouTubeRequestFailed.from_status(response.status_code)
        return response
