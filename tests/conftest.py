import sys
import os
from unittest.mock import MagicMock

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


class FakeResponse:
    def __init__(self, status_code=200, text="", json_data=None):
        self.status_code = status_code
        self.text = text
        self._json = json_data

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json


def make_session(*responses):
    """A requests.Session stand-in that answers request() calls in order."""
    session = MagicMock()
    session.__enter__.return_value = session
    session.request.side_effect = list(responses)
    return session


WATCH_HTML = '<html><script>ytcfg.set({"INNERTUBE_API_KEY": "AIzaTestKey_123"});</script></html>'
CONSENT_HTML = '<form action="https://consent.youtube.com/s"><input type="hidden" name="v" value="cb.20240101-00-p0"></form>'
CAPTION_XML = (
    '<?xml version="1.0" encoding="utf-8" ?><transcript>'
    '<text start="3.2" dur="1.5">second</text>'
    '<text start="0.5" dur="2.0">Hi &amp; bye</text>'
    '<text start="0.5" dur="2.0">Hi &amp; bye</text>'
    '</transcript>'
)


def player_response(tracks=None, status="OK", reason=None, **renderer_extra):
    playability = {"status": status}
    if reason is not None:
        playability["reason"] = reason
    data = {"playabilityStatus": playability}
    if tracks is not None:
        renderer = {"captionTracks": tracks}
        renderer.update(renderer_extra)
        data["captions"] = {"playerCaptionsTracklistRenderer": renderer}
    return data
