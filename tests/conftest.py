import pytest

from mydict.utils import AppConfig


ENGLISH_PAYLOAD = {
    "word_name": "test",
    "is_CRI": 1,
    "exchange": {
        "word_pl": ["tests"],
        "word_past": ["tested"],
        "word_done": ["tested"],
        "word_ing": ["testing"],
        "word_third": ["tests"],
        "word_er": "",
        "word_est": "",
    },
    "symbols": [
        {
            "ph_en": "test",
            "ph_am": "tɛst",
            "ph_other": "",
            "ph_en_mp3": "http://res.iciba.com/resource/amp3/oxford/0/a0/test.mp3",
            "ph_am_mp3": "http://res.iciba.com/resource/amp3/1/0/09/8f/098f6bcd.mp3",
            "ph_tts_mp3": "",
            "parts": [
                {"part": "n.", "means": ["测验", "考验"]},
                {"part": "vt.", "means": ["试验", "测试"]},
            ],
        }
    ],
    "items": [""],
}

CHINESE_PAYLOAD = {
    "word_name": "测试",
    "symbols": [
        {
            "word_symbol": "cè shì",
            "symbol_mp3": "http://res-tts.iciba.com/c/e/4/ce4shi4.mp3",
            "parts": [
                {
                    "part_name": "",
                    "means": [
                        {"word_mean": "test", "has_mean": "1", "split": 1},
                        {"word_mean": "measurement", "has_mean": "", "split": 0},
                    ],
                }
            ],
        }
    ],
}


class FakeResponse:
    def __init__(self, payload=None, status_error=None, json_error=None):
        self.payload = payload
        self.status_error = status_error
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_error is not None:
            raise self.status_error

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def config():
    return AppConfig(api_key="secret-key", api_url="http://dict.example/api", color=False)


@pytest.fixture
def english_payload():
    return ENGLISH_PAYLOAD


@pytest.fixture
def chinese_payload():
    return CHINESE_PAYLOAD
