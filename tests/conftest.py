from __future__ import annotations

import copy

import pytest

STORY = {
    "sophoraId": "wirtschaft-inflation-100",
    "externalId": "tagesschau_fm-story-wirtschaft_123",
    "title": "Inflation sinkt im Januar",
    "topline": "Verbraucherpreise",
    "date": "2024-01-20T14:52:03.304+01:00",
    "firstSentence": "Die Teuerung in Deutschland hat sich abgeschwächt.",
    "detailsweb": "https://www.tagesschau.de/wirtschaft/inflation-100.html",
    "details": "https://www.tagesschau.de/api2u/wirtschaft/inflation-100.json",
    "tags": [{"tag": "Inflation"}, {"tag": "Verbraucherpreise"}],
    "ressort": "wirtschaft",
    "type": "story",
    "breakingNews": False,
    "shareURL": "https://www.tagesschau.de/wirtschaft/inflation-100.html",
    "teaserImage": {
        "title": "Einkaufswagen",
        "copyright": "picture alliance",
        "alttext": "Ein Einkaufswagen im Supermarkt",
        "imageVariants": {"16x9-256": "https://images.tagesschau.de/image/1.jpg"},
        "type": "image",
    },
}

VIDEO = {
    "sophoraId": "video-1302",
    "title": "tagesschau 20:00 Uhr",
    "date": "2024-01-20T19:15:00.000Z",
    "streams": {
        "h264s": "https://media.tagesschau.de/video/1302/h264s.mp4",
        "adaptivestreaming": "https://media.tagesschau.de/video/1302/master.m3u8",
    },
    "tags": [],
    "type": "video",
    "breakingNews": False,
}

WEBVIEW = {
    "sophoraId": "wahlen-2024-100",
    "title": "Alle Ergebnisse im Überblick",
    "date": "2024-01-20T12:00:00.000+01:00",
    "type": "webview",
}


@pytest.fixture
def story() -> dict:
    return copy.deepcopy(STORY)


@pytest.fixture
def video() -> dict:
    return copy.deepcopy(VIDEO)


@pytest.fixture
def webview() -> dict:
    return copy.deepcopy(WEBVIEW)
