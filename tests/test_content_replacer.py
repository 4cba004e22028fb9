import logging
from unittest.mock import MagicMock

from content_replacer import ContentReplacer
from slides_requests import ReplaceShapesWithImageRequest, ReplaceTextRequest, build_batch_body

IMAGE_URL = "https://www.googleapis.com/drive/v3/files/img?alt=media&access_token=t"


def _slides(replies=None):
    slides = MagicMock()
    slides.presentations.return_value.batchUpdate.return_value.execute.return_value = {
        "replies": replies if replies is not None else [
            {"replaceAllText": {"occurrencesChanged": 1}},
            {"replaceAllText": {"occurrencesChanged": 2}},
            {"replaceAllShapesWithImage": {"occurrencesChanged": 1}},
        ]
    }
    return slides


def test_batch_has_three_requests_in_fixed_order(deck_config):
    requests = ContentReplacer(_slides(), deck_config).build_requests(IMAGE_URL)

    assert requests == [
        ReplaceTextRequest("{{ product_name }}", "Awesome name"),
        ReplaceTextRequest("{{ product_description }}", "Some description"),
        ReplaceShapesWithImageRequest("{{ image }}", IMAGE_URL),
    ]


def test_replace_content_submits_one_batch(deck_config):
    slides = _slides()

    ContentReplacer(slides, deck_config).replace_content("pres-1", IMAGE_URL)

    batch_update = slides.presentations.return_value.batchUpdate
    batch_update.assert_called_once()
    kwargs = batch_update.call_args.kwargs
    assert kwargs["presentationId"] == "pres-1"
    assert [list(r)[0] for r in kwargs["body"]["requests"]] == [
        "replaceAllText",
        "replaceAllText",
        "replaceAllShapesWithImage",
    ]
    assert kwargs["body"]["requests"][2]["replaceAllShapesWithImage"] == {
        "containsText": {"text": "{{ image }}", "matchCase": True},
        "imageUrl": IMAGE_URL,
        "replaceMethod": "CENTER_INSIDE",
    }


def test_configured_replacements_are_used(deck_config):
    config = deck_config.with_overrides(product_name="Widget", product_description="Does things")

    body = build_batch_body(ContentReplacer(_slides(), config).build_requests(IMAGE_URL))

    assert body["requests"][0]["replaceAllText"] == {
        "containsText": {"text": "{{ product_name }}", "matchCase": True},
        "replaceText": "Widget",
    }
    assert body["requests"][1]["replaceAllText"]["replaceText"] == "Does things"


def test_unmatched_placeholder_is_logged(deck_config, caplog):
    slides = _slides([
        {"replaceAllText": {"occurrencesChanged": 1}},
        {"replaceAllText": {}},
        {"replaceAllShapesWithImage": {"occurrencesChanged": 1}},
    ])

    with caplog.at_level(logging.WARNING, logger="content_replacer"):
        ContentReplacer(slides, deck_config).replace_content("pres-1", IMAGE_URL)

    assert "{{ product_description }} not found" in caplog.text
    assert "{{ product_name }}" not in caplog.text


def test_image_request_centers_inside_placeholder():
    import slides_requests

    request = ReplaceShapesWithImageRequest("{{ image }}", IMAGE_URL)

    assert request.replace_method == slides_requests.REPLACE_METHOD_CENTER_INSIDE
    assert not hasattr(slides_requests, "REPLACE_METHOD_CENTER_CROP")
