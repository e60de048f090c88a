from apps.emotion.engine import normalize


def test_full_result(watson_result):
    emotions, sentiment = normalize(watson_result)
    assert emotions.joy == 0.81
    assert emotions.disgust == 0.01
    assert sentiment.score == 0.92
    assert sentiment.label == "positive"


def test_missing_emotion_defaults_to_zero(watson_result):
    del watson_result["emotion"]
    emotions, sentiment = normalize(watson_result)
    assert emotions.model_dump() == {
        "joy": 0.0, "sadness": 0.0, "anger": 0.0, "fear": 0.0, "disgust": 0.0
    }
    assert sentiment.label == "positive"


def test_missing_sentiment_defaults_to_neutral(watson_result):
    del watson_result["sentiment"]
    emotions, sentiment = normalize(watson_result)
    assert emotions.joy == 0.81
    assert sentiment.score == 0.0
    assert sentiment.label == "neutral"


def test_malformed_result():
    for result in (None, {}, [], {"emotion": "oops", "sentiment": {"document": None}}):
        emotions, sentiment = normalize(result)
        assert emotions.joy == 0.0
        assert sentiment.label == "neutral"


def test_bad_values_are_coerced():
    emotions, sentiment = normalize({
        "emotion": {"document": {"emotion": {"joy": "0.4", "fear": "n/a", "anger": 1.7, "sadness": -0.2}}},
        "sentiment": {"document": {"score": "0.5", "label": "mixed"}},
    })
    assert emotions.joy == 0.4
    assert emotions.fear == 0.0
    assert emotions.anger == 1.0
    assert emotions.sadness == 0.0
    assert sentiment.score == 0.0
    assert sentiment.label == "neutral"
