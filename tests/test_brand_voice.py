from hostprompt.errors import UpstreamModelFailure
from hostprompt.extensions import db
from hostprompt.models import Property


def test_analysis_is_stored_on_property(app, client, fake_llm, make_property):
    prop = make_property()
    fake_llm.reply = '{"brandVoice": "Warm + Simple", "brandVoiceSummary": "Welcoming without being over the top"}'

    r = client.post(
        "/api/analyze-brand-voice",
        json={"input": "Our little cottage by the sea.", "inputType": "description", "propertyId": prop.id},
    )
    assert r.status_code == 200
    assert r.get_json() == {"brandVoice": "Warm + Simple", "brandVoiceSummary": "Welcoming without being over the top"}

    assert fake_llm.last["system"] is None
    assert fake_llm.last["json_mode"] is True
    assert '"Our little cottage by the sea."' in fake_llm.last["user"]

    stored = db.session.get(Property, prop.id)
    assert stored.brand_voice == "Warm + Simple"
    assert stored.brand_voice_summary == "Welcoming without being over the top"


def test_captions_prompt_is_used_for_captions(client, fake_llm, make_property):
    prop = make_property()
    fake_llm.reply = '{"brandVoice": "Dad Jokes", "brandVoiceSummary": "Corny but sweet"}'
    client.post(
        "/api/analyze-brand-voice",
        json={"input": "lol the dog ate the pancakes again", "inputType": "captions", "propertyId": prop.id},
    )
    assert "how a REAL PERSON writes on social media" in fake_llm.last["user"]


def test_model_failure_falls_back_and_is_stored(client, fake_llm, make_property):
    prop = make_property()
    fake_llm.error = UpstreamModelFailure("down")

    r = client.post(
        "/api/analyze-brand-voice",
        json={"input": "Cabin in the pines.", "inputType": "description", "propertyId": prop.id},
    )
    assert r.status_code == 200
    assert r.get_json() == {"brandVoice": "Chill Vibes", "brandVoiceSummary": "Just like chatting with a friend"}
    assert db.session.get(Property, prop.id).brand_voice == "Chill Vibes"


def test_malformed_json_falls_back(client, fake_llm, make_property):
    prop = make_property()
    for reply in ("not json at all", '{"brandVoice": "Only One Key"}', "[1, 2]"):
        fake_llm.reply = reply
        r = client.post(
            "/api/analyze-brand-voice",
            json={"input": "Cabin in the pines.", "inputType": "description", "propertyId": prop.id},
        )
        assert r.status_code == 200
        assert r.get_json()["brandVoice"] == "Chill Vibes"


def test_missing_fields_is_400(client, fake_llm, make_property):
    prop = make_property()
    r = client.post("/api/analyze-brand-voice", json={"input": "x", "propertyId": prop.id})
    assert r.status_code == 400
    assert r.get_json() == {"message": "Missing required fields"}
    assert fake_llm.calls == []


def test_unknown_input_type_is_400(client, fake_llm, make_property):
    prop = make_property()
    r = client.post(
        "/api/analyze-brand-voice",
        json={"input": "x", "inputType": "tweets", "propertyId": prop.id},
    )
    assert r.status_code == 400
    assert fake_llm.calls == []


def test_unknown_property_is_404(client, fake_llm):
    r = client.post(
        "/api/analyze-brand-voice",
        json={"input": "x", "inputType": "description", "propertyId": 404},
    )
    assert r.status_code == 404
    assert fake_llm.calls == []
